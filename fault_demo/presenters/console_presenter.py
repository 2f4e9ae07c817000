"""
Console Presenter for Fault Demo Output.

Uses the Rich library for terminal output. Scenario outcomes go to stdout,
one line each; diagnostics go to stderr.
"""

from typing import Dict, Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..scenarios.base import Outcome, Scenario
from ..utils.formatters import format_duration, truncate


class ConsolePresenter:
    """
    Rich terminal output presenter.

    Features:
    - One plain line per scenario outcome
    - Catalogue listing as a table
    - Summary panel with per-kind counts
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        show_timing: bool = False,
    ):
        """
        Initialize the presenter.

        Args:
            console: Console for scenario output (stdout by default)
            error_console: Console for diagnostics (stderr by default)
            show_timing: If True, append each scenario's duration
        """
        # soft_wrap keeps long fault messages on one line
        self.console = console or Console(highlight=False, emoji=False, soft_wrap=True)
        self.error_console = error_console or Console(stderr=True, highlight=False, emoji=False)
        self.show_timing = show_timing

    # -------------------------------------------------------------------------
    # Outcomes
    # -------------------------------------------------------------------------

    def format_outcome(self, outcome: Outcome) -> str:
        """Plain-text line for an outcome."""
        if outcome.faulted:
            return f"{outcome.scenario} occurred: {outcome.message}"
        return f"{outcome.scenario}: completed"

    def show_outcome(self, outcome: Outcome):
        """Show one scenario outcome on a single line."""
        line = escape(self.format_outcome(outcome))
        style = "yellow" if outcome.faulted else "green"
        if self.show_timing:
            line += f" [dim]({format_duration(outcome.duration_ms)})[/]"
        self.console.print(f"[{style}]{line}[/]")

    # -------------------------------------------------------------------------
    # Catalogue
    # -------------------------------------------------------------------------

    def show_catalogue(self, scenarios: Iterable[Scenario]):
        """Show the catalogue in registration order."""
        scenarios = list(scenarios)
        if not scenarios:
            self.console.print("[dim]No scenarios found.[/]")
            return

        table = Table(title="Fault Scenarios", show_header=True)
        table.add_column("#", justify="right")
        table.add_column("Scenario", style="cyan", no_wrap=True)
        table.add_column("Category", no_wrap=True)
        table.add_column("Description")

        for position, scenario in enumerate(scenarios, start=1):
            table.add_row(
                str(position),
                escape(scenario.name),
                scenario.category.value,
                escape(truncate(scenario.description)),
            )

        self.console.print(table)

    # -------------------------------------------------------------------------
    # Summary
    # -------------------------------------------------------------------------

    def show_summary(self, summary: Dict):
        """Show the runner summary in a panel."""
        text = f"[yellow]Faulted:   {summary['faulted']}[/]\n"
        text += f"[green]Completed: {summary['completed']}[/]\n"

        by_kind = summary.get("by_kind") or {}
        if by_kind:
            text += "\n"
            for kind, count in sorted(by_kind.items()):
                text += f"  {kind}: {count}\n"

        text += f"\n[dim]Total time: {format_duration(summary['duration_ms'])}[/]"

        self.console.print(Panel(
            text,
            title=f"[bold]{summary['total']} scenarios[/]",
            border_style="cyan",
            padding=(1, 2),
        ))

    # -------------------------------------------------------------------------
    # Messages
    # -------------------------------------------------------------------------

    def show_error(self, message: str):
        """Show error message."""
        self.error_console.print(f"[red]{escape(message)}[/]")
