"""
CLI Entry Point for Fault Demo.

With no arguments, runs the whole catalogue and exits 0 however many
scenarios faulted.
"""

import logging
import sys
from typing import Optional, Tuple

import click

from . import __version__
from .config import Settings
from .exceptions import ConfigurationError
from .logging_config import setup_logging
from .presenters import ConsolePresenter
from .runner import FaultRunner
from .scenarios.catalogue import build_catalogue
from .utils.workspace import Workspace

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--scenario", "-s", "scenarios",
    multiple=True,
    help="Run only this scenario (repeatable), e.g. -s divide-by-zero",
)
@click.option(
    "--category", "-c",
    type=click.Choice(["environment", "runtime", "all"]),
    default="all",
    show_default=True,
    help="Run only scenarios in this category",
)
@click.option("--list", "list_only", is_flag=True, help="List scenarios and exit")
@click.option("--summary", is_flag=True, help="Show a summary panel after the run")
@click.option("--timing", is_flag=True, help="Show each scenario's duration")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging to stderr")
def cli(
    scenarios: Tuple[str, ...],
    category: str,
    list_only: bool,
    summary: bool,
    timing: bool,
    verbose: bool,
):
    """Run the fault demonstration catalogue."""
    presenter = ConsolePresenter(show_timing=timing)

    try:
        settings = Settings.load_from_env()
    except ConfigurationError as e:
        presenter.show_error(e.message)
        sys.exit(1)

    setup_logging("DEBUG" if verbose else settings.LOG_LEVEL, settings.LOG_FILE)

    workspace = Workspace(
        root=settings.WORK_DIR,
        missing_file=settings.MISSING_FILE,
        records_file=settings.RECORDS_FILE,
    )
    catalogue = build_catalogue(workspace, settings)

    unknown = sorted(set(scenarios) - set(catalogue.names()))
    if unknown:
        raise click.BadParameter(
            f"unknown scenario(s): {', '.join(unknown)}", param_hint="'--scenario'",
        )

    selected = catalogue.filter(
        names=scenarios or None,
        category=None if category == "all" else category,
    )

    if list_only:
        presenter.show_catalogue(selected)
        return

    logger.info("Selected %d of %d scenarios", len(selected), len(catalogue))

    with FaultRunner(selected, presenter=presenter, workspace=workspace) as runner:
        runner.run_all()
        if summary:
            runner.show_summary()


def main(args: Optional[list] = None):
    """Main entry point."""
    cli(args=args)


if __name__ == "__main__":
    main()
