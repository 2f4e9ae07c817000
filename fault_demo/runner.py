"""
Fault Runner - Orchestrates scenario execution.

Provides the ordered scenario catalogue and a runner that executes each
scenario under its own fault boundary, with workspace setup/teardown and
result aggregation.
"""

import logging
import time
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .exceptions import InvalidScenarioError
from .presenters import ConsolePresenter
from .scenarios.base import (
    DEFAULT_FAULTS,
    FaultClause,
    FaultKind,
    Outcome,
    Scenario,
    ScenarioCategory,
)
from .utils.formatters import fault_message
from .utils.workspace import Workspace

logger = logging.getLogger(__name__)


class Catalogue:
    """Ordered catalogue of scenarios. Registration order is run order."""

    def __init__(self, scenarios: Iterable[Scenario] = ()):
        self._scenarios: List[Scenario] = list(scenarios)

    def register(
        self,
        name: str,
        action: Callable[[], object],
        *,
        category: Union[ScenarioCategory, str] = ScenarioCategory.RUNTIME,
        description: str = "",
        faults: Optional[Tuple[FaultClause, ...]] = None,
    ) -> Scenario:
        """
        Add a scenario to the end of the catalogue.

        Duplicate names are allowed and run independently.

        Raises:
            InvalidScenarioError: If name is empty or blank, or action is not callable
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidScenarioError()
        if not callable(action):
            raise InvalidScenarioError(f"Action for scenario {name!r} is not callable.")

        scenario = Scenario(
            name=name,
            action=action,
            category=ScenarioCategory(category),
            description=description,
            faults=faults if faults is not None else DEFAULT_FAULTS,
        )
        self._scenarios.append(scenario)
        return scenario

    def filter(
        self,
        names: Optional[Iterable[str]] = None,
        category: Optional[Union[ScenarioCategory, str]] = None,
    ) -> "Catalogue":
        """Return a new catalogue restricted to names and/or category, keeping order."""
        wanted = set(names) if names is not None else None
        cat = ScenarioCategory(category) if category else None
        return Catalogue(
            s for s in self._scenarios
            if (wanted is None or s.name in wanted) and (cat is None or s.category == cat)
        )

    def names(self) -> List[str]:
        return [s.name for s in self._scenarios]

    def __iter__(self) -> Iterator[Scenario]:
        return iter(self._scenarios)

    def __len__(self) -> int:
        return len(self._scenarios)


class FaultRunner:
    """
    Runs every scenario of a catalogue in order, each inside its own fault
    boundary.

    Features:
    - Per-scenario fault containment: one scenario's fault never stops the next
    - Workspace preparation for the file-based scenarios
    - Result aggregation and reporting

    Example:
        catalogue = Catalogue()
        catalogue.register("divide-by-zero", lambda: 10 // 0)
        with FaultRunner(catalogue) as runner:
            outcomes = runner.run_all()
    """

    def __init__(
        self,
        catalogue: Iterable[Scenario],
        presenter: Optional[ConsolePresenter] = None,
        workspace: Optional[Workspace] = None,
    ):
        self.scenarios: Tuple[Scenario, ...] = tuple(catalogue)
        self.presenter = presenter or ConsolePresenter()
        self.workspace = workspace

        self._results: List[Outcome] = []

    def __enter__(self) -> "FaultRunner":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cleanup()

    def setup(self):
        """Prepare the workspace, if any, before scenarios run."""
        if self.workspace is not None:
            root = self.workspace.prepare()
            logger.info("Workspace ready at %s", root)

    def run_scenario(self, scenario: Scenario) -> Outcome:
        """
        Run a single scenario inside its fault boundary.

        Any Exception the action raises is classified with the scenario's
        fault clauses and recorded; nothing propagates.

        Returns:
            Outcome with fault kind and message, or a completed Outcome
        """
        start = time.perf_counter()

        try:
            scenario.action()
        except Exception as e:
            duration = (time.perf_counter() - start) * 1000
            kind = scenario.classify(e)
            if kind is FaultKind.UNEXPECTED:
                logger.warning(
                    "Scenario %s raised an unclassified %s", scenario.name, type(e).__name__,
                    exc_info=True,
                )
            else:
                logger.debug("Scenario %s: %s (%s)", scenario.name, kind.value, type(e).__name__)
            outcome = Outcome(
                scenario=scenario.name,
                kind=kind,
                message=fault_message(e),
                duration_ms=duration,
            )
        else:
            duration = (time.perf_counter() - start) * 1000
            logger.debug("Scenario %s completed without fault", scenario.name)
            outcome = Outcome.completed(scenario.name, duration_ms=duration)

        self._results.append(outcome)
        self.presenter.show_outcome(outcome)

        return outcome

    def run_all(self) -> List[Outcome]:
        """
        Run all scenarios in registration order.

        Returns:
            One Outcome per scenario, in registration order
        """
        logger.info("Running %d scenarios", len(self.scenarios))

        outcomes = []
        for scenario in self.scenarios:
            outcomes.append(self.run_scenario(scenario))

        return outcomes

    def get_results(self) -> List[Outcome]:
        """Get all outcomes recorded by this runner, across runs."""
        return self._results

    def get_summary(self) -> Dict:
        """Get summary statistics from recorded outcomes."""
        by_kind: Dict[str, int] = {}
        for outcome in self._results:
            if outcome.kind is not None:
                by_kind[outcome.kind.value] = by_kind.get(outcome.kind.value, 0) + 1

        faulted = sum(by_kind.values())
        return {
            "total": len(self._results),
            "faulted": faulted,
            "completed": len(self._results) - faulted,
            "by_kind": by_kind,
            "duration_ms": sum(o.duration_ms for o in self._results),
        }

    def show_summary(self):
        """Display summary to presenter."""
        self.presenter.show_summary(self.get_summary())

    def cleanup(self):
        """Release the workspace."""
        if self.workspace is not None:
            self.workspace.release()
