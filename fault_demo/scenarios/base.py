"""
Base Scenario Types for Fault Demo.

Provides the data model shared by the catalogue and the runner:
- FaultKind, the tagged variant an Outcome carries
- Scenario, a named zero-argument action plus its fault clauses
- Outcome, the recorded result of one scenario run
- classify_fault, the boundary policy mapping an exception to a FaultKind
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Tuple, Type, Union


class FaultKind(Enum):
    """Kind of fault observed at a scenario boundary."""
    RESOURCE_NOT_FOUND = "resource-not-found"
    END_OF_STREAM = "end-of-stream"
    CONNECTION_FAILURE = "connection-failure"
    LOOKUP_FAILURE = "lookup-failure"
    INVALID_ARITHMETIC = "invalid-arithmetic-operation"
    NULL_REFERENCE = "null-reference"
    BOUNDS_VIOLATION = "bounds-violation"
    TYPE_MISMATCH = "type-mismatch"
    INVALID_ARGUMENT = "invalid-argument"
    PARSE_FAILURE = "parse-failure"
    UNEXPECTED = "unexpected"


class ScenarioCategory(Enum):
    """Whether a scenario depends on outside state or only on the program."""
    ENVIRONMENT = "environment"
    RUNTIME = "runtime"


ExceptionTypes = Union[Type[BaseException], Tuple[Type[BaseException], ...]]
FaultClause = Tuple[ExceptionTypes, FaultKind]

# First matching clause wins, so subclasses go before their bases.
DEFAULT_FAULTS: Tuple[FaultClause, ...] = (
    (EOFError, FaultKind.END_OF_STREAM),
    (FileNotFoundError, FaultKind.RESOURCE_NOT_FOUND),
    ((ConnectionError, TimeoutError), FaultKind.CONNECTION_FAILURE),
    (ImportError, FaultKind.LOOKUP_FAILURE),
    (ZeroDivisionError, FaultKind.INVALID_ARITHMETIC),
    (IndexError, FaultKind.BOUNDS_VIOLATION),
    (TypeError, FaultKind.TYPE_MISMATCH),
    (ValueError, FaultKind.INVALID_ARGUMENT),
)


def classify_fault(
    exc: BaseException,
    faults: Tuple[FaultClause, ...] = DEFAULT_FAULTS,
) -> FaultKind:
    """
    Map an exception to the FaultKind of the first clause it matches.

    Returns:
        FaultKind.UNEXPECTED if no clause matches
    """
    for exc_types, kind in faults:
        if isinstance(exc, exc_types):
            return kind
    return FaultKind.UNEXPECTED


@dataclass(frozen=True)
class Scenario:
    """
    A named, self-contained demonstration of one fault-triggering action.

    Example:
        Scenario(
            name="divide-by-zero",
            action=lambda: 10 // 0,
            faults=((ZeroDivisionError, FaultKind.INVALID_ARITHMETIC),),
        )
    """
    name: str
    action: Callable[[], object] = field(compare=False)
    category: ScenarioCategory = ScenarioCategory.RUNTIME
    description: str = ""
    faults: Tuple[FaultClause, ...] = DEFAULT_FAULTS

    def classify(self, exc: BaseException) -> FaultKind:
        return classify_fault(exc, self.faults)


@dataclass(frozen=True)
class Outcome:
    """Result of running one scenario. kind is None when no fault was observed."""
    scenario: str
    kind: Optional[FaultKind] = None
    message: str = ""
    duration_ms: float = field(default=0.0, compare=False)

    @property
    def faulted(self) -> bool:
        return self.kind is not None

    @classmethod
    def completed(cls, scenario: str, duration_ms: float = 0.0) -> "Outcome":
        return cls(scenario=scenario, duration_ms=duration_ms)
