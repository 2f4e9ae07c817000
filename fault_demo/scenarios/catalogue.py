"""
Default scenario catalogue.

Environment scenarios first, then runtime scenarios, each registered with
the fault clauses it is expected to trip.
"""

from typing import Optional

from ..config import Settings
from ..runner import Catalogue
from ..utils.workspace import Workspace
from . import environment, runtime
from .base import FaultKind, ScenarioCategory

ENVIRONMENT = ScenarioCategory.ENVIRONMENT
RUNTIME = ScenarioCategory.RUNTIME


def build_catalogue(
    workspace: Workspace,
    settings: Optional[Settings] = None,
) -> Catalogue:
    """
    Build the full fault catalogue.

    Paths are resolved from the workspace when each action runs, so the
    workspace only has to be prepared before the runner starts.
    """
    settings = settings or Settings()
    catalogue = Catalogue()

    catalogue.register(
        "read-missing-file",
        lambda: environment.read_missing_file(workspace.missing_path),
        category=ENVIRONMENT,
        description="Read the first line of a file that does not exist",
        faults=((FileNotFoundError, FaultKind.RESOURCE_NOT_FOUND),),
    )
    catalogue.register(
        "open-missing-file",
        lambda: environment.open_missing_file(workspace.missing_path),
        category=ENVIRONMENT,
        description="Open a file that does not exist, without reading it",
        faults=((FileNotFoundError, FaultKind.RESOURCE_NOT_FOUND),),
    )
    catalogue.register(
        "read-past-end",
        lambda: environment.read_past_end(workspace.records_path),
        category=ENVIRONMENT,
        description="Read records from the record file until it runs out",
        faults=(
            (EOFError, FaultKind.END_OF_STREAM),
            (FileNotFoundError, FaultKind.RESOURCE_NOT_FOUND),
        ),
    )
    catalogue.register(
        "connect-unreachable-database",
        lambda: environment.connect_database(
            settings.DATABASE_URL, settings.DB_CONNECT_TIMEOUT,
        ),
        category=ENVIRONMENT,
        description="Connect to a database endpoint that does not accept connections",
        faults=(((ConnectionError, TimeoutError), FaultKind.CONNECTION_FAILURE),),
    )
    catalogue.register(
        "load-unknown-type",
        lambda: environment.load_type(settings.UNKNOWN_TYPE),
        category=ENVIRONMENT,
        description="Resolve a class by a name nothing defines",
        faults=((ImportError, FaultKind.LOOKUP_FAILURE),),
    )

    catalogue.register(
        "divide-by-zero",
        lambda: runtime.divide(10, 0),
        description="Integer division by zero",
        faults=((ZeroDivisionError, FaultKind.INVALID_ARITHMETIC),),
    )
    catalogue.register(
        "dereference-absent-value",
        lambda: runtime.shout(None),
        description="Call a method on None",
        faults=((AttributeError, FaultKind.NULL_REFERENCE),),
    )
    catalogue.register(
        "index-out-of-range",
        lambda: runtime.element_at([1, 2, 3], 5),
        description="Index a 3-element list at 5",
        faults=((IndexError, FaultKind.BOUNDS_VIOLATION),),
    )
    catalogue.register(
        "invalid-type-cast",
        lambda: runtime.as_integer("String"),
        description="Use a str where an int is required",
        faults=((TypeError, FaultKind.TYPE_MISMATCH),),
    )
    catalogue.register(
        "invalid-argument",
        lambda: runtime.pause(-1),
        description="Sleep for a negative duration",
        faults=((ValueError, FaultKind.INVALID_ARGUMENT),),
    )
    catalogue.register(
        "malformed-numeric-parse",
        lambda: runtime.parse_int("invalid"),
        description='Parse "invalid" as an integer',
        faults=((ValueError, FaultKind.PARSE_FAILURE),),
    )

    return catalogue
