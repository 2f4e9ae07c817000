"""
Fault scenarios.

base        - FaultKind, Scenario, Outcome and the fault clause policy
environment - faults caused by outside state (files, database, imports)
runtime     - faults raised by the program itself
catalogue   - build_catalogue(), the default ordered catalogue
"""

from .base import (
    DEFAULT_FAULTS,
    FaultKind,
    Outcome,
    Scenario,
    ScenarioCategory,
    classify_fault,
)

__all__ = [
    "DEFAULT_FAULTS",
    "FaultKind",
    "Outcome",
    "Scenario",
    "ScenarioCategory",
    "classify_fault",
]
