"""
Fault Demo
==========

A catalogue of isolated fault demonstrations. Each scenario triggers one
runtime fault, and the runner contains it at the scenario boundary and
reports it.

Usage:
    python -m fault_demo
    python -m fault_demo --scenario divide-by-zero
    python -m fault_demo --list
"""

__version__ = "1.0.0"

from .runner import Catalogue, FaultRunner
from .scenarios.base import FaultKind, Outcome, Scenario, ScenarioCategory

__all__ = ["Catalogue", "FaultRunner", "FaultKind", "Outcome", "Scenario", "ScenarioCategory"]
