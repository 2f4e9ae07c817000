"""
Runtime Scenarios

Faults raised by the program itself, independent of any outside state.
"""

import operator
import time
from typing import Any, Optional, Sequence


def divide(dividend: int, divisor: int) -> int:
    return dividend // divisor


def shout(value: Optional[str]) -> str:
    """Upper-case a value that may be absent. None raises AttributeError."""
    return value.upper()


def element_at(items: Sequence[Any], index: int) -> Any:
    return items[index]


def as_integer(value: Any) -> int:
    """Convert value to int without coercion; a str raises TypeError."""
    return operator.index(value)


def pause(seconds: float):
    time.sleep(seconds)


def parse_int(text: str) -> int:
    return int(text)
