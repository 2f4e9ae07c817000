"""Utilities for Fault Demo."""

from .formatters import fault_message, format_duration, truncate
from .records import (
    SAMPLE_RECORDS,
    encode_record,
    read_all_records,
    read_record,
    write_records,
)
from .workspace import Workspace

__all__ = [
    # Formatting
    "fault_message",
    "format_duration",
    "truncate",
    # Record codec
    "SAMPLE_RECORDS",
    "encode_record",
    "read_record",
    "read_all_records",
    "write_records",
    # Workspace
    "Workspace",
]
