"""
Shared utility functions.

This package contains logging setup and the date/text helpers used by
listing views and the CLI.
"""

from .formatting import format_date, format_relative_time, parse_iso8601, truncate
from .logging import JsonlFormatter, log_event, setup_logging

__all__ = [
    "setup_logging",
    "log_event",
    "JsonlFormatter",
    "parse_iso8601",
    "format_date",
    "format_relative_time",
    "truncate",
]
