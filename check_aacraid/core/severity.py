"""Nagios plugin states, ordered from best to worst."""

from enum import IntEnum


class Severity(IntEnum):
    """Plugin result; the integer value is the process exit code."""
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3
