"""Fatal probe errors. Each one carries the state the plugin exits with."""

from .severity import Severity


class ProbeError(Exception):
    """Base exception for check_aacraid aborts."""

    severity = Severity.UNKNOWN


class ConfigError(ProbeError):
    """Replay file is missing, unreadable or empty."""

    severity = Severity.WARNING


class ExecutionError(ProbeError):
    """arcconf failed to run or returned no output."""

    severity = Severity.CRITICAL


class ParseError(ProbeError):
    """arcconf output is not in a recognized format."""

    severity = Severity.CRITICAL


class ConcurrencyGuardError(ProbeError):
    """Another arcconf process is already running."""

    severity = Severity.UNKNOWN
