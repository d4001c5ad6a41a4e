"""Core probe package initialization.

HealthProbe is imported from core.probe directly.
"""

from .config import ProbeConfig
from .errors import ProbeError, ConfigError, ExecutionError, ParseError, ConcurrencyGuardError
from .severity import Severity

__all__ = ['ProbeConfig', 'Severity', 'ProbeError', 'ConfigError',
           'ExecutionError', 'ParseError', 'ConcurrencyGuardError']
