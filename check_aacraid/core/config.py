"""Core configuration classes for the probe."""

import os
from dataclasses import dataclass
from typing import Dict, Any, List, Optional

from ..config import DEFAULT_ARCCONF_PATH, DEFAULT_CONTROLLER, DEFAULT_SUDO_PATH, Settings


@dataclass
class ProbeConfig:
    """Main configuration for one probe run.

    Everything the data sources need (command line, dry-run path) lives
    here rather than in module globals.
    """

    # Data source configuration
    dry_path: Optional[str] = None  # replay report from file instead of running arcconf

    # Checks
    include_physical: bool = False
    verbose: bool = False  # dump unhealthy disk records to stderr

    # Live arcconf configuration
    arcconf_path: str = DEFAULT_ARCCONF_PATH
    controller: int = DEFAULT_CONTROLLER
    sudo_path: str = DEFAULT_SUDO_PATH
    use_sudo: Optional[bool] = None  # None = sudo unless running as root
    timeout: Optional[int] = None    # seconds, None = wait for arcconf indefinitely

    # Debugging
    log_level: str = 'WARNING'
    logfile: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.controller < 0:
            raise ValueError("controller must be a non-negative integer")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be a positive number of seconds")

    @property
    def use_dry_run(self) -> bool:
        return self.dry_path is not None

    @property
    def needs_sudo(self) -> bool:
        if self.use_sudo is None:
            return os.geteuid() != 0
        return self.use_sudo

    def command(self) -> List[str]:
        """arcconf command line, prefixed with sudo when needed."""
        cmd = [self.arcconf_path, 'GETCONFIG', str(self.controller)]
        if self.needs_sudo:
            cmd.insert(0, self.sudo_path)
        return cmd

    @classmethod
    def from_args(cls, args, settings: Optional[Settings] = None) -> 'ProbeConfig':
        """Create configuration from command line arguments.

        Command line values win over settings, settings over defaults.
        """
        settings = settings or Settings(from_env=False)

        use_sudo = settings.use_sudo
        if getattr(args, 'no_sudo', False):
            use_sudo = False

        return cls(
            dry_path=getattr(args, 'dry', None),
            include_physical=getattr(args, 'physical', False),
            verbose=getattr(args, 'verbose', False),
            arcconf_path=getattr(args, 'arcconf', None) or settings.arcconf_path,
            controller=_first_set(getattr(args, 'controller', None), settings.controller),
            sudo_path=settings.sudo_path,
            use_sudo=use_sudo,
            timeout=_first_set(getattr(args, 'timeout', None), settings.timeout),
            log_level=getattr(args, 'log_level', 'WARNING'),
            logfile=getattr(args, 'logfile', None),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for passing to DataSources."""
        return {
            'dry_path': self.dry_path,
            'include_physical': self.include_physical,
            'command': self.command(),
            'arcconf_path': self.arcconf_path,
            'timeout': self.timeout,
        }


def _first_set(*values):
    for value in values:
        if value is not None:
            return value
    return None
