"""Live arcconf DataSource implementation.

Runs arcconf GETCONFIG on the local host.
"""

import logging
import os
import shlex
import subprocess
from typing import Dict, Any, List, Optional

from .base import DataSource
from ..core.errors import ConcurrencyGuardError, ExecutionError
from ..utils.process import is_running


class LiveArcconfDataSource(DataSource):
    """DataSource that runs arcconf and returns its stdout.

    This implementation handles:
    - Refusing to run while another arcconf is active (arcconf does not
      tolerate concurrent access to the controller)
    - Optional sudo prefix and timeout, both decided by ProbeConfig
    """

    def __init__(self, config: Dict[str, Any]):
        super().__init__(config)
        self.logger = logging.getLogger(__name__)

        self.command: List[str] = list(config.get('command') or [])
        self.timeout: Optional[int] = config.get('timeout')
        self.process_name = os.path.basename(config.get('arcconf_path') or 'arcconf')

    @property
    def description(self) -> str:
        return f"command '{self.command_line}'"

    @property
    def command_line(self) -> str:
        return ' '.join(shlex.quote(part) for part in self.command)

    def check_not_running(self) -> None:
        """Raise ConcurrencyGuardError if arcconf is already running on this host."""
        if is_running(self.process_name):
            raise ConcurrencyGuardError(f"{self.process_name} is already running. Refusing to run again")

    def read_report(self) -> str:
        self.check_not_running()

        self.logger.info(f"Running {self.command_line}")
        try:
            result = subprocess.run(
                self.command,
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace',
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired as e:
            self.logger.error(f"arcconf timed out after {self.timeout}s")
            raise ExecutionError(f"Error running arcconf: '{self.command_line}'") from e
        except OSError as e:
            self.logger.error(f"Could not start arcconf: {e}")
            raise ExecutionError(f"Error running arcconf: '{self.command_line}'") from e

        if result.returncode != 0:
            self.logger.error(f"arcconf exited with status {result.returncode}: {result.stderr.strip()}")
            raise ExecutionError(f"Error running arcconf: '{self.command_line}'")

        if not result.stdout.strip():
            raise ExecutionError("No output from arcconf?")

        self.logger.debug(f"arcconf returned {len(result.stdout)} bytes")
        return result.stdout
