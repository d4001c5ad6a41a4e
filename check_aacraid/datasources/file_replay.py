"""File replay DataSource implementation.

Replays arcconf output previously saved to a text file (--dry).
"""

import logging
import os
from typing import Dict, Any

from .base import DataSource
from ..core.errors import ConfigError


class FileReplayDataSource(DataSource):
    """DataSource that reads a saved GETCONFIG report from disk."""

    def __init__(self, config: Dict[str, Any]):
        super().__init__(config)
        self.logger = logging.getLogger(__name__)
        self.path = config.get('dry_path')

    @property
    def description(self) -> str:
        return f"file {self.path}"

    def read_report(self) -> str:
        if not self.path or not os.path.isfile(self.path) or not os.access(self.path, os.R_OK):
            raise ConfigError(f"{self.path} is not readable")

        try:
            with open(self.path, 'r', encoding='utf-8', errors='replace') as f:
                report = f.read()
        except OSError as e:
            self.logger.debug(f"Failed to read {self.path}: {e}")
            raise ConfigError(f"{self.path} is not readable") from e

        if not report:
            raise ConfigError(f"Unable to load {self.path}")

        self.logger.info(f"Loaded {len(report)} bytes of arcconf output from {self.path}")
        return report
