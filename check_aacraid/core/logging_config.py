"""Centralized logging configuration for the probe.

Logs always go to stderr (or a file) because stdout is reserved for the
one-line plugin result.
"""

import logging
import os
import sys
from typing import Optional


class LoggingConfigurator:
    """Handles all logging setup independently of other configuration."""

    @staticmethod
    def setup_logging(log_level: str = 'WARNING', log_file: Optional[str] = None) -> None:
        """Set up logging configuration.

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
            log_file: Optional path to log file. If None, logs to stderr only.
        """
        level = getattr(logging, log_level.upper())

        # Configure logging with file output if specified
        if log_file:
            # Ensure directory exists
            log_dir = os.path.dirname(log_file)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir, exist_ok=True)

            # Configure file + stderr logging
            logging.basicConfig(
                level=level,
                format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                handlers=[
                    logging.FileHandler(log_file),
                    logging.StreamHandler(sys.stderr)
                ]
            )
        else:
            # stderr logging only
            logging.basicConfig(
                level=level,
                format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                stream=sys.stderr
            )
