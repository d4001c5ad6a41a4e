"""
Configuration management for check_aacraid.
"""

import os
import yaml
import json
from typing import Optional
import logging

# Initialize logger
LOG = logging.getLogger(__name__)

# arcconf install location used by the Adaptec/Microsemi packages
DEFAULT_ARCCONF_PATH = "/usr/Arcconf/arcconf"
DEFAULT_CONTROLLER = 1
DEFAULT_SUDO_PATH = "sudo"

TRUE_VALUES = ('1', 'true', 'yes', 'on')
FALSE_VALUES = ('0', 'false', 'no', 'off')


def _parse_bool(value, default: Optional[bool] = None) -> Optional[bool]:
    """Interpret YAML/JSON booleans as well as strings like "false" or "0"."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    LOG.warning(f"Ignoring unrecognized boolean value: {value!r}")
    return default


class Settings:
    """
    Site settings for check_aacraid.
    Supports loading from environment variables, YAML, or JSON.

    For sudo access put the following in your sudo config:
        nagios ALL=(root) NOPASSWD: /usr/Arcconf/arcconf GETCONFIG 1 *
    """

    def __init__(self, config_file: Optional[str] = None, from_env: bool = True):
        """
        Initialize settings from a config file or environment variables.

        Args:
            config_file: Path to YAML or JSON configuration file
            from_env: Whether to load settings from environment variables
        """
        # Default values
        self.arcconf_path: str = DEFAULT_ARCCONF_PATH
        self.controller: int = DEFAULT_CONTROLLER
        self.sudo_path: str = DEFAULT_SUDO_PATH
        self.use_sudo: Optional[bool] = None  # None = only when not root
        self.timeout: Optional[int] = None

        # Load configuration in order of precedence
        if config_file:
            self._load_from_file(config_file)

        if from_env:
            self._load_from_env()

    def _load_from_file(self, config_file: str) -> None:
        """Load settings from a YAML or JSON file."""
        try:
            if not os.path.exists(config_file):
                LOG.warning(f"Config file not found: {config_file}")
                return

            with open(config_file, 'r', encoding='utf-8') as f:
                if config_file.lower().endswith('.yaml') or config_file.lower().endswith('.yml'):
                    config = yaml.safe_load(f)
                elif config_file.lower().endswith('.json'):
                    config = json.load(f)
                else:
                    LOG.warning(f"Unsupported config file format: {config_file}")
                    return

            config = config or {}
            if not isinstance(config, dict):
                LOG.error(f"Ignoring config file {config_file}: expected a mapping, got {type(config).__name__}")
                return

            # Apply configuration settings
            self.arcconf_path = config.get('arcconf_path', self.arcconf_path)
            self.controller = int(config.get('controller', self.controller))
            self.sudo_path = config.get('sudo_path', self.sudo_path)
            if 'use_sudo' in config:
                self.use_sudo = _parse_bool(config['use_sudo'], self.use_sudo)
            if config.get('timeout') is not None:
                self.timeout = int(config['timeout'])

            LOG.info(f"Loaded configuration from {config_file}")

        except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
            LOG.error(f"Failed to load config from {config_file}: {e}")

    def _load_from_env(self) -> None:
        """Load settings from environment variables."""
        self.arcconf_path = os.getenv('ARCCONF_PATH', self.arcconf_path)

        if os.getenv('ARCCONF_CONTROLLER'):
            try:
                self.controller = int(os.getenv('ARCCONF_CONTROLLER'))
            except ValueError:
                LOG.warning(f"Ignoring non-numeric ARCCONF_CONTROLLER: {os.getenv('ARCCONF_CONTROLLER')}")

        # ARCCONF_SUDO can be "0"/"false"/"no" to disable, or a path to sudo
        sudo = os.getenv('ARCCONF_SUDO')
        if sudo:
            if sudo.lower() in FALSE_VALUES:
                self.use_sudo = False
            elif sudo.lower() in TRUE_VALUES:
                self.use_sudo = True
            else:
                self.sudo_path = sudo

        if os.getenv('ARCCONF_TIMEOUT'):
            try:
                self.timeout = int(os.getenv('ARCCONF_TIMEOUT'))
            except ValueError:
                LOG.warning(f"Ignoring non-numeric ARCCONF_TIMEOUT: {os.getenv('ARCCONF_TIMEOUT')}")
