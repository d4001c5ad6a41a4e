"""
Tests for settings loading.
"""
import json
import logging
import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import mock

from . import Settings, DEFAULT_ARCCONF_PATH


class TestSettings(unittest.TestCase):
    """Test cases for Settings."""

    def setUp(self):
        """Set up test environment."""
        self.temp_dir = TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)

    def tearDown(self):
        """Clean up after tests."""
        self.temp_dir.cleanup()

    def test_defaults(self):
        settings = Settings(from_env=False)
        self.assertEqual(settings.arcconf_path, DEFAULT_ARCCONF_PATH)
        self.assertEqual(settings.controller, 1)
        self.assertIsNone(settings.use_sudo)
        self.assertIsNone(settings.timeout)

    def test_yaml_file(self):
        config_file = self.temp_path / "check_aacraid.yaml"
        config_file.write_text(
            "arcconf_path: /usr/StorMan/arcconf\n"
            "controller: 2\n"
            "use_sudo: false\n"
            "timeout: 30\n",
            encoding='utf-8'
        )
        settings = Settings(config_file=str(config_file), from_env=False)
        self.assertEqual(settings.arcconf_path, "/usr/StorMan/arcconf")
        self.assertEqual(settings.controller, 2)
        self.assertFalse(settings.use_sudo)
        self.assertEqual(settings.timeout, 30)

    def test_json_file(self):
        config_file = self.temp_path / "check_aacraid.json"
        with open(config_file, 'w', encoding='utf-8') as f:
            json.dump({"sudo_path": "/usr/local/bin/sudo"}, f)
        settings = Settings(config_file=str(config_file), from_env=False)
        self.assertEqual(settings.sudo_path, "/usr/local/bin/sudo")
        self.assertEqual(settings.arcconf_path, DEFAULT_ARCCONF_PATH)

    def test_missing_file_keeps_defaults(self):
        settings = Settings(config_file=str(self.temp_path / "absent.yaml"), from_env=False)
        self.assertEqual(settings.arcconf_path, DEFAULT_ARCCONF_PATH)

    def test_invalid_yaml_keeps_defaults(self):
        config_file = self.temp_path / "broken.yml"
        config_file.write_text("controller: [1, 2\n", encoding='utf-8')
        settings = Settings(config_file=str(config_file), from_env=False)
        self.assertEqual(settings.controller, 1)

    def test_list_file_keeps_defaults(self):
        """Test that a file holding a YAML list instead of a mapping is ignored."""
        config_file = self.temp_path / "list.yaml"
        config_file.write_text("- a\n- b\n", encoding='utf-8')
        with self.assertLogs('check_aacraid.config', level='ERROR'):
            settings = Settings(config_file=str(config_file), from_env=False)
        self.assertEqual(settings.arcconf_path, DEFAULT_ARCCONF_PATH)
        self.assertEqual(settings.controller, 1)

    def test_scalar_json_file_keeps_defaults(self):
        config_file = self.temp_path / "scalar.json"
        config_file.write_text("42", encoding='utf-8')
        settings = Settings(config_file=str(config_file), from_env=False)
        self.assertEqual(settings.controller, 1)

    def test_non_numeric_controller_in_file(self):
        config_file = self.temp_path / "bad_controller.yaml"
        config_file.write_text("controller: [1, 2]\n", encoding='utf-8')
        settings = Settings(config_file=str(config_file), from_env=False)
        self.assertEqual(settings.controller, 1)

    def test_use_sudo_string_values(self):
        """Test that quoted booleans are parsed rather than truth-tested."""
        config_file = self.temp_path / "sudo.json"
        with open(config_file, 'w', encoding='utf-8') as f:
            json.dump({"use_sudo": "false"}, f)
        self.assertFalse(Settings(config_file=str(config_file), from_env=False).use_sudo)

        config_file = self.temp_path / "sudo.yaml"
        config_file.write_text("use_sudo: 'yes'\n", encoding='utf-8')
        self.assertTrue(Settings(config_file=str(config_file), from_env=False).use_sudo)

    def test_use_sudo_unrecognized_value(self):
        config_file = self.temp_path / "sudo_bad.yaml"
        config_file.write_text("use_sudo: sometimes\n", encoding='utf-8')
        self.assertIsNone(Settings(config_file=str(config_file), from_env=False).use_sudo)

    @mock.patch.dict(os.environ, {
        'ARCCONF_PATH': '/opt/arcconf',
        'ARCCONF_CONTROLLER': '4',
        'ARCCONF_SUDO': 'no',
        'ARCCONF_TIMEOUT': '15',
    })
    def test_environment_overrides(self):
        settings = Settings()
        self.assertEqual(settings.arcconf_path, '/opt/arcconf')
        self.assertEqual(settings.controller, 4)
        self.assertFalse(settings.use_sudo)
        self.assertEqual(settings.timeout, 15)

    @mock.patch.dict(os.environ, {'ARCCONF_SUDO': '/usr/bin/doas', 'ARCCONF_CONTROLLER': 'one'})
    def test_environment_sudo_path(self):
        settings = Settings()
        self.assertEqual(settings.sudo_path, '/usr/bin/doas')
        self.assertEqual(settings.controller, 1)


if __name__ == '__main__':
    logging.basicConfig(level=logging.ERROR)
    unittest.main()
