"""
Tests for the report data sources.
"""
import logging
import os
import subprocess
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import mock

from .file_replay import FileReplayDataSource
from .live_arcconf import LiveArcconfDataSource
from ..core.errors import ConcurrencyGuardError, ConfigError, ExecutionError
from ..core.severity import Severity
from ..utils.process import is_running

COMMAND = ['sudo', '/usr/Arcconf/arcconf', 'GETCONFIG', '1']


def completed(returncode=0, stdout='', stderr=''):
    return subprocess.CompletedProcess(args=COMMAND, returncode=returncode, stdout=stdout, stderr=stderr)


class TestFileReplayDataSource(unittest.TestCase):
    """Test cases for FileReplayDataSource."""

    def setUp(self):
        """Set up test environment."""
        self.temp_dir = TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)

    def tearDown(self):
        """Clean up after tests."""
        self.temp_dir.cleanup()

    def test_read_report(self):
        report_file = self.temp_path / "arcconf.txt"
        report_file.write_text("Controllers found: 1\n", encoding='utf-8')
        source = FileReplayDataSource({'dry_path': str(report_file)})
        self.assertEqual(source.read_report(), "Controllers found: 1\n")

    def test_missing_file(self):
        missing = self.temp_path / "nonexistent.txt"
        with self.assertRaises(ConfigError) as ctx:
            FileReplayDataSource({'dry_path': str(missing)}).read_report()
        self.assertEqual(str(ctx.exception), f"{missing} is not readable")
        self.assertEqual(ctx.exception.severity, Severity.WARNING)

    def test_directory_is_not_readable_file(self):
        with self.assertRaises(ConfigError):
            FileReplayDataSource({'dry_path': self.temp_dir.name}).read_report()

    def test_empty_file(self):
        empty = self.temp_path / "empty.txt"
        empty.touch()
        with self.assertRaises(ConfigError) as ctx:
            FileReplayDataSource({'dry_path': str(empty)}).read_report()
        self.assertEqual(str(ctx.exception), f"Unable to load {empty}")

    @unittest.skipIf(hasattr(os, 'geteuid') and os.geteuid() == 0, "root can read any file")
    def test_unreadable_file(self):
        locked = self.temp_path / "locked.txt"
        locked.write_text("data", encoding='utf-8')
        locked.chmod(0)
        with self.assertRaises(ConfigError):
            FileReplayDataSource({'dry_path': str(locked)}).read_report()


@mock.patch('check_aacraid.datasources.live_arcconf.is_running', return_value=False)
@mock.patch('check_aacraid.datasources.live_arcconf.subprocess.run')
class TestLiveArcconfDataSource(unittest.TestCase):
    """Test cases for LiveArcconfDataSource."""

    def make_source(self, timeout=None):
        return LiveArcconfDataSource({
            'command': COMMAND,
            'arcconf_path': '/usr/Arcconf/arcconf',
            'timeout': timeout,
        })

    def test_read_report(self, run, running):
        run.return_value = completed(stdout="Controllers found: 1\n")
        self.assertEqual(self.make_source(timeout=30).read_report(), "Controllers found: 1\n")
        run.assert_called_once_with(COMMAND, capture_output=True, text=True,
                                    encoding='utf-8', errors='replace', timeout=30)
        running.assert_called_once_with('arcconf')

    def test_nonzero_exit(self, run, running):
        run.return_value = completed(returncode=1, stdout="Invalid controller number.\n")
        with self.assertRaises(ExecutionError) as ctx:
            self.make_source().read_report()
        self.assertEqual(str(ctx.exception),
                         "Error running arcconf: 'sudo /usr/Arcconf/arcconf GETCONFIG 1'")
        self.assertEqual(ctx.exception.severity, Severity.CRITICAL)

    def test_blank_output(self, run, running):
        run.return_value = completed(stdout="  \n\n")
        with self.assertRaises(ExecutionError) as ctx:
            self.make_source().read_report()
        self.assertEqual(str(ctx.exception), "No output from arcconf?")

    def test_missing_executable(self, run, running):
        run.side_effect = FileNotFoundError(2, "No such file or directory")
        with self.assertRaises(ExecutionError):
            self.make_source().read_report()

    def test_timeout(self, run, running):
        run.side_effect = subprocess.TimeoutExpired(COMMAND, 5)
        with self.assertRaises(ExecutionError):
            self.make_source(timeout=5).read_report()

    def test_already_running(self, run, running):
        running.return_value = True
        with self.assertRaises(ConcurrencyGuardError) as ctx:
            self.make_source().read_report()
        self.assertEqual(ctx.exception.severity, Severity.UNKNOWN)
        self.assertIn("already running", str(ctx.exception))
        run.assert_not_called()


@mock.patch('check_aacraid.datasources.live_arcconf.is_running', return_value=False)
class TestLiveArcconfOutputDecoding(unittest.TestCase):
    """Test cases for decoding real arcconf stdout."""

    def setUp(self):
        """Set up a stand-in arcconf executable."""
        self.temp_dir = TemporaryDirectory()
        self.arcconf = Path(self.temp_dir.name) / "arcconf"
        self.arcconf.write_text(
            "#!/bin/sh\n"
            "printf 'Controllers found: 1\\n\\377\\376 Vendor : ATA\\n'\n",
            encoding='utf-8'
        )
        self.arcconf.chmod(0o755)

    def tearDown(self):
        """Clean up after tests."""
        self.temp_dir.cleanup()

    @unittest.skipUnless(os.path.exists('/bin/sh'), "needs /bin/sh")
    def test_invalid_utf8_is_replaced(self, running):
        """Test that non UTF-8 bytes from drive firmware strings do not abort the run."""
        source = LiveArcconfDataSource({
            'command': [str(self.arcconf), 'GETCONFIG', '1'],
            'arcconf_path': str(self.arcconf),
            'timeout': 30,
        })
        report = source.read_report()
        self.assertTrue(report.startswith("Controllers found: 1\n"))
        self.assertIn("\ufffd", report)
        self.assertIn("Vendor : ATA", report)


@mock.patch('check_aacraid.utils.process.subprocess.run')
class TestIsRunning(unittest.TestCase):
    """Test cases for the pgrep based process check."""

    def test_running(self, run):
        run.return_value = completed(stdout="4242\n4243\n")
        self.assertTrue(is_running('arcconf'))
        run.assert_called_once_with(['pgrep', 'arcconf'], capture_output=True, text=True)

    def test_not_running(self, run):
        run.return_value = completed(returncode=1)
        self.assertFalse(is_running('arcconf'))

    def test_pgrep_missing(self, run):
        run.side_effect = FileNotFoundError(2, "No such file or directory")
        self.assertFalse(is_running('arcconf'))

    def test_pgrep_error(self, run):
        run.return_value = completed(returncode=3, stderr="pgrep: bad option")
        self.assertFalse(is_running('arcconf'))


if __name__ == '__main__':
    logging.basicConfig(level=logging.ERROR)
    unittest.main()
