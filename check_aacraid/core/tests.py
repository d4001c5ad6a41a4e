"""
Tests for probe configuration, orchestration and the plugin entry point.
"""
import argparse
import io
import logging
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import mock

from .config import ProbeConfig
from .errors import ParseError
from .probe import HealthProbe
from .reporter import format_summary, report_and_exit
from .severity import Severity
from ..config import Settings
from ..datasources.base import DataSource
from ..datasources.file_replay import FileReplayDataSource
from ..datasources.live_arcconf import LiveArcconfDataSource
from ..main import main

TESTDATA = Path(__file__).resolve().parent.parent / 'testdata'


def run_main(*argv):
    """Run the plugin, returning (exit code, stdout, stderr)."""
    stdout, stderr = io.StringIO(), io.StringIO()
    with redirect_stdout(stdout), redirect_stderr(stderr):
        try:
            main(list(argv))
        except SystemExit as e:
            return e.code, stdout.getvalue(), stderr.getvalue()
    raise AssertionError("main() returned without exiting")


class StaticDataSource(DataSource):
    """DataSource returning a fixed report."""

    def __init__(self, text):
        super().__init__({})
        self.text = text

    def read_report(self):
        return self.text


class TestProbeConfig(unittest.TestCase):
    """Test cases for ProbeConfig."""

    def test_command_without_sudo(self):
        config = ProbeConfig(use_sudo=False)
        self.assertEqual(config.command(), ['/usr/Arcconf/arcconf', 'GETCONFIG', '1'])

    def test_command_with_sudo(self):
        config = ProbeConfig(use_sudo=True, arcconf_path='/opt/arcconf', controller=2)
        self.assertEqual(config.command(), ['sudo', '/opt/arcconf', 'GETCONFIG', '2'])

    @mock.patch('check_aacraid.core.config.os.geteuid', return_value=0)
    def test_root_skips_sudo(self, geteuid):
        self.assertFalse(ProbeConfig().needs_sudo)

    @mock.patch('check_aacraid.core.config.os.geteuid', return_value=1000)
    def test_non_root_uses_sudo(self, geteuid):
        self.assertEqual(ProbeConfig().command()[0], 'sudo')

    def test_validation(self):
        with self.assertRaises(ValueError):
            ProbeConfig(controller=-1)
        with self.assertRaises(ValueError):
            ProbeConfig(timeout=0)

    def test_from_args_precedence(self):
        """Test that command line options override settings."""
        settings = Settings(from_env=False)
        settings.arcconf_path = '/srv/arcconf'
        settings.controller = 3
        settings.timeout = 20
        settings.use_sudo = True
        args = argparse.Namespace(dry=None, physical=True, verbose=False, arcconf=None,
                                  controller=None, timeout=45, no_sudo=True,
                                  log_level='INFO', logfile=None)
        config = ProbeConfig.from_args(args, settings)
        self.assertEqual(config.arcconf_path, '/srv/arcconf')
        self.assertEqual(config.controller, 3)
        self.assertEqual(config.timeout, 45)
        self.assertFalse(config.use_sudo)
        self.assertTrue(config.include_physical)
        self.assertFalse(config.use_dry_run)


class TestHealthProbe(unittest.TestCase):
    """Test cases for HealthProbe."""

    def test_datasource_selection(self):
        self.assertIsInstance(HealthProbe(ProbeConfig(dry_path='x.txt')).datasource, FileReplayDataSource)
        self.assertIsInstance(HealthProbe(ProbeConfig(use_sudo=False)).datasource, LiveArcconfDataSource)

    def test_physical_parsed_only_when_requested(self):
        text = (TESTDATA / 'optimal.txt').read_text(encoding='utf-8')
        report = HealthProbe(ProbeConfig(use_sudo=False), StaticDataSource(text)).parse(text)
        self.assertIsNone(report.physical)
        report = HealthProbe(ProbeConfig(include_physical=True, use_sudo=False), StaticDataSource(text)).parse(text)
        self.assertEqual(len(report.physical), 5)

    def test_parse_error_propagates(self):
        probe = HealthProbe(ProbeConfig(use_sudo=False), StaticDataSource("garbage"))
        with self.assertRaises(ParseError):
            probe.run()


class TestReporter(unittest.TestCase):
    """Test cases for the reporter."""

    def test_format_summary(self):
        self.assertEqual(format_summary(["Controller: OK", "Logical Disk 'a': OK"]),
                         "Controller: OK  Logical Disk 'a': OK")

    def test_report_and_exit(self):
        out = io.StringIO()
        with self.assertRaises(SystemExit) as ctx:
            report_and_exit(["Controller: Failed"], Severity.CRITICAL, out)
        self.assertEqual(ctx.exception.code, 2)
        self.assertEqual(out.getvalue(), "Controller: Failed\n")


class TestMain(unittest.TestCase):
    """End-to-end plugin runs against saved arcconf reports."""

    def test_optimal(self):
        code, out, _ = run_main('--physical', '--dry', str(TESTDATA / 'optimal.txt'))
        self.assertEqual(code, 0)
        self.assertEqual(out, "Controller: OK  Logical Disk 'system': OK  "
                              "Logical Disk 'data': OK  Physical disks: 5 OK\n")

    def test_optimal_without_physical(self):
        code, out, _ = run_main('--dry', str(TESTDATA / 'optimal.txt'))
        self.assertEqual(code, 0)
        self.assertEqual(out, "Controller: OK  Logical Disk 'system': OK  Logical Disk 'data': OK\n")

    def test_degraded_logical(self):
        code, out, _ = run_main('--dry', str(TESTDATA / 'degraded_logical.txt'))
        self.assertEqual(code, 2)
        self.assertEqual(out.count("Degraded"), 1)
        self.assertIn("Logical Disk 'data': Degraded", out)

    def test_physical_errors(self):
        code, out, _ = run_main('--physical', '--dry', str(TESTDATA / 'physical_errors.txt'))
        self.assertEqual(code, 2)
        self.assertEqual(out, "Controller: Optimal  Logical Disk 'system': OK  Logical Disk 'data': OK  "
                              "Physical disks: 2 drives with errors, 3 drives OK\n")

    def test_verbose_dumps_unhealthy_disks(self):
        code, out, err = run_main('--physical', '--verbose', '--dry', str(TESTDATA / 'physical_errors.txt'))
        self.assertEqual(code, 2)
        self.assertEqual(len(out.splitlines()), 1)
        self.assertIn("WD-WCC4E0A1B2C1", err)
        self.assertIn("WD-WCC4E0A1B2C3", err)
        self.assertNotIn("WD-WCC4E0A1B2C0", err)

    def test_physical_skipped_without_error_counters(self):
        code, out, _ = run_main('--physical', '--dry', str(TESTDATA / 'no_error_counters.txt'))
        self.assertEqual(code, 0)
        self.assertNotIn("Physical disks", out)

    def test_truncated_report(self):
        code, out, _ = run_main('--dry', str(TESTDATA / 'truncated.txt'))
        self.assertEqual(code, 2)
        self.assertEqual(out, "Unable to parse arcconf output. Not enough sections\n")

    def test_missing_replay_file(self):
        with TemporaryDirectory() as temp_dir:
            missing = Path(temp_dir) / 'nothing.txt'
            code, out, _ = run_main('--dry', str(missing))
        self.assertEqual(code, 1)
        self.assertEqual(out, f"{missing} is not readable\n")

    def test_idempotent(self):
        first = run_main('--physical', '--dry', str(TESTDATA / 'physical_errors.txt'))
        second = run_main('--physical', '--dry', str(TESTDATA / 'physical_errors.txt'))
        self.assertEqual(first[:2], second[:2])

    @mock.patch('check_aacraid.datasources.live_arcconf.is_running', return_value=True)
    def test_live_already_running(self, running):
        code, out, _ = run_main('--no-sudo')
        self.assertEqual(code, 3)
        self.assertEqual(out, "arcconf is already running. Refusing to run again\n")

    @mock.patch('check_aacraid.datasources.live_arcconf.is_running')
    def test_replay_skips_running_check(self, running):
        """Test that replay mode never looks for a running arcconf."""
        code, _, _ = run_main('--dry', str(TESTDATA / 'optimal.txt'))
        self.assertEqual(code, 0)
        running.assert_not_called()

    def test_malformed_settings_file(self):
        """Test that a settings file holding a list is ignored instead of crashing."""
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / 'settings.yaml'
            config_file.write_text("- a\n- b\n", encoding='utf-8')
            code, out, _ = run_main('--config', str(config_file), '--dry', str(TESTDATA / 'optimal.txt'))
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("Controller: OK"))

    def test_help(self):
        code, out, _ = run_main('--help')
        self.assertEqual(code, 0)
        self.assertIn("--physical", out)

    def test_bad_option(self):
        code, _, err = run_main('--bogus')
        self.assertEqual(code, 3)
        self.assertIn("unrecognized arguments", err)


if __name__ == '__main__':
    logging.basicConfig(level=logging.ERROR)
    unittest.main()
