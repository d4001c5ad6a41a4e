"""
Tests for the health evaluator.
"""
import logging
import unittest

from .evaluator import HealthEvaluator, HealthReport, controller_ok, logical_ok, physical_ok
from ..core.severity import Severity
from ..schema.models import ArcconfReport, ControllerInfo, LogicalVolume, PhysicalDisk

HEALTHY_CONTROLLER = ControllerInfo(status="Optimal", temp_c=55, temp_f=131, temp_str="Normal")


def make_report(controller=HEALTHY_CONTROLLER, logical=None, physical=None):
    return ArcconfReport(
        controller=controller,
        logical=logical if logical is not None else [LogicalVolume(number=0, name="system", status="Optimal")],
        physical=physical,
    )


class TestPredicates(unittest.TestCase):
    """Test cases for the per-entity health predicates."""

    def test_controller_ok(self):
        self.assertTrue(controller_ok(HEALTHY_CONTROLLER))
        self.assertFalse(controller_ok(ControllerInfo(status="Optimal", temp_str="Abnormal")))
        self.assertFalse(controller_ok(ControllerInfo(status="Failed", temp_str="Normal")))

    def test_unset_values_are_unhealthy(self):
        """Test that fields arcconf did not report never count as healthy."""
        self.assertFalse(controller_ok(ControllerInfo()))
        self.assertFalse(logical_ok(LogicalVolume()))
        self.assertFalse(physical_ok(PhysicalDisk(state="Online", error_count=None)))
        self.assertFalse(physical_ok(PhysicalDisk(state=None, error_count=0)))

    def test_physical_ok(self):
        self.assertTrue(physical_ok(PhysicalDisk(state="Online", error_count=0)))
        self.assertFalse(physical_ok(PhysicalDisk(state="Online", error_count=3)))
        self.assertFalse(physical_ok(PhysicalDisk(state="Rebuilding", error_count=0)))


class TestHealthEvaluator(unittest.TestCase):
    """Test cases for HealthEvaluator."""

    def test_all_healthy(self):
        result = HealthEvaluator().evaluate(make_report())
        self.assertEqual(result.severity, Severity.OK)
        self.assertEqual(result.messages, ["Controller: OK", "Logical Disk 'system': OK"])

    def test_controller_status_reported(self):
        """Test that an unhealthy controller message carries the raw status."""
        controller = ControllerInfo(status="Optimal", temp_str="Abnormal")
        result = HealthEvaluator().evaluate(make_report(controller=controller))
        self.assertEqual(result.severity, Severity.CRITICAL)
        self.assertEqual(result.messages[0], "Controller: Optimal")

    def test_controller_status_missing(self):
        result = HealthEvaluator().evaluate(make_report(controller=ControllerInfo()))
        self.assertEqual(result.severity, Severity.CRITICAL)
        self.assertEqual(result.messages[0], "Controller: unknown")

    def test_one_degraded_volume(self):
        """Test that exactly one failure message names the degraded volume."""
        volumes = [
            LogicalVolume(number=0, name="system", status="Optimal"),
            LogicalVolume(number=1, name="data", status="Degraded"),
            LogicalVolume(number=2, name="backup", status="Optimal"),
        ]
        result = HealthEvaluator().evaluate(make_report(logical=volumes))
        self.assertEqual(result.severity, Severity.CRITICAL)
        self.assertEqual(result.messages, [
            "Controller: OK",
            "Logical Disk 'system': OK",
            "Logical Disk 'data': Degraded",
            "Logical Disk 'backup': OK",
        ])

    def test_unnamed_volume_uses_number(self):
        volumes = [LogicalVolume(number=4, status="Failed")]
        result = HealthEvaluator().evaluate(make_report(logical=volumes))
        self.assertEqual(result.messages[1], "Logical Disk '#4': Failed")

    def test_physical_summary_with_errors(self):
        disks = [
            PhysicalDisk(device=0, state="Online", error_count=0),
            PhysicalDisk(device=1, state="Online", error_count=2),
            PhysicalDisk(device=2, state="Failed", error_count=0),
            PhysicalDisk(device=3, state="Online", error_count=0),
        ]
        result = HealthEvaluator(include_physical=True).evaluate(make_report(physical=disks))
        self.assertEqual(result.severity, Severity.CRITICAL)
        self.assertEqual(result.messages[-1], "Physical disks: 2 drives with errors, 2 drives OK")
        self.assertEqual([d.device for d in result.unhealthy_disks], [1, 2])

    def test_physical_summary_all_ok(self):
        disks = [PhysicalDisk(device=i, state="Online", error_count=0) for i in range(3)]
        result = HealthEvaluator(include_physical=True).evaluate(make_report(physical=disks))
        self.assertEqual(result.severity, Severity.OK)
        self.assertEqual(result.messages[-1], "Physical disks: 3 OK")
        self.assertEqual(result.unhealthy_disks, [])

    def test_physical_not_requested(self):
        disks = [PhysicalDisk(device=0, state="Failed", error_count=0)]
        result = HealthEvaluator(include_physical=False).evaluate(make_report(physical=disks))
        self.assertEqual(result.severity, Severity.OK)
        self.assertEqual(len(result.messages), 2)

    def test_physical_data_unavailable(self):
        """Test that missing physical data skips the check rather than scoring zero disks."""
        result = HealthEvaluator(include_physical=True).evaluate(make_report(physical=None))
        self.assertEqual(result.severity, Severity.OK)
        self.assertFalse(any(m.startswith("Physical disks") for m in result.messages))

    def test_zero_disks(self):
        result = HealthEvaluator(include_physical=True).evaluate(make_report(physical=[]))
        self.assertEqual(result.messages[-1], "Physical disks: 0 OK")

    def test_escalate_never_lowers(self):
        report = HealthReport()
        report.escalate(Severity.CRITICAL)
        report.escalate(Severity.WARNING)
        self.assertEqual(report.severity, Severity.CRITICAL)


if __name__ == '__main__':
    logging.basicConfig(level=logging.ERROR)
    unittest.main()
