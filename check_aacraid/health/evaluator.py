"""Health evaluation of a parsed arcconf report.

Every predicate compares against an explicit expected value, so a field
that arcconf did not report (None) always counts as unhealthy.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.severity import Severity
from ..schema.models import ArcconfReport, ControllerInfo, LogicalVolume, PhysicalDisk

logger = logging.getLogger(__name__)

CONTROLLER_OK_STATUS = 'Optimal'
CONTROLLER_OK_TEMPERATURE = 'Normal'
LOGICAL_OK_STATUS = 'Optimal'
PHYSICAL_OK_STATE = 'Online'


@dataclass
class HealthReport:
    """Outcome of one evaluation: overall state plus messages in output order."""
    severity: Severity = Severity.OK
    messages: List[str] = field(default_factory=list)
    unhealthy_disks: List[PhysicalDisk] = field(default_factory=list)

    def escalate(self, severity: Severity) -> None:
        """Raise the overall state; it never moves back down."""
        if severity > self.severity:
            self.severity = severity


def controller_ok(controller: ControllerInfo) -> bool:
    return (controller.temp_str == CONTROLLER_OK_TEMPERATURE
            and controller.status == CONTROLLER_OK_STATUS)


def logical_ok(volume: LogicalVolume) -> bool:
    return volume.status == LOGICAL_OK_STATUS


def physical_ok(disk: PhysicalDisk) -> bool:
    return disk.state == PHYSICAL_OK_STATE and disk.error_count == 0


def _display(value: Optional[str]) -> str:
    return value if value else 'unknown'


class HealthEvaluator:
    """Turns an ArcconfReport into a HealthReport.

    Only CRITICAL is ever raised here; WARNING and UNKNOWN come from the
    acquisition and parsing aborts.
    """

    def __init__(self, include_physical: bool = False):
        self.include_physical = include_physical

    def evaluate(self, report: ArcconfReport) -> HealthReport:
        result = HealthReport()
        self._check_controller(report.controller, result)
        for volume in report.logical:
            self._check_logical(volume, result)

        if self.include_physical:
            if report.physical is None:
                logger.info("Physical disk data not available, skipping physical checks")
            else:
                self._check_physical(report.physical, result)

        return result

    def _check_controller(self, controller: ControllerInfo, result: HealthReport) -> None:
        if controller_ok(controller):
            result.messages.append("Controller: OK")
            return

        logger.debug(f"Controller unhealthy: status={controller.status!r} "
                     f"temperature={controller.temp_str!r}")
        result.messages.append(f"Controller: {_display(controller.status)}")
        result.escalate(Severity.CRITICAL)

    def _check_logical(self, volume: LogicalVolume, result: HealthReport) -> None:
        if logical_ok(volume):
            result.messages.append(f"Logical Disk '{volume.label}': OK")
            return

        result.messages.append(f"Logical Disk '{volume.label}': {_display(volume.status)}")
        result.escalate(Severity.CRITICAL)

    def _check_physical(self, disks: List[PhysicalDisk], result: HealthReport) -> None:
        total = len(disks)
        for disk in disks:
            if not physical_ok(disk):
                logger.debug(f"Drive #{disk.device} unhealthy: state={disk.state!r} "
                             f"errors={disk.error_count!r}")
                result.unhealthy_disks.append(disk)

        bad = len(result.unhealthy_disks)
        if bad:
            result.messages.append(f"Physical disks: {bad} drives with errors, {total - bad} drives OK")
            result.escalate(Severity.CRITICAL)
        else:
            result.messages.append(f"Physical disks: {total} OK")
