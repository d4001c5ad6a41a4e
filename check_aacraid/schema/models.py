from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Any


def safe_int(value, default=None):
    """Safely convert a value to int, handling None and string integers"""
    if value is None:
        return default

    try:
        return int(value)
    except (ValueError, TypeError):
        return default


@dataclass(frozen=True)
class ControllerInfo:
    """
    Controller information from the first GETCONFIG section, e.g.

        Controller Status                        : Optimal
        Controller Mode                          : RAID (Expose RAW)
        Controller Model                         : Adaptec ASR8805
        Controller Serial Number                 : 7A4613B2A3F
        Temperature                              : 55 C/ 131 F (Normal)
        BIOS                                     : 7.5-0 (32118)

    Text fields are None when arcconf did not report them.
    """
    bios: Optional[str] = None
    mode: Optional[str] = None
    model: Optional[str] = None
    serial: Optional[str] = None
    status: Optional[str] = None
    temp_c: int = -1
    temp_f: int = -1
    temp_str: str = 'unknown'


@dataclass
class LogicalVolume:
    """A single logical device (RAID array). Size is kept as arcconf prints it."""
    number: Optional[int] = None
    name: Optional[str] = None
    raid_level: Optional[str] = None
    size: Optional[str] = None
    device_type: Optional[str] = None
    status: Optional[str] = None

    @property
    def label(self) -> str:
        """Name to show in messages, falling back to the device number"""
        if self.name:
            return self.name
        if self.number is not None:
            return f"#{self.number}"
        return 'unknown'


@dataclass
class PhysicalDisk:
    """
    A hard drive (HDD or SSD) attached to the controller.

    error_count is the aggregate of the per-disk error counters; None means
    at least one counter was missing from the report.
    """
    device: Optional[int] = None
    state: Optional[str] = None
    vendor: Optional[str] = None
    model: Optional[str] = None
    is_ssd: Optional[str] = None
    size: Optional[str] = None
    serial: Optional[str] = None
    error_count: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ArcconfReport:
    """Everything parsed out of one GETCONFIG run.

    physical is None when physical disks were not requested or the firmware
    does not report per-disk error counters. An empty list means no drives.
    """
    controller: ControllerInfo
    logical: List[LogicalVolume] = field(default_factory=list)
    physical: Optional[List[PhysicalDisk]] = None
