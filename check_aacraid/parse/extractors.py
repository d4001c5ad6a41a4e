"""Field extraction for the controller, logical and physical sections.

Each field is an independent search against the pattern tables in
config.report_grammar; a pattern that does not match leaves the field unset.
"""

import logging
from typing import Dict, List, Optional, Pattern

from ..config.report_grammar import (
    CONTROLLER_FIELDS, CONTROLLER_TEMPERATURE, LOGICAL_FIELDS, PHYSICAL_FIELDS,
    ERROR_COUNTERS, SUMMED_ERROR_COUNTERS, LOGICAL_DEVICE_BANNER,
    PHYSICAL_DEVICE_BANNER, ERROR_COUNT_MARKER, HARD_DRIVE_MARKER,
)
from ..schema.models import ControllerInfo, LogicalVolume, PhysicalDisk, safe_int

logger = logging.getLogger(__name__)


def extract_fields(text: str, patterns: Dict[str, Pattern]) -> Dict[str, Optional[str]]:
    """Run every pattern against text, returning the first group or None per field."""
    values = {}
    for field_name, pattern in patterns.items():
        match = pattern.search(text)
        values[field_name] = match.group(1).strip() if match else None
    return values


def _split_numbered(text: str, banner: Pattern):
    """Yield (number, fragment) pairs for each banner in text.

    The text before the first banner is dropped.
    """
    parts = banner.split(text)
    # split() with one group gives [lead, n1, body1, n2, body2, ...]
    for i in range(1, len(parts) - 1, 2):
        yield safe_int(parts[i]), parts[i + 1]


def parse_controller(text: str) -> ControllerInfo:
    """Build the controller record. Never fails; missing fields stay unset."""
    values = extract_fields(text, CONTROLLER_FIELDS)

    temp = CONTROLLER_TEMPERATURE.search(text)
    if temp:
        values['temp_c'] = safe_int(temp.group(1), -1)
        values['temp_f'] = safe_int(temp.group(2), -1)
        values['temp_str'] = temp.group(3).strip()
    else:
        logger.debug("Controller temperature not found in report")

    return ControllerInfo(**values)


def parse_logical(text: str) -> List[LogicalVolume]:
    """Build one LogicalVolume per "Logical Device number N" block, in report order."""
    volumes = []
    for number, fragment in _split_numbered(text.strip(), LOGICAL_DEVICE_BANNER):
        volumes.append(LogicalVolume(number=number, **extract_fields(fragment, LOGICAL_FIELDS)))

    logger.debug(f"Parsed {len(volumes)} logical devices")
    return volumes


def aggregate_errors(counters: Dict[str, Optional[int]]) -> Optional[int]:
    """Sum the counters in SUMMED_ERROR_COUNTERS.

    Returns None unless every counter in ERROR_COUNTERS was reported, so a
    disk with a partial set of counters is never scored as error free.
    """
    missing = [name for name in ERROR_COUNTERS if counters.get(name) is None]
    if missing:
        logger.debug(f"Error counters missing from report: {', '.join(missing)}")
        return None
    return sum(counters[name] for name in SUMMED_ERROR_COUNTERS)


def parse_physical(text: str) -> Optional[List[PhysicalDisk]]:
    """Build one PhysicalDisk per hard drive in the physical device section.

    Returns:
        List of disks, or None if arcconf does not report per-disk error
        counters (older firmware). None means the physical check is skipped.
    """
    if not ERROR_COUNT_MARKER.search(text):
        logger.warning("Your arcconf output does not include physical disk errors. "
                       "You may need to upgrade firmware to get individual disk error stats")
        return None

    disks = []
    for number, fragment in _split_numbered(text, PHYSICAL_DEVICE_BANNER):
        if not fragment.strip():
            continue

        # Enclosures, SES devices etc.
        if not HARD_DRIVE_MARKER.search(fragment):
            logger.debug(f"Skipping device #{number}: not a hard drive")
            continue

        counters = {
            name: safe_int(value)
            for name, value in extract_fields(fragment, ERROR_COUNTERS).items()
        }
        disks.append(PhysicalDisk(
            device=number,
            error_count=aggregate_errors(counters),
            **extract_fields(fragment, PHYSICAL_FIELDS)
        ))

    logger.debug(f"Parsed {len(disks)} physical drives")
    return disks
