"""Split a GETCONFIG report into its major sections."""

import logging
from typing import NamedTuple

from ..config.report_grammar import SECTION_BANNER, SECTION_NAMES
from ..core.errors import ParseError

logger = logging.getLogger(__name__)


class ReportSections(NamedTuple):
    """Raw text of the three sections the extractors work on."""
    controller: str
    logical: str
    physical: str


def split_sections(report: str) -> ReportSections:
    """Split raw arcconf output at the 70-dash section banners.

    Args:
        report: Full GETCONFIG output

    Returns:
        Controller, logical device and physical device section text

    Raises:
        ParseError: fewer than four pieces came out of the split
    """
    pieces = SECTION_BANNER.split(report)
    logger.debug(f"Report split into {len(pieces)} sections")

    if len(pieces) < len(SECTION_NAMES):
        raise ParseError("Unable to parse arcconf output. Not enough sections")

    if len(pieces) > len(SECTION_NAMES):
        logger.debug(f"Ignoring {len(pieces) - len(SECTION_NAMES)} trailing sections")

    # pieces[0] is whatever precedes the first banner
    return ReportSections(controller=pieces[1], logical=pieces[2], physical=pieces[3])
