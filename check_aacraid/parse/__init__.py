"""Parsing of arcconf GETCONFIG output into schema records."""

from .sections import ReportSections, split_sections
from .extractors import parse_controller, parse_logical, parse_physical

__all__ = ['ReportSections', 'split_sections', 'parse_controller', 'parse_logical', 'parse_physical']
