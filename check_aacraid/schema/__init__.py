"""Typed records parsed from arcconf reports."""

from .models import ArcconfReport, ControllerInfo, LogicalVolume, PhysicalDisk, safe_int

__all__ = ['ArcconfReport', 'ControllerInfo', 'LogicalVolume', 'PhysicalDisk', 'safe_int']
