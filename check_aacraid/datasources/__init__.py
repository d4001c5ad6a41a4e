"""DataSource implementations for different acquisition modes."""

from .base import DataSource
from .live_arcconf import LiveArcconfDataSource
from .file_replay import FileReplayDataSource

__all__ = ['DataSource', 'LiveArcconfDataSource', 'FileReplayDataSource']
