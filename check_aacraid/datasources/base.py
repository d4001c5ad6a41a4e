"""Base DataSource interface for arcconf report acquisition."""

from abc import ABC, abstractmethod
from typing import Dict, Any


class DataSource(ABC):
    """Abstract base class for all report sources.

    Live arcconf runs and file replays go through the same interface, so
    the parser never knows where the text came from.
    """

    def __init__(self, config: Dict[str, Any]):
        self.config = config

    @property
    def description(self) -> str:
        """Short human readable name of the source, for logging."""
        return self.__class__.__name__

    @abstractmethod
    def read_report(self) -> str:
        """Return the raw GETCONFIG report text.

        Raises:
            ProbeError subclass when no usable report could be obtained
        """
        pass
