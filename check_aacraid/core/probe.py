"""Probe orchestration: acquire, split, extract, evaluate."""

import logging
from typing import Optional

from ..datasources.base import DataSource
from ..datasources.file_replay import FileReplayDataSource
from ..datasources.live_arcconf import LiveArcconfDataSource
from ..health.evaluator import HealthEvaluator, HealthReport
from ..parse.extractors import parse_controller, parse_logical, parse_physical
from ..parse.sections import split_sections
from ..schema.models import ArcconfReport
from .config import ProbeConfig


class HealthProbe:
    """Runs one arcconf health check from a ProbeConfig.

    ProbeError subclasses raised by the data source or the splitter are
    left to propagate; the caller turns them into plugin output.
    """

    def __init__(self, config: ProbeConfig, datasource: Optional[DataSource] = None):
        """Initialize probe with configuration.

        Args:
            config: Probe configuration object
            datasource: Report source override (tests); chosen from config if None
        """
        self.config = config
        self.logger = logging.getLogger(__name__)
        self.datasource = datasource or self._create_datasource()

    def _create_datasource(self) -> DataSource:
        if self.config.use_dry_run:
            self.logger.info("Using file replay mode")
            return FileReplayDataSource(self.config.to_dict())

        self.logger.info("Using live arcconf mode")
        return LiveArcconfDataSource(self.config.to_dict())

    def parse(self, text: str) -> ArcconfReport:
        """Turn raw GETCONFIG output into an ArcconfReport."""
        sections = split_sections(text)
        report = ArcconfReport(
            controller=parse_controller(sections.controller),
            logical=parse_logical(sections.logical),
        )
        if self.config.include_physical:
            report.physical = parse_physical(sections.physical)
        return report

    def run(self) -> HealthReport:
        self.logger.info(f"Reading arcconf report from {self.datasource.description}")
        report = self.parse(self.datasource.read_report())

        result = HealthEvaluator(include_physical=self.config.include_physical).evaluate(report)
        self.logger.info(f"Evaluation finished with state {result.severity.name}")
        return result
