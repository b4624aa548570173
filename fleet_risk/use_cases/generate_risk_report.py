"""Use case for loading an event log and persisting its risk report."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Protocol, Sequence

from fleet_risk.core.entities import Event, RiskSummary
from fleet_risk.utils.logger import logger


class EventSource(Protocol):
    def load(self) -> list[Event]:
        ...


class SummaryBuilder(Protocol):
    def execute(self, events: Sequence[Event]) -> RiskSummary:
        ...


class ReportRepository(Protocol):
    def save_summary(self, summary: RiskSummary) -> Path:
        ...

    def save_rankings(self, summary: RiskSummary) -> Mapping[str, Path]:
        ...


@dataclass(frozen=True)
class RiskReportArtifacts:
    summary: RiskSummary
    summary_path: Path
    ranking_paths: Mapping[str, Path]


class GenerateRiskReportUseCase:
    def __init__(
        self,
        source: EventSource,
        summary_builder: SummaryBuilder,
        repository: ReportRepository,
    ) -> None:
        self._source = source
        self._summary_builder = summary_builder
        self._repository = repository

    def execute(self) -> RiskReportArtifacts:
        events = self._source.load()
        summary = self._summary_builder.execute(events)
        summary_path = self._repository.save_summary(summary)
        ranking_paths = self._repository.save_rankings(summary)
        logger.info("Risk report written: {} ({})", summary_path, summary.alert.severity.value)
        return RiskReportArtifacts(
            summary=summary,
            summary_path=summary_path,
            ranking_paths=ranking_paths,
        )


__all__ = [
    "EventSource",
    "GenerateRiskReportUseCase",
    "ReportRepository",
    "RiskReportArtifacts",
    "SummaryBuilder",
]
