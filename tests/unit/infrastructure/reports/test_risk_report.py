"""Unit tests for risk report serialisation and persistence."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

pd = pytest.importorskip("pandas")

from fleet_risk.infrastructure.reports import (
    FileSystemRiskReportRepository,
    profiles_to_frame,
    summary_to_dict,
)
from fleet_risk.infrastructure.reports.risk_report import RANKING_COLUMNS
from fleet_risk.use_cases.build_risk_summary import BuildRiskSummaryUseCase


@pytest.fixture
def summary(make_event):
    events = [
        make_event("2024-01-05T08:00", "D1", operator="A", vehicle="V1", speed=90),
        make_event("2024-01-05T09:00", "D1", operator="A", vehicle="V1"),
        make_event("2024-01-05T10:00", "D1", operator="A", vehicle="V1"),
        make_event("2024-01-06T10:00", "D3", operator="B", vehicle="V2"),
    ]
    return BuildRiskSummaryUseCase.default().execute(events)


def test_profiles_to_frame_ranks_profiles(summary) -> None:
    frame = profiles_to_frame(summary.operator_profiles)

    assert list(frame.columns) == list(RANKING_COLUMNS)
    assert frame["rank"].tolist() == [1, 2]
    assert frame["entity"].tolist() == ["A", "B"]
    assert frame.loc[0, "level"] == "HIGH"
    assert frame.loc[0, "dominant_segment"] == "06-12"


def test_profiles_to_frame_handles_empty_rankings() -> None:
    frame = profiles_to_frame([])

    assert frame.empty
    assert list(frame.columns) == list(RANKING_COLUMNS)


def test_summary_to_dict_is_json_serialisable(summary) -> None:
    payload = summary_to_dict(summary)

    assert json.loads(json.dumps(payload))["alert"]["severity"] == "CRITICAL"
    assert payload["period_start"] == "2024-01-05"
    assert payload["worst_event"]["timestamp"] == "2024-01-05T08:00:00"


def test_repository_persists_summary_and_rankings(tmp_path: Path, summary) -> None:
    repository = FileSystemRiskReportRepository(tmp_path)

    summary_path = repository.save_summary(summary)
    rankings = repository.save_rankings(summary)

    saved = json.loads(summary_path.read_text(encoding="utf-8"))
    assert saved["conclusion"] == summary.conclusion
    assert set(rankings) == {"operators", "vehicles"}
    vehicles = pd.read_csv(rankings["vehicles"])
    assert vehicles["entity"].tolist() == ["V1", "V2"]


def test_repository_requires_existing_directory(tmp_path: Path, summary) -> None:
    repository = FileSystemRiskReportRepository(tmp_path / "missing")

    with pytest.raises(FileNotFoundError):
        repository.save_summary(summary)
