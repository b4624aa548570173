"""Serialise risk summaries and persist them as JSON and CSV artefacts."""
from __future__ import annotations

import json
from dataclasses import asdict
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Sequence

import pandas as pd

from fleet_risk.core.entities import EntityRiskProfile, RiskSummary

RANKING_COLUMNS = (
    "rank",
    "entity",
    "total_events",
    "fatigue_count",
    "distraction_count",
    "fatigue_pct",
    "distraction_pct",
    "high_speed_count",
    "recurrence_days",
    "dominant_segment",
    "base",
    "speed_factor",
    "recurrence_factor",
    "raw_score",
    "score",
    "level",
)


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {key: _to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    return value


def summary_to_dict(summary: RiskSummary) -> dict[str, Any]:
    return _to_jsonable(asdict(summary))


def profiles_to_frame(profiles: Sequence[EntityRiskProfile]) -> pd.DataFrame:
    rows = [
        {
            "rank": position,
            "entity": profile.entity_id,
            "total_events": profile.total_events,
            "fatigue_count": profile.distribution.fatigue_count,
            "distraction_count": profile.distribution.distraction_count,
            "fatigue_pct": profile.distribution.fatigue_pct,
            "distraction_pct": profile.distribution.distraction_pct,
            "high_speed_count": profile.factors.high_speed_count,
            "recurrence_days": profile.factors.recurrence_days,
            "dominant_segment": (
                profile.factors.dominant_segment.value if profile.factors.dominant_segment else ""
            ),
            "base": profile.score.base,
            "speed_factor": round(profile.score.speed_factor, 4),
            "recurrence_factor": round(profile.score.recurrence_factor, 4),
            "raw_score": round(profile.score.raw_score, 4),
            "score": profile.score.normalized_score,
            "level": profile.score.level.value,
        }
        for position, profile in enumerate(profiles, start=1)
    ]
    return pd.DataFrame(rows, columns=list(RANKING_COLUMNS))


class FileSystemRiskReportRepository:
    """Persist a risk summary and its ranking tables under one directory."""

    def __init__(self, output_dir: Path, summary_name: str = "risk_summary.json") -> None:
        self._output_dir = Path(output_dir)
        self._summary_name = summary_name

    def save_summary(self, summary: RiskSummary) -> Path:
        self._ensure_output_dir()
        destination = self._output_dir / self._summary_name
        serialisable = json.dumps(summary_to_dict(summary), ensure_ascii=False, indent=2)
        destination.write_text(serialisable, encoding="utf-8")
        return destination

    def save_rankings(self, summary: RiskSummary) -> Mapping[str, Path]:
        self._ensure_output_dir()
        saved: dict[str, Path] = {}
        for name, profiles in (
            ("operators", summary.operator_profiles),
            ("vehicles", summary.vehicle_profiles),
        ):
            destination = self._output_dir / f"{name}.csv"
            profiles_to_frame(profiles).to_csv(destination, index=False)
            saved[name] = destination
        return saved

    def _ensure_output_dir(self) -> None:
        if not self._output_dir.is_dir():
            raise FileNotFoundError(f"Expected directory to exist: {self._output_dir}")


__all__ = [
    "FileSystemRiskReportRepository",
    "RANKING_COLUMNS",
    "profiles_to_frame",
    "summary_to_dict",
]
