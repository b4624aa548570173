"""Normalise raw event codes and timestamps into domain categories."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from fleet_risk.core.entities import DaySegment, Event, EventKind
from fleet_risk.core.policy import DEFAULT_POLICY, RiskPolicy

SEGMENT_ORDER: tuple[DaySegment, ...] = (
    DaySegment.NIGHT,
    DaySegment.MORNING,
    DaySegment.AFTERNOON,
    DaySegment.EVENING,
)


class EventClassifier:
    """Map event codes to recognised kinds using the configured literals."""

    def __init__(self, policy: RiskPolicy = DEFAULT_POLICY) -> None:
        self._codes = {
            policy.fatigue_code.strip(): EventKind.FATIGUE,
            policy.distraction_code.strip(): EventKind.DISTRACTION,
        }

    def classify_kind(self, event: Event) -> EventKind:
        code = _clean(event.kind_code)
        if not code:
            return EventKind.OTHER
        return self._codes.get(code, EventKind.OTHER)

    def is_recognized(self, event: Event) -> bool:
        return self.classify_kind(event) is not EventKind.OTHER

    @staticmethod
    def classify_segment(timestamp: datetime) -> DaySegment:
        return SEGMENT_ORDER[timestamp.hour // 6]


def _clean(value: Optional[str]) -> str:
    if value is None:
        return ""
    return str(value).strip()


def clean_id(value: Optional[str]) -> str:
    """Trim an operator or vehicle identifier; missing values become ``""``."""

    return _clean(value)


_DEFAULT_CLASSIFIER = EventClassifier()


def classify_kind(event: Event, policy: RiskPolicy = DEFAULT_POLICY) -> EventKind:
    classifier = _DEFAULT_CLASSIFIER if policy is DEFAULT_POLICY else EventClassifier(policy)
    return classifier.classify_kind(event)


def classify_segment(timestamp: datetime) -> DaySegment:
    return EventClassifier.classify_segment(timestamp)


__all__ = [
    "EventClassifier",
    "SEGMENT_ORDER",
    "classify_kind",
    "classify_segment",
    "clean_id",
]
