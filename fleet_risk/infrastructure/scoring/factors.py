"""Severity-amplifying factors: speed, daily recurrence and time of day."""
from __future__ import annotations

from typing import Optional, Sequence

from fleet_risk.core.entities import DaySegment, Event, RiskFactors
from fleet_risk.core.policy import DEFAULT_POLICY, RiskPolicy
from fleet_risk.infrastructure.events.classifier import SEGMENT_ORDER, EventClassifier
from fleet_risk.utils.dates import group_by_day


def compute_factors(events: Sequence[Event], policy: RiskPolicy = DEFAULT_POLICY) -> RiskFactors:
    classifier = EventClassifier(policy)

    high_speed = sum(1 for event in events if event.speed >= policy.high_speed_threshold)

    # every event of the subset counts towards a critical day, whatever its kind
    by_day = group_by_day(events)
    critical_days = sum(
        1 for day_events in by_day.values() if len(day_events) >= policy.critical_day_min_events
    )

    buckets = {segment: 0 for segment in SEGMENT_ORDER}
    for event in events:
        if classifier.is_recognized(event):
            buckets[classifier.classify_segment(event.timestamp)] += 1

    dominant: Optional[DaySegment] = None
    dominant_count = 0
    for segment in SEGMENT_ORDER:
        if buckets[segment] > dominant_count:
            dominant = segment
            dominant_count = buckets[segment]

    return RiskFactors(
        high_speed_count=high_speed,
        recurrence_days=critical_days,
        dominant_segment=dominant,
        dominant_segment_count=dominant_count,
        active_days=len(by_day),
    )


def dominant_segment(
    events: Sequence[Event], policy: RiskPolicy = DEFAULT_POLICY
) -> Optional[DaySegment]:
    return compute_factors(events, policy).dominant_segment


def recurrence_days(events: Sequence[Event], policy: RiskPolicy = DEFAULT_POLICY) -> int:
    return compute_factors(events, policy).recurrence_days


__all__ = ["compute_factors", "dominant_segment", "recurrence_days"]
