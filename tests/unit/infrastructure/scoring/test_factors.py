"""Unit tests for the risk factor extractor."""
from __future__ import annotations

from fleet_risk.core.entities import DaySegment, RiskFactors
from fleet_risk.infrastructure.scoring.factors import (
    compute_factors,
    dominant_segment,
    recurrence_days,
)


def test_high_speed_counts_every_kind_at_or_above_threshold(make_event) -> None:
    events = [
        make_event("2024-01-05T08:00", "D1", speed=80),
        make_event("2024-01-05T09:00", "D3", speed=79.9),
        make_event("2024-01-06T10:00", "OTRO", speed=120),
        make_event("2024-01-07T10:00", "D1", speed=0),
    ]

    assert compute_factors(events).high_speed_count == 2


def test_recurrence_counts_days_with_three_events_of_any_kind(make_event) -> None:
    events = [
        make_event("2024-01-05T01:00", "D1"),
        make_event("2024-01-05T09:00", "D3"),
        make_event("2024-01-05T23:30", "OTRO"),
        make_event("2024-01-06T08:00", "D1"),
        make_event("2024-01-06T09:00", "D1"),
    ]

    factors = compute_factors(events)

    assert factors.recurrence_days == 1
    assert factors.active_days == 2
    assert recurrence_days(events) == 1


def test_dominant_segment_ignores_unrecognised_events(make_event) -> None:
    events = [
        make_event("2024-01-05T20:00", "OTRO"),
        make_event("2024-01-05T21:00", "OTRO"),
        make_event("2024-01-05T22:00", "OTRO"),
        make_event("2024-01-05T08:00", "D1"),
    ]

    factors = compute_factors(events)

    assert factors.dominant_segment is DaySegment.MORNING
    assert factors.dominant_segment_count == 1


def test_dominant_segment_tie_goes_to_earlier_segment(make_event) -> None:
    events = [
        make_event("2024-01-05T20:00", "D3"),
        make_event("2024-01-05T14:00", "D1"),
        make_event("2024-01-05T03:00", "D1"),
    ]

    assert dominant_segment(events) is DaySegment.NIGHT
    assert compute_factors(list(reversed(events))).dominant_segment is DaySegment.NIGHT


def test_empty_subset_has_no_dominant_segment() -> None:
    assert compute_factors([]) == RiskFactors()
