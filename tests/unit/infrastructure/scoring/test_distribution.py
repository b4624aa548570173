"""Unit tests for the event distribution counter."""
from __future__ import annotations

import pytest

from fleet_risk.core.entities import EventDistribution
from fleet_risk.infrastructure.scoring.distribution import count_distribution


def test_empty_input_yields_all_zero_distribution() -> None:
    assert count_distribution([]) == EventDistribution()


def test_unrecognised_kinds_are_excluded(make_event) -> None:
    events = [
        make_event("2024-01-05T08:00", "D1"),
        make_event("2024-01-05T09:00", "D1"),
        make_event("2024-01-05T10:00", "D3"),
        make_event("2024-01-05T11:00", "Exceso de velocidad"),
        make_event("2024-01-05T12:00", None),
    ]

    distribution = count_distribution(events)

    assert distribution.fatigue_count == 2
    assert distribution.distraction_count == 1
    assert distribution.total == 3
    assert distribution.fatigue_pct == 66.7
    assert distribution.distraction_pct == 33.3


def test_only_unrecognised_events_keep_percentages_at_zero(make_event) -> None:
    distribution = count_distribution([make_event("2024-01-05T08:00", "X")] * 4)

    assert distribution.total == 0
    assert distribution.fatigue_pct == 0
    assert distribution.distraction_pct == 0


@pytest.mark.parametrize(("fatigue", "distraction"), [(1, 2), (5, 2), (1, 6), (7, 0), (2, 1), (3, 997)])
def test_percentages_add_up_to_one_hundred(make_event, fatigue: int, distraction: int) -> None:
    events = [make_event("2024-01-05T08:00", "D1")] * fatigue + [
        make_event("2024-01-05T08:00", "D3")
    ] * distraction

    distribution = count_distribution(events)

    assert distribution.fatigue_pct + distribution.distraction_pct == pytest.approx(100, abs=0.1)
