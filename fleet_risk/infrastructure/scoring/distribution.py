"""Count recognised safety events and derive their share per kind."""
from __future__ import annotations

from typing import Iterable

from fleet_risk.core.entities import Event, EventDistribution, EventKind
from fleet_risk.core.policy import DEFAULT_POLICY, RiskPolicy
from fleet_risk.infrastructure.events.classifier import EventClassifier
from fleet_risk.utils.numbers import percentage


def count_distribution(
    events: Iterable[Event], policy: RiskPolicy = DEFAULT_POLICY
) -> EventDistribution:
    """Return fatigue/distraction counts; unrecognised kinds are ignored."""

    classifier = EventClassifier(policy)
    fatigue = 0
    distraction = 0
    for event in events:
        kind = classifier.classify_kind(event)
        if kind is EventKind.FATIGUE:
            fatigue += 1
        elif kind is EventKind.DISTRACTION:
            distraction += 1

    total = fatigue + distraction
    return EventDistribution(
        fatigue_count=fatigue,
        distraction_count=distraction,
        total=total,
        fatigue_pct=percentage(fatigue, total),
        distraction_pct=percentage(distraction, total),
    )


__all__ = ["count_distribution"]
