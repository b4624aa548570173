"""Pick the single event that best illustrates the period's risk."""
from __future__ import annotations

from typing import Optional, Sequence

from fleet_risk.core.entities import Event, EventKind
from fleet_risk.core.policy import DEFAULT_POLICY, RiskPolicy
from fleet_risk.infrastructure.events.classifier import EventClassifier, clean_id

_KIND_RANK = {EventKind.FATIGUE: 0, EventKind.DISTRACTION: 1}


def pick_worst_event(events: Sequence[Event], policy: RiskPolicy = DEFAULT_POLICY) -> Optional[Event]:
    """Highest speed first, then fatigue over distraction, then most recent."""

    classifier = EventClassifier(policy)
    candidates = [
        (event, classifier.classify_kind(event))
        for event in events
        if clean_id(event.operator_id) and clean_id(event.vehicle_id)
    ]
    candidates = [(event, kind) for event, kind in candidates if kind is not EventKind.OTHER]
    if not candidates:
        return None

    # two stable passes: newest first, then speed and kind on top of that order
    ordered = sorted(candidates, key=lambda item: item[0].timestamp, reverse=True)
    ordered.sort(key=lambda item: (-item[0].speed, _KIND_RANK[item[1]]))
    return ordered[0][0]


__all__ = ["pick_worst_event"]
