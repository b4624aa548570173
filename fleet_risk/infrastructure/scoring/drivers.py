"""Break a profile's score into the factors that drive it."""
from __future__ import annotations

from typing import Iterable

from fleet_risk.core.entities import EntityRiskProfile, RiskDrivers, RiskLevel
from fleet_risk.utils.numbers import percentage


def compute_drivers(profile: EntityRiskProfile) -> RiskDrivers:
    return RiskDrivers(
        entity_id=profile.entity_id,
        normalized_score=profile.score.normalized_score,
        fatigue_pct=profile.distribution.fatigue_pct,
        speed_pct=percentage(profile.factors.high_speed_count, profile.total_events),
        recurrence_pct=percentage(profile.factors.recurrence_days, profile.factors.active_days),
    )


def high_risk_drivers(profiles: Iterable[EntityRiskProfile]) -> list[RiskDrivers]:
    """Drivers for HIGH profiles only, in the order the profiles were ranked."""

    return [compute_drivers(profile) for profile in profiles if profile.score.level is RiskLevel.HIGH]


__all__ = ["compute_drivers", "high_risk_drivers"]
