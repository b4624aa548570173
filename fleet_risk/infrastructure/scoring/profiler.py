"""Group events by operator or vehicle and rank the resulting risk profiles."""
from __future__ import annotations

from typing import Callable, Sequence

from fleet_risk.core.entities import EntityRiskProfile, Event
from fleet_risk.core.policy import DEFAULT_POLICY, RiskPolicy
from fleet_risk.infrastructure.events.classifier import clean_id
from fleet_risk.infrastructure.scoring.distribution import count_distribution
from fleet_risk.infrastructure.scoring.factors import compute_factors
from fleet_risk.infrastructure.scoring.score import compute_raw_score, normalize_population
from fleet_risk.utils.logger import logger

UNKNOWN_OPERATOR = "Sin operador"
UNKNOWN_VEHICLE = "Sin vehículo"

KeyFunction = Callable[[Event], str]


class EntityProfiler:
    """Build population-normalised risk profiles for one grouping key."""

    def __init__(
        self,
        key: KeyFunction,
        unknown_label: str,
        policy: RiskPolicy = DEFAULT_POLICY,
    ) -> None:
        self._key = key
        self._unknown_label = unknown_label
        self._policy = policy

    @classmethod
    def for_operators(cls, policy: RiskPolicy = DEFAULT_POLICY) -> "EntityProfiler":
        return cls(
            key=lambda event: clean_id(event.operator_id),
            unknown_label=UNKNOWN_OPERATOR,
            policy=policy,
        )

    @classmethod
    def for_vehicles(cls, policy: RiskPolicy = DEFAULT_POLICY) -> "EntityProfiler":
        return cls(
            key=lambda event: clean_id(event.vehicle_id),
            unknown_label=UNKNOWN_VEHICLE,
            policy=policy,
        )

    def group(self, events: Sequence[Event]) -> dict[str, list[Event]]:
        groups: dict[str, list[Event]] = {}
        for event in events:
            entity_id = self._key(event) or self._unknown_label
            groups.setdefault(entity_id, []).append(event)
        return groups

    def profile(self, events: Sequence[Event]) -> list[EntityRiskProfile]:
        groups = self.group(events)
        logger.debug("Profiling {} events across {} groups", len(events), len(groups))

        provisional: list[EntityRiskProfile] = []
        for entity_id, group_events in groups.items():
            distribution = count_distribution(group_events, self._policy)
            factors = compute_factors(group_events, self._policy)
            provisional.append(
                EntityRiskProfile(
                    entity_id=entity_id,
                    total_events=len(group_events),
                    distribution=distribution,
                    factors=factors,
                    score=compute_raw_score(distribution, factors, group_events, self._policy),
                )
            )

        finalized = normalize_population([item.score for item in provisional], self._policy)
        profiles = [
            EntityRiskProfile(
                entity_id=item.entity_id,
                total_events=item.total_events,
                distribution=item.distribution,
                factors=item.factors,
                score=score,
            )
            for item, score in zip(provisional, finalized)
        ]
        # sorted() is stable, equal scores keep first-seen group order
        return sorted(profiles, key=lambda item: item.score.normalized_score, reverse=True)


def compute_operator_profiles(
    events: Sequence[Event], policy: RiskPolicy = DEFAULT_POLICY
) -> list[EntityRiskProfile]:
    return EntityProfiler.for_operators(policy).profile(events)


def compute_vehicle_profiles(
    events: Sequence[Event], policy: RiskPolicy = DEFAULT_POLICY
) -> list[EntityRiskProfile]:
    return EntityProfiler.for_vehicles(policy).profile(events)


__all__ = [
    "EntityProfiler",
    "UNKNOWN_OPERATOR",
    "UNKNOWN_VEHICLE",
    "compute_operator_profiles",
    "compute_vehicle_profiles",
]
