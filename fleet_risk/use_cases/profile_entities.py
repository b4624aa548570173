"""Use case for ranking operators and vehicles by risk."""
from __future__ import annotations

from typing import Protocol, Sequence

from fleet_risk.core.entities import EntityRiskProfile, Event
from fleet_risk.core.policy import DEFAULT_POLICY, RiskPolicy
from fleet_risk.infrastructure.scoring.profiler import EntityProfiler
from fleet_risk.utils.logger import logger


class RiskProfiler(Protocol):
    def profile(self, events: Sequence[Event]) -> list[EntityRiskProfile]:
        ...


class ComputeRiskProfilesUseCase:
    """Produce population-normalised profiles grouped by operator or vehicle."""

    GROUPINGS = ("operator", "vehicle")

    def __init__(self, operator_profiler: RiskProfiler, vehicle_profiler: RiskProfiler) -> None:
        self._profilers = {"operator": operator_profiler, "vehicle": vehicle_profiler}

    @classmethod
    def default(cls, policy: RiskPolicy = DEFAULT_POLICY) -> "ComputeRiskProfilesUseCase":
        return cls(
            operator_profiler=EntityProfiler.for_operators(policy),
            vehicle_profiler=EntityProfiler.for_vehicles(policy),
        )

    def execute(self, events: Sequence[Event], by: str = "operator") -> list[EntityRiskProfile]:
        profiler = self._profilers.get(by)
        if profiler is None:
            raise ValueError(f"Unknown grouping '{by}'; expected one of {', '.join(self.GROUPINGS)}")

        profiles = profiler.profile(events)
        logger.info("Scored {} {} profiles from {} events", len(profiles), by, len(events))
        return profiles


__all__ = ["ComputeRiskProfilesUseCase", "RiskProfiler"]
