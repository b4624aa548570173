"""Use case for assembling the executive risk summary of a period."""
from __future__ import annotations

from typing import Sequence

from fleet_risk.core.entities import (
    AlertSeverity,
    EntityRiskProfile,
    Event,
    EventDistribution,
    RiskLevel,
    RiskSummary,
    SecurityAlert,
)
from fleet_risk.core.policy import DEFAULT_POLICY, RiskPolicy
from fleet_risk.infrastructure.alerts.messages import describe_event_risk
from fleet_risk.infrastructure.alerts.worst_event import pick_worst_event
from fleet_risk.infrastructure.scoring.distribution import count_distribution
from fleet_risk.use_cases.detect_alerts import DetectSecurityAlertUseCase
from fleet_risk.use_cases.profile_entities import ComputeRiskProfilesUseCase
from fleet_risk.utils.dates import date_range, format_short_date
from fleet_risk.utils.logger import logger

NORMAL_CONCLUSION = "Estado operativo dentro de parámetros normales."


def period_label(events: Sequence[Event]) -> str:
    period = date_range(events)
    if period is None:
        return "Período sin eventos"
    start, end = period
    if start == end:
        return f"Reporte del {format_short_date(start)}"
    return f"{format_short_date(start)} - {format_short_date(end)}"


def build_conclusion(
    alert: SecurityAlert,
    distribution: EventDistribution,
    high_risk_operators: Sequence[EntityRiskProfile],
    high_risk_vehicles: Sequence[EntityRiskProfile],
) -> str:
    parts: list[str] = []
    if alert.severity is AlertSeverity.CRITICAL:
        parts.append("Alerta crítica")
    elif alert.severity is AlertSeverity.HIGH:
        parts.append("Requiere atención inmediata")

    if distribution.fatigue_pct > 50:
        parts.append(f"fatiga dominante ({distribution.fatigue_pct:g}%)")

    priorities: list[str] = []
    if high_risk_operators:
        count = len(high_risk_operators)
        priorities.append(f"{count} operador{'es' if count > 1 else ''}")
    if high_risk_vehicles:
        count = len(high_risk_vehicles)
        priorities.append(f"{count} vehículo{'s' if count > 1 else ''}")
    if priorities:
        parts.append("prioridad: " + " y ".join(priorities))

    if not parts:
        return NORMAL_CONCLUSION
    return " • ".join(parts).upper() + "."


class BuildRiskSummaryUseCase:
    """Combine profiles, the security alert and the worst event of a period."""

    def __init__(
        self,
        profiles: ComputeRiskProfilesUseCase,
        alerts: DetectSecurityAlertUseCase,
        policy: RiskPolicy = DEFAULT_POLICY,
    ) -> None:
        self._profiles = profiles
        self._alerts = alerts
        self._policy = policy

    @classmethod
    def default(cls, policy: RiskPolicy = DEFAULT_POLICY) -> "BuildRiskSummaryUseCase":
        return cls(
            profiles=ComputeRiskProfilesUseCase.default(policy),
            alerts=DetectSecurityAlertUseCase.default(policy),
            policy=policy,
        )

    def execute(self, events: Sequence[Event]) -> RiskSummary:
        logger.info("Building risk summary for {} events", len(events))
        operators = self._profiles.execute(events, by="operator")
        vehicles = self._profiles.execute(events, by="vehicle")
        alert = self._alerts.execute(events)
        distribution = count_distribution(events, self._policy)

        high_operators = [item for item in operators if item.score.level is RiskLevel.HIGH]
        high_vehicles = [item for item in vehicles if item.score.level is RiskLevel.HIGH]

        worst = pick_worst_event(events, self._policy)
        period = date_range(events)
        return RiskSummary(
            period_start=period[0] if period else None,
            period_end=period[1] if period else None,
            period_label=period_label(events),
            total_events=len(events),
            distribution=distribution,
            alert=alert,
            operator_profiles=operators,
            vehicle_profiles=vehicles,
            high_risk_operators=high_operators,
            high_risk_vehicles=high_vehicles,
            worst_event=worst,
            worst_event_narrative=describe_event_risk(worst, self._policy) if worst else None,
            conclusion=build_conclusion(alert, distribution, high_operators, high_vehicles),
        )


__all__ = [
    "BuildRiskSummaryUseCase",
    "NORMAL_CONCLUSION",
    "build_conclusion",
    "period_label",
]
