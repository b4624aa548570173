"""Priority-ordered security alert rules over a raw event stream."""
from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from fleet_risk.core.entities import AlertSeverity, Event, EventKind, SecurityAlert
from fleet_risk.core.policy import DEFAULT_POLICY, RiskPolicy
from fleet_risk.infrastructure.alerts.messages import (
    NO_ALERTS_MESSAGE,
    critical_fatigue_message,
    high_speed_message,
    vehicle_recurrence_message,
)
from fleet_risk.infrastructure.events.classifier import EventClassifier, clean_id
from fleet_risk.utils.dates import date_range
from fleet_risk.utils.logger import logger


class SecurityAlertDetector:
    """Return the single most severe alert that holds for a set of events.

    Rules are evaluated CRITICAL, HIGH, MEDIUM and the first match wins, so an
    unrelated lower-severity condition is never reported while a higher one holds.
    """

    def __init__(self, policy: RiskPolicy = DEFAULT_POLICY) -> None:
        self._policy = policy
        self._classifier = EventClassifier(policy)

    def detect(self, events: Sequence[Event]) -> SecurityAlert:
        if not events:
            return SecurityAlert(severity=AlertSeverity.OK, code="NO_EVENTS", message=NO_ALERTS_MESSAGE)

        for rule in (self._critical_fatigue, self._high_speed, self._vehicle_recurrence):
            alert = rule(events)
            if alert is not None:
                logger.debug("Alert rule matched: {} ({})", alert.code, alert.severity.value)
                return alert

        return SecurityAlert(severity=AlertSeverity.OK, code="NO_ALERTS", message=NO_ALERTS_MESSAGE)

    def _critical_fatigue(self, events: Sequence[Event]) -> Optional[SecurityAlert]:
        clusters: dict[tuple[str, date], int] = {}
        for event in events:
            operator = clean_id(event.operator_id)
            if not operator or self._classifier.classify_kind(event) is not EventKind.FATIGUE:
                continue
            key = (operator, event.day)
            clusters[key] = clusters.get(key, 0) + 1

        critical = next(
            (key for key, count in clusters.items() if count >= self._policy.critical_fatigue_min_events),
            None,
        )
        if critical is None:
            return None

        operator, cluster_day = critical
        operator_events = [
            event
            for event in events
            if clean_id(event.operator_id) == operator and self._classifier.is_recognized(event)
        ]
        start, end = date_range(operator_events) or (cluster_day, cluster_day)
        return SecurityAlert(
            severity=AlertSeverity.CRITICAL,
            code="CRITICAL_FATIGUE",
            message=critical_fatigue_message(operator, start, end, len(operator_events)),
            related_operator=operator,
            related_count=len(operator_events),
            related_date=cluster_day,
            period_start=start,
            period_end=end,
        )

    def _high_speed(self, events: Sequence[Event]) -> Optional[SecurityAlert]:
        for event in events:
            vehicle = clean_id(event.vehicle_id)
            if (
                vehicle
                and event.speed >= self._policy.high_speed_threshold
                and self._classifier.is_recognized(event)
            ):
                return SecurityAlert(
                    severity=AlertSeverity.HIGH,
                    code="HIGH_SPEED_RISK",
                    message=high_speed_message(vehicle, event.speed),
                    related_vehicle=vehicle,
                    related_count=1,
                    related_date=event.day,
                )
        return None

    def _vehicle_recurrence(self, events: Sequence[Event]) -> Optional[SecurityAlert]:
        per_vehicle: dict[str, int] = {}
        for event in events:
            vehicle = clean_id(event.vehicle_id)
            if vehicle:
                per_vehicle[vehicle] = per_vehicle.get(vehicle, 0) + 1

        for vehicle, count in per_vehicle.items():
            if count >= self._policy.vehicle_recurrence_min_events:
                return SecurityAlert(
                    severity=AlertSeverity.MEDIUM,
                    code="VEHICLE_RECURRENCE",
                    message=vehicle_recurrence_message(vehicle, count),
                    related_vehicle=vehicle,
                    related_count=count,
                )
        return None


def detect(events: Sequence[Event], policy: RiskPolicy = DEFAULT_POLICY) -> SecurityAlert:
    return SecurityAlertDetector(policy).detect(events)


__all__ = ["SecurityAlertDetector", "detect"]
