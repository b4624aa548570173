"""Use case for raising the period's security alert."""
from __future__ import annotations

from typing import Protocol, Sequence

from fleet_risk.core.entities import Event, SecurityAlert
from fleet_risk.core.policy import DEFAULT_POLICY, RiskPolicy
from fleet_risk.infrastructure.alerts.detector import SecurityAlertDetector
from fleet_risk.utils.logger import logger


class AlertDetector(Protocol):
    def detect(self, events: Sequence[Event]) -> SecurityAlert:
        ...


class DetectSecurityAlertUseCase:
    def __init__(self, detector: AlertDetector) -> None:
        self._detector = detector

    @classmethod
    def default(cls, policy: RiskPolicy = DEFAULT_POLICY) -> "DetectSecurityAlertUseCase":
        return cls(SecurityAlertDetector(policy))

    def execute(self, events: Sequence[Event]) -> SecurityAlert:
        alert = self._detector.detect(events)
        logger.info("Security alert for {} events: {} {}", len(events), alert.severity.value, alert.code)
        return alert


__all__ = ["AlertDetector", "DetectSecurityAlertUseCase"]
