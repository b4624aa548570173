"""Unit tests for the profiling and alerting use cases."""
from __future__ import annotations

from unittest.mock import Mock

import pytest

from fleet_risk.core.entities import AlertSeverity, SecurityAlert
from fleet_risk.use_cases.detect_alerts import DetectSecurityAlertUseCase
from fleet_risk.use_cases.profile_entities import ComputeRiskProfilesUseCase


def test_profiles_use_case_delegates_to_the_requested_grouping(make_event) -> None:
    operator_profiler = Mock()
    operator_profiler.profile.return_value = ["op"]
    vehicle_profiler = Mock()
    vehicle_profiler.profile.return_value = ["veh"]
    use_case = ComputeRiskProfilesUseCase(operator_profiler, vehicle_profiler)
    events = [make_event("2024-01-05T08:00")]

    assert use_case.execute(events) == ["op"]
    assert use_case.execute(events, by="vehicle") == ["veh"]
    operator_profiler.profile.assert_called_once_with(events)


def test_profiles_use_case_rejects_unknown_grouping() -> None:
    with pytest.raises(ValueError):
        ComputeRiskProfilesUseCase.default().execute([], by="route")


def test_default_profiles_use_case_scores_operators(make_event) -> None:
    events = [make_event("2024-01-05T08:00", "D1", operator="A")]

    (profile,) = ComputeRiskProfilesUseCase.default().execute(events)

    assert profile.entity_id == "A"
    assert profile.score.normalized_score == 100


def test_alert_use_case_returns_detector_result() -> None:
    expected = SecurityAlert(severity=AlertSeverity.MEDIUM, code="VEHICLE_RECURRENCE", message="m")
    detector = Mock()
    detector.detect.return_value = expected

    assert DetectSecurityAlertUseCase(detector).execute([]) is expected


def test_default_alert_use_case_detects_high_speed(make_event) -> None:
    events = [make_event("2024-01-05T08:00", "D3", vehicle="V4", speed=100)]

    alert = DetectSecurityAlertUseCase.default().execute(events)

    assert alert.severity is AlertSeverity.HIGH
    assert alert.related_vehicle == "V4"
