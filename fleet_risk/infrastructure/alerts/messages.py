"""Human-readable alert messages and risk narratives."""
from __future__ import annotations

from datetime import date

from fleet_risk.core.entities import Event, EventKind
from fleet_risk.core.policy import DEFAULT_POLICY, RiskPolicy
from fleet_risk.infrastructure.events.classifier import EventClassifier
from fleet_risk.utils.dates import format_long_date

NO_ALERTS_MESSAGE = "Sin alertas críticas de seguridad detectadas."


def critical_fatigue_message(operator: str, start: date, end: date, count: int) -> str:
    if start == end:
        period = f"el {format_long_date(start)}"
    else:
        period = f"entre el {format_long_date(start)} y el {format_long_date(end)}"
    return (
        f"Conductor {operator} registró múltiples eventos de fatiga {period} "
        f"({count} eventos críticos). Riesgo alto de accidente."
    )


def high_speed_message(vehicle: str, speed: float) -> str:
    return (
        f"Evento de riesgo detectado a alta velocidad ({format_speed(speed)} km/h) "
        f"en vehículo {vehicle}."
    )


def format_speed(speed: float) -> str:
    """Fixed-point speed with one decimal, dropped when it is zero."""

    text = f"{speed:.1f}"
    return text[:-2] if text.endswith(".0") else text


def vehicle_recurrence_message(vehicle: str, count: int) -> str:
    return f"Vehículo {vehicle} presenta alta reincidencia de eventos críticos ({count} eventos)."


def describe_event_risk(event: Event, policy: RiskPolicy = DEFAULT_POLICY) -> str:
    """Explain why ``event`` is a road-safety risk."""

    kind = EventClassifier(policy).classify_kind(event)
    fast = event.speed >= policy.high_speed_threshold

    if kind is EventKind.FATIGUE:
        if fast:
            return (
                "Este tipo de evento está asociado a fatiga y disminución de reflejos, "
                "incrementando significativamente el riesgo de siniestros viales, especialmente "
                "cuando ocurre a alta velocidad en trayectos prolongados o nocturnos."
            )
        return (
            "Este tipo de evento está asociado a fatiga y disminución de reflejos, "
            "incrementando significativamente el riesgo de siniestros viales, especialmente "
            "en trayectos prolongados o nocturnos."
        )

    if kind is EventKind.DISTRACTION:
        if fast:
            return (
                "Este tipo de evento indica distracción del conductor, reduciendo su capacidad "
                "de reacción ante situaciones imprevistas, lo cual se agrava cuando ocurre a "
                "alta velocidad aumentando el riesgo de colisiones."
            )
        return (
            "Este tipo de evento indica distracción del conductor, reduciendo su capacidad "
            "de reacción ante situaciones imprevistas y aumentando el riesgo de colisiones."
        )

    if fast:
        return (
            "El exceso de velocidad reduce significativamente el tiempo de reacción del "
            "conductor y aumenta la severidad de posibles siniestros viales."
        )
    return "Este evento representa un riesgo para la seguridad vial y requiere atención preventiva."


__all__ = [
    "NO_ALERTS_MESSAGE",
    "critical_fatigue_message",
    "describe_event_risk",
    "format_speed",
    "high_speed_message",
    "vehicle_recurrence_message",
]
