"""Calendar-day helpers used to bucket events by local date."""
from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Sequence

from fleet_risk.core.entities import Event

_MONTHS_ES = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)


def group_by_day(events: Iterable[Event]) -> dict[date, list[Event]]:
    """Group events by calendar day, keeping first-seen day order."""

    grouped: dict[date, list[Event]] = defaultdict(list)
    for event in events:
        grouped[event.day].append(event)
    return dict(grouped)


def distinct_days(events: Iterable[Event]) -> int:
    return len({event.day for event in events})


def date_range(events: Sequence[Event]) -> tuple[date, date] | None:
    if not events:
        return None
    days = [event.day for event in events]
    return min(days), max(days)


def format_long_date(value: date) -> str:
    """Render ``value`` as ``5 de enero de 2024``."""

    return f"{value.day} de {_MONTHS_ES[value.month - 1]} de {value.year}"


def format_short_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")


__all__ = [
    "date_range",
    "distinct_days",
    "format_long_date",
    "format_short_date",
    "group_by_day",
]
