"""Load mapped telemetry exports (one row per event) into domain events."""
from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Mapping, Optional

import pandas as pd

from fleet_risk.core.entities import Event
from fleet_risk.utils.logger import logger

DEFAULT_COLUMNS: Mapping[str, str] = {
    "timestamp": "fecha",
    "operator_id": "operador",
    "vehicle_id": "vehiculo",
    "kind_code": "evento",
    "speed": "velocidad",
    "description": "descripcion",
    "address": "direccion",
    "latitude": "latitud",
    "longitude": "longitud",
}
REQUIRED_FIELDS = ("timestamp", "kind_code")


class EventCSVLoader:
    """Read a CSV export whose columns were already mapped to event fields."""

    def __init__(
        self,
        csv_path: Path,
        columns: Mapping[str, str] | None = None,
        dayfirst: bool = False,
    ) -> None:
        self._csv_path = Path(csv_path)
        self._columns = {**DEFAULT_COLUMNS, **(columns or {})}
        self._dayfirst = dayfirst

    def load(self) -> list[Event]:
        if not self._csv_path.exists():
            raise FileNotFoundError(f"Event log not found: {self._csv_path}")

        data = pd.read_csv(self._csv_path, dtype=str, keep_default_na=False)
        missing = [
            self._columns[name] for name in REQUIRED_FIELDS if self._columns[name] not in data.columns
        ]
        if missing:
            raise ValueError("Event log is missing required columns: " + ", ".join(sorted(missing)))

        logger.info("Loading {} event rows from {}", len(data), self._csv_path)
        return frame_to_events(data, self._columns, dayfirst=self._dayfirst)


def frame_to_events(
    data: pd.DataFrame,
    columns: Mapping[str, str] | None = None,
    dayfirst: bool = False,
) -> list[Event]:
    """Convert a mapped frame into events, dropping rows without a valid timestamp."""

    mapping = {**DEFAULT_COLUMNS, **(columns or {})}
    # exports often mix ISO and locale formats within one column
    timestamps = pd.to_datetime(
        data[mapping["timestamp"]], errors="coerce", dayfirst=dayfirst, format="mixed"
    )
    invalid = int(timestamps.isna().sum())
    if invalid:
        logger.warning("Dropping {} rows with an unparseable timestamp", invalid)

    events: list[Event] = []
    for position, (_, row) in enumerate(data.iterrows()):
        timestamp = timestamps.iloc[position]
        if pd.isna(timestamp):
            continue
        events.append(
            Event(
                timestamp=timestamp.to_pydatetime(),
                operator_id=_text(row, mapping["operator_id"]),
                vehicle_id=_text(row, mapping["vehicle_id"]),
                kind_code=_text(row, mapping["kind_code"]),
                speed=_speed(row, mapping["speed"]),
                description=_text(row, mapping["description"]),
                address=_text(row, mapping["address"]),
                latitude=_number(row, mapping["latitude"]),
                longitude=_number(row, mapping["longitude"]),
            )
        )
    return events


def _text(row: pd.Series, column: str) -> Optional[str]:
    if column not in row:
        return None
    value = row[column]
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    text = str(value).strip()
    return text or None


def _number(row: pd.Series, column: str) -> Optional[float]:
    raw = _text(row, column)
    if raw is None:
        return None
    return _parse_float(raw)


def _speed(row: pd.Series, column: str) -> float:
    value = _number(row, column)
    if value is None or value < 0:
        return 0.0
    return value


def _parse_float(raw: Any) -> Optional[float]:
    cleaned = str(raw).replace(",", "").replace(" ", "")
    try:
        value = float(cleaned)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


__all__ = ["DEFAULT_COLUMNS", "EventCSVLoader", "frame_to_events"]
