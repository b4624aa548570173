"""Pytest configuration for the project."""
from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fleet_risk.core.entities import Event  # noqa: E402


def _make_event(
    when: str,
    kind: Optional[str] = "D1",
    operator: Optional[str] = "A",
    vehicle: Optional[str] = "V1",
    speed: float = 0.0,
) -> Event:
    return Event(
        timestamp=datetime.fromisoformat(when),
        operator_id=operator,
        vehicle_id=vehicle,
        kind_code=kind,
        speed=speed,
    )


@pytest.fixture
def make_event():
    """Factory for events; ``when`` is an ISO timestamp string."""

    return _make_event
