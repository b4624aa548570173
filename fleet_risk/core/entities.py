"""Core entities for the vehicle telemetry risk domain."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional


class EventKind(str, Enum):
    FATIGUE = "FATIGUE"
    DISTRACTION = "DISTRACTION"
    OTHER = "OTHER"


class DaySegment(str, Enum):
    """Fixed six-hour buckets of the day, declared in evaluation order."""

    NIGHT = "00-06"
    MORNING = "06-12"
    AFTERNOON = "12-18"
    EVENING = "18-24"


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def rank(self) -> int:
        return _LEVEL_RANK[self]


class AlertSeverity(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    OK = "OK"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_LEVEL_RANK = {RiskLevel.LOW: 0, RiskLevel.MEDIUM: 1, RiskLevel.HIGH: 2}
_SEVERITY_RANK = {
    AlertSeverity.OK: 0,
    AlertSeverity.MEDIUM: 1,
    AlertSeverity.HIGH: 2,
    AlertSeverity.CRITICAL: 3,
}


@dataclass(frozen=True)
class Event:
    """A single telemetry safety event as exported from the fleet platform."""

    timestamp: datetime
    operator_id: Optional[str] = None
    vehicle_id: Optional[str] = None
    kind_code: Optional[str] = None
    speed: float = 0.0
    description: Optional[str] = None
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def day(self) -> date:
        return self.timestamp.date()


@dataclass(frozen=True)
class EventDistribution:
    fatigue_count: int = 0
    distraction_count: int = 0
    total: int = 0
    fatigue_pct: float = 0.0
    distraction_pct: float = 0.0


@dataclass(frozen=True)
class RiskFactors:
    """Severity-amplifying signals derived from an event subset."""

    high_speed_count: int = 0
    recurrence_days: int = 0
    dominant_segment: Optional[DaySegment] = None
    dominant_segment_count: int = 0
    active_days: int = 0


@dataclass(frozen=True)
class RiskScore:
    base: float
    speed_factor: float
    recurrence_factor: float
    raw_score: float
    normalized_score: float = 0.0
    level: RiskLevel = RiskLevel.LOW


@dataclass(frozen=True)
class EntityRiskProfile:
    entity_id: str
    total_events: int
    distribution: EventDistribution
    factors: RiskFactors
    score: RiskScore


@dataclass(frozen=True)
class RiskDrivers:
    """Percentage breakdown of what pushes an entity's score up."""

    entity_id: str
    normalized_score: float
    fatigue_pct: float
    speed_pct: float
    recurrence_pct: float


@dataclass(frozen=True)
class SecurityAlert:
    severity: AlertSeverity
    code: str
    message: str
    related_operator: Optional[str] = None
    related_vehicle: Optional[str] = None
    related_count: Optional[int] = None
    related_date: Optional[date] = None
    period_start: Optional[date] = None
    period_end: Optional[date] = None


@dataclass(frozen=True)
class RiskSummary:
    """Executive view of one observation period."""

    period_start: Optional[date]
    period_end: Optional[date]
    period_label: str
    total_events: int
    distribution: EventDistribution
    alert: SecurityAlert
    operator_profiles: list[EntityRiskProfile] = field(default_factory=list)
    vehicle_profiles: list[EntityRiskProfile] = field(default_factory=list)
    high_risk_operators: list[EntityRiskProfile] = field(default_factory=list)
    high_risk_vehicles: list[EntityRiskProfile] = field(default_factory=list)
    worst_event: Optional[Event] = None
    worst_event_narrative: Optional[str] = None
    conclusion: str = ""


__all__ = [
    "AlertSeverity",
    "DaySegment",
    "EntityRiskProfile",
    "Event",
    "EventDistribution",
    "EventKind",
    "RiskDrivers",
    "RiskFactors",
    "RiskLevel",
    "RiskScore",
    "RiskSummary",
    "SecurityAlert",
]
