"""Policy constants that drive scoring and alerting."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class RiskPolicy:
    """Thresholds and weights shared by every scoring and alerting component."""

    fatigue_code: str = "D1"
    distraction_code: str = "D3"
    fatigue_weight: float = 3.0
    distraction_weight: float = 2.0
    high_speed_threshold: float = 80.0
    factor_cap: float = 0.5
    critical_day_min_events: int = 3
    reference_percentile: float = 0.95
    low_max: float = 20.0
    medium_max: float = 50.0
    critical_fatigue_min_events: int = 3
    vehicle_recurrence_min_events: int = 10

    def __post_init__(self) -> None:
        if not self.fatigue_code.strip() or not self.distraction_code.strip():
            raise ValueError("Event kind codes must be non-empty.")
        if self.fatigue_code.strip() == self.distraction_code.strip():
            raise ValueError("Fatigue and distraction codes must differ.")
        if self.high_speed_threshold <= 0:
            raise ValueError("'high_speed_threshold' must be positive.")
        if self.factor_cap < 0:
            raise ValueError("'factor_cap' cannot be negative.")
        if not 0 < self.reference_percentile <= 1:
            raise ValueError("'reference_percentile' must be within (0, 1].")
        if self.low_max > self.medium_max:
            raise ValueError(
                f"'low_max' ({self.low_max}) cannot be greater than 'medium_max' ({self.medium_max})."
            )
        for name in (
            "critical_day_min_events",
            "critical_fatigue_min_events",
            "vehicle_recurrence_min_events",
        ):
            if getattr(self, name) < 1:
                raise ValueError(f"'{name}' must be at least 1.")

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | None) -> "RiskPolicy":
        """Build a policy from the ``scoring`` and ``alerts`` sections of a config."""

        if not config:
            return cls()

        known = {item.name: item.type for item in fields(cls)}
        values: dict[str, Any] = {}
        for section in ("scoring", "alerts"):
            entries = config.get(section) or {}
            if not isinstance(entries, Mapping):
                raise ValueError(f"Config section '{section}' must be a mapping.")
            for key, value in entries.items():
                if key not in known or value is None:
                    continue
                values[key] = _coerce(key, value, known[key])
        return cls(**values)


def _coerce(key: str, value: Any, annotation: Any) -> Any:
    kind = str(annotation)
    try:
        if kind == "str":
            return str(value)
        if kind == "int":
            return int(value)
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid value for '{key}': {value!r}") from exc


DEFAULT_POLICY = RiskPolicy()

__all__ = ["DEFAULT_POLICY", "RiskPolicy"]
