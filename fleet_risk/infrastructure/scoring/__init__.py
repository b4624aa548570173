"""Distribution, factor, score and profile computations."""

from .distribution import count_distribution
from .drivers import compute_drivers, high_risk_drivers
from .factors import compute_factors, dominant_segment, recurrence_days
from .profiler import (
    UNKNOWN_OPERATOR,
    UNKNOWN_VEHICLE,
    EntityProfiler,
    compute_operator_profiles,
    compute_vehicle_profiles,
)
from .score import (
    classify_level,
    compute_raw_score,
    compute_score,
    normalize_population,
    reference_value,
)

__all__ = [
    "EntityProfiler",
    "UNKNOWN_OPERATOR",
    "UNKNOWN_VEHICLE",
    "classify_level",
    "compute_drivers",
    "compute_factors",
    "compute_operator_profiles",
    "compute_raw_score",
    "compute_score",
    "compute_vehicle_profiles",
    "count_distribution",
    "dominant_segment",
    "high_risk_drivers",
    "normalize_population",
    "recurrence_days",
    "reference_value",
]
