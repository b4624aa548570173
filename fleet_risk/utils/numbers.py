"""Numeric helpers that never produce NaN or raise on empty denominators."""
from __future__ import annotations

import math


def round_one_decimal(value: float) -> float:
    """Round half away from zero to one decimal place."""

    if not math.isfinite(value):
        return 0.0
    scaled = math.floor(abs(value) * 10 + 0.5) / 10
    return math.copysign(scaled, value) if scaled else 0.0


def safe_ratio(numerator: float, denominator: float) -> float:
    if denominator <= 0:
        return 0.0
    result = numerator / denominator
    return result if math.isfinite(result) else 0.0


def percentage(part: float, whole: float) -> float:
    return round_one_decimal(safe_ratio(part, whole) * 100)


__all__ = ["percentage", "round_one_decimal", "safe_ratio"]
