"""Weighted risk score with population-relative normalisation.

Scoring is a two-pass process. :func:`compute_raw_score` turns one entity's
distribution and factors into a raw score; :func:`normalize_population` then
rescales every raw score of a population against the value found at its
reference percentile (95th by default) and assigns the risk level. A raw score
on its own never determines the final 0-100 score.
"""
from __future__ import annotations

import math
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from fleet_risk.core.entities import Event, EventDistribution, RiskFactors, RiskLevel, RiskScore
from fleet_risk.core.policy import DEFAULT_POLICY, RiskPolicy
from fleet_risk.utils.dates import distinct_days
from fleet_risk.utils.logger import logger
from fleet_risk.utils.numbers import round_one_decimal, safe_ratio


def classify_level(score: float, policy: RiskPolicy = DEFAULT_POLICY) -> RiskLevel:
    if score <= policy.low_max:
        return RiskLevel.LOW
    if score <= policy.medium_max:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def compute_raw_score(
    distribution: EventDistribution,
    factors: RiskFactors,
    events: Sequence[Event],
    policy: RiskPolicy = DEFAULT_POLICY,
) -> RiskScore:
    """Return the provisional score of one entity (normalised fields unset)."""

    base = (
        distribution.fatigue_count * policy.fatigue_weight
        + distribution.distraction_count * policy.distraction_weight
    )
    speed_factor = 1 + min(
        policy.factor_cap, safe_ratio(factors.high_speed_count, max(1, distribution.total))
    )
    # the denominator only ever sees the days of this entity's own events
    days_observed = max(1, distinct_days(events))
    recurrence_factor = 1 + min(policy.factor_cap, safe_ratio(factors.recurrence_days, days_observed))

    return RiskScore(
        base=base,
        speed_factor=speed_factor,
        recurrence_factor=recurrence_factor,
        raw_score=base * speed_factor * recurrence_factor,
    )


def reference_value(raw_scores: Iterable[float], percentile: float = 0.95) -> float:
    """Return the population value at ``percentile`` (nearest-rank, floor index)."""

    ordered = sorted(_usable(value) for value in raw_scores)
    if not ordered:
        return 0.0
    index = min(math.floor(len(ordered) * percentile), len(ordered) - 1)
    return ordered[index]


def normalize_population(
    scores: Sequence[RiskScore], policy: RiskPolicy = DEFAULT_POLICY
) -> list[RiskScore]:
    """Finalise every score of a population against its shared reference."""

    reference = reference_value((score.raw_score for score in scores), policy.reference_percentile)
    logger.debug("Normalising {} raw scores against reference {}", len(scores), reference)
    return [_finalize(score, reference, policy) for score in scores]


def compute_score(
    distribution: EventDistribution,
    factors: RiskFactors,
    events: Sequence[Event],
    population: Optional[Sequence[float]] = None,
    policy: RiskPolicy = DEFAULT_POLICY,
) -> RiskScore:
    """Score one entity.

    ``population`` holds the raw scores of the group the entity belongs to. When
    omitted the entity is normalised against itself, which yields 100 for any
    positive raw score.
    """

    raw = compute_raw_score(distribution, factors, events, policy)
    candidates = [raw.raw_score] if population is None else population
    reference = reference_value(candidates, policy.reference_percentile)
    return _finalize(raw, reference, policy)


def _finalize(score: RiskScore, reference: float, policy: RiskPolicy) -> RiskScore:
    if reference <= 0:
        normalized = 0.0
    else:
        normalized = round_one_decimal(min(100.0, _usable(score.raw_score) / reference * 100))
    return replace(score, normalized_score=normalized, level=classify_level(normalized, policy))


def _usable(value: float) -> float:
    if value is None or not math.isfinite(value) or value < 0:
        return 0.0
    return float(value)


__all__ = [
    "classify_level",
    "compute_raw_score",
    "compute_score",
    "normalize_population",
    "reference_value",
]
