"""Descriptive statistics over one numeric sample.

Every function accepts any sequence of numbers and returns a zeroed result for
an empty sample instead of raising. Variance and standard deviation are the
population versions (divide by N).
"""

from __future__ import annotations
import math
from collections import Counter
from typing import Iterable, List, Sequence

import numpy as np

from survey_analytics.core.statistics.base import (
    CategoricalStats,
    CorrelationDirection,
    CorrelationResult,
    CorrelationStrength,
    Mode,
    OutlierReport,
    Percentiles,
    StatisticalSummary,
)


def _as_array(values: Iterable[float]) -> np.ndarray:
    return np.asarray(list(values), dtype=float)


def calculate_mean(values: Sequence[float]) -> float:
    arr = _as_array(values)
    if arr.size == 0:
        return 0.0
    return float(arr.mean())


def calculate_median(values: Sequence[float]) -> float:
    arr = _as_array(values)
    if arr.size == 0:
        return 0.0
    return float(np.median(arr))


def calculate_mode(values: Sequence[float]) -> Mode:
    """Most frequent value, a sorted list of tied values, or 0 when no value
    stands out (every distinct value occurs equally often)."""
    values = list(values)
    if not values:
        return 0

    freq = Counter(values)
    max_freq = max(freq.values())
    modes = sorted(v for v, c in freq.items() if c == max_freq)

    if len(modes) == len(freq) and (len(freq) > 1 or max_freq == 1):
        return 0
    return modes[0] if len(modes) == 1 else modes


def calculate_variance(values: Sequence[float]) -> float:
    arr = _as_array(values)
    if arr.size == 0:
        return 0.0
    return float(arr.var(ddof=0))


def calculate_standard_deviation(values: Sequence[float]) -> float:
    return math.sqrt(calculate_variance(values))


def calculate_percentile(values: Sequence[float], percentile: float) -> float:
    """Linear interpolation between order statistics at p/100 * (n - 1).

    Percentiles outside 0..100 are clamped to the nearest bound.
    """
    arr = _as_array(values)
    if arr.size == 0:
        return 0.0
    p = max(0.0, min(100.0, float(percentile)))
    return float(np.percentile(arr, p, method="linear"))


def calculate_percentiles(values: Sequence[float]) -> Percentiles:
    return Percentiles(
        p25=calculate_percentile(values, 25),
        p50=calculate_percentile(values, 50),
        p75=calculate_percentile(values, 75),
        p90=calculate_percentile(values, 90),
        p95=calculate_percentile(values, 95),
    )


def _strength(abs_coeff: float) -> CorrelationStrength:
    if abs_coeff >= 0.9:
        return "muito forte"
    if abs_coeff >= 0.7:
        return "forte"
    if abs_coeff >= 0.5:
        return "moderada"
    if abs_coeff >= 0.3:
        return "fraca"
    return "muito fraca"


def _direction(coeff: float) -> CorrelationDirection:
    if coeff > 0.1:
        return "positiva"
    if coeff < -0.1:
        return "negativa"
    return "nenhuma"


def calculate_correlation(x: Sequence[float], y: Sequence[float]) -> CorrelationResult:
    """Pearson coefficient with Portuguese strength/direction labels."""
    ax, ay = _as_array(x), _as_array(y)
    if ax.size != ay.size or ax.size == 0:
        return CorrelationResult(coefficient=0.0, strength="muito fraca", direction="nenhuma")

    dx = ax - ax.mean()
    dy = ay - ay.mean()
    denominator = math.sqrt(float((dx * dx).sum()) * float((dy * dy).sum()))
    coefficient = 0.0 if denominator == 0 else float((dx * dy).sum()) / denominator
    coefficient = max(-1.0, min(1.0, coefficient))

    return CorrelationResult(
        coefficient=coefficient,
        strength=_strength(abs(coefficient)),
        direction=_direction(coefficient),
    )


def calculate_statistical_summary(values: Sequence[float]) -> StatisticalSummary:
    values = list(values)
    if not values:
        return StatisticalSummary()

    lo, hi = float(min(values)), float(max(values))
    return StatisticalSummary(
        mean=calculate_mean(values),
        median=calculate_median(values),
        mode=calculate_mode(values),
        standard_deviation=calculate_standard_deviation(values),
        variance=calculate_variance(values),
        min=lo,
        max=hi,
        range=hi - lo,
        count=len(values),
        percentiles=calculate_percentiles(values),
    )


def identify_outliers(values: Sequence[float]) -> OutlierReport:
    """IQR fences: anything outside [Q1 - 1.5 IQR, Q3 + 1.5 IQR]."""
    values = list(values)
    if not values:
        return OutlierReport()

    q1 = calculate_percentile(values, 25)
    q3 = calculate_percentile(values, 75)
    iqr = q3 - q1
    lower = q1 - 1.5 * iqr
    upper = q3 + 1.5 * iqr

    outliers: List[float] = [v for v in values if v < lower or v > upper]
    return OutlierReport(
        outliers=outliers,
        lower_bound=lower,
        upper_bound=upper,
        q1=q1,
        q3=q3,
        iqr=iqr,
    )


def calculate_categorical_stats(values: Sequence[str]) -> CategoricalStats:
    values = [str(v) for v in values]
    if not values:
        return CategoricalStats()

    freq = Counter(values)
    total = len(values)
    # stable sort: ties keep first-seen order
    ranked = sorted(freq.items(), key=lambda kv: kv[1], reverse=True)

    return CategoricalStats(
        frequencies=dict(freq),
        percentages={k: (c / total) * 100 for k, c in freq.items()},
        most_frequent=ranked[0][0],
        least_frequent=ranked[-1][0],
        unique_count=len(freq),
    )
