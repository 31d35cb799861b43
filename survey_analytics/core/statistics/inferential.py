"""Significance checks over survey samples.

Both tests use fixed critical values instead of the t / F distributions:
|t| > 1.96 and F > 3.84 (roughly alpha = 0.05 for large samples). The p-value
is the closed-form approximation ``2 * (1 - |t| / (|t| + sqrt(df)))``,
clamped to [0, 1].
"""

from __future__ import annotations
import math
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

import numpy as np

from survey_analytics.core.statistics.base import AnovaResult, HypothesisTestResult

T_CRITICAL = 1.96
F_CRITICAL = 3.84
MISSING_CATEGORY = "undefined"


def approximate_p_value(t_statistic: float, df: int) -> float:
    if df <= 0:
        return 1.0
    abs_t = abs(t_statistic)
    if math.isinf(abs_t):
        return 0.0
    p = 2 * (1 - abs_t / (abs_t + math.sqrt(df)))
    return max(0.0, min(1.0, p))


def perform_hypothesis_test(
    values: Sequence[float],
    hypothesized_mean: Optional[float] = None,
    *,
    critical_t: float = T_CRITICAL,
) -> HypothesisTestResult:
    """One-sample t-test of the sample mean against ``hypothesized_mean``.

    Without a hypothesized mean the sample is tested against its own mean,
    which can never be significant. Fewer than two values give a zeroed
    result. A constant sample that differs from the hypothesis gets an
    infinite t-statistic.
    """
    arr = np.asarray(list(values), dtype=float)
    if arr.size == 0:
        return HypothesisTestResult()

    mean = float(arr.mean())
    target = mean if hypothesized_mean is None else float(hypothesized_mean)
    if arr.size < 2:
        return HypothesisTestResult(sample_mean=mean, hypothesized_mean=target)

    diff = mean - target
    std = float(arr.std(ddof=1))
    if std == 0:
        t_stat = 0.0 if diff == 0 else math.copysign(math.inf, diff)
    else:
        t_stat = diff / (std / math.sqrt(arr.size))

    return HypothesisTestResult(
        sample_mean=mean,
        hypothesized_mean=target,
        t_statistic=t_stat,
        p_value=approximate_p_value(t_stat, arr.size - 1),
        significant=abs(t_stat) > critical_t,
    )


def group_values(
    values: Iterable[float], categories: Iterable[Optional[str]]
) -> Dict[str, List[float]]:
    """Bucket values by category, keeping first-seen category order."""
    groups: Dict[str, List[float]] = {}
    for value, category in zip(values, categories):
        key = str(category) if category not in (None, "") else MISSING_CATEGORY
        groups.setdefault(key, []).append(float(value))
    return groups


def perform_anova(
    groups: Mapping[str, Sequence[float]], *, critical_f: float = F_CRITICAL
) -> AnovaResult:
    """One-way ANOVA across the non-empty groups.

    Between-group variance is taken over the unweighted group means; the
    overall mean is the mean of those group means. Fewer than two groups, or
    no degrees of freedom left within groups, give F = 0.
    """
    arrays = {
        name: np.asarray(list(vals), dtype=float)
        for name, vals in groups.items()
        if len(vals) > 0
    }
    k = len(arrays)
    if k == 0:
        return AnovaResult()

    means = {name: float(arr.mean()) for name, arr in arrays.items()}
    overall = float(np.mean(list(means.values())))
    total = sum(arr.size for arr in arrays.values())
    if k < 2 or total - k <= 0:
        return AnovaResult(groups=k, group_means=means, overall_mean=overall)

    between = sum((m - overall) ** 2 for m in means.values()) / (k - 1)
    within = sum(
        float(((arr - means[name]) ** 2).sum()) for name, arr in arrays.items()
    ) / (total - k)

    if within == 0:
        f_stat = 0.0 if between == 0 else math.inf
    else:
        f_stat = between / within

    return AnovaResult(
        groups=k,
        f_statistic=f_stat,
        significant=f_stat > critical_f,
        group_means=means,
        overall_mean=overall,
    )
