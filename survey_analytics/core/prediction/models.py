"""Closed-form heuristics over a sample of sentiment scores in [-1, 1].

These are fixed formulas on the sample mean and spread, not trained models.
"""

from __future__ import annotations
import math
from typing import List, Sequence

from survey_analytics.core.insights.generator import generate_brand_recommendations
from survey_analytics.core.prediction.base import (
    BrandCategory,
    BrandIndex,
    PredictiveFactor,
    PredictiveModel,
)
from survey_analytics.core.statistics.descriptive import (
    calculate_mean,
    calculate_standard_deviation,
    calculate_variance,
)

CRITICAL_SCORE = -0.5
FULL_VOLUME = 100  # responses needed for the volume factor to saturate


def _percent(p: float) -> int:
    # half-up rounding
    return int(math.floor(p * 100 + 0.5))


def _bounded(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))


def _sign(x: float) -> float:
    return float((x > 0) - (x < 0))


def calculate_predictive_models(scores: Sequence[float]) -> List[PredictiveModel]:
    scores = list(scores)
    n = len(scores)
    mean = calculate_mean(scores)
    variance = calculate_variance(scores)
    std = calculate_standard_deviation(scores)

    recommendation = 1 / (1 + math.exp(-(mean * 2 + 0.5)))
    satisfaction = (mean + 1) / 2
    churn = 1 / (1 + math.exp(mean * 3))
    critical_share = (sum(1 for s in scores if s < CRITICAL_SCORE) / n) if n else 0.0

    return [
        PredictiveModel(
            type="recommendation",
            probability=_percent(recommendation),
            confidence=_bounded(1 - std, 0.5, 0.95),
            factors=[
                PredictiveFactor("Sentimento Geral", mean, "high"),
                PredictiveFactor("Consistência", 1 - std, "medium"),
                PredictiveFactor("Volume de Feedback", min(1.0, n / FULL_VOLUME), "low"),
            ],
        ),
        PredictiveModel(
            type="satisfaction",
            probability=_percent(satisfaction),
            confidence=_bounded(1 - std * 0.8, 0.4, 0.9),
            factors=[
                PredictiveFactor("Score Médio", satisfaction, "high"),
                PredictiveFactor("Variabilidade", 1 - variance, "medium"),
                PredictiveFactor("Tendência", _sign(mean), "medium"),
            ],
        ),
        PredictiveModel(
            type="churn",
            probability=_percent(churn),
            confidence=_bounded(std + 0.3, 0.3, 0.85),
            factors=[
                PredictiveFactor("Sentimento Negativo", -mean, "high"),
                PredictiveFactor("Instabilidade", std, "medium"),
                PredictiveFactor("Feedback Crítico", critical_share, "high"),
            ],
        ),
    ]


def _brand_category(index: float) -> BrandCategory:
    if index > 70:
        return "Excelente"
    if index > 50:
        return "Boa"
    if index > 30:
        return "Regular"
    return "Ruim"


def calculate_brand_index(scores: Sequence[float]) -> BrandIndex:
    """0..100 perception index from the non-zero sentiment scores."""
    signal = [s for s in scores if s != 0]
    avg = calculate_mean(signal)
    index = _bounded((avg + 1) * 50, 0.0, 100.0)
    return BrandIndex(
        brand_index=int(math.floor(index + 0.5)),
        sentiment=avg,
        category=_brand_category(index),
        recommendations=generate_brand_recommendations(index),
    )
