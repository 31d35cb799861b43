from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Union

Mode = Union[float, List[float]]

CorrelationStrength = Literal["muito fraca", "fraca", "moderada", "forte", "muito forte"]
CorrelationDirection = Literal["positiva", "negativa", "nenhuma"]


@dataclass(frozen=True)
class Percentiles:
    p25: float = 0.0
    p50: float = 0.0
    p75: float = 0.0
    p90: float = 0.0
    p95: float = 0.0


@dataclass(frozen=True)
class StatisticalSummary:
    mean: float = 0.0
    median: float = 0.0
    mode: Mode = 0.0
    standard_deviation: float = 0.0
    variance: float = 0.0
    min: float = 0.0
    max: float = 0.0
    range: float = 0.0
    count: int = 0
    percentiles: Percentiles = field(default_factory=Percentiles)


@dataclass(frozen=True)
class CorrelationResult:
    coefficient: float
    strength: CorrelationStrength
    direction: CorrelationDirection


@dataclass(frozen=True)
class OutlierReport:
    outliers: List[float] = field(default_factory=list)
    lower_bound: float = 0.0
    upper_bound: float = 0.0
    q1: float = 0.0
    q3: float = 0.0
    iqr: float = 0.0


@dataclass(frozen=True)
class CategoricalStats:
    frequencies: Dict[str, int] = field(default_factory=dict)
    percentages: Dict[str, float] = field(default_factory=dict)
    most_frequent: str = ""
    least_frequent: str = ""
    unique_count: int = 0


@dataclass(frozen=True)
class HypothesisTestResult:
    sample_mean: float = 0.0
    hypothesized_mean: float = 0.0
    t_statistic: float = 0.0
    p_value: float = 1.0  # no evidence against the hypothesis
    significant: bool = False


@dataclass(frozen=True)
class AnovaResult:
    groups: int = 0
    f_statistic: float = 0.0
    significant: bool = False
    group_means: Dict[str, float] = field(default_factory=dict)
    overall_mean: float = 0.0
