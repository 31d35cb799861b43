from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Literal

ModelType = Literal["recommendation", "satisfaction", "churn"]
Importance = Literal["high", "medium", "low"]
BrandCategory = Literal["Excelente", "Boa", "Regular", "Ruim"]


@dataclass(frozen=True)
class PredictiveFactor:
    factor: str
    impact: float
    importance: Importance


@dataclass(frozen=True)
class PredictiveModel:
    type: ModelType
    probability: int  # percent, 0..100
    confidence: float
    factors: List[PredictiveFactor] = field(default_factory=list)


@dataclass(frozen=True)
class BrandIndex:
    brand_index: int  # 0..100
    sentiment: float
    category: BrandCategory
    recommendations: List[str] = field(default_factory=list)
