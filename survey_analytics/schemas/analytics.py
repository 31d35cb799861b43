from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class StatisticsRequest(BaseModel):
    values: List[float] = Field(default_factory=list)
    categories: Optional[List[str]] = None


class CorrelationRequest(BaseModel):
    x: List[float]
    y: List[float]


class ClusteringRequest(BaseModel):
    data: List[List[float]] = Field(default_factory=list)
    k: Optional[int] = Field(default=None, ge=1)
    seed: Optional[int] = None


class SurveyResponseRecord(BaseModel):
    """One response row as fetched by the caller; unknown columns pass through."""

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    text: Optional[str] = None
    answer_text: Optional[str] = None
    rating: Optional[float] = None
    sentiment_score: Optional[float] = None
    created_at: Optional[str] = None


class SurveyAnalysisRequest(BaseModel):
    responses: List[SurveyResponseRecord] = Field(default_factory=list)
    k: Optional[int] = Field(default=None, ge=1)
    seed: Optional[int] = None


class HypothesisTestRequest(BaseModel):
    values: List[float] = Field(default_factory=list)
    hypothesized_mean: Optional[float] = None


class AnovaRequest(BaseModel):
    values: List[float] = Field(default_factory=list)
    categories: List[Optional[str]] = Field(default_factory=list)
