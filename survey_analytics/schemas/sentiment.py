from pydantic import BaseModel, Field
from typing import Dict, List

from survey_analytics.schemas.common import BaseResponse


class TextsRequest(BaseModel):
    texts: List[str] = Field(default_factory=list)


class SentimentItem(BaseModel):
    label: str
    score: float
    confidence: float


class SentimentSummary(BaseModel):
    positive: int
    neutral: int
    negative: int
    total: int
    average_score: float
    average_confidence: float


class SentimentResponseData(BaseModel):
    results: List[SentimentItem]
    summary: SentimentSummary
    insights: List[str]


class SentimentResponse(BaseResponse):
    data: SentimentResponseData


class KeywordItem(BaseModel):
    keyword: str
    frequency: int
    sentiment: str


class ThemeSummaryItem(BaseModel):
    theme: str
    theme_label: str
    total_responses: int
    sentiment_distribution: Dict[str, int]
    average_score: float
    top_keywords: List[KeywordItem]
