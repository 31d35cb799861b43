from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

from survey_analytics.core.sentiment.base import SentimentResult
from survey_analytics.core.thematic.base import ThematicAnalysisResult


@dataclass(frozen=True)
class KeywordFrequency:
    keyword: str
    frequency: int
    sentiment: str


@dataclass(frozen=True)
class ThematicSummary:
    theme: str
    total_responses: int
    sentiment_distribution: Dict[str, int]  # one bucket per intensity level
    average_score: float
    top_keywords: List[KeywordFrequency]


@dataclass(frozen=True)
class MultiTextAnalysis:
    analyses: List[ThematicAnalysisResult]
    summary: List[ThematicSummary]


@dataclass(frozen=True)
class BatchSentimentSummary:
    positive: int
    neutral: int
    negative: int
    total: int
    average_score: float
    average_confidence: float


@dataclass(frozen=True)
class BatchSentimentResult:
    results: List[SentimentResult]
    summary: BatchSentimentSummary
