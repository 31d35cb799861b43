from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

from survey_analytics.core.lexicon.thematic import Intensity, Theme
from survey_analytics.core.sentiment.base import SentimentLabel


@dataclass(frozen=True)
class ThemeScore:
    score: float
    keywords: List[str] = field(default_factory=list)
    confidence: float = 0.0


@dataclass(frozen=True)
class ThematicSentimentResult:
    theme: Theme
    sentiment: SentimentLabel
    intensity: Intensity
    confidence: float
    keywords: List[str]
    score: float


@dataclass(frozen=True)
class OverallSentiment:
    sentiment: SentimentLabel
    intensity: Intensity
    score: float


@dataclass(frozen=True)
class ThematicAnalysisResult:
    text: str
    results: List[ThematicSentimentResult]
    overall_sentiment: OverallSentiment


class ThematicAnalyzer(ABC):
    """Port: attribute sentiment of one text to the themes it mentions."""

    @abstractmethod
    def analyze(self, text: str) -> ThematicAnalysisResult: ...
