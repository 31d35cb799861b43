from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Protocol

import pandas as pd

SentimentLabel = Literal["positive", "neutral", "negative"]


@dataclass(frozen=True)
class SentimentResult:
    label: SentimentLabel
    score: float  # -1.0 .. 1.0
    confidence: float  # 0.0 .. 1.0


class SentimentAnalyzer(Protocol):
    def analyze(self, text: str) -> SentimentResult: ...

    def score_series(self, texts: pd.Series) -> pd.Series: ...
