from __future__ import annotations
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class SentimentConfig:
    # Thresholds on the final score:
    positive_threshold: float = 0.1
    negative_threshold: float = -0.1
    # Word handling:
    min_word_length: int = 2  # shorter tokens are not counted
    intensifier_multiplier: float = 1.5
    # "magnitude": (pos - neg) / max(pos + neg, 1); single-polarity text
    #              always lands on +/-1.
    # "capacity": divide by the magnitude the sentiment words could reach when
    #             all of them are intensified, so "muito bom" outscores "bom".
    score_normalization: Literal["magnitude", "capacity"] = "magnitude"
    # Confidence:
    confidence_floor: float = 0.1
    confidence_cap: float = 0.9
    no_signal_confidence: float = 0.5  # text present, no sentiment words
