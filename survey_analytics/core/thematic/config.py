from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ThematicConfig:
    # Basic sentiment bucket (same cut-offs as the token scorer)
    positive_threshold: float = 0.1
    negative_threshold: float = -0.1
    # Phrase bonus applied on top of the normalized theme score
    phrase_bonus: float = 0.5
    # Confidence = matched keywords / divisor, capped at 1
    theme_confidence_divisor: float = 3.0
    general_confidence_divisor: float = 2.0
    # The general fallback normalizes by a constant, not by lexicon size
    general_normalizer: float = 3.0
