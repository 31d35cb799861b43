# survey_analytics/core/sentiment/analyzer.py
from __future__ import annotations
import logging
from typing import Dict, FrozenSet, Iterable, List, Union

import pandas as pd

from survey_analytics.core.lexicon.general import (
    INTENSIFIERS,
    NEGATIVE_WORDS,
    NEGATORS,
    POSITIVE_WORDS,
)
from survey_analytics.core.sentiment.base import (
    SentimentAnalyzer,
    SentimentLabel,
    SentimentResult,
)
from survey_analytics.core.sentiment.config import SentimentConfig
from survey_analytics.core.tokenization.base import Tokenizer
from survey_analytics.core.tokenization.tokenizer import DefaultTokenizer

logger = logging.getLogger(__name__)


# ----------------------------
# Utilities
# ----------------------------


def _as_text_series(x: Union[pd.Series, Iterable[str], List[str]]) -> pd.Series:
    s = x if isinstance(x, pd.Series) else pd.Series(list(x), dtype=object)
    # normalize to strings, keep index
    return s.fillna("").astype(str)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def label_for_score(
    score: float, positive_threshold: float = 0.1, negative_threshold: float = -0.1
) -> SentimentLabel:
    if score > positive_threshold:
        return "positive"
    if score < negative_threshold:
        return "negative"
    return "neutral"


# ----------------------------
# Lexicon scorer
# ----------------------------


class LexiconSentimentAnalyzer:
    """Rule-based scorer over the Portuguese word lists.

    Each counted word looks back exactly one token: a negator flips its
    polarity, an intensifier multiplies its magnitude. The two checks are
    independent and never chain further back.
    """

    def __init__(
        self,
        cfg: SentimentConfig | None = None,
        tokenizer: Tokenizer | None = None,
        *,
        positive_words: FrozenSet[str] = POSITIVE_WORDS,
        negative_words: FrozenSet[str] = NEGATIVE_WORDS,
        intensifiers: FrozenSet[str] = INTENSIFIERS,
        negators: FrozenSet[str] = NEGATORS,
    ):
        self.cfg = cfg or SentimentConfig()
        self.tokenizer = tokenizer or DefaultTokenizer()
        self.positive_words = positive_words
        self.negative_words = negative_words
        self.intensifiers = intensifiers
        self.negators = negators

    def _word_score(self, word: str, previous: str | None) -> float:
        if word in self.positive_words:
            base = 1.0
        elif word in self.negative_words:
            base = -1.0
        else:
            return 0.0

        if previous is not None and previous in self.intensifiers:
            base *= self.cfg.intensifier_multiplier
        if previous is not None and previous in self.negators:
            base = -base
        return base

    def analyze(self, text: str) -> SentimentResult:
        if not text or not str(text).strip():
            return SentimentResult(label="neutral", score=0.0, confidence=0.0)

        words = self.tokenizer.tokenize(text)

        positive = 0.0
        negative = 0.0
        sentiment_words = 0
        total_words = 0
        for i, word in enumerate(words):
            if len(word) < self.cfg.min_word_length:
                continue
            total_words += 1

            previous = words[i - 1] if i > 0 else None
            ws = self._word_score(word, previous)
            if ws > 0:
                positive += ws
                sentiment_words += 1
            elif ws < 0:
                negative += abs(ws)
                sentiment_words += 1

        magnitude = positive + negative
        if magnitude == 0:
            return SentimentResult(
                label="neutral", score=0.0, confidence=self.cfg.no_signal_confidence
            )

        if self.cfg.score_normalization == "capacity":
            denominator = sentiment_words * max(self.cfg.intensifier_multiplier, 1.0)
        else:
            denominator = magnitude
        score = _clamp((positive - negative) / max(denominator, 1.0), -1.0, 1.0)

        ratio = magnitude / max(total_words, 1)
        confidence = _clamp(
            ratio * 2, self.cfg.confidence_floor, self.cfg.confidence_cap
        )

        logger.debug(
            "scored text: pos=%.2f neg=%.2f words=%d score=%.3f",
            positive,
            negative,
            total_words,
            score,
        )
        return SentimentResult(
            label=label_for_score(
                score, self.cfg.positive_threshold, self.cfg.negative_threshold
            ),
            score=score,
            confidence=_clamp(confidence, 0.0, 1.0),
        )

    def analyze_many(self, texts: Iterable[str]) -> List[SentimentResult]:
        return [self.analyze(t) for t in texts]

    def score_series(self, texts: pd.Series) -> pd.Series:
        s = _as_text_series(texts)
        # map preserves index
        return s.map(lambda t: self.analyze(t).label)


# ----------------------------
# Factory with caching
# ----------------------------

_analyzer_cache: Dict[SentimentConfig, SentimentAnalyzer] = {}


def analyzer_for(cfg: SentimentConfig | None = None) -> SentimentAnalyzer:
    cfg = cfg or SentimentConfig()
    if cfg in _analyzer_cache:
        return _analyzer_cache[cfg]

    inst: SentimentAnalyzer = LexiconSentimentAnalyzer(cfg)
    _analyzer_cache[cfg] = inst
    return inst


def analyze_sentiment(text: str, cfg: SentimentConfig | None = None) -> SentimentResult:
    return analyzer_for(cfg).analyze(text)
