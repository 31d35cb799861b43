from __future__ import annotations
import logging
from typing import Dict, List, Tuple

from survey_analytics.core.lexicon.thematic import (
    GENERAL_NEGATIVE,
    GENERAL_POSITIVE,
    INTENSITY_LABELS,
    THEME_KEYWORDS,
    THEME_LABELS,
    VERY_NEGATIVE_PHRASES,
    VERY_POSITIVE_PHRASES,
    Intensity,
    Theme,
)
from survey_analytics.core.sentiment.analyzer import label_for_score
from survey_analytics.core.sentiment.base import SentimentLabel
from survey_analytics.core.thematic.base import (
    OverallSentiment,
    ThematicAnalysisResult,
    ThematicAnalyzer,
    ThematicSentimentResult,
    ThemeScore,
)
from survey_analytics.core.thematic.config import ThematicConfig

logger = logging.getLogger(__name__)


def _clamp(value: float) -> float:
    return max(-1.0, min(1.0, value))


def determine_intensity(score: float) -> Intensity:
    if score >= 0.7:
        return "muito_positivo"
    if score >= 0.3:
        return "positivo"
    if score >= 0.1:
        return "levemente_positivo"
    if score >= -0.1:
        return "neutro"
    if score >= -0.3:
        return "levemente_negativo"
    if score >= -0.7:
        return "negativo"
    return "muito_negativo"


def determine_sentiment(score: float) -> SentimentLabel:
    return label_for_score(score)


def get_theme_label(theme: str) -> str:
    return THEME_LABELS.get(theme, theme)


def get_intensity_label(intensity: str) -> str:
    return INTENSITY_LABELS.get(intensity, intensity)


class ThematicAttributor(ThematicAnalyzer):
    """
    Keyword-presence attribution:
      - a theme is present when any of its keywords occurs as a substring
      - each present theme gets its own score/intensity/confidence
      - texts that mention no theme fall back to `general`
    """

    def __init__(
        self,
        cfg: ThematicConfig | None = None,
        theme_keywords: Dict[str, Dict[str, Tuple[str, ...]]] | None = None,
    ):
        self.cfg = cfg or ThematicConfig()
        self.theme_keywords = theme_keywords or THEME_KEYWORDS

    def identify_themes(self, text: str) -> List[Theme]:
        lower = (text or "").lower()
        themes: List[Theme] = []
        for theme, keywords in self.theme_keywords.items():
            if any(k.lower() in lower for k in (*keywords["positive"], *keywords["negative"])):
                themes.append(theme)  # type: ignore[arg-type]
        if not themes:
            themes.append("general")
        return themes

    def calculate_intensity_bonus(self, text: str) -> float:
        lower = (text or "").lower()
        bonus = 0.0
        for phrase in VERY_POSITIVE_PHRASES:
            if phrase in lower:
                bonus += self.cfg.phrase_bonus
        for phrase in VERY_NEGATIVE_PHRASES:
            if phrase in lower:
                bonus -= self.cfg.phrase_bonus
        return _clamp(bonus)

    @staticmethod
    def _match(lower: str, positive: Tuple[str, ...], negative: Tuple[str, ...]):
        found: List[str] = []
        hits = 0
        for keyword in positive:
            if keyword.lower() in lower:
                hits += 1
                found.append(keyword)
        for keyword in negative:
            if keyword.lower() in lower:
                hits -= 1
                found.append(keyword)
        return hits, found

    def _general_score(self, text: str) -> ThemeScore:
        lower = (text or "").lower()
        hits, found = self._match(lower, GENERAL_POSITIVE, GENERAL_NEGATIVE)
        score = _clamp(
            hits / self.cfg.general_normalizer + self.calculate_intensity_bonus(text)
        )
        confidence = min(1.0, len(found) / self.cfg.general_confidence_divisor)
        return ThemeScore(score=score, keywords=found, confidence=confidence)

    def calculate_theme_score(self, text: str, theme: Theme) -> ThemeScore:
        if theme == "general":
            return self._general_score(text)

        keywords = self.theme_keywords.get(theme)
        if not keywords:
            return ThemeScore(score=0.0, keywords=[], confidence=0.0)

        lower = (text or "").lower()
        hits, found = self._match(lower, keywords["positive"], keywords["negative"])

        max_possible = max(len(keywords["positive"]), len(keywords["negative"]))
        normalized = hits / max_possible if max_possible > 0 else 0.0
        score = _clamp(normalized + self.calculate_intensity_bonus(text))
        confidence = min(1.0, len(found) / self.cfg.theme_confidence_divisor)
        return ThemeScore(score=score, keywords=found, confidence=confidence)

    def _sentiment(self, score: float) -> SentimentLabel:
        return label_for_score(
            score, self.cfg.positive_threshold, self.cfg.negative_threshold
        )

    def analyze(self, text: str) -> ThematicAnalysisResult:
        text = text or ""
        results: List[ThematicSentimentResult] = []
        for theme in self.identify_themes(text):
            ts = self.calculate_theme_score(text, theme)
            results.append(
                ThematicSentimentResult(
                    theme=theme,
                    sentiment=self._sentiment(ts.score),
                    intensity=determine_intensity(ts.score),
                    confidence=ts.confidence,
                    keywords=ts.keywords,
                    score=ts.score,
                )
            )

        overall = sum(r.score for r in results) / len(results) if results else 0.0
        logger.debug(
            "thematic analysis: themes=%s overall=%.3f",
            [r.theme for r in results],
            overall,
        )
        return ThematicAnalysisResult(
            text=text,
            results=results,
            overall_sentiment=OverallSentiment(
                sentiment=self._sentiment(overall),
                intensity=determine_intensity(overall),
                score=overall,
            ),
        )


_default_attributor = ThematicAttributor()


def identify_themes(text: str) -> List[Theme]:
    return _default_attributor.identify_themes(text)


def calculate_theme_score(text: str, theme: Theme) -> ThemeScore:
    return _default_attributor.calculate_theme_score(text, theme)


def calculate_intensity_bonus(text: str) -> float:
    return _default_attributor.calculate_intensity_bonus(text)


def analyze_thematic_sentiment(text: str) -> ThematicAnalysisResult:
    return _default_attributor.analyze(text)
