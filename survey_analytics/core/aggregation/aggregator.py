from __future__ import annotations
import logging
from collections import Counter
from typing import Dict, Iterable, List

import pandas as pd

from survey_analytics.core.aggregation.base import (
    BatchSentimentResult,
    BatchSentimentSummary,
    KeywordFrequency,
    MultiTextAnalysis,
    ThematicSummary,
)
from survey_analytics.core.aggregation.config import AggregationConfig
from survey_analytics.core.lexicon.thematic import INTENSITY_LEVELS
from survey_analytics.core.sentiment.analyzer import analyzer_for
from survey_analytics.core.sentiment.base import SentimentAnalyzer
from survey_analytics.core.thematic.attributor import ThematicAttributor
from survey_analytics.core.thematic.base import (
    ThematicAnalysisResult,
    ThematicAnalyzer,
    ThematicSentimentResult,
)

logger = logging.getLogger(__name__)


def _mean(values: pd.Series) -> float:
    return float(values.mean()) if len(values) else 0.0


def analyze_batch_sentiment(
    texts: Iterable[str], analyzer: SentimentAnalyzer | None = None
) -> BatchSentimentResult:
    """Score every text independently and count labels."""
    analyzer = analyzer or analyzer_for()
    results = [analyzer.analyze(t) for t in texts]

    df = pd.DataFrame(
        {
            "label": [r.label for r in results],
            "score": [r.score for r in results],
            "confidence": [r.confidence for r in results],
        }
    )
    counts = df["label"].value_counts().to_dict()

    summary = BatchSentimentSummary(
        positive=int(counts.get("positive", 0)),
        neutral=int(counts.get("neutral", 0)),
        negative=int(counts.get("negative", 0)),
        total=int(len(df)),
        average_score=_mean(df["score"]),
        average_confidence=_mean(df["confidence"]),
    )
    logger.info(
        "batch sentiment: %d texts (pos=%d neu=%d neg=%d)",
        summary.total,
        summary.positive,
        summary.neutral,
        summary.negative,
    )
    return BatchSentimentResult(results=results, summary=summary)


def summarize_theme(
    theme: str,
    results: List[ThematicSentimentResult],
    cfg: AggregationConfig | None = None,
) -> ThematicSummary:
    cfg = cfg or AggregationConfig()

    distribution: Dict[str, int] = {level: 0 for level in INTENSITY_LEVELS}
    for r in results:
        distribution[r.intensity] += 1

    # Counter keeps first-encounter order for equal counts
    freq: Counter = Counter()
    last_sentiment: Dict[str, str] = {}
    for r in results:
        for keyword in r.keywords:
            freq[keyword] += 1
            last_sentiment[keyword] = r.sentiment

    top = [
        KeywordFrequency(keyword=k, frequency=int(c), sentiment=last_sentiment[k])
        for k, c in freq.most_common(cfg.top_keywords)
    ]

    total = len(results)
    return ThematicSummary(
        theme=theme,
        total_responses=total,
        sentiment_distribution=distribution,
        average_score=(sum(r.score for r in results) / total) if total else 0.0,
        top_keywords=top,
    )


def summarize_themes(
    analyses: List[ThematicAnalysisResult], cfg: AggregationConfig | None = None
) -> List[ThematicSummary]:
    groups: Dict[str, List[ThematicSentimentResult]] = {}
    for analysis in analyses:
        for result in analysis.results:
            groups.setdefault(result.theme, []).append(result)
    return [summarize_theme(theme, rs, cfg) for theme, rs in groups.items()]


def analyze_multiple_texts(
    texts: Iterable[str],
    attributor: ThematicAnalyzer | None = None,
    cfg: AggregationConfig | None = None,
) -> MultiTextAnalysis:
    attributor = attributor or ThematicAttributor()
    analyses = [attributor.analyze(t) for t in texts]
    summary = summarize_themes(analyses, cfg)
    logger.info(
        "thematic batch: %d texts, themes=%s",
        len(analyses),
        [s.theme for s in summary],
    )
    return MultiTextAnalysis(analyses=analyses, summary=summary)
