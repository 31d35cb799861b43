from __future__ import annotations
from typing import Any, Iterable, List, Mapping

from survey_analytics.core.sentiment.analyzer import analyzer_for
from survey_analytics.core.sentiment.base import SentimentAnalyzer

DEFAULT_RATING = 3.0
TEXT_LENGTH_SCALE = 100.0
MAX_TEXT_LENGTH_FEATURE = 5.0


def response_text(response: Mapping[str, Any]) -> str:
    # survey exports use either `text` or `answer_text`
    text = response.get("text")
    if text is None:
        text = response.get("answer_text")
    return "" if text is None else str(text)


def prepare_data_for_clustering(
    responses: Iterable[Mapping[str, Any]],
    analyzer: SentimentAnalyzer | None = None,
) -> List[List[float]]:
    """Project response records onto [sentiment score, rating, text length].

    A record without ``sentiment_score`` is scored from its text; a missing
    rating defaults to the scale midpoint. Text length is expressed in
    hundreds of characters and capped at 5.
    """
    analyzer = analyzer or analyzer_for()
    rows: List[List[float]] = []
    for response in responses or []:
        text = response_text(response)

        sentiment = response.get("sentiment_score")
        if sentiment is None:
            sentiment = analyzer.analyze(text).score

        rating = response.get("rating")
        if rating is None:
            rating = DEFAULT_RATING

        rows.append(
            [
                float(sentiment),
                float(rating),
                min(len(text) / TEXT_LENGTH_SCALE, MAX_TEXT_LENGTH_FEATURE),
            ]
        )
    return rows
