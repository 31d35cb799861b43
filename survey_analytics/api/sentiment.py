import logging

from fastapi import APIRouter

from survey_analytics.core.aggregation.aggregator import (
    analyze_batch_sentiment,
    analyze_multiple_texts,
)
from survey_analytics.core.config import settings
from survey_analytics.core.insights.generator import get_sentiment_insights
from survey_analytics.core.thematic.attributor import get_theme_label
from survey_analytics.messages.analysis_messages import (
    ANALYSIS_FAILED,
    SENTIMENT_ANALYSIS_SUCCESS,
    THEMATIC_ANALYSIS_SUCCESS,
    TOO_MANY_TEXTS,
)
from survey_analytics.schemas.sentiment import (
    SentimentResponse,
    TextsRequest,
    ThemeSummaryItem,
)
from survey_analytics.utils.exceptions import BadRequestError, ServerError
from survey_analytics.utils.response_builder import serialize_data, success_response

router = APIRouter(prefix="/api/sentiment", tags=["Sentiment"])
logger = logging.getLogger(__name__)


def _check_batch_size(texts: list) -> None:
    if len(texts) > settings.MAX_TEXTS_PER_REQUEST:
        raise BadRequestError(
            code="TOO_MANY_TEXTS",
            message=f"{TOO_MANY_TEXTS} Limit: {settings.MAX_TEXTS_PER_REQUEST}.",
        )


@router.post("/", response_model=SentimentResponse)
async def analyze_sentiment(req: TextsRequest):
    _check_batch_size(req.texts)
    try:
        batch = analyze_batch_sentiment(req.texts)
        return success_response(
            message=SENTIMENT_ANALYSIS_SUCCESS,
            data={
                "results": batch.results,
                "summary": batch.summary,
                "insights": get_sentiment_insights(batch.summary),
            },
        )
    except Exception as e:
        logger.exception(f"Sentiment analysis failed: {e}")
        raise ServerError(
            code="SENTIMENT_ANALYSIS_FAILED",
            message=ANALYSIS_FAILED,
        )


@router.post("/thematic")
async def analyze_thematic(req: TextsRequest):
    _check_batch_size(req.texts)
    try:
        result = analyze_multiple_texts(req.texts)
        summary = [
            ThemeSummaryItem(theme_label=get_theme_label(s.theme), **serialize_data(s))
            for s in result.summary
        ]
        return success_response(
            message=THEMATIC_ANALYSIS_SUCCESS,
            data={"analyses": result.analyses, "summary": summary},
        )
    except Exception as e:
        logger.exception(f"Thematic analysis failed: {e}")
        raise ServerError(
            code="THEMATIC_ANALYSIS_FAILED",
            message=ANALYSIS_FAILED,
        )
