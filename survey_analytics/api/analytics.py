import logging
import math
from typing import Iterable, List

from fastapi import APIRouter

from survey_analytics.core.clustering.kmeans import perform_kmeans_clustering
from survey_analytics.core.config import settings
from survey_analytics.core.insights.generator import generate_cluster_insights
from survey_analytics.core.statistics.descriptive import (
    calculate_categorical_stats,
    calculate_correlation,
    calculate_statistical_summary,
    identify_outliers,
)
from survey_analytics.core.statistics.inferential import (
    group_values,
    perform_anova,
    perform_hypothesis_test,
)
from survey_analytics.messages.analysis_messages import (
    ANALYSIS_FAILED,
    ANOVA_SUCCESS,
    CATEGORY_LENGTH_MISMATCH,
    CLUSTERING_SUCCESS,
    CORRELATION_SUCCESS,
    EMPTY_ROWS,
    HYPOTHESIS_TEST_SUCCESS,
    LENGTH_MISMATCH,
    NON_FINITE_VALUES,
    RAGGED_MATRIX,
    STATISTICS_SUCCESS,
    SURVEY_ANALYSIS_SUCCESS,
    TOO_MANY_CLUSTERS,
    TOO_MANY_TEXTS,
)
from survey_analytics.schemas.analytics import (
    AnovaRequest,
    ClusteringRequest,
    CorrelationRequest,
    HypothesisTestRequest,
    StatisticsRequest,
    SurveyAnalysisRequest,
)
from survey_analytics.services.survey_analysis_service import SurveyAnalysisService
from survey_analytics.utils.exceptions import (
    BadRequestError,
    InvalidSampleError,
    ServerError,
)
from survey_analytics.utils.response_builder import success_response

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])
logger = logging.getLogger(__name__)


# ----------------------------
# Input guards
# ----------------------------


def _ensure_finite(values: Iterable[float], field: str) -> None:
    if not all(math.isfinite(v) for v in values):
        raise InvalidSampleError(
            code="NON_FINITE_VALUES", field=field, message=NON_FINITE_VALUES
        )


def _ensure_same_length(values: List, other: List, field: str, code: str, message: str) -> None:
    if len(values) != len(other):
        raise InvalidSampleError(code=code, field=field, message=message)


def _ensure_matrix(data: List[List[float]]) -> None:
    if not data:
        return
    width = len(data[0])
    if width == 0:
        raise InvalidSampleError(code="EMPTY_ROWS", field="data", message=EMPTY_ROWS)
    if any(len(row) != width for row in data):
        raise InvalidSampleError(code="RAGGED_MATRIX", field="data", message=RAGGED_MATRIX)
    for row in data:
        _ensure_finite(row, "data")


def _ensure_cluster_count(k: int | None) -> None:
    if k is not None and k > settings.KMEANS_MAX_CLUSTERS:
        raise BadRequestError(
            code="TOO_MANY_CLUSTERS",
            message=f"{TOO_MANY_CLUSTERS} Limit: {settings.KMEANS_MAX_CLUSTERS}.",
        )


def _seed(seed: int | None) -> int | None:
    return seed if seed is not None else settings.KMEANS_RANDOM_SEED


# ----------------------------
# Routes
# ----------------------------


@router.post("/statistics")
async def describe_sample(req: StatisticsRequest):
    _ensure_finite(req.values, "values")
    if req.categories is not None:
        _ensure_same_length(
            req.categories,
            req.values,
            "categories",
            "CATEGORY_LENGTH_MISMATCH",
            CATEGORY_LENGTH_MISMATCH,
        )
    try:
        data = {
            "summary": calculate_statistical_summary(req.values),
            "outliers": identify_outliers(req.values),
        }
        if req.categories is not None:
            data["categorical"] = calculate_categorical_stats(req.categories)
        return success_response(message=STATISTICS_SUCCESS, data=data)
    except Exception as e:
        logger.exception(f"Statistical summary failed: {e}")
        raise ServerError(code="STATISTICS_FAILED", message=ANALYSIS_FAILED)


@router.post("/correlation")
async def correlate(req: CorrelationRequest):
    _ensure_finite(req.x, "x")
    _ensure_finite(req.y, "y")
    _ensure_same_length(req.y, req.x, "y", "LENGTH_MISMATCH", LENGTH_MISMATCH)
    return success_response(
        message=CORRELATION_SUCCESS, data=calculate_correlation(req.x, req.y)
    )


@router.post("/hypothesis-test")
async def hypothesis_test(req: HypothesisTestRequest):
    _ensure_finite(req.values, "values")
    if req.hypothesized_mean is not None:
        _ensure_finite([req.hypothesized_mean], "hypothesized_mean")
    return success_response(
        message=HYPOTHESIS_TEST_SUCCESS,
        data=perform_hypothesis_test(req.values, req.hypothesized_mean),
    )


@router.post("/anova")
async def anova(req: AnovaRequest):
    _ensure_finite(req.values, "values")
    _ensure_same_length(
        req.categories,
        req.values,
        "categories",
        "CATEGORY_LENGTH_MISMATCH",
        CATEGORY_LENGTH_MISMATCH,
    )
    return success_response(
        message=ANOVA_SUCCESS,
        data=perform_anova(group_values(req.values, req.categories)),
    )


@router.post("/clustering")
async def cluster(req: ClusteringRequest):
    _ensure_matrix(req.data)
    _ensure_cluster_count(req.k)
    k = req.k or settings.KMEANS_DEFAULT_CLUSTERS
    try:
        result = perform_kmeans_clustering(req.data, k, rng=_seed(req.seed))
        return success_response(
            message=CLUSTERING_SUCCESS,
            data={
                "result": result,
                "insights": generate_cluster_insights(result, len(req.data)),
            },
        )
    except Exception as e:
        logger.exception(f"Clustering failed for k={k}, n={len(req.data)}: {e}")
        raise ServerError(code="CLUSTERING_FAILED", message=ANALYSIS_FAILED)


@router.post("/survey")
async def analyze_survey(req: SurveyAnalysisRequest):
    if len(req.responses) > settings.MAX_TEXTS_PER_REQUEST:
        raise BadRequestError(code="TOO_MANY_TEXTS", message=TOO_MANY_TEXTS)
    _ensure_cluster_count(req.k)
    records = [r.model_dump() for r in req.responses]
    _ensure_finite(
        (r["rating"] for r in records if r.get("rating") is not None), "responses.rating"
    )
    try:
        result = SurveyAnalysisService().analyze(
            records, k=req.k, rng=_seed(req.seed)
        )
        return success_response(message=SURVEY_ANALYSIS_SUCCESS, data=result)
    except Exception as e:
        logger.exception(f"Survey analysis failed: {e}")
        raise ServerError(
            code="SURVEY_ANALYSIS_FAILED", message=ANALYSIS_FAILED
        )
