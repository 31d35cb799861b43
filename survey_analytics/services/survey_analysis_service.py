from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from survey_analytics.core.aggregation.aggregator import (
    analyze_batch_sentiment,
    analyze_multiple_texts,
)
from survey_analytics.core.aggregation.base import BatchSentimentResult, MultiTextAnalysis
from survey_analytics.core.clustering.base import ClusterResult, RandomSource
from survey_analytics.core.clustering.features import (
    prepare_data_for_clustering,
    response_text,
)
from survey_analytics.core.clustering.kmeans import KMeansClusterer, select_cluster_count
from survey_analytics.core.insights.generator import (
    generate_cluster_insights,
    get_sentiment_insights,
)
from survey_analytics.core.prediction.base import BrandIndex, PredictiveModel
from survey_analytics.core.prediction.models import (
    calculate_brand_index,
    calculate_predictive_models,
)
from survey_analytics.core.sentiment.analyzer import analyzer_for
from survey_analytics.core.sentiment.base import SentimentAnalyzer
from survey_analytics.core.statistics.base import (
    AnovaResult,
    CorrelationResult,
    HypothesisTestResult,
    OutlierReport,
    StatisticalSummary,
)
from survey_analytics.core.statistics.descriptive import (
    calculate_correlation,
    calculate_statistical_summary,
    identify_outliers,
)
from survey_analytics.core.statistics.inferential import (
    group_values,
    perform_anova,
    perform_hypothesis_test,
)
from survey_analytics.core.thematic.attributor import ThematicAttributor
from survey_analytics.core.thematic.base import ThematicAnalyzer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SurveyAnalysisResult:
    response_count: int
    sentiment: BatchSentimentResult
    thematic: MultiTextAnalysis
    rating_statistics: StatisticalSummary
    sentiment_statistics: StatisticalSummary
    rating_outliers: OutlierReport
    rating_sentiment_correlation: CorrelationResult
    sentiment_hypothesis_test: HypothesisTestResult
    rating_anova_by_sentiment: AnovaResult
    clustering: ClusterResult
    predictive_models: List[PredictiveModel]
    brand_index: BrandIndex
    insights: Dict[str, List[str]]


class SurveyAnalysisService:
    """
    Runs the whole analysis for one survey's response records:
      - sentiment + thematic attribution per text
      - descriptive stats on ratings and sentiment scores, plus a t-test on
        sentiment and an ANOVA of ratings across sentiment labels
      - k-means over [sentiment, rating, text length]
      - predictive heuristics, brand index and insight sentences
    Records are plain mappings fetched by the caller; nothing is persisted.
    """

    def __init__(
        self,
        analyzer: SentimentAnalyzer | None = None,
        attributor: ThematicAnalyzer | None = None,
        clusterer: KMeansClusterer | None = None,
    ):
        self.analyzer = analyzer or analyzer_for()
        self.attributor = attributor or ThematicAttributor()
        self.clusterer = clusterer or KMeansClusterer()

    def _cluster(
        self, features: List[List[float]], k: Optional[int], rng: Optional[RandomSource]
    ) -> ClusterResult:
        if not features:
            return ClusterResult()

        gen = self.clusterer.generator(rng)
        if k is None:
            k = select_cluster_count(features, rng=gen, kmeans_config=self.clusterer.cfg)
        k = min(k, len(features))
        return self.clusterer.fit(features, k, rng=gen)

    def analyze(
        self,
        responses: Sequence[Mapping[str, Any]],
        *,
        k: Optional[int] = None,
        rng: Optional[RandomSource] = None,
    ) -> SurveyAnalysisResult:
        responses = list(responses)
        texts = [response_text(r) for r in responses]
        logger.info("Analyzing survey with %d responses", len(responses))

        # 1) sentiment + themes
        batch = analyze_batch_sentiment(texts, analyzer=self.analyzer)
        thematic = analyze_multiple_texts(texts, attributor=self.attributor)
        scores = [r.score for r in batch.results]

        # 2) statistics
        rated = [
            (float(r["rating"]), res)
            for r, res in zip(responses, batch.results)
            if r.get("rating") is not None
        ]
        ratings = [rating for rating, _ in rated]
        rating_statistics = calculate_statistical_summary(ratings)
        rating_outliers = identify_outliers(ratings)
        correlation = calculate_correlation(ratings, [res.score for _, res in rated])
        sentiment_statistics = calculate_statistical_summary(scores)
        # non-zero sentiment against neutral
        hypothesis = perform_hypothesis_test([s for s in scores if s != 0], 0.0)
        anova = perform_anova(group_values(ratings, [res.label for _, res in rated]))

        # 3) clustering on freshly scored records
        features = prepare_data_for_clustering(
            [{**r, "sentiment_score": s} for r, s in zip(responses, scores)],
            analyzer=self.analyzer,
        )
        clustering = self._cluster(features, k, rng)

        # 4) predictions + insights
        models = calculate_predictive_models(scores)
        brand = calculate_brand_index(scores)
        insights = {
            "sentiment": get_sentiment_insights(batch.summary),
            "clustering": generate_cluster_insights(clustering, len(responses)),
            "brand": brand.recommendations,
        }

        logger.info(
            "Survey analysis done: clusters=%d silhouette=%.3f brand_index=%d",
            clustering.summary.total_clusters,
            clustering.silhouette_score,
            brand.brand_index,
        )
        return SurveyAnalysisResult(
            response_count=len(responses),
            sentiment=batch,
            thematic=thematic,
            rating_statistics=rating_statistics,
            sentiment_statistics=sentiment_statistics,
            rating_outliers=rating_outliers,
            rating_sentiment_correlation=correlation,
            sentiment_hypothesis_test=hypothesis,
            rating_anova_by_sentiment=anova,
            clustering=clustering,
            predictive_models=models,
            brand_index=brand,
            insights=insights,
        )
