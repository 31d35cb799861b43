from survey_analytics.core.aggregation.base import BatchSentimentSummary
from survey_analytics.core.clustering.base import ClusterResult, ClusterSummary
from survey_analytics.core.insights.generator import (
    generate_brand_recommendations,
    generate_cluster_insights,
    get_sentiment_insights,
)


def _summary(positive, neutral, negative, average_score, average_confidence):
    return BatchSentimentSummary(
        positive=positive,
        neutral=neutral,
        negative=negative,
        total=positive + neutral + negative,
        average_score=average_score,
        average_confidence=average_confidence,
    )


# -------------------------------------
# 💬 Sentiment insights
# -------------------------------------
def test_no_responses():
    assert get_sentiment_insights(_summary(0, 0, 0, 0.0, 0.0)) == [
        "Nenhuma resposta para analisar."
    ]


def test_mostly_positive_batch():
    insights = get_sentiment_insights(_summary(7, 1, 2, 0.5, 0.8))
    assert insights[0].startswith("🎉 Excelente! 70.0%")
    assert "📈 O sentimento geral é bastante positivo!" in insights
    assert "✅ Alta confiança na análise de sentimento." in insights
    assert not any("negativas" in i for i in insights)


def test_mostly_negative_batch():
    insights = get_sentiment_insights(_summary(1, 1, 8, -0.5, 0.2))
    assert any(i.startswith("⚠️ Atenção: 80.0%") for i in insights)
    assert "📉 O sentimento geral é preocupante. Ação imediata recomendada." in insights
    assert any(i.startswith("🔍") for i in insights)


def test_mostly_neutral_batch():
    insights = get_sentiment_insights(_summary(1, 8, 1, 0.0, 0.5))
    assert any(i.startswith("🤔 80.0%") for i in insights)
    assert "⚖️ O sentimento geral é equilibrado." in insights


# -------------------------------------
# 🧩 Cluster insights
# -------------------------------------
def test_cluster_insights_without_clusters():
    assert generate_cluster_insights(ClusterResult(), 0) == [
        "📊 Dados insuficientes para análise de clustering."
    ]


def test_cluster_insights_dominant_group():
    result = ClusterResult(
        clusters=[[[0.0]] * 7, [[1.0]] * 3],
        centroids=[0.0, 1.0],
        iterations=4,
        silhouette_score=0.6,
        cluster_labels=["Grupo Neutro", "Segmento Positivo"],
        assignments=[0] * 7 + [1] * 3,
        summary=ClusterSummary(
            total_clusters=2, avg_silhouette_score=0.6, convergence_reached=True
        ),
    )
    insights = generate_cluster_insights(result, 10)
    assert insights[0].startswith("✅ Clustering de alta qualidade")
    assert insights[1] == "🎯 Algoritmo convergiu em 4 iterações."
    assert "📈 Grupo dominante identificado: Grupo Neutro (70% das respostas)." in insights


def test_cluster_insights_low_quality_without_convergence():
    result = ClusterResult(
        clusters=[[[0.0]] * 5, [[1.0]] * 5],
        iterations=100,
        silhouette_score=0.1,
        cluster_labels=["A", "B"],
        summary=ClusterSummary(total_clusters=2, avg_silhouette_score=0.1),
    )
    insights = generate_cluster_insights(result, 10)
    assert insights[0].startswith("⚠️ Clustering de baixa qualidade")
    assert insights[1].startswith("⏱️ Algoritmo parou após 100 iterações")
    assert not any("dominante" in i for i in insights)


# -------------------------------------
# 🏷️ Brand recommendations
# -------------------------------------
def test_brand_recommendations_tiers():
    assert generate_brand_recommendations(80)[0] == "Manter estratégia atual"
    assert generate_brand_recommendations(60)[0] == "Melhorar pontos fracos identificados"
    assert generate_brand_recommendations(50)[0] == "Revisar estratégia de marca"
