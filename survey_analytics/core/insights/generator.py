from __future__ import annotations
from typing import List

from survey_analytics.core.aggregation.base import BatchSentimentSummary
from survey_analytics.core.clustering.base import ClusterResult


def get_sentiment_insights(summary: BatchSentimentSummary) -> List[str]:
    insights: List[str] = []
    total = summary.positive + summary.neutral + summary.negative
    if total == 0:
        return ["Nenhuma resposta para analisar."]

    positive_pct = summary.positive / total * 100
    negative_pct = summary.negative / total * 100
    neutral_pct = summary.neutral / total * 100

    # Distribution
    if positive_pct > 60:
        insights.append(f"🎉 Excelente! {positive_pct:.1f}% das respostas são positivas.")
    elif positive_pct > 40:
        insights.append(f"😊 Bom resultado: {positive_pct:.1f}% das respostas são positivas.")

    if negative_pct > 40:
        insights.append(
            f"⚠️ Atenção: {negative_pct:.1f}% das respostas são negativas. "
            "Considere investigar os problemas."
        )
    elif negative_pct > 20:
        insights.append(
            f"📊 {negative_pct:.1f}% das respostas são negativas. Há espaço para melhorias."
        )

    if neutral_pct > 50:
        insights.append(
            f"🤔 {neutral_pct:.1f}% das respostas são neutras. "
            "Considere fazer perguntas mais específicas."
        )

    # Average score
    if summary.average_score > 0.3:
        insights.append("📈 O sentimento geral é bastante positivo!")
    elif summary.average_score > 0.1:
        insights.append("👍 O sentimento geral tende ao positivo.")
    elif summary.average_score < -0.3:
        insights.append("📉 O sentimento geral é preocupante. Ação imediata recomendada.")
    elif summary.average_score < -0.1:
        insights.append("⚡ O sentimento geral tende ao negativo.")
    else:
        insights.append("⚖️ O sentimento geral é equilibrado.")

    # Confidence
    if summary.average_confidence < 0.3:
        insights.append(
            "🔍 A confiança da análise é baixa. Considere coletar mais respostas "
            "ou fazer perguntas mais diretas."
        )
    elif summary.average_confidence > 0.7:
        insights.append("✅ Alta confiança na análise de sentimento.")

    return insights


def generate_cluster_insights(result: ClusterResult, response_count: int) -> List[str]:
    if result.summary.total_clusters == 0:
        return ["📊 Dados insuficientes para análise de clustering."]

    insights: List[str] = []

    # Quality
    if result.silhouette_score > 0.5:
        insights.append("✅ Clustering de alta qualidade identificado - grupos bem definidos.")
    elif result.silhouette_score > 0.25:
        insights.append("📊 Clustering moderado - alguns grupos identificados.")
    else:
        insights.append("⚠️ Clustering de baixa qualidade - grupos pouco definidos.")

    # Convergence
    if result.summary.convergence_reached:
        insights.append(f"🎯 Algoritmo convergiu em {result.iterations} iterações.")
    else:
        insights.append(
            f"⏱️ Algoritmo parou após {result.iterations} iterações "
            "sem convergência completa."
        )

    sizes = [len(c) for c in result.clusters]
    total = response_count if response_count > 0 else sum(sizes)
    if not sizes or total == 0:
        return insights

    largest = max(sizes)
    dominant = sizes.index(largest)
    if largest > total * 0.6:
        insights.append(
            f"📈 Grupo dominante identificado: {result.cluster_labels[dominant]} "
            f"({round(largest / total * 100)}% das respostas)."
        )

    diversity = 1 - largest / total
    if diversity > 0.7:
        insights.append("🎯 Alta diversidade de opiniões detectada - múltiplos segmentos de usuários.")
    elif diversity < 0.3:
        insights.append("📊 Baixa diversidade - opiniões concentradas em poucos grupos.")

    return insights


def generate_brand_recommendations(brand_index: float) -> List[str]:
    if brand_index > 70:
        return [
            "Manter estratégia atual",
            "Expandir comunicação positiva",
            "Aproveitar momentum para novos produtos",
        ]
    if brand_index > 50:
        return [
            "Melhorar pontos fracos identificados",
            "Aumentar engajamento",
            "Monitorar concorrência",
        ]
    return [
        "Revisar estratégia de marca",
        "Investigar causas de insatisfação",
        "Implementar ações corretivas urgentes",
    ]
