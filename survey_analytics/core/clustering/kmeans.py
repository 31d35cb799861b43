from __future__ import annotations
import logging
from typing import List, Optional, Sequence

import numpy as np
from sklearn.metrics.pairwise import euclidean_distances

from survey_analytics.core.clustering.base import (
    Clusterer,
    ClusterResult,
    ClusterSummary,
    RandomSource,
)
from survey_analytics.core.clustering.config import ClusterCountConfig, KMeansConfig

logger = logging.getLogger(__name__)


# ----------------------------
# Helpers
# ----------------------------


def silhouette_score(X: np.ndarray, assignments: np.ndarray) -> float:
    """Mean silhouette over points whose cluster has other members.

    Points alone in their cluster, or points with no other non-empty cluster
    to compare against, are left out of the mean. Returns 0 when no point
    qualifies.
    """
    n = X.shape[0]
    if n <= 1:
        return 0.0

    dist = euclidean_distances(X, X)
    labels = np.unique(assignments)
    total = 0.0
    valid = 0
    for i in range(n):
        own = assignments[i]
        same = assignments == own
        same[i] = False
        if not same.any():
            continue
        a = float(dist[i, same].mean())

        b = np.inf
        for other in labels:
            if other == own:
                continue
            b = min(b, float(dist[i, assignments == other].mean()))
        if not np.isfinite(b):
            continue

        denom = max(a, b)
        total += 0.0 if denom == 0 else (b - a) / denom
        valid += 1

    return total / valid if valid else 0.0


def _label_for(intensity: float, major: bool) -> str:
    if intensity > 0.7:
        return "Grupo Principal Positivo" if major else "Nicho Muito Positivo"
    if intensity > 0.3:
        return "Grupo Moderadamente Positivo" if major else "Segmento Positivo"
    if intensity > -0.3:
        return "Grupo Neutro" if major else "Segmento Neutro"
    if intensity > -0.7:
        return "Grupo Moderadamente Negativo" if major else "Segmento Negativo"
    return "Grupo Principal Negativo" if major else "Nicho Muito Negativo"


# ----------------------------
# K-means
# ----------------------------


class KMeansClusterer(Clusterer):
    """Lloyd's k-means with k-means++ seeding.

    The random source is only used for seeding; pass a seeded
    ``numpy.random.Generator`` (or an int seed) for reproducible runs.
    """

    def __init__(self, cfg: KMeansConfig | None = None):
        self.cfg = cfg or KMeansConfig()

    def generator(self, rng: Optional[RandomSource]) -> np.random.Generator:
        return np.random.default_rng(rng if rng is not None else self.cfg.random_state)

    @staticmethod
    def _init_centroids(X: np.ndarray, k: int, rng: np.random.Generator) -> np.ndarray:
        n = X.shape[0]
        chosen = [int(rng.integers(n))]

        for _ in range(1, k):
            d = euclidean_distances(X, X[chosen]).min(axis=1)
            weights = d * d
            total = float(weights.sum())
            if total <= 0:
                # every point already sits on a centroid
                idx = int(rng.integers(n))
            else:
                cumulative = np.cumsum(weights / total)
                # right side: a draw of exactly 0.0 skips zero-weight leading points
                idx = int(np.searchsorted(cumulative, rng.random(), side="right"))
                idx = min(idx, n - 1)
            chosen.append(idx)

        return X[chosen].copy()

    @staticmethod
    def _assign(X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        return euclidean_distances(X, centroids).argmin(axis=1)

    @staticmethod
    def _update(X: np.ndarray, assignments: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        updated = centroids.copy()
        for j in range(centroids.shape[0]):
            members = X[assignments == j]
            if len(members):
                updated[j] = members.mean(axis=0)
            # empty cluster: keep previous centroid
        return updated

    def _labels(self, clusters: List[List[List[float]]], centroids: np.ndarray, n: int) -> List[str]:
        idx = self.cfg.label_feature_index
        out: List[str] = []
        for j, members in enumerate(clusters):
            intensity = float(centroids[j, idx]) if centroids.shape[1] > idx else 0.0
            share = len(members) / n if n else 0.0
            out.append(_label_for(intensity, share > self.cfg.major_cluster_share))
        return out

    def fit(
        self,
        data: Sequence[Sequence[float]],
        k: int,
        *,
        rng: Optional[RandomSource] = None,
    ) -> ClusterResult:
        if len(data) == 0 or k <= 0:
            return ClusterResult()

        X = np.asarray(data, dtype=float)
        if X.ndim == 1:
            X = X.reshape(-1, 1)
        if X.size == 0 or X.shape[1] == 0:
            # rows without features
            return ClusterResult()
        n, dims = X.shape
        gen = self.generator(rng)

        centroids = self._init_centroids(X, k, gen)
        assignments = np.full(n, -1, dtype=int)  # no previous round yet
        iterations = 0
        converged = False

        while iterations < self.cfg.max_iterations and not converged:
            new_assignments = self._assign(X, centroids)
            converged = bool(np.array_equal(assignments, new_assignments))
            assignments = new_assignments

            if not converged:
                new_centroids = self._update(X, assignments, centroids)
                change = float(np.abs(centroids - new_centroids).sum())
                if change < self.cfg.tolerance:
                    converged = True
                centroids = new_centroids

            iterations += 1

        clusters: List[List[List[float]]] = [
            X[assignments == j].tolist() for j in range(k)
        ]
        score = silhouette_score(X, assignments)
        labels = self._labels(clusters, centroids, n)

        logger.debug(
            "k-means: n=%d k=%d dims=%d iterations=%d converged=%s silhouette=%.3f",
            n,
            k,
            dims,
            iterations,
            converged,
            score,
        )
        return ClusterResult(
            clusters=clusters,
            centroids=[float(v) for v in centroids.reshape(-1)],
            iterations=iterations,
            silhouette_score=score,
            cluster_labels=labels,
            assignments=[int(a) for a in assignments],
            summary=ClusterSummary(
                total_clusters=k,
                avg_silhouette_score=score,
                convergence_reached=converged,
            ),
        )


def perform_kmeans_clustering(
    data: Sequence[Sequence[float]],
    k: int = 3,
    *,
    rng: Optional[RandomSource] = None,
    config: KMeansConfig | None = None,
) -> ClusterResult:
    return KMeansClusterer(config).fit(data, k, rng=rng)


def select_cluster_count(
    data: Sequence[Sequence[float]],
    *,
    rng: Optional[RandomSource] = None,
    config: ClusterCountConfig | None = None,
    kmeans_config: KMeansConfig | None = None,
) -> int:
    """Pick k in [min_k, min(max_k, n // points_per_cluster)] with the best
    silhouette; falls back to ``default_k`` when the range is empty."""
    cfg = config or ClusterCountConfig()
    clusterer = KMeansClusterer(kmeans_config)
    gen = clusterer.generator(rng)

    upper = min(cfg.max_k, len(data) // cfg.points_per_cluster)
    best_k, best_score = cfg.default_k, -1.0
    for k in range(cfg.min_k, upper + 1):
        score = clusterer.fit(data, k, rng=gen).silhouette_score
        if score > best_score:
            best_k, best_score = k, score

    logger.debug("cluster count search: upper=%d best_k=%d score=%.3f", upper, best_k, best_score)
    return best_k
