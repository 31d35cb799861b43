from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

import numpy as np

RandomSource = Union[np.random.Generator, int, None]


@dataclass(frozen=True)
class ClusterSummary:
    total_clusters: int = 0
    avg_silhouette_score: float = 0.0
    convergence_reached: bool = False


@dataclass(frozen=True)
class ClusterResult:
    clusters: List[List[List[float]]] = field(default_factory=list)
    centroids: List[float] = field(default_factory=list)  # flat, k * dimensions
    iterations: int = 0
    silhouette_score: float = 0.0
    cluster_labels: List[str] = field(default_factory=list)
    assignments: List[int] = field(default_factory=list)
    summary: ClusterSummary = field(default_factory=ClusterSummary)


class Clusterer(ABC):
    """Port: partition a numeric feature matrix into k groups."""

    @abstractmethod
    def fit(
        self,
        data: Sequence[Sequence[float]],
        k: int,
        *,
        rng: Optional[RandomSource] = None,
    ) -> ClusterResult: ...
