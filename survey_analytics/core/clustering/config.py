from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class KMeansConfig:
    max_iterations: int = 100
    tolerance: float = 0.001  # summed absolute centroid movement
    random_state: Optional[int] = None  # used when no generator is injected
    # Labeling heuristics:
    label_feature_index: int = 0  # sentiment score column
    major_cluster_share: float = 0.4


@dataclass(frozen=True)
class ClusterCountConfig:
    min_k: int = 2
    max_k: int = 8
    points_per_cluster: int = 3  # k never exceeds n // points_per_cluster
    default_k: int = 3
