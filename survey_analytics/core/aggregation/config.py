from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class AggregationConfig:
    top_keywords: int = 10  # keywords kept per theme summary
