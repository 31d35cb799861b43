from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizationConfig:
    # every character listed here becomes a space
    punctuation: str = ".,!?;:()[]{}\"'"
    lowercase: bool = True
    collapse_whitespace: bool = True
    unicode_nfkc: bool = True  # composes accents typed as combining marks
