from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class TokenizationConfig:
    separator: str = " "
    min_token_len: int = 1  # drop tokens shorter than this
    drop_empty_tokens: bool = True
