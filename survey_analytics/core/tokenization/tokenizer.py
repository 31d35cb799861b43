from __future__ import annotations
from typing import List

from survey_analytics.core.normalization.base import TextNormalizer
from survey_analytics.core.normalization.normalizer import DefaultTextNormalizer
from survey_analytics.core.tokenization.base import Tokenizer
from survey_analytics.core.tokenization.config import TokenizationConfig


class DefaultTokenizer(Tokenizer):
    """Adapter: normalizes the text, then splits on the configured separator.

    Short tokens are kept by default because the sentiment scorer still uses
    them as the look-back neighbour of the following word.
    """

    def __init__(
        self,
        config: TokenizationConfig | None = None,
        normalizer: TextNormalizer | None = None,
    ):
        self.cfg = config or TokenizationConfig()
        self.normalizer = normalizer or DefaultTextNormalizer()

    def tokenize(self, text: str) -> List[str]:
        s = self.normalizer(text)
        out: List[str] = []
        for t in s.split(self.cfg.separator):
            if not t and self.cfg.drop_empty_tokens:
                continue
            if len(t) < self.cfg.min_token_len:
                continue
            out.append(t)
        return out
