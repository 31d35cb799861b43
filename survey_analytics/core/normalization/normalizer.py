from __future__ import annotations
import re
import unicodedata

from survey_analytics.core.normalization.base import TextNormalizer
from survey_analytics.core.normalization.config import NormalizationConfig


class DefaultTextNormalizer(TextNormalizer):
    _re_multi_ws = re.compile(r"\s+")

    def __init__(self, config: NormalizationConfig | None = None):
        self.cfg = config or NormalizationConfig()
        self._re_punct = (
            re.compile("[" + re.escape(self.cfg.punctuation) + "]")
            if self.cfg.punctuation
            else None
        )

    def normalize(self, text: str) -> str:
        s = text

        if self.cfg.unicode_nfkc:
            s = unicodedata.normalize("NFKC", s)

        if self.cfg.lowercase:
            s = s.lower()

        if self._re_punct is not None:
            s = self._re_punct.sub(" ", s)

        if self.cfg.collapse_whitespace:
            s = self._re_multi_ws.sub(" ", s)
        return s.strip()
