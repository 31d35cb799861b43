from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional


class TextNormalizer(ABC):
    """Port for cleaning free-text survey answers before tokenization.

    Answers arrive as raw form input: missing (None), mixed case, with
    punctuation and stray whitespace. Implementations return the canonical
    lowercase, single-spaced form the lexicons are keyed on.
    """

    def __call__(self, text: Optional[str]) -> str:
        if text is None:
            return ""
        return self.normalize(str(text))

    @abstractmethod
    def normalize(self, text: str) -> str: ...
