"""
AliasNormalizer - сведение названий к ключу сопоставления.

"Türkiye", "TURKIYE " и "the Republic of Türkiye" дают один ключ "turkiye".
Ключ используется индексом географического каталога и правилами опечаток.
"""

from __future__ import annotations

import re
import unicodedata
from typing import FrozenSet, Iterable, Optional

DEFAULT_STOPWORDS: FrozenSet[str] = frozenset({"the", "and", "of", "republic", "federation"})

_APOSTROPHES = re.compile(r"['’ʼ`]")
_SEPARATORS = re.compile(r"[\W_]+", re.UNICODE)


def strip_marks(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_alias(text: Optional[str], stopwords: Iterable[str] | None = None) -> str:
    """Return the match key for `text`; blank or None gives ""."""
    if not text or not text.strip():
        return ""
    words = DEFAULT_STOPWORDS if stopwords is None else frozenset(w.lower() for w in stopwords)

    result = strip_marks(text.lower()).lower()
    result = _APOSTROPHES.sub("", result)
    result = result.replace("&", " and ")

    tokens = [token for token in _SEPARATORS.split(result) if token and token not in words]
    key = "".join(tokens)
    # "t-h-e" склеивается в стоп-слово: повторный проход должен дать тот же ключ
    if key in words:
        return ""
    return key


class AliasNormalizer:
    """Callable wrapper carrying a configured stopword set."""

    def __init__(self, stopwords: Iterable[str] | None = None) -> None:
        self._stopwords = DEFAULT_STOPWORDS if stopwords is None else frozenset(w.lower() for w in stopwords)

    @property
    def stopwords(self) -> FrozenSet[str]:
        return self._stopwords

    def __call__(self, text: Optional[str]) -> str:
        return normalize_alias(text, self._stopwords)

    normalize = __call__
