"""
TokenFilter - очистка фрагментов перед записью в индекс.

clean_token:
- оставляет буквы, цифры, CJK-иероглифы, пробел и дефис
- убирает дефисы по краям и схлопывает повторные
- отбрасывает пустое, чисто числовое, одиночный не-CJK символ и имена HTML-тегов
"""

from __future__ import annotations

import re
from typing import FrozenSet, Iterable, List, Optional

from .language import is_cjk

HTML_TAG_NAMES: FrozenSet[str] = frozenset({
    "br", "p", "div", "span", "a", "img", "b", "i", "u", "strong", "em",
    "h1", "h2", "h3", "h4", "h5", "h6", "ul", "ol", "li",
    "table", "tr", "td", "th", "thead", "tbody", "tfoot",
    "form", "input", "button", "select", "option",
    "header", "footer", "nav", "section", "article",
    "script", "style", "link", "meta", "nbsp",
})

_REPEATED_HYPHENS = re.compile(r"-{2,}")
_NUMERIC = re.compile(r"^[\d\s\-]+$")


def _allowed(ch: str) -> bool:
    return ch.isalnum() or is_cjk(ch) or ch in (" ", "-")


def clean_token(token: Optional[str]) -> Optional[str]:
    if token is None:
        return None
    cleaned = "".join(ch for ch in token if _allowed(ch)).strip()
    cleaned = _REPEATED_HYPHENS.sub("-", cleaned).strip("-").strip()
    if not cleaned:
        return None
    if _NUMERIC.match(cleaned):
        return None
    if len(cleaned) == 1 and not is_cjk(cleaned):
        return None
    if cleaned.lower() in HTML_TAG_NAMES:
        return None
    return cleaned


def filter_valid_tokens(tokens: Iterable[Optional[str]]) -> List[str]:
    """Clean every token and drop duplicates case-insensitively, keeping first casing."""
    seen: set[str] = set()
    result: List[str] = []
    for token in tokens or ():
        cleaned = clean_token(token)
        if cleaned is None:
            continue
        key = cleaned.lower()
        if key in seen:
            continue
        seen.add(key)
        result.append(cleaned)
    return result
