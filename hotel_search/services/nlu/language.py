"""
LanguageClassifier - определение языка по письменности и раскладка по BilingualField.

Правила:
- Есть иероглифы и латиница: побеждает большее количество, равенство даёт MIXED
- Только одна письменность: её язык
- Ни одной: UNKNOWN, такой текст уходит в английскую сторону
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from ...models import BilingualField

# Диапазоны CJK-иероглифов (основной блок, расширения A-B-C/D, совместимость)
CJK_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x4E00, 0x9FFF),
    (0x3400, 0x4DBF),
    (0xF900, 0xFAFF),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2CEAF),
    (0x2F800, 0x2FA1F),
)


class Language(str, Enum):
    ZH = "zh"
    EN = "en"
    MIXED = "mixed"
    UNKNOWN = "unknown"


def is_cjk(ch: str) -> bool:
    code = ord(ch)
    return any(low <= code <= high for low, high in CJK_RANGES)


def is_latin_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def count_scripts(text: Optional[str]) -> Tuple[int, int]:
    """Return `(cjk_count, latin_count)`."""
    if not text:
        return 0, 0
    cjk = latin = 0
    for ch in text:
        if is_cjk(ch):
            cjk += 1
        elif is_latin_letter(ch):
            latin += 1
    return cjk, latin


class LanguageClassifier:
    """Script-based language detection; stateless."""

    @staticmethod
    def contains_cjk(text: Optional[str]) -> bool:
        return bool(text) and any(is_cjk(ch) for ch in text)

    @staticmethod
    def contains_latin_letters(text: Optional[str]) -> bool:
        return bool(text) and any(is_latin_letter(ch) for ch in text)

    def classify(self, text: Optional[str]) -> Language:
        cjk, latin = count_scripts(text)
        if cjk and latin:
            if cjk > latin:
                return Language.ZH
            if latin > cjk:
                return Language.EN
            return Language.MIXED
        if cjk:
            return Language.ZH
        if latin:
            return Language.EN
        return Language.UNKNOWN

    def assign(self, text: Optional[str]) -> BilingualField:
        """Put `text` on exactly one side; blank input gives an empty field."""
        if not text or not text.strip():
            return BilingualField()
        value = text.strip()
        language = self.classify(value)
        if language is Language.ZH:
            return BilingualField(chinese=value)
        if language is Language.MIXED:
            cjk, latin = count_scripts(value)
            if cjk > latin:
                return BilingualField(chinese=value)
            return BilingualField(english=value)
        # EN и UNKNOWN
        return BilingualField(english=value)

    def merge(
        self,
        existing_zh: Optional[str],
        existing_en: Optional[str],
        fallback_text: Optional[str] = None,
    ) -> BilingualField:
        """Keep known values; `fallback_text` only fills a side that is still empty."""
        chinese = existing_zh.strip() if existing_zh and existing_zh.strip() else None
        english = existing_en.strip() if existing_en and existing_en.strip() else None
        if (chinese is None or english is None) and fallback_text:
            guess = self.assign(fallback_text)
            if chinese is None and guess.chinese:
                chinese = guess.chinese
            if english is None and guess.english:
                english = guess.english
        return BilingualField(chinese=chinese, english=english)

    def assign_from_priority_list(self, *candidates: Optional[str]) -> BilingualField:
        chinese: Optional[str] = None
        english: Optional[str] = None
        for candidate in candidates:
            if chinese is not None and english is not None:
                break
            guess = self.assign(candidate)
            if chinese is None and guess.chinese:
                chinese = guess.chinese
            if english is None and guess.english:
                english = guess.english
        return BilingualField(chinese=chinese, english=english)


_language_classifier = LanguageClassifier()


def get_language_classifier() -> LanguageClassifier:
    return _language_classifier
