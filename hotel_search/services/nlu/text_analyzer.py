"""
TextAnalyzer - адаптер к внешним библиотекам китайской обработки текста.

Использует:
- jieba: сегментация, POS-теги (ns, nt, nr, nb), TF-IDF ключевые слова
- pypinyin: пиньинь и первые буквы слогов
- opencc: упрощённые <-> традиционные иероглифы

Адаптер ничего не перехватывает: ошибки ловит SearchEnrichmentEngine и
подставляет простой fallback.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Dict, Iterable, List, Optional

import jieba
import jieba.analyse
import jieba.posseg
from opencc import OpenCC
from pypinyin import Style, lazy_pinyin

from ..errors import CapabilityError
from .hotel_lexicon import BRAND_WORD_TAG, HOTEL_BRANDS

logger = logging.getLogger(__name__)

# Суффиксы, от которых бренд отделяется при сегментации
BRAND_SPLIT_SUFFIXES = ("酒店", "大酒店", "饭店", "宾馆", "度假村")


@dataclass(frozen=True)
class TaggedToken:
    word: str
    flag: str


@dataclass(frozen=True)
class OffsetToken:
    token: str
    begin: int
    end: int


class TextAnalyzer:
    """Interface of the segmentation/keyword/transliteration capability."""

    def cut(self, text: str) -> List[str]:
        raise NotImplementedError

    def cut_for_index(self, text: str) -> List[OffsetToken]:
        raise NotImplementedError

    def tag(self, text: str) -> List[TaggedToken]:
        raise NotImplementedError

    def keywords(self, text: str, top_k: int) -> List[str]:
        raise NotImplementedError

    def pinyin(self, text: str) -> List[str]:
        raise NotImplementedError

    def pinyin_initials(self, text: str) -> List[str]:
        raise NotImplementedError

    def to_traditional(self, text: str) -> str:
        raise NotImplementedError

    def to_simplified(self, text: str) -> str:
        raise NotImplementedError

    def add_word(self, word: str, tag: Optional[str] = None) -> None:
        raise NotImplementedError

    def remove_word(self, word: str) -> None:
        raise NotImplementedError


class JiebaTextAnalyzer(TextAnalyzer):
    """jieba + pypinyin + opencc, with its own dictionary instance.

    The brand lexicon is registered under the `nb` tag so that POS tagging
    can pick brands out of hotel names.
    """

    def __init__(self, brand_words: Iterable[str] | None = None) -> None:
        self._tokenizer = jieba.Tokenizer()
        self._pos = jieba.posseg.POSTokenizer(self._tokenizer)
        self._tfidf = jieba.analyse.TFIDF()
        self._tfidf.tokenizer = self._tokenizer
        self._tfidf.postokenizer = self._pos
        self._converters: Dict[str, OpenCC] = {}
        self._converters_lock = Lock()

        for word in (HOTEL_BRANDS if brand_words is None else brand_words):
            self._tokenizer.add_word(word, tag=BRAND_WORD_TAG)
            # Словарь jieba знает составные "希尔顿酒店" и т.п.: понижаем их частоту,
            # чтобы бренд выделялся отдельным токеном
            for suffix in BRAND_SPLIT_SUFFIXES:
                self._tokenizer.suggest_freq((word, suffix), tune=True)

    # Сегментация

    def cut(self, text: str) -> List[str]:
        return list(self._tokenizer.cut(text))

    def cut_for_index(self, text: str) -> List[OffsetToken]:
        return [OffsetToken(word, start, end) for word, start, end in self._tokenizer.tokenize(text, mode="search")]

    def tag(self, text: str) -> List[TaggedToken]:
        return [TaggedToken(pair.word, pair.flag) for pair in self._pos.cut(text)]

    def keywords(self, text: str, top_k: int) -> List[str]:
        return list(self._tfidf.extract_tags(text, topK=top_k))

    # Транслитерация

    def pinyin(self, text: str) -> List[str]:
        return lazy_pinyin(text)

    def pinyin_initials(self, text: str) -> List[str]:
        return lazy_pinyin(text, style=Style.FIRST_LETTER)

    def to_traditional(self, text: str) -> str:
        return self._converter("s2t").convert(text)

    def to_simplified(self, text: str) -> str:
        return self._converter("t2s").convert(text)

    def _converter(self, config: str) -> OpenCC:
        converter = self._converters.get(config)
        if converter is None:
            with self._converters_lock:
                converter = self._converters.get(config)
                if converter is None:
                    converter = OpenCC(config)
                    self._converters[config] = converter
        return converter

    # Пользовательский словарь

    def add_word(self, word: str, tag: Optional[str] = None) -> None:
        self._tokenizer.add_word(word, tag=tag)

    def remove_word(self, word: str) -> None:
        self._tokenizer.del_word(word)


_text_analyzer: TextAnalyzer | None = None
_text_analyzer_lock = Lock()


def get_text_analyzer() -> TextAnalyzer:
    """Общий анализатор; словарь jieba загружается один раз даже при параллельном первом вызове."""
    global _text_analyzer
    if _text_analyzer is None:
        with _text_analyzer_lock:
            if _text_analyzer is None:
                try:
                    _text_analyzer = JiebaTextAnalyzer()
                except Exception as exc:
                    raise CapabilityError(reason=f"text analyzer unavailable: {exc}") from exc
                logger.info("Text analyzer ready: %s", type(_text_analyzer).__name__)
    return _text_analyzer


def reset_text_analyzer() -> None:
    """Сбросить общий анализатор (для тестов)."""
    global _text_analyzer
    with _text_analyzer_lock:
        _text_analyzer = None
