"""
SearchEnrichmentEngine - поля поискового индекса и разбор пользовательского запроса.

Компоненты:
- SpellCorrectionEngine: исправление опечаток перед сегментацией (домен ALL)
- TextAnalyzer: jieba / pypinyin / opencc
- token_filter: очистка фрагментов, попадающих в индекс

Все публичные методы тотальны: при ошибке внешней библиотеки пишем debug-лог
и возвращаем простой fallback (split по не-буквенным символам, пустой список,
исходный текст).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ...config import Settings, get_settings
from ...models import ALL_DOMAINS, EnrichedSearchFields, NormalizedHotelRecord
from .hotel_lexicon import (
    FACILITY_KEYWORDS,
    brand_english_names,
    is_brand_word,
    is_location_word,
    is_number_with_unit,
)
from .spell_corrector import SpellCorrectionEngine, get_spell_engine
from .text_analyzer import OffsetToken, TaggedToken, TextAnalyzer, get_text_analyzer
from .token_filter import filter_valid_tokens

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_NAIVE_SPLIT = re.compile(r"[^\u4e00-\u9fa5A-Za-z0-9]+")
_PUNCTUATION_ONLY = re.compile(r"[\W_]+")

MIN_TOP_K = 1
MAX_TOP_K = 10

PLACE_TAG = "ns"
ORG_TAGS = ("nt",)
PERSON_TAG = "nr"
BRAND_TAG = "nb"

# Пунктуация, URL, время и "прочие имена" не нужны в доменных токенах
EXCLUDED_DOMAIN_TAGS = frozenset({"w", "ws", "wt", "x", "nz"})
TRIVIAL_VERBS = frozenset({"是", "有", "在"})
_HAS_DIGIT = re.compile(r"\d")


def is_valuable_token(word: str, flag: str) -> bool:
    """Существительные длиннее одного символа и без цифр, прилагательные, содержательные глаголы."""
    if flag.startswith("n"):
        return len(word) > 1 and not _HAS_DIGIT.search(word)
    if flag.startswith("v"):
        return word not in TRIVIAL_VERBS
    return flag.startswith("a")


@dataclass
class HotelEntities:
    place_names: List[str] = field(default_factory=list)
    organization_names: List[str] = field(default_factory=list)
    person_names: List[str] = field(default_factory=list)
    facility_keywords: List[str] = field(default_factory=list)
    brand_keywords: List[str] = field(default_factory=list)

    def all_entities(self) -> List[str]:
        return [
            *self.place_names,
            *self.organization_names,
            *self.person_names,
            *self.facility_keywords,
            *self.brand_keywords,
        ]


@dataclass
class QueryAnalysis:
    original: str
    normalized: str
    corrected: str
    tokens: List[str] = field(default_factory=list)
    domain_tokens: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    pinyin: List[str] = field(default_factory=list)
    pinyin_initials: str = ""

    @property
    def was_corrected(self) -> bool:
        return self.corrected != self.normalized


def _distinct(items: Iterable[str], limit: Optional[int] = None) -> List[str]:
    result = list(dict.fromkeys(item for item in items if item))
    return result[:limit] if limit is not None else result


class SearchEnrichmentEngine:
    def __init__(
        self,
        analyzer: TextAnalyzer | None = None,
        spell_engine: SpellCorrectionEngine | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._analyzer = analyzer
        self._spell_engine = spell_engine
        self._settings = settings or get_settings()

    # Анализатор создаётся лениво: ошибка инициализации jieba тоже уходит в fallback
    @property
    def analyzer(self) -> TextAnalyzer:
        if self._analyzer is None:
            self._analyzer = get_text_analyzer()
        return self._analyzer

    @property
    def spell_engine(self) -> SpellCorrectionEngine:
        if self._spell_engine is None:
            self._spell_engine = get_spell_engine()
        return self._spell_engine

    # =========================================================================
    # Нормализация и fallback
    # =========================================================================

    @staticmethod
    def normalize(text: Optional[str]) -> str:
        if not text:
            return ""
        return _WHITESPACE.sub(" ", text.replace("\u00a0", " ")).strip()

    @staticmethod
    def naive_split(text: Optional[str]) -> List[str]:
        if not text:
            return []
        return [part for part in _NAIVE_SPLIT.split(text) if part.strip()]

    def _correct(self, text: str) -> str:
        try:
            return self.spell_engine.get_correction(text, ALL_DOMAINS)
        except Exception as exc:
            logger.debug("Spell correction unavailable: %s", exc)
            return text

    # =========================================================================
    # Токенизация и ключевые слова
    # =========================================================================

    def tokenize_fine(self, text: Optional[str]) -> List[str]:
        normalized = self.normalize(text)
        if not normalized:
            return []
        try:
            corrected = self._correct(normalized)
            return self._post_process(self.analyzer.cut(corrected))
        except Exception as exc:
            logger.debug("tokenize_fine degraded: %s", exc)
            return self.naive_split(normalized)

    @staticmethod
    def _post_process(words: Iterable[str]) -> List[str]:
        # Число+единица ("5星级"), бренды и гео-суффиксы идут как есть;
        # из прочего выбрасываем только фрагменты из одной пунктуации
        tokens: List[str] = []
        for word in words:
            word = word.strip()
            if not word:
                continue
            if is_number_with_unit(word) or is_brand_word(word) or is_location_word(word):
                tokens.append(word)
            elif not _PUNCTUATION_ONLY.fullmatch(word):
                tokens.append(word)
        return tokens

    def standard_tokens(self, text: Optional[str]) -> List[str]:
        """Сырая сегментация без исправления опечаток и постобработки."""
        normalized = self.normalize(text)
        if not normalized:
            return []
        try:
            return [word for word in self.analyzer.cut(normalized) if word.strip()]
        except Exception as exc:
            logger.debug("standard_tokens degraded: %s", exc)
            return self.naive_split(normalized)

    def nlp_tokens(self, text: Optional[str]) -> List[str]:
        """Слова из POS-разметки."""
        normalized = self.normalize(text)
        if not normalized:
            return []
        try:
            return [t.word for t in self.analyzer.tag(normalized) if t.word.strip()]
        except Exception as exc:
            logger.debug("nlp_tokens degraded: %s", exc)
            return self.naive_split(normalized)

    def hotel_domain_tokens(self, text: Optional[str]) -> List[str]:
        """
        Объединение двух стратегий: POS-разметка и поисковая сегментация.

        Текст сначала исправляется; токены с тегами из EXCLUDED_DOMAIN_TAGS
        и фрагменты из одной пунктуации отбрасываются, порядок сохраняется.
        """
        normalized = self.normalize(text)
        if not normalized:
            return []
        try:
            corrected = self._correct(normalized)
            tagged = self.analyzer.tag(corrected)
            flags = {t.word: t.flag for t in tagged}
            candidates = [t.word for t in tagged if t.flag not in EXCLUDED_DOMAIN_TAGS]
            candidates.extend(
                t.token
                for t in self.analyzer.cut_for_index(corrected)
                if flags.get(t.token) not in EXCLUDED_DOMAIN_TAGS
            )
        except Exception as exc:
            logger.debug("hotel_domain_tokens degraded: %s", exc)
            return self.naive_split(normalized)
        return _distinct(
            word.strip() for word in candidates if word.strip() and not _PUNCTUATION_ONLY.fullmatch(word.strip())
        )

    def smart_token_filter(self, text: Optional[str]) -> List[str]:
        normalized = self.normalize(text)
        if not normalized:
            return []
        try:
            tagged = self.analyzer.tag(normalized)
        except Exception as exc:
            logger.debug("smart_token_filter degraded: %s", exc)
            return self.naive_split(normalized)
        return [t.word.strip() for t in tagged if t.word.strip() and is_valuable_token(t.word.strip(), t.flag)]

    def extract_keywords(self, text: Optional[str], top_k: Optional[int] = None) -> List[str]:
        normalized = self.normalize(text)
        if not normalized:
            return []
        k = top_k if top_k is not None else self._settings.keyword_top_k
        k = max(MIN_TOP_K, min(k, MAX_TOP_K))
        try:
            corrected = self._correct(normalized)
            return list(self.analyzer.keywords(corrected, k))[:k]
        except Exception as exc:
            logger.debug("extract_keywords degraded: %s", exc)
            return _distinct(self.naive_split(normalized), k)

    def index_tokens(self, text: Optional[str]) -> List[OffsetToken]:
        """Search-mode tokens with offsets; fallback tokens carry -1 offsets."""
        normalized = self.normalize(text)
        if not normalized:
            return []
        try:
            return [t for t in self.analyzer.cut_for_index(normalized) if t.token.strip()]
        except Exception as exc:
            logger.debug("index_tokens degraded: %s", exc)
            return [OffsetToken(token, -1, -1) for token in self.naive_split(normalized)]

    # =========================================================================
    # Сущности
    # =========================================================================

    def _tagged(self, text: str, correct: bool) -> List[TaggedToken]:
        source = self._correct(text) if correct else text
        return self.analyzer.tag(source)

    def ner_places(self, text: Optional[str]) -> List[str]:
        normalized = self.normalize(text)
        if not normalized:
            return []
        try:
            words = (t.word for t in self._tagged(normalized, correct=True) if t.flag == PLACE_TAG)
            return _distinct(words, self._settings.max_place_entities)
        except Exception as exc:
            logger.debug("ner_places degraded: %s", exc)
            return []

    def ner_orgs(self, text: Optional[str]) -> List[str]:
        normalized = self.normalize(text)
        if not normalized:
            return []
        try:
            return _distinct(t.word for t in self._tagged(normalized, correct=False) if t.flag in ORG_TAGS)
        except Exception as exc:
            logger.debug("ner_orgs degraded: %s", exc)
            return []

    def ner_persons(self, text: Optional[str]) -> List[str]:
        normalized = self.normalize(text)
        if not normalized:
            return []
        try:
            return _distinct(t.word for t in self._tagged(normalized, correct=False) if t.flag == PERSON_TAG)
        except Exception as exc:
            logger.debug("ner_persons degraded: %s", exc)
            return []

    def ner_brands(self, text: Optional[str]) -> List[str]:
        normalized = self.normalize(text)
        if not normalized:
            return []
        try:
            return _distinct(t.word for t in self._tagged(normalized, correct=False) if t.flag == BRAND_TAG)
        except Exception as exc:
            logger.debug("ner_brands degraded: %s", exc)
            return []

    def extract_hotel_entities(self, text: Optional[str]) -> HotelEntities:
        normalized = self.normalize(text)
        if not normalized:
            return HotelEntities()
        try:
            tagged = self._tagged(normalized, correct=False)
        except Exception as exc:
            logger.debug("extract_hotel_entities degraded: %s", exc)
            return HotelEntities()

        entities = HotelEntities()
        for token in tagged:
            word = token.word.strip()
            if not word:
                continue
            if token.flag == PLACE_TAG:
                entities.place_names.append(word)
            elif token.flag in ORG_TAGS or token.flag == "nz":
                entities.organization_names.append(word)
            elif token.flag == PERSON_TAG:
                entities.person_names.append(word)
            elif token.flag == BRAND_TAG:
                entities.brand_keywords.append(word)
            if word in FACILITY_KEYWORDS:
                entities.facility_keywords.append(word)

        entities.place_names = _distinct(entities.place_names)
        entities.organization_names = _distinct(entities.organization_names)
        entities.person_names = _distinct(entities.person_names)
        entities.facility_keywords = _distinct(entities.facility_keywords)
        entities.brand_keywords = _distinct(entities.brand_keywords)
        return entities

    # =========================================================================
    # Транслитерация
    # =========================================================================

    def to_pinyin(self, text: Optional[str]) -> List[str]:
        normalized = self.normalize(text)
        if not normalized:
            return []
        try:
            return [item.strip() for item in self.analyzer.pinyin(normalized) if item.strip()]
        except Exception as exc:
            logger.debug("to_pinyin degraded: %s", exc)
            return []

    def to_pinyin_initials(self, text: Optional[str]) -> str:
        normalized = self.normalize(text)
        if not normalized:
            return ""
        try:
            heads = (item.strip()[:1] for item in self.analyzer.pinyin_initials(normalized))
            return "".join(head for head in heads if head.isalnum()).lower()
        except Exception as exc:
            logger.debug("to_pinyin_initials degraded: %s", exc)
            return ""

    def to_traditional(self, text: Optional[str]) -> str:
        if not text:
            return text or ""
        try:
            return self.analyzer.to_traditional(text)
        except Exception as exc:
            logger.debug("to_traditional degraded: %s", exc)
            return text

    def to_simplified(self, text: Optional[str]) -> str:
        if not text:
            return text or ""
        try:
            return self.analyzer.to_simplified(text)
        except Exception as exc:
            logger.debug("to_simplified degraded: %s", exc)
            return text

    # =========================================================================
    # Пользовательский словарь
    # =========================================================================

    def add_custom_word(self, word: Optional[str], tag: Optional[str] = "nz") -> bool:
        if not word or not word.strip():
            return False
        try:
            self.analyzer.add_word(word.strip(), tag)
            return True
        except Exception as exc:
            logger.debug("add_custom_word failed for %r: %s", word, exc)
            return False

    def remove_custom_word(self, word: Optional[str]) -> bool:
        if not word or not word.strip():
            return False
        try:
            self.analyzer.remove_word(word.strip())
            return True
        except Exception as exc:
            logger.debug("remove_custom_word failed for %r: %s", word, exc)
            return False

    # =========================================================================
    # Запись и запрос
    # =========================================================================

    def enrich(self, record: NormalizedHotelRecord) -> EnrichedSearchFields:
        """Build the derived index fields for one normalized record."""
        name = record.name.preferred
        address = record.address.preferred
        name_cn = record.name.chinese
        address_cn = record.address.chinese

        place_source = " ".join(part for part in (name, address) if part)
        brand_source = " ".join(part for part in (record.name.chinese, record.name.english) if part)

        brand_names: List[str] = [value for value in (record.brand.chinese, record.brand.english) if value]
        for chinese, english in brand_english_names(brand_source).items():
            brand_names.extend((chinese, english))

        return EnrichedSearchFields(
            name_tokens=filter_valid_tokens(self.tokenize_fine(name)),
            address_tokens=filter_valid_tokens(self.tokenize_fine(address)),
            name_keywords=filter_valid_tokens(self.extract_keywords(name)),
            ner_places=filter_valid_tokens(self.ner_places(place_source)),
            ner_orgs=filter_valid_tokens(self.ner_orgs(name)),
            ner_brands=filter_valid_tokens(self.ner_brands(brand_source)),
            brand_names=filter_valid_tokens(brand_names),
            name_pinyin=" ".join(self.to_pinyin(name_cn)) or None,
            name_pinyin_initials=self.to_pinyin_initials(name_cn) or None,
            name_traditional=self.to_traditional(name_cn) or None,
            address_traditional=self.to_traditional(address_cn) or None,
            geo_hierarchy=filter_valid_tokens(
                (
                    record.continent.chinese,
                    record.continent.english,
                    record.country.chinese,
                    record.country.english,
                    record.region.chinese,
                    record.region.english,
                    record.city.chinese,
                    record.city.english,
                )
            ),
        )

    def analyze_query(self, text: Optional[str]) -> QueryAnalysis:
        """Query path: the same pipeline the index fields go through."""
        normalized = self.normalize(text)
        corrected = self._correct(normalized) if normalized else ""
        return QueryAnalysis(
            original=text or "",
            normalized=normalized,
            corrected=corrected,
            tokens=self.tokenize_fine(normalized),
            domain_tokens=self.hotel_domain_tokens(normalized),
            keywords=self.extract_keywords(normalized),
            pinyin=self.to_pinyin(corrected),
            pinyin_initials=self.to_pinyin_initials(corrected),
        )


_enrichment_engine: SearchEnrichmentEngine | None = None


def get_enrichment_engine() -> SearchEnrichmentEngine:
    global _enrichment_engine
    if _enrichment_engine is None:
        _enrichment_engine = SearchEnrichmentEngine()
    return _enrichment_engine


def reset_enrichment_engine() -> None:
    global _enrichment_engine
    _enrichment_engine = None
