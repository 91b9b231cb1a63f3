"""Shared pytest fixtures for all tests."""

from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from hotel_search.config import Settings
from hotel_search.services.geo import GeographyCatalog, GeographyResolver
from hotel_search.services.nlu.enrichment import SearchEnrichmentEngine
from hotel_search.services.nlu.language import LanguageClassifier
from hotel_search.services.nlu.spell_corrector import SpellCorrectionEngine, parse_rule_entries
from hotel_search.services.nlu.text_analyzer import OffsetToken, TaggedToken, TextAnalyzer
from hotel_search.services.providers import ExtractorRegistry


class FakeAnalyzer(TextAnalyzer):
    """Deterministic analyzer: whitespace segmentation and a fixed tag table."""

    def __init__(self, tags: Optional[Dict[str, str]] = None) -> None:
        self.tags = dict(tags or {})
        self.custom_words: Dict[str, Optional[str]] = {}
        self.seen: List[str] = []

    def cut(self, text: str) -> List[str]:
        self.seen.append(text)
        return text.split(" ")

    def cut_for_index(self, text: str) -> List[OffsetToken]:
        tokens: List[OffsetToken] = []
        position = 0
        for word in text.split(" "):
            tokens.append(OffsetToken(word, position, position + len(word)))
            position += len(word) + 1
        return tokens

    def tag(self, text: str) -> List[TaggedToken]:
        self.seen.append(text)
        return [TaggedToken(word, self.tags.get(word, "n")) for word in text.split(" ")]

    def keywords(self, text: str, top_k: int) -> List[str]:
        return list(dict.fromkeys(text.split(" ")))[:top_k]

    def pinyin(self, text: str) -> List[str]:
        return {"北京": ["bei", "jing"], "希尔顿": ["xi", "er", "dun"]}.get(text, [text])

    def pinyin_initials(self, text: str) -> List[str]:
        return [syllable[:1].upper() for syllable in self.pinyin(text)]

    def to_traditional(self, text: str) -> str:
        return text.replace("国", "國").replace("际", "際")

    def to_simplified(self, text: str) -> str:
        return text.replace("國", "国").replace("際", "际")

    def add_word(self, word: str, tag: Optional[str] = None) -> None:
        self.custom_words[word] = tag

    def remove_word(self, word: str) -> None:
        self.custom_words.pop(word)


class BrokenAnalyzer(TextAnalyzer):
    """Every capability call fails."""

    def _fail(self, *args, **kwargs):
        raise RuntimeError("segmentation backend unavailable")

    cut = cut_for_index = tag = keywords = _fail
    pinyin = pinyin_initials = to_traditional = to_simplified = _fail
    add_word = remove_word = _fail


@pytest.fixture
def settings() -> Settings:
    """Default settings for tests, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture(scope="session")
def catalog() -> GeographyCatalog:
    return GeographyCatalog()


@pytest.fixture
def resolver(catalog: GeographyCatalog) -> GeographyResolver:
    return GeographyResolver(catalog)


@pytest.fixture
def classifier() -> LanguageClassifier:
    return LanguageClassifier()


@pytest.fixture
def empty_spell_engine() -> SpellCorrectionEngine:
    return SpellCorrectionEngine(rules=[])


@pytest.fixture
def spell_engine() -> SpellCorrectionEngine:
    """Engine with a small in-memory rule set."""
    return SpellCorrectionEngine(
        rules=parse_rule_entries(
            {
                "geo.beijing": "北亰,北平 | 北京 | 9 | ALL | Beijing",
                "brand.hilton": "希尔敦 | 希尔顿 | 9 | ALL | Hilton",
                "geo.shenzhen": "深坳 | 深圳 | 8 | DOMESTIC | Shenzhen",
            }
        )
    )


@pytest.fixture
def fake_analyzer() -> FakeAnalyzer:
    return FakeAnalyzer(tags={"北京": "ns", "朝阳": "ns", "希尔顿": "nb", "首旅": "nt", "张三": "nr"})


@pytest.fixture
def broken_analyzer() -> BrokenAnalyzer:
    return BrokenAnalyzer()


@pytest.fixture
def enrichment(fake_analyzer: FakeAnalyzer, spell_engine: SpellCorrectionEngine, settings: Settings) -> SearchEnrichmentEngine:
    return SearchEnrichmentEngine(analyzer=fake_analyzer, spell_engine=spell_engine, settings=settings)


@pytest.fixture
def degraded_enrichment(
    broken_analyzer: BrokenAnalyzer, spell_engine: SpellCorrectionEngine, settings: Settings
) -> SearchEnrichmentEngine:
    return SearchEnrichmentEngine(analyzer=broken_analyzer, spell_engine=spell_engine, settings=settings)


@pytest.fixture
def registry(resolver: GeographyResolver, classifier: LanguageClassifier, settings: Settings) -> ExtractorRegistry:
    return ExtractorRegistry.default(resolver, classifier, settings)


class SearchModeAnalyzer(FakeAnalyzer):
    """Search mode additionally splits the compound hotel name."""

    def cut_for_index(self, text: str) -> List[OffsetToken]:
        return super().cut_for_index(text) + [OffsetToken("希尔顿", 3, 6), OffsetToken("酒店", 6, 8)]


@pytest.fixture
def tagged_enrichment(spell_engine: SpellCorrectionEngine, settings: Settings):
    """Factory: enrichment engine over a FakeAnalyzer with a custom tag table."""

    def factory(tags: Dict[str, str], search_mode: bool = False) -> SearchEnrichmentEngine:
        analyzer = SearchModeAnalyzer(tags) if search_mode else FakeAnalyzer(tags)
        return SearchEnrichmentEngine(analyzer=analyzer, spell_engine=spell_engine, settings=settings)

    return factory
