"""
NLU Module - обработка текста для нормализации и поискового индекса.

Компоненты:
- AliasNormalizer: ключ сравнения для алиасов стран и континентов
- LanguageClassifier: китайский / английский / смешанный текст, раскладка по полям
- SpellCorrectionEngine: исправление опечаток по взвешенным правилам
- TextAnalyzer: сегментация, POS-теги, пиньинь, упрощённые <-> традиционные
- token_filter: очистка фрагментов перед индексом
- SearchEnrichmentEngine: объединяющий сервис поисковых полей
"""

from .alias_normalizer import AliasNormalizer, normalize_alias
from .enrichment import (
    HotelEntities,
    QueryAnalysis,
    SearchEnrichmentEngine,
    get_enrichment_engine,
    reset_enrichment_engine,
)
from .language import Language, LanguageClassifier, get_language_classifier
from .spell_corrector import (
    CorrectionResult,
    SpellCorrectionEngine,
    get_spell_engine,
    reset_spell_engine,
)
from .text_analyzer import JiebaTextAnalyzer, TextAnalyzer, get_text_analyzer, reset_text_analyzer
from .token_filter import clean_token, filter_valid_tokens

__all__ = [
    "AliasNormalizer",
    "normalize_alias",
    "HotelEntities",
    "QueryAnalysis",
    "SearchEnrichmentEngine",
    "get_enrichment_engine",
    "reset_enrichment_engine",
    "Language",
    "LanguageClassifier",
    "get_language_classifier",
    "CorrectionResult",
    "SpellCorrectionEngine",
    "get_spell_engine",
    "reset_spell_engine",
    "JiebaTextAnalyzer",
    "TextAnalyzer",
    "get_text_analyzer",
    "reset_text_analyzer",
    "clean_token",
    "filter_valid_tokens",
]
