"""
Providers - разбор сырых карточек отелей от поставщиков в NormalizedHotelRecord.

Компоненты:
- ProviderExtractor: общий разбор payload, координаты, гео-дозаполнение
- ElongExtractor: раздельные китайские/английские колонки, по умолчанию Китай
- AgodaExtractor: одно значение на поле, язык определяется по тексту
- ExtractorRegistry: выбор экстрактора по id поставщика (fallback на Agoda)
"""

from .agoda import AgodaExtractor
from .base import (
    ProviderExtractor,
    first_non_blank,
    join_non_blank,
    parse_payload,
    text_at,
    validate_coordinates,
)
from .elong import ElongExtractor
from .selector import ExtractorRegistry, get_extractor_registry, reset_extractor_registry

__all__ = [
    "AgodaExtractor",
    "ElongExtractor",
    "ExtractorRegistry",
    "ProviderExtractor",
    "first_non_blank",
    "get_extractor_registry",
    "join_non_blank",
    "parse_payload",
    "reset_extractor_registry",
    "text_at",
    "validate_coordinates",
]
