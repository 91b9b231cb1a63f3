"""
Geography - страны и континенты с поиском по коду, китайскому и английскому названию.

Компоненты:
- GeographyCatalog: неизменяемая таблица и индексы алиасов, строится один раз
- GeographyResolver: поиск с sentinel-результатом вместо исключений
"""

from .catalog import (
    NO_CONTINENT,
    NO_MATCH,
    AliasCollision,
    ContinentEntry,
    GeographyCatalog,
    GeographyEntry,
    get_geography_catalog,
    reset_geography_catalog,
)
from .resolver import GeographyResolver, get_geography_resolver, reset_geography_resolver

__all__ = [
    "NO_CONTINENT",
    "NO_MATCH",
    "AliasCollision",
    "ContinentEntry",
    "GeographyCatalog",
    "GeographyEntry",
    "GeographyResolver",
    "get_geography_catalog",
    "get_geography_resolver",
    "reset_geography_catalog",
    "reset_geography_resolver",
]
