from __future__ import annotations

import logging
from typing import Optional

from .catalog import (
    NO_CONTINENT,
    NO_MATCH,
    ContinentEntry,
    GeographyCatalog,
    GeographyEntry,
    get_geography_catalog,
)

logger = logging.getLogger(__name__)


class GeographyResolver:
    """Country/continent lookup over a shared GeographyCatalog.

    Every method returns the `NO_MATCH` / `NO_CONTINENT` sentinel (falsy) on a
    miss or on blank input; nothing here raises.
    """

    def __init__(self, catalog: GeographyCatalog | None = None) -> None:
        self._catalog = catalog or get_geography_catalog()

    @property
    def catalog(self) -> GeographyCatalog:
        return self._catalog

    # ------------------------------------------------------------------ countries

    def resolve_by_code(self, code: Optional[str]) -> GeographyEntry:
        if not code or not code.strip():
            return NO_MATCH
        return self._catalog.country_by_code(code.strip()) or NO_MATCH

    def resolve_by_chinese_name(self, name: Optional[str]) -> GeographyEntry:
        if not name or not name.strip():
            return NO_MATCH
        return self._catalog.country_index.chinese.get(name.strip(), NO_MATCH)

    def resolve_by_english_name(self, name: Optional[str]) -> GeographyEntry:
        """Exact canonical name, then exact alias, then the normalized index."""
        if not name or not name.strip():
            return NO_MATCH
        index = self._catalog.country_index
        lowered = name.strip().lower()
        entry = index.canonical.get(lowered) or index.aliases.get(lowered)
        if entry is None:
            entry = index.normalized.get(self._catalog.normalizer(name))
        return entry or NO_MATCH

    def resolve(
        self,
        country_cn: Optional[str] = None,
        country_en: Optional[str] = None,
        country_code: Optional[str] = None,
    ) -> GeographyEntry:
        """Try the Chinese name, the English name, then the code."""
        entry = self.resolve_by_chinese_name(country_cn)
        if not entry:
            entry = self.resolve_by_english_name(country_en)
        if not entry:
            entry = self.resolve_by_code(country_code)
        if not entry and (country_cn or country_en or country_code):
            logger.debug(
                "Country not resolved: cn=%r en=%r code=%r", country_cn, country_en, country_code
            )
        return entry

    # ------------------------------------------------------------------ continents

    def resolve_continent_by_english_name(self, name: Optional[str]) -> ContinentEntry:
        if not name or not name.strip():
            return NO_CONTINENT
        index = self._catalog.continent_index
        lowered = name.strip().lower()
        entry = index.canonical.get(lowered) or index.aliases.get(lowered)
        if entry is None:
            entry = index.normalized.get(self._catalog.normalizer(name))
        return entry or NO_CONTINENT

    def resolve_continent_by_chinese_name(self, name: Optional[str]) -> ContinentEntry:
        if not name or not name.strip():
            return NO_CONTINENT
        return self._catalog.continent_index.chinese.get(name.strip(), NO_CONTINENT)

    def resolve_continent(self, continent_cn: Optional[str] = None, continent_en: Optional[str] = None) -> ContinentEntry:
        return self.resolve_continent_by_chinese_name(continent_cn) or self.resolve_continent_by_english_name(continent_en)

    @staticmethod
    def continent_for(entry: GeographyEntry) -> ContinentEntry:
        """Continent used to backfill a record whose country resolved."""
        if not entry:
            return NO_CONTINENT
        return entry.continent or NO_CONTINENT


_geography_resolver: GeographyResolver | None = None


def get_geography_resolver() -> GeographyResolver:
    global _geography_resolver
    if _geography_resolver is None:
        _geography_resolver = GeographyResolver()
    return _geography_resolver


def reset_geography_resolver() -> None:
    global _geography_resolver
    _geography_resolver = None
