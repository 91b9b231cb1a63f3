from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import Lock
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from ...config import get_settings
from ..nlu.alias_normalizer import AliasNormalizer
from .catalog_data import (
    CATALOG_VERSION,
    CONTINENT_ROWS,
    COUNTRY_ROWS,
    LEGACY_CODES,
    ContinentRow,
    CountryRow,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContinentEntry:
    key: str
    name_cn: str
    name_en: str
    aliases: FrozenSet[str] = frozenset()

    def __bool__(self) -> bool:
        return bool(self.key)


@dataclass(frozen=True)
class GeographyEntry:
    short_code: str
    name_cn: str
    name_en: str
    continent: ContinentEntry
    aliases: FrozenSet[str] = frozenset()
    aliases_cn: FrozenSet[str] = frozenset()

    def __bool__(self) -> bool:
        return bool(self.short_code)


NO_CONTINENT = ContinentEntry(key="", name_cn="", name_en="")
NO_MATCH = GeographyEntry(short_code="", name_cn="", name_en="", continent=NO_CONTINENT)


@dataclass(frozen=True)
class AliasCollision:
    """Two catalog rows produced the same normalized key; `winner` owns it."""

    key: str
    alias: str
    previous: str
    winner: str


@dataclass(frozen=True)
class _NameIndex:
    canonical: Mapping[str, object]
    aliases: Mapping[str, object]
    normalized: Mapping[str, object]
    chinese: Mapping[str, object]
    collisions: Tuple[AliasCollision, ...] = field(default=())


def _build_index(
    entries: Iterable[Tuple[str, str, str, Iterable[str], Iterable[str], object]],
    normalize: AliasNormalizer,
    kind: str,
) -> _NameIndex:
    """Index rows of `(ident, name_cn, name_en, aliases_en, aliases_cn, entry)`.

    Exact canonical and exact alias maps keep the first row for a name, the
    normalized map lets later rows win and records every overwrite.
    """
    canonical: Dict[str, object] = {}
    aliases: Dict[str, object] = {}
    normalized: Dict[str, Tuple[str, object]] = {}
    chinese: Dict[str, object] = {}
    collisions: List[AliasCollision] = []

    for ident, name_cn, name_en, aliases_en, aliases_cn, entry in entries:
        canonical.setdefault(name_en.lower(), entry)
        chinese.setdefault(name_cn, entry)
        for alias in aliases_cn:
            chinese.setdefault(alias, entry)

        for alias in (name_en, *aliases_en):
            if alias != name_en:
                aliases.setdefault(alias.lower(), entry)
            key = normalize(alias)
            if not key:
                logger.warning("%s alias %r of %s normalizes to an empty key", kind, alias, ident)
                continue
            previous = normalized.get(key)
            if previous is not None and previous[0] != ident:
                collision = AliasCollision(key=key, alias=alias, previous=previous[0], winner=ident)
                collisions.append(collision)
                logger.warning(
                    "%s alias collision: key=%s alias=%r previous=%s winner=%s",
                    kind, key, alias, previous[0], ident,
                )
            normalized[key] = (ident, entry)

    return _NameIndex(
        canonical=MappingProxyType(canonical),
        aliases=MappingProxyType(aliases),
        normalized=MappingProxyType({key: value[1] for key, value in normalized.items()}),
        chinese=MappingProxyType(chinese),
        collisions=tuple(collisions),
    )


class GeographyCatalog:
    """Immutable country/continent table plus its lookup indices.

    Built once and shared by reference; nothing mutates it after __init__.
    """

    def __init__(
        self,
        continent_rows: Iterable[ContinentRow] = CONTINENT_ROWS,
        country_rows: Iterable[CountryRow] = COUNTRY_ROWS,
        *,
        legacy_codes: Mapping[str, str] | None = None,
        normalizer: AliasNormalizer | None = None,
        version: str = CATALOG_VERSION,
    ) -> None:
        self.version = version
        self.normalizer = normalizer or AliasNormalizer()

        continents: Dict[str, ContinentEntry] = {}
        for key, name_cn, name_en, aliases in continent_rows:
            continents[key] = ContinentEntry(key=key, name_cn=name_cn, name_en=name_en, aliases=frozenset(aliases))

        countries: Dict[str, GeographyEntry] = {}
        for code, name_cn, name_en, continent_key, aliases, aliases_cn in country_rows:
            code = code.upper()
            if code in countries:
                raise ValueError(f"Duplicate country code in catalog: {code}")
            countries[code] = GeographyEntry(
                short_code=code,
                name_cn=name_cn,
                name_en=name_en,
                continent=continents.get(continent_key, NO_CONTINENT),
                aliases=frozenset(aliases),
                aliases_cn=frozenset(aliases_cn),
            )

        self._continents: Mapping[str, ContinentEntry] = MappingProxyType(continents)
        self._countries: Mapping[str, GeographyEntry] = MappingProxyType(countries)
        self._legacy_codes: Mapping[str, str] = MappingProxyType(
            {k.upper(): v.upper() for k, v in (LEGACY_CODES if legacy_codes is None else legacy_codes).items()}
        )

        # Порядок строк важен: он определяет победителя при коллизии
        self._continent_index = _build_index(
            ((c.key, c.name_cn, c.name_en, sorted(c.aliases), (), c) for c in continents.values()),
            self.normalizer,
            "continent",
        )
        self._country_index = _build_index(
            (
                (e.short_code, e.name_cn, e.name_en, sorted(e.aliases), sorted(e.aliases_cn), e)
                for e in countries.values()
            ),
            self.normalizer,
            "country",
        )

    # ------------------------------------------------------------------ views

    @property
    def countries(self) -> Tuple[GeographyEntry, ...]:
        return tuple(self._countries.values())

    @property
    def continents(self) -> Tuple[ContinentEntry, ...]:
        return tuple(self._continents.values())

    @property
    def collisions(self) -> Tuple[AliasCollision, ...]:
        return self._continent_index.collisions + self._country_index.collisions

    @property
    def country_index(self) -> _NameIndex:
        return self._country_index

    @property
    def continent_index(self) -> _NameIndex:
        return self._continent_index

    def country_by_code(self, code: str) -> Optional[GeographyEntry]:
        code = code.upper()
        entry = self._countries.get(code)
        if entry is None and code in self._legacy_codes:
            entry = self._countries.get(self._legacy_codes[code])
        return entry

    def continent_by_key(self, key: str) -> Optional[ContinentEntry]:
        return self._continents.get(key.upper())

    def countries_in(self, continent: ContinentEntry) -> List[GeographyEntry]:
        return [entry for entry in self._countries.values() if entry.continent.key == continent.key]

    def __len__(self) -> int:
        return len(self._countries)


# =============================================================================
# Синглтон
# =============================================================================

_catalog: GeographyCatalog | None = None
_catalog_lock = Lock()


def get_geography_catalog() -> GeographyCatalog:
    """Build the shared catalog on first use and return it."""
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                stopwords = get_settings().alias_stopwords
                _catalog = GeographyCatalog(normalizer=AliasNormalizer(stopwords))
                logger.info(
                    "Geography catalog built: version=%s countries=%d continents=%d collisions=%d",
                    _catalog.version, len(_catalog), len(_catalog.continents), len(_catalog.collisions),
                )
    return _catalog


def reset_geography_catalog() -> None:
    """Drop the shared catalog (для тестов)."""
    global _catalog
    with _catalog_lock:
        _catalog = None
