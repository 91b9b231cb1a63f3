from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, Iterable, Optional

from ...config import Settings
from ..geo import GeographyResolver
from ..nlu.language import LanguageClassifier
from .agoda import AgodaExtractor
from .base import ProviderExtractor
from .elong import ElongExtractor

logger = logging.getLogger(__name__)

FALLBACK_PROVIDER = "Agoda"


class ExtractorRegistry:
    """Provider id -> extractor, matched case-insensitively.

    Unknown or blank ids get the Agoda extractor. `tag_source` (a business
    domain label carried next to the payload) is accepted but never overrides
    an explicit provider id.
    """

    def __init__(self, extractors: Iterable[ProviderExtractor]) -> None:
        self._extractors: Dict[str, ProviderExtractor] = {}
        for extractor in extractors:
            self._extractors[extractor.provider_id.lower()] = extractor
        if FALLBACK_PROVIDER.lower() not in self._extractors:
            raise ValueError(f"registry needs a {FALLBACK_PROVIDER} extractor as fallback")

    @classmethod
    def default(
        cls,
        resolver: GeographyResolver | None = None,
        classifier: LanguageClassifier | None = None,
        settings: Settings | None = None,
    ) -> "ExtractorRegistry":
        return cls(
            [
                ElongExtractor(resolver, classifier, settings),
                AgodaExtractor(resolver, classifier, settings),
            ]
        )

    @property
    def providers(self) -> list[str]:
        return [extractor.provider_id for extractor in self._extractors.values()]

    def select(self, provider: Optional[str], tag_source: Optional[str] = None) -> ProviderExtractor:
        key = (provider or "").strip().lower()
        extractor = self._extractors.get(key)
        if extractor is not None:
            return extractor
        logger.debug("No extractor for provider=%r tag_source=%r, using %s", provider, tag_source, FALLBACK_PROVIDER)
        return self._extractors[FALLBACK_PROVIDER.lower()]


_registry: ExtractorRegistry | None = None
_registry_lock = Lock()


def get_extractor_registry() -> ExtractorRegistry:
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = ExtractorRegistry.default()
    return _registry


def reset_extractor_registry() -> None:
    """Сбросить реестр (для тестов)."""
    global _registry
    _registry = None
