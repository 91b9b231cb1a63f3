"""
HotelPipeline - сырой payload поставщика -> HotelIndexDocument.

Шаги:
1. ExtractorRegistry выбирает экстрактор по id поставщика
2. Экстрактор строит NormalizedHotelRecord (никогда не бросает)
3. SearchEnrichmentEngine добавляет поисковые поля

Ошибка одной записи не останавливает пакет: запись получает пустой
документ с флагом degraded и строку в логе с provider/hotel_id.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Optional, Tuple

from ..config import Settings, get_settings
from ..models import EnrichedSearchFields, HotelIndexDocument, NormalizedHotelRecord
from ..utils.logging import get_record_logger
from .errors import describe_error
from .nlu.enrichment import SearchEnrichmentEngine, get_enrichment_engine
from .providers import ExtractorRegistry, get_extractor_registry

logger = logging.getLogger(__name__)

# (raw payload, provider id)
PipelineItem = Tuple[Any, Optional[str]]


class HotelPipeline:
    def __init__(
        self,
        registry: ExtractorRegistry | None = None,
        enrichment: SearchEnrichmentEngine | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.registry = registry or get_extractor_registry()
        self.enrichment = enrichment or get_enrichment_engine()
        self.settings = settings or get_settings()

    def process(self, raw: Any, provider: Optional[str] = None) -> HotelIndexDocument:
        extractor = self.registry.select(provider)
        record: Optional[NormalizedHotelRecord] = None
        try:
            record = extractor.extract(raw)
            search = self.enrichment.enrich(record)
            return HotelIndexDocument(record=record, search=search)
        except Exception as exc:
            record_logger = get_record_logger(
                logger,
                provider=extractor.provider_id,
                hotel_id=record.hotel_id if record is not None else None,
            )
            record_logger.warning("Record degraded: %s", describe_error(exc))
            return self.degraded_document(extractor.provider_id)

    def process_many(
        self,
        items: Iterable[PipelineItem],
        max_workers: Optional[int] = None,
    ) -> List[HotelIndexDocument]:
        """Process a batch on a thread pool; output order follows input order."""
        batch = list(items)
        if not batch:
            return []
        workers = max(1, min(max_workers or self.settings.pipeline_max_workers, len(batch)))
        logger.debug("Processing %d records with %d workers", len(batch), workers)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="hotel-pipeline") as pool:
            documents = list(pool.map(lambda item: self.process(*item), batch))

        degraded = sum(1 for document in documents if document.degraded)
        if degraded:
            logger.info("Batch finished: %d records, %d degraded", len(documents), degraded)
        return documents

    @staticmethod
    def degraded_document(provider: Optional[str]) -> HotelIndexDocument:
        return HotelIndexDocument(
            record=NormalizedHotelRecord(provider=provider),
            search=EnrichedSearchFields(),
            degraded=True,
        )


_pipeline: HotelPipeline | None = None


def get_pipeline() -> HotelPipeline:
    global _pipeline
    if _pipeline is None:
        _pipeline = HotelPipeline()
    return _pipeline


def reset_pipeline() -> None:
    """Сбросить пайплайн (для тестов)."""
    global _pipeline
    _pipeline = None
