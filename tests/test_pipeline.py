"""
Тесты для HotelPipeline: извлечение + обогащение, пакетная обработка.
"""
import json
import logging

import pytest

from hotel_search.models import BusinessDomain, EnrichedSearchFields, NormalizedHotelRecord
from hotel_search.services.pipeline import HotelPipeline


@pytest.fixture
def pipeline(registry, enrichment, settings) -> HotelPipeline:
    return HotelPipeline(registry=registry, enrichment=enrichment, settings=settings)


def elong_raw(hotel_id: str, name: str, country: str = "中国") -> str:
    return json.dumps(
        {"Result": {"Detail": {"HotelId": hotel_id, "HotelName": name, "CountryName": country, "CityName": "北京"}}},
        ensure_ascii=False,
    )


class ExplodingEnrichment:
    def enrich(self, record: NormalizedHotelRecord):
        if record.hotel_id == "boom":
            raise RuntimeError("enrichment exploded")
        return EnrichedSearchFields(name_tokens=["ok"])


class TestProcess:
    def test_end_to_end(self, pipeline: HotelPipeline):
        document = pipeline.process(elong_raw("E1", "希尔顿"), "Elong")
        assert not document.degraded
        assert document.record.country_code == "CN"
        assert document.record.continent_en == "Asia"
        assert document.record.continent_cn == "亚洲"
        assert document.record.business_domain is BusinessDomain.DOMESTIC
        assert document.search.name_tokens == ["希尔顿"]
        assert "Asia" in document.search.geo_hierarchy

    def test_index_dict_is_flat(self, pipeline: HotelPipeline):
        payload = pipeline.process(elong_raw("E1", "希尔顿"), "Elong").to_index_dict()
        assert payload["hotel_id"] == "E1"
        assert payload["country_code"] == "CN"
        assert payload["name_tokens"] == ["希尔顿"]

    def test_unknown_provider_uses_agoda(self, pipeline: HotelPipeline):
        document = pipeline.process({"summary": {"propertyName": {"englishName": "Somewhere Inn"}}}, "Booking")
        assert document.record.provider == "Agoda"
        assert document.record.name.english == "Somewhere Inn"

    def test_malformed_payload_is_not_degraded(self, pipeline: HotelPipeline):
        document = pipeline.process("{not json", "Agoda")
        assert not document.degraded
        assert document.record.name.is_empty

    def test_enrichment_failure_degrades_record(self, registry, settings, caplog):
        pipeline = HotelPipeline(registry=registry, enrichment=ExplodingEnrichment(), settings=settings)
        with caplog.at_level(logging.WARNING):
            document = pipeline.process(elong_raw("boom", "希尔顿"), "Elong")
        assert document.degraded
        assert document.record.provider == "Elong"
        assert document.search.name_tokens == []
        assert "provider=Elong hotel_id=boom" in caplog.text


class TestProcessMany:
    def test_order_preserved(self, pipeline: HotelPipeline):
        items = [(elong_raw(f"E{i}", f"酒店{i}"), "Elong") for i in range(12)]
        documents = pipeline.process_many(items, max_workers=4)
        assert [d.record.hotel_id for d in documents] == [f"E{i}" for i in range(12)]

    def test_failure_is_isolated(self, registry, settings):
        pipeline = HotelPipeline(registry=registry, enrichment=ExplodingEnrichment(), settings=settings)
        items = [
            (elong_raw("E1", "希尔顿"), "Elong"),
            (elong_raw("boom", "希尔顿"), "Elong"),
            (elong_raw("E3", "万豪", "日本"), "Elong"),
        ]
        documents = pipeline.process_many(items)
        assert [d.degraded for d in documents] == [False, True, False]
        assert documents[2].record.country_code == "JP"
        assert documents[2].search.name_tokens == ["ok"]

    def test_empty_batch(self, pipeline: HotelPipeline):
        assert pipeline.process_many([]) == []
