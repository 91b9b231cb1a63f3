from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BusinessDomain(str, Enum):
    DOMESTIC = "domestic"
    TERRITORY = "territory"
    INTERNATIONAL = "international"


class BilingualField(BaseModel):
    """One logical attribute split into its Chinese and English renderings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    chinese: Optional[str] = None
    english: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.chinese and not self.english

    @property
    def preferred(self) -> Optional[str]:
        """Chinese side first, English as a fallback."""
        return self.chinese or self.english


class NormalizedHotelRecord(BaseModel):
    """Canonical hotel record produced by a provider extractor."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    provider: Optional[str] = Field(default=None, description="Upstream provider id")
    hotel_id: Optional[str] = Field(default=None, description="Provider-side hotel identifier")

    name: BilingualField = Field(default_factory=BilingualField)
    country: BilingualField = Field(default_factory=BilingualField)
    country_code: Optional[str] = None
    city: BilingualField = Field(default_factory=BilingualField)
    region: BilingualField = Field(default_factory=BilingualField)
    continent: BilingualField = Field(default_factory=BilingualField)
    address: BilingualField = Field(default_factory=BilingualField)
    group: BilingualField = Field(default_factory=BilingualField)
    brand: BilingualField = Field(default_factory=BilingualField)
    description: BilingualField = Field(default_factory=BilingualField)

    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)

    business_domain: BusinessDomain = BusinessDomain.INTERNATIONAL

    # Flat aliases used by downstream consumers
    @property
    def country_cn(self) -> Optional[str]:
        return self.country.chinese

    @property
    def country_en(self) -> Optional[str]:
        return self.country.english

    @property
    def continent_cn(self) -> Optional[str]:
        return self.continent.chinese

    @property
    def continent_en(self) -> Optional[str]:
        return self.continent.english

    def flat_dict(self) -> Dict[str, Any]:
        """Flatten bilingual fields into `<field>_cn` / `<field>_en` keys."""
        flat: Dict[str, Any] = {
            "provider": self.provider,
            "hotel_id": self.hotel_id,
            "country_code": self.country_code,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "business_domain": self.business_domain.value,
        }
        for field_name in ("name", "country", "city", "region", "continent", "address", "group", "brand", "description"):
            value: BilingualField = getattr(self, field_name)
            flat[f"{field_name}_cn"] = value.chinese
            flat[f"{field_name}_en"] = value.english
        return flat


class EnrichedSearchFields(BaseModel):
    """Derived search-index fields; recomputed whenever the source text changes."""

    model_config = ConfigDict(extra="forbid")

    name_tokens: List[str] = Field(default_factory=list)
    address_tokens: List[str] = Field(default_factory=list)
    name_keywords: List[str] = Field(default_factory=list)
    ner_places: List[str] = Field(default_factory=list)
    ner_orgs: List[str] = Field(default_factory=list)
    ner_brands: List[str] = Field(default_factory=list)
    brand_names: List[str] = Field(default_factory=list)
    name_pinyin: Optional[str] = None
    name_pinyin_initials: Optional[str] = None
    name_traditional: Optional[str] = None
    address_traditional: Optional[str] = None
    geo_hierarchy: List[str] = Field(default_factory=list)


class HotelIndexDocument(BaseModel):
    """A normalized record with its search fields merged on, ready for indexing."""

    record: NormalizedHotelRecord = Field(default_factory=NormalizedHotelRecord)
    search: EnrichedSearchFields = Field(default_factory=EnrichedSearchFields)
    degraded: bool = False

    def to_index_dict(self) -> Dict[str, Any]:
        payload = self.record.flat_dict()
        payload.update(self.search.model_dump())
        return payload
