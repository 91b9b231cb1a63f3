from __future__ import annotations

from typing import Any, Dict, Mapping

from ...models import BilingualField, BusinessDomain
from .base import ProviderExtractor, first_non_blank, text_at, validate_coordinates

DETAIL = "Result.Detail."


class ElongExtractor(ProviderExtractor):
    """Elong detail payloads: separate Chinese/English columns under `Result.Detail`.

    A payload with no country at all is a mainland listing, so the configured
    domestic country is filled in. Country text that does not resolve is kept
    as-is and tagged international.
    """

    provider_id = "Elong"
    country_code_path = DETAIL + "CountryCode"
    country_name_path = DETAIL + "CountryNameEn"

    def _column(self, payload: Mapping[str, Any], name: str) -> BilingualField:
        return self.classifier.merge(text_at(payload, DETAIL + name), text_at(payload, DETAIL + name + "En"))

    def map_fields(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        latitude, longitude = validate_coordinates(
            text_at(payload, DETAIL + "GoogleLat"),
            text_at(payload, DETAIL + "GoogleLon"),
        )
        description = self.classifier.merge(
            first_non_blank(text_at(payload, DETAIL + "IntroEditor"), text_at(payload, DETAIL + "Description")),
            first_non_blank(text_at(payload, DETAIL + "IntroEditorEn"), text_at(payload, DETAIL + "DescriptionEn")),
        )

        fields: Dict[str, Any] = {
            "hotel_id": text_at(payload, DETAIL + "HotelId"),
            "name": self._column(payload, "HotelName"),
            "country": self._column(payload, "CountryName"),
            "city": self._column(payload, "CityName"),
            "region": self._column(payload, "DistrictName"),
            "address": self._column(payload, "Address"),
            "group": self._column(payload, "GroupName"),
            "brand": self._column(payload, "BrandName"),
            "description": description,
            "latitude": latitude,
            "longitude": longitude,
        }
        self.apply_geography(fields, text_at(payload, self.country_code_path))
        return fields

    @property
    def unresolved_domain(self) -> BusinessDomain:
        return self.domain_for_code(self.settings.domestic_country_code)

    def apply_unresolved_country(self, fields: Dict[str, Any], had_country_text: bool) -> None:
        if had_country_text:
            fields["business_domain"] = BusinessDomain.INTERNATIONAL
            return

        home = self.resolver.resolve_by_code(self.settings.domestic_country_code)
        fields["business_domain"] = self.unresolved_domain
        if not home:
            return
        fields["country"] = BilingualField(chinese=home.name_cn, english=home.name_en)
        fields["country_code"] = home.short_code
        continent = self.resolver.continent_for(home)
        if continent and (fields.get("continent") or BilingualField()).is_empty:
            fields["continent"] = BilingualField(chinese=continent.name_cn, english=continent.name_en)
