from __future__ import annotations

from typing import Any, Dict, Mapping

from .base import ProviderExtractor, first_non_blank, join_non_blank, text_at, validate_coordinates


class AgodaExtractor(ProviderExtractor):
    """Agoda content payloads: one value per field, language decided per value.

    Agoda has no group or brand columns. An unresolved country keeps whatever
    text the payload carried and is tagged international.
    """

    provider_id = "Agoda"
    country_code_path = "summary.countryCode"
    country_name_path = "summary.address.countryName"

    def map_fields(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        assign = self.classifier.assign
        latitude, longitude = validate_coordinates(
            text_at(payload, "summary.coordinate.lat"),
            text_at(payload, "summary.coordinate.lng"),
        )
        address = join_non_blank(
            text_at(payload, "summary.address.address1"),
            text_at(payload, "summary.address.address2"),
        )

        fields: Dict[str, Any] = {
            "hotel_id": first_non_blank(text_at(payload, "summary.propertyId"), text_at(payload, "propertyId")),
            "name": assign(text_at(payload, "summary.propertyName.englishName")),
            "address": assign(address),
            "city": assign(text_at(payload, "summary.address.cityName")),
            "region": assign(text_at(payload, "summary.address.areaName")),
            "country": assign(text_at(payload, self.country_name_path)),
            "continent": assign(text_at(payload, "summary.address.regionName")),
            "description": assign(
                first_non_blank(text_at(payload, "description.long"), text_at(payload, "description.short"))
            ),
            "latitude": latitude,
            "longitude": longitude,
        }
        self.apply_geography(fields, text_at(payload, self.country_code_path))
        return fields
