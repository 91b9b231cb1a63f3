from __future__ import annotations

import json
import logging
import math
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import ValidationError

from ...config import Settings, get_settings
from ...models import BilingualField, BusinessDomain, NormalizedHotelRecord
from ..errors import MalformedPayloadError
from ..geo import GeographyEntry, GeographyResolver, get_geography_resolver
from ..nlu.language import LanguageClassifier, get_language_classifier

logger = logging.getLogger(__name__)

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def parse_payload(raw: Any) -> Dict[str, Any]:
    """Decode a provider payload into a dict.

    Accepts a mapping, JSON text/bytes, or JSON that was string-escaped once
    (either quoted as a JSON string literal or with bare backslash escapes).
    """
    if isinstance(raw, Mapping):
        return dict(raw)
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedPayloadError(reason="payload is not utf-8") from exc
    if not isinstance(raw, str) or not raw.strip():
        raise MalformedPayloadError(reason=f"unsupported payload type {type(raw).__name__}")

    text = raw.strip()
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        data = _unescape_once(text)
    else:
        if isinstance(data, str):
            data = _loads_or_fail(data)

    if not isinstance(data, dict):
        raise MalformedPayloadError(reason=f"payload decodes to {type(data).__name__}, expected an object")
    return data


def _unescape_once(text: str) -> Any:
    try:
        unescaped = json.loads(f'"{text}"')
    except (ValueError, RecursionError) as exc:
        raise MalformedPayloadError(reason="payload is neither JSON nor escaped JSON") from exc
    return _loads_or_fail(unescaped)


def _loads_or_fail(text: str) -> Any:
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise MalformedPayloadError(reason="unescaped payload is not JSON") from exc


def text_at(payload: Mapping[str, Any], path: str) -> Optional[str]:
    """Read a dotted path; numbers are stringified, blanks become None."""
    current: Any = payload
    for part in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(part)
        if current is None:
            return None
    if isinstance(current, bool):
        return str(current).lower()
    if isinstance(current, (int, float)):
        return str(current)
    if isinstance(current, str):
        return current.strip() or None
    try:
        return json.dumps(current, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("Unreadable value at %s: %s", path, exc)
        return None


def first_non_blank(*values: Optional[str]) -> Optional[str]:
    for value in values:
        if value and value.strip():
            return value
    return None


def join_non_blank(*values: Optional[str], separator: str = ", ") -> Optional[str]:
    parts = [value.strip() for value in values if value and value.strip()]
    return separator.join(parts) or None


def parse_coordinate(value: Optional[str], bounds: Tuple[float, float]) -> Optional[float]:
    """Parse one coordinate; unparseable or out-of-range gives None, never a clamped value."""
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    low, high = bounds
    if number < low or number > high:
        return None
    return number


def validate_coordinates(lat: Optional[str], lon: Optional[str]) -> Tuple[Optional[float], Optional[float]]:
    latitude = parse_coordinate(lat, LATITUDE_RANGE)
    longitude = parse_coordinate(lon, LONGITUDE_RANGE)
    if latitude is None or longitude is None:
        if lat is not None or lon is not None:
            logger.debug("Dropping invalid coordinates lat=%r lon=%r", lat, lon)
        return None, None
    return latitude, longitude


class ProviderExtractor:
    """Base class for provider-specific extractors.

    Subclasses implement `map_fields` (raw payload -> record kwargs) and the
    paths used for business-domain tagging; geography backfill, payload
    decoding and failure handling live here.
    """

    provider_id: str = ""
    country_code_path: str = ""
    country_name_path: str = ""

    def __init__(
        self,
        resolver: GeographyResolver | None = None,
        classifier: LanguageClassifier | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.resolver = resolver or get_geography_resolver()
        self.classifier = classifier or get_language_classifier()
        self.settings = settings or get_settings()

    # ------------------------------------------------------------------ public

    def extract(self, raw: Any) -> NormalizedHotelRecord:
        """Map a raw payload to a record; never raises."""
        try:
            payload = parse_payload(raw)
        except MalformedPayloadError as exc:
            logger.debug("%s payload rejected: %s", self.provider_id, exc.reason)
            return self.empty_record()

        try:
            fields = self.map_fields(payload)
            fields.setdefault("provider", self.provider_id)
            return NormalizedHotelRecord(**fields)
        except (ValidationError, TypeError, ValueError, RecursionError) as exc:
            logger.warning("%s record mapping failed: %s", self.provider_id, exc)
            return self.empty_record()

    def empty_record(self) -> NormalizedHotelRecord:
        return NormalizedHotelRecord(provider=self.provider_id, business_domain=self.unresolved_domain)

    def tag_business_domain(self, raw: Any) -> BusinessDomain:
        """Domain tag from the raw payload: country code first, English country name second.

        With neither present the extractor's own default applies.
        """
        try:
            payload = parse_payload(raw)
        except MalformedPayloadError:
            return self.unresolved_domain
        code = text_at(payload, self.country_code_path) if self.country_code_path else None
        if code:
            return self.domain_for_code(code)
        name = text_at(payload, self.country_name_path) if self.country_name_path else None
        if name:
            entry = self.resolver.resolve_by_english_name(name)
            return self.domain_for_code(entry.short_code)
        return self.unresolved_domain

    def domain_for_code(self, code: Optional[str]) -> BusinessDomain:
        if not code:
            return BusinessDomain.INTERNATIONAL
        code = code.strip().upper()
        if code == self.settings.domestic_country_code.upper():
            return BusinessDomain.DOMESTIC
        if code in {c.upper() for c in self.settings.territory_country_codes}:
            return BusinessDomain.TERRITORY
        return BusinessDomain.INTERNATIONAL

    # ------------------------------------------------------------------ hooks

    @property
    def unresolved_domain(self) -> BusinessDomain:
        return BusinessDomain.INTERNATIONAL

    def map_fields(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    def apply_unresolved_country(self, fields: Dict[str, Any], had_country_text: bool) -> None:
        """Provider-specific defaults when no catalog entry matched."""
        fields["business_domain"] = self.unresolved_domain

    # ------------------------------------------------------------------ helpers

    def apply_geography(self, fields: Dict[str, Any], raw_code: Optional[str] = None) -> Optional[GeographyEntry]:
        """Overwrite country/continent with canonical values when the country resolves."""
        country: BilingualField = fields.get("country") or BilingualField()
        entry = self.resolver.resolve(country.chinese, country.english, raw_code)
        if entry:
            fields["country"] = BilingualField(chinese=entry.name_cn, english=entry.name_en)
            fields["country_code"] = entry.short_code
            continent = self.resolver.continent_for(entry)
            if continent:
                fields["continent"] = BilingualField(chinese=continent.name_cn, english=continent.name_en)
            fields["business_domain"] = self.domain_for_code(entry.short_code)
            return entry

        self._canonicalize_continent(fields)
        self.apply_unresolved_country(fields, had_country_text=not country.is_empty or bool(raw_code))
        return None

    def _canonicalize_continent(self, fields: Dict[str, Any]) -> None:
        continent_field: BilingualField = fields.get("continent") or BilingualField()
        if continent_field.is_empty:
            return
        continent = self.resolver.resolve_continent(continent_field.chinese, continent_field.english)
        if continent:
            fields["continent"] = BilingualField(chinese=continent.name_cn, english=continent.name_en)
