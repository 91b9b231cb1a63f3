from __future__ import annotations

from .hotel import (
    BilingualField,
    BusinessDomain,
    EnrichedSearchFields,
    HotelIndexDocument,
    NormalizedHotelRecord,
)
from .spellcheck import ALL_DOMAINS, SpellCheckRule, SpellCheckStatistics

__all__ = [
    "ALL_DOMAINS",
    "BilingualField",
    "BusinessDomain",
    "EnrichedSearchFields",
    "HotelIndexDocument",
    "NormalizedHotelRecord",
    "SpellCheckRule",
    "SpellCheckStatistics",
]
