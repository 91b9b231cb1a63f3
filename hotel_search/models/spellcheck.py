from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ALL_DOMAINS = "ALL"


class SpellCheckRule(BaseModel):
    """A weighted typo rule: any wrong form maps to the first correct form."""

    model_config = ConfigDict(extra="ignore")

    rule_id: str = Field(..., min_length=1)
    wrong_forms: List[str] = Field(..., min_length=1, description="Misspellings, stored normalized")
    correct_forms: List[str] = Field(..., min_length=1, description="Ordered replacements; the first wins")
    weight: int = Field(default=5, ge=1, le=10)
    domain: str = Field(default=ALL_DOMAINS)
    description: str = ""
    usage_count: int = Field(default=0, ge=0)
    last_used: Optional[datetime] = None

    @field_validator("domain")
    @classmethod
    def _domain_upper(cls, value: str) -> str:
        value = (value or "").strip()
        return value.upper() if value else ALL_DOMAINS

    @property
    def primary_correction(self) -> str:
        return self.correct_forms[0]


class SpellCheckStatistics(BaseModel):
    total_rules: int = 0
    total_wrong_forms: int = 0
    rules_by_domain: dict[str, int] = Field(default_factory=dict)
    total_usage: int = 0
    top_rules: List[dict] = Field(default_factory=list)
    source: Optional[str] = None
    loaded_at: Optional[datetime] = None
