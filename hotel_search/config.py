from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RULES_PATH = Path(__file__).resolve().parent / "data" / "spellcheck_rules.yaml"


class Settings(BaseSettings):
    """Pipeline configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    env: str = Field(default="dev", alias="HOTEL_SEARCH_ENV")
    log_level: str = Field(default="INFO", alias="HOTEL_SEARCH_LOG_LEVEL")

    spellcheck_rules_path: Optional[Path] = Field(default=DEFAULT_RULES_PATH, alias="SPELLCHECK_RULES_PATH")

    # Alias matching
    alias_stopwords: List[str] = Field(
        default_factory=lambda: ["the", "and", "of", "republic", "federation"],
        alias="ALIAS_STOPWORDS",
    )

    # Enrichment
    keyword_top_k: int = Field(default=5, ge=1, le=10, alias="KEYWORD_TOP_K")
    max_place_entities: int = Field(default=20, ge=1, alias="MAX_PLACE_ENTITIES")

    # Business-domain tagging
    domestic_country_code: str = Field(default="CN", alias="DOMESTIC_COUNTRY_CODE")
    territory_country_codes: List[str] = Field(
        default_factory=lambda: ["HK", "MO", "TW"],
        alias="TERRITORY_COUNTRY_CODES",
    )

    pipeline_max_workers: int = Field(default=4, ge=1, alias="PIPELINE_MAX_WORKERS")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
