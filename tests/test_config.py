"""Settings, logging helpers and the error hierarchy."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

import hotel_search
from hotel_search.config import DEFAULT_RULES_PATH, Settings
from hotel_search.services.errors import (
    CapabilityError,
    ConfigLoadError,
    MalformedPayloadError,
    PipelineError,
    RuleParseError,
    describe_error,
)
from hotel_search.utils.logging import RecordLoggerAdapter, configure_logging, get_record_logger


class TestSettings:
    def test_defaults(self, settings: Settings):
        assert settings.keyword_top_k == 5
        assert settings.domestic_country_code == "CN"
        assert settings.territory_country_codes == ["HK", "MO", "TW"]
        assert settings.spellcheck_rules_path == DEFAULT_RULES_PATH
        assert DEFAULT_RULES_PATH.exists()

    def test_rules_file_ships_inside_package(self):
        package_dir = Path(hotel_search.__file__).resolve().parent
        assert DEFAULT_RULES_PATH.is_relative_to(package_dir)
        assert DEFAULT_RULES_PATH.suffix == ".yaml"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("KEYWORD_TOP_K", "3")
        monkeypatch.setenv("TERRITORY_COUNTRY_CODES", '["HK"]')
        monkeypatch.setenv("ALIAS_STOPWORDS", '["the"]')
        settings = Settings(_env_file=None)
        assert settings.keyword_top_k == 3
        assert settings.territory_country_codes == ["HK"]
        assert settings.alias_stopwords == ["the"]

    def test_top_k_bounds(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, keyword_top_k=11)


class TestRecordLogger:
    def test_prefix(self, caplog):
        logger = logging.getLogger("hotel_search.tests")
        adapter = get_record_logger(logger, provider="Agoda", hotel_id="42")
        assert isinstance(adapter, RecordLoggerAdapter)
        with caplog.at_level(logging.INFO, logger="hotel_search.tests"):
            adapter.info("processed %d fields", 3)
        assert 'provider=Agoda hotel_id=42 msg="processed 3 fields"' in caplog.text

    def test_missing_context(self, caplog):
        adapter = get_record_logger("hotel_search.tests", provider=None, hotel_id=None)
        with caplog.at_level(logging.INFO, logger="hotel_search.tests"):
            adapter.info("hello")
        assert "provider=- hotel_id=-" in caplog.text

    def test_configure_logging_accepts_names(self):
        configure_logging("debug")
        configure_logging("not-a-level")


class TestErrors:
    @pytest.mark.parametrize("cls,code", [
        (MalformedPayloadError, "MALFORMED_PAYLOAD"),
        (RuleParseError, "RULE_PARSE_ERROR"),
        (ConfigLoadError, "CONFIG_LOAD_ERROR"),
        (CapabilityError, "CAPABILITY_ERROR"),
    ])
    def test_hierarchy(self, cls, code):
        exc = cls(reason="bad input", debug={"line": 3})
        assert isinstance(exc, PipelineError)
        assert exc.code == code
        assert exc.debug == {"line": 3}
        assert describe_error(exc) == f"{code}: bad input"

    def test_describe_foreign_error(self):
        assert describe_error(ValueError("nope")) == "ValueError: nope"
