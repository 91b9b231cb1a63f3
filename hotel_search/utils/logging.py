from __future__ import annotations

import logging
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class RecordLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that prefixes messages with provider/hotel context."""

    def process(self, msg: Any, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        provider = self.extra.get("provider") or "-"
        hotel_id = self.extra.get("hotel_id") or "-"
        prefix = f"provider={provider} hotel_id={hotel_id}"
        return f'{prefix} msg="{msg}"', kwargs


def get_record_logger(
    logger: logging.Logger | str,
    *,
    provider: str | None,
    hotel_id: str | None,
) -> RecordLoggerAdapter:
    base_logger = logging.getLogger(logger) if isinstance(logger, str) else logger
    return RecordLoggerAdapter(
        base_logger,
        {
            "provider": provider or "-",
            "hotel_id": hotel_id or "-",
        },
    )


def configure_logging(level: str | int = "INFO") -> None:
    """Install a basic root handler; a no-op when the host already configured logging."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
