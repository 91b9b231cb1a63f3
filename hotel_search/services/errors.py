from __future__ import annotations

from typing import Any


class PipelineError(Exception):
    """Base error for the normalization pipeline.

    Raised by internal helpers only; every public component operation catches
    it at its boundary and substitutes a default.
    """

    code: str = "PIPELINE_ERROR"

    def __init__(
        self,
        message: str | None = None,
        *,
        reason: str | None = None,
        debug: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message or reason or "")
        self.reason = reason or message or self.code
        self.debug = debug or {}


class MalformedPayloadError(PipelineError):
    code = "MALFORMED_PAYLOAD"


class RuleParseError(PipelineError):
    code = "RULE_PARSE_ERROR"


class ConfigLoadError(PipelineError):
    code = "CONFIG_LOAD_ERROR"


class CapabilityError(PipelineError):
    code = "CAPABILITY_ERROR"


def describe_error(exc: Exception) -> str:
    """Short `code: reason` string for log lines."""
    if isinstance(exc, PipelineError):
        return f"{exc.code}: {exc.reason}"
    return f"{exc.__class__.__name__}: {exc}"
