# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Custom exceptions and error-message extraction for the roster panel."""

import json
from collections.abc import Mapping
from typing import Any, Callable, Optional

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"


class RosterPanelError(Exception):
    """Base exception for the roster panel."""

    pass


class ValidationError(RosterPanelError):
    """Raised when a caller-side precondition is violated."""

    pass


class BackendError(RosterPanelError):
    """Raised when the roster store rejects a well-formed request."""

    def __init__(self, message: str, payload: Any = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.payload = payload
        self.status_code = status_code


class ReportError(RosterPanelError):
    """Raised when the staffing report could not be produced."""

    pass


# ── Display message extraction ──

_MAPPING_FIELDS = ("message", "error_description", "error", "msg", "details", "hint")


def _from_string(error: Any) -> Optional[str]:
    if isinstance(error, str):
        return error
    return None


def _from_exception(error: Any) -> Optional[str]:
    if isinstance(error, BaseException):
        text = str(error)
        return text or type(error).__name__
    return None


def _from_mapping(error: Any) -> Optional[str]:
    if not isinstance(error, Mapping):
        return None
    for field in _MAPPING_FIELDS:
        value = error.get(field)
        if value is None or value == "":
            continue
        # Nested shapes like {"error": {"message": "..."}}
        nested = display_message(value) if not isinstance(value, str) else value
        if nested and nested != DEFAULT_ERROR_MESSAGE:
            return nested
    return None


def _from_attribute(error: Any) -> Optional[str]:
    value = getattr(error, "message", None)
    if isinstance(value, str) and value:
        return value
    return None


def _from_structure(error: Any) -> Optional[str]:
    if not error or isinstance(error, str):
        return None
    if not isinstance(error, (Mapping, list, tuple)) and getattr(error, "__dict__", None):
        error = vars(error)
    try:
        return json.dumps(error, default=str, ensure_ascii=False)
    except (TypeError, ValueError):
        return None


EXTRACTORS: tuple[Callable[[Any], Optional[str]], ...] = (
    _from_string,
    _from_exception,
    _from_mapping,
    _from_attribute,
    _from_structure,
)


def display_message(error: Any) -> str:
    """Turn whatever the backend raised into a human-readable string."""
    for extractor in EXTRACTORS:
        text = extractor(error)
        if text:
            return text
    return DEFAULT_ERROR_MESSAGE
