"""Scrape failure taxonomy and error-message normalization.

The remote service reports failures in several shapes::

    {"success": false, "errors": ["...", ...]}     # business failure
    {"errors": ["...", ...]}                       # non-2xx
    {"error": {"message": "...", ...}}             # non-2xx
    {"error": "..."}                               # non-2xx

:func:`classify_error_payload` picks which field carries the message, in
precedence order, and :func:`transport_failure_message` /
:func:`business_failure_message` turn it into the single string shown to the
user.
"""

from __future__ import annotations

import enum
import json
from collections.abc import Mapping
from typing import Any

EMPTY_URL_MESSAGE = "Please enter a URL"
INVALID_MAX_PAGES_MESSAGE = "Max pages must be a whole number"
BUSINESS_FAILURE_MESSAGE = "Scraping failed"
TRANSPORT_FAILURE_MESSAGE = "An error occurred while scraping"


class ScrapeError(Exception):
    """A submission that ended in failure, with its user-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailure(ScrapeError):
    """Input rejected locally; nothing was sent."""


class BusinessFailure(ScrapeError):
    """The remote service ran but answered ``success: false``."""

    def __init__(self, body: Any = None) -> None:
        super().__init__(business_failure_message(body))
        self.body = body


class TransportFailure(ScrapeError):
    """Non-2xx status or network-level failure."""

    def __init__(self, description: str = "", payload: Any = None) -> None:
        super().__init__(transport_failure_message(payload, description))
        self.description = description
        self.payload = payload


class SubmissionInProgressError(Exception):
    """Raised when a submission arrives while another is outstanding."""


class ErrorShape(str, enum.Enum):
    ERRORS = "errors"
    ERROR_OBJECT = "error_object"
    ERROR_VALUE = "error_value"
    ABSENT = "absent"


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, list, Mapping)) and not value)


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def _join(values: list[Any]) -> str:
    return ", ".join(_stringify(v) for v in values)


def classify_error_payload(payload: Any) -> ErrorShape:
    """Return the field of *payload* that carries the error message.

    ``errors`` wins over ``error``; empty values count as absent.
    """
    if not isinstance(payload, Mapping):
        return ErrorShape.ABSENT
    if not _is_empty(payload.get("errors")):
        return ErrorShape.ERRORS
    error = payload.get("error")
    if _is_empty(error):
        return ErrorShape.ABSENT
    if isinstance(error, Mapping):
        return ErrorShape.ERROR_OBJECT
    return ErrorShape.ERROR_VALUE


def _message_for(shape: ErrorShape, payload: Any) -> str:
    if shape is ErrorShape.ERRORS:
        errors = payload["errors"]
        return _join(errors) if isinstance(errors, list) else _stringify(errors)
    if shape is ErrorShape.ERROR_OBJECT:
        error = payload["error"]
        message = error.get("message")
        return _stringify(error) if _is_empty(message) else _stringify(message)
    if shape is ErrorShape.ERROR_VALUE:
        return _stringify(payload["error"])
    return ""


def transport_failure_message(payload: Any, description: str = "") -> str:
    """Message for a non-2xx response or a failed transport."""
    message = _message_for(classify_error_payload(payload), payload)
    return message or description or TRANSPORT_FAILURE_MESSAGE


def business_failure_message(body: Any) -> str:
    """Message for a ``success: false`` body. Only ``errors`` is consulted."""
    if classify_error_payload(body) is ErrorShape.ERRORS:
        message = _message_for(ErrorShape.ERRORS, body)
        if message:
            return message
    return BUSINESS_FAILURE_MESSAGE
