"""Classification of failures raised by the task API client.

Routes branch on the returned result instead of repeating isinstance and
status-code checks in every except block.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Union

import httpx


@dataclass(frozen=True)
class NotFound:
    """The API answered 404."""


@dataclass(frozen=True)
class ValidationFailure:
    """The API answered 400 with (optionally) per-field error codes."""
    validation_errors: Optional[Dict[str, str]]
    message: str


@dataclass(frozen=True)
class OtherFailure:
    """Any other status, or no HTTP response at all (network error, timeout)."""


ApiErrorResult = Union[NotFound, ValidationFailure, OtherFailure]


def _response_body(response: httpx.Response) -> dict:
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


def classify_error(error: BaseException) -> ApiErrorResult:
    """Classify an exception caught around a task API call."""
    if not isinstance(error, httpx.HTTPStatusError):
        return OtherFailure()

    response = error.response
    if response.status_code == 404:
        return NotFound()

    if response.status_code == 400:
        body = _response_body(response)
        validation_errors = body.get("validationErrors")
        return ValidationFailure(
            validation_errors=validation_errors if isinstance(validation_errors, dict) else None,
            message=body.get("message") or "Validation failed",
        )

    return OtherFailure()
