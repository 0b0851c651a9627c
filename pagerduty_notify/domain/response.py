"""Uniform result of a notify() call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

SENT_MESSAGE = "Message sent"
FAILED_MESSAGE = "Operation failed."


@dataclass(frozen=True)
class Response:
    success: bool
    message: str
    raw: Any = None


def map_response(success: bool, error: str | None = None, raw: Any = None) -> Response:
    """Build the Response for a finished call.

    A failed call without a usable reason still gets a readable message.
    """
    if success:
        message = SENT_MESSAGE
    else:
        message = error or FAILED_MESSAGE
    return Response(success=success, message=message, raw=raw)
