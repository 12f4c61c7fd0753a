"""Protocol helpers for Game Jolt API requests and response envelopes.

Every server reply is wrapped as ``{"response": {"success": "true"|"false",
...}}``. Failures carry a ``message`` field with the server's diagnostic.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .errors import GameJoltApiError, GameJoltDecodingError

# The server sends booleans as strings; only this exact value means failure.
_FALSE = "false"


@dataclass(frozen=True, slots=True)
class ResponseEnvelope:
    """Unwrapped ``response`` object.

    Attributes:
        success: False when the server rejected the request.
        message: Server diagnostic text, empty when absent.
        payload: The full ``response`` object, handed to domain decoders.
    """

    success: bool
    message: str = ""
    payload: dict[str, Any] = field(default_factory=dict)


def build_query(key: str, value: Any) -> str:
    """Render a single ``key=value`` query parameter."""
    if isinstance(value, bool):
        value = format_bool(value)
    return f"{key}={value}"


def format_bool(value: bool) -> str:
    """Render a boolean the way the API expects it (``true``/``false``)."""
    return "true" if value else "false"


def join_values(values: Iterable[Any]) -> str:
    """Join values into the comma-separated form used by list queries."""
    return ",".join(str(value) for value in values)


def unwrap_envelope(body: bytes) -> ResponseEnvelope:
    """Parse raw response bytes and extract the ``response`` envelope.

    Raises:
        GameJoltDecodingError: If the body is not JSON or has no
            ``response`` object.
    """
    try:
        document = json.loads(body)
    except (UnicodeDecodeError, ValueError) as err:
        raise GameJoltDecodingError("Response body is not valid JSON") from err

    if not isinstance(document, dict):
        raise GameJoltDecodingError("Response body is not a JSON object")

    response = document.get("response")
    if not isinstance(response, dict):
        raise GameJoltDecodingError("Response envelope is missing")

    message = response.get("message")
    return ResponseEnvelope(
        success=response.get("success") != _FALSE,
        message=message if isinstance(message, str) else "",
        payload=response,
    )


def raise_for_envelope(envelope: ResponseEnvelope) -> None:
    """Raise GameJoltApiError if the server reported an application failure."""
    if not envelope.success:
        raise GameJoltApiError(envelope.message)
