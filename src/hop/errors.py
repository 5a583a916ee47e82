"""Exceptions raised by the Hop SDK."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import httpx


class HopError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(HopError, ValueError):
    """A client-side precondition failed; no request was sent."""


class InvalidIdentifierError(InvalidArgumentError):
    """An ID does not carry the prefix of the expected entity kind."""

    def __init__(self, value: object, kind: str):
        super().__init__(f"Expected a {kind} ID (prefix '{kind}_'), got {value!r}")
        self.value = value
        self.kind = kind


class MissingPathParameterError(HopError):
    """A path template placeholder had no value in the parameter mapping."""

    def __init__(self, path: str, missing: Sequence[str]):
        names = ", ".join(f":{name}" for name in missing)
        super().__init__(f"Missing path parameter(s) {names} for {path}")
        self.path = path
        self.missing = tuple(missing)


class NetworkError(HopError):
    """No response was received from the API."""


class APIError(HopError):
    """Error response from the Hop API.

    ``str(exc)`` is a summary with the HTTP status. ``message`` and ``code``
    are the server's own values, or None when the body carried none.
    """

    def __init__(
        self,
        response: httpx.Response,
        summary: str,
        *,
        message: str | None = None,
        code: str | None = None,
        data: Any | None = None,
    ):
        super().__init__(summary)
        self.response = response
        self.status_code = response.status_code
        self.code = code
        self.message = message
        self.data = data

    @classmethod
    def from_response(cls, response: httpx.Response) -> APIError:
        summary, message, code, parsed = _parse_error_message(response)
        return cls(response, summary, message=message, code=code, data=parsed)


def _parse_error_message(
    response: httpx.Response,
) -> tuple[str, str | None, str | None, Any | None]:
    """Parse ``{"error": {"code", "message"}}`` out of an error response.

    Returns (summary, server message, server code, parsed body).
    """
    parsed: Any | None = None
    code: str | None = None
    message: str | None = None
    summary = f"HTTP {response.status_code}"
    try:
        parsed = response.json()
    except ValueError:
        parsed = None

    if isinstance(parsed, dict):
        err = parsed.get("error")
        if isinstance(err, dict):
            code = err.get("code")
            message = err.get("message")
        elif isinstance(parsed.get("message"), str):
            message = parsed["message"]
        if message:
            summary = f"{summary}: {message}"
        if code:
            summary = f"{summary} (code={code})"
    elif parsed is None and response.text:
        text = response.text
        snippet = text if len(text) <= 500 else text[:500] + "..."
        summary = f"{summary}: {snippet}"

    return summary, message, code, parsed


__all__ = [
    "HopError",
    "InvalidArgumentError",
    "InvalidIdentifierError",
    "MissingPathParameterError",
    "NetworkError",
    "APIError",
]
