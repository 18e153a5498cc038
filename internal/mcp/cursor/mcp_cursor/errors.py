"""Cursor API error taxonomy.

Every failure of a Cursor API call is raised as exactly one subclass of
CursorAPIError. The ``kind`` tag is what tool handlers report to the client, so
callers can tell an upstream rejection apart from a broken response contract or
a network/decoding failure.
"""

from typing import Any


class CursorAPIError(Exception):
    """Base class for Cursor API failures."""

    kind = "api-error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def details(self) -> dict[str, Any]:
        """Extra structured fields reported alongside the message."""
        return {}


class DecodeError(CursorAPIError):
    """Response body is not valid JSON."""

    kind = "decode-error"

    def __init__(self, raw_text: str):
        super().__init__(f"Invalid JSON response from API: {raw_text}")
        self.raw_text = raw_text

    def details(self) -> dict[str, Any]:
        return {"rawText": self.raw_text}


class UpstreamError(CursorAPIError):
    """Non-2xx response carrying a recognizable API error body."""

    kind = "upstream-error"

    def __init__(self, status: int, message: str, code: str | None = None):
        super().__init__(f"Cursor API error: {status} - {message}")
        self.status = status
        self.upstream_message = message
        self.code = code

    def details(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "status": self.status,
            "upstreamMessage": self.upstream_message,
        }
        if self.code is not None:
            data["code"] = self.code
        return data


class TransportError(CursorAPIError):
    """Non-2xx response without an error body, or a failed HTTP exchange."""

    kind = "transport-error"

    def __init__(
        self,
        status: int | None,
        status_text: str,
        body: str,
    ):
        if status is None:
            message = f"Cursor API request failed: {status_text}"
        else:
            message = f"Cursor API error: {status} {status_text} - {body}"
        super().__init__(message)
        self.status = status
        self.status_text = status_text
        self.body = body

    def details(self) -> dict[str, Any]:
        if self.status is None:
            return {}
        return {"status": self.status, "body": self.body}


class ResponseValidationError(CursorAPIError):
    """2xx response whose body violates the expected schema."""

    kind = "validation-error"

    def __init__(self, detail: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(f"API response validation failed: {detail}")
        self.detail = detail
        self.errors = errors or []

    def details(self) -> dict[str, Any]:
        return {"errors": self.errors}


class CacheRefreshError(CursorAPIError):
    """Repository cache refresh failed; wraps the underlying API error."""

    kind = "cache-refresh-error"

    def __init__(self, cause: CursorAPIError):
        super().__init__(f"Repository cache refresh failed: {cause.message}")
        self.cause = cause

    def details(self) -> dict[str, Any]:
        return {"cause": self.cause.kind, **self.cause.details()}
