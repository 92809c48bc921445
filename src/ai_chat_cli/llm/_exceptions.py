"""Exceptions raised by the chat completion clients."""

from __future__ import annotations

from typing import Any


class ChatClientError(Exception):
    """Base class for every error this package raises."""


class ConfigurationError(ChatClientError):
    """Raised when required configuration (e.g. the API key) is missing."""


class TransportError(ChatClientError):
    """Raised when the HTTP round trip itself fails (connection, timeout, ...)."""


class DeserializationError(ChatClientError):
    """Raised when a response body does not have the expected shape."""

    def __init__(self, message: str, *, body: Any = None) -> None:
        self.body = body
        super().__init__(message)


class APIError(DeserializationError):
    """Raised when the API answered with an ``{"error": {...}}`` payload.

    Still a :class:`DeserializationError`: the body is not a completion.
    """

    def __init__(self, status_code: int, body: dict[str, Any]) -> None:
        self.status_code = status_code
        error = body.get("error")
        if not isinstance(error, dict):
            error = {"message": str(error)}
        self.message: str = str(error.get("message") or "")
        self.type: str | None = error.get("type")
        self.code: str | None = error.get("code")
        super().__init__(f"HTTP {status_code}: {self.message or error}", body=body)
