from __future__ import annotations

from datetime import timedelta
from typing import Optional


class TopGGError(Exception):
    """Base Top.gg API error."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TransportError(TopGGError):
    """Raised when the HTTP exchange could not be completed."""


class DeserializationError(TopGGError, ValueError):
    """Raised when a response body does not match the expected schema."""

    def __init__(self, message: str, response_text: Optional[str] = None) -> None:
        self.response_text = response_text
        if response_text is not None:
            message = f"{message}: {response_text}"
        super().__init__(message)


class _StatusError(TopGGError):
    def __init__(self, status_code: int, message: str, response_text: str = "") -> None:
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(message)

    def __str__(self) -> str:
        return f"HTTP {self.status_code}: {self.message}"


class NotFoundError(_StatusError):
    """Raised for HTTP 404."""

    def __init__(self, message: str, response_text: str = "") -> None:
        super().__init__(404, message, response_text)


class RateLimitedError(_StatusError):
    """Raised for HTTP 429. ``retry_after`` is ``None`` when the API gave no delay."""

    def __init__(
        self,
        message: str,
        retry_after: Optional[timedelta] = None,
        response_text: str = "",
    ) -> None:
        self.retry_after = retry_after
        super().__init__(429, message, response_text)


class ClientError(_StatusError):
    """Raised for HTTP 4xx other than 404 and 429."""


class ServerError(_StatusError):
    """Raised for HTTP 5xx."""


class UnclassifiedError(_StatusError):
    """Raised for any other non-success status."""

    def __str__(self) -> str:
        return f"Unexpected error ({self.status_code}): {self.message}"


class ConfigurationError(RuntimeError):
    """Raised when the client is missing configuration an operation requires."""


STRUCTURED_FAILURES = (
    TransportError,
    DeserializationError,
    NotFoundError,
    RateLimitedError,
    ClientError,
    ServerError,
    UnclassifiedError,
)


__all__ = [
    "TopGGError",
    "TransportError",
    "DeserializationError",
    "NotFoundError",
    "RateLimitedError",
    "ClientError",
    "ServerError",
    "UnclassifiedError",
    "ConfigurationError",
    "STRUCTURED_FAILURES",
]
