"""Mapping of failed HTTP exchanges onto Top.gg error values."""

from __future__ import annotations

import json
from datetime import timedelta
from http import HTTPStatus
from typing import Any, Mapping, Optional

from .exceptions import (
    ClientError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    TopGGError,
    UnclassifiedError,
)
from .models import ProblemDetails

UNKNOWN_ERROR = "Unknown error"
RETRY_AFTER_FIELD = "retry-after"


def _load_object(text: str) -> Optional[dict]:
    if not text:
        return None
    try:
        payload = json.loads(text)
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None


def parse_error_message(text: str) -> str:
    """Build human readable message from problem details body or raw text."""

    if not text:
        return UNKNOWN_ERROR
    payload = _load_object(text)
    if payload is not None:
        try:
            problem = ProblemDetails.from_dict(payload)
        except (TypeError, ValueError):
            problem = None
        if problem is not None and problem.detail is not None:
            if problem.title is not None:
                return f"{problem.title}: {problem.detail}"
            return problem.detail
    return text


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    # httpx.Headers and requests' CaseInsensitiveDict already ignore case
    value = headers.get(name)
    if value is not None:
        return value
    for key, item in headers.items():
        if key.lower() == name.lower():
            return item
    return None


def _is_integral(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _seconds(value: int) -> Optional[timedelta]:
    try:
        return timedelta(seconds=value)
    except OverflowError:
        return None


def parse_retry_after(headers: Mapping[str, str], text: str) -> Optional[timedelta]:
    """Resolve rate limit delay. The header wins over the ``retry-after`` body field."""

    header = _header(headers, "Retry-After")
    if header is not None:
        header = header.strip()
        # HTTP-date form carries no delta
        if header.isascii() and header.isdigit():
            delay = _seconds(int(header))
            if delay is not None:
                return delay

    payload = _load_object(text)
    if payload is not None:
        seconds = payload.get(RETRY_AFTER_FIELD)
        if _is_integral(seconds):
            return _seconds(seconds)
    return None


def classify_response(status_code: int, headers: Mapping[str, str], text: str) -> Optional[TopGGError]:
    """Return error describing a failed exchange, or ``None`` for 2xx responses."""

    if HTTPStatus.OK <= status_code < HTTPStatus.MULTIPLE_CHOICES:
        return None

    message = parse_error_message(text)
    if status_code == HTTPStatus.NOT_FOUND:
        return NotFoundError(message, text)
    if status_code == HTTPStatus.TOO_MANY_REQUESTS:
        return RateLimitedError(message, parse_retry_after(headers, text), text)
    if status_code >= HTTPStatus.INTERNAL_SERVER_ERROR:
        return ServerError(status_code, message, text)
    if status_code >= HTTPStatus.BAD_REQUEST:
        return ClientError(status_code, message, text)
    return UnclassifiedError(status_code, message, text)


__all__ = [
    "UNKNOWN_ERROR",
    "parse_error_message",
    "parse_retry_after",
    "classify_response",
]
