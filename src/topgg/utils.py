from __future__ import annotations

import json
import re
from datetime import datetime
from typing import Any, Dict, Mapping

_FRACTION = re.compile(r"(\d{2}:\d{2}:\d{2})\.(\d+)")


def normalize_key(key: str) -> str:
    """Normalize JSON key for case-insensitive matching."""

    return key.lower()


def normalize_keys(payload: Any) -> Dict[str, Any]:
    """Return top-level JSON object with normalized keys."""

    if not isinstance(payload, dict):
        raise TypeError(f"expected JSON object, got {type(payload).__name__}")
    value: Dict[str, Any] = {}
    for key, item in payload.items():
        value[normalize_key(key)] = item
    return value


def compact(value: Any) -> Any:
    """Recursively drop ``None`` members from JSON objects."""

    if isinstance(value, Mapping):
        return {key: compact(item) for key, item in value.items() if item is not None}
    if isinstance(value, (list, tuple)):
        return [compact(item) for item in value]
    return value


def dump_json(payload: Any) -> str:
    """Serialize request payload, omitting null members."""

    return json.dumps(compact(payload), separators=(",", ":"))


def _microseconds(match: "re.Match[str]") -> str:
    return f"{match.group(1)}.{match.group(2)[:6].ljust(6, '0')}"


def parse_datetime(value: Any) -> datetime:
    """Parse ISO 8601 timestamp as sent by the API."""

    if not isinstance(value, str):
        raise TypeError(f"expected timestamp string, got {type(value).__name__}")
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    # fromisoformat before 3.11 only takes 3 or 6 fraction digits
    value = _FRACTION.sub(_microseconds, value, count=1)
    return datetime.fromisoformat(value)


__all__ = [
    "normalize_key",
    "normalize_keys",
    "compact",
    "dump_json",
    "parse_datetime",
]
