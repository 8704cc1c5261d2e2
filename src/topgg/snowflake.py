"""Codec for Discord snowflake identifiers.

Snowflakes are unsigned 64-bit integers. The API sends them as decimal
strings so that consumers with double-precision numbers do not lose digits;
decoding also accepts plain JSON numbers.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from .exceptions import DeserializationError

MAX_SNOWFLAKE = 2**64 - 1


def _check_range(value: int) -> int:
    if not 0 <= value <= MAX_SNOWFLAKE:
        raise DeserializationError(f"Snowflake {value} is out of the unsigned 64-bit range")
    return value


def encode_snowflake(value: int) -> str:
    """Serialize snowflake into its wire string form."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("snowflake must be int")
    if not 0 <= value <= MAX_SNOWFLAKE:
        raise ValueError(f"snowflake {value} is out of the unsigned 64-bit range")
    return str(value)


def decode_snowflake(token: Any) -> int:
    """Parse snowflake from a decoded JSON string or number token."""

    if isinstance(token, str):
        # int() would also accept "+1", " 1" and "1_000".
        if not token.isascii() or not token.isdigit():
            raise DeserializationError(f"Unable to parse '{token}' as snowflake")
        return _check_range(int(token))
    if isinstance(token, int) and not isinstance(token, bool):
        return _check_range(token)
    raise DeserializationError(f"Unexpected token {type(token).__name__} when parsing snowflake")


def encode_optional_snowflake(value: Optional[int]) -> Optional[str]:
    """Serialize nullable snowflake; ``None`` stays ``None`` and is never ``"null"``."""

    if value is None:
        return None
    return encode_snowflake(value)


def decode_optional_snowflake(token: Any) -> Optional[int]:
    if token is None or token == "":
        return None
    return decode_snowflake(token)


def encode_snowflake_list(values: Iterable[int]) -> List[str]:
    return [encode_snowflake(value) for value in values]


def decode_snowflake_list(token: Any) -> Optional[List[int]]:
    """Parse JSON array of snowflakes. ``null`` gives ``None``, ``[]`` gives ``[]``."""

    if token is None:
        return None
    if not isinstance(token, list):
        raise DeserializationError(f"Expected array of snowflakes, got {type(token).__name__}")
    return [decode_snowflake(item) for item in token]


__all__ = [
    "MAX_SNOWFLAKE",
    "encode_snowflake",
    "decode_snowflake",
    "encode_optional_snowflake",
    "decode_optional_snowflake",
    "encode_snowflake_list",
    "decode_snowflake_list",
]
