from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from topgg.utils import compact, dump_json, normalize_keys, parse_datetime


def test_normalize_keys_lowercases_top_level_only():
    assert normalize_keys({"Server_Count": 1, "Inner": {"A": 1}}) == {"server_count": 1, "inner": {"A": 1}}


def test_normalize_keys_requires_object():
    with pytest.raises(TypeError):
        normalize_keys([1, 2])


def test_compact_drops_nulls_recursively():
    payload = {"a": None, "b": [{"c": None, "d": 1}], "e": {"f": None}}

    assert compact(payload) == {"b": [{"d": 1}], "e": {}}


def test_dump_json_never_emits_null_members():
    text = dump_json([{"id": None, "name": "ping", "options": None}])

    assert "null" not in text
    assert json.loads(text) == [{"name": "ping"}]


@pytest.mark.parametrize(
    "raw, microsecond",
    [
        ("2024-05-01T12:30:45.1Z", 100000),
        ("2024-05-01T12:30:45.12+00:00", 120000),
        ("2024-05-01T12:30:45.123Z", 123000),
        ("2024-05-01T12:30:45.1234567Z", 123456),
        ("2024-05-01T12:30:45Z", 0),
    ],
)
def test_parse_datetime_accepts_any_fraction_length(raw, microsecond):
    parsed = parse_datetime(raw)

    assert parsed.replace(microsecond=0) == datetime(2024, 5, 1, 12, 30, 45, tzinfo=timezone.utc)
    assert parsed.microsecond == microsecond
