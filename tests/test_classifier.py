from __future__ import annotations

import json
from datetime import timedelta

import pytest

from topgg import exceptions
from topgg.classifier import classify_response, parse_error_message, parse_retry_after


@pytest.mark.parametrize(
    "body, expected",
    [
        ('{"title": "Bad", "detail": "oops"}', "Bad: oops"),
        ('{"detail": "oops"}', "oops"),
        ('{"title": "Bad"}', '{"title": "Bad"}'),
        ("", "Unknown error"),
        ("plain failure", "plain failure"),
        ("[1, 2]", "[1, 2]"),
        ('{"detail": 5}', '{"detail": 5}'),
    ],
)
def test_parse_error_message(body, expected):
    assert parse_error_message(body) == expected


@pytest.mark.parametrize("status", [200, 201, 204, 299])
def test_success_passes_through(status):
    assert classify_response(status, {}, "not even json") is None


@pytest.mark.parametrize("status", [s for s in range(400, 600) if s not in (404, 429)])
def test_client_and_server_ranges(status):
    error = classify_response(status, {}, "")

    expected = exceptions.ClientError if status < 500 else exceptions.ServerError
    assert type(error) is expected
    assert error.status_code == status


def test_not_found_and_unclassified():
    not_found = classify_response(404, {}, '{"detail": "gone"}')
    assert type(not_found) is exceptions.NotFoundError
    assert not_found.message == "gone"

    other = classify_response(304, {}, "")
    assert type(other) is exceptions.UnclassifiedError
    assert other.status_code == 304
    assert other.message == "Unknown error"
    assert "Unexpected error (304)" in str(other)


def test_failures_form_flat_closed_set():
    for failure in exceptions.STRUCTURED_FAILURES:
        assert issubclass(failure, exceptions.TopGGError)
        others = [item for item in exceptions.STRUCTURED_FAILURES if item is not failure]
        assert not any(issubclass(failure, other) for other in others)
    assert not issubclass(exceptions.ConfigurationError, exceptions.TopGGError)


def test_retry_after_header_takes_precedence():
    body = json.dumps({"retry-after": 60})

    error = classify_response(429, {"Retry-After": "30"}, body)

    assert type(error) is exceptions.RateLimitedError
    assert error.retry_after == timedelta(seconds=30)


def test_retry_after_falls_back_to_body():
    assert parse_retry_after({}, json.dumps({"retry-after": 60})) == timedelta(seconds=60)


def test_retry_after_absent():
    assert parse_retry_after({}, "") is None
    assert parse_retry_after({}, '{"retry-after": "soon"}') is None
    assert parse_retry_after({}, '{"retry-after": 1.5}') is None
    assert parse_retry_after({}, "not json") is None


def test_retry_after_header_is_case_insensitive():
    assert parse_retry_after({"retry-after": "5"}, "") == timedelta(seconds=5)


def test_retry_after_http_date_falls_through_to_body():
    headers = {"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"}

    assert parse_retry_after(headers, '{"retry-after": 12}') == timedelta(seconds=12)
    assert parse_retry_after(headers, "") is None


def test_oversized_retry_after_in_body_gives_no_delay():
    error = classify_response(429, {}, json.dumps({"retry-after": 10**15}))

    assert type(error) is exceptions.RateLimitedError
    assert error.retry_after is None


def test_oversized_retry_after_header_falls_through_to_body():
    headers = {"Retry-After": "99999999999999999999"}

    assert parse_retry_after(headers, json.dumps({"retry-after": 60})) == timedelta(seconds=60)
    error = classify_response(429, headers, "")
    assert type(error) is exceptions.RateLimitedError
    assert error.retry_after is None
