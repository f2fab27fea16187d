from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from google_webapi.util import parse_time, redact_key

CET = timezone(timedelta(hours=1))


def test_parse_time_empty() -> None:
    assert parse_time(None) is None
    assert parse_time("") is None


def test_parse_time_epoch() -> None:
    assert parse_time(1577836800) == datetime(2020, 1, 1, tzinfo=UTC)
    assert parse_time(1577836800.0) == datetime(2020, 1, 1, tzinfo=UTC)


def test_parse_time_naive_gets_default_tz() -> None:
    parsed = parse_time(datetime(2020, 1, 1, 1, 0), CET)
    assert parsed == datetime(2020, 1, 1, tzinfo=UTC)


def test_parse_time_keeps_aware_datetime() -> None:
    value = datetime(2020, 1, 1, tzinfo=CET)
    assert parse_time(value, UTC) is value


def test_parse_time_natural_language() -> None:
    parsed = parse_time("2:30pm Sunday, March 30th, 2025", UTC)
    assert parsed == datetime(2025, 3, 30, 14, 30, tzinfo=UTC)


@pytest.mark.parametrize("value", [True, "xyzzy qqq", object()])
def test_parse_time_rejects(value: object) -> None:
    with pytest.raises(ValueError):  # noqa: PT011
        parse_time(value)


def test_redact_key() -> None:
    params = {"key": "secret", "q": "pizza"}
    assert redact_key(params) == {"key": "**REDACTED**", "q": "pizza"}
    assert params["key"] == "secret"
    assert redact_key({"q": "pizza"}) == {"q": "pizza"}
