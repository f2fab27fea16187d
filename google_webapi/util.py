"""Utility functions for Google web API requests."""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from typing import Any
from zoneinfo import ZoneInfo

from dateutil import parser as dateutil_parser


def parse_time(value: Any, default_tz: tzinfo | str | None = None) -> datetime | None:
    """
    Parse a user supplied time into an aware datetime.

    Accepts:
    - datetime (naive values get ``default_tz``)
    - int / float epoch seconds
    - str like "5:00pm", "3:30 pm", "2:30pm Monday, March 29th, 2025".

    Returns None for None or an empty string.

    Raises:
        ValueError: The value cannot be interpreted as a time.

    """
    if value in (None, ""):
        return None
    if isinstance(default_tz, str):
        default_tz = ZoneInfo(default_tz)
    tz = default_tz or UTC
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, bool):
        msg = f"Not a time value: {value!r}"
        raise ValueError(msg)
    elif isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=UTC)
    elif isinstance(value, str):
        try:
            dt = dateutil_parser.parse(value, fuzzy=True)
        except (ValueError, OverflowError) as err:
            msg = f"Unparseable time: {value!r}"
            raise ValueError(msg) from err
    else:
        msg = f"Not a time value: {value!r}"
        raise ValueError(msg)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz)
    return dt


def redact_key(params: dict[str, str]) -> dict[str, str]:
    """Return a copy of query parameters safe for logging."""
    if "key" not in params:
        return dict(params)
    return {**params, "key": "**REDACTED**"}
