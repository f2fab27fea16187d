"""
Shared plumbing for turning request objects into query parameters.

Every request type builds its mapping by calling :func:`base_parameters` first
and then appending its own fields through the helpers below. The helpers
return ``None`` for values that must not be emitted so callers can use
:func:`add_optional` uniformly.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from enum import Enum
from typing import TypeAlias, TypeVar

from .const import FLAG_DELIMITER, TRUE_TOKEN
from .exceptions import MissingRequiredField

QueryParameters: TypeAlias = dict[str, str]

E = TypeVar("E", bound=Enum)


def base_parameters(key: str | None, output: str | None = None) -> QueryParameters:
    """Return the common parameters every request starts from."""
    params: QueryParameters = {}
    if key:
        params["key"] = key
    if output:
        params["alt"] = output
    return params


def require(value: str | None, field: str) -> str:
    """Return value or raise MissingRequiredField when it is None or blank."""
    if value is None or not value.strip():
        raise MissingRequiredField(field)
    return value


def add_optional(params: QueryParameters, name: str, value: str | None) -> None:
    """Add ``name`` only when value is set; never emit empty strings."""
    if value is not None and value != "":
        params[name] = value


def encode_flags(
    values: Iterable[E], enum_cls: type[E], delimiter: str = FLAG_DELIMITER
) -> str | None:
    """
    Join the wire tokens of the active members of a flag set.

    Tokens are emitted in member declaration order so the same set always
    produces the same string. An empty set returns None.
    """
    active = set(values)
    tokens = [str(member.value) for member in enum_cls if member in active]
    if not tokens:
        return None
    return delimiter.join(tokens)


def decode_flags(
    wire: str | None, enum_cls: type[E], delimiter: str = FLAG_DELIMITER
) -> frozenset[E]:
    """Parse a delimited wire string back into a set of members."""
    if not wire:
        return frozenset()
    return frozenset(
        enum_cls(token.strip()) for token in wire.split(delimiter) if token.strip()
    )


def to_unix_seconds(value: datetime) -> int:
    """Return Unix epoch seconds; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return int(value.timestamp())


def encode_timestamp(value: datetime | None) -> str | None:
    """Return epoch seconds as a base-10 string, or None when unset."""
    if value is None:
        return None
    return str(to_unix_seconds(value))


def encode_bool(flag: bool) -> str | None:  # noqa: FBT001
    """Return ``"true"`` for set toggles; false toggles are never emitted."""
    return TRUE_TOKEN if flag else None


def encode_int(value: int | None) -> str | None:
    """Return a base-10 string for an optional integer."""
    return None if value is None else str(value)


def encode_list(
    values: Iterable[str], delimiter: str = FLAG_DELIMITER, prefix: str | None = None
) -> str | None:
    """Join a list of strings, optionally prepending a sentinel token."""
    items = list(values)
    if not items:
        return None
    if prefix:
        items.insert(0, prefix)
    return delimiter.join(items)


def as_flag_set(
    values: Iterable[E] | E | str | None, enum_cls: type[E]
) -> frozenset[E]:
    """Return a frozenset of members from a single member, token or iterable."""
    if values is None:
        return frozenset()
    if isinstance(values, (str, enum_cls)):
        return frozenset({enum_cls(values)})
    return frozenset(enum_cls(value) for value in values)
