"""Errors raised by request encoding and the HTTP client."""

from __future__ import annotations

from collections.abc import Iterable


class GoogleApiRequestError(ValueError):
    """A request cannot be encoded because of caller input."""


class MissingRequiredField(GoogleApiRequestError):  # noqa: N818
    """A mandatory request field is blank or absent."""

    def __init__(self, field: str) -> None:
        """Store the offending field name."""
        self.field = field
        super().__init__(f"{field} is required")


class InvalidCombination(GoogleApiRequestError):  # noqa: N818
    """A cross-field precondition of a request does not hold."""

    def __init__(self, fields: Iterable[str], rule: str) -> None:
        """Store the offending field names and the rule that failed."""
        self.fields = tuple(fields)
        self.rule = rule
        super().__init__(f"{', '.join(self.fields)}: {rule}")


class GoogleApiError(Exception):
    """General Google API error."""


class GoogleApiAuthError(GoogleApiError):
    """Authentication / authorization error."""
