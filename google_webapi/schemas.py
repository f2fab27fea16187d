"""
Voluptuous schemas turning loosely typed mappings into request objects.

Useful where parameters arrive as JSON, tool arguments or CLI options: enum
fields accept their wire tokens, flag sets accept either a list or a
``|``-delimited string and time fields accept epoch seconds or natural
language strings. Required fields are deliberately optional here; blank or
missing ones surface as ``MissingRequiredField`` when the request is encoded.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, tzinfo
from enum import Enum
from typing import Any, TypeVar

import voluptuous as vol

from .enums import Country, Language
from .maps.directions import DirectionsRequest
from .maps.enums import (
    AvoidWay,
    TransitMode,
    TransitRoutingPreference,
    TravelMode,
    Units,
)
from .query import as_flag_set, decode_flags
from .search.enums import (
    DateRestrictType,
    FileType,
    ImageColorType,
    ImageDominantColor,
    ImageSize,
    ImageType,
    RightsType,
    SafetyLevel,
    SearchType,
    SiteSearchFilter,
    SortBias,
    SortOrder,
)
from .search.request import SearchOptions, SearchRequest, SortExpression
from .util import parse_time

_STRING = vol.Any(None, vol.Coerce(str))
_INT = vol.Any(None, vol.Coerce(int))


E = TypeVar("E", bound=Enum)


def _flags(enum_cls: type[E]) -> Callable[[Any], frozenset[E]]:
    """Return a validator producing a frozenset of ``enum_cls`` members."""

    def validate(value: Any) -> frozenset[E]:
        try:
            if isinstance(value, str):
                return decode_flags(value, enum_cls)
            return as_flag_set(value, enum_cls)
        except (TypeError, ValueError) as err:
            msg = f"invalid {enum_cls.__name__} value: {value!r}"
            raise vol.Invalid(msg) from err

    return validate


def _time(default_tz: tzinfo | str | None) -> Callable[[Any], datetime | None]:
    """Return a validator parsing epoch seconds or time strings."""

    def validate(value: Any) -> datetime | None:
        try:
            return parse_time(value, default_tz)
        except ValueError as err:
            raise vol.Invalid(str(err)) from err

    return validate


def _date(value: Any) -> date | None:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    # 20100101 would otherwise be read as epoch seconds
    if isinstance(value, (int, float)):
        msg = f"expected a date or date string, not a number: {value!r}"
        raise vol.Invalid(msg)
    try:
        parsed = parse_time(value)
    except ValueError as err:
        raise vol.Invalid(str(err)) from err
    return parsed.date() if parsed else None


def _waypoints(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    try:
        items = list(value)
    except TypeError as err:
        msg = f"expected a list of waypoints: {value!r}"
        raise vol.Invalid(msg) from err
    return tuple(vol.Schema([vol.Coerce(str)])(items))


def directions_schema(default_tz: tzinfo | str | None = None) -> vol.Schema:
    """Return the schema for directions arguments; naive times use default_tz."""
    time_validator = vol.Any(None, _time(default_tz))
    return vol.Schema(
        {
            vol.Optional("origin"): _STRING,
            vol.Optional("destination"): _STRING,
            vol.Optional("key"): _STRING,
            vol.Optional("units"): vol.Coerce(Units),
            vol.Optional("avoid"): _flags(AvoidWay),
            vol.Optional("travel_mode"): vol.Coerce(TravelMode),
            vol.Optional("transit_mode"): _flags(TransitMode),
            vol.Optional("transit_routing_preference"): _flags(
                TransitRoutingPreference
            ),
            vol.Optional("arrival_time"): time_validator,
            vol.Optional("departure_time"): time_validator,
            vol.Optional("waypoints"): _waypoints,
            vol.Optional("optimize_waypoints"): vol.Boolean(),
            vol.Optional("alternatives"): vol.Boolean(),
            vol.Optional("region"): _STRING,
            vol.Optional("language"): vol.Coerce(Language),
        }
    )


SORT_SCHEMA = vol.Schema(
    {
        vol.Optional("key"): _STRING,
        vol.Optional("order"): vol.Any(None, vol.Coerce(SortOrder)),
        vol.Optional("bias"): vol.Any(None, vol.Coerce(SortBias)),
        vol.Optional("start"): vol.Any(None, _date),
        vol.Optional("end"): vol.Any(None, _date),
    }
)

SEARCH_OPTIONS_SCHEMA = vol.Schema(
    {
        vol.Optional("number"): vol.Any(
            None, vol.All(vol.Coerce(int), vol.Range(min=1, max=10))
        ),
        vol.Optional("interface_language"): vol.Coerce(Language),
        vol.Optional("geo_location"): vol.Any(None, vol.Coerce(Country)),
        vol.Optional("country_restriction"): vol.Any(None, vol.Coerce(Country)),
        vol.Optional("filter"): vol.Boolean(),
        vol.Optional("disable_cn_tw_translation"): vol.Boolean(),
        vol.Optional("googlehost"): _STRING,
        vol.Optional("site_search"): _STRING,
        vol.Optional("site_search_filter"): vol.Any(
            None, vol.Coerce(SiteSearchFilter)
        ),
        vol.Optional("exact_terms"): _STRING,
        vol.Optional("exclude_terms"): _STRING,
        vol.Optional("or_terms"): _STRING,
        vol.Optional("and_terms"): _STRING,
        vol.Optional("link_site"): _STRING,
        vol.Optional("related_site"): _STRING,
        vol.Optional("start_index"): vol.All(vol.Coerce(int), vol.Range(min=1)),
        vol.Optional("sort_expression"): vol.All(
            SORT_SCHEMA, lambda conf: SortExpression(**conf)
        ),
        vol.Optional("safety_level"): vol.Coerce(SafetyLevel),
        vol.Optional("rights"): _flags(RightsType),
        vol.Optional("file_types"): _flags(FileType),
        vol.Optional("date_restrict_type"): vol.Any(
            None, vol.Coerce(DateRestrictType)
        ),
        vol.Optional("date_restrict_number"): _INT,
        vol.Optional("search_type"): vol.Coerce(SearchType),
        vol.Optional("image_size"): vol.Any(None, vol.Coerce(ImageSize)),
        vol.Optional("image_type"): vol.Any(None, vol.Coerce(ImageType)),
        vol.Optional("image_color_type"): vol.Any(None, vol.Coerce(ImageColorType)),
        vol.Optional("image_dominant_color"): vol.Any(
            None, vol.Coerce(ImageDominantColor)
        ),
        vol.Optional("low_range"): _INT,
        vol.Optional("high_range"): _INT,
    }
)

SEARCH_SCHEMA = SEARCH_OPTIONS_SCHEMA.extend(
    {
        vol.Optional("query"): _STRING,
        vol.Optional("search_engine_id"): _STRING,
        vol.Optional("key"): _STRING,
    }
)

_SEARCH_REQUEST_FIELDS = ("query", "search_engine_id", "key")


def directions_request_from_dict(
    data: dict[str, Any], *, default_tz: tzinfo | str | None = None
) -> DirectionsRequest:
    """
    Build a DirectionsRequest from a plain mapping.

    Raises:
        voluptuous.Invalid: A value has the wrong type or an unknown token.

    """
    return DirectionsRequest(**directions_schema(default_tz)(dict(data)))


def search_request_from_dict(data: dict[str, Any]) -> SearchRequest:
    """
    Build a SearchRequest from a flat mapping of request and option fields.

    Raises:
        voluptuous.Invalid: A value has the wrong type or an unknown token.

    """
    conf = SEARCH_SCHEMA(dict(data))
    request_args = {k: conf.pop(k) for k in _SEARCH_REQUEST_FIELDS if k in conf}
    return SearchRequest(**request_args, options=SearchOptions(**conf))
