"""
Custom Search request models.

:class:`SearchOptions` carries the API specific parameters (language,
filters, ranges, image options) and :class:`SearchRequest` combines them with
the key, search engine id and query text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import ClassVar

from ..const import OUTPUT_JSON
from ..enums import Country, Language
from ..exceptions import InvalidCombination
from ..query import (
    QueryParameters,
    add_optional,
    as_flag_set,
    base_parameters,
    encode_flags,
    encode_int,
    require,
)
from .const import (
    DEFAULT_START_INDEX,
    FLAG_OFF,
    FLAG_ON,
    RULE_DATE_RESTRICT,
    RULE_IMAGE_OPTIONS,
    RULE_RANGE_ORDER,
    RULE_SITE_SEARCH_FILTER,
    SEARCH_ENDPOINT,
    SORT_DATE_FORMAT,
    SORT_RESTRICT_TOKEN,
    SORT_SEPARATOR,
)
from .enums import (
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

_OPTIONAL_ENUM_FIELDS: tuple[tuple[str, type[StrEnum]], ...] = (
    ("geo_location", Country),
    ("country_restriction", Country),
    ("site_search_filter", SiteSearchFilter),
    ("date_restrict_type", DateRestrictType),
    ("image_size", ImageSize),
    ("image_type", ImageType),
    ("image_color_type", ImageColorType),
    ("image_dominant_color", ImageDominantColor),
)


@dataclass(frozen=True, slots=True)
class SortExpression:
    """
    A ``sort`` expression such as ``date``, ``date:a:s`` or a date range.

    A range (``start`` and/or ``end``) takes precedence over order and bias
    and renders as ``date:r:YYYYMMDD:YYYYMMDD``.
    """

    key: str | None = None
    order: SortOrder | None = None
    bias: SortBias | None = None
    start: date | None = None
    end: date | None = None

    def to_wire(self) -> str | None:
        """Return the wire form, or None for an empty expression."""
        if not self.key:
            return None
        if self.start is not None or self.end is not None:
            return SORT_SEPARATOR.join(
                (
                    self.key,
                    SORT_RESTRICT_TOKEN,
                    self.start.strftime(SORT_DATE_FORMAT) if self.start else "",
                    self.end.strftime(SORT_DATE_FORMAT) if self.end else "",
                )
            )
        tokens = [self.key]
        if self.order is not None or self.bias is not None:
            tokens.append(SortOrder(self.order or SortOrder.DESCENDING).value)
        if self.bias is not None:
            tokens.append(SortBias(self.bias).value)
        return SORT_SEPARATOR.join(tokens)


@dataclass(frozen=True, slots=True)
class SearchOptions:
    """Search properties such as result count, language and restrictions."""

    number: int | None = None
    interface_language: Language = Language.ENGLISH
    geo_location: Country | None = None
    country_restriction: Country | None = None
    filter: bool = True
    disable_cn_tw_translation: bool = True
    googlehost: str | None = None
    site_search: str | None = None
    site_search_filter: SiteSearchFilter | None = None
    exact_terms: str | None = None
    exclude_terms: str | None = None
    or_terms: str | None = None
    and_terms: str | None = None
    link_site: str | None = None
    related_site: str | None = None
    start_index: int = DEFAULT_START_INDEX
    sort_expression: SortExpression = field(default_factory=SortExpression)
    safety_level: SafetyLevel = SafetyLevel.OFF
    rights: frozenset[RightsType] = frozenset()
    file_types: frozenset[FileType] = frozenset()
    date_restrict_type: DateRestrictType | None = None
    date_restrict_number: int | None = None
    search_type: SearchType = SearchType.WEB
    image_size: ImageSize | None = None
    image_type: ImageType | None = None
    image_color_type: ImageColorType | None = None
    image_dominant_color: ImageDominantColor | None = None
    low_range: int | None = None
    high_range: int | None = None

    def __post_init__(self) -> None:
        """Normalize enum and iterable inputs to immutable values."""
        object.__setattr__(
            self, "interface_language", Language(self.interface_language)
        )
        object.__setattr__(self, "safety_level", SafetyLevel(self.safety_level))
        object.__setattr__(self, "search_type", SearchType(self.search_type))
        object.__setattr__(self, "rights", as_flag_set(self.rights, RightsType))
        object.__setattr__(self, "file_types", as_flag_set(self.file_types, FileType))
        for name, enum_cls in _OPTIONAL_ENUM_FIELDS:
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, enum_cls(value))

    @property
    def image_options(self) -> dict[str, StrEnum | None]:
        """Return image options keyed by wire name."""
        return {
            "imgSize": self.image_size,
            "imgType": self.image_type,
            "imgColorType": self.image_color_type,
            "imgDominantColor": self.image_dominant_color,
        }

    def validate(self) -> None:
        """
        Check cross-field rules.

        Raises:
            InvalidCombination: date restriction half set, site search filter
                without a site, inverted range, or image options on a web
                search.

        """
        if (self.date_restrict_type is None) != (self.date_restrict_number is None):
            raise InvalidCombination(
                ("date_restrict_type", "date_restrict_number"), RULE_DATE_RESTRICT
            )
        if self.site_search_filter is not None and not self.site_search:
            raise InvalidCombination(
                ("site_search_filter", "site_search"), RULE_SITE_SEARCH_FILTER
            )
        if (
            self.low_range is not None
            and self.high_range is not None
            and self.low_range > self.high_range
        ):
            raise InvalidCombination(("low_range", "high_range"), RULE_RANGE_ORDER)
        if self.search_type is not SearchType.IMAGE:
            image_fields = [
                name
                for name in (
                    "image_size",
                    "image_type",
                    "image_color_type",
                    "image_dominant_color",
                )
                if getattr(self, name) is not None
            ]
            if image_fields:
                raise InvalidCombination(
                    ("search_type", *image_fields), RULE_IMAGE_OPTIONS
                )

    @property
    def query_string_parameters(self) -> QueryParameters:
        """Validate and return the ordered option parameters."""
        self.validate()
        params: QueryParameters = {}
        add_optional(params, "num", encode_int(self.number))
        params["hl"] = self.interface_language.value
        if self.geo_location is not None:
            params["gl"] = self.geo_location.value
        if self.country_restriction is not None:
            params["cr"] = self.country_restriction.collection
        params["filter"] = FLAG_ON if self.filter else FLAG_OFF
        params["c2coff"] = FLAG_ON if self.disable_cn_tw_translation else FLAG_OFF
        add_optional(params, "googlehost", self.googlehost)
        add_optional(params, "siteSearch", self.site_search)
        if self.site_search_filter is not None:
            params["siteSearchFilter"] = self.site_search_filter.value
        add_optional(params, "exactTerms", self.exact_terms)
        add_optional(params, "excludeTerms", self.exclude_terms)
        add_optional(params, "orTerms", self.or_terms)
        add_optional(params, "hq", self.and_terms)
        add_optional(params, "linkSite", self.link_site)
        add_optional(params, "relatedSite", self.related_site)
        params["start"] = str(self.start_index)
        add_optional(params, "sort", self.sort_expression.to_wire())
        params["safe"] = self.safety_level.value
        add_optional(params, "rights", encode_flags(self.rights, RightsType))
        add_optional(params, "fileType", encode_flags(self.file_types, FileType))
        if self.date_restrict_type is not None:
            restrict = self.date_restrict_type.value
            params["dateRestrict"] = f"{restrict}{self.date_restrict_number}"
        if self.search_type is SearchType.IMAGE:
            params["searchType"] = self.search_type.value
            for name, value in self.image_options.items():
                if value is not None:
                    params[name] = value.value
        add_optional(params, "lowRange", encode_int(self.low_range))
        add_optional(params, "highRange", encode_int(self.high_range))
        return params


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """
    Parameters of a Custom Search call.

    ``key``, ``search_engine_id`` (``cx``) and ``query`` (``q``) are required.
    """

    PATH: ClassVar[str] = ""

    query: str | None = None
    search_engine_id: str | None = None
    key: str | None = None
    options: SearchOptions = field(default_factory=SearchOptions)

    @property
    def base_url(self) -> str:
        """Return the default endpoint for this request."""
        return SEARCH_ENDPOINT

    def validate(self) -> None:
        """Check required fields, then the option rules."""
        require(self.key, "key")
        require(self.search_engine_id, "search_engine_id")
        require(self.query, "query")
        self.options.validate()

    @property
    def query_string_parameters(self) -> QueryParameters:
        """Validate and return the ordered query parameters."""
        self.validate()
        params = base_parameters(self.key, OUTPUT_JSON)
        params["q"] = require(self.query, "query")
        params["cx"] = require(self.search_engine_id, "search_engine_id")
        params.update(self.options.query_string_parameters)
        return params
