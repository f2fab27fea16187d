"""Custom Search request and response models."""

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
from .request import SearchOptions, SearchRequest, SortExpression
from .response import Context, Facet, Item, SearchResponse

__all__ = [
    "Context",
    "DateRestrictType",
    "Facet",
    "FileType",
    "ImageColorType",
    "ImageDominantColor",
    "ImageSize",
    "ImageType",
    "Item",
    "RightsType",
    "SafetyLevel",
    "SearchOptions",
    "SearchRequest",
    "SearchResponse",
    "SearchType",
    "SiteSearchFilter",
    "SortBias",
    "SortExpression",
    "SortOrder",
]
