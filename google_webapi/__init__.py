"""Typed request and response models for Google Directions and Custom Search."""

from .api import GoogleApiClient
from .config import ClientConfig
from .enums import Country, Language
from .exceptions import (
    GoogleApiAuthError,
    GoogleApiError,
    GoogleApiRequestError,
    InvalidCombination,
    MissingRequiredField,
)
from .maps import DirectionsRequest, DirectionsResponse
from .schemas import directions_request_from_dict, search_request_from_dict
from .search import SearchOptions, SearchRequest, SearchResponse

__all__ = [
    "ClientConfig",
    "Country",
    "DirectionsRequest",
    "DirectionsResponse",
    "GoogleApiAuthError",
    "GoogleApiClient",
    "GoogleApiError",
    "GoogleApiRequestError",
    "InvalidCombination",
    "Language",
    "MissingRequiredField",
    "SearchOptions",
    "SearchRequest",
    "SearchResponse",
    "directions_request_from_dict",
    "search_request_from_dict",
]
