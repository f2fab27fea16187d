"""
Google web API client wrapper.

Sends encoded requests with a caller supplied ``aiohttp`` session and maps
the JSON answers onto the response records. The client attaches the static
API key and adds nothing else: no retries, no caching.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any, TypeVar

import async_timeout

from .const import (
    ERR_INVALID_RESPONSE,
    STATUS_OK,
    STATUS_REQUEST_DENIED,
    STATUS_ZERO_RESULTS,
)
from .exceptions import GoogleApiAuthError, GoogleApiError
from .maps.response import DirectionsResponse
from .search.response import SearchResponse
from .util import redact_key

if TYPE_CHECKING:
    import aiohttp

    from .config import ClientConfig
    from .maps.directions import DirectionsRequest
    from .query import QueryParameters
    from .search.request import SearchRequest

_LOGGER = logging.getLogger(__name__)

R = TypeVar("R", "DirectionsRequest", "SearchRequest")


def _endpoint(base_url: str, path: str) -> str:
    """Join a base URL and a relative path with exactly one slash."""
    if not path:
        return base_url
    return f"{base_url.rstrip('/')}/{path}"


class GoogleApiClient:
    """Client for the Directions and Custom Search web services."""

    def __init__(self, config: ClientConfig, session: aiohttp.ClientSession) -> None:
        """
        Initialize the Google API client.

        Args:
            config: Static settings; ``api_key`` is attached to requests that
                carry no key of their own.
            session: An aiohttp.ClientSession used to perform HTTP calls.

        """
        self._config = config
        self._session = session

    async def directions(self, request: DirectionsRequest) -> DirectionsResponse:
        """
        Fetch directions for a request.

        Args:
            request: The directions request; validated before any I/O.

        Returns:
            The decoded Directions response.

        Raises:
            MissingRequiredField: A mandatory request field is blank.
            InvalidCombination: A cross-field rule does not hold.
            GoogleApiError: On HTTP errors or a non-OK API status.
            GoogleApiAuthError: On authentication issues.

        """
        request = self._with_key(request)
        params = request.query_string_parameters
        url = _endpoint(self._config.maps_base_url, request.PATH)
        data = await self._request(url, params)

        status = data.get("status")
        if status == STATUS_REQUEST_DENIED:
            msg = data.get("error_message", status)
            raise GoogleApiAuthError(msg)
        if status not in (STATUS_OK, STATUS_ZERO_RESULTS):
            error_message = data.get("error_message", status)
            msg = f"Google Maps API error: {error_message}"
            raise GoogleApiError(msg)
        return DirectionsResponse.from_dict(data)

    async def search(self, request: SearchRequest) -> SearchResponse:
        """Run a Custom Search query and return the decoded response."""
        request = self._with_key(request)
        params = request.query_string_parameters
        url = _endpoint(self._config.search_base_url, request.PATH)
        data = await self._request(url, params)
        if "kind" not in data:
            msg = f"{ERR_INVALID_RESPONSE}: missing kind"
            raise GoogleApiError(msg)
        return SearchResponse.from_dict(data)

    def _with_key(self, request: R) -> R:
        """Attach the configured key unless the request carries a non-blank one."""
        if request.key and request.key.strip():
            return request
        return replace(request, key=self._config.api_key)

    async def _request(self, url: str, params: QueryParameters) -> dict[str, Any]:
        _LOGGER.debug("GET %s %s", url, redact_key(params))
        try:
            async with (
                async_timeout.timeout(self._config.timeout),
                self._session.get(url, params=params) as resp,
            ):
                if resp.status in (401, 403):
                    msg = "Authentication error with Google API"
                    raise GoogleApiAuthError(msg)
                if resp.status != 200:  # noqa: PLR2004 (explicit status check)
                    text = await resp.text()
                    msg = f"Google API HTTP {resp.status}: {text[:300]}"
                    raise GoogleApiError(msg)
                data = await resp.json()
                if not isinstance(data, dict):
                    msg = f"{ERR_INVALID_RESPONSE}: expected a JSON object"
                    raise GoogleApiError(msg)
        except GoogleApiError:
            raise
        except Exception as err:  # pylint: disable=broad-except
            msg = f"Request failed: {err}"
            raise GoogleApiError(msg) from err
        _LOGGER.debug("Google API response: %s", data)
        return data
