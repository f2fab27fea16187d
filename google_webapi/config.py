"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import voluptuous as vol

from .const import (
    CONF_API_KEY,
    CONF_MAPS_BASE_URL,
    CONF_SEARCH_BASE_URL,
    CONF_TIMEOUT,
    ERR_API_KEY_MISSING,
    HTTP_TIMEOUT,
    MAPS_BASE_URL,
    SEARCH_BASE_URL,
)

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_API_KEY): vol.All(
            str, vol.Strip, vol.Length(min=1, msg=ERR_API_KEY_MISSING)
        ),
        vol.Optional(CONF_TIMEOUT, default=HTTP_TIMEOUT): vol.All(
            vol.Coerce(float), vol.Range(min=0, min_included=False)
        ),
        vol.Optional(CONF_MAPS_BASE_URL, default=MAPS_BASE_URL): vol.Url(),
        vol.Optional(CONF_SEARCH_BASE_URL, default=SEARCH_BASE_URL): vol.Url(),
    }
)


@dataclass(slots=True)
class ClientConfig:
    """Static settings for :class:`~google_webapi.api.GoogleApiClient`."""

    api_key: str
    timeout: float = HTTP_TIMEOUT
    maps_base_url: str = MAPS_BASE_URL
    search_base_url: str = SEARCH_BASE_URL

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClientConfig:
        """
        Validate a plain mapping and build the config.

        Raises:
            voluptuous.Invalid: On a missing key or malformed value.

        """
        conf = CONFIG_SCHEMA(dict(data))
        return cls(
            api_key=conf[CONF_API_KEY],
            timeout=conf[CONF_TIMEOUT],
            maps_base_url=conf[CONF_MAPS_BASE_URL],
            search_base_url=conf[CONF_SEARCH_BASE_URL],
        )
