"""Constants for the Google web API models."""

from __future__ import annotations

# Config keys
CONF_API_KEY = "api_key"
CONF_TIMEOUT = "timeout"
CONF_MAPS_BASE_URL = "maps_base_url"
CONF_SEARCH_BASE_URL = "search_base_url"

# API endpoints
MAPS_BASE_URL = "https://maps.googleapis.com/maps/api/"
SEARCH_BASE_URL = "https://www.googleapis.com/customsearch/v1"

# Output format appended to path (maps) or sent as ``alt`` (search)
OUTPUT_JSON = "json"

# Timeouts
HTTP_TIMEOUT = 15

# Wire encoding
FLAG_DELIMITER = "|"
WAYPOINTS_OPTIMIZE_TOKEN = "optimize:true"  # noqa: S105
TRUE_TOKEN = "true"  # noqa: S105

# API status values treated as success
STATUS_OK = "OK"
STATUS_ZERO_RESULTS = "ZERO_RESULTS"
STATUS_REQUEST_DENIED = "REQUEST_DENIED"

# Error messages
ERR_API_KEY_MISSING = "Google API key missing"
ERR_INVALID_RESPONSE = "Google API invalid response"
