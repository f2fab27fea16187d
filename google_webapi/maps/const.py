"""Constants for the Google Maps web services."""

from ..const import MAPS_BASE_URL, OUTPUT_JSON

# Paths relative to MAPS_BASE_URL
DIRECTIONS_PATH = f"directions/{OUTPUT_JSON}"

DIRECTIONS_ENDPOINT = f"{MAPS_BASE_URL}{DIRECTIONS_PATH}"

DIRECTIONS_TRANSIT_TIME_RULE = (
    "departure_time or arrival_time is required when travel_mode is transit"
)
