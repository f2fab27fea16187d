"""Enumerations for Maps requests. Member values are the wire tokens."""

from __future__ import annotations

from enum import StrEnum


class Units(StrEnum):
    """Unit system for text in distance fields."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class TravelMode(StrEnum):
    """Mode of transport used when calculating directions."""

    DRIVING = "driving"
    WALKING = "walking"
    BICYCLING = "bicycling"
    TRANSIT = "transit"


class TransitMode(StrEnum):
    """Preferred transit vehicles; combinable."""

    BUS = "bus"
    TRAIN = "train"
    SUBWAY = "subway"
    TRAM = "tram"
    RAIL = "rail"


class AvoidWay(StrEnum):
    """Route features to avoid; combinable."""

    TOLLS = "tolls"
    HIGHWAYS = "highways"
    FERRIES = "ferries"
    INDOOR = "indoor"


class TransitRoutingPreference(StrEnum):
    """Biases for transit routes; combinable."""

    LESS_WALKING = "less_walking"
    FEWER_TRANSFERS = "fewer_transfers"


DEFAULT_TRANSIT_MODES: frozenset[TransitMode] = frozenset(
    {TransitMode.BUS, TransitMode.TRAIN, TransitMode.SUBWAY, TransitMode.TRAM}
)
