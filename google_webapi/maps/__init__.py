"""Google Maps request and response models."""

from .directions import DirectionsRequest
from .enums import (
    DEFAULT_TRANSIT_MODES,
    AvoidWay,
    TransitMode,
    TransitRoutingPreference,
    TravelMode,
    Units,
)
from .response import DirectionsResponse, Leg, Route, Step

__all__ = [
    "DEFAULT_TRANSIT_MODES",
    "AvoidWay",
    "DirectionsRequest",
    "DirectionsResponse",
    "Leg",
    "Route",
    "Step",
    "TransitMode",
    "TransitRoutingPreference",
    "TravelMode",
    "Units",
]
