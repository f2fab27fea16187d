"""
Directions response records.

Plain slotted dataclasses mirroring the JSON returned by the Directions web
service. ``from_dict`` only maps fields; absent values become ``None`` or an
empty tuple and nothing is validated.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from .enums import TravelMode


@dataclass(slots=True)
class LatLng:
    """A latitude / longitude pair."""

    lat: float
    lng: float

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> LatLng | None:
        if not data:
            return None
        return cls(lat=data["lat"], lng=data["lng"])


@dataclass(slots=True)
class TextValue:
    """Localized text plus numeric value (meters or seconds)."""

    text: str | None
    value: int | None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> TextValue | None:
        if not data:
            return None
        return cls(text=data.get("text"), value=data.get("value"))


@dataclass(slots=True)
class TimeValue:
    """Transit arrival or departure time."""

    text: str | None
    time_zone: str | None
    value: datetime | None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> TimeValue | None:
        if not data:
            return None
        raw = data.get("value")
        return cls(
            text=data.get("text"),
            time_zone=data.get("time_zone"),
            value=datetime.fromtimestamp(raw, tz=UTC) if raw is not None else None,
        )


@dataclass(slots=True)
class Step:
    """A single instruction within a leg."""

    html_instructions: str | None
    travel_mode: TravelMode | None
    distance: TextValue | None
    duration: TextValue | None
    start_location: LatLng | None
    end_location: LatLng | None
    maneuver: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Step:
        mode = data.get("travel_mode")
        return cls(
            html_instructions=data.get("html_instructions"),
            # Responses use upper case tokens (``DRIVING``)
            travel_mode=TravelMode(mode.lower()) if mode else None,
            distance=TextValue.from_dict(data.get("distance")),
            duration=TextValue.from_dict(data.get("duration")),
            start_location=LatLng.from_dict(data.get("start_location")),
            end_location=LatLng.from_dict(data.get("end_location")),
            maneuver=data.get("maneuver"),
        )


@dataclass(slots=True)
class Leg:
    """Route segment between two consecutive locations."""

    start_address: str | None
    end_address: str | None
    start_location: LatLng | None
    end_location: LatLng | None
    distance: TextValue | None
    duration: TextValue | None
    duration_in_traffic: TextValue | None
    arrival_time: TimeValue | None
    departure_time: TimeValue | None
    steps: tuple[Step, ...]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Leg:
        return cls(
            start_address=data.get("start_address"),
            end_address=data.get("end_address"),
            start_location=LatLng.from_dict(data.get("start_location")),
            end_location=LatLng.from_dict(data.get("end_location")),
            distance=TextValue.from_dict(data.get("distance")),
            duration=TextValue.from_dict(data.get("duration")),
            duration_in_traffic=TextValue.from_dict(data.get("duration_in_traffic")),
            arrival_time=TimeValue.from_dict(data.get("arrival_time")),
            departure_time=TimeValue.from_dict(data.get("departure_time")),
            steps=tuple(Step.from_dict(s) for s in data.get("steps") or ()),
        )


@dataclass(slots=True)
class Route:
    """One route returned for the request."""

    summary: str | None
    legs: tuple[Leg, ...]
    warnings: tuple[str, ...]
    waypoint_order: tuple[int, ...]
    copyrights: str | None
    overview_polyline: str | None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Route:
        return cls(
            summary=data.get("summary"),
            legs=tuple(Leg.from_dict(leg) for leg in data.get("legs") or ()),
            warnings=tuple(data.get("warnings") or ()),
            waypoint_order=tuple(data.get("waypoint_order") or ()),
            copyrights=data.get("copyrights"),
            overview_polyline=(data.get("overview_polyline") or {}).get("points"),
        )


@dataclass(slots=True)
class GeocodedWaypoint:
    """Geocoding outcome for origin, destination and each waypoint."""

    geocoder_status: str | None
    place_id: str | None
    types: tuple[str, ...]
    partial_match: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GeocodedWaypoint:
        return cls(
            geocoder_status=data.get("geocoder_status"),
            place_id=data.get("place_id"),
            types=tuple(data.get("types") or ()),
            partial_match=bool(data.get("partial_match", False)),
        )


@dataclass(slots=True)
class DirectionsResponse:
    """Top level Directions response."""

    status: str | None
    routes: tuple[Route, ...]
    geocoded_waypoints: tuple[GeocodedWaypoint, ...]
    available_travel_modes: tuple[TravelMode, ...]
    error_message: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DirectionsResponse:
        """Build the record tree from decoded JSON."""
        return cls(
            status=data.get("status"),
            routes=tuple(Route.from_dict(r) for r in data.get("routes") or ()),
            geocoded_waypoints=tuple(
                GeocodedWaypoint.from_dict(w)
                for w in data.get("geocoded_waypoints") or ()
            ),
            available_travel_modes=tuple(
                TravelMode(m.lower()) for m in data.get("available_travel_modes") or ()
            ),
            error_message=data.get("error_message"),
        )
