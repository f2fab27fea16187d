from __future__ import annotations

import dataclasses
from datetime import UTC, datetime

import pytest

from google_webapi.enums import Language
from google_webapi.exceptions import InvalidCombination, MissingRequiredField
from google_webapi.maps import (
    AvoidWay,
    DirectionsRequest,
    TransitMode,
    TransitRoutingPreference,
    TravelMode,
    Units,
)

DEPARTURE = datetime(2020, 1, 1, tzinfo=UTC)
DEPARTURE_EPOCH = "1577836800"


def test_defaults_emit_expected_mapping() -> None:
    params = DirectionsRequest(origin="A", destination="B").query_string_parameters

    assert params == {
        "origin": "A",
        "destination": "B",
        "units": "metric",
        "mode": "bus|train|subway|tram",
        "language": "en",
    }
    assert list(params) == ["origin", "destination", "units", "mode", "language"]
    for absent in ("region", "alternatives", "avoid", "waypoints", "transit_mode"):
        assert absent not in params


def test_key_is_merged_first() -> None:
    request = DirectionsRequest(origin="A", destination="B", key="secret")
    assert next(iter(request.query_string_parameters.items())) == ("key", "secret")


@pytest.mark.parametrize(
    ("origin", "destination", "missing"),
    [
        (None, "B", "origin"),
        ("", "B", "origin"),
        ("  ", "B", "origin"),
        ("A", None, "destination"),
        ("A", " ", "destination"),
    ],
)
def test_missing_required_field(
    origin: str | None, destination: str | None, missing: str
) -> None:
    request = DirectionsRequest(origin=origin, destination=destination)

    with pytest.raises(MissingRequiredField) as exc_info:
        _ = request.query_string_parameters

    assert exc_info.value.field == missing


def test_transit_without_times_is_invalid() -> None:
    request = DirectionsRequest(
        origin="A", destination="B", travel_mode=TravelMode.TRANSIT
    )

    with pytest.raises(InvalidCombination) as exc_info:
        _ = request.query_string_parameters

    assert "arrival_time" in exc_info.value.fields
    assert "departure_time" in exc_info.value.fields


def test_transit_with_departure_time() -> None:
    request = DirectionsRequest(
        origin="A",
        destination="B",
        travel_mode=TravelMode.TRANSIT,
        departure_time=DEPARTURE,
    )

    params = request.query_string_parameters

    assert params["departure_time"] == DEPARTURE_EPOCH
    assert params["transit_mode"] == "bus|train|subway|tram"
    assert "arrival_time" not in params
    assert "transit_routing_preference" not in params
    assert list(params)[-2:] == ["transit_mode", "departure_time"]


def test_transit_with_arrival_time_and_preferences() -> None:
    request = DirectionsRequest(
        origin="A",
        destination="B",
        travel_mode=TravelMode.TRANSIT,
        arrival_time=DEPARTURE,
        transit_mode={TransitMode.RAIL, TransitMode.BUS},
        transit_routing_preference=TransitRoutingPreference.LESS_WALKING,
    )

    params = request.query_string_parameters

    assert params["mode"] == "bus|rail"
    assert params["transit_mode"] == "bus|rail"
    assert params["transit_routing_preference"] == "less_walking"
    assert params["arrival_time"] == DEPARTURE_EPOCH


def test_times_ignored_outside_transit() -> None:
    request = DirectionsRequest(origin="A", destination="B", departure_time=DEPARTURE)
    params = request.query_string_parameters
    assert "departure_time" not in params
    assert "transit_mode" not in params


def test_waypoints_optimized() -> None:
    request = DirectionsRequest(
        origin="A", destination="B", waypoints=["X", "Y"], optimize_waypoints=True
    )
    assert request.query_string_parameters["waypoints"] == "optimize:true|X|Y"


def test_waypoints_plain() -> None:
    request = DirectionsRequest(origin="A", destination="B", waypoints=("X", "Y"))
    assert request.query_string_parameters["waypoints"] == "X|Y"


def test_optimize_without_waypoints_emits_nothing() -> None:
    request = DirectionsRequest(origin="A", destination="B", optimize_waypoints=True)
    assert "waypoints" not in request.query_string_parameters


def test_alternatives_toggle() -> None:
    off = DirectionsRequest(origin="A", destination="B", alternatives=False)
    on = DirectionsRequest(origin="A", destination="B", alternatives=True)

    assert "alternatives" not in off.query_string_parameters
    assert on.query_string_parameters["alternatives"] == "true"


def test_optional_fields_and_enums() -> None:
    request = DirectionsRequest(
        origin="A",
        destination="B",
        units=Units.IMPERIAL,
        avoid={AvoidWay.HIGHWAYS, AvoidWay.TOLLS},
        region="dk",
        language=Language.DANISH,
    )

    params = request.query_string_parameters

    assert params["units"] == "imperial"
    assert params["avoid"] == "tolls|highways"
    assert params["region"] == "dk"
    assert params["language"] == "da"


def test_tokens_are_coerced_to_enums() -> None:
    request = DirectionsRequest(
        origin="A", destination="B", units="imperial", avoid="ferries"
    )
    assert request.units is Units.IMPERIAL
    assert request.avoid == frozenset({AvoidWay.FERRIES})


def test_encoding_is_idempotent_and_does_not_mutate() -> None:
    request = DirectionsRequest(
        origin="A",
        destination="B",
        waypoints=["X"],
        travel_mode=TravelMode.TRANSIT,
        departure_time=DEPARTURE,
    )
    before = dataclasses.asdict(request)

    first = request.query_string_parameters
    second = request.query_string_parameters

    assert list(first.items()) == list(second.items())
    assert first is not second
    assert dataclasses.asdict(request) == before


def test_request_is_immutable() -> None:
    request = DirectionsRequest(origin="A", destination="B")
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.origin = "C"  # type: ignore[misc]


def test_base_url() -> None:
    request = DirectionsRequest(origin="A", destination="B")
    assert request.base_url == "https://maps.googleapis.com/maps/api/directions/json"
