from __future__ import annotations

from datetime import UTC, datetime

from google_webapi.maps import DirectionsResponse, TravelMode
from google_webapi.search import SearchResponse

DIRECTIONS_PAYLOAD = {
    "status": "OK",
    "geocoded_waypoints": [
        {"geocoder_status": "OK", "place_id": "abc", "types": ["locality"]},
    ],
    "routes": [
        {
            "summary": "E20",
            "copyrights": "Map data",
            "warnings": [],
            "waypoint_order": [1, 0],
            "overview_polyline": {"points": "xyz"},
            "legs": [
                {
                    "start_address": "A",
                    "end_address": "B",
                    "distance": {"text": "300 km", "value": 300000},
                    "duration": {"text": "3 hours", "value": 10800},
                    "departure_time": {
                        "text": "1:00am",
                        "time_zone": "Europe/Copenhagen",
                        "value": 1577836800,
                    },
                    "steps": [
                        {
                            "html_instructions": "Head <b>west</b>",
                            "travel_mode": "DRIVING",
                            "distance": {"text": "1 km", "value": 1000},
                            "duration": {"text": "1 min", "value": 60},
                            "start_location": {"lat": 55.6, "lng": 12.5},
                            "end_location": {"lat": 55.7, "lng": 12.4},
                        }
                    ],
                }
            ],
        }
    ],
}


def test_directions_response_from_dict() -> None:
    response = DirectionsResponse.from_dict(DIRECTIONS_PAYLOAD)

    assert response.status == "OK"
    assert response.geocoded_waypoints[0].place_id == "abc"
    route = response.routes[0]
    assert route.summary == "E20"
    assert route.waypoint_order == (1, 0)
    assert route.overview_polyline == "xyz"
    leg = route.legs[0]
    assert leg.distance is not None
    assert leg.distance.value == 300000
    assert leg.duration_in_traffic is None
    assert leg.departure_time is not None
    assert leg.departure_time.value == datetime(2020, 1, 1, tzinfo=UTC)
    step = leg.steps[0]
    assert step.travel_mode is TravelMode.DRIVING
    assert step.start_location is not None
    assert step.start_location.lat == 55.6


def test_directions_response_absent_fields() -> None:
    response = DirectionsResponse.from_dict({"status": "ZERO_RESULTS"})

    assert response.routes == ()
    assert response.geocoded_waypoints == ()
    assert response.available_travel_modes == ()
    assert response.error_message is None


SEARCH_PAYLOAD = {
    "kind": "customsearch#search",
    "url": {"type": "application/json", "template": "https://example/{q}"},
    "queries": {
        "request": [{"title": "Google Custom Search - pizza", "totalResults": "42",
                     "searchTerms": "pizza", "count": 10, "startIndex": 1}],
        "nextPage": [{"title": "Google Custom Search - pizza", "totalResults": "42",
                      "searchTerms": "pizza", "count": 10, "startIndex": 11}],
    },
    "context": {
        "title": "My engine",
        "facets": [
            [{"label": "news", "anchor": "News", "label_with_op": "more:news"}],
            [
                {"label": "blogs", "anchor": "Blogs", "label_with_op": "more:blogs"},
                {"label": "wiki", "anchor": "Wiki", "label_with_op": "more:wiki"},
            ],
        ],
    },
    "searchInformation": {
        "searchTime": 0.2,
        "formattedSearchTime": "0.20",
        "totalResults": "42",
        "formattedTotalResults": "42",
    },
    "items": [
        {
            "kind": "customsearch#result",
            "title": "Pizza",
            "htmlTitle": "<b>Pizza</b>",
            "link": "https://pizza.example",
            "displayLink": "pizza.example",
            "snippet": "Hot pizza",
            "htmlSnippet": "Hot <b>pizza</b>",
            "labels": [{"name": "news"}],
        }
    ],
}


def test_search_response_from_dict() -> None:
    response = SearchResponse.from_dict(SEARCH_PAYLOAD)

    assert response.kind == "customsearch#search"
    assert response.url_template == "https://example/{q}"
    assert response.queries["request"][0].total_results == 42
    assert response.next_start_index == 11
    assert response.context is not None
    assert response.context.title == "My engine"
    assert [len(group) for group in response.context.facets] == [1, 2]
    assert response.context.facets[1][0].label_with_op == "more:blogs"
    assert response.search_information is not None
    assert response.search_information.total_results == 42
    item = response.items[0]
    assert item.display_link == "pizza.example"
    assert item.labels == ("news",)
    assert item.image is None


def test_search_response_absent_fields() -> None:
    response = SearchResponse.from_dict({"kind": "customsearch#search"})

    assert response.items == ()
    assert response.context is None
    assert response.spelling is None
    assert response.next_start_index is None


def test_context_without_facets() -> None:
    response = SearchResponse.from_dict(
        {"kind": "customsearch#search", "context": {"title": "Engine"}}
    )
    assert response.context is not None
    assert response.context.facets == ()
