"""
Directions request model.

Mirrors the legacy Directions web service
(``https://maps.googleapis.com/maps/api/directions/json``). The request is an
immutable value object; :attr:`DirectionsRequest.query_string_parameters`
validates it and returns a fresh ordered mapping on every access.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from ..const import WAYPOINTS_OPTIMIZE_TOKEN
from ..enums import Language
from ..exceptions import InvalidCombination
from ..query import (
    QueryParameters,
    add_optional,
    as_flag_set,
    base_parameters,
    encode_bool,
    encode_flags,
    encode_list,
    encode_timestamp,
    require,
)
from .const import DIRECTIONS_ENDPOINT, DIRECTIONS_PATH, DIRECTIONS_TRANSIT_TIME_RULE
from .enums import (
    DEFAULT_TRANSIT_MODES,
    AvoidWay,
    TransitMode,
    TransitRoutingPreference,
    TravelMode,
    Units,
)


@dataclass(frozen=True, slots=True)
class DirectionsRequest:
    """
    Parameters of a single Directions call.

    ``origin`` and ``destination`` are required. Transit requests must also
    carry ``arrival_time`` or ``departure_time``. Flag-style fields accept a
    member, a wire token or any iterable of those and are stored as frozensets.
    """

    PATH: ClassVar[str] = DIRECTIONS_PATH

    origin: str | None = None
    destination: str | None = None
    key: str | None = None
    units: Units = Units.METRIC
    avoid: frozenset[AvoidWay] = frozenset()
    travel_mode: TravelMode = TravelMode.DRIVING
    transit_mode: frozenset[TransitMode] = DEFAULT_TRANSIT_MODES
    transit_routing_preference: frozenset[TransitRoutingPreference] = frozenset()
    arrival_time: datetime | None = None
    departure_time: datetime | None = None
    waypoints: tuple[str, ...] = field(default_factory=tuple)
    optimize_waypoints: bool = False
    alternatives: bool = False
    region: str | None = None
    language: Language = Language.ENGLISH

    def __post_init__(self) -> None:
        """Normalize enum and iterable inputs to immutable values."""
        object.__setattr__(self, "units", Units(self.units))
        object.__setattr__(self, "travel_mode", TravelMode(self.travel_mode))
        object.__setattr__(self, "language", Language(self.language))
        object.__setattr__(self, "avoid", as_flag_set(self.avoid, AvoidWay))
        object.__setattr__(
            self, "transit_mode", as_flag_set(self.transit_mode, TransitMode)
        )
        object.__setattr__(
            self,
            "transit_routing_preference",
            as_flag_set(self.transit_routing_preference, TransitRoutingPreference),
        )
        waypoints = self.waypoints or ()
        if isinstance(waypoints, str):
            waypoints = (waypoints,)
        object.__setattr__(self, "waypoints", tuple(waypoints))

    @property
    def base_url(self) -> str:
        """Return the default endpoint for this request."""
        return DIRECTIONS_ENDPOINT

    def validate(self) -> None:
        """
        Check required fields and cross-field rules.

        Raises:
            MissingRequiredField: origin or destination is blank.
            InvalidCombination: transit mode without arrival or departure time.

        """
        require(self.origin, "origin")
        require(self.destination, "destination")
        if (
            self.travel_mode is TravelMode.TRANSIT
            and self.departure_time is None
            and self.arrival_time is None
        ):
            raise InvalidCombination(
                ("travel_mode", "arrival_time", "departure_time"),
                DIRECTIONS_TRANSIT_TIME_RULE,
            )

    @property
    def query_string_parameters(self) -> QueryParameters:
        """Validate and return the ordered query parameters."""
        self.validate()
        transit_modes = encode_flags(self.transit_mode, TransitMode)
        params = base_parameters(self.key)
        params["origin"] = require(self.origin, "origin")
        params["destination"] = require(self.destination, "destination")
        params["units"] = self.units.value
        # The transit-mode set is sent as ``mode`` for every travel mode.
        add_optional(params, "mode", transit_modes)
        params["language"] = self.language.value
        add_optional(params, "region", self.region)
        add_optional(params, "alternatives", encode_bool(self.alternatives))
        add_optional(params, "avoid", encode_flags(self.avoid, AvoidWay))
        add_optional(
            params,
            "waypoints",
            encode_list(
                self.waypoints,
                prefix=WAYPOINTS_OPTIMIZE_TOKEN if self.optimize_waypoints else None,
            ),
        )
        if self.travel_mode is TravelMode.TRANSIT:
            add_optional(params, "transit_mode", transit_modes)
            add_optional(
                params,
                "transit_routing_preference",
                encode_flags(
                    self.transit_routing_preference, TransitRoutingPreference
                ),
            )
            add_optional(params, "arrival_time", encode_timestamp(self.arrival_time))
            add_optional(
                params, "departure_time", encode_timestamp(self.departure_time)
            )
        return params
