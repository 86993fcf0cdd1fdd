"""
The airspace: root aggregate of the domain graph.

An Airspace owns the registry, the primary and secondary airports and
every route, area and configuration built for it. It is built once, top
to bottom, by the parser.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union
import logging

from .aircraft import Aircraft
from .airport import PrimaryAirport, SecondaryAirport
from .area import Area, Polyline, RadiusBoundary
from .beacon import Beacon
from .navpoint import NamedPoint, Point
from .procedure import Arrival, Departure
from .registry import Registry, RegistryView
from .runway import Runway
from .runway_configuration import RunwayConfiguration
from .validation import CollisionError, NotRegisteredError
from .wake import WakeSeparation

logger = logging.getLogger(__name__)

CENTER_POINT_NAME = "@center"


@dataclass(frozen=True)
class WithinRadius:
    radius: float  # Nautical miles from the centre
    speed: float  # KIAS


@dataclass(frozen=True)
class BelowAltitude:
    altitude: float  # Feet
    speed: float  # KIAS


@dataclass(frozen=True)
class OnLocalizer:
    distance: float  # Nautical miles from the threshold
    speed: float  # KIAS


@dataclass(frozen=True)
class SpeedRestriction:
    within_radius: WithinRadius = WithinRadius(0, 0)
    below_altitude: BelowAltitude = BelowAltitude(0, 0)
    on_localizer: OnLocalizer = OnLocalizer(0, 0)


@dataclass(frozen=True)
class FrequencyHandoff:
    """Controller that departures on a bearing are handed to."""

    bearing: float
    callsign: str
    pronunciation: str
    frequency: Optional[float] = None


Boundary = Union[Polyline, RadiusBoundary]


@dataclass
class AirspaceOptions:
    """
    Airspace-wide settings.

    Altitudes are feet. ``ceiling_altitude`` defaults to the descent
    altitude + 1000 and ``departure_altitude`` to the ceiling + 2000.
    """

    center: Point
    elevation: float
    floor_altitude: float  # Minimum selectable altitude
    descent_altitude: float  # Minimum initial altitude for arrivals
    departure_diversion_altitude: float  # Departures above this may leave without diverting
    separation_distance: float  # Nautical miles
    us_pronunciation: bool
    approach_callsign: str = "Approach"
    departure_callsign: str = "Departure"
    beacons: List[Beacon] = field(default_factory=list)
    boundary: Boundary = RadiusBoundary(30)
    transitional_altitude: float = 6000
    ceiling_altitude: Optional[float] = None
    departure_altitude: Optional[float] = None
    departure_frequencies: List[FrequencyHandoff] = field(default_factory=list)
    speed_restriction: SpeedRestriction = SpeedRestriction()
    automatic_approach: bool = True
    strict_entrypoints: bool = True
    callsign_letters_frequency: float = 2
    metric: bool = False
    altimeter_in_hg: bool = False
    magnetic_variance: float = 0
    zoom: float = 7
    wake_separation: Optional[WakeSeparation] = None

    def __post_init__(self):
        if self.ceiling_altitude is None:
            self.ceiling_altitude = self.descent_altitude + 1000
        if self.departure_altitude is None:
            self.departure_altitude = self.ceiling_altitude + 2000
        if self.wake_separation is None:
            self.wake_separation = WakeSeparation.default()


class Airspace:
    """
    Root of the domain graph.

    Beacons and the ``@center`` point are registered on construction;
    airports register their runways when they are added.
    """

    def __init__(self, options: AirspaceOptions):
        self.options = options
        self._registry = Registry()
        self._beacons: List[Beacon] = []
        self._primary_airport: Optional[PrimaryAirport] = None
        self.secondary_airports: List[SecondaryAirport] = []
        self.areas: List[Area] = []
        self.configurations: List[RunwayConfiguration] = []
        self.departures: List[Departure] = []
        self.arrivals: List[Arrival] = []
        self.aircraft: List[Aircraft] = []
        self.lines: List[Polyline] = []

        for beacon in options.beacons:
            self.add_beacon(beacon)
        self._registry.add_point(NamedPoint.from_point(options.center, CENTER_POINT_NAME))

    @property
    def center(self) -> Point:
        return self.options.center

    @property
    def beacons(self) -> Tuple[Beacon, ...]:
        return tuple(self._beacons)

    @property
    def registry(self) -> RegistryView:
        """Read-only registry access."""
        return self._registry.view()

    @property
    def wake_separation(self) -> WakeSeparation:
        return self.options.wake_separation

    def add_beacon(self, beacon: Beacon) -> 'Airspace':
        """Register and display a beacon; a repeat at the same position is ignored."""
        self._registry.add_point(beacon)
        if all(existing.name != beacon.name for existing in self._beacons):
            self._beacons.append(beacon)
        return self

    def add_point(self, point: NamedPoint) -> 'Airspace':
        """Register a named point that is not a displayed beacon (e.g. a SID fix)."""
        self._registry.add_point(point)
        return self

    def find_beacon(self, name: str) -> Beacon:
        """
        Find a declared beacon by name, ignoring case.

        Raises:
            NotRegisteredError: If no beacon has this name
        """
        for beacon in self._beacons:
            if beacon.name.upper() == name.upper():
                return beacon
        raise NotRegisteredError("Beacon", name)

    def set_primary_airport(self, airport: PrimaryAirport) -> 'Airspace':
        """
        Set the primary airport and register its runways.

        Raises:
            CollisionError: If a primary airport is already set or a runway id is reused
        """
        if self._primary_airport is not None:
            raise CollisionError("PrimaryAirport", airport.code,
                                 f"(primary airport is already {self._primary_airport.code})")
        self._registry.add_runway(*airport.runways)
        self._primary_airport = airport
        return self

    @property
    def primary_airport(self) -> PrimaryAirport:
        if self._primary_airport is None:
            raise NotRegisteredError("PrimaryAirport", "airport1")
        return self._primary_airport

    def add_secondary_airport(self, airport: SecondaryAirport) -> 'Airspace':
        """
        Add a secondary airport and register its runways.

        Raises:
            NotRegisteredError: If its inbound beacon is not an airspace beacon
            CollisionError: If its code or a runway id is already registered
        """
        if airport.inbound_beacon is None or airport.inbound_beacon not in self._beacons:
            name = airport.inbound_beacon.name if airport.inbound_beacon else "(none)"
            raise NotRegisteredError("Beacon", name)
        self._registry.add_airport(airport)
        self.secondary_airports.append(airport)
        return self

    def get_runway(self, runway_id: str) -> Runway:
        return self._registry.get_runway(runway_id)

    def add_area(self, area: Area) -> 'Airspace':
        self.areas.append(area)
        return self

    def add_configuration(self, configuration: RunwayConfiguration) -> 'Airspace':
        self.configurations.append(configuration)
        return self

    def add_departure(self, departure: Departure) -> 'Airspace':
        self.departures.append(departure)
        return self

    def add_arrival(self, arrival: Arrival) -> 'Airspace':
        self.arrivals.append(arrival)
        return self

    def add_aircraft(self, aircraft: Aircraft) -> 'Airspace':
        self.aircraft.append(aircraft)
        return self

    def draw(self, line: Polyline) -> 'Airspace':
        self.lines.append(line)
        return self

    def summary(self) -> Dict[str, int]:
        """Entity counts, used for logging."""
        return {
            'beacons': len(self._beacons),
            'runways': len(self._registry.runways),
            'secondary_airports': len(self.secondary_airports),
            'areas': len(self.areas),
            'configurations': len(self.configurations),
            'departures': len(self.departures),
            'arrivals': len(self.arrivals),
            'aircraft': len(self.aircraft),
            'lines': len(self.lines),
        }

    def __repr__(self) -> str:
        code = self._primary_airport.code if self._primary_airport else None
        return f"Airspace(primary={code!r}, {self.summary()})"
