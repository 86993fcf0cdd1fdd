from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional, Tuple, Union

from .beacon import Beacon
from .navpoint import SidPoint
from .runway import Runway
from .validation import FormatSyntaxError


class CardinalDirection(Enum):
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"


Direction = Union[CardinalDirection, float]


@dataclass(frozen=True)
class Airline:
    """An airline operating at an airport."""

    name: str  # Callsign prefix, e.g. 'BAW'
    amount: float  # Relative frequency
    types: Tuple[str, ...]  # Aircraft type designators
    directions: FrozenSet[Direction] = frozenset()  # Empty means any direction
    pronunciation: Optional[str] = None


@dataclass(frozen=True)
class EntryPoint:
    """Where arrivals enter the airspace."""

    bearing: float  # From the airspace centre, degrees
    beacon: Optional[str] = None
    altitude: Optional[float] = None


@dataclass
class Airport:
    """
    Common data of the primary and secondary airports.

    Attributes:
        code: Identifier shown in game, typically the ICAO code
        name: Official airport name
        pronunciation: Spoken name used by arriving traffic
        initial_climb: Default initial climb altitude in feet for departures
    """

    code: str
    name: str
    pronunciation: Optional[str]
    initial_climb: float
    runways: List[Runway] = field(default_factory=list)
    sids: List[SidPoint] = field(default_factory=list)
    airlines: List[Airline] = field(default_factory=list)
    entry_points: List[EntryPoint] = field(default_factory=list)

    def add_runways(self, *runways: Runway) -> 'Airport':
        """
        Add declared runway ends.

        Raises:
            FormatSyntaxError: If a runway is a derived reverse end
        """
        for runway in runways:
            if runway.is_reverse():
                raise FormatSyntaxError(f"Reverse runway {runway.id} cannot be added to airport {self.code}.")
            self.runways.append(runway)
        return self

    def add_sids(self, *sids: SidPoint) -> 'Airport':
        self.sids.extend(sids)
        return self

    def add_airlines(self, *airlines: Airline) -> 'Airport':
        self.airlines.extend(airlines)
        return self

    def add_entry_points(self, *entry_points: EntryPoint) -> 'Airport':
        self.entry_points.extend(entry_points)
        return self

    def get_runway(self, runway_id: str) -> Optional[Runway]:
        for runway in self.runways:
            if runway.id == runway_id:
                return runway
        return None

    def __str__(self) -> str:
        return f"{self.code} {self.name} ({len(self.runways)} runways)"


@dataclass
class PrimaryAirport(Airport):
    """The airport the airspace is built around."""


@dataclass
class SecondaryAirport(Airport):
    """
    An additional airport inside the airspace.

    Attributes:
        flow: Approximate flights per hour per active runway
        inbound_beacon: Default initial beacon for arrivals
    """

    flow: float = 0
    inbound_beacon: Optional[Beacon] = None
