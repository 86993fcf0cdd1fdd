from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Optional, Union

from .beacon import Beacon
from .navpoint import Point
from .runway import Runway

MAX_DISPLAY_NAME = 7  # Characters shown in game for route names


class TerminationKind(Enum):
    VECTOR = "vector"
    HOLD = "hold"
    ILS_INTERCEPT = "ils_intercept"


@dataclass(frozen=True)
class VectorTermination:
    """End the arrival and expect vectors, optionally flying a heading."""

    heading: Optional[float] = None
    kind: ClassVar[TerminationKind] = TerminationKind.VECTOR


@dataclass(frozen=True)
class HoldTermination:
    """Enter the hold at the last point of the arrival."""

    kind: ClassVar[TerminationKind] = TerminationKind.HOLD


@dataclass(frozen=True)
class IlsInterceptTermination:
    """Intercept the ILS at a distance from the threshold."""

    distance: float  # Nautical miles from the (displaced) threshold
    altitude: Optional[float] = None  # Maximum intercept altitude, feet
    speed: Optional[float] = None  # Maximum intercept speed, KIAS
    kind: ClassVar[TerminationKind] = TerminationKind.ILS_INTERCEPT

    def intercept_point(self, runway: Runway) -> Point:
        """Point on the localizer where the intercept happens."""
        return runway.threshold().destination(runway.localizer + 180, self.distance)


Termination = Union[VectorTermination, HoldTermination, IlsInterceptTermination]


def describe_termination(termination: Termination) -> str:
    """Short display text for a termination."""
    if isinstance(termination, VectorTermination):
        if termination.heading is None:
            return "vectors"
        return f"heading {termination.heading:03.0f}"
    if isinstance(termination, HoldTermination):
        return "hold"
    if isinstance(termination, IlsInterceptTermination):
        return f"ILS at {termination.distance:g}NM"
    raise TypeError(f"Unknown termination {termination!r}")


@dataclass
class Departure:
    """
    A departure route (SID) flown from one runway end.

    Attributes:
        name: Identifier, e.g. 'UMLAT1F'. Only seven characters are displayed
        pronunciation: Phonetic name, e.g. 'Umlat one foxtrot'
        runway: The departure runway end
        route: Ordered points of the route
        initial_climb: Overrides the airport initial climb, feet
    """

    name: str
    pronunciation: Optional[str]
    runway: Runway
    route: List[Point] = field(default_factory=list)
    initial_climb: Optional[float] = None

    def __str__(self) -> str:
        return f"{self.name} (RWY {self.runway.name}, {len(self.route)} points)"


@dataclass
class Arrival:
    """
    An arrival route (STAR, transition or approach) ending at a runway.

    Attributes:
        name: Identifier, e.g. 'OTMET1H'. Only seven characters are displayed
        pronunciation: Phonetic name
        runways: Runways that must be active for landing for this arrival to be offered
        beacon: Beacon at the start of the arrival
        route: Ordered points, optionally with altitude and speed constraints
        termination: How the arrival ends
        inbound_bearing: Used to choose between several arrivals on the same beacon
    """

    name: str
    pronunciation: Optional[str]
    runways: List[Runway]
    beacon: Beacon
    route: List[Point] = field(default_factory=list)
    termination: Termination = field(default_factory=VectorTermination)
    inbound_bearing: Optional[float] = None

    def __str__(self) -> str:
        runways = "/".join(r.name for r in self.runways)
        return f"{self.name} ({self.beacon.name} -> RWY {runways}, {describe_termination(self.termination)})"
