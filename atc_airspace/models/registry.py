"""
Registry of named points, runways and secondary airports.

One registry is owned by each airspace. Names are unique: registering a
point again at the same coordinates is a no-op, anything else that reuses
a name or runway id is a collision.
"""

from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Iterator, Mapping
import logging

from .navpoint import NamedPoint
from .runway import REVERSE_SUFFIX, Runway
from .validation import CollisionError, NotRegisteredError

if TYPE_CHECKING:
    from .airport import SecondaryAirport

logger = logging.getLogger(__name__)


class Registry:
    """
    Uniqueness- and existence-enforcing lookup for one airspace.

    The following points are registered automatically by an Airspace:
    - ``@center``: the airspace centre
    """

    def __init__(self):
        self._points: Dict[str, NamedPoint] = {}
        self._runways: Dict[str, Runway] = {}
        self._airports: Dict[str, 'SecondaryAirport'] = {}

    def add_point(self, *points: NamedPoint) -> 'Registry':
        """
        Store named points.

        Raises:
            CollisionError: If a name is already registered at a different location
        """
        for point in points:
            existing = self._points.get(point.name)
            if existing is not None:
                if not existing.same_position(point):
                    raise CollisionError(
                        type(point).__name__, point.name,
                        f"with a different location: {existing.latitude}, {existing.longitude}")
                continue
            self._points[point.name] = point
            logger.debug(f"Registered {type(point).__name__} {point.name}")
        return self

    def get_point(self, name: str) -> NamedPoint:
        """
        Retrieve a named point.

        Raises:
            NotRegisteredError: If no point has this name
        """
        try:
            return self._points[name]
        except KeyError:
            raise NotRegisteredError("NamedPoint", name) from None

    def has_point(self, name: str) -> bool:
        return name in self._points

    def add_runway(self, *runways: Runway) -> 'Registry':
        """
        Store runways by id.

        Raises:
            CollisionError: If a runway id is already registered or repeated; nothing is stored then
        """
        seen = set()
        for runway in runways:
            if runway.id in self._runways or runway.id in seen:
                raise CollisionError("Runway", runway.id)
            seen.add(runway.id)
        for runway in runways:
            self._runways[runway.id] = runway
            logger.debug(f"Registered runway {runway.id} ({runway.name})")
        return self

    def get_runway(self, runway_id: str) -> Runway:
        """
        Retrieve a runway by id.

        An id carrying the reverse suffix resolves to the opposite end of
        the declared runway.

        Raises:
            NotRegisteredError: If the runway is not registered
        """
        runway = self._runways.get(runway_id)
        if runway is not None:
            return runway
        if runway_id.endswith(REVERSE_SUFFIX):
            declared = self._runways.get(runway_id[:-len(REVERSE_SUFFIX)])
            if declared is not None:
                return declared.reverse()
        raise NotRegisteredError("Runway", runway_id)

    def has_runway(self, runway_id: str) -> bool:
        try:
            self.get_runway(runway_id)
        except NotRegisteredError:
            return False
        return True

    def add_airport(self, airport: 'SecondaryAirport') -> 'Registry':
        """
        Store a secondary airport and its runways.

        Raises:
            CollisionError: If the airport code or one of its runway ids is already registered
        """
        if airport.code in self._airports:
            raise CollisionError("SecondaryAirport", airport.code)
        self.add_runway(*airport.runways)
        self._airports[airport.code] = airport
        logger.debug(f"Registered secondary airport {airport.code}")
        return self

    def get_airport(self, code: str) -> 'SecondaryAirport':
        try:
            return self._airports[code]
        except KeyError:
            raise NotRegisteredError("SecondaryAirport", code) from None

    @property
    def points(self) -> Mapping[str, NamedPoint]:
        return MappingProxyType(self._points)

    @property
    def runways(self) -> Mapping[str, Runway]:
        return MappingProxyType(self._runways)

    @property
    def airports(self) -> Mapping[str, 'SecondaryAirport']:
        return MappingProxyType(self._airports)

    def view(self) -> 'RegistryView':
        """Read-only access for entities that resolve references but may not insert."""
        return RegistryView(self)

    def __len__(self) -> int:
        return len(self._points) + len(self._runways)


class RegistryView:
    """Read-only facade over a Registry."""

    def __init__(self, registry: Registry):
        self._registry = registry

    def get_point(self, name: str) -> NamedPoint:
        return self._registry.get_point(name)

    def has_point(self, name: str) -> bool:
        return self._registry.has_point(name)

    def get_runway(self, runway_id: str) -> Runway:
        return self._registry.get_runway(runway_id)

    def has_runway(self, runway_id: str) -> bool:
        return self._registry.has_runway(runway_id)

    @property
    def points(self) -> Mapping[str, NamedPoint]:
        return self._registry.points

    @property
    def runways(self) -> Mapping[str, Runway]:
        return self._registry.runways

    def __iter__(self) -> Iterator[str]:
        return iter(self._registry.points)
