"""
Shapes drawn on the radar screen: background lines, the airspace
boundary and restricted altitude areas.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

from .navpoint import Point
from .validation import FormatRangeError, FormatSyntaxError

if TYPE_CHECKING:
    from .airport import Airport


class LineColor(Enum):
    AIRSPACE = "airspace"
    COAST = "coast"
    RUNWAY = "runway"


@dataclass(frozen=True)
class RGB:
    """An explicit line colour; every channel is in [0, 255]."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel, value in (('Red', self.r), ('Green', self.g), ('Blue', self.b)):
            if not 0 <= value <= 255:
                raise FormatRangeError(f"{channel} component must be in the range [0, 255], got {value}")

    @classmethod
    def from_hex(cls, value: int) -> 'RGB':
        """Create a colour from a 3-byte integer such as 0xFF8800."""
        if not 0 <= value <= 0xFFFFFF:
            raise FormatRangeError(f"Hex colour must be a 3-byte unsigned integer, got {value}")
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


Color = Union[LineColor, RGB]


@dataclass
class Polyline:
    """An open sequence of points drawn in one colour."""

    vertices: List[Point] = field(default_factory=list)
    color: Color = LineColor.AIRSPACE

    def __len__(self) -> int:
        return len(self.vertices)


@dataclass(frozen=True)
class RadiusBoundary:
    """Circular airspace boundary around the airspace centre."""

    radius: float  # Nautical miles


def circle_vertices(center: Point, radius: float, segments: int = 360) -> List[Point]:
    """Approximate a circle of ``radius`` NM with ``segments`` points, clockwise from north."""
    return [center.destination(360 * i / segments, radius) for i in range(segments)]


@dataclass
class PolygonArea:
    """
    A closed altitude area given by its vertices.

    Attributes:
        altitude: Minimum altitude inside the area, feet
        vertices: Closed sequence of corners
        label: Where the altitude label is drawn (defaults to the vertex mean)
        name: Optional display name
        invisible: Edge suppression value handed to the renderer as-is
    """

    altitude: float
    vertices: List[Point]
    label: Optional[Point] = None
    name: Optional[str] = None
    invisible: Optional[int] = None

    def __post_init__(self):
        if len(self.vertices) < 3:
            raise FormatSyntaxError(f"Polygon area needs at least 3 points, got {len(self.vertices)}")
        if self.label is None:
            self.label = Point(
                sum(v.latitude for v in self.vertices) / len(self.vertices),
                sum(v.longitude for v in self.vertices) / len(self.vertices),
            )

    @classmethod
    def for_airport(cls, airport: 'Airport', altitude: float, vertices: List[Point],
                    label: Optional[Point] = None, invisible: Optional[int] = None) -> 'PolygonArea':
        """Create an area named after an airport's code."""
        return cls(altitude, vertices, label, airport.code, invisible)

    def outline(self) -> Polyline:
        """Closed outline of the area."""
        return Polyline(self.vertices + self.vertices[:1])


@dataclass
class CircleArea:
    """
    A circular altitude area.

    Attributes:
        altitude: Minimum altitude inside the area, feet
        center: Centre of the circle
        radius: Radius in nautical miles
        label: Where the altitude label is drawn (defaults to the centre)
        name: Optional display name
        visible_arc: Optional (start, end) bearings of the drawn part of the circle
    """

    altitude: float
    center: Point
    radius: float
    label: Optional[Point] = None
    name: Optional[str] = None
    visible_arc: Optional[Tuple[float, float]] = None

    def __post_init__(self):
        if self.radius <= 0:
            raise FormatRangeError(f"Circle area radius must be positive, got {self.radius}")
        if self.label is None:
            self.label = self.center

    @classmethod
    def for_airport(cls, airport: 'Airport', altitude: float, center: Point, radius: float,
                    label: Optional[Point] = None,
                    visible_arc: Optional[Tuple[float, float]] = None) -> 'CircleArea':
        """Create an area named after an airport's code."""
        return cls(altitude, center, radius, label, airport.code, visible_arc)

    def outline(self, segments: int = 360) -> Polyline:
        """The drawn part of the circle: the visible arc if one is set, else the whole circle."""
        vertices = circle_vertices(self.center, self.radius, segments)
        if self.visible_arc is None:
            return Polyline(vertices + vertices[:1])
        return self.arc(*self.visible_arc, segments=segments)

    def arc(self, start: float, end: float, segments: int = 360) -> Polyline:
        """Clockwise arc between two bearings from the centre (wrapping through north if needed)."""
        start = start % 360
        end = end % 360
        selected = []
        for vertex in circle_vertices(self.center, self.radius, segments):
            bearing = self.center.initial_bearing(vertex)
            inside = start <= bearing <= end if start <= end else (bearing >= start or bearing <= end)
            if inside:
                # Shift wrapped bearings so the arc sorts from start to end
                selected.append(((bearing - start) % 360, vertex))
        selected.sort(key=lambda item: item[0])
        return Polyline([vertex for _, vertex in selected])


Area = Union[PolygonArea, CircleArea]
