#!/usr/bin/env python3

import math
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .validation import FormatRangeError, FormatSyntaxError

EARTH_RADIUS_M = 6371e3  # Mean radius of Earth, in metres
METRES_PER_NM = 1852.0
METRES_PER_FT = 0.3048

DMS_PATTERN = re.compile(
    r'^\D*(\d{1,3}?(?:\.\d+)?)'  # Degrees (lazy, so trailing digits go to minutes/seconds)
    r'\D*(\d{1,2}(?:\.\d+)?)'    # Minutes
    r'\D*(\d{1,2}(?:\.\d+)?)\D*$'  # Seconds
)
CARDINAL_PATTERN = re.compile(r'[NESW]')
SIGN_PATTERN = re.compile(r'[+\-−]')
_SIGNS = {'N': 1, 'E': 1, 'S': -1, 'W': -1, '+': 1, '-': -1, '−': -1}


def feet_to_nm(feet: float) -> float:
    """Convert a length in feet to nautical miles."""
    return feet * METRES_PER_FT / METRES_PER_NM


def normalize_bearing(bearing: float) -> float:
    """Normalize a bearing into [0, 360)."""
    return bearing % 360


def parse_dms(dms: str) -> float:
    """
    Parse a degrees, minutes, seconds string into signed decimal degrees.

    Degrees, minutes and seconds must all be present, in that order, but
    any non-digit separators are accepted:

        >>> round(parse_dms("512930N"), 4)
        51.4917
        >>> round(parse_dms("0011311W"), 4)
        -1.2197
        >>> round(parse_dms('51° 34\\' 45.0732" N'), 4)
        51.5792

    The sign comes from the first upper-case N/E/S/W letter. Without one,
    the first explicit +/- sign is used; positive if there is neither, so
    hyphen separators and lower-case unit markers never flip a hemisphere.

    Raises:
        FormatSyntaxError: If the components cannot be found
        FormatRangeError: If degrees are not in [0, 180) or minutes/seconds not in [0, 60)
    """
    match = DMS_PATTERN.match(dms.strip())
    if match is None:
        raise FormatSyntaxError(f"Unable to determine DMS in coordinate: {dms}")
    degrees, minutes, seconds = (float(group) for group in match.groups())

    if not 0 <= seconds < 60:
        raise FormatRangeError(f"Seconds ({seconds:g}) out of range in coordinate: {dms}")
    if not 0 <= minutes < 60:
        raise FormatRangeError(f"Minutes ({minutes:g}) out of range in coordinate: {dms}")
    if not 0 <= degrees < 180:
        raise FormatRangeError(f"Degrees ({degrees:g}) out of range in coordinate: {dms}")

    sign_match = CARDINAL_PATTERN.search(dms) or SIGN_PATTERN.search(dms)
    sign = _SIGNS[sign_match.group(0)] if sign_match else 1
    return sign * (degrees + minutes / 60 + seconds / 3600)


@dataclass(frozen=True)
class Point:
    """
    A geographic position on a spherical Earth.

    All coordinates are stored in decimal degrees:
    - Latitude: -90 to +90 degrees (negative for South, positive for North)
    - Longitude: -180 to +180 degrees (negative for West, positive for East)

    Distances passed in are nautical miles; distances returned are metres.
    Bearings are degrees from true north (0-360).
    """

    latitude: float
    longitude: float

    def __post_init__(self):
        """Validate coordinates after initialization."""
        if not -90 <= self.latitude <= 90:
            raise FormatRangeError(f"Latitude must be between -90 and 90 degrees, got {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise FormatRangeError(f"Longitude must be between -180 and 180 degrees, got {self.longitude}")

    @staticmethod
    def from_dms(latitude: str, longitude: str) -> 'Point':
        """
        Create a point from DMS latitude and longitude strings.

        Example:
            >>> Point.from_dms("512839.63N", "0002559.82W")
        """
        return Point(parse_dms(latitude), parse_dms(longitude))

    @staticmethod
    def from_radians(phi: float, lam: float) -> 'Point':
        """Create a point from radians, wrapping longitude into [-180, 180)."""
        longitude = (math.degrees(lam) + 540) % 360 - 180
        latitude = max(-90.0, min(90.0, math.degrees(phi)))
        return Point(latitude, longitude)

    @staticmethod
    def from_cartesian(coordinates: Tuple[float, float, float]) -> 'Point':
        """Create a point from earth-centred cartesian coordinates (any scale)."""
        x, y, z = coordinates
        return Point.from_radians(math.atan2(z, math.hypot(x, y)), math.atan2(y, x))

    def to_radians(self) -> Tuple[float, float]:
        return math.radians(self.latitude), math.radians(self.longitude)

    def to_cartesian(self) -> Tuple[float, float, float]:
        """Earth-centred cartesian coordinates of this point, in metres."""
        phi, lam = self.to_radians()
        return (
            EARTH_RADIUS_M * math.cos(phi) * math.cos(lam),
            EARTH_RADIUS_M * math.cos(phi) * math.sin(lam),
            EARTH_RADIUS_M * math.sin(phi),
        )

    def same_position(self, other: 'Point') -> bool:
        """Check if both points have exactly the same coordinates."""
        return self.latitude == other.latitude and self.longitude == other.longitude

    def destination(self, bearing: float, distance: float) -> 'Point':
        """
        Find the point reached from here along a bearing.

        Args:
            bearing: Bearing in degrees from true north, normalized to [0, 360)
            distance: Distance in nautical miles

        Returns:
            A new Point at the destination
        """
        phi1, lam1 = self.to_radians()
        theta = math.radians(normalize_bearing(bearing))
        delta = distance * METRES_PER_NM / EARTH_RADIUS_M  # Angular distance

        phi2 = math.asin(
            math.sin(phi1) * math.cos(delta) +
            math.cos(phi1) * math.sin(delta) * math.cos(theta)
        )
        lam2 = lam1 + math.atan2(
            math.sin(theta) * math.sin(delta) * math.cos(phi1),
            math.cos(delta) - math.sin(phi1) * math.sin(phi2)
        )
        return Point.from_radians(phi2, lam2)

    def distance(self, other: 'Point') -> float:
        """Great circle (haversine) distance to another point, in metres."""
        phi1, lam1 = self.to_radians()
        phi2, lam2 = other.to_radians()
        dphi = phi2 - phi1
        dlam = lam2 - lam1

        a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2) ** 2
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return EARTH_RADIUS_M * c

    def initial_bearing(self, other: 'Point') -> float:
        """Initial bearing (forward azimuth) to another point, in [0, 360)."""
        phi1, lam1 = self.to_radians()
        phi2, lam2 = other.to_radians()
        dlam = lam2 - lam1

        y = math.sin(dlam) * math.cos(phi2)
        x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dlam)
        return (math.degrees(math.atan2(y, x)) + 360) % 360

    def bearing_intersection(self, bearing: float, other: 'Point', other_bearing: float) -> Optional['Point']:
        """
        Find where a ray from this point meets a ray from another point.

        Args:
            bearing: Bearing from this point, in degrees from true north
            other: The other point
            other_bearing: Bearing from the other point, in degrees from true north

        Returns:
            The intersection point, or None when the start points coincide
            or the rays never meet
        """
        phi1, lam1 = self.to_radians()
        phi2, lam2 = other.to_radians()
        dphi = phi2 - phi1
        dlam = lam2 - lam1

        theta13 = math.radians(normalize_bearing(bearing))
        theta23 = math.radians(normalize_bearing(other_bearing))

        delta12 = 2 * math.asin(math.sqrt(
            math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2) ** 2
        ))
        if abs(delta12) < 1e-12:
            return None

        # Initial/final bearings between the two start points
        theta_a = math.acos(_clamp(
            (math.sin(phi2) - math.sin(phi1) * math.cos(delta12)) / (math.sin(delta12) * math.cos(phi1))
        ))
        theta_b = math.acos(_clamp(
            (math.sin(phi1) - math.sin(phi2) * math.cos(delta12)) / (math.sin(delta12) * math.cos(phi2))
        ))

        if math.sin(dlam) > 0:
            theta12 = theta_a
            theta21 = 2 * math.pi - theta_b
        else:
            theta12 = 2 * math.pi - theta_a
            theta21 = theta_b

        alpha1 = theta13 - theta12
        alpha2 = theta21 - theta23

        if math.sin(alpha1) == 0 and math.sin(alpha2) == 0:
            return None
        if math.sin(alpha1) * math.sin(alpha2) < 0:
            return None

        alpha3 = math.acos(_clamp(
            -math.cos(alpha1) * math.cos(alpha2) + math.sin(alpha1) * math.sin(alpha2) * math.cos(delta12)
        ))
        delta13 = math.atan2(
            math.sin(delta12) * math.sin(alpha1) * math.sin(alpha2),
            math.cos(alpha2) + math.cos(alpha1) * math.cos(alpha3)
        )

        phi3 = math.asin(
            math.sin(phi1) * math.cos(delta13) +
            math.cos(phi1) * math.sin(delta13) * math.cos(theta13)
        )
        dlam13 = math.atan2(
            math.sin(theta13) * math.sin(delta13) * math.cos(phi1),
            math.cos(delta13) - math.sin(phi1) * math.sin(phi3)
        )
        return Point.from_radians(phi3, lam1 + dlam13)

    def to_dms(self) -> Tuple[str, str]:
        """
        Convert coordinates to Degrees, Minutes, Seconds format.

        Returns:
            Tuple of (latitude string, longitude string)
            Example: ("48° 51' 24.0\" N", "2° 21' 8.0\" E")
        """
        def decimal_to_dms(decimal_degrees: float, is_longitude: bool) -> str:
            if is_longitude:
                direction = 'E' if decimal_degrees >= 0 else 'W'
            else:
                direction = 'N' if decimal_degrees >= 0 else 'S'
            decimal_degrees = abs(decimal_degrees)
            degrees = int(decimal_degrees)
            decimal_minutes = (decimal_degrees - degrees) * 60
            minutes = int(decimal_minutes)
            seconds = round((decimal_minutes - minutes) * 60, 2)
            return f"{degrees}° {minutes}' {seconds}\" {direction}"

        return (
            decimal_to_dms(self.latitude, False),
            decimal_to_dms(self.longitude, True)
        )

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"


@dataclass(frozen=True)
class NamedPoint(Point):
    """A point identified by its display name rather than its coordinates."""

    name: str

    def __post_init__(self):
        super().__post_init__()
        if not self.name:
            raise FormatSyntaxError("Named point requires a non-empty name.")

    @classmethod
    def from_point(cls, point: Point, name: str, **kwargs) -> 'NamedPoint':
        """Create a named point (or subclass) at the position of another point."""
        return cls(point.latitude, point.longitude, name, **kwargs)

    def __str__(self) -> str:
        return f"{self.name} ({self.latitude}, {self.longitude})"


@dataclass(frozen=True)
class SidPoint(NamedPoint):
    """A named departure fix, optionally with a spoken pronunciation."""

    pronunciation: Optional[str] = None


@dataclass(frozen=True)
class ApproachPoint(Point):
    """An arrival route point with optional altitude and speed constraints."""

    altitude: Optional[float] = None  # Feet
    speed: Optional[float] = None     # KIAS

    @classmethod
    def from_point(cls, point: Point, altitude: Optional[float] = None,
                   speed: Optional[float] = None) -> 'ApproachPoint':
        return cls(point.latitude, point.longitude, altitude, speed)


def _clamp(value: float) -> float:
    return max(-1.0, min(1.0, value))
