import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .navpoint import Point, feet_to_nm, normalize_bearing
from .validation import FormatSyntaxError

REVERSE_SUFFIX = "rev"

RUNWAY_NAME_PATTERN = re.compile(r'^((?:0?[1-9])|(?:[1-2]\d)|(?:3[0-6]))([LCR]?)$', re.IGNORECASE)
_OPPOSITE_LETTER = {'L': 'R', 'R': 'L', 'C': 'C', '': ''}


def split_runway_name(name: str) -> Tuple[int, str]:
    """
    Split a runway name into its number and side letter.

    Example:
        >>> split_runway_name("9l")
        (9, 'L')
    """
    match = RUNWAY_NAME_PATTERN.match(name.strip())
    if match is None:
        raise FormatSyntaxError(
            f"Runway name must be in the format: [1-36] optionally followed by L, C, or R. Got: {name}")
    return int(match.group(1)), match.group(2).upper()


def normalize_runway_name(name: str) -> str:
    """Normalize a runway name to two digits and an upper-case side letter."""
    number, letter = split_runway_name(name)
    return f"{number:02d}{letter}"


def reciprocal_runway_name(name: str) -> str:
    """Name of the opposite runway end, e.g. 09L -> 27R, 36 -> 18."""
    number, letter = split_runway_name(name)
    return f"{(number + 17) % 36 + 1:02d}{_OPPOSITE_LETTER[letter]}"


@dataclass(frozen=True)
class LocalizerFix:
    """A fix shown on the localizer at a distance from the threshold."""

    name: str
    distance: float  # Nautical miles from the (displaced) threshold
    pronunciation: Optional[str] = None


@dataclass(frozen=True)
class Runway:
    """
    One end of a runway together with the mirror data of the opposite end.

    Lengths are in feet and bearings in degrees from true north. The
    usable surface extends from ``position`` along the reciprocal of
    ``bearing``; ``reverse()`` derives the opposite end.
    """

    id: str
    name: str
    position: Point
    bearing: float
    length: float
    displaced: float = 0
    elevation: float = 0
    glideslope: float = 3
    localizer: Optional[float] = None
    localizer_fix: Optional[LocalizerFix] = None
    tower_frequency: float = 0
    tower_pronunciation: Optional[str] = None

    # Opposite end
    opposite_displaced: float = 0
    opposite_glideslope: float = 3
    opposite_localizer: Optional[float] = None
    opposite_localizer_fix: Optional[LocalizerFix] = None
    opposite_position: Optional[Point] = None  # Derived from the length when omitted

    def __post_init__(self):
        if not self.id:
            raise FormatSyntaxError("Runway identifier is required and must be a non-empty string.")
        object.__setattr__(self, 'name', normalize_runway_name(self.name))
        object.__setattr__(self, 'bearing', normalize_bearing(self.bearing))
        if self.localizer is None:
            object.__setattr__(self, 'localizer', self.bearing)
        if self.opposite_localizer is None:
            object.__setattr__(self, 'opposite_localizer', normalize_bearing(self.bearing + 180))
        if self.opposite_position is None:
            object.__setattr__(self, 'opposite_position',
                               self.position.destination(self.reciprocal_bearing, feet_to_nm(self.length)))

    @property
    def reciprocal_bearing(self) -> float:
        return normalize_bearing(self.bearing + 180)

    def is_reverse(self) -> bool:
        """Whether this is the derived opposite end of a runway."""
        return self.id.endswith(REVERSE_SUFFIX)

    def real_id(self) -> str:
        """The identifier of the declared runway, even for a reversed end."""
        return self.id[:-len(REVERSE_SUFFIX)] if self.is_reverse() else self.id

    def reverse(self) -> 'Runway':
        """
        Get the opposite end of this runway.

        Reversing a reversed end gives back the declared end.
        """
        return Runway(
            id=self.real_id() if self.is_reverse() else self.id + REVERSE_SUFFIX,
            name=reciprocal_runway_name(self.name),
            position=self.opposite_position,
            bearing=self.reciprocal_bearing,
            length=self.length,
            displaced=self.opposite_displaced,
            elevation=self.elevation,
            glideslope=self.opposite_glideslope,
            localizer=self.opposite_localizer,
            localizer_fix=self.opposite_localizer_fix,
            tower_frequency=self.tower_frequency,
            tower_pronunciation=self.tower_pronunciation,
            opposite_displaced=self.displaced,
            opposite_glideslope=self.glideslope,
            opposite_localizer=self.localizer,
            opposite_localizer_fix=self.localizer_fix,
            opposite_position=self.position,
        )

    def threshold(self) -> Point:
        """Position of the (displaced) landing threshold."""
        if not self.displaced:
            return self.position
        return self.position.destination(self.reciprocal_bearing, feet_to_nm(self.displaced))

    def localizer_point(self) -> Optional[Point]:
        """Position of the localizer fix on the extended centreline, if one is set."""
        if self.localizer_fix is None:
            return None
        return self.threshold().destination(self.localizer + 180, self.localizer_fix.distance)

    def __str__(self) -> str:
        return f"Runway {self.name} ({self.id})"
