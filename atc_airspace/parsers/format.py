"""
Format validation of a pre-parsed airspace table.

The table is the output of an INI-style key/value reader: a mapping of
section name to a mapping of key to a string, number, boolean or list of
strings. FormatValidator checks required keys, types and list arity
section by section and produces a typed AirspaceFormat. The first
violation aborts validation with a failure naming ``section.key``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union
import logging
import math
import re

from ..models.validation import CollisionError, FormatSyntaxError
from ..utils.composite_map import CompositeMap
from .context import ParseContext
from .fields import parse_runway_reference, split_fields

logger = logging.getLogger(__name__)

Table = Mapping[str, Mapping[str, Any]]

AIRSPACE_SECTION = "airspace"
PRIMARY_AIRPORT_SECTION = "airport1"
AIRPORT_PREFIX = "airport"
AREA_PREFIX = "area"
DEPARTURE_PREFIX = "departure"
APPROACH_PREFIX = "approach"
CONFIGURATIONS_SECTION = "configurations"
CONFIGURATION_PREFIX = "config"
PLANE_TYPES_SECTION = "planetypes"
BACKGROUND_SECTION = "background"
LINE_PREFIX = "line"
ROUTE_PREFIX = "route"

SECONDARY_AIRPORT_PATTERN = re.compile(r'^airport(\d+)$')

DEFAULT_SPEED_RESTRICTION = "0, 300, 10000, 250"
DEFAULT_LETTERS_FREQUENCY = 2
DEFAULT_TRANSITIONAL_ALTITUDE = 6000
DEFAULT_ZOOM = 7
DEFAULT_MAGNETIC_VARIANCE = 0
WAKE_ROWS = 6


@dataclass
class AirspaceSection:
    """Validated ``[airspace]`` values with layered defaults applied."""

    callsigns: str
    automatic: bool
    beacons: List[str]
    center: str
    descent_altitude: float
    ceiling: float
    above: float
    diversion_altitude: float
    elevation: float
    floor: float
    separation: float
    metric: bool
    strict_spawn: bool
    us_pronunciation: bool
    localizer_speed: str
    speed_restriction: str = DEFAULT_SPEED_RESTRICTION
    inches: bool = False
    decimal_degrees: bool = False
    boundary: Optional[List[str]] = None
    radius: Optional[float] = None
    handoff: Optional[List[str]] = None
    wake: Optional[List[str]] = None
    letters: float = DEFAULT_LETTERS_FREQUENCY
    transitional_altitude: float = DEFAULT_TRANSITIONAL_ALTITUDE
    magnetic_variance: float = DEFAULT_MAGNETIC_VARIANCE
    zoom: float = DEFAULT_ZOOM


@dataclass
class AirportSection:
    key: str
    name: str
    code: str
    runways: List[str]
    climb_altitude: float
    entry_points: List[str]
    airlines: List[str]
    sids: List[str] = field(default_factory=list)


@dataclass
class SecondaryAirportSection:
    airport: AirportSection
    flow: float
    inbound_beacon: str

    @property
    def key(self) -> str:
        return self.airport.key


@dataclass
class CircleAreaSection:
    key: str
    altitude: float
    position: str
    radius: float
    name: Optional[str] = None
    labelpos: Optional[str] = None
    drawdegrees: Optional[str] = None


@dataclass
class PolygonAreaSection:
    key: str
    altitude: float
    points: List[str]
    name: Optional[str] = None
    labelpos: Optional[str] = None
    draw: Optional[int] = None


AreaSection = Union[CircleAreaSection, PolygonAreaSection]


@dataclass
class ConfigurationSection:
    key: str
    entries: List[str]


@dataclass
class DepartureSection:
    key: str
    runway: str  # Registry runway id, with the reverse suffix for "id, rev"
    routes: Dict[str, List[str]]


@dataclass
class ApproachSection:
    key: str
    runway: str  # Registry runway id, with the reverse suffix for "id, rev"
    beacon: str  # Beacon name or inline beacon record
    routes: Dict[str, List[str]]

    @property
    def beacon_name(self) -> str:
        """Beacon name, upper-cased."""
        return split_fields(self.beacon)[0].upper()


@dataclass
class LineSection:
    key: str
    data: List[str]


@dataclass
class AirspaceFormat:
    """Typed, validated content of an airspace table, ready to be built."""

    airspace: AirspaceSection
    primary_airport: AirportSection
    secondary_airports: List[SecondaryAirportSection] = field(default_factory=list)
    areas: List[AreaSection] = field(default_factory=list)
    configurations: List[ConfigurationSection] = field(default_factory=list)
    departures: Dict[str, DepartureSection] = field(default_factory=dict)
    approaches: CompositeMap = field(default_factory=CompositeMap)
    plane_types: List[str] = field(default_factory=list)
    lines: List[LineSection] = field(default_factory=list)


_MISSING = object()


class Section:
    """
    Typed access to the values of one table section.

    Every accessor raises FormatSyntaxError keyed ``section.key`` when a
    value is missing (and required) or has the wrong type. Numbers may be
    given as numbers or numeric strings, booleans as booleans or the
    strings ``true``/``false``.
    """

    def __init__(self, name: str, values: Any):
        if not isinstance(values, Mapping):
            raise FormatSyntaxError("expected a section of keys", key=name)
        self.name = name
        self.values = values

    def key(self, key: str) -> str:
        return f"{self.name}.{key}"

    def keys_with_prefix(self, prefix: str) -> List[str]:
        return [k for k in self.values if k.startswith(prefix)]

    def _get(self, key: str, required: bool, expected: str) -> Any:
        value = self.values.get(key)
        if value is None:
            if required:
                raise FormatSyntaxError(f"required key is missing (expected {expected})", key=self.key(key))
            return _MISSING
        return value

    def string(self, key: str, required: bool = True) -> Optional[str]:
        value = self._get(key, required, "a string")
        if value is _MISSING:
            return None
        if not isinstance(value, str):
            raise FormatSyntaxError(f"expected a string, got {value!r}", key=self.key(key))
        return value.strip()

    def number(self, key: str, required: bool = True) -> Optional[float]:
        value = self._get(key, required, "a number")
        if value is _MISSING:
            return None
        if isinstance(value, bool):
            raise FormatSyntaxError(f"expected a number, got {value!r}", key=self.key(key))
        if isinstance(value, str):
            try:
                value = float(value.strip())
            except ValueError:
                raise FormatSyntaxError(f"expected a number, got {value!r}", key=self.key(key)) from None
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            raise FormatSyntaxError(f"expected a finite number, got {value!r}", key=self.key(key))
        return float(value)

    def integer(self, key: str, required: bool = True) -> Optional[int]:
        value = self.number(key, required)
        if value is None:
            return None
        if not value.is_integer():
            raise FormatSyntaxError(f"expected an integer, got {value:g}", key=self.key(key))
        return int(value)

    def boolean(self, key: str, required: bool = True) -> Optional[bool]:
        value = self._get(key, required, "a boolean")
        if value is _MISSING:
            return None
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        if not isinstance(value, bool):
            raise FormatSyntaxError(f"expected a boolean, got {value!r}", key=self.key(key))
        return value

    def strings(self, key: str, required: bool = True, min_length: int = 1) -> Optional[List[str]]:
        value = self._get(key, required, "a list of strings")
        if value is _MISSING:
            return None
        if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
            raise FormatSyntaxError("expected a list of strings", key=self.key(key))
        if len(value) < min_length:
            raise FormatSyntaxError(f"must have at least {min_length} element(s), got {len(value)}",
                                    key=self.key(key))
        return [v.strip() for v in value]


class FormatValidator:
    """
    Validate a pre-parsed airspace table into an AirspaceFormat.

    The validator sets ``ctx.decimal_degrees`` from ``airspace.decimaldegrees``
    and reports non-fatal anomalies through ``ctx.warn``.

    Example:
        >>> ctx = ParseContext()
        >>> fmt = FormatValidator(ctx).validate(table)
        >>> fmt.primary_airport.code
        'EGLL'
    """

    def __init__(self, ctx: ParseContext):
        self.ctx = ctx

    def validate(self, table: Table) -> AirspaceFormat:
        if not isinstance(table, Mapping):
            raise FormatSyntaxError("Airspace table must be a mapping of sections.")

        result = AirspaceFormat(
            airspace=self.validate_airspace(self._section(table, AIRSPACE_SECTION)),
            primary_airport=self.validate_airport(self._section(table, PRIMARY_AIRPORT_SECTION)),
        )

        for name in table:
            if name.startswith(AIRPORT_PREFIX) and name != PRIMARY_AIRPORT_SECTION:
                result.secondary_airports.append(self.validate_secondary_airport(Section(name, table[name])))
            elif name.startswith(AREA_PREFIX):
                result.areas.append(self.validate_area(Section(name, table[name])))
            elif name.startswith(DEPARTURE_PREFIX):
                departure = self.validate_departure(Section(name, table[name]))
                existing = result.departures.get(departure.runway)
                if existing is not None:
                    raise CollisionError("Departure for runway", departure.runway,
                                         f"(duplicate of {existing.key})", key=f"{name}.runway")
                result.departures[departure.runway] = departure
            elif name.startswith(APPROACH_PREFIX):
                approach = self.validate_approach(Section(name, table[name]))
                approach_key = (approach.runway, approach.beacon_name)
                if approach_key in result.approaches:
                    existing = result.approaches[approach_key]
                    raise CollisionError(
                        "Approach for", f"runway {approach.runway} and beacon {approach.beacon_name}",
                        f"(duplicate of {existing.key})", key=name)
                result.approaches[approach_key] = approach

        if table.get(CONFIGURATIONS_SECTION) is not None:
            result.configurations = self.validate_configurations(Section(CONFIGURATIONS_SECTION,
                                                                         table[CONFIGURATIONS_SECTION]))
        if table.get(PLANE_TYPES_SECTION) is not None:
            result.plane_types = Section(PLANE_TYPES_SECTION, table[PLANE_TYPES_SECTION]).strings("types")
        if table.get(BACKGROUND_SECTION) is not None:
            result.lines.extend(self.validate_lines(Section(BACKGROUND_SECTION, table[BACKGROUND_SECTION])))
        result.lines.extend(self.validate_lines(Section(AIRSPACE_SECTION, table[AIRSPACE_SECTION])))

        logger.debug(f"Validated airspace table with {len(table)} sections")
        return result

    @staticmethod
    def _section(table: Table, name: str) -> Section:
        if table.get(name) is None:
            raise FormatSyntaxError(f"The [{name}] section is required.", key=name)
        return Section(name, table[name])

    def validate_airspace(self, s: Section) -> AirspaceSection:
        """
        Validate the ``[airspace]`` section.

        ``ceiling`` defaults to descent altitude + 1000 and ``above`` to
        ceiling + 2000.
        """
        decimal_degrees = s.boolean("decimaldegrees", required=False)
        self.ctx.decimal_degrees = bool(decimal_degrees)

        inches = s.boolean("inches", required=False)
        if inches is None:
            self.ctx.warn("airspace.inches is not set. Defaulting to false.")
            inches = False

        callsigns = s.string("name")
        automatic = s.boolean("automatic")
        beacons = s.strings("beacons")

        boundary = s.strings("boundary", required=False, min_length=3)
        radius = s.number("radius", required=False)
        if boundary is None and radius is None:
            raise FormatSyntaxError("either airspace.boundary or airspace.radius is required",
                                    key=s.key("radius"))
        if boundary is not None and radius is not None:
            self.ctx.warn("Both airspace.boundary and airspace.radius are set. airspace.boundary will be used.")

        center = s.string("center")
        descent_altitude = s.number("descentaltitude")
        ceiling = s.number("ceiling", required=False)
        if ceiling is None:
            ceiling = descent_altitude + 1000
        above = s.number("above", required=False)
        if above is None:
            above = ceiling + 2000

        speed_restriction = s.string("speedrestriction", required=False)
        if speed_restriction is None:
            self.ctx.warn(f"airspace.speedrestriction is not set. Defaulting to {DEFAULT_SPEED_RESTRICTION}.")
            speed_restriction = DEFAULT_SPEED_RESTRICTION

        wake = s.strings("wake", required=False)
        if wake is not None and len(wake) != WAKE_ROWS:
            raise FormatSyntaxError(f"must have exactly {WAKE_ROWS} rows, got {len(wake)}", key=s.key("wake"))

        return AirspaceSection(
            callsigns=callsigns,
            automatic=automatic,
            beacons=beacons,
            center=center,
            descent_altitude=descent_altitude,
            ceiling=ceiling,
            above=above,
            diversion_altitude=s.number("diversionaltitude"),
            elevation=s.number("elevation"),
            floor=s.number("floor"),
            separation=s.number("separation"),
            metric=s.boolean("metric"),
            strict_spawn=s.boolean("strictspawn"),
            us_pronunciation=s.boolean("usa"),
            localizer_speed=s.string("localizerspeed"),
            speed_restriction=speed_restriction,
            inches=inches,
            decimal_degrees=self.ctx.decimal_degrees,
            boundary=boundary,
            radius=radius,
            handoff=s.strings("handoff", required=False),
            wake=wake,
            letters=self._recommended_number(s, "letters", DEFAULT_LETTERS_FREQUENCY),
            transitional_altitude=self._recommended_number(s, "transitionaltitude", DEFAULT_TRANSITIONAL_ALTITUDE),
            magnetic_variance=self._recommended_number(s, "magneticvar", DEFAULT_MAGNETIC_VARIANCE),
            zoom=self._recommended_number(s, "zoom", DEFAULT_ZOOM),
        )

    def _recommended_number(self, s: Section, key: str, default: float) -> float:
        value = s.number(key, required=False)
        if value is None:
            self.ctx.warn(f"{s.key(key)} is not set. Defaulting to {default}.")
            return default
        return value

    def validate_airport(self, s: Section, code_length: int = 4) -> AirportSection:
        code = s.string("code")
        if len(code) != code_length:
            self.ctx.warn(f"{s.key('code')} length is {len(code)}, recommended is {code_length}.")
        return AirportSection(
            key=s.name,
            name=s.string("name"),
            code=code,
            runways=s.strings("runways"),
            climb_altitude=s.number("climbaltitude"),
            entry_points=s.strings("entrypoints"),
            airlines=s.strings("airlines"),
            sids=s.strings("sids", required=False) or [],
        )

    def validate_secondary_airport(self, s: Section) -> SecondaryAirportSection:
        match = SECONDARY_AIRPORT_PATTERN.match(s.name)
        if match is None or int(match.group(1)) < 2:
            raise FormatSyntaxError("secondary airport sections must be named airportN with N >= 2", key=s.name)
        return SecondaryAirportSection(
            airport=self.validate_airport(s, code_length=2),
            flow=s.number("flow"),
            inbound_beacon=s.string("inboundbeacon"),
        )

    def validate_area(self, s: Section) -> AreaSection:
        altitude = s.number("altitude")
        name = s.string("name", required=False)
        labelpos = s.string("labelpos", required=False)
        shape = s.values.get("shape")

        if shape == "circle":
            return CircleAreaSection(
                key=s.name,
                altitude=altitude,
                radius=s.number("radius"),
                position=s.string("position"),
                name=name,
                labelpos=labelpos,
                drawdegrees=s.string("drawdegrees", required=False),
            )
        if shape == "polygon":
            draw = s.integer("draw", required=False)
            return PolygonAreaSection(
                key=s.name,
                altitude=altitude,
                points=s.strings("points", min_length=3),
                name=name,
                labelpos=labelpos,
                draw=draw,
            )
        raise FormatSyntaxError(f'must be "circle" or "polygon", got {shape!r}', key=s.key("shape"))

    def validate_configurations(self, s: Section) -> List[ConfigurationSection]:
        configurations = []
        for key in s.values:
            if not key.startswith(CONFIGURATION_PREFIX):
                raise FormatSyntaxError('must be in the format "configN"', key=s.key(key))
            configurations.append(ConfigurationSection(s.key(key), s.strings(key)))
        return configurations

    def _routes(self, s: Section, min_length: int) -> Dict[str, List[str]]:
        routes = {key: s.strings(key, min_length=min_length) for key in s.keys_with_prefix(ROUTE_PREFIX)}
        if not routes:
            raise FormatSyntaxError("must have at least one route", key=s.name)
        return routes

    def validate_departure(self, s: Section) -> DepartureSection:
        runway = s.string("runway")
        with self.ctx.at(s.key("runway")):
            runway_id = parse_runway_reference(runway)
        return DepartureSection(s.name, runway_id, self._routes(s, min_length=2))

    def validate_approach(self, s: Section) -> ApproachSection:
        runway = s.string("runway")
        with self.ctx.at(s.key("runway")):
            runway_id = parse_runway_reference(runway)
        beacon = s.string("beacon")
        if not split_fields(beacon)[0]:
            raise FormatSyntaxError("beacon name is required", key=s.key("beacon"))
        return ApproachSection(s.name, runway_id, beacon, self._routes(s, min_length=3))

    def validate_lines(self, s: Section) -> List[LineSection]:
        return [LineSection(s.key(key), s.strings(key)) for key in s.keys_with_prefix(LINE_PREFIX)]
