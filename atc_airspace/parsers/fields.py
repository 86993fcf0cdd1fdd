"""
Lexical parsers for the comma-delimited records of an airspace description.

Each function decodes one record string into a typed value. Failures are
raised as FormatSyntaxError or FormatRangeError without a key; the
validator and builder attach the offending ``section.key`` through
``ParseContext.at()``.

Optional numeric fields treat an empty or absent value as "use the
default". Where 0 is not a meaningful value (glideslope, localizer,
holding course, altitude and speed constraints, plane performance
overrides) the literal "0" also selects the default.
"""

import math
import re
from typing import FrozenSet, List, NamedTuple, Optional, Sequence, Tuple, Union

from ..models.aircraft import Aircraft
from ..models.airport import Airline, CardinalDirection, Direction, EntryPoint
from ..models.airspace import (
    BelowAltitude,
    FrequencyHandoff,
    OnLocalizer,
    SpeedRestriction,
    WithinRadius,
)
from ..models.area import Color, LineColor, Polyline, RGB
from ..models.beacon import Beacon, HoldingPattern
from ..models.navpoint import ApproachPoint, Point, SidPoint
from ..models.procedure import (
    MAX_DISPLAY_NAME,
    HoldTermination,
    IlsInterceptTermination,
    Termination,
    VectorTermination,
)
from ..models.runway import REVERSE_SUFFIX, LocalizerFix, Runway
from ..models.runway_configuration import RunwayUsage
from ..models.validation import FormatRangeError, FormatSyntaxError
from ..models.wake import Separation, WakeCategory, WakeSeparation
from .context import ParseContext

FIELD_SEPARATOR = ","
SUBFIELD_SEPARATOR = "/"

DECIMAL_LATITUDE = re.compile(r'^[NS\-]?\d+(?:\.\d+)?$', re.IGNORECASE)
DECIMAL_LONGITUDE = re.compile(r'^[EW\-]?\d+(?:\.\d+)?$', re.IGNORECASE)
UNSIGNED_DECIMAL = re.compile(r'^\d+(?:\.\d+)?$')
SIGNED_NUMBER = re.compile(r'^-?\d+(?:\.\d+)?$')
AIRLINE_DIRECTION = re.compile(r'[a-z]|\d{1,3}', re.IGNORECASE)
HEX_COLOR = re.compile(r'^(?:#|0x)([0-9a-f]{1,6})$', re.IGNORECASE)

RUNWAY_FIELDS = 19
PLANE_TYPE_FIELDS = 19
CONFIGURATION_KEYWORDS = frozenset({"land", "start", "rev", "int", "track", "nosid"})
TERMINATION_END = "end"
TERMINATION_HOLD = "hold"


class DepartureRoute(NamedTuple):
    name: str
    pronunciation: Optional[str]
    route: List[Point]
    initial_climb: Optional[float]


class ArrivalRoute(NamedTuple):
    inbound_bearing: Optional[float]
    name: str
    pronunciation: Optional[str]
    route: List[ApproachPoint]
    termination: Termination


def split_fields(data: str, separator: str = FIELD_SEPARATOR) -> List[str]:
    """Split a record into stripped fields."""
    return [part.strip() for part in data.split(separator)]


def _pad(data: str, count: int, what: str, separator: str = FIELD_SEPARATOR) -> List[Optional[str]]:
    """
    Split a record into exactly ``count`` fields.

    Missing and empty fields become None.

    Raises:
        FormatSyntaxError: If the record has more than ``count`` fields
    """
    fields = split_fields(data, separator)
    if len(fields) > count:
        raise FormatSyntaxError(f"{what} has {len(fields)} fields, at most {count} are allowed: {data}")
    return [f if f else None for f in fields] + [None] * (count - len(fields))


def parse_number(value: Optional[str], what: str) -> float:
    """
    Parse a required finite number.

    Raises:
        FormatSyntaxError: If the value is missing or not a number
    """
    if value is None or value == "":
        raise FormatSyntaxError(f"{what} is required and must be a number.")
    try:
        number = float(value)
    except ValueError:
        raise FormatSyntaxError(f"{what} must be a number, got: {value}") from None
    if not math.isfinite(number):
        raise FormatSyntaxError(f"{what} must be a finite number, got: {value}")
    return number


def parse_optional_number(value: Optional[str], what: str, default: Optional[float] = None,
                          zero_is_default: bool = False) -> Optional[float]:
    """Parse an optional number; absence (or 0 when ``zero_is_default``) gives ``default``."""
    if value is None or value == "":
        return default
    number = parse_number(value, what)
    if zero_is_default and number == 0:
        return default
    return number


def _signed_decimal(value: str) -> float:
    sign = -1 if value[0].upper() in "SW-" else 1
    return sign * float(value.lstrip("NSEWnsew-"))


def parse_coordinates(ctx: ParseContext, latitude: Optional[str], longitude: Optional[str]) -> Point:
    """
    Parse a latitude/longitude pair.

    Decimal degrees (``51.5``, ``N51.5``, ``-0.12``) are accepted only when
    the context is in decimal-degrees mode; everything else is parsed as
    degrees, minutes, seconds.

    Raises:
        FormatSyntaxError: If either coordinate is missing or malformed
        FormatRangeError: If a coordinate is outside its legal range
    """
    if not latitude:
        raise FormatSyntaxError("Latitude is required and must be a non-empty string.")
    if not longitude:
        raise FormatSyntaxError("Longitude is required and must be a non-empty string.")

    if DECIMAL_LATITUDE.match(latitude) and DECIMAL_LONGITUDE.match(longitude):
        if ctx.decimal_degrees:
            return Point(_signed_decimal(latitude), _signed_decimal(longitude))
        is_decimal = "." in latitude + longitude
        if is_decimal or UNSIGNED_DECIMAL.match(latitude) or UNSIGNED_DECIMAL.match(longitude):
            raise FormatSyntaxError(
                f"Numeric coordinates encountered ({latitude}, {longitude}) "
                f"but airspace.decimaldegrees is not true.")
    return Point.from_dms(latitude, longitude)


def parse_point(ctx: ParseContext, data: str) -> Point:
    """Parse a ``lat, lon`` record."""
    latitude, longitude = _pad(data, 2, "Point")
    return parse_coordinates(ctx, latitude, longitude)


def parse_beacon(ctx: ParseContext, data: str) -> Beacon:
    """
    Parse a ``name, lat, lon, [hold], [pronunciation]`` record.

    The holding course is the signed inbound course: negative for left
    turns; "0" or absent means the beacon has no hold.
    """
    name, latitude, longitude, hold, pronunciation = _pad(data, 5, "Beacon")
    if not name:
        raise FormatSyntaxError("Beacon name is required and must be a non-empty string.")
    position = parse_coordinates(ctx, latitude, longitude)
    course = parse_optional_number(hold, "Beacon holding course", zero_is_default=True)
    holding_pattern = HoldingPattern.from_signed_course(course) if course is not None else None
    return Beacon.from_point(position, name, pronunciation=pronunciation, holding_pattern=holding_pattern)


def parse_handoff(data: str) -> FrequencyHandoff:
    """Parse a ``heading, callsign, pronunciation, [frequency]`` record."""
    heading, callsign, pronunciation, frequency = _pad(data, 4, "Handoff")
    bearing = parse_number(heading, "Handoff heading")
    if not callsign:
        raise FormatSyntaxError("Handoff ATC callsign is required and must be a non-empty string.")
    if not pronunciation:
        raise FormatSyntaxError("Handoff ATC pronunciation is required and must be a non-empty string.")
    return FrequencyHandoff(bearing, callsign, pronunciation, parse_optional_number(frequency, "Handoff frequency"))


def parse_localizer_speed(data: str) -> OnLocalizer:
    """Parse the localizer speed restriction ``distance, speed``."""
    distance, speed = _pad(data, 2, "Localizer speed restriction")
    return OnLocalizer(
        parse_number(distance, "Localizer speed restriction distance"),
        parse_number(speed, "Localizer speed restriction speed"),
    )


def parse_speed_restriction(data: str, on_localizer: OnLocalizer) -> SpeedRestriction:
    """Parse ``radius, speed, [altitude, speed]``; the altitude pair is optional."""
    radius, radius_speed, altitude, altitude_speed = _pad(data, 4, "Speed restriction")
    within_radius = WithinRadius(
        parse_number(radius, "Speed restriction radius"),
        parse_number(radius_speed, "Speed restriction speed within radius"),
    )
    below_altitude = BelowAltitude(0, 0)
    if altitude is not None:
        below_altitude = BelowAltitude(
            parse_number(altitude, "Altitude restriction altitude"),
            parse_number(altitude_speed, "Altitude restriction speed at altitude"),
        )
    return SpeedRestriction(within_radius, below_altitude, on_localizer)


def parse_wake_row(data: str) -> List[Separation]:
    """Parse six ``distance/interval`` cells."""
    cells = split_fields(data)
    if len(cells) != len(WakeCategory):
        raise FormatSyntaxError(
            f"Each wake separation matrix row must have {len(WakeCategory)} categories, got {len(cells)}.")
    row = []
    for cell in cells:
        parts = split_fields(cell, SUBFIELD_SEPARATOR)
        if len(parts) != 2:
            raise FormatSyntaxError(f"Wake separation matrix cells must be in the format: distance/interval, got: {cell}")
        row.append(Separation(
            parse_number(parts[0], "Wake separation distance"),
            parse_number(parts[1], "Wake separation interval"),
        ))
    return row


def parse_wake_separation(rows: Sequence[str]) -> WakeSeparation:
    """Parse one row per wake category, heaviest leading category first."""
    if len(rows) != len(WakeCategory):
        raise FormatSyntaxError(f"Wake separation matrix must have exactly {len(WakeCategory)} rows, got {len(rows)}.")
    return WakeSeparation({category: parse_wake_row(row) for category, row in zip(WakeCategory, rows)})


def _localizer_fix(name: Optional[str], distance: Optional[str], what: str) -> Optional[LocalizerFix]:
    if name is None or name == "0":
        return None
    value = parse_optional_number(distance, f"{what} distance", zero_is_default=True)
    if value is None:
        raise FormatSyntaxError(f"{what} distance is required when a beacon name is set.")
    return LocalizerFix(name, value)


def parse_runway(ctx: ParseContext, data: str) -> Runway:
    """
    Parse a runway record of up to 19 positional fields.

    Format:
        id, name, lat, lon, trueHeading, length, [displaced], [displaced2],
        [elevation], [glideslope], [localizer], [glideslope2], [localizer2],
        [beacon], [distance], [beacon2], [distance2], [towerFreq], [towerPronunciation]

    Lengths are feet. Defaults: displaced 0, elevation 0, glideslope 3,
    localizer the runway bearing (the reciprocal for the opposite end),
    tower frequency 0.
    """
    (runway_id, name, latitude, longitude, heading, length, displaced, displaced2, elevation,
     glideslope, localizer, glideslope2, localizer2, beacon, distance, beacon2, distance2,
     tower_frequency, tower_pronunciation) = _pad(data, RUNWAY_FIELDS, "Runway")

    if not runway_id:
        raise FormatSyntaxError("Runway identifier is required and must be a non-empty string.")
    if not name:
        raise FormatSyntaxError("Runway name is required and must be a non-empty string.")
    position = parse_coordinates(ctx, latitude, longitude)
    length_ft = parse_number(length, "Runway length")
    if length_ft <= 0:
        raise FormatRangeError(f"Runway length must be positive, got: {length}")

    return Runway(
        id=runway_id,
        name=name,
        position=position,
        bearing=parse_number(heading, "Runway true heading"),
        length=length_ft,
        displaced=parse_optional_number(displaced, "Runway displaced threshold", default=0),
        elevation=parse_optional_number(elevation, "Runway elevation", default=0),
        glideslope=parse_optional_number(glideslope, "Runway glideslope", default=3, zero_is_default=True),
        localizer=parse_optional_number(localizer, "Runway localizer", zero_is_default=True),
        localizer_fix=_localizer_fix(beacon, distance, "Runway beacon"),
        tower_frequency=parse_optional_number(tower_frequency, "Runway tower frequency", default=0),
        tower_pronunciation=tower_pronunciation,
        opposite_displaced=parse_optional_number(displaced2, "Runway opposite displaced threshold", default=0),
        opposite_glideslope=parse_optional_number(
            glideslope2, "Runway opposite glideslope", default=3, zero_is_default=True),
        opposite_localizer=parse_optional_number(localizer2, "Runway opposite localizer", zero_is_default=True),
        opposite_localizer_fix=_localizer_fix(beacon2, distance2, "Runway opposite beacon"),
    )


def parse_runway_reference(data: str) -> str:
    """
    Parse ``id[, rev]`` into a registry runway id.

    Example:
        >>> parse_runway_reference("27L, rev")
        '27Lrev'
    """
    runway_id, flag = _pad(data, 2, "Runway reference")
    if not runway_id:
        raise FormatSyntaxError("Runway id is required.")
    if flag is None:
        return runway_id
    if flag != "rev":
        raise FormatSyntaxError(f'Runway reference flag must be "rev", got: {flag}')
    return runway_id + REVERSE_SUFFIX


def parse_sid(ctx: ParseContext, data: str) -> Union[str, SidPoint]:
    """
    Parse a SID record.

    A bare name is returned as a string to be resolved against the
    airspace beacons; ``name, lat, lon, [pronunciation]`` gives a SidPoint.
    """
    name, latitude, longitude, pronunciation = _pad(data, 4, "SID")
    if not name:
        raise FormatSyntaxError("SID name is required and must be a non-empty string.")
    if latitude is None and longitude is None and pronunciation is None:
        return name
    position = parse_coordinates(ctx, latitude, longitude)
    return SidPoint.from_point(position, name, pronunciation=pronunciation)


def parse_directions(data: str) -> FrozenSet[Direction]:
    """
    Parse airline directions: cardinal letters and/or headings.

    Example:
        >>> sorted(parse_directions("090/260"))
        [90.0, 260.0]
    """
    segments = AIRLINE_DIRECTION.findall(data)
    if not segments:
        raise FormatSyntaxError(
            f"Airline direction must be in the format: NESW, or nesw, or number/number, e.g. 090/260/360; got {data}")
    directions = set()
    for segment in segments:
        if segment.isdigit():
            heading = float(segment)
            if heading > 360:
                raise FormatRangeError(f"Airline direction heading must be in the range [0, 360], got {segment}")
            directions.add(heading)
        elif segment.upper() in {d.value for d in CardinalDirection}:
            directions.add(CardinalDirection(segment.upper()))
        else:
            raise FormatSyntaxError(f"Invalid airline direction: {segment}")
    return frozenset(directions)


def parse_airline(data: str) -> Airline:
    """Parse a ``name, amount, type[/type...], [pronunciation], [direction]`` record."""
    name, amount, types, pronunciation, direction = _pad(data, 5, "Airline")
    if not name:
        raise FormatSyntaxError("Airline name is required and must be a non-empty string.")
    frequency = parse_number(amount, "Airline amount")
    if not types:
        raise FormatSyntaxError("Airline plane type is required and must be a non-empty string.")
    type_list = tuple(t for t in split_fields(types, SUBFIELD_SEPARATOR) if t)
    if not type_list:
        raise FormatSyntaxError("At least one airline plane type is required.")
    directions = parse_directions(direction) if direction else frozenset()
    return Airline(name, frequency, type_list, directions, pronunciation)


def parse_entry_point(data: str) -> EntryPoint:
    """Parse a ``bearing, [beacon], [altitude]`` record; altitude "0" means unrestricted."""
    bearing, beacon, altitude = _pad(data, 3, "Entry point")
    return EntryPoint(
        parse_number(bearing, "Entry point bearing"),
        beacon,
        parse_optional_number(altitude, "Entry point altitude", zero_is_default=True),
    )


def _range(low: Optional[str], high: Optional[str], what: str) -> Tuple[float, float]:
    return parse_number(low, f"Aircraft min{what}"), parse_number(high, f"Aircraft max{what}")


def _optional_range(low: Optional[str], high: Optional[str], what: str,
                    default: Tuple[float, float]) -> Tuple[float, float]:
    return (
        parse_optional_number(low, f"Aircraft min{what}", default=default[0], zero_is_default=True),
        parse_optional_number(high, f"Aircraft max{what}", default=default[1], zero_is_default=True),
    )


def parse_plane_type(data: str) -> Aircraft:
    """
    Parse an aircraft performance record.

    Format:
        type, category, minspeed, maxspeed, minturnrate, maxturnrate,
        mindescentrate, maxdescentrate, minfinalapproachspeed, maxfinalapproachspeed,
        minaccel, maxaccel, [manufacturer], [minrollangle], [maxrollangle],
        [minrollrate], [maxrollrate], [minclimbrate], [maxclimbrate]
    """
    (plane_type, category, minspeed, maxspeed, minturnrate, maxturnrate, mindescentrate, maxdescentrate,
     minapproach, maxapproach, minaccel, maxaccel, manufacturer, minrollangle, maxrollangle,
     minrollrate, maxrollrate, minclimbrate, maxclimbrate) = _pad(data, PLANE_TYPE_FIELDS, "Plane type")

    if not plane_type:
        raise FormatSyntaxError("Aircraft type is required.")
    descent_rate = _range(mindescentrate, maxdescentrate, "descentrate")
    return Aircraft(
        type=plane_type,
        category=WakeCategory.from_code(category or ""),
        speed=_range(minspeed, maxspeed, "speed"),
        approach_speed=_range(minapproach, maxapproach, "finalapproachspeed"),
        acceleration=_range(minaccel, maxaccel, "accel"),
        descent_rate=descent_rate,
        turn_rate=_range(minturnrate, maxturnrate, "turnrate"),
        bank_angle=_optional_range(minrollangle, maxrollangle, "rollangle", (25, 30)),
        bank_rate=_optional_range(minrollrate, maxrollrate, "rollrate", (3, 5)),
        climb_rate=_optional_range(minclimbrate, maxclimbrate, "climbrate",
                                   (descent_rate[0] * 2, descent_rate[1] * 2)),
        manufacturer=manufacturer,
    )


def parse_color(data: str) -> Color:
    """
    Parse a line colour: ``airspace``, ``coast``, ``runway``, ``r, g, b`` or a hex value.

    Raises:
        FormatSyntaxError: If the value is none of the above
        FormatRangeError: If a channel or hex value is out of range
    """
    value = data.strip()
    if value.lower() in {color.value for color in LineColor}:
        return LineColor(value.lower())

    match = HEX_COLOR.match(value)
    if match is not None:
        return RGB.from_hex(int(match.group(1), 16))

    channels = split_fields(value)
    if len(channels) != 3 or not all(SIGNED_NUMBER.match(c) and "." not in c for c in channels):
        raise FormatSyntaxError(f"Invalid value for line color: {data}")
    return RGB(*(int(c) for c in channels))


def parse_line(ctx: ParseContext, data: Sequence[str]) -> Polyline:
    """
    Parse a background line: an optional leading colour followed by points.

    The first element is a colour unless it has exactly one comma (a point).
    """
    if not data:
        raise FormatSyntaxError("Line must have at least one element.")
    color: Color = LineColor.AIRSPACE
    points = list(data)
    if data[0].count(FIELD_SEPARATOR) != 1:
        color = parse_color(data[0])
        points = points[1:]
    if not points:
        raise FormatSyntaxError("Line must have at least one point.")
    return Polyline([parse_point(ctx, point) for point in points], color)


def parse_configuration_entry(data: str) -> Tuple[float, str, RunwayUsage]:
    """
    Parse ``score, runwayId, keywords...``.

    Keywords (``land``, ``start``, ``rev``, ``int``, ``track``, ``nosid``)
    may appear in any order and in any field after the id, separated by
    commas or spaces; a number among them is the initial heading.
    ``rev`` selects the opposite end of the runway.
    """
    fields = split_fields(data)
    score = parse_number(fields[0], "Runway configuration score")
    runway_id = fields[1] if len(fields) > 1 else ""
    if not runway_id:
        raise FormatSyntaxError("Runway configuration runway id is required.")

    keywords = set()
    initial_heading = None
    for token in (t for field_ in fields[2:] for t in field_.split()):
        lowered = token.lower()
        if lowered in CONFIGURATION_KEYWORDS:
            keywords.add(lowered)
        elif SIGNED_NUMBER.match(token):
            if initial_heading is not None:
                raise FormatSyntaxError(f"Runway configuration has more than one initial heading: {data}")
            initial_heading = float(token)
        else:
            raise FormatSyntaxError(f"Unknown runway configuration keyword: {token}")

    if "rev" in keywords:
        runway_id += REVERSE_SUFFIX
    usage = RunwayUsage(
        land="land" in keywords,
        depart="start" in keywords,
        intersection="int" in keywords,
        backtrack="track" in keywords,
        initial_heading=initial_heading,
        no_sid="nosid" in keywords,
    )
    return score, runway_id, usage


def _check_display_name(ctx: ParseContext, kind: str, name: str) -> None:
    if len(name) > MAX_DISPLAY_NAME:
        ctx.warn(f"{kind} {name} name is longer than {MAX_DISPLAY_NAME} characters. "
                 f"Display limited to {MAX_DISPLAY_NAME} characters in-game.")


def parse_departure_route(ctx: ParseContext, route: Sequence[str]) -> DepartureRoute:
    """
    Parse a departure route list.

    The first element is ``name, [pronunciation]``; the rest are points.
    The first point may carry the initial climb as a third field.
    """
    if len(route) < 2:
        raise FormatSyntaxError("Departure route must have a name and at least one point.")
    name, pronunciation = _pad(route[0], 2, "Departure name")
    if not name:
        raise FormatSyntaxError("Departure name is required and must be a non-empty string.")
    _check_display_name(ctx, "Departure", name)

    latitude, longitude, climb = _pad(route[1], 3, "Departure point")
    points = [parse_coordinates(ctx, latitude, longitude)]
    points.extend(parse_point(ctx, point) for point in route[2:])
    initial_climb = parse_optional_number(climb, "Departure initialclimb")
    return DepartureRoute(name, pronunciation, points, initial_climb)


def parse_approach_point(ctx: ParseContext, data: str) -> ApproachPoint:
    """Parse ``lat, lon, [altitude], [speed]``; "0" means no constraint."""
    latitude, longitude, altitude, speed = _pad(data, 4, "Approach point")
    return ApproachPoint.from_point(
        parse_coordinates(ctx, latitude, longitude),
        parse_optional_number(altitude, "Approach point altitude", zero_is_default=True),
        parse_optional_number(speed, "Approach point speed", zero_is_default=True),
    )


def parse_termination(data: str) -> Termination:
    """
    Parse how an arrival ends.

    Format:
        ``end`` (vectors), ``end, hold``, ``end, heading`` or
        ``distance, [altitude], [speed]`` (ILS intercept)
    """
    first, second, third = _pad(data, 3, "Arrival termination")
    if first == TERMINATION_END:
        if third is not None:
            raise FormatSyntaxError(f"Arrival end termination has too many fields: {data}")
        if second is None:
            return VectorTermination()
        if second == TERMINATION_HOLD:
            return HoldTermination()
        return VectorTermination(parse_number(second, "Arrival end heading"))
    return IlsInterceptTermination(
        parse_number(first, "Arrival ILS intercept distance"),
        parse_optional_number(second, "Arrival ILS intercept max altitude", zero_is_default=True),
        parse_optional_number(third, "Arrival ILS intercept max speed", zero_is_default=True),
    )


def parse_arrival_route(ctx: ParseContext, route: Sequence[str]) -> ArrivalRoute:
    """
    Parse an arrival route list.

    The first element is ``inboundheading, name, [pronunciation]``
    (heading "0" means none), the last is the termination and everything
    in between are approach points.
    """
    if len(route) < 3:
        raise FormatSyntaxError("Arrival route must have a header, at least one point and a termination.")
    heading, name, pronunciation = _pad(route[0], 3, "Arrival header")
    inbound_bearing = parse_optional_number(heading, "Arrival inboundheading", zero_is_default=True)
    if not name:
        raise FormatSyntaxError("Arrival name is required and must be a non-empty string.")
    _check_display_name(ctx, "Arrival", name)

    points = [parse_approach_point(ctx, point) for point in route[1:-1]]
    return ArrivalRoute(inbound_bearing, name, pronunciation, points, parse_termination(route[-1]))


def parse_named_pair(data: str, what: str) -> Tuple[str, Optional[str]]:
    """Parse ``name, [pronunciation]`` style pairs."""
    name, second = _pad(data, 2, what)
    if not name:
        raise FormatSyntaxError(f"{what} must be in the format: name, pronunciation")
    return name, second


def parse_callsigns(data: str) -> Tuple[str, str]:
    """Parse the ``approach callsign, departure callsign`` pair."""
    approach, departure = _pad(data, 2, "Airspace name")
    if not approach or not departure:
        raise FormatSyntaxError("Airspace name must be in the format: approach callsign, departure callsign")
    return approach, departure


def parse_draw_degrees(data: str) -> Tuple[float, float]:
    """Parse the ``start, end`` bearings of a circle's visible arc."""
    fields = split_fields(data)
    if len(fields) != 2:
        raise FormatSyntaxError(f"Circle area drawdegrees must be in the format: start, end; got {data}")
    return parse_number(fields[0], "Circle area drawdegrees start"), parse_number(fields[1], "Circle area drawdegrees end")
