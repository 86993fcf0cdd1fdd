"""
Tests for the record-level field parsers.
"""

import pytest

from atc_airspace.models.airport import CardinalDirection
from atc_airspace.models.airspace import BelowAltitude, OnLocalizer, WithinRadius
from atc_airspace.models.area import RGB, LineColor
from atc_airspace.models.beacon import TurnDirection
from atc_airspace.models.navpoint import SidPoint
from atc_airspace.models.procedure import HoldTermination, IlsInterceptTermination, VectorTermination
from atc_airspace.models.runway import LocalizerFix
from atc_airspace.models.validation import FormatRangeError, FormatSyntaxError
from atc_airspace.models.wake import Separation, WakeCategory
from atc_airspace.parsers.fields import (
    parse_airline,
    parse_approach_point,
    parse_arrival_route,
    parse_beacon,
    parse_callsigns,
    parse_color,
    parse_configuration_entry,
    parse_coordinates,
    parse_departure_route,
    parse_directions,
    parse_draw_degrees,
    parse_entry_point,
    parse_handoff,
    parse_line,
    parse_number,
    parse_optional_number,
    parse_plane_type,
    parse_point,
    parse_runway,
    parse_runway_reference,
    parse_sid,
    parse_speed_restriction,
    parse_termination,
    parse_wake_separation,
)

WAKE_ROW = '3/0, 4/100, 5/120, 5/140, 6/160, 8/180'


class TestNumbers:
    """Test cases for numeric fields."""

    def test_parse_number(self):
        assert parse_number("12.5", "Value") == 12.5
        assert parse_number("-3", "Value") == -3

    @pytest.mark.parametrize("value", [None, "", "abc", "nan", "inf"])
    def test_invalid_number(self, value):
        with pytest.raises(FormatSyntaxError, match="Value"):
            parse_number(value, "Value")

    def test_optional_number(self):
        assert parse_optional_number(None, "Value", default=3) == 3
        assert parse_optional_number("0", "Value", default=3) == 0
        assert parse_optional_number("0", "Value", default=3, zero_is_default=True) == 3
        assert parse_optional_number("2.8", "Value", default=3, zero_is_default=True) == 2.8


class TestCoordinates:
    """Test cases for coordinate pairs."""

    def test_dms(self, ctx):
        point = parse_coordinates(ctx, "512930N", "0011311W")
        assert point.latitude == pytest.approx(51.4917, abs=1e-4)
        assert point.longitude == pytest.approx(-1.2197, abs=1e-4)

    def test_decimal_mode(self, decimal_ctx):
        point = parse_coordinates(decimal_ctx, "N51.5", "W0.12")
        assert point.latitude == 51.5
        assert point.longitude == -0.12
        point = parse_coordinates(decimal_ctx, "-33.9", "151.2")
        assert point.latitude == -33.9
        assert point.longitude == 151.2

    def test_decimal_rejected_without_flag(self, ctx):
        with pytest.raises(FormatSyntaxError, match="decimaldegrees"):
            parse_coordinates(ctx, "51.5", "-0.12")

    def test_missing_coordinate(self, ctx):
        with pytest.raises(FormatSyntaxError, match="Longitude"):
            parse_coordinates(ctx, "512930N", None)

    def test_out_of_range(self, decimal_ctx):
        with pytest.raises(FormatRangeError):
            parse_coordinates(decimal_ctx, "91.0", "0.0")

    def test_point_record(self, ctx):
        assert parse_point(ctx, "512930N, 0011311W") == parse_coordinates(ctx, "512930N", "0011311W")
        with pytest.raises(FormatSyntaxError, match="at most 2"):
            parse_point(ctx, "512930N, 0011311W, 3000")


class TestBeacon:
    """Test cases for beacon records."""

    def test_without_hold(self, ctx):
        beacon = parse_beacon(ctx, "OCK, 512018N, 0002659W")
        assert beacon.name == "OCK"
        assert beacon.holding_pattern is None
        assert beacon.pronunciation is None

    def test_zero_hold_means_no_hold(self, ctx):
        assert parse_beacon(ctx, "OCK, 512018N, 0002659W, 0, Ockham").holding_pattern is None

    def test_left_hold(self, ctx):
        beacon = parse_beacon(ctx, "BIG, 511950N, 0000210E, -302, Biggin")
        assert beacon.holding_pattern.inbound_course == 302
        assert beacon.holding_pattern.turn_direction == TurnDirection.LEFT
        assert beacon.pronunciation == "Biggin"

    def test_right_hold(self, ctx):
        beacon = parse_beacon(ctx, "LAM, 513846N, 0000906E, 264")
        assert beacon.holding_pattern.turn_direction == TurnDirection.RIGHT

    def test_missing_name(self, ctx):
        with pytest.raises(FormatSyntaxError, match="Beacon name"):
            parse_beacon(ctx, ", 512018N, 0002659W")

    def test_too_many_fields(self, ctx):
        with pytest.raises(FormatSyntaxError, match="at most 5"):
            parse_beacon(ctx, "OCK, 512018N, 0002659W, 0, Ockham, extra")


class TestRunway:
    """Test cases for runway records."""

    def test_minimal_record(self, ctx):
        runway = parse_runway(ctx, "27L, 27L, 512839.63N, 0002559.82W, 270, 12799")
        assert runway.id == "27L"
        assert runway.length == 12799
        assert runway.glideslope == 3
        assert runway.localizer == 270
        assert runway.opposite_localizer == 90
        assert runway.localizer_fix is None
        assert runway.tower_frequency == 0

    def test_full_record(self, ctx):
        runway = parse_runway(
            ctx,
            "27L, 27L, 512839.63N, 0002559.82W, 270, 12799, 1000, 300, 83, 0, 0, 3.2, 92, "
            "LON, 8, , , 118.5, Heathrow Tower")
        assert runway.displaced == 1000
        assert runway.opposite_displaced == 300
        assert runway.elevation == 83
        assert runway.glideslope == 3
        assert runway.localizer == 270
        assert runway.opposite_glideslope == 3.2
        assert runway.opposite_localizer == 92
        assert runway.localizer_fix == LocalizerFix("LON", 8)
        assert runway.opposite_localizer_fix is None
        assert runway.tower_frequency == 118.5
        assert runway.tower_pronunciation == "Heathrow Tower"

    def test_too_many_fields(self, ctx):
        record = "27L, 27L, 512839.63N, 0002559.82W, 270, 12799" + ", 0" * 14
        with pytest.raises(FormatSyntaxError, match="at most 19"):
            parse_runway(ctx, record)

    def test_non_positive_length(self, ctx):
        with pytest.raises(FormatRangeError, match="length"):
            parse_runway(ctx, "27L, 27L, 512839.63N, 0002559.82W, 270, 0")

    def test_beacon_without_distance(self, ctx):
        with pytest.raises(FormatSyntaxError, match="distance"):
            parse_runway(ctx, "27L, 27L, 512839.63N, 0002559.82W, 270, 12799, , , , , , , , LON")

    def test_invalid_name(self, ctx):
        with pytest.raises(FormatSyntaxError):
            parse_runway(ctx, "27L, 27X, 512839.63N, 0002559.82W, 270, 12799")

    def test_reference(self):
        assert parse_runway_reference("27L") == "27L"
        assert parse_runway_reference("27L, rev") == "27Lrev"
        with pytest.raises(FormatSyntaxError):
            parse_runway_reference("27L, back")


class TestAirportRecords:
    """Test cases for SID, airline and entry point records."""

    def test_sid_name(self, ctx):
        assert parse_sid(ctx, "OCK") == "OCK"

    def test_sid_point(self, ctx):
        sid = parse_sid(ctx, "BPK, 513000N, 0001000W, Brookmans Park")
        assert isinstance(sid, SidPoint)
        assert sid.name == "BPK"
        assert sid.pronunciation == "Brookmans Park"

    def test_directions(self):
        assert parse_directions("NESW") == frozenset(CardinalDirection)
        assert parse_directions("nw") == {CardinalDirection.NORTH, CardinalDirection.WEST}
        assert parse_directions("090/260") == {90.0, 260.0}

    def test_invalid_directions(self):
        with pytest.raises(FormatRangeError):
            parse_directions("400")
        with pytest.raises(FormatSyntaxError):
            parse_directions("X")
        with pytest.raises(FormatSyntaxError):
            parse_directions("/")

    def test_airline(self):
        airline = parse_airline("BAW, 10, A320/B772, Speedbird, NESW")
        assert airline.name == "BAW"
        assert airline.amount == 10
        assert airline.types == ("A320", "B772")
        assert airline.pronunciation == "Speedbird"
        assert len(airline.directions) == 4

    def test_airline_defaults(self):
        airline = parse_airline("RRR, 1, C130")
        assert airline.directions == frozenset()
        assert airline.pronunciation is None

    def test_invalid_airline(self):
        with pytest.raises(FormatSyntaxError, match="amount"):
            parse_airline("BAW, ten, A320")
        with pytest.raises(FormatSyntaxError, match="plane type"):
            parse_airline("BAW, 10")

    def test_entry_point(self):
        entry = parse_entry_point("90, BIG, 8000")
        assert (entry.bearing, entry.beacon, entry.altitude) == (90, "BIG", 8000)
        assert parse_entry_point("90, BIG, 0").altitude is None
        assert parse_entry_point("270").beacon is None


class TestPlaneType:
    """Test cases for aircraft performance records."""

    def test_defaults(self):
        aircraft = parse_plane_type("A320, 4, 140, 250, 2.8, 3.2, 1200, 1800, 130, 145, 1.0, 1.5, Airbus")
        assert aircraft.type == "A320"
        assert aircraft.category == WakeCategory.UPPER_MEDIUM
        assert aircraft.speed == (140, 250)
        assert aircraft.approach_speed == (130, 145)
        assert aircraft.bank_angle == (25, 30)
        assert aircraft.bank_rate == (3, 5)
        assert aircraft.climb_rate == (2400, 3600)
        assert aircraft.manufacturer == "Airbus"

    def test_all_fields(self):
        aircraft = parse_plane_type(
            "B744, 2, 150, 290, 2.5, 3.0, 1500, 2000, 140, 160, 0.8, 1.2, Boeing, 20, 25, 2, 4, 1800, 2500")
        assert aircraft.category == WakeCategory.UPPER_HEAVY
        assert aircraft.bank_angle == (20, 25)
        assert aircraft.bank_rate == (2, 4)
        assert aircraft.climb_rate == (1800, 2500)

    def test_invalid_category(self):
        with pytest.raises(FormatRangeError, match="Wake category"):
            parse_plane_type("A320, 7, 140, 250, 2.8, 3.2, 1200, 1800, 130, 145, 1.0, 1.5")

    def test_missing_performance(self):
        with pytest.raises(FormatSyntaxError, match="maxaccel"):
            parse_plane_type("A320, 4, 140, 250, 2.8, 3.2, 1200, 1800, 130, 145, 1.0")


class TestAirspaceRecords:
    """Test cases for airspace level records."""

    def test_callsigns(self):
        assert parse_callsigns("London, Heathrow") == ("London", "Heathrow")
        with pytest.raises(FormatSyntaxError):
            parse_callsigns("London")

    def test_handoff(self):
        handoff = parse_handoff("90, London Control, London Control, 127.1")
        assert handoff.bearing == 90
        assert handoff.frequency == 127.1
        assert parse_handoff("90, London Control, London Control").frequency is None
        with pytest.raises(FormatSyntaxError, match="callsign"):
            parse_handoff("90")

    def test_speed_restriction(self):
        on_localizer = OnLocalizer(4, 160)
        restriction = parse_speed_restriction("0, 300, 10000, 250", on_localizer)
        assert restriction.within_radius == WithinRadius(0, 300)
        assert restriction.below_altitude == BelowAltitude(10000, 250)
        assert restriction.on_localizer == on_localizer

    def test_speed_restriction_without_altitude(self):
        restriction = parse_speed_restriction("10, 250", OnLocalizer(4, 160))
        assert restriction.below_altitude == BelowAltitude(0, 0)
        with pytest.raises(FormatSyntaxError, match="speed at altitude"):
            parse_speed_restriction("10, 250, 10000", OnLocalizer(4, 160))

    def test_wake_separation(self):
        wake = parse_wake_separation([WAKE_ROW] * 6)
        assert wake.separation(WakeCategory.LIGHT, WakeCategory.LIGHT) == Separation(8, 180)

    def test_wake_separation_errors(self):
        with pytest.raises(FormatSyntaxError, match="exactly 6 rows"):
            parse_wake_separation([WAKE_ROW] * 5)
        with pytest.raises(FormatSyntaxError, match="6 categories"):
            parse_wake_separation([WAKE_ROW] * 5 + ['3/0, 4/100'])
        with pytest.raises(FormatSyntaxError, match="distance/interval"):
            parse_wake_separation([WAKE_ROW] * 5 + ['3-0, 4/100, 5/120, 5/140, 6/160, 8/180'])

    def test_draw_degrees(self):
        assert parse_draw_degrees("90, 270") == (90, 270)
        with pytest.raises(FormatSyntaxError):
            parse_draw_degrees("90")


class TestLines:
    """Test cases for colours and background lines."""

    @pytest.mark.parametrize("data,expected", [
        ("coast", LineColor.COAST),
        ("Runway", LineColor.RUNWAY),
        ("airspace", LineColor.AIRSPACE),
        ("#ff8800", RGB(255, 136, 0)),
        ("0x00FF00", RGB(0, 255, 0)),
        ("255, 0, 0", RGB(255, 0, 0)),
    ])
    def test_color(self, data, expected):
        assert parse_color(data) == expected

    @pytest.mark.parametrize("data", ["red", "255, 0", "1.5, 0, 0", "#gg0000"])
    def test_invalid_color(self, data):
        with pytest.raises(FormatSyntaxError):
            parse_color(data)

    def test_color_out_of_range(self):
        with pytest.raises(FormatRangeError):
            parse_color("256, 0, 0")

    def test_line_default_color(self, ctx):
        line = parse_line(ctx, ['512000N, 0003000W', '513000N, 0003000W'])
        assert line.color == LineColor.AIRSPACE
        assert len(line) == 2

    def test_line_with_color(self, ctx):
        line = parse_line(ctx, ['0, 0, 255', '512000N, 0003000W'])
        assert line.color == RGB(0, 0, 255)
        assert len(line) == 1

    def test_line_without_points(self, ctx):
        with pytest.raises(FormatSyntaxError):
            parse_line(ctx, ['coast'])
        with pytest.raises(FormatSyntaxError):
            parse_line(ctx, [])


class TestConfigurationEntry:
    """Test cases for runway configuration entries."""

    def test_keywords(self):
        score, runway_id, usage = parse_configuration_entry("1, 27L, land start")
        assert score == 1
        assert runway_id == "27L"
        assert usage.land and usage.depart
        assert not usage.intersection
        assert usage.initial_heading is None

    def test_reverse_and_heading(self):
        score, runway_id, usage = parse_configuration_entry("0.5, 27L, rev, start, 280")
        assert score == 0.5
        assert runway_id == "27Lrev"
        assert usage.depart and not usage.land
        assert usage.initial_heading == 280

    def test_all_flags_any_order(self):
        _, _, usage = parse_configuration_entry("1, 09R, track nosid, int START")
        assert usage.backtrack and usage.no_sid and usage.intersection and usage.depart

    def test_invalid_entries(self):
        with pytest.raises(FormatSyntaxError, match="keyword"):
            parse_configuration_entry("1, 27L, fly")
        with pytest.raises(FormatSyntaxError, match="initial heading"):
            parse_configuration_entry("1, 27L, start 90 180")
        with pytest.raises(FormatSyntaxError, match="runway id"):
            parse_configuration_entry("1")
        with pytest.raises(FormatSyntaxError, match="score"):
            parse_configuration_entry("high, 27L, land")


class TestRoutes:
    """Test cases for departure and arrival routes."""

    def test_departure(self, ctx):
        route = parse_departure_route(
            ctx, ['BPK7F, Brookmans Park seven foxtrot', '512830N, 0003000W, 6000', '513000N, 0003500W'])
        assert route.name == "BPK7F"
        assert route.pronunciation == "Brookmans Park seven foxtrot"
        assert len(route.route) == 2
        assert route.initial_climb == 6000
        assert ctx.warnings == []

    def test_departure_without_climb(self, ctx):
        assert parse_departure_route(ctx, ['BPK7F', '512830N, 0003000W']).initial_climb is None

    def test_departure_needs_a_point(self, ctx):
        with pytest.raises(FormatSyntaxError):
            parse_departure_route(ctx, ['BPK7F'])

    def test_long_name_warns(self, ctx):
        parse_departure_route(ctx, ['BROOKMANS7F', '512830N, 0003000W'])
        assert len(ctx.warnings) == 1
        assert "BROOKMANS7F" in ctx.warnings[0]

    def test_approach_point(self, ctx):
        point = parse_approach_point(ctx, '512000N, 0001000E, 7000, 220')
        assert (point.altitude, point.speed) == (7000, 220)
        point = parse_approach_point(ctx, '512000N, 0001000E, 0, 0')
        assert (point.altitude, point.speed) == (None, None)

    @pytest.mark.parametrize("data,expected", [
        ("end", VectorTermination()),
        ("end, hold", HoldTermination()),
        ("end, 45", VectorTermination(45)),
        ("10, 3000, 180", IlsInterceptTermination(10, 3000, 180)),
        ("8", IlsInterceptTermination(8)),
        ("8, 0, 0", IlsInterceptTermination(8)),
    ])
    def test_termination(self, data, expected):
        assert parse_termination(data) == expected

    def test_invalid_termination(self):
        with pytest.raises(FormatSyntaxError):
            parse_termination("end, hold, 3")
        with pytest.raises(FormatSyntaxError):
            parse_termination("end, left")
        with pytest.raises(FormatSyntaxError):
            parse_termination("finish")

    def test_arrival(self, ctx):
        route = parse_arrival_route(
            ctx, ['270, BIG1A, Biggin one alpha', '512000N, 0001000E, 7000, 220', '10, 3000, 180'])
        assert route.inbound_bearing == 270
        assert route.name == "BIG1A"
        assert len(route.route) == 1
        assert route.termination == IlsInterceptTermination(10, 3000, 180)

    def test_arrival_without_inbound_heading(self, ctx):
        route = parse_arrival_route(ctx, ['0, OCK1A', '512018N, 0002659W', 'end, hold'])
        assert route.inbound_bearing is None
        assert route.pronunciation is None

    def test_arrival_needs_termination(self, ctx):
        with pytest.raises(FormatSyntaxError):
            parse_arrival_route(ctx, ['0, OCK1A', '512018N, 0002659W'])
