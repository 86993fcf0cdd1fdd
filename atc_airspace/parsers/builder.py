"""
Domain graph builder.

Consumes a validated AirspaceFormat and builds the Airspace bottom-up:
beacons and the centre first, then the primary airport, secondary
airports, areas, configurations, routes, aircraft and background lines.
Every runway and beacon reference is resolved through the airspace
registry; a dangling or duplicated reference aborts the build.
"""

from typing import List, Type, Union
import logging

from ..models.airport import Airport, PrimaryAirport, SecondaryAirport
from ..models.airspace import Airspace, AirspaceOptions
from ..models.area import Area, CircleArea, Polyline, PolygonArea, RadiusBoundary
from ..models.beacon import Beacon
from ..models.navpoint import NamedPoint, SidPoint
from ..models.procedure import Arrival, Departure
from ..models.runway_configuration import RunwayConfiguration
from .context import ParseContext
from .fields import (
    FIELD_SEPARATOR,
    parse_airline,
    parse_arrival_route,
    parse_beacon,
    parse_callsigns,
    parse_configuration_entry,
    parse_departure_route,
    parse_draw_degrees,
    parse_entry_point,
    parse_handoff,
    parse_line,
    parse_localizer_speed,
    parse_named_pair,
    parse_plane_type,
    parse_point,
    parse_runway,
    parse_sid,
    parse_speed_restriction,
    parse_wake_separation,
)
from .format import (
    PLANE_TYPES_SECTION,
    AirportSection,
    AirspaceFormat,
    AirspaceSection,
    ApproachSection,
    AreaSection,
    CircleAreaSection,
    ConfigurationSection,
    DepartureSection,
    SecondaryAirportSection,
)

logger = logging.getLogger(__name__)


class AirspaceBuilder:
    """
    Build an Airspace from a validated AirspaceFormat.

    Failures carry the ``section.key`` they were raised for.
    """

    def __init__(self, ctx: ParseContext):
        self.ctx = ctx

    def build(self, fmt: AirspaceFormat) -> Airspace:
        airspace = self.build_airspace(fmt.airspace)

        primary = self.build_airport(airspace, fmt.primary_airport, PrimaryAirport)
        with self.ctx.at(f"{fmt.primary_airport.key}.runways"):
            airspace.set_primary_airport(primary)

        for secondary in fmt.secondary_airports:
            self.add_secondary_airport(airspace, secondary)

        for area in fmt.areas:
            airspace.add_area(self.build_area(area))

        for configuration in fmt.configurations:
            airspace.add_configuration(self.build_configuration(airspace, configuration))

        for departure_section in fmt.departures.values():
            for departure in self.build_departures(airspace, departure_section):
                airspace.add_departure(departure)

        for approach_section in fmt.approaches.values():
            for arrival in self.build_arrivals(airspace, approach_section):
                airspace.add_arrival(arrival)

        with self.ctx.at(f"{PLANE_TYPES_SECTION}.types"):
            for plane_type in fmt.plane_types:
                airspace.add_aircraft(parse_plane_type(plane_type))

        for line in fmt.lines:
            with self.ctx.at(line.key):
                airspace.draw(parse_line(self.ctx, line.data))

        logger.info(f"Built airspace {primary.code} ({primary.name}): {airspace.summary()}")
        return airspace

    def build_airspace(self, section: AirspaceSection) -> Airspace:
        """Create the airspace with its options, beacons and centre."""
        ctx = self.ctx

        with ctx.at("airspace.name"):
            approach_callsign, departure_callsign = parse_callsigns(section.callsigns)
        with ctx.at("airspace.center"):
            center = parse_point(ctx, section.center)

        if section.boundary is not None:
            with ctx.at("airspace.boundary"):
                boundary: Union[Polyline, RadiusBoundary] = Polyline(
                    [parse_point(ctx, point) for point in section.boundary])
        else:
            boundary = RadiusBoundary(section.radius)

        with ctx.at("airspace.beacons"):
            beacons = [parse_beacon(ctx, beacon) for beacon in section.beacons]
        with ctx.at("airspace.handoff"):
            handoffs = [parse_handoff(handoff) for handoff in section.handoff or []]
        with ctx.at("airspace.localizerspeed"):
            on_localizer = parse_localizer_speed(section.localizer_speed)
        with ctx.at("airspace.speedrestriction"):
            speed_restriction = parse_speed_restriction(section.speed_restriction, on_localizer)
        with ctx.at("airspace.wake"):
            wake_separation = parse_wake_separation(section.wake) if section.wake is not None else None

        options = AirspaceOptions(
            center=center,
            elevation=section.elevation,
            floor_altitude=section.floor,
            descent_altitude=section.descent_altitude,
            departure_diversion_altitude=section.diversion_altitude,
            separation_distance=section.separation,
            us_pronunciation=section.us_pronunciation,
            approach_callsign=approach_callsign,
            departure_callsign=departure_callsign,
            beacons=beacons,
            boundary=boundary,
            transitional_altitude=section.transitional_altitude,
            ceiling_altitude=section.ceiling,
            departure_altitude=section.above,
            departure_frequencies=handoffs,
            speed_restriction=speed_restriction,
            automatic_approach=section.automatic,
            strict_entrypoints=section.strict_spawn,
            callsign_letters_frequency=section.letters,
            metric=section.metric,
            altimeter_in_hg=section.inches,
            magnetic_variance=section.magnetic_variance,
            zoom=section.zoom,
            wake_separation=wake_separation,
        )
        with ctx.at("airspace.beacons"):
            airspace = Airspace(options)
        logger.debug(f"Created airspace with {len(airspace.beacons)} beacons")
        return airspace

    def build_airport(self, airspace: Airspace, section: AirportSection,
                      airport_type: Type[Airport], **kwargs) -> Airport:
        """Build an airport with its runways, SIDs, airlines and entry points."""
        ctx = self.ctx
        key = section.key

        with ctx.at(f"{key}.name"):
            name, pronunciation = parse_named_pair(section.name, "Airport name")
        airport = airport_type(
            code=section.code,
            name=name,
            pronunciation=pronunciation,
            initial_climb=section.climb_altitude,
            **kwargs,
        )

        with ctx.at(f"{key}.runways"):
            airport.add_runways(*(parse_runway(ctx, runway) for runway in section.runways))
        with ctx.at(f"{key}.sids"):
            airport.add_sids(*(self._resolve_sid(airspace, sid) for sid in section.sids))
        with ctx.at(f"{key}.airlines"):
            airport.add_airlines(*(parse_airline(airline) for airline in section.airlines))
        with ctx.at(f"{key}.entrypoints"):
            entry_points = [parse_entry_point(entry_point) for entry_point in section.entry_points]
            for entry_point in entry_points:
                if entry_point.beacon is not None:
                    self._resolve_point(airspace, entry_point.beacon)
            airport.add_entry_points(*entry_points)

        logger.debug(f"Built airport {airport}")
        return airport

    def _resolve_sid(self, airspace: Airspace, data: str) -> SidPoint:
        sid = parse_sid(self.ctx, data)
        if isinstance(sid, str):
            return airspace.find_beacon(sid)
        airspace.add_point(sid)
        return sid

    @staticmethod
    def _resolve_point(airspace: Airspace, name: str) -> NamedPoint:
        if airspace.registry.has_point(name):
            return airspace.registry.get_point(name)
        return airspace.find_beacon(name)

    def add_secondary_airport(self, airspace: Airspace, section: SecondaryAirportSection) -> SecondaryAirport:
        with self.ctx.at(f"{section.key}.inboundbeacon"):
            inbound_beacon = airspace.find_beacon(section.inbound_beacon)
        airport = self.build_airport(airspace, section.airport, SecondaryAirport,
                                     flow=section.flow, inbound_beacon=inbound_beacon)
        with self.ctx.at(section.key):
            airspace.add_secondary_airport(airport)
        return airport

    def build_area(self, section: AreaSection) -> Area:
        ctx = self.ctx
        key = section.key

        label = None
        if section.labelpos is not None:
            with ctx.at(f"{key}.labelpos"):
                label = parse_point(ctx, section.labelpos)

        if isinstance(section, CircleAreaSection):
            with ctx.at(f"{key}.position"):
                center = parse_point(ctx, section.position)
            visible_arc = None
            if section.drawdegrees is not None:
                with ctx.at(f"{key}.drawdegrees"):
                    visible_arc = parse_draw_degrees(section.drawdegrees)
            with ctx.at(f"{key}.radius"):
                return CircleArea(section.altitude, center, section.radius, label, section.name, visible_arc)

        with ctx.at(f"{key}.points"):
            vertices = [parse_point(ctx, point) for point in section.points]
            return PolygonArea(section.altitude, vertices, label, section.name, section.draw)

    def build_configuration(self, airspace: Airspace, section: ConfigurationSection) -> RunwayConfiguration:
        configuration = RunwayConfiguration()
        with self.ctx.at(section.key):
            for entry in section.entries:
                score, runway_id, usage = parse_configuration_entry(entry)
                configuration.add(score, airspace.get_runway(runway_id), usage)
        return configuration

    def build_departures(self, airspace: Airspace, section: DepartureSection) -> List[Departure]:
        with self.ctx.at(f"{section.key}.runway"):
            runway = airspace.get_runway(section.runway)

        departures = []
        for route_key, route in section.routes.items():
            with self.ctx.at(f"{section.key}.{route_key}"):
                parsed = parse_departure_route(self.ctx, route)
            departures.append(Departure(parsed.name, parsed.pronunciation, runway, parsed.route, parsed.initial_climb))
        return departures

    def _resolve_approach_beacon(self, airspace: Airspace, data: str) -> Beacon:
        """An inline beacon record is registered as a point; a bare name must be an airspace beacon."""
        if FIELD_SEPARATOR in data:
            beacon = parse_beacon(self.ctx, data)
            airspace.add_point(beacon)
            return beacon
        return airspace.find_beacon(data)

    def build_arrivals(self, airspace: Airspace, section: ApproachSection) -> List[Arrival]:
        with self.ctx.at(f"{section.key}.runway"):
            runway = airspace.get_runway(section.runway)
        with self.ctx.at(f"{section.key}.beacon"):
            beacon = self._resolve_approach_beacon(airspace, section.beacon)

        arrivals = []
        for route_key, route in section.routes.items():
            with self.ctx.at(f"{section.key}.{route_key}"):
                parsed = parse_arrival_route(self.ctx, route)
            arrivals.append(Arrival(
                name=parsed.name,
                pronunciation=parsed.pronunciation,
                runways=[runway],
                beacon=beacon,
                route=parsed.route,
                termination=parsed.termination,
                inbound_bearing=parsed.inbound_bearing,
            ))
        return arrivals
