"""
Data models for the atc_airspace library.

This package contains the domain graph built from an airspace
description: points and beacons with their geodesy, runways, routes,
areas, airports, the registry that keeps names unique, and the typed
failures raised while building them.
"""

from .validation import (
    ErrorKind,
    AirspaceFormatError,
    FormatSyntaxError,
    FormatRangeError,
    NotRegisteredError,
    CollisionError,
    ParseResult,
)
from .navpoint import Point, NamedPoint, SidPoint, ApproachPoint, parse_dms
from .beacon import Beacon, HoldingPattern, TurnDirection
from .runway import Runway, LocalizerFix
from .registry import Registry, RegistryView
from .airport import Airport, PrimaryAirport, SecondaryAirport, Airline, EntryPoint, CardinalDirection
from .procedure import (
    Departure,
    Arrival,
    VectorTermination,
    HoldTermination,
    IlsInterceptTermination,
    TerminationKind,
)
from .area import PolygonArea, CircleArea, Polyline, LineColor, RGB, RadiusBoundary
from .wake import WakeCategory, WakeSeparation, Separation
from .aircraft import Aircraft
from .runway_configuration import RunwayConfiguration, RunwayUsage
from .airspace import (
    Airspace,
    AirspaceOptions,
    SpeedRestriction,
    WithinRadius,
    BelowAltitude,
    OnLocalizer,
    FrequencyHandoff,
)

__all__ = [
    # Failures
    'ErrorKind',
    'AirspaceFormatError',
    'FormatSyntaxError',
    'FormatRangeError',
    'NotRegisteredError',
    'CollisionError',
    'ParseResult',
    # Geography
    'Point',
    'NamedPoint',
    'SidPoint',
    'ApproachPoint',
    'parse_dms',
    'Beacon',
    'HoldingPattern',
    'TurnDirection',
    # Airports and runways
    'Runway',
    'LocalizerFix',
    'Airport',
    'PrimaryAirport',
    'SecondaryAirport',
    'Airline',
    'EntryPoint',
    'CardinalDirection',
    'RunwayConfiguration',
    'RunwayUsage',
    # Routes
    'Departure',
    'Arrival',
    'VectorTermination',
    'HoldTermination',
    'IlsInterceptTermination',
    'TerminationKind',
    # Shapes
    'PolygonArea',
    'CircleArea',
    'Polyline',
    'LineColor',
    'RGB',
    'RadiusBoundary',
    # Aircraft
    'WakeCategory',
    'WakeSeparation',
    'Separation',
    'Aircraft',
    # Airspace
    'Registry',
    'RegistryView',
    'Airspace',
    'AirspaceOptions',
    'SpeedRestriction',
    'WithinRadius',
    'BelowAltitude',
    'OnLocalizer',
    'FrequencyHandoff',
]
