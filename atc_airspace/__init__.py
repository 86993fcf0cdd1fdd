"""
Air traffic control airspace description library.

This package validates and parses section/key airspace descriptions
(beacons, runways, routes, areas, airlines, aircraft, wake separation)
into a cross-referenced domain graph, with the spherical-Earth geodesy
the graph depends on.

The main public API includes:
- parse_airspace: Parse a pre-parsed table into a ParseResult
- Parser: Parse a pre-parsed table, raising the first failure
- Airspace: Root of the domain graph
- Point: Geographic position with geodesy helpers
- CompositeMap: Order-preserving map keyed by tuples
"""

from .models import (
    Airspace,
    AirspaceFormatError,
    ErrorKind,
    ParseResult,
    Point,
)
from .parsers import ParseContext, Parser, parse_airspace
from .utils import CompositeMap

__version__ = '0.1.0'
__all__ = [
    'parse_airspace',
    'Parser',
    'ParseContext',
    'ParseResult',
    'Airspace',
    'AirspaceFormatError',
    'ErrorKind',
    'Point',
    'CompositeMap',
]
