"""
Parsers for airspace description tables.

The table is validated section by section (format), each record is
decoded by the field parsers and the result is linked into an Airspace
by the builder.
"""

from .context import ParseContext
from .format import FormatValidator, AirspaceFormat
from .builder import AirspaceBuilder
from .airspace_parser import Parser, parse_airspace

__all__ = [
    'ParseContext',
    'FormatValidator',
    'AirspaceFormat',
    'AirspaceBuilder',
    'Parser',
    'parse_airspace',
]
