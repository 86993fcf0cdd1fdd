from typing import Optional
import logging

from ..models.airspace import Airspace
from ..models.validation import AirspaceFormatError, ParseResult
from .builder import AirspaceBuilder
from .context import ParseContext
from .format import FormatValidator, Table

logger = logging.getLogger(__name__)


class Parser:
    """
    Build an Airspace from a table produced by an INI-style key/value reader.

    Example:
        >>> airspace = Parser.from_ini(table)
        >>> airspace.primary_airport.code
        'EGLL'
    """

    @staticmethod
    def from_ini(table: Table, ctx: Optional[ParseContext] = None) -> Airspace:
        """
        Validate and build an airspace.

        Args:
            table: Section name -> key -> string, number, boolean or list of strings
            ctx: Parse session state; a fresh one is used when omitted

        Returns:
            The fully linked Airspace

        Raises:
            AirspaceFormatError: The first syntax, range, reference or collision failure
        """
        ctx = ctx if ctx is not None else ParseContext()
        fmt = FormatValidator(ctx).validate(table)
        return AirspaceBuilder(ctx).build(fmt)


def parse_airspace(table: Table) -> ParseResult:
    """
    Parse an airspace table without raising for format problems.

    Returns:
        ParseResult holding either the Airspace or the single failure,
        together with any warnings collected on the way
    """
    ctx = ParseContext()
    try:
        airspace = Parser.from_ini(table, ctx)
    except AirspaceFormatError as e:
        logger.error(f"Airspace parsing failed ({e.kind.value}): {e}")
        return ParseResult.failure(e, ctx.warnings)
    return ParseResult.success(airspace, ctx.warnings)
