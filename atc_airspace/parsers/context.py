from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List
import logging

from ..models.validation import AirspaceFormatError

logger = logging.getLogger(__name__)


@dataclass
class ParseContext:
    """
    State of one parse session.

    A new context is created for every document, so repeated or concurrent
    parses never share the coordinate mode or the collected warnings.

    Attributes:
        decimal_degrees: Accept plain decimal coordinates (``airspace.decimaldegrees``)
        warnings: Non-fatal anomalies collected so far
    """

    decimal_degrees: bool = False
    warnings: List[str] = field(default_factory=list)

    def warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)

    @contextmanager
    def at(self, key: str) -> Iterator[None]:
        """Attach ``key`` to any airspace failure raised inside the block (innermost key wins)."""
        try:
            yield
        except AirspaceFormatError as e:
            e.with_key(key)
            raise
