from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .navpoint import SidPoint


class TurnDirection(Enum):
    """Direction of turns flown in a holding pattern."""
    RIGHT = 1
    LEFT = -1


@dataclass(frozen=True)
class HoldingPattern:
    """
    Holding pattern published for a beacon.

    An inbound course of exactly 0 is stored as 360.
    """

    inbound_course: float  # Track towards the fix, degrees
    turn_direction: TurnDirection = TurnDirection.RIGHT

    def __post_init__(self):
        if self.inbound_course == 0:
            object.__setattr__(self, 'inbound_course', 360.0)

    @classmethod
    def from_signed_course(cls, course: float) -> 'HoldingPattern':
        """Negative courses hold with left turns, positive ones with right turns."""
        direction = TurnDirection.LEFT if course < 0 else TurnDirection.RIGHT
        return cls(abs(course), direction)


@dataclass(frozen=True)
class Beacon(SidPoint):
    """
    A named point that is always displayed and can be referenced by routes.

    Aircraft can be given a direct to a beacon and, if it has a holding
    pattern, told to hold there.
    """

    holding_pattern: Optional[HoldingPattern] = None

    @property
    def has_hold(self) -> bool:
        return self.holding_pattern is not None
