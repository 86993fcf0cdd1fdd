from dataclasses import dataclass
from typing import Optional, Tuple

from .wake import WakeCategory

Range = Tuple[float, float]  # (min, max)


@dataclass(frozen=True)
class Aircraft:
    """
    Performance override for an aircraft type.

    Speeds are KIAS, rates are feet per minute except turn rate (degrees
    per second), bank angle (degrees) and bank rate (degrees per second).
    """

    type: str
    category: WakeCategory
    speed: Range
    approach_speed: Range
    acceleration: Range = (1.1, 1.3)
    descent_rate: Range = (1400, 1600)
    turn_rate: Range = (2.9, 3.1)
    bank_angle: Range = (25, 30)
    bank_rate: Range = (3, 5)
    climb_rate: Optional[Range] = None  # Defaults to twice the descent rate
    manufacturer: Optional[str] = None

    def __post_init__(self):
        if self.climb_rate is None:
            object.__setattr__(self, 'climb_rate', (self.descent_rate[0] * 2, self.descent_rate[1] * 2))
