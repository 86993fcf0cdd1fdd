"""
Wake turbulence categories and the separation matrix between them.
"""

from enum import IntEnum
from typing import Dict, Mapping, NamedTuple, Sequence

import pandas as pd

from .validation import FormatRangeError, FormatSyntaxError


class WakeCategory(IntEnum):
    """Wake turbulence categories, heaviest first."""
    SUPER_HEAVY = 1
    UPPER_HEAVY = 2
    LOWER_HEAVY = 3
    UPPER_MEDIUM = 4
    LOWER_MEDIUM = 5
    LIGHT = 6

    @classmethod
    def from_code(cls, code: str) -> 'WakeCategory':
        """Category from its numeric code '1'..'6'."""
        try:
            value = int(code)
        except ValueError:
            raise FormatSyntaxError(f"Invalid wake category: {code}") from None
        try:
            return cls(value)
        except ValueError:
            raise FormatRangeError(f"Wake category must be in the range [1, 6], got {value}") from None


class Separation(NamedTuple):
    distance: float  # Nautical miles
    interval: float  # Seconds


Row = Sequence[Separation]


class WakeSeparation:
    """
    Minimum separation behind a leading aircraft for each following category.

    Stored as two DataFrames (distance and interval) indexed by leading
    category with one column per following category.
    """

    def __init__(self, rows: Mapping[WakeCategory, Row]):
        categories = list(WakeCategory)
        missing = [c.name for c in categories if c not in rows]
        if missing:
            raise FormatSyntaxError(f"Wake separation matrix is missing rows for: {', '.join(missing)}")
        for category in categories:
            if len(rows[category]) != len(categories):
                raise FormatSyntaxError(
                    f"Wake separation row {category.name} must have {len(categories)} categories, "
                    f"got {len(rows[category])}")

        self.distances = pd.DataFrame(
            [[float(rows[lead][i].distance) for i in range(len(categories))] for lead in categories],
            index=categories, columns=categories)
        self.intervals = pd.DataFrame(
            [[float(rows[lead][i].interval) for i in range(len(categories))] for lead in categories],
            index=categories, columns=categories)

    @classmethod
    def default(cls) -> 'WakeSeparation':
        """The built-in matrix used when an airspace does not provide one."""
        table = [
            [(3, 0), (4, 100), (5, 120), (5, 140), (6, 160), (8, 180)],
            [(0, 0), (3, 0), (4, 0), (4, 100), (5, 120), (7, 140)],
            [(0, 0), (0, 0), (3, 0), (3, 80), (4, 100), (6, 120)],
            [(0, 0), (0, 0), (0, 0), (0, 0), (0, 0), (5, 120)],
            [(0, 0), (0, 0), (0, 0), (0, 0), (0, 0), (4, 100)],
            [(0, 0), (0, 0), (0, 0), (0, 0), (0, 0), (3, 80)],
        ]
        return cls({
            category: [Separation(*cell) for cell in row]
            for category, row in zip(WakeCategory, table)
        })

    def separation(self, leading: WakeCategory, following: WakeCategory) -> Separation:
        """Separation required for ``following`` behind ``leading``."""
        return Separation(
            float(self.distances.at[leading, following]),
            float(self.intervals.at[leading, following]),
        )

    def row(self, leading: WakeCategory) -> Dict[WakeCategory, Separation]:
        return {following: self.separation(leading, following) for following in WakeCategory}

    def to_dataframe(self) -> pd.DataFrame:
        """Long-form table with one row per (leading, following) pair."""
        records = [
            {
                'leading': leading.name,
                'following': following.name,
                'distance': self.distances.at[leading, following],
                'interval': self.intervals.at[leading, following],
            }
            for leading in WakeCategory
            for following in WakeCategory
        ]
        return pd.DataFrame.from_records(records)

    def __eq__(self, other) -> bool:
        if not isinstance(other, WakeSeparation):
            return NotImplemented
        return self.distances.equals(other.distances) and self.intervals.equals(other.intervals)

    def __repr__(self) -> str:
        return f"WakeSeparation(\n{self.distances.to_string()}\n)"
