from dataclasses import dataclass, field
from typing import List, Optional

from .runway import Runway


@dataclass(frozen=True)
class RunwayUsage:
    """How a runway end is used in a configuration."""

    land: bool = False
    depart: bool = False
    intersection: bool = False
    backtrack: bool = False
    initial_heading: Optional[float] = None
    no_sid: bool = False


@dataclass(frozen=True)
class RunwayConfigurationEntry:
    score: float
    runway: Runway
    usage: RunwayUsage


@dataclass
class RunwayConfiguration:
    """A set of runway ends active together, each scored for selection."""

    entries: List[RunwayConfigurationEntry] = field(default_factory=list)

    def add(self, score: float, runway: Runway, usage: RunwayUsage) -> 'RunwayConfiguration':
        self.entries.append(RunwayConfigurationEntry(score, runway, usage))
        return self

    @property
    def landing_runways(self) -> List[Runway]:
        return [entry.runway for entry in self.entries if entry.usage.land]

    @property
    def departure_runways(self) -> List[Runway]:
        return [entry.runway for entry in self.entries if entry.usage.depart]

    def __len__(self) -> int:
        return len(self.entries)
