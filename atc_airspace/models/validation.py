"""
Validation module for airspace parsing.

This module provides the typed failures raised while validating and
building an airspace, and the result value returned to callers that
prefer not to handle exceptions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .airspace import Airspace


class ErrorKind(Enum):
    """Category of a fatal airspace failure."""
    SYNTAX = "syntax"        # Record does not match its micro-grammar
    RANGE = "range"          # Correct type, value outside its legal domain
    REFERENCE = "reference"  # Symbolic name does not resolve
    COLLISION = "collision"  # Entity registered twice with conflicting identity


class AirspaceFormatError(Exception):
    """
    Base class for all fatal airspace failures.

    Attributes:
        kind: The error category
        key: The offending ``section.key`` (None until a caller attaches it)
        message: Human readable description without the key prefix
    """

    kind: ErrorKind = ErrorKind.SYNTAX

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.key = key

    def with_key(self, key: str) -> 'AirspaceFormatError':
        """Attach the offending key unless a more specific one is already set."""
        if self.key is None:
            self.key = key
        return self

    def __str__(self) -> str:
        if self.key:
            return f"{self.key}: {self.message}"
        return self.message


class FormatSyntaxError(AirspaceFormatError, ValueError):
    """A value does not match its expected shape or type."""
    kind = ErrorKind.SYNTAX


class FormatRangeError(AirspaceFormatError, ValueError):
    """A value has the right type but is outside its legal domain."""
    kind = ErrorKind.RANGE


class NotRegisteredError(AirspaceFormatError, LookupError):
    """A symbolic reference does not resolve in the registry."""
    kind = ErrorKind.REFERENCE

    def __init__(self, type_name: str, name: str, key: Optional[str] = None):
        super().__init__(f"{type_name} {name} is not registered.", key)
        self.type_name = type_name
        self.name = name


class CollisionError(AirspaceFormatError):
    """An entity is registered twice with a conflicting identity."""
    kind = ErrorKind.COLLISION

    def __init__(self, type_name: str, name: str, description: Optional[str] = None, key: Optional[str] = None):
        message = f"{type_name} {name} is already registered"
        if description:
            message += f" {description}"
        super().__init__(message + ".", key)
        self.type_name = type_name
        self.name = name


@dataclass
class ParseResult:
    """Result of parsing an airspace table."""

    airspace: Optional['Airspace'] = None
    error: Optional[AirspaceFormatError] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if parsing succeeded."""
        return self.error is None and self.airspace is not None

    @property
    def has_warnings(self) -> bool:
        """Check if parsing produced warnings."""
        return len(self.warnings) > 0

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> 'Airspace':
        """Return the airspace or raise the recorded failure."""
        if self.error is not None:
            raise self.error
        if self.airspace is None:
            raise FormatSyntaxError("No airspace was produced.")
        return self.airspace

    @classmethod
    def success(cls, airspace: 'Airspace', warnings: Optional[List[str]] = None) -> 'ParseResult':
        """Create a successful parse result."""
        return cls(airspace=airspace, warnings=list(warnings or []))

    @classmethod
    def failure(cls, error: AirspaceFormatError, warnings: Optional[List[str]] = None) -> 'ParseResult':
        """Create a failed parse result."""
        return cls(error=error, warnings=list(warnings or []))

    def __str__(self) -> str:
        if self.is_valid:
            if self.has_warnings:
                return f"Valid (with {len(self.warnings)} warnings)"
            return "Valid"
        return f"Invalid ({self.error})"
