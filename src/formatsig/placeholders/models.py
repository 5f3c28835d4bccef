"""Data models for format string placeholder extraction."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class PlaceholderType(str, Enum):
    """Runtime argument kind demanded by a conversion specifier."""

    OBJECT = "object"  # %@
    FLOAT = "float"  # %a %e %f %g
    INT = "int"  # %d %i %o %x (with optional length modifier)
    UINT = "uint"  # %u (with optional length modifier)
    CHAR = "char"  # %c
    CSTRING = "cstring"  # %s
    POINTER = "pointer"  # %p

    @property
    def parameter_type(self) -> str:
        """Parameter type name used by generated accessor functions."""
        return _PARAMETER_TYPES[self]


_PARAMETER_TYPES = {
    PlaceholderType.OBJECT: "String",
    PlaceholderType.FLOAT: "Float",
    PlaceholderType.INT: "Int",
    PlaceholderType.UINT: "UInt",
    PlaceholderType.CHAR: "CChar",
    PlaceholderType.CSTRING: "UnsafePointer<CChar>",
    PlaceholderType.POINTER: "UnsafeRawPointer",
}


class ConflictMode(str, Enum):
    """Policy for two different types claiming the same position."""

    LENIENT = "lenient"  # First type seen wins
    STRICT = "strict"  # Raise PlaceholderConflictError


class RawToken(BaseModel):
    """A single conversion specifier matched in a format string."""

    model_config = ConfigDict(frozen=True)

    conversion_char: str  # Conversion character, length modifier stripped (e.g. "d" for "%lld")
    position: Optional[int] = None  # Explicit 1-based position from "%n$", None if implicit
    syntax: str = ""  # Matched specifier text (e.g. "%1$lld")
    start_pos: int = 0
    end_pos: int = 0


class PlaceholderConflict(BaseModel):
    """Two differently-typed specifiers claiming the same position."""

    model_config = ConfigDict(frozen=True)

    position: int
    previous: PlaceholderType
    new: PlaceholderType

    def __str__(self) -> str:
        return (
            f"position {self.position} is used as '{self.previous.value}' "
            f"and as '{self.new.value}'"
        )


class ExtractionResult(BaseModel):
    """Signature of a format string together with the conflicts seen while resolving it."""

    format_string: str
    types: list[PlaceholderType] = Field(default_factory=list)
    conflicts: list[PlaceholderConflict] = Field(default_factory=list)

    @property
    def parameter_types(self) -> list[str]:
        return [t.parameter_type for t in self.types]


class PlaceholderConflictError(ValueError):
    """Exception raised in strict mode when a position is given two different types."""

    def __init__(self, conflict: PlaceholderConflict):
        self.conflict = conflict
        self.position = conflict.position
        self.previous = conflict.previous
        self.new = conflict.new
        super().__init__(
            f"Conflicting placeholder types at position {conflict.position}: "
            f"'{conflict.previous.value}' was already recorded, got '{conflict.new.value}'"
        )


class PatternInitializationError(RuntimeError):
    """Exception raised when the conversion specifier pattern cannot be compiled."""

    pass
