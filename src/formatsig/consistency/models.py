"""Data models for cross-locale signature checks."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from ..placeholders.models import ConflictMode, PlaceholderConflict, PlaceholderType


class MismatchKind(str, Enum):
    """How a locale's signature differs from the reference signature."""

    LENGTH = "length"  # Different number of placeholders
    TYPE = "type"  # Same length, different type at some position
    MISSING_REFERENCE = "missing_reference"  # No variant for the reference locale


class SignatureMismatch(BaseModel):
    """A locale whose signature differs from the reference locale."""

    locale: str
    expected: list[PlaceholderType]  # Signature of the reference locale
    actual: list[PlaceholderType]
    kind: MismatchKind
    position: Optional[int] = None  # First differing 1-based position (TYPE only)

    def __str__(self) -> str:
        if self.kind == MismatchKind.MISSING_REFERENCE:
            return f"{self.locale}: reference variant is missing"
        expected = ", ".join(t.value for t in self.expected) or "none"
        actual = ", ".join(t.value for t in self.actual) or "none"
        if self.kind == MismatchKind.TYPE:
            return (
                f"{self.locale}: type mismatch at position {self.position} "
                f"(expected [{expected}], got [{actual}])"
            )
        return f"{self.locale}: expected {len(self.expected)} placeholders [{expected}], got {len(self.actual)} [{actual}]"


class KeyConsistencyResult(BaseModel):
    """Result of comparing one string key across its locale variants."""

    key: str
    reference_locale: str
    conflict_mode: ConflictMode
    signatures: dict[str, list[PlaceholderType]] = Field(default_factory=dict)
    mismatches: list[SignatureMismatch] = Field(default_factory=list)
    conflicts: dict[str, list[PlaceholderConflict]] = Field(default_factory=dict)

    @property
    def is_consistent(self) -> bool:
        if self.mismatches:
            return False
        # Conflicts inside a variant are defects only in strict mode
        return self.conflict_mode == ConflictMode.LENIENT or not self.conflicts


class ConsistencyReport(BaseModel):
    """Result of checking a whole string table."""

    results: list[KeyConsistencyResult] = Field(default_factory=list)

    @property
    def is_consistent(self) -> bool:
        return all(r.is_consistent for r in self.results)

    @property
    def mismatch_count(self) -> int:
        return sum(len(r.mismatches) for r in self.results)

    @property
    def inconsistent_keys(self) -> list[str]:
        return [r.key for r in self.results if not r.is_consistent]

    def summary(self) -> str:
        """Human readable one-line summary."""
        if self.is_consistent:
            return f"{len(self.results)} keys checked, all placeholder signatures match"
        return (
            f"{len(self.results)} keys checked, {len(self.inconsistent_keys)} inconsistent "
            f"({self.mismatch_count} signature mismatches)"
        )
