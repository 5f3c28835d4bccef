"""Placeholder extraction for C-style format strings.

This module scans localized format strings for conversion specifiers
(like %d, %@ or %1$lld) and resolves them into the ordered list of argument
types a caller has to supply.
"""

from .models import (
    ConflictMode,
    ExtractionResult,
    PatternInitializationError,
    PlaceholderConflict,
    PlaceholderConflictError,
    PlaceholderType,
    RawToken,
)
from .parser import FormatStringParser, placeholder_types
from .resolver import PositionalResolver
from .syntax import classify_conversion_char, get_format_pattern

__all__ = [
    "ConflictMode",
    "ExtractionResult",
    "PatternInitializationError",
    "PlaceholderConflict",
    "PlaceholderConflictError",
    "PlaceholderType",
    "RawToken",
    "FormatStringParser",
    "placeholder_types",
    "PositionalResolver",
    "classify_conversion_char",
    "get_format_pattern",
]
