"""Conversion specifier syntax definitions and patterns."""

import logging
import re
import threading
from typing import Optional, Pattern

from .models import PatternInitializationError, PlaceholderType

logger = logging.getLogger(__name__)

# Pattern fragments
# A live "%" sits at the start of the string or after an even run of "%" ("%%" is a literal percent)
LIVE_PERCENT = r"(?:^|(?<!%)(?:%%)*)"

# "%3$" - positional specifier
POSITION = r"(?:(?P<position>[0-9]+)\$)?"

# Flags, width and precision like in "%-08.2f" - recognized but not captured
PRECISION = r"[-+# 0]*[0-9]*(?:\.[0-9]+)?"

# "%lld", "%hhu", "%zu" - length modifiers only apply to the integer family
LENGTH_MODIFIER = r"(?:hh|h|ll|l|q|z|t|j)?"

# %d/%i/%o/%x -> int, %u -> uint
INTEGER_CONVERSION = rf"{LENGTH_MODIFIER}(?P<integer>[dioxu])"

# %@ -> object, %a/%e/%f/%g -> float, %c -> char, %s -> C string, %p -> pointer
PLAIN_CONVERSION = r"(?P<plain>[@aefgcsp])"

FORMAT_SPECIFIER_SOURCE = (
    rf"{LIVE_PERCENT}(?P<specifier>%{POSITION}{PRECISION}"
    rf"(?:{INTEGER_CONVERSION}|{PLAIN_CONVERSION}))"
)

_CONVERSION_TYPES = {
    "@": PlaceholderType.OBJECT,
    "a": PlaceholderType.FLOAT,
    "e": PlaceholderType.FLOAT,
    "f": PlaceholderType.FLOAT,
    "g": PlaceholderType.FLOAT,
    "d": PlaceholderType.INT,
    "i": PlaceholderType.INT,
    "o": PlaceholderType.INT,
    "x": PlaceholderType.INT,
    "u": PlaceholderType.UINT,
    "c": PlaceholderType.CHAR,
    "s": PlaceholderType.CSTRING,
    "p": PlaceholderType.POINTER,
}

_format_pattern: Optional[Pattern] = None
_format_pattern_lock = threading.Lock()


def _build_format_pattern(source: str = FORMAT_SPECIFIER_SOURCE) -> Pattern:
    try:
        return re.compile(source, re.IGNORECASE)
    except re.error as e:
        logger.critical(f"Error building the pattern used to match format specifiers: {e}")
        raise PatternInitializationError(
            "Error building the pattern used to match format specifiers"
        ) from e


def get_format_pattern() -> Pattern:
    """
    Return the shared compiled conversion specifier pattern.

    The pattern is compiled on first use. Concurrent first callers are
    serialized on a lock so it is built exactly once; afterwards it is
    read without locking.

    Raises:
        PatternInitializationError: If the pattern cannot be compiled
    """
    global _format_pattern

    if _format_pattern is None:
        with _format_pattern_lock:
            if _format_pattern is None:
                _format_pattern = _build_format_pattern()
                logger.debug("Compiled format specifier pattern")

    return _format_pattern


def classify_conversion_char(char: str) -> Optional[PlaceholderType]:
    """
    Map a conversion character to its PlaceholderType.

    Matching is case-insensitive. The length modifier must already be
    stripped (pass "d" for "%lld").

    Args:
        char: A single conversion character (e.g. "d", "@", "F")

    Returns:
        The PlaceholderType, or None if the character is not a supported conversion
    """
    if len(char) != 1:
        return None

    return _CONVERSION_TYPES.get(char.lower())
