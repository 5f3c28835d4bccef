"""Parser for extracting placeholder types from format strings."""

import logging
from typing import Optional

from ..config import settings
from .models import ConflictMode, ExtractionResult, PlaceholderType, RawToken
from .resolver import PositionalResolver
from .syntax import classify_conversion_char, get_format_pattern

logger = logging.getLogger(__name__)


class FormatStringParser:
    """Parse format strings and extract the placeholder signature they require."""

    def __init__(self, conflict_mode: Optional[ConflictMode] = None):
        """
        Initialize the parser.

        Args:
            conflict_mode: Conflict policy for the resolver (defaults to settings.conflict_mode)
        """
        self.conflict_mode = ConflictMode(conflict_mode or settings.conflict_mode)
        self.resolver = PositionalResolver(self.conflict_mode)

    def scan(self, format_string: str) -> list[RawToken]:
        """
        Find all conversion specifiers in a format string.

        Escaped "%%" pairs and malformed specifiers are skipped. Specifiers
        with an explicit position of 0 are not placeholders (Foundation
        renders "%0$@" as the literal "0@") and are dropped here.

        Args:
            format_string: The format string to scan

        Returns:
            List of RawToken objects in the order they appear
        """
        tokens = []

        for match in get_format_pattern().finditer(format_string):
            char = match.group("integer") or match.group("plain")
            position_text = match.group("position")
            position = int(position_text) if position_text is not None else None

            if position is not None and position <= 0:
                logger.debug(f"Skipping specifier with invalid position: {match.group('specifier')}")
                continue

            tokens.append(
                RawToken(
                    conversion_char=char,
                    position=position,
                    syntax=match.group("specifier"),
                    start_pos=match.start("specifier"),
                    end_pos=match.end("specifier"),
                )
            )

        return tokens

    def classify(
        self, tokens: list[RawToken]
    ) -> list[tuple[PlaceholderType, Optional[int]]]:
        """Pair each token's PlaceholderType with its explicit position."""
        classified = []
        for token in tokens:
            placeholder_type = classify_conversion_char(token.conversion_char)
            if placeholder_type is None:
                continue
            classified.append((placeholder_type, token.position))
        return classified

    def extract(self, format_string: str) -> ExtractionResult:
        """
        Run the full pipeline and keep the conflicts seen along the way.

        Args:
            format_string: The format string to analyze

        Returns:
            ExtractionResult with the signature and any ignored conflicts

        Raises:
            PlaceholderConflictError: In strict mode, on a same-position type conflict
        """
        classified = self.classify(self.scan(format_string))
        types, conflicts = self.resolver.resolve_with_conflicts(classified)

        return ExtractionResult(
            format_string=format_string,
            types=types,
            conflicts=conflicts,
        )

    def extract_placeholder_types(self, format_string: str) -> list[PlaceholderType]:
        """
        Extract the list of placeholder types from a format string.

        Example: "I give %d apples to %@" -> [INT, OBJECT]

        Raises:
            PlaceholderConflictError: In strict mode, on a same-position type conflict
        """
        return self.extract(format_string).types

    def parameter_types(self, format_string: str) -> list[str]:
        """Get the generated-code parameter type names for a format string."""
        return self.extract(format_string).parameter_types


def placeholder_types(
    format_string: str, conflict_mode: Optional[ConflictMode] = None
) -> list[PlaceholderType]:
    """Extract the placeholder signature of a format string."""
    return FormatStringParser(conflict_mode).extract_placeholder_types(format_string)
