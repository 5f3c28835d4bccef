"""Resolver merging classified specifiers into a placeholder signature."""

import logging
from typing import Iterable, Optional

from .models import (
    ConflictMode,
    PlaceholderConflict,
    PlaceholderConflictError,
    PlaceholderType,
)

logger = logging.getLogger(__name__)


class PositionalResolver:
    """Assign final positions to placeholders and compact them into a signature."""

    def __init__(self, conflict_mode: ConflictMode = ConflictMode.STRICT):
        """
        Initialize the resolver.

        Args:
            conflict_mode: What to do when two different types claim the same position
        """
        self.conflict_mode = ConflictMode(conflict_mode)

    def resolve(
        self, placeholders: Iterable[tuple[PlaceholderType, Optional[int]]]
    ) -> list[PlaceholderType]:
        """
        Resolve placeholders into an ordered, gap-compacted signature.

        Args:
            placeholders: (type, explicit position or None) pairs in text order

        Returns:
            List of PlaceholderType ordered by position

        Raises:
            PlaceholderConflictError: In strict mode, if a position gets two different types
        """
        types, _ = self.resolve_with_conflicts(placeholders)
        return types

    def resolve_with_conflicts(
        self, placeholders: Iterable[tuple[PlaceholderType, Optional[int]]]
    ) -> tuple[list[PlaceholderType], list[PlaceholderConflict]]:
        """
        Resolve placeholders and also return the conflicts that were ignored.

        In lenient mode the first type recorded at a position wins and every
        later, different type is returned as a PlaceholderConflict. In strict
        mode the first conflict raises instead.

        Returns:
            Tuple of (signature, conflicts)
        """
        by_position: dict[int, PlaceholderType] = {}
        conflicts: list[PlaceholderConflict] = []
        next_implicit = 1

        for placeholder_type, position in placeholders:
            if position is None:
                insertion_pos = next_implicit
                next_implicit += 1
            elif position <= 0:
                # Not a placeholder at all; it must not take an implicit slot either
                logger.debug(f"Discarding placeholder with invalid position {position}")
                continue
            else:
                insertion_pos = position

            existing = by_position.get(insertion_pos)
            if existing is None:
                by_position[insertion_pos] = placeholder_type
                continue

            if existing != placeholder_type:
                conflict = PlaceholderConflict(
                    position=insertion_pos, previous=existing, new=placeholder_type
                )
                if self.conflict_mode == ConflictMode.STRICT:
                    raise PlaceholderConflictError(conflict)

                logger.warning(f"Ignoring conflicting placeholder type: {conflict}")
                conflicts.append(conflict)

        # Omit holes, i.e. positions no specifier refers to
        types = [by_position[pos] for pos in sorted(by_position)]
        return types, conflicts
