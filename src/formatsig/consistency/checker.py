"""Checker comparing placeholder signatures of a string across locales."""

import logging
from typing import Optional

from ..config import settings
from ..placeholders import (
    ConflictMode,
    FormatStringParser,
    PlaceholderConflictError,
    PlaceholderType,
)
from .models import (
    ConsistencyReport,
    KeyConsistencyResult,
    MismatchKind,
    SignatureMismatch,
)

logger = logging.getLogger(__name__)


class ConsistencyChecker:
    """Flag locale variants whose placeholder signature differs from the reference locale."""

    def __init__(
        self,
        conflict_mode: Optional[ConflictMode] = None,
        base_locale: Optional[str] = None,
    ):
        """
        Initialize the checker.

        Args:
            conflict_mode: Conflict policy used when extracting each variant
            base_locale: Preferred reference locale (defaults to settings.base_locale)
        """
        self.parser = FormatStringParser(conflict_mode)
        self.base_locale = base_locale or settings.base_locale

    @property
    def conflict_mode(self) -> ConflictMode:
        return self.parser.conflict_mode

    def _reference_locale(self, variants: dict[str, str], base_locale: Optional[str]) -> str:
        if base_locale is not None:
            if base_locale not in variants:
                raise KeyError(f"Reference locale '{base_locale}' has no variant")
            return base_locale
        if self.base_locale in variants:
            return self.base_locale
        return next(iter(variants))

    def check_key(
        self,
        key: str,
        variants: dict[str, str],
        base_locale: Optional[str] = None,
    ) -> KeyConsistencyResult:
        """
        Compare the signature of one key across all of its locale variants.

        Args:
            key: The string key (used for reporting only)
            variants: Mapping of locale -> format string
            base_locale: Locale to compare against, overriding the checker default

        Returns:
            KeyConsistencyResult with per-locale signatures, mismatches and conflicts

        Raises:
            ValueError: If variants is empty
            KeyError: If base_locale is given but has no variant
        """
        if not variants:
            raise ValueError(f"No locale variants given for key '{key}'")

        reference = self._reference_locale(variants, base_locale)
        result = KeyConsistencyResult(
            key=key,
            reference_locale=reference,
            conflict_mode=self.conflict_mode,
        )
        self._extract_variants(result, variants)

        expected = result.signatures.get(reference)
        if expected is None:
            # Reference variant is itself broken, already reported as a conflict
            return result

        for locale, actual in result.signatures.items():
            if locale == reference:
                continue
            mismatch = compare_signatures(locale, expected, actual)
            if mismatch:
                logger.warning(f"{key}: {mismatch}")
                result.mismatches.append(mismatch)

        return result

    def _extract_variants(self, result: KeyConsistencyResult, variants: dict[str, str]):
        for locale, format_string in variants.items():
            try:
                extraction = self.parser.extract(format_string)
            except PlaceholderConflictError as e:
                logger.warning(f"{result.key} [{locale}]: {e}")
                result.conflicts[locale] = [e.conflict]
                continue

            result.signatures[locale] = extraction.types
            if extraction.conflicts:
                result.conflicts[locale] = extraction.conflicts

    def _missing_reference(
        self, key: str, variants: dict[str, str], base_locale: str
    ) -> KeyConsistencyResult:
        result = KeyConsistencyResult(
            key=key,
            reference_locale=base_locale,
            conflict_mode=self.conflict_mode,
        )
        self._extract_variants(result, variants)

        mismatch = SignatureMismatch(
            locale=base_locale,
            expected=[],
            actual=[],
            kind=MismatchKind.MISSING_REFERENCE,
        )
        logger.warning(f"{key}: {mismatch}")
        result.mismatches.append(mismatch)
        return result

    def check_table(
        self,
        table: dict[str, dict[str, str]],
        base_locale: Optional[str] = None,
    ) -> ConsistencyReport:
        """
        Check every key of a string table.

        Args:
            table: Mapping of key -> (locale -> format string)
            base_locale: Locale to compare against

        Returns:
            ConsistencyReport with one result per key. A key without a variant
            for an explicit base_locale gets a MISSING_REFERENCE mismatch.
        """
        report = ConsistencyReport()

        for key, variants in table.items():
            if not variants:
                logger.debug(f"Skipping key without variants: {key}")
                continue
            if base_locale is not None and base_locale not in variants:
                report.results.append(self._missing_reference(key, variants, base_locale))
                continue
            report.results.append(self.check_key(key, variants, base_locale))

        logger.info(report.summary())
        return report


def compare_signatures(
    locale: str,
    expected: list[PlaceholderType],
    actual: list[PlaceholderType],
) -> Optional[SignatureMismatch]:
    """
    Compare a locale's signature to the reference signature.

    Returns:
        SignatureMismatch, or None if both signatures are identical
    """
    if len(expected) != len(actual):
        return SignatureMismatch(
            locale=locale,
            expected=expected,
            actual=actual,
            kind=MismatchKind.LENGTH,
        )

    for index, (want, got) in enumerate(zip(expected, actual)):
        if want != got:
            return SignatureMismatch(
                locale=locale,
                expected=expected,
                actual=actual,
                kind=MismatchKind.TYPE,
                position=index + 1,
            )

    return None
