"""Cross-locale placeholder signature checks."""

from .models import (
    ConsistencyReport,
    KeyConsistencyResult,
    MismatchKind,
    SignatureMismatch,
)
from .checker import ConsistencyChecker, compare_signatures

__all__ = [
    "ConsistencyReport",
    "KeyConsistencyResult",
    "MismatchKind",
    "SignatureMismatch",
    "ConsistencyChecker",
    "compare_signatures",
]
