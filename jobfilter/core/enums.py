"""Core enumerations for the jobfilter package.

Kept free of imports from other core modules so every layer can use them.
"""

from enum import Enum


class ValidationKind(Enum):
    """Outcome of an advisory form validation."""

    OK = "ok"
    ERROR = "error"


class SelectionOutcome(Enum):
    """Verdict of a single filter for one item."""

    MATCHED = "matched"
    UNMATCHED = "unmatched"
