"""
ChimPrompt Grammar
Per-keyword argument parsing into typed clauses.
"""

from .models import (
    Argument,
    Clause,
    DelimitedName,
    IdReference,
    IndexRange,
    KeyedList,
    PositionalReference,
    SingleToken,
    TokenPair,
    VariantPair,
)
from .validator import DIRECTIONS, ArgumentValidator, validate

__all__ = [
    "Argument",
    "Clause",
    "DelimitedName",
    "IdReference",
    "IndexRange",
    "KeyedList",
    "PositionalReference",
    "SingleToken",
    "TokenPair",
    "VariantPair",
    "DIRECTIONS",
    "ArgumentValidator",
    "validate",
]
