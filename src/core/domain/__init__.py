"""
Domain models and value objects.

Contains serializable records for the arbitrary-precision number types.
"""

from src.core.domain.records import (
    NATURAL_LITERAL_PATTERN,
    POSITIVE_LITERAL_PATTERN,
    SIGNED_LITERAL_PATTERN,
    BigIntegerRecord,
    RationalRecord,
)

__all__ = [
    # Patterns
    "SIGNED_LITERAL_PATTERN",
    "NATURAL_LITERAL_PATTERN",
    "POSITIVE_LITERAL_PATTERN",
    # Records
    "BigIntegerRecord",
    "RationalRecord",
]
