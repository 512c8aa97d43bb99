"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных длинных чисел.
"""

from .validators import (
    BigIntegerValidator,
    ContractValidator,
    RationalValidator,
    SchemaLoader,
    validate_big_integer,
    validate_rational,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntegerValidator",
    "RationalValidator",
    # Functions
    "validate_big_integer",
    "validate_rational",
]
