"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных больших чисел.
"""

from .validators import (
    BigIntValidator,
    ContractValidator,
    SchemaLoader,
    validate_big_int,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntValidator",
    # Functions
    "validate_big_int",
]
