"""
Ошибки домена больших чисел

Таксономия ошибок ограничена разбором digit sequence:
- INVALID_DIGIT — символ вне '0'..'9'
- EMPTY_INPUT — пустая строка

Сложение и рендеринг не имеют доменных ошибок для валидных BigInt.
"""

from enum import Enum
from typing import Optional


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид ошибки разбора digit sequence"""

    INVALID_DIGIT = "INVALID_DIGIT"
    EMPTY_INPUT = "EMPTY_INPUT"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DigitSequenceError(ValueError):
    """
    Строка не является корректной digit sequence.

    Attributes:
        kind: вид ошибки (ErrorKind)
        position: индекс первого недопустимого символа (None для EMPTY_INPUT)
    """

    def __init__(self, kind: ErrorKind, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.position = position


class LimbFormatMismatch(ValueError):
    """Операнды построены в разных limb-форматах."""
