"""
Domain models and value objects.

Contains the BigInt entity, its limb format and the parse error taxonomy.
"""

from src.core.domain.big_int import BigInt
from src.core.domain.errors import DigitSequenceError, ErrorKind, LimbFormatMismatch
from src.core.domain.limb_format import (
    DEFAULT_LIMB_FORMAT,
    DEFAULT_LIMB_MAGNITUDE,
    MAX_LIMB_MAGNITUDE,
    LimbFormat,
    power_of_ten,
)

__all__ = [
    # Limb format
    "DEFAULT_LIMB_FORMAT",
    "DEFAULT_LIMB_MAGNITUDE",
    "MAX_LIMB_MAGNITUDE",
    "LimbFormat",
    "power_of_ten",
    # BigInt model
    "BigInt",
    # Errors
    "ErrorKind",
    "DigitSequenceError",
    "LimbFormatMismatch",
]
