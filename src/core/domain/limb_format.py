"""
LimbFormat — Формат limb-представления больших чисел

Большое число хранится как последовательность limbs в основании 10^magnitude,
младший limb первым (index 0 = least significant).

Выбор magnitude:
- В production используется 18: (10^18 - 1) + (10^18 - 1) + carry всё ещё
  помещается в unsigned 64-bit слово. Для 19 это уже неверно.
- В тестах удобно брать малое значение (например, 3), чтобы переносы между
  limbs возникали на коротких входах.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Один и тот же формат используется Parser, Adder и Renderer
2. 1 <= magnitude <= MAX_LIMB_MAGNITUDE
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ LIMB-ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Количество десятичных цифр в одном limb по умолчанию
DEFAULT_LIMB_MAGNITUDE: Final[int] = 18

# Максимум: 2 * (10^18 - 1) + 1 < 2^64
MAX_LIMB_MAGNITUDE: Final[int] = 18


# =============================================================================
# LIMB FORMAT
# =============================================================================


@dataclass(frozen=True)
class LimbFormat:
    """
    Формат limb-представления.

    Attributes:
        magnitude: число десятичных цифр в limb; основание = 10^magnitude
    """

    magnitude: int = DEFAULT_LIMB_MAGNITUDE

    def __post_init__(self) -> None:
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, int):
            raise ValueError(f"magnitude must be an int, got {self.magnitude!r}")
        if not 1 <= self.magnitude <= MAX_LIMB_MAGNITUDE:
            raise ValueError(
                f"magnitude must be in [1, {MAX_LIMB_MAGNITUDE}], got {self.magnitude}"
            )

    @property
    def base(self) -> int:
        """Основание limb: 10^magnitude."""
        return power_of_ten(self.magnitude)

    @property
    def max_limb(self) -> int:
        """Максимальное значение одного limb (base - 1)."""
        return self.base - 1


DEFAULT_LIMB_FORMAT: Final[LimbFormat] = LimbFormat()


def power_of_ten(n: int) -> int:
    """
    10^n для n >= 0.

    Raises:
        ValueError: Если n < 0
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return 10**n
