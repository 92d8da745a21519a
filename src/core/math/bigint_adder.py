"""
Big-Integer Adder — Сложение BigInt с переносом между limbs

Сложение limb за limb от младшего (index 0) к старшему:
    sum_i = a.limb(i) + b.limb(i) + carry
    result_i = sum_i mod base, carry = sum_i div base

Недостающие limbs короткого операнда читаются как 0.
Финальный перенос становится дополнительным limb.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные BigInt не изменяются; add(x, x) корректен
2. length(result) = max(a.length, b.length) + 1 только при финальном переносе
3. Результат без старших нулевых limbs (ноль = один limb 0)
4. carry всегда 0 или 1: 2 * (base - 1) + 1 < 2 * base
"""

import logging
from typing import Iterable

from src.core.domain.big_int import BigInt
from src.core.domain.errors import LimbFormatMismatch
from src.core.domain.limb_format import DEFAULT_LIMB_FORMAT, LimbFormat

logger = logging.getLogger(__name__)


def add(a: BigInt, b: BigInt) -> BigInt:
    """
    Сумма двух BigInt.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        Новый BigInt = a + b в том же limb-формате

    Raises:
        LimbFormatMismatch: Если a и b построены с разным magnitude

    Examples:
        >>> from src.core.math.digit_parser import to_big_integer
        >>> add(to_big_integer("999"), to_big_integer("1")).limbs
        (1000,)
    """
    if a.magnitude != b.magnitude:
        raise LimbFormatMismatch(
            f"cannot add BigInt with magnitude {a.magnitude} "
            f"to BigInt with magnitude {b.magnitude}"
        )

    base = a.limb_format.base
    result_length = max(a.length, b.length)

    limbs = []
    carry = 0
    for i in range(result_length):
        limb_sum = a.limb(i) + b.limb(i) + carry
        if limb_sum >= base:
            carry = 1
            limb_sum -= base
        else:
            carry = 0
        limbs.append(limb_sum)

    if carry:
        limbs.append(carry)
        logger.debug("final carry: result grows to %d limbs", len(limbs))

    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()

    return BigInt(limbs=tuple(limbs), magnitude=a.magnitude)


def add_many(values: Iterable[BigInt], fmt: LimbFormat = DEFAULT_LIMB_FORMAT) -> BigInt:
    """
    Сумма последовательности BigInt (левая свёртка add от нуля).

    Пустая последовательность даёт ноль в формате fmt.

    Raises:
        LimbFormatMismatch: Если формат любого слагаемого отличается от fmt
    """
    total = BigInt.zero(fmt)
    for value in values:
        total = add(total, value)
    return total
