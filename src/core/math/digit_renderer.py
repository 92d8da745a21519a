"""
Digit Renderer — Конверсия BigInt → digit sequence

Старший limb печатается без дополнения нулями, каждый следующий limb
дополняется нулями слева до magnitude цифр.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нет ведущих нулей; ноль рендерится ровно как "0"
2. Длина результата = минимальное число десятичных цифр значения
"""

from src.core.domain.big_int import BigInt


def render(value: BigInt) -> str:
    """
    Десятичная запись BigInt.

    Args:
        value: Валидный BigInt

    Returns:
        Строка цифр без ведущих нулей

    Examples:
        >>> render(BigInt(limbs=(7, 1), magnitude=3))
        '1007'
        >>> render(BigInt.zero())
        '0'
    """
    width = value.magnitude
    top = value.limbs[-1]
    groups = [str(top)]
    groups.extend(f"{limb:0{width}d}" for limb in reversed(value.limbs[:-1]))
    return "".join(groups)
