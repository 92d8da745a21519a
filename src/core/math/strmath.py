"""
StrMath — Сложение десятичных строк целиком

Композиция parse → add → render для вызывающей стороны, которая получает
две строки (из любого источника) и отображает итоговую строку.
"""

from typing import NamedTuple

from src.core.domain.limb_format import DEFAULT_LIMB_FORMAT, LimbFormat
from src.core.math.bigint_adder import add
from src.core.math.digit_parser import to_big_integer
from src.core.math.digit_renderer import render


class SumResult(NamedTuple):
    """Канонические (без ведущих нулей) записи слагаемых и суммы."""

    augend: str
    addend: str
    total: str


def add_strings(a: str, b: str, fmt: LimbFormat = DEFAULT_LIMB_FORMAT) -> SumResult:
    """
    Сложение двух digit sequence.

    Raises:
        DigitSequenceError: Если любой из входов не digit sequence

    Examples:
        >>> add_strings("0999", "1")
        SumResult(augend='999', addend='1', total='1000')
    """
    x = to_big_integer(a, fmt)
    y = to_big_integer(b, fmt)
    return SumResult(augend=render(x), addend=render(y), total=render(add(x, y)))


def format_sum_line(result: SumResult) -> str:
    """Строка вида "<a> + <b> = <sum>"."""
    return f"{result.augend} + {result.addend} = {result.total}"
