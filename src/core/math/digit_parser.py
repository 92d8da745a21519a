"""
Digit Parser — Конверсия digit sequence → BigInt

Модуль преобразует строку десятичных цифр в limb-представление:
- Строка режется справа налево на группы по magnitude цифр
- Каждая группа становится одним limb (младший limb первым)
- Ведущие нули отбрасываются ("007" и "7" дают один и тот же BigInt)

Допустимые символы: только ASCII '0'..'9'. Unicode-цифры ('٣', '²')
отвергаются, пробелы тоже (если не включён strip_whitespace).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустой вход → ErrorKind.EMPTY_INPUT
2. Любой недопустимый символ → ErrorKind.INVALID_DIGIT (без исправления)
3. render(parse(s).value) == s для s без ведущих нулей
"""

import logging
from typing import NamedTuple, Optional

from src.core.domain.big_int import BigInt
from src.core.domain.errors import DigitSequenceError, ErrorKind
from src.core.domain.limb_format import DEFAULT_LIMB_FORMAT, LimbFormat

logger = logging.getLogger(__name__)

_ASCII_DIGITS = frozenset("0123456789")


# =============================================================================
# RESULT TYPES
# =============================================================================


class ParseResult(NamedTuple):
    """
    Результат parse: ровно одно из полей заполнено.

    Attributes:
        value: BigInt при успехе
        error: вид ошибки при неудаче
    """

    value: Optional[BigInt]
    error: Optional[ErrorKind]

    @property
    def ok(self) -> bool:
        return self.error is None


# =============================================================================
# ВАЛИДАЦИЯ DIGIT SEQUENCE
# =============================================================================


def is_digit_sequence(digits: str) -> bool:
    """
    Проверка, что строка непустая и состоит только из ASCII цифр.

    Examples:
        >>> is_digit_sequence("12345")
        True
        >>> is_digit_sequence("12a3")
        False
        >>> is_digit_sequence("")
        False
    """
    return bool(digits) and all(ch in _ASCII_DIGITS for ch in digits)


def strip_leading_zeros(digits: str) -> str:
    """
    Удаление ведущих нулей; строка из одних нулей сводится к "0".

    Examples:
        >>> strip_leading_zeros("0042")
        '42'
        >>> strip_leading_zeros("000")
        '0'
    """
    stripped = digits.lstrip("0")
    return stripped or "0"


def _check_digit_sequence(digits: str, strip_whitespace: bool) -> str:
    """
    Проверка входа и нормализация пробелов.

    Returns:
        Строка цифр, готовая к разбиению на limbs

    Raises:
        TypeError: Если digits не str
        DigitSequenceError: EMPTY_INPUT или INVALID_DIGIT
    """
    if not isinstance(digits, str):
        raise TypeError(f"digit sequence must be a str, got {type(digits).__name__}")

    if strip_whitespace:
        digits = digits.strip()

    if not digits:
        raise DigitSequenceError(ErrorKind.EMPTY_INPUT, "digit sequence is empty")

    for position, ch in enumerate(digits):
        if ch not in _ASCII_DIGITS:
            raise DigitSequenceError(
                ErrorKind.INVALID_DIGIT,
                f"invalid digit {ch!r} at position {position}",
                position=position,
            )

    return digits


# =============================================================================
# PARSE
# =============================================================================


def to_big_integer(
    digits: str,
    fmt: LimbFormat = DEFAULT_LIMB_FORMAT,
    strip_whitespace: bool = False,
) -> BigInt:
    """
    Конверсия digit sequence в BigInt.

    Алгоритм: строка режется справа на группы по fmt.magnitude цифр,
    значение каждой группы — один limb. Крайняя левая группа может быть
    короче. Старшие нулевые limbs (от ведущих нулей) отбрасываются.

    Args:
        digits: Строка десятичных цифр
        fmt: Limb-формат (default: DEFAULT_LIMB_FORMAT)
        strip_whitespace: Удалить пробелы по краям перед разбором

    Returns:
        BigInt, равный десятичному значению digits

    Raises:
        DigitSequenceError: Если строка пустая или содержит не-цифры
        TypeError: Если digits не str

    Examples:
        >>> to_big_integer("123").limbs
        (123,)
        >>> to_big_integer("1234567", LimbFormat(3)).limbs
        (567, 234, 1)
    """
    digits = _check_digit_sequence(digits, strip_whitespace)

    limbs = []
    end = len(digits)
    while end > 0:
        start = max(end - fmt.magnitude, 0)
        limbs.append(int(digits[start:end]))
        end = start

    # Ведущие нули дают нулевые старшие limbs
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()

    return BigInt(limbs=tuple(limbs), magnitude=fmt.magnitude)


def parse(
    digits: str,
    fmt: LimbFormat = DEFAULT_LIMB_FORMAT,
    strip_whitespace: bool = False,
) -> ParseResult:
    """
    Разбор digit sequence без exceptions для невалидного входа.

    Args:
        digits: Строка десятичных цифр
        fmt: Limb-формат
        strip_whitespace: Удалить пробелы по краям перед разбором

    Returns:
        ParseResult(value, None) при успехе,
        ParseResult(None, error_kind) при ошибке

    Examples:
        >>> parse("42").value.limbs
        (42,)
        >>> parse("").error
        <ErrorKind.EMPTY_INPUT: 'EMPTY_INPUT'>
    """
    try:
        value = to_big_integer(digits, fmt=fmt, strip_whitespace=strip_whitespace)
    except DigitSequenceError as e:
        logger.debug("rejected digit sequence: %s", e)
        return ParseResult(value=None, error=e.kind)

    return ParseResult(value=value, error=None)
