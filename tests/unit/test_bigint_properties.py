"""
Property-based тесты для арифметики BigInt

Использует Hypothesis для генерации произвольных digit sequences и
limb-форматов:
1. Round-trip: render(parse(s)) == s для канонических s
2. Нормализация ведущих нулей
3. Коммутативность и нейтральный элемент
4. Согласованность с Python int
5. Рост длины только при финальном переносе

Run with: pytest tests/unit/test_bigint_properties.py --hypothesis-show-statistics
"""

import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis required for property tests")

from hypothesis import given, settings, strategies as st

from src.core.domain import BigInt, LimbFormat
from src.core.math import add, parse, render, to_big_integer


# =============================================================================
# Hypothesis Strategies
# =============================================================================

limb_formats = st.integers(min_value=1, max_value=18).map(LimbFormat)

canonical_digits = st.one_of(
    st.just("0"),
    st.builds(
        lambda head, tail: head + tail,
        st.sampled_from("123456789"),
        st.text(alphabet="0123456789", max_size=120),
    ),
)

naturals = st.integers(min_value=0, max_value=10**120)


# =============================================================================
# Properties
# =============================================================================


@given(canonical_digits, limb_formats)
def test_round_trip(digits, fmt):
    assert render(parse(digits, fmt).value) == digits


@given(canonical_digits, st.integers(min_value=1, max_value=40), limb_formats)
def test_leading_zeros_normalized(digits, zeros, fmt):
    assert to_big_integer("0" * zeros + digits, fmt) == to_big_integer(digits, fmt)


@given(naturals, naturals, limb_formats)
def test_commutative(x, y, fmt):
    a, b = BigInt.from_int(x, fmt), BigInt.from_int(y, fmt)
    assert render(add(a, b)) == render(add(b, a))


@given(naturals, limb_formats)
def test_zero_is_identity(x, fmt):
    a = BigInt.from_int(x, fmt)
    assert render(add(a, parse("0", fmt).value)) == render(a)


@settings(max_examples=200)
@given(naturals, naturals, limb_formats)
def test_matches_python_int(x, y, fmt):
    total = add(BigInt.from_int(x, fmt), BigInt.from_int(y, fmt))
    assert total.to_int() == x + y
    assert render(total) == str(x + y)


@given(naturals, naturals, limb_formats)
def test_length_growth(x, y, fmt):
    """Длина = max(длин) + 1 ровно тогда, когда сумма не помещается в max(длин)"""
    a, b = BigInt.from_int(x, fmt), BigInt.from_int(y, fmt)
    total = add(a, b)
    width = max(a.length, b.length)
    if x + y >= fmt.base**width:
        assert total.length == width + 1
    else:
        assert total.length == width


@given(naturals, naturals, limb_formats)
def test_inputs_not_mutated(x, y, fmt):
    a, b = BigInt.from_int(x, fmt), BigInt.from_int(y, fmt)
    a_before, b_before = a.model_copy(deep=True), b.model_copy(deep=True)
    add(a, b)
    add(a, a)
    assert a == a_before
    assert b == b_before


@given(st.text(min_size=1, max_size=40).filter(lambda s: not s.isascii() or not s.isdigit()))
def test_non_digit_text_rejected(text):
    assert parse(text).value is None
