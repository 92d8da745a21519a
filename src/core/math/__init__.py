"""
Core math modules для strmath

Арифметика больших неотрицательных целых: разбор, сложение, рендеринг.
"""

# Digit Parser
from src.core.math.digit_parser import (
    ParseResult,
    is_digit_sequence,
    parse,
    strip_leading_zeros,
    to_big_integer,
)

# Big-Integer Adder
from src.core.math.bigint_adder import add, add_many

# Digit Renderer
from src.core.math.digit_renderer import render

# Composition
from src.core.math.strmath import SumResult, add_strings, format_sum_line

__all__ = [
    # Digit Parser — Types
    "ParseResult",
    # Digit Parser — Functions
    "is_digit_sequence",
    "parse",
    "strip_leading_zeros",
    "to_big_integer",
    # Big-Integer Adder
    "add",
    "add_many",
    # Digit Renderer
    "render",
    # Composition
    "SumResult",
    "add_strings",
    "format_sum_line",
]
