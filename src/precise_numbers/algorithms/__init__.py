"""Numerical algorithms module.

This module contains implementations of:
- Exact and scaled Decimal arithmetic (unrounded context, correctly rounded division)
- Heron's method for arbitrary-precision square roots
- The mpmath bridge for pi, principal arguments and polar-to-rectangular conversion
"""

from precise_numbers.algorithms.decimal_arithmetic import (
    EXACT_CONTEXT,
    divide,
    exact_add,
    exact_multiply,
    exact_negate,
    exact_square,
    exact_subtract,
    rescale,
    to_decimal,
)
from precise_numbers.algorithms.square_root import (
    ITERATION_ROUNDING_MODE,
    ITERATION_SCALE,
    ScientificNotation,
    SquareRootTrace,
    is_perfect_square,
    run_herons_method,
    scientific_notation_for_sqrt,
    seed_value,
    sqrt,
    sqrt_of_perfect_square,
)
from precise_numbers.algorithms.trigonometry import (
    pi,
    polar_to_rectangular,
    principal_argument,
    working_precision,
)

__all__ = [
    # Decimal arithmetic
    "EXACT_CONTEXT",
    "divide",
    "exact_add",
    "exact_multiply",
    "exact_negate",
    "exact_square",
    "exact_subtract",
    "rescale",
    "to_decimal",
    # Square roots
    "ITERATION_ROUNDING_MODE",
    "ITERATION_SCALE",
    "ScientificNotation",
    "SquareRootTrace",
    "is_perfect_square",
    "run_herons_method",
    "scientific_notation_for_sqrt",
    "seed_value",
    "sqrt",
    "sqrt_of_perfect_square",
    # Trigonometry
    "pi",
    "polar_to_rectangular",
    "principal_argument",
    "working_precision",
]
