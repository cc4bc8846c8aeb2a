"""Arbitrary-precision square roots via Heron's method.

Implements Newton's iteration specialised for the square root,

    x_{n+1} = (x_n² + a) / (2·x_n)

on Decimal values, together with an exact path for perfect squares.

Key Details:
- Seed estimation from a base-100 scientific notation of the input, which puts
  x_0 within the correct order of magnitude
- Divisions run at a fixed internal scale, independent of the output scale
- Iteration continues while successive approximations differ by at least the
  configured precision, then the result is rescaled to the caller's scale

References:
- Heath: "Scientific Computing" (2nd ed.), §5.5 (Newton's method)
- Knuth: TAOCP Vol. 2, §4.3.3 (multiple-precision arithmetic)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Final

from precise_numbers.algorithms.decimal_arithmetic import (
    EXACT_CONTEXT,
    TWO,
    ZERO,
    divide,
    exact_add,
    exact_multiply,
    exact_square,
    exact_subtract,
    rescale,
    to_decimal,
)
from precise_numbers.data.precision_types import (
    PrecisionConfig,
    RoundingMode,
    resolve_config,
)
from precise_numbers.exceptions import InvalidArgumentError, require_not_none

logger = logging.getLogger(__name__)

ITERATION_SCALE: Final[int] = 10
"""Fractional digits kept by each Heron step."""

ITERATION_ROUNDING_MODE: Final[RoundingMode] = RoundingMode.HALF_UP
"""Rounding applied by each Heron step."""

_HUNDRED: Final[Decimal] = Decimal(100)
_TEN: Final[Decimal] = Decimal(10)


@dataclass(frozen=True, slots=True)
class ScientificNotation:
    """Decimal written as coefficient · 10^exponent."""

    coefficient: Decimal
    """Coefficient, in [0, 100) for square-root seeding."""

    exponent: int
    """Power of ten (even for square-root seeding)."""

    def as_string(self) -> str:
        """Human-readable form, e.g. '1.44 * 10**4'."""
        if self.coefficient.is_zero():
            return "0"
        coefficient = format(self.coefficient, "f")
        if self.exponent < 0:
            return f"{coefficient} * 10**({self.exponent})"
        if self.exponent == 0:
            return coefficient
        if self.exponent == 1:
            return f"{coefficient} * 10"
        return f"{coefficient} * 10**{self.exponent}"


@dataclass(frozen=True, slots=True)
class SquareRootTrace:
    """Complete trace of a Heron's method execution."""

    value: Decimal
    """Radicand."""

    seed: Decimal
    """Initial approximation x_0."""

    iterations: int
    """Number of Heron steps performed."""

    approximations: tuple[Decimal, ...]
    """x_0, x_1, ..., x_n (tuple for immutability)."""

    converged_value: Decimal
    """Last approximation at the internal iteration scale."""

    result: Decimal
    """Converged value rescaled to the requested scale and rounding mode."""


# =============================================================================
# PUBLIC API
# =============================================================================


def sqrt(
    value: Decimal | int | float | str,
    config: PrecisionConfig | None = None,
) -> Decimal:
    """
    Compute the non-negative square root of value.

    Args:
        value: Radicand (Decimal, int, float or numeric string), >= 0.
        config: Precision, scale and rounding (default: 1E-10, 10, HALF_UP).

    Returns:
        Square root with exactly config.scale fractional digits.

    Raises:
        NullArgumentError: If value is None.
        InvalidArgumentError: If value is negative or not numeric, or config
            is not a PrecisionConfig.

    Example:
        >>> sqrt(4)
        Decimal('2.0000000000')
        >>> sqrt(2, PrecisionConfig(scale=4))
        Decimal('1.4142')
    """
    return run_herons_method(value, config).result


def run_herons_method(
    value: Decimal | int | float | str,
    config: PrecisionConfig | None = None,
) -> SquareRootTrace:
    """
    Run Heron's method to convergence and record every approximation.

    Algorithm:
        1. Seed x_0 from the base-100 scientific notation of value
        2. x_{n+1} = (x_n² + value) / (2·x_n) at ITERATION_SCALE digits
        3. Repeat while |x_{n+1} - x_n| >= config.precision
        4. Rescale x_n to config.scale with config.rounding_mode

    Args:
        value: Radicand, >= 0.
        config: Precision configuration (default: DEFAULT_PRECISION_CONFIG).

    Returns:
        SquareRootTrace with seed, approximations and result.

    Raises:
        NullArgumentError: If value is None.
        InvalidArgumentError: If value is negative or not numeric, or config
            is not a PrecisionConfig.
    """
    decimal_value = _check_radicand(value)
    config = resolve_config(config)

    if decimal_value.is_zero():
        return SquareRootTrace(
            value=decimal_value,
            seed=ZERO,
            iterations=0,
            approximations=(ZERO,),
            converged_value=ZERO,
            result=rescale(ZERO, config.scale, config.rounding_mode),
        )

    logger.debug(
        "calculating square root for %s with precision = %s",
        decimal_value,
        config.precision,
    )

    predecessor = seed_value(decimal_value)
    logger.debug("seed value = %s", predecessor)

    successor = _successor(predecessor, decimal_value, config)
    approximations = [predecessor, successor]
    iterations = 1

    while exact_subtract(successor, predecessor).copy_abs() >= config.precision:
        logger.debug(
            "|successor - predecessor| = %s",
            exact_subtract(successor, predecessor).copy_abs(),
        )
        predecessor = successor
        successor = _successor(successor, decimal_value, config)
        approximations.append(successor)
        iterations += 1

    logger.debug("terminated after %d iterations", iterations)
    logger.debug("sqrt(%s) = %s", decimal_value, successor)

    return SquareRootTrace(
        value=decimal_value,
        seed=approximations[0],
        iterations=iterations,
        approximations=tuple(approximations),
        converged_value=successor,
        result=rescale(successor, config.scale, config.rounding_mode),
    )


def scientific_notation_for_sqrt(value: Decimal | int | float | str) -> ScientificNotation:
    """
    Write value as coefficient · 10^exponent with coefficient < 100 and even exponent.

    Divides by 100 (adding 2 to the exponent) while coefficient >= 100.
    Values below 100 are returned unchanged with exponent 0.

    Example:
        >>> scientific_notation_for_sqrt(12345)
        ScientificNotation(coefficient=Decimal('1.2345'), exponent=4)
    """
    coefficient = _check_radicand(value)
    exponent = 0
    while coefficient >= _HUNDRED:
        coefficient = coefficient.scaleb(-2, context=EXACT_CONTEXT)
        exponent += 2
    return ScientificNotation(coefficient=coefficient, exponent=exponent)


def seed_value(value: Decimal | int | float | str) -> Decimal:
    """
    Initial approximation for Heron's method.

    6·10^(exponent/2) if the base-100 coefficient is >= 10, else 2·10^(exponent/2).
    """
    notation = scientific_notation_for_sqrt(value)
    logger.debug("Scientific notation of %s is %s.", value, notation.as_string())
    factor = Decimal(6) if notation.coefficient >= _TEN else TWO
    return factor.scaleb(notation.exponent // 2, context=EXACT_CONTEXT)


def is_perfect_square(integer: int) -> bool:
    """
    Whether integer is the square of an integer.

    Uses integer Newton iteration (math.isqrt), O(log n) steps.

    Raises:
        NullArgumentError: If integer is None.
        InvalidArgumentError: If integer is negative or not an int.
    """
    _check_non_negative_int(integer)
    root = math.isqrt(integer)
    return root * root == integer


def sqrt_of_perfect_square(integer: int) -> int:
    """
    Exact square root of a perfect square.

    Raises:
        NullArgumentError: If integer is None.
        InvalidArgumentError: If integer is negative or not a perfect square.

    Example:
        >>> sqrt_of_perfect_square(144)
        12
    """
    _check_non_negative_int(integer)
    root = math.isqrt(integer)
    if root * root != integer:
        msg = f"expected perfect square but actual {integer}"
        raise InvalidArgumentError(msg)
    return root


# =============================================================================
# INTERNAL HELPERS
# =============================================================================


def _successor(predecessor: Decimal, value: Decimal, config: PrecisionConfig) -> Decimal:
    """One Heron step."""
    divisor = exact_multiply(TWO, predecessor)
    if divisor.is_zero():
        return config.precision
    dividend = exact_add(exact_square(predecessor), value)
    return divide(dividend, divisor, ITERATION_SCALE, ITERATION_ROUNDING_MODE)


def _check_radicand(value: Decimal | int | float | str) -> Decimal:
    decimal_value = to_decimal(require_not_none(value, "value"))
    if decimal_value < ZERO:
        msg = f"expected value >= 0 but actual {value}"
        raise InvalidArgumentError(msg)
    return decimal_value


def _check_non_negative_int(integer: int) -> None:
    require_not_none(integer, "integer")
    if isinstance(integer, bool) or not isinstance(integer, int):
        msg = f"expected integer to be an int but actual {integer!r}"
        raise InvalidArgumentError(msg)
    if integer < 0:
        msg = f"expected integer >= 0 but actual {integer}"
        raise InvalidArgumentError(msg)


__all__ = [
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
]
