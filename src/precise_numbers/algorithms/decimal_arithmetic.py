"""Exact and scaled Decimal arithmetic.

Python's default decimal context rounds every result to 28 significant digits.
Arbitrary-precision values must not lose digits silently, so this module keeps
two kinds of operations apart:

- exact operations (add, subtract, multiply, negate, square) run in an
  unrounded context whose precision is `decimal.MAX_PREC`;
- scaled operations (divide, rescale) produce a result with a fixed number of
  fractional digits and an explicit rounding mode.

Division is correctly rounded for every mode: the quotient is first computed
with ROUND_05UP and one guard digit, which preserves enough information for
the final quantize to round exactly as if the quotient were known in full.

References:
- Python `decimal` docs, "Decimal FAQ" (ROUND_05UP and double rounding)
- Goldberg, "What Every Computer Scientist Should Know About Floating-Point
  Arithmetic" (1991), §1.4
"""

from __future__ import annotations

import decimal
from decimal import Context, Decimal
from typing import Final

from precise_numbers.data.precision_types import (
    RoundingMode,
    get_rounding_spec,
)
from precise_numbers.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    NotInvertibleError,
    require_not_none,
)

EXACT_CONTEXT: Final[Context] = Context(
    prec=decimal.MAX_PREC,
    rounding=decimal.ROUND_HALF_EVEN,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
)
"""Unrounded context for operations whose result has finitely many digits."""

ZERO: Final[Decimal] = Decimal(0)
ONE: Final[Decimal] = Decimal(1)
TWO: Final[Decimal] = Decimal(2)

_GUARD_DIGITS = 2


def to_decimal(value: Decimal | int | float | str, name: str = "value") -> Decimal:
    """
    Coerce a numeric value into a finite Decimal without losing digits.

    Floats go through their shortest repr, so 0.1 becomes Decimal('0.1').

    Args:
        value: Decimal, int, float or numeric string.
        name: Parameter name used in error messages.

    Returns:
        Finite Decimal equal to value.

    Raises:
        NullArgumentError: If value is None.
        InvalidArgumentError: If value is not numeric, NaN or infinite.

    Example:
        >>> to_decimal(0.1)
        Decimal('0.1')
    """
    require_not_none(value, name)

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        msg = f"expected {name} to be numeric but actual {value!r}"
        raise InvalidArgumentError(msg)
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except decimal.InvalidOperation as exc:
            msg = f"expected {name} to be numeric but actual {value!r}"
            raise InvalidArgumentError(msg) from exc
    else:
        msg = f"expected {name} to be numeric but actual {value!r}"
        raise InvalidArgumentError(msg)

    if not result.is_finite():
        msg = f"expected {name} to be finite but actual {value}"
        raise InvalidArgumentError(msg)
    return result


# =============================================================================
# EXACT OPERATIONS
# =============================================================================


def exact_add(augend: Decimal, addend: Decimal) -> Decimal:
    """augend + addend without rounding."""
    return EXACT_CONTEXT.add(augend, addend)


def exact_subtract(minuend: Decimal, subtrahend: Decimal) -> Decimal:
    """minuend - subtrahend without rounding."""
    return EXACT_CONTEXT.subtract(minuend, subtrahend)


def exact_multiply(multiplicand: Decimal, multiplier: Decimal) -> Decimal:
    """multiplicand * multiplier without rounding."""
    return EXACT_CONTEXT.multiply(multiplicand, multiplier)


def exact_negate(value: Decimal) -> Decimal:
    """-value without rounding (zero stays unsigned)."""
    return EXACT_CONTEXT.minus(value)


def exact_square(value: Decimal) -> Decimal:
    """value² without rounding."""
    return EXACT_CONTEXT.multiply(value, value)


# =============================================================================
# SCALED OPERATIONS
# =============================================================================


def divide(
    dividend: Decimal,
    divisor: Decimal,
    scale: int,
    rounding_mode: RoundingMode | str,
) -> Decimal:
    """
    Divide and round the quotient to `scale` fractional digits.

    Args:
        dividend: Numerator.
        divisor: Denominator, must be nonzero.
        scale: Fractional digits of the result (>= 0).
        rounding_mode: Rounding applied to the quotient.

    Returns:
        Quotient with exponent -scale.

    Raises:
        NotInvertibleError: If divisor is zero.
        InvalidArgumentError: If scale is negative.
        InvalidStateError: If rounding_mode is UNNECESSARY and the quotient
            does not fit in `scale` digits.

    Example:
        >>> divide(Decimal(2), Decimal(3), 4, RoundingMode.HALF_UP)
        Decimal('0.6667')
    """
    _check_scale(scale)
    if divisor.is_zero():
        msg = f"expected divisor != 0 but actual {divisor}"
        raise NotInvertibleError(msg)

    if dividend.is_zero():
        return rescale(ZERO, scale, rounding_mode)

    # The quotient's leading digit sits at most one place above
    # adjusted(dividend) - adjusted(divisor).
    leading = dividend.adjusted() - divisor.adjusted() + 1
    prec = max(leading, 0) + scale + _GUARD_DIGITS
    context = Context(
        prec=prec,
        rounding=decimal.ROUND_05UP,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
    )
    quotient = context.divide(dividend, divisor)

    if context.flags[decimal.Inexact] and get_rounding_spec(rounding_mode).exact:
        msg = (
            f"expected {dividend} / {divisor} to be exact at scale {scale} "
            "but rounding is necessary"
        )
        raise InvalidStateError(msg)

    return rescale(quotient, scale, rounding_mode)


def rescale(value: Decimal, scale: int, rounding_mode: RoundingMode | str) -> Decimal:
    """
    Round value to exactly `scale` fractional digits.

    Args:
        value: Value to rescale.
        scale: Fractional digits of the result (>= 0).
        rounding_mode: Rounding applied when digits are discarded.

    Returns:
        Decimal with exponent -scale.

    Raises:
        InvalidArgumentError: If scale is negative.
        InvalidStateError: If rounding_mode is UNNECESSARY and nonzero digits
            would be discarded.
    """
    _check_scale(scale)
    spec = get_rounding_spec(rounding_mode)
    quantum = Decimal((0, (1,), -scale))
    context = Context(
        prec=max(value.adjusted() + scale + _GUARD_DIGITS, 1),
        rounding=spec.decimal_rounding,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
        traps=[decimal.InvalidOperation, decimal.Inexact] if spec.exact else [decimal.InvalidOperation],
    )
    try:
        return value.quantize(quantum, context=context)
    except decimal.Inexact as exc:
        msg = f"expected {value} to be exact at scale {scale} but rounding is necessary"
        raise InvalidStateError(msg) from exc


def _check_scale(scale: int) -> None:
    if scale < 0:
        msg = f"expected scale >= 0 but actual {scale}"
        raise InvalidArgumentError(msg)


__all__ = [
    "EXACT_CONTEXT",
    "ONE",
    "TWO",
    "ZERO",
    "divide",
    "exact_add",
    "exact_multiply",
    "exact_negate",
    "exact_square",
    "exact_subtract",
    "rescale",
    "to_decimal",
]
