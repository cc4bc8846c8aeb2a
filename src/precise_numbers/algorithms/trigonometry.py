"""Bridge between Decimal values and mpmath's arbitrary-precision trigonometry.

mpmath evaluates pi, atan, sin and cos at a chosen number of decimal digits.
This module picks that working precision from a PrecisionConfig, converts
Decimal inputs to mpf and converts results back to Decimal with the config's
scale and rounding mode.

Conversion back is exact: an mpf is man · 2^exp, which is turned into a
correctly rounded Decimal quotient instead of going through a printed string.
"""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from decimal import Decimal
from typing import Final

import mpmath

from precise_numbers.algorithms.decimal_arithmetic import divide, rescale
from precise_numbers.data.precision_types import (
    PrecisionConfig,
    resolve_config,
)
from precise_numbers.exceptions import InvalidStateError

logger = logging.getLogger(__name__)

GUARD_DIGITS: Final[int] = 10
"""Digits carried beyond config.scale while mpmath evaluates."""


def working_digits(config: PrecisionConfig | None = None, magnitude: int = 0) -> int:
    """
    Decimal digits mpmath needs so that a result rounds correctly at config.scale.

    Args:
        config: Precision configuration.
        magnitude: Number of integer digits the result may have.

    Returns:
        config.scale + GUARD_DIGITS + max(magnitude, 0)
    """
    config = resolve_config(config)
    return config.scale + GUARD_DIGITS + max(magnitude, 0)


def working_precision(
    config: PrecisionConfig | None = None, magnitude: int = 0
) -> AbstractContextManager[None]:
    """Context manager that sets mpmath's decimal precision for config."""
    digits = working_digits(config, magnitude)
    logger.debug("mpmath working precision = %d digits", digits)
    return mpmath.workdps(digits)


def to_mpf(value: Decimal) -> mpmath.mpf:
    """Convert a Decimal to an mpf at the current mpmath precision."""
    return mpmath.mpf(format(value, "f"))


def from_mpf(value: mpmath.mpf, config: PrecisionConfig | None = None) -> Decimal:
    """
    Convert an mpf to a Decimal rounded to config.scale.

    Args:
        value: Finite mpf.
        config: Scale and rounding mode of the result.

    Returns:
        Decimal with exactly config.scale fractional digits.
    """
    config = resolve_config(config)
    # mpf internals: (sign, mantissa, exponent, bitcount), value = ±mantissa · 2^exponent
    sign, mantissa, exponent, _ = value._mpf_
    mantissa = -int(mantissa) if sign else int(mantissa)
    exponent = int(exponent)
    if exponent >= 0:
        return rescale(
            Decimal(mantissa * 2**exponent), config.scale, config.rounding_mode
        )
    return divide(
        Decimal(mantissa), Decimal(2**-exponent), config.scale, config.rounding_mode
    )


def pi(config: PrecisionConfig | None = None) -> Decimal:
    """π rounded to config.scale."""
    with working_precision(config, magnitude=1):
        return from_mpf(+mpmath.pi, config)


def principal_argument(
    real: Decimal, imaginary: Decimal, config: PrecisionConfig | None = None
) -> Decimal:
    """
    Angle of real + imaginary·i in (-π, π], rounded once to config.scale.

    Branches:
        real > 0:                 atan(imaginary / real)
        real < 0, imaginary >= 0: atan(imaginary / real) + π
        real < 0, imaginary < 0:  atan(imaginary / real) - π
        real = 0, imaginary > 0:  π/2
        real = 0, imaginary < 0:  -π/2

    Raises:
        InvalidStateError: If both components are zero.
    """
    if real.is_zero() and imaginary.is_zero():
        msg = f"expected nonzero complex number but actual {real} + {imaginary}i"
        raise InvalidStateError(msg)
    config = resolve_config(config)

    with working_precision(config, magnitude=1):
        if real.is_zero():
            angle = mpmath.pi / 2
            if imaginary < 0:
                angle = -angle
        else:
            angle = mpmath.atan(to_mpf(imaginary) / to_mpf(real))
            if real < 0:
                angle = angle + mpmath.pi if imaginary >= 0 else angle - mpmath.pi
        return from_mpf(angle, config)


def polar_to_rectangular(
    radial: Decimal, angular: Decimal, config: PrecisionConfig | None = None
) -> tuple[Decimal, Decimal]:
    """
    (radial·cos(angular), radial·sin(angular)), each rounded to config.scale.

    The integer digits of radial are added to the working precision so both
    products keep config.scale correct fractional digits.
    """
    config = resolve_config(config)
    with working_precision(config, magnitude=radial.adjusted() + 1):
        mpf_radial = to_mpf(radial)
        mpf_angular = to_mpf(angular)
        return (
            from_mpf(mpf_radial * mpmath.cos(mpf_angular), config),
            from_mpf(mpf_radial * mpmath.sin(mpf_angular), config),
        )


__all__ = [
    "GUARD_DIGITS",
    "from_mpf",
    "pi",
    "polar_to_rectangular",
    "principal_argument",
    "to_mpf",
    "working_digits",
    "working_precision",
]
