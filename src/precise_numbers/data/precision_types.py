"""
Precision Configuration - Single Source of Truth

This module defines the rounding modes and the precision configuration bundle
shared by every operation that approximates an irrational result: the square
root engine, complex modulus/argument and polar-form reconstruction.

A configuration carries three values:
    - precision: iteration-termination threshold, open interval (0, 1)
    - scale: number of fractional digits of the result, >= 0
    - rounding_mode: how the result is rounded to that scale

References:
    - IEEE 754-2019 Standard, Section 4.3 (rounding-direction attributes)
    - Python `decimal` module documentation (rounding constants)
"""

from __future__ import annotations

import decimal
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Final

from precise_numbers.exceptions import InvalidArgumentError, NullArgumentError


class RoundingMode(Enum):
    """Supported rounding modes."""

    UP = "up"  # away from zero
    DOWN = "down"  # towards zero
    CEILING = "ceiling"
    FLOOR = "floor"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    HALF_EVEN = "half_even"  # banker's rounding
    UNNECESSARY = "unnecessary"  # result must be exact


@dataclass(frozen=True, slots=True)
class RoundingSpec:
    """Specification of a rounding mode."""

    mode: RoundingMode
    decimal_rounding: str
    """Matching `decimal` module rounding constant."""

    exact: bool
    """True if rounding is forbidden (any discarded digit is an error)."""


# =============================================================================
# ROUNDING SPECIFICATIONS
# =============================================================================
# UNNECESSARY has no `decimal` counterpart: it rounds half-even with the
# Inexact condition trapped, so any discarded nonzero digit raises.

_ROUNDING_SPECS: dict[RoundingMode, RoundingSpec] = {
    RoundingMode.UP: RoundingSpec(RoundingMode.UP, decimal.ROUND_UP, exact=False),
    RoundingMode.DOWN: RoundingSpec(RoundingMode.DOWN, decimal.ROUND_DOWN, exact=False),
    RoundingMode.CEILING: RoundingSpec(
        RoundingMode.CEILING, decimal.ROUND_CEILING, exact=False
    ),
    RoundingMode.FLOOR: RoundingSpec(
        RoundingMode.FLOOR, decimal.ROUND_FLOOR, exact=False
    ),
    RoundingMode.HALF_UP: RoundingSpec(
        RoundingMode.HALF_UP, decimal.ROUND_HALF_UP, exact=False
    ),
    RoundingMode.HALF_DOWN: RoundingSpec(
        RoundingMode.HALF_DOWN, decimal.ROUND_HALF_DOWN, exact=False
    ),
    RoundingMode.HALF_EVEN: RoundingSpec(
        RoundingMode.HALF_EVEN, decimal.ROUND_HALF_EVEN, exact=False
    ),
    RoundingMode.UNNECESSARY: RoundingSpec(
        RoundingMode.UNNECESSARY, decimal.ROUND_HALF_EVEN, exact=True
    ),
}


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_PRECISION: Final[Decimal] = Decimal("1E-10")
DEFAULT_SCALE: Final[int] = 10
DEFAULT_ROUNDING_MODE: Final[RoundingMode] = RoundingMode.HALF_UP


@dataclass(frozen=True, slots=True)
class PrecisionConfig:
    """Precision, scale and rounding mode for approximated results.

    Validated on construction; instances are immutable and freely shared.

    Example:
        >>> config = PrecisionConfig(precision=Decimal("1E-20"), scale=20)
        >>> config.rounding_mode
        <RoundingMode.HALF_UP: 'half_up'>
        >>> PrecisionConfig(rounding_mode="half-even").rounding_mode
        <RoundingMode.HALF_EVEN: 'half_even'>
    """

    precision: Decimal = DEFAULT_PRECISION
    """Iteration stops once successive approximations differ by less than this."""

    scale: int = DEFAULT_SCALE
    """Fractional digits of the result."""

    rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE
    """Rounding applied when reducing a result to `scale` digits."""

    def __post_init__(self) -> None:
        if self.precision is None:
            raise NullArgumentError("expected precision but actual None")
        if self.rounding_mode is None:
            raise NullArgumentError("expected rounding_mode but actual None")

        precision = _coerce_precision(self.precision)
        if not Decimal(0) < precision < Decimal(1):
            msg = f"expected precision in (0, 1) but actual {self.precision}"
            raise InvalidArgumentError(msg)

        if isinstance(self.scale, bool) or not isinstance(self.scale, int):
            msg = f"expected scale to be an int but actual {self.scale!r}"
            raise InvalidArgumentError(msg)
        if self.scale < 0:
            msg = f"expected scale >= 0 but actual {self.scale}"
            raise InvalidArgumentError(msg)

        object.__setattr__(self, "precision", precision)
        object.__setattr__(self, "rounding_mode", parse_rounding_mode(self.rounding_mode))

    @property
    def decimal_rounding(self) -> str:
        """`decimal` rounding constant for this configuration."""
        return _ROUNDING_SPECS[self.rounding_mode].decimal_rounding

    @property
    def quantum(self) -> Decimal:
        """Smallest step at this scale, e.g. Decimal('1E-10') for scale 10."""
        return Decimal((0, (1,), -self.scale))

    def with_scale(self, scale: int) -> PrecisionConfig:
        """Copy of this configuration with another scale."""
        return replace(self, scale=scale)

    def with_rounding_mode(self, rounding_mode: RoundingMode | str) -> PrecisionConfig:
        """Copy of this configuration with another rounding mode."""
        return replace(self, rounding_mode=rounding_mode)


# =============================================================================
# PUBLIC API
# =============================================================================


def get_rounding_spec(mode: RoundingMode | str) -> RoundingSpec:
    """
    Get the full specification for a rounding mode.

    Args:
        mode: Rounding mode (enum or string like 'half_up', 'HALF-EVEN')

    Returns:
        RoundingSpec with the `decimal` constant and exactness flag

    Raises:
        InvalidArgumentError: If the mode is unknown

    Example:
        >>> get_rounding_spec("half-up").decimal_rounding
        'ROUND_HALF_UP'
    """
    return _ROUNDING_SPECS[parse_rounding_mode(mode)]


def get_decimal_rounding(mode: RoundingMode | str) -> str:
    """Get the `decimal` module rounding constant for a rounding mode."""
    return get_rounding_spec(mode).decimal_rounding


def is_exact(mode: RoundingMode | str) -> bool:
    """True if the rounding mode forbids discarding nonzero digits."""
    return get_rounding_spec(mode).exact


def list_rounding_modes() -> list[RoundingMode]:
    """List all rounding modes in declaration order."""
    return list(RoundingMode)


def parse_rounding_mode(mode: RoundingMode | str) -> RoundingMode:
    """
    Parse a rounding mode given as enum or string.

    Args:
        mode: RoundingMode, or a name such as 'half-up', 'HALF_UP', 'half up'

    Returns:
        RoundingMode

    Raises:
        InvalidArgumentError: If the mode is unknown or not a string/enum
    """
    if isinstance(mode, RoundingMode):
        return mode

    if not isinstance(mode, str):
        valid = [m.value for m in RoundingMode]
        msg = f"Unknown rounding mode: {mode!r}. Valid: {valid}"
        raise InvalidArgumentError(msg)

    normalized = mode.lower().replace("-", "_").replace(" ", "_")

    for candidate in RoundingMode:
        if candidate.value == normalized:
            return candidate

    valid = [m.value for m in RoundingMode]
    raise InvalidArgumentError(f"Unknown rounding mode: '{mode}'. Valid: {valid}")


# =============================================================================
# INTERNAL HELPERS
# =============================================================================


def _coerce_precision(value: Decimal | str | int | float) -> Decimal:
    """Convert a precision given as Decimal, str or number into a finite Decimal."""
    if isinstance(value, Decimal):
        precision = value
    elif isinstance(value, float):
        precision = Decimal(repr(value))
    elif isinstance(value, (int, str)) and not isinstance(value, bool):
        try:
            precision = Decimal(value)
        except decimal.InvalidOperation as exc:
            msg = f"expected precision to be numeric but actual {value!r}"
            raise InvalidArgumentError(msg) from exc
    else:
        msg = f"expected precision to be numeric but actual {value!r}"
        raise InvalidArgumentError(msg)

    if not precision.is_finite():
        msg = f"expected precision in (0, 1) but actual {value}"
        raise InvalidArgumentError(msg)
    return precision


DEFAULT_PRECISION_CONFIG: Final[PrecisionConfig] = PrecisionConfig()


def resolve_config(config: PrecisionConfig | None) -> PrecisionConfig:
    """Return config, or DEFAULT_PRECISION_CONFIG when it is None."""
    if config is None:
        return DEFAULT_PRECISION_CONFIG
    if not isinstance(config, PrecisionConfig):
        msg = f"expected config to be a PrecisionConfig but actual {config!r}"
        raise InvalidArgumentError(msg)
    return config



__all__ = [
    "DEFAULT_PRECISION",
    "DEFAULT_PRECISION_CONFIG",
    "DEFAULT_ROUNDING_MODE",
    "DEFAULT_SCALE",
    "PrecisionConfig",
    "RoundingMode",
    "RoundingSpec",
    "get_decimal_rounding",
    "get_rounding_spec",
    "is_exact",
    "list_rounding_modes",
    "parse_rounding_mode",
    "resolve_config",
]
