"""Exact rational numbers over arbitrary-precision integers.

Arithmetic never normalizes or reduces: 1/2 + 1/2 is 4/4, not 1/1. Equality
(`==`) is structural, so Fraction(1, 2) != Fraction(2, 4); mathematical
equality is `equivalent`, which compares the normalized and reduced forms.
Ordering compares by cross-multiplication and never touches floating point.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from precise_numbers.exceptions import (
    InvalidArgumentError,
    NotInvertibleError,
    require_not_none,
)


@dataclass(frozen=True, slots=True)
class Fraction:
    """Immutable fraction numerator/denominator with denominator != 0.

    Example:
        >>> Fraction(1, 2).add(Fraction(1, 3))
        Fraction(numerator=5, denominator=6)
        >>> Fraction(1, 2) == Fraction(2, 4)
        False
        >>> Fraction(1, 2).equivalent(Fraction(2, 4))
        True
    """

    ZERO: ClassVar[Fraction]
    ONE: ClassVar[Fraction]

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        _check_integer(self.numerator, "numerator")
        _check_integer(self.denominator, "denominator")
        if self.denominator == 0:
            msg = f"expected denominator != 0 but actual {self.denominator}"
            raise InvalidArgumentError(msg)

    @classmethod
    def of(cls, numerator: int, denominator: int = 1) -> Fraction:
        """Factory equivalent to the constructor; denominator defaults to 1."""
        return cls(numerator, denominator)

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def add(self, summand: Fraction) -> Fraction:
        require_not_none(summand, "summand")
        return Fraction(
            summand.denominator * self.numerator + self.denominator * summand.numerator,
            self.denominator * summand.denominator,
        )

    def subtract(self, subtrahend: Fraction) -> Fraction:
        require_not_none(subtrahend, "subtrahend")
        return Fraction(
            subtrahend.denominator * self.numerator
            - self.denominator * subtrahend.numerator,
            self.denominator * subtrahend.denominator,
        )

    def multiply(self, factor: Fraction) -> Fraction:
        require_not_none(factor, "factor")
        return Fraction(
            self.numerator * factor.numerator,
            self.denominator * factor.denominator,
        )

    def divide(self, divisor: Fraction) -> Fraction:
        """self · divisor⁻¹.

        Raises:
            NotInvertibleError: If divisor has a zero numerator.
        """
        require_not_none(divisor, "divisor")
        if not divisor.invertible():
            msg = f"expected divisor to be invertible but actual {divisor}"
            raise NotInvertibleError(msg)
        return self.multiply(divisor.invert())

    def pow(self, exponent: int) -> Fraction:
        """Repeated multiplication; pow(0) is ONE.

        Raises:
            InvalidArgumentError: If exponent is negative or not an int.
        """
        _check_exponent(exponent)
        if exponent == 0:
            return Fraction.ONE
        result = self
        for _ in range(exponent - 1):
            result = self.multiply(result)
        return result

    def negate(self) -> Fraction:
        return Fraction(-self.numerator, self.denominator)

    def invert(self) -> Fraction:
        """denominator/numerator.

        Raises:
            NotInvertibleError: If the numerator is zero.
        """
        if not self.invertible():
            msg = f"expected to be invertible but actual {self}"
            raise NotInvertibleError(msg)
        return Fraction(self.denominator, self.numerator)

    def invertible(self) -> bool:
        return self.numerator != 0

    def abs(self) -> Fraction:
        return Fraction(abs(self.numerator), abs(self.denominator))

    def signum(self) -> int:
        """-1, 0 or 1."""
        return _sign(self.numerator) * _sign(self.denominator)

    # =========================================================================
    # CANONICAL FORMS
    # =========================================================================

    def normalize(self) -> Fraction:
        """Move the sign into the numerator; zero becomes ZERO (0/1)."""
        signum = self.signum()
        if signum < 0:
            return Fraction(-abs(self.numerator), abs(self.denominator))
        if signum == 0:
            return Fraction.ZERO
        if self.numerator < 0:
            return self.abs()
        return self

    def reduce(self) -> Fraction:
        """Divide numerator and denominator by their greatest common divisor."""
        gcd = math.gcd(self.numerator, self.denominator)
        return Fraction(self.numerator // gcd, self.denominator // gcd)

    def equivalent(self, other: Fraction) -> bool:
        """Mathematical equality: equal after normalize() and reduce()."""
        require_not_none(other, "other")
        return self.normalize().reduce() == other.normalize().reduce()

    # =========================================================================
    # ORDERING
    # =========================================================================

    def less_than_or_equal_to(self, other: Fraction) -> bool:
        require_not_none(other, "other")
        normalized = self.normalize()
        normalized_other = other.normalize()
        left = normalized_other.denominator * normalized.numerator
        right = normalized.denominator * normalized_other.numerator
        return left <= right

    def greater_than_or_equal_to(self, other: Fraction) -> bool:
        require_not_none(other, "other")
        return not self.less_than_or_equal_to(other) or self.equivalent(other)

    def less_than(self, other: Fraction) -> bool:
        require_not_none(other, "other")
        return not self.greater_than_or_equal_to(other)

    def greater_than(self, other: Fraction) -> bool:
        require_not_none(other, "other")
        return not self.less_than_or_equal_to(other)

    def compare_to(self, other: Fraction) -> int:
        """-1, 0 or 1 as self is less than, equivalent to or greater than other."""
        require_not_none(other, "other")
        if self.less_than(other):
            return -1
        if self.greater_than(other):
            return 1
        return 0

    def min(self, other: Fraction) -> Fraction:
        require_not_none(other, "other")
        return other if self.greater_than(other) else self

    def max(self, other: Fraction) -> Fraction:
        require_not_none(other, "other")
        return other if self.less_than(other) else self

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def __add__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, exponent: int) -> Fraction:
        return self.pow(exponent)

    def __neg__(self) -> Fraction:
        return self.negate()

    def __abs__(self) -> Fraction:
        return self.abs()

    def __lt__(self, other: Fraction) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: Fraction) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.less_than_or_equal_to(other)

    def __gt__(self, other: Fraction) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: Fraction) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.greater_than_or_equal_to(other)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _check_integer(value: int, name: str) -> None:
    require_not_none(value, name)
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"expected {name} to be an int but actual {value!r}"
        raise InvalidArgumentError(msg)


def _check_exponent(exponent: int) -> None:
    _check_integer(exponent, "exponent")
    if exponent < 0:
        msg = f"expected exponent >= 0 but actual {exponent}"
        raise InvalidArgumentError(msg)


Fraction.ZERO = Fraction(0, 1)
Fraction.ONE = Fraction(1, 1)


__all__ = ["Fraction"]
