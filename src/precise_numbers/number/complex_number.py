"""Complex numbers over exact integers and over arbitrary-precision decimals.

Two variants share the ComplexNumber interface:

- IntegerComplexNumber: components are Python ints. Addition, subtraction,
  multiplication, negation, conjugation and powers stay exact integers.
  Division and inversion leave the integers and return a DecimalComplexNumber.
- DecimalComplexNumber: components are Decimals. All ring operations run
  without rounding; division rounds each component to the configured scale.

Modulus, argument and polar form approximate irrational values and take an
optional PrecisionConfig.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar

import numpy as np
import numpy.typing as npt

from precise_numbers.algorithms.decimal_arithmetic import (
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
    is_perfect_square,
    sqrt,
    sqrt_of_perfect_square,
)
from precise_numbers.algorithms.trigonometry import principal_argument
from precise_numbers.data.precision_types import (
    PrecisionConfig,
    resolve_config,
)
from precise_numbers.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    NotInvertibleError,
    require_not_none,
)

if TYPE_CHECKING:
    from precise_numbers.number.polar_form import PolarForm


class ComplexNumber(ABC):
    """Capabilities shared by both complex-number variants."""

    __slots__ = ()

    real: int | Decimal
    imaginary: int | Decimal

    # =========================================================================
    # VARIANT-SPECIFIC OPERATIONS
    # =========================================================================

    @abstractmethod
    def add(self, summand: ComplexNumber) -> ComplexNumber: ...

    @abstractmethod
    def subtract(self, subtrahend: ComplexNumber) -> ComplexNumber: ...

    @abstractmethod
    def multiply(self, factor: ComplexNumber) -> ComplexNumber: ...

    @abstractmethod
    def negate(self) -> ComplexNumber: ...

    @abstractmethod
    def conjugate(self) -> ComplexNumber: ...

    @abstractmethod
    def abs_pow2(self) -> int | Decimal:
        """real² + imaginary², exact."""

    @abstractmethod
    def divide(
        self, divisor: ComplexNumber, config: PrecisionConfig | None = None
    ) -> DecimalComplexNumber: ...

    @abstractmethod
    def invert(self, config: PrecisionConfig | None = None) -> DecimalComplexNumber: ...

    @abstractmethod
    def abs(self, config: PrecisionConfig | None = None) -> Decimal: ...

    @abstractmethod
    def argument(self, config: PrecisionConfig | None = None) -> Decimal: ...

    @classmethod
    @abstractmethod
    def _one(cls) -> ComplexNumber: ...

    # =========================================================================
    # SHARED OPERATIONS
    # =========================================================================

    def pow(self, exponent: int) -> ComplexNumber:
        """
        Repeated multiplication; pow(0) is ONE.

        Raises:
            InvalidArgumentError: If exponent is negative or not an int.
        """
        _check_integer(exponent, "exponent")
        if exponent < 0:
            msg = f"expected exponent >= 0 but actual {exponent}"
            raise InvalidArgumentError(msg)
        if exponent == 0:
            return self._one()
        result = self
        for _ in range(exponent - 1):
            result = self.multiply(result)
        return result

    def invertible(self) -> bool:
        """True unless both components are zero."""
        return not (self.real == 0 and self.imaginary == 0)

    def polar_form(self, config: PrecisionConfig | None = None) -> PolarForm:
        """
        (abs(), argument()) as a PolarForm.

        Raises:
            InvalidStateError: If this is zero, whose argument is undefined.
        """
        from precise_numbers.number.polar_form import PolarForm

        if not self.invertible():
            msg = f"expected nonzero complex number but actual {self}"
            raise InvalidStateError(msg)
        return PolarForm(self.abs(config), self.argument(config))

    def matrix(self) -> npt.NDArray[np.object_]:
        """
        Real 2×2 matrix representation [[a, -b], [b, a]].

        Entries keep their exact type (int or Decimal), hence dtype=object.
        """
        negated = self.negate()
        return np.array(
            [
                [self.real, negated.imaginary],
                [self.imaginary, self.real],
            ],
            dtype=object,
        )

    def equivalent(self, other: ComplexNumber) -> bool:
        """Component values are equal, across both variants."""
        require_not_none(other, "other")
        return self.real == other.real and self.imaginary == other.imaginary

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def __add__(self, other: ComplexNumber) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: ComplexNumber) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: ComplexNumber) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: ComplexNumber) -> DecimalComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, exponent: int) -> ComplexNumber:
        return self.pow(exponent)

    def __neg__(self) -> ComplexNumber:
        return self.negate()

    def __abs__(self) -> Decimal:
        return self.abs()

    def __str__(self) -> str:
        if self.imaginary < 0:
            return f"{self.real} - {self.negate().imaginary}i"
        return f"{self.real} + {self.imaginary}i"


# =============================================================================
# INTEGER VARIANT
# =============================================================================


@dataclass(frozen=True, slots=True)
class IntegerComplexNumber(ComplexNumber):
    """
    Complex number real + imaginary·i with exact integer components.

    Example:
        >>> IntegerComplexNumber(1, 2).multiply(IntegerComplexNumber(3, 4))
        IntegerComplexNumber(real=-5, imaginary=10)
        >>> IntegerComplexNumber(3, 4).abs()
        Decimal('5.0000000000')
    """

    ZERO: ClassVar[IntegerComplexNumber]
    ONE: ClassVar[IntegerComplexNumber]
    IMAGINARY: ClassVar[IntegerComplexNumber]

    real: int
    imaginary: int

    def __post_init__(self) -> None:
        _check_integer(self.real, "real")
        _check_integer(self.imaginary, "imaginary")

    @classmethod
    def of(cls, real: int, imaginary: int = 0) -> IntegerComplexNumber:
        return cls(real, imaginary)

    @classmethod
    def _one(cls) -> IntegerComplexNumber:
        return cls.ONE

    def to_decimal(self) -> DecimalComplexNumber:
        return DecimalComplexNumber.from_integer_complex(self)

    def add(self, summand: ComplexNumber) -> ComplexNumber:
        require_not_none(summand, "summand")
        if not isinstance(summand, IntegerComplexNumber):
            return self.to_decimal().add(summand)
        return IntegerComplexNumber(
            self.real + summand.real, self.imaginary + summand.imaginary
        )

    def subtract(self, subtrahend: ComplexNumber) -> ComplexNumber:
        require_not_none(subtrahend, "subtrahend")
        if not isinstance(subtrahend, IntegerComplexNumber):
            return self.to_decimal().subtract(subtrahend)
        return IntegerComplexNumber(
            self.real - subtrahend.real, self.imaginary - subtrahend.imaginary
        )

    def multiply(self, factor: ComplexNumber) -> ComplexNumber:
        require_not_none(factor, "factor")
        if not isinstance(factor, IntegerComplexNumber):
            return self.to_decimal().multiply(factor)
        return IntegerComplexNumber(
            self.real * factor.real - self.imaginary * factor.imaginary,
            self.real * factor.imaginary + self.imaginary * factor.real,
        )

    def negate(self) -> IntegerComplexNumber:
        return IntegerComplexNumber(-self.real, -self.imaginary)

    def conjugate(self) -> IntegerComplexNumber:
        return IntegerComplexNumber(self.real, -self.imaginary)

    def abs_pow2(self) -> int:
        return self.real * self.real + self.imaginary * self.imaginary

    def divide(
        self, divisor: ComplexNumber, config: PrecisionConfig | None = None
    ) -> DecimalComplexNumber:
        """
        Quotient as a DecimalComplexNumber rounded to config.scale.

        Raises:
            NotInvertibleError: If divisor is zero.
        """
        require_not_none(divisor, "divisor")
        return self.to_decimal().divide(divisor, config)

    def invert(self, config: PrecisionConfig | None = None) -> DecimalComplexNumber:
        """
        1 / self as a DecimalComplexNumber.

        Raises:
            NotInvertibleError: If this is zero.
        """
        return self.to_decimal().invert(config)

    def abs(self, config: PrecisionConfig | None = None) -> Decimal:
        """
        Modulus sqrt(real² + imaginary²).

        Exact when real² + imaginary² is a perfect square (3 + 4i gives 5),
        otherwise approximated by Heron's method.
        """
        config = resolve_config(config)
        abs_pow2 = self.abs_pow2()
        if is_perfect_square(abs_pow2):
            root = Decimal(sqrt_of_perfect_square(abs_pow2))
            return rescale(root, config.scale, config.rounding_mode)
        return sqrt(abs_pow2, config)

    def argument(self, config: PrecisionConfig | None = None) -> Decimal:
        """Principal argument in (-π, π]; see DecimalComplexNumber.argument."""
        return self.to_decimal().argument(config)


# =============================================================================
# DECIMAL VARIANT
# =============================================================================


@dataclass(frozen=True, slots=True)
class DecimalComplexNumber(ComplexNumber):
    """
    Complex number real + imaginary·i with Decimal components.

    Components are coerced with to_decimal, so ints, floats (via repr) and
    numeric strings are accepted. `==` compares Decimal values, so
    DecimalComplexNumber("1.0", 0) == DecimalComplexNumber(1, 0).

    Example:
        >>> DecimalComplexNumber.of(1, 1).divide(DecimalComplexNumber.of(1, -1))
        DecimalComplexNumber(real=Decimal('0E-10'), imaginary=Decimal('1.0000000000'))
    """

    ZERO: ClassVar[DecimalComplexNumber]
    ONE: ClassVar[DecimalComplexNumber]
    IMAGINARY: ClassVar[DecimalComplexNumber]

    real: Decimal
    imaginary: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "real", to_decimal(self.real, "real"))
        object.__setattr__(self, "imaginary", to_decimal(self.imaginary, "imaginary"))

    @classmethod
    def of(
        cls,
        real: Decimal | int | float | str,
        imaginary: Decimal | int | float | str = 0,
    ) -> DecimalComplexNumber:
        return cls(real, imaginary)

    @classmethod
    def from_integer_complex(
        cls, integer_complex: IntegerComplexNumber
    ) -> DecimalComplexNumber:
        require_not_none(integer_complex, "integer_complex")
        return cls(Decimal(integer_complex.real), Decimal(integer_complex.imaginary))

    @classmethod
    def _one(cls) -> DecimalComplexNumber:
        return cls.ONE

    def add(self, summand: ComplexNumber) -> DecimalComplexNumber:
        summand = _as_decimal_complex(summand, "summand")
        return DecimalComplexNumber(
            exact_add(self.real, summand.real),
            exact_add(self.imaginary, summand.imaginary),
        )

    def subtract(self, subtrahend: ComplexNumber) -> DecimalComplexNumber:
        subtrahend = _as_decimal_complex(subtrahend, "subtrahend")
        return DecimalComplexNumber(
            exact_subtract(self.real, subtrahend.real),
            exact_subtract(self.imaginary, subtrahend.imaginary),
        )

    def multiply(self, factor: ComplexNumber) -> DecimalComplexNumber:
        factor = _as_decimal_complex(factor, "factor")
        return DecimalComplexNumber(
            exact_subtract(
                exact_multiply(self.real, factor.real),
                exact_multiply(self.imaginary, factor.imaginary),
            ),
            exact_add(
                exact_multiply(self.real, factor.imaginary),
                exact_multiply(self.imaginary, factor.real),
            ),
        )

    def negate(self) -> DecimalComplexNumber:
        return DecimalComplexNumber(exact_negate(self.real), exact_negate(self.imaginary))

    def conjugate(self) -> DecimalComplexNumber:
        return DecimalComplexNumber(self.real, exact_negate(self.imaginary))

    def abs_pow2(self) -> Decimal:
        return exact_add(exact_square(self.real), exact_square(self.imaginary))

    def divide(
        self, divisor: ComplexNumber, config: PrecisionConfig | None = None
    ) -> DecimalComplexNumber:
        """
        Quotient self / divisor.

        With divisor = p + qi and d = p² + q²:

            real      = (real·p + imaginary·q) / d
            imaginary = (imaginary·p - real·q) / d

        each rounded to config.scale with config.rounding_mode.

        Raises:
            NotInvertibleError: If divisor is zero.
        """
        divisor = _as_decimal_complex(divisor, "divisor")
        if not divisor.invertible():
            msg = f"expected divisor to be invertible but actual {divisor}"
            raise NotInvertibleError(msg)
        config = resolve_config(config)

        denominator = divisor.abs_pow2()
        real_numerator = exact_add(
            exact_multiply(self.real, divisor.real),
            exact_multiply(self.imaginary, divisor.imaginary),
        )
        imaginary_numerator = exact_subtract(
            exact_multiply(self.imaginary, divisor.real),
            exact_multiply(self.real, divisor.imaginary),
        )
        return DecimalComplexNumber(
            divide(real_numerator, denominator, config.scale, config.rounding_mode),
            divide(imaginary_numerator, denominator, config.scale, config.rounding_mode),
        )

    def invert(self, config: PrecisionConfig | None = None) -> DecimalComplexNumber:
        """
        ONE / self.

        Raises:
            NotInvertibleError: If this is zero.
        """
        if not self.invertible():
            msg = f"expected to be invertible but actual {self}"
            raise NotInvertibleError(msg)
        return DecimalComplexNumber.ONE.divide(self, config)

    def abs(self, config: PrecisionConfig | None = None) -> Decimal:
        """Modulus sqrt(real² + imaginary²) by Heron's method."""
        return sqrt(self.abs_pow2(), config)

    def argument(self, config: PrecisionConfig | None = None) -> Decimal:
        """
        Principal argument in (-π, π], evaluated in mpmath and rounded once
        to config.scale. The negative real axis maps to +π.

        Raises:
            InvalidStateError: If this is zero.
        """
        if not self.invertible():
            msg = f"expected nonzero complex number but actual {self}"
            raise InvalidStateError(msg)
        return principal_argument(self.real, self.imaginary, config)


def _as_decimal_complex(value: ComplexNumber, name: str) -> DecimalComplexNumber:
    require_not_none(value, name)
    if isinstance(value, DecimalComplexNumber):
        return value
    if isinstance(value, IntegerComplexNumber):
        return DecimalComplexNumber.from_integer_complex(value)
    msg = f"expected {name} to be a complex number but actual {value!r}"
    raise InvalidArgumentError(msg)


def _check_integer(value: int, name: str) -> None:
    require_not_none(value, name)
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"expected {name} to be an int but actual {value!r}"
        raise InvalidArgumentError(msg)


IntegerComplexNumber.ZERO = IntegerComplexNumber(0, 0)
IntegerComplexNumber.ONE = IntegerComplexNumber(1, 0)
IntegerComplexNumber.IMAGINARY = IntegerComplexNumber(0, 1)

DecimalComplexNumber.ZERO = DecimalComplexNumber(Decimal(0), Decimal(0))
DecimalComplexNumber.ONE = DecimalComplexNumber(Decimal(1), Decimal(0))
DecimalComplexNumber.IMAGINARY = DecimalComplexNumber(Decimal(0), Decimal(1))


__all__ = [
    "ComplexNumber",
    "DecimalComplexNumber",
    "IntegerComplexNumber",
]
