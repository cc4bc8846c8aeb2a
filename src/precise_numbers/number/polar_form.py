"""Polar-coordinate representation of complex numbers."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from precise_numbers.algorithms.decimal_arithmetic import to_decimal
from precise_numbers.algorithms.trigonometry import polar_to_rectangular
from precise_numbers.data.precision_types import PrecisionConfig
from precise_numbers.number.complex_number import DecimalComplexNumber


@dataclass(frozen=True, slots=True)
class PolarForm:
    """
    Complex number radial·(cos(angular) + i·sin(angular)).

    The radial part is not checked for sign and the angular part is not
    reduced to a principal range.

    Example:
        >>> PolarForm(5, 0).complex_number()
        DecimalComplexNumber(real=Decimal('5.0000000000'), imaginary=Decimal('0E-10'))
    """

    radial: Decimal
    """Distance from the origin."""

    angular: Decimal
    """Angle in radians."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "radial", to_decimal(self.radial, "radial"))
        object.__setattr__(self, "angular", to_decimal(self.angular, "angular"))

    def complex_number(self, config: PrecisionConfig | None = None) -> DecimalComplexNumber:
        """
        Rectangular form radial·cos(angular) + radial·sin(angular)·i.

        Both products are evaluated in mpmath with enough digits for the
        integer part of radial, then rounded once to config.scale.
        """
        real, imaginary = polar_to_rectangular(self.radial, self.angular, config)
        return DecimalComplexNumber(real, imaginary)

    def __str__(self) -> str:
        return f"{self.radial}·(cos({self.angular}) + i·sin({self.angular}))"


__all__ = ["PolarForm"]
