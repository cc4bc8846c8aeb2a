"""Number types: fractions, complex numbers and polar forms."""

from precise_numbers.number.complex_number import (
    ComplexNumber,
    DecimalComplexNumber,
    IntegerComplexNumber,
)
from precise_numbers.number.fraction import Fraction
from precise_numbers.number.polar_form import PolarForm

__all__ = [
    "ComplexNumber",
    "DecimalComplexNumber",
    "Fraction",
    "IntegerComplexNumber",
    "PolarForm",
]
