"""Precise Numbers: exact fractions, complex numbers and arbitrary-precision square roots."""

__version__ = "0.1.0"

from precise_numbers.algorithms.square_root import sqrt
from precise_numbers.data.precision_types import (
    DEFAULT_PRECISION_CONFIG,
    PrecisionConfig,
    RoundingMode,
)
from precise_numbers.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    NotInvertibleError,
    NullArgumentError,
    NumberContractError,
)
from precise_numbers.number import (
    ComplexNumber,
    DecimalComplexNumber,
    Fraction,
    IntegerComplexNumber,
    PolarForm,
)

__all__ = [
    "__version__",
    "ComplexNumber",
    "DEFAULT_PRECISION_CONFIG",
    "DecimalComplexNumber",
    "Fraction",
    "IntegerComplexNumber",
    "InvalidArgumentError",
    "InvalidStateError",
    "NotInvertibleError",
    "NullArgumentError",
    "NumberContractError",
    "PolarForm",
    "PrecisionConfig",
    "RoundingMode",
    "sqrt",
]
