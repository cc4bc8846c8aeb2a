"""Tests for IntegerComplexNumber."""

from decimal import Decimal

import numpy as np
import pytest

from precise_numbers.data.precision_types import PrecisionConfig
from precise_numbers.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    NotInvertibleError,
    NullArgumentError,
)
from precise_numbers.number.complex_number import (
    DecimalComplexNumber,
    IntegerComplexNumber,
)
from precise_numbers.number.polar_form import PolarForm


class TestConstruction:
    """Tests for construction and constants."""

    def test_constants(self) -> None:
        """ZERO, ONE and IMAGINARY."""
        assert IntegerComplexNumber.ZERO == IntegerComplexNumber(0, 0)
        assert IntegerComplexNumber.ONE == IntegerComplexNumber(1, 0)
        assert IntegerComplexNumber.IMAGINARY == IntegerComplexNumber(0, 1)

    def test_of_defaults_imaginary_to_zero(self) -> None:
        """IntegerComplexNumber.of(n) is real."""
        assert IntegerComplexNumber.of(7) == IntegerComplexNumber(7, 0)

    @pytest.mark.parametrize("real", [1.5, Decimal(1), "1", False])
    def test_non_integer_component_raises(self, real: object) -> None:
        """Components must be ints."""
        with pytest.raises(InvalidArgumentError):
            IntegerComplexNumber(real, 0)  # type: ignore[arg-type]

    def test_none_component_raises(self) -> None:
        """None components are null arguments."""
        with pytest.raises(NullArgumentError):
            IntegerComplexNumber(1, None)  # type: ignore[arg-type]

    def test_immutable_and_slots(self) -> None:
        """Frozen with slots."""
        z = IntegerComplexNumber(1, 2)
        with pytest.raises(AttributeError):
            z.real = 3  # type: ignore[misc]
        assert not hasattr(z, "__dict__")

    @pytest.mark.parametrize(
        "z,expected",
        [
            (IntegerComplexNumber(3, 4), "3 + 4i"),
            (IntegerComplexNumber(3, -4), "3 - 4i"),
            (IntegerComplexNumber(0, 0), "0 + 0i"),
        ],
    )
    def test_str(self, z: IntegerComplexNumber, expected: str) -> None:
        """Rendered as a ± bi."""
        assert str(z) == expected


class TestExactArithmetic:
    """Ring operations stay on exact integers."""

    def test_add_subtract(self) -> None:
        """Component-wise."""
        z, w = IntegerComplexNumber(1, 2), IntegerComplexNumber(3, -5)
        assert z.add(w) == IntegerComplexNumber(4, -3)
        assert z - w == IntegerComplexNumber(-2, 7)

    def test_multiply(self) -> None:
        """(1 + 2i)(3 + 4i) = -5 + 10i."""
        product = IntegerComplexNumber(1, 2).multiply(IntegerComplexNumber(3, 4))
        assert product == IntegerComplexNumber(-5, 10)
        assert isinstance(product, IntegerComplexNumber)

    def test_large_components(self) -> None:
        """No overflow with arbitrary-precision ints."""
        big = 10**50
        product = IntegerComplexNumber(big, 1) * IntegerComplexNumber(big, -1)
        assert product == IntegerComplexNumber(big * big + 1, 0)

    def test_negate_and_conjugate(self) -> None:
        """Negation flips both signs, conjugation only the imaginary one."""
        z = IntegerComplexNumber(3, -4)
        assert -z == IntegerComplexNumber(-3, 4)
        assert z.conjugate() == IntegerComplexNumber(3, 4)

    def test_conjugate_product_is_abs_pow2(self) -> None:
        """z · conj(z) = |z|² + 0i."""
        z = IntegerComplexNumber(3, 4)
        assert z * z.conjugate() == IntegerComplexNumber(25, 0)
        assert z.abs_pow2() == 25

    @pytest.mark.parametrize(
        "exponent,expected",
        [
            (0, IntegerComplexNumber(1, 0)),
            (1, IntegerComplexNumber(0, 1)),
            (2, IntegerComplexNumber(-1, 0)),
            (3, IntegerComplexNumber(0, -1)),
            (4, IntegerComplexNumber(1, 0)),
        ],
    )
    def test_powers_of_i(self, exponent: int, expected: IntegerComplexNumber) -> None:
        """i cycles with period 4."""
        assert IntegerComplexNumber.IMAGINARY.pow(exponent) == expected
        assert IntegerComplexNumber.IMAGINARY**exponent == expected

    def test_pow_negative_exponent_raises(self) -> None:
        """Negative exponents are invalid."""
        with pytest.raises(InvalidArgumentError):
            IntegerComplexNumber(1, 1).pow(-2)

    @pytest.mark.parametrize("exponent", [2.5, "2", True])
    def test_pow_non_integer_exponent_raises(self, exponent: object) -> None:
        """Exponents must be ints."""
        with pytest.raises(InvalidArgumentError, match="exponent to be an int"):
            IntegerComplexNumber(1, 1).pow(exponent)  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError):
            DecimalComplexNumber.of(1, 1) ** exponent  # type: ignore[operator]

    def test_mixed_operand_promotes_to_decimal(self) -> None:
        """Combining with a DecimalComplexNumber yields a DecimalComplexNumber."""
        result = IntegerComplexNumber(1, 2).add(DecimalComplexNumber.of("0.5", 0))
        assert isinstance(result, DecimalComplexNumber)
        assert result == DecimalComplexNumber.of("1.5", 2)


class TestDivision:
    """Division and inversion promote to decimals."""

    def test_divide(self) -> None:
        """(1 + 2i) / (3 + 4i) = 0.44 + 0.08i."""
        quotient = IntegerComplexNumber(1, 2).divide(IntegerComplexNumber(3, 4))
        assert isinstance(quotient, DecimalComplexNumber)
        assert quotient == DecimalComplexNumber.of("0.44", "0.08")

    def test_divide_operator(self) -> None:
        """(1 + i) / (1 - i) = i."""
        assert IntegerComplexNumber(1, 1) / IntegerComplexNumber(1, -1) == DecimalComplexNumber.IMAGINARY

    def test_divide_uses_config_scale(self) -> None:
        """Each component is rounded to config.scale."""
        quotient = IntegerComplexNumber(1, 0).divide(
            IntegerComplexNumber(3, 0), PrecisionConfig(scale=3)
        )
        assert quotient == DecimalComplexNumber.of("0.333", 0)

    def test_divide_by_zero_raises(self) -> None:
        """Zero divisor is not invertible."""
        with pytest.raises(NotInvertibleError):
            IntegerComplexNumber(1, 1).divide(IntegerComplexNumber.ZERO)

    def test_invert(self) -> None:
        """1 / i = -i."""
        assert IntegerComplexNumber.IMAGINARY.invert() == DecimalComplexNumber.of(0, -1)

    def test_invert_zero_raises(self) -> None:
        """Zero has no inverse (an invalid state)."""
        with pytest.raises(InvalidStateError):
            IntegerComplexNumber.ZERO.invert()

    def test_invertible(self) -> None:
        """Only zero is not invertible."""
        assert IntegerComplexNumber(0, 1).invertible()
        assert not IntegerComplexNumber.ZERO.invertible()


class TestModulusAndArgument:
    """Tests for abs, argument and polar form."""

    def test_abs_exact_for_pythagorean_triple(self) -> None:
        """|3 + 4i| = 5 exactly."""
        result = IntegerComplexNumber(3, 4).abs()
        assert result == Decimal("5.0000000000")
        assert result.as_tuple().exponent == -10

    def test_abs_exact_at_config_scale(self) -> None:
        """Exact roots are rescaled to config.scale."""
        assert str(IntegerComplexNumber(5, 12).abs(PrecisionConfig(scale=2))) == "13.00"

    def test_abs_irrational(self) -> None:
        """|1 + i| = sqrt(2)."""
        assert IntegerComplexNumber(1, 1).abs() == Decimal("1.4142135624")

    def test_abs_builtin(self) -> None:
        """abs() maps to the modulus."""
        assert abs(IntegerComplexNumber(0, -7)) == Decimal(7)

    def test_argument(self) -> None:
        """Argument is computed on the decimal value."""
        assert IntegerComplexNumber(1, 1).argument() == Decimal("0.7853981634")
        assert IntegerComplexNumber(-1, 0).argument() == Decimal("3.1415926536")

    def test_argument_of_zero_raises(self) -> None:
        """The origin has no argument."""
        with pytest.raises(InvalidStateError):
            IntegerComplexNumber.ZERO.argument()

    def test_polar_form(self) -> None:
        """3 + 4i = 5·e^(i·atan(4/3))."""
        polar = IntegerComplexNumber(3, 4).polar_form()
        assert isinstance(polar, PolarForm)
        assert polar.radial == Decimal(5)
        assert polar.angular == Decimal("0.9272952180")

    def test_polar_form_of_zero_raises(self) -> None:
        """Zero has no polar form."""
        with pytest.raises(InvalidStateError):
            IntegerComplexNumber.ZERO.polar_form()


class TestMatrix:
    """Tests for the real 2×2 matrix representation."""

    def test_layout(self) -> None:
        """[[a, -b], [b, a]]."""
        matrix = IntegerComplexNumber(1, 2).matrix()
        assert matrix.shape == (2, 2)
        assert matrix.dtype == object
        assert matrix.tolist() == [[1, -2], [2, 1]]

    def test_multiplication_homomorphism(self) -> None:
        """matrix(z)·matrix(w) = matrix(z·w)."""
        z, w = IntegerComplexNumber(1, 2), IntegerComplexNumber(3, -4)
        product = np.dot(z.matrix(), w.matrix())
        assert product.tolist() == (z * w).matrix().tolist()

    def test_keeps_big_integers_exact(self) -> None:
        """Object dtype preserves arbitrary-precision ints."""
        big = 10**40
        assert IntegerComplexNumber(big, 1).matrix()[0][0] == big
