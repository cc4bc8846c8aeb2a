"""Tests for PolarForm."""

from decimal import Decimal

import pytest

from precise_numbers.algorithms.trigonometry import pi
from precise_numbers.data.precision_types import PrecisionConfig
from precise_numbers.exceptions import InvalidArgumentError, NullArgumentError
from precise_numbers.number.complex_number import DecimalComplexNumber
from precise_numbers.number.polar_form import PolarForm


class TestConstruction:
    """Tests for construction."""

    def test_coerces_components(self) -> None:
        """radial and angular become Decimals."""
        polar = PolarForm(5, "0.5")
        assert polar.radial == Decimal(5)
        assert polar.angular == Decimal("0.5")

    def test_no_range_validation(self) -> None:
        """Negative radial and large angular values are accepted."""
        polar = PolarForm(-1, 100)
        assert polar.radial == Decimal(-1)

    def test_none_component_raises(self) -> None:
        """None components are null arguments."""
        with pytest.raises(NullArgumentError):
            PolarForm(None, 0)  # type: ignore[arg-type]

    def test_invalid_component_raises(self) -> None:
        """Non-numeric components are invalid."""
        with pytest.raises(InvalidArgumentError):
            PolarForm(1, "north")  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        """PolarForm should be immutable."""
        polar = PolarForm(1, 0)
        with pytest.raises(AttributeError):
            polar.radial = Decimal(2)  # type: ignore[misc]


class TestComplexNumber:
    """Tests for reconstruction of the rectangular form."""

    def test_zero_angle(self) -> None:
        """5·e^0 = 5 + 0i."""
        z = PolarForm(5, 0).complex_number()
        assert isinstance(z, DecimalComplexNumber)
        assert z == DecimalComplexNumber.of(5, 0)
        assert z.real.as_tuple().exponent == -10

    def test_quarter_turn(self) -> None:
        """2·e^(iπ/2) = 2i."""
        angle = pi(PrecisionConfig(scale=30)) / 2
        assert PolarForm(2, angle).complex_number() == DecimalComplexNumber.of(0, 2)

    def test_half_turn(self) -> None:
        """e^(iπ) = -1 with π at the default scale."""
        assert PolarForm(1, pi()).complex_number() == DecimalComplexNumber.of(-1, 0)

    def test_negative_radial(self) -> None:
        """A negative radial part reflects through the origin."""
        assert PolarForm(-3, 0).complex_number() == DecimalComplexNumber.of(-3, 0)

    def test_known_values(self) -> None:
        """2·e^(0.5i) = 2cos(0.5) + 2sin(0.5)i."""
        z = PolarForm(2, "0.5").complex_number()
        assert z == DecimalComplexNumber.of("1.7551651238", "0.9588510772")

    def test_large_radial_keeps_scale(self) -> None:
        """Integer digits of radial do not eat into the fractional digits."""
        z = PolarForm(Decimal("1E+20"), "0.5").complex_number(PrecisionConfig(scale=5))
        assert abs(z.real - Decimal("87758256189037271611.62816")) <= Decimal("0.00001")
        assert z.real.as_tuple().exponent == -5

    def test_non_config_raises(self) -> None:
        """config must be a PrecisionConfig or None."""
        with pytest.raises(InvalidArgumentError, match="PrecisionConfig"):
            PolarForm(1, 0).complex_number(5)  # type: ignore[arg-type]

    def test_str(self) -> None:
        """Readable rendering."""
        assert str(PolarForm(2, "0.5")) == "2·(cos(0.5) + i·sin(0.5))"
