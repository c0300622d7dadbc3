import pytest
from fractions import Fraction
from pytest import approx

from unitconverter.core import (
    ReducedUnit,
    UnitDecomposition,
    dimension_vector,
    format_dimensions,
    vector_to_dimensions,
)
from unitconverter.dimension import BaseDimension
from unitconverter.errors import AffineUnitMisuseError


@pytest.fixture
def meter_unit():
    return UnitDecomposition(dimension_vector(Length=1), 1.0, symbol="m")


@pytest.fixture
def second_unit():
    return UnitDecomposition(dimension_vector(Time=1), 1.0, symbol="s")


@pytest.fixture
def celsius_unit():
    return UnitDecomposition(dimension_vector(Temperature=1), 1.0, 273.15, "celsius")


@pytest.fixture
def velocity_unit(meter_unit, second_unit):
    return meter_unit / second_unit


class TestUnitDecomposition:
    def test_initialization(self, meter_unit):
        assert meter_unit.factor == 1.0
        assert meter_unit.symbol == "m"
        assert meter_unit.offset == 0.0
        assert meter_unit.vector[BaseDimension.Length.value] == 1
        assert meter_unit.dimensions == {BaseDimension.Length: Fraction(1)}

    def test_mapping_initialization(self):
        newton = UnitDecomposition(
            {BaseDimension.Mass: 1, BaseDimension.Length: 1, BaseDimension.Time: -2}, 1.0, symbol="N"
        )
        assert newton.signature == "kg*m/s^2"

    def test_wrong_vector_length(self):
        import numpy as np

        with pytest.raises(ValueError):
            UnitDecomposition(np.zeros(3), 1.0)

    def test_equality(self, meter_unit):
        other_meter = UnitDecomposition(dimension_vector(Length=1), 1.0, symbol="metre")
        assert meter_unit == other_meter
        assert hash(meter_unit) == hash(other_meter)

        # Different scale
        inch = UnitDecomposition(dimension_vector(Length=1), 0.0254, symbol="in")
        assert meter_unit != inch

    def test_vector_is_a_copy(self, meter_unit):
        vector = meter_unit.vector
        vector[BaseDimension.Length.value] = 5
        assert meter_unit.vector[BaseDimension.Length.value] == 1

    def test_multiplication(self, meter_unit, second_unit):
        ms = meter_unit * second_unit
        assert ms.vector[BaseDimension.Length.value] == 1
        assert ms.vector[BaseDimension.Time.value] == 1
        assert ms.symbol == "m*s"

    def test_division(self, velocity_unit):
        assert velocity_unit.vector[BaseDimension.Length.value] == 1
        assert velocity_unit.vector[BaseDimension.Time.value] == -1
        assert velocity_unit.symbol == "m/s"
        assert velocity_unit.signature == "m/s"

    def test_power(self, meter_unit):
        m2 = meter_unit ** 2
        assert m2.vector[BaseDimension.Length.value] == 2
        assert m2.symbol == "m^2"

    def test_rational_power(self, meter_unit):
        root = meter_unit ** Fraction(1, 2)
        assert root.vector[BaseDimension.Length.value] == Fraction(1, 2)
        assert root.signature == "m^(1/2)"

    def test_scaled(self, meter_unit):
        km = meter_unit.scaled(1000.0, "km")
        assert km.factor == approx(1000.0)
        assert km.symbol == "km"
        assert km.same_dimensions(meter_unit)

    def test_dimensionless(self):
        percent = UnitDecomposition.dimensionless(0.01, "%")
        assert percent.is_dimensionless
        assert percent.signature == "dimensionless"
        assert str(percent) == "%"

    def test_base_round_trip(self, celsius_unit):
        assert celsius_unit.to_base(0.0) == approx(273.15)
        assert celsius_unit.from_base(373.15) == approx(100.0)


class TestAffine:
    def test_is_affine(self, celsius_unit, meter_unit):
        assert celsius_unit.is_affine
        assert not meter_unit.is_affine

    def test_power_of_one_is_allowed(self, celsius_unit):
        assert (celsius_unit ** 1).offset == approx(273.15)

    def test_power_rejected(self, celsius_unit):
        with pytest.raises(AffineUnitMisuseError) as error:
            celsius_unit ** 2
        assert error.value.reason == AffineUnitMisuseError.EXPONENT
        assert error.value.exponent == 2

    def test_compound_rejected(self, celsius_unit, second_unit):
        with pytest.raises(AffineUnitMisuseError) as error:
            celsius_unit / second_unit
        assert error.value.reason == AffineUnitMisuseError.COMPOUND

        with pytest.raises(AffineUnitMisuseError):
            second_unit * celsius_unit

    def test_cannot_be_prefixed(self, celsius_unit):
        with pytest.raises(AffineUnitMisuseError):
            celsius_unit.scaled(1000.0, "kcelsius")


class TestReducedUnit:
    def test_compatible(self):
        joule = ReducedUnit(dimension_vector(Mass=1, Length=2, Time=-2), 1.0)
        kwh = ReducedUnit(dimension_vector(Mass=1, Length=2, Time=-2), 3.6e6)
        watt = ReducedUnit(dimension_vector(Mass=1, Length=2, Time=-3), 1.0)
        assert joule.is_compatible(kwh)
        assert not joule.is_compatible(watt)


class TestFormatDimensions:
    def test_empty(self):
        assert format_dimensions({}) == "dimensionless"

    def test_ordering(self):
        dims = vector_to_dimensions(dimension_vector(Mass=1, Length=2, Time=-3, Current=-1))
        assert format_dimensions(dims) == "kg*m^2/A*s^3"

    def test_denominator_only(self):
        assert format_dimensions({BaseDimension.Time: -1}) == "1/s"

    def test_zero_exponents_pruned(self):
        assert format_dimensions({BaseDimension.Time: 0, BaseDimension.Length: 1}) == "m"
