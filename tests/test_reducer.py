import pytest
from fractions import Fraction
from pytest import approx

from unitconverter.dimension import BaseDimension
from unitconverter.errors import AffineUnitMisuseError, UnknownUnitError
from unitconverter.parser import parse_unit
from unitconverter.reducer import reduce_expression, reduce_unit


def test_reduce_newton():
    newton = reduce_unit("N")
    assert newton.signature == "kg*m/s^2"
    assert newton.factor == approx(1.0)


def test_reduce_compound_matches_named_unit():
    assert reduce_unit("kg*m/s^2").is_compatible(reduce_unit("N"))
    assert reduce_unit("kW*h").factor == approx(reduce_unit("kWh").factor)


def test_reduce_expression():
    reduced = reduce_expression(parse_unit("km/h"))
    assert reduced.factor == approx(1000.0 / 3600.0)
    assert reduced.dimensions == {BaseDimension.Length: 1, BaseDimension.Time: -1}
    assert reduced.symbol == "km/h"


def test_implicit_exponent():
    assert reduce_unit("hm3").factor == approx(1e6)
    assert reduce_unit("hm^3").factor == approx(1e6)


def test_rational_exponent():
    root = reduce_unit("Hz^(1/2)")
    assert root.dimensions == {BaseDimension.Time: Fraction(-1, 2)}


def test_cancellation_is_dimensionless():
    assert reduce_unit("m/m").is_dimensionless
    assert reduce_unit("").is_dimensionless
    assert reduce_unit("").factor == 1.0


def test_unknown_unit():
    with pytest.raises(UnknownUnitError) as error:
        reduce_unit("kg*blorp/s")
    assert error.value.unit == "blorp"


def test_absolute_temperature_alone_keeps_offset():
    celsius = reduce_unit("celsius")
    assert celsius.offset == approx(273.15)
    assert reduce_unit("°C").offset == approx(273.15)
    assert reduce_unit("(celsius)^1").offset == approx(273.15)


def test_affine_exponent():
    with pytest.raises(AffineUnitMisuseError) as error:
        reduce_unit("celsius^2")
    assert error.value.reason == AffineUnitMisuseError.EXPONENT
    assert error.value.unit == "celsius"
    assert error.value.exponent == 2


def test_affine_reciprocal():
    with pytest.raises(AffineUnitMisuseError) as error:
        reduce_unit("1/fahrenheit")
    assert error.value.reason == AffineUnitMisuseError.EXPONENT
    assert error.value.exponent == -1


def test_affine_compound():
    with pytest.raises(AffineUnitMisuseError) as error:
        reduce_unit("celsius*s")
    assert error.value.reason == AffineUnitMisuseError.COMPOUND
    assert "compound" in str(error.value)


def test_temperature_intervals_compose():
    per_degree = reduce_unit("degC/s")
    assert per_degree.offset == 0.0
    assert per_degree.dimensions == {BaseDimension.Temperature: 1, BaseDimension.Time: -1}
    assert reduce_unit("W/(m^2*degC)").signature == "kg/K*s^3"


def test_kelvin_is_linear():
    assert reduce_unit("K*s").offset == 0.0


def test_cancelled_affine_terms_are_dimensionless():
    reduced = reduce_unit("celsius/celsius")
    assert reduced.is_dimensionless
    assert reduced.offset == 0.0
