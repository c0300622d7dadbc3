import math

import pytest
from pytest import approx

from unitconverter import (
    AffineUnitMisuseError,
    ConverterConfig,
    DimensionalMismatchError,
    InvalidUnitSyntaxError,
    UnitConversionError,
    UnitConverter,
    UnitRegistry,
    UnknownUnitError,
    conversion_factor,
    convert_unit,
    convert_value,
    is_compatible,
)


@pytest.fixture
def registry():
    return UnitRegistry.default().copy()


@pytest.fixture
def converter(registry):
    return UnitConverter(registry)


@pytest.mark.parametrize(
    "from_unit, to_unit, factor",
    [
        ("m", "cm", 100),
        ("km", "m", 1000),
        ("km", "cm", 100000),
        ("m", "km", 0.001),
        ("cm", "km", 1e-05),
        ("in", "cm", 2.54),
        ("ft", "m", 0.3048),
        ("m", "yd", 1 / 0.9144),
        ("mi", "km", 1.609344),
        ("kg", "g", 1000),
        ("lb", "kg", 0.45359237),
        ("oz", "g", 28.349523125),
        ("g", "oz", 1 / 28.349523125),
        ("m/s", "km/h", 3.6),
        ("km/h", "m/s", 1 / 3.6),
        ("rad", "deg", 180 / math.pi),
        ("L", "ml", 1000),
        ("hr", "min", 60),
        ("s", "minute", 1 / 60),
        ("m^2", "cm^2", 10000),
        ("m^3", "cm^3", 1000000),
        ("cm^3", "m^3", 1e-06),
        ("Pa", "kPa", 0.001),
        ("kJ", "J", 1000),
        ("W", "kW", 0.001),
        ("mm", "km", 1e-06),
        ("mg", "kg", 1e-06),
        ("μs", "ms", 0.001),
        ("us", "ms", 0.001),
        ("day", "s", 86400),
        ("mile", "m", 1609.344),
        ("kWh", "J", 3.6e6),
        ("L", "dm^3", 1),
        ("hm3", "m3", 1e6),
    ],
)
def test_conversion_factor(from_unit, to_unit, factor):
    assert convert_unit(from_unit, to_unit) == approx(factor)


@pytest.mark.parametrize(
    "from_unit, to_unit",
    [
        ("N", "kg*m/s^2"),
        ("J", "kg*m^2/s^2"),
        ("W", "kg*m^2/s^3"),
        ("Pa", "kg/m/s^2"),
        ("kg*m^-1*s^-2", "Pa"),
        ("Hz", "s^-1"),
        ("J", "N*m"),
        ("W", "J/s"),
        ("Pa", "N/m^2"),
        ("N", "g*km/s^2"),
        ("V", "W/A"),
        ("Ω", "V/A"),
        ("C", "A*s"),
        ("m", "m"),
        ("", ""),
        ("m/m", ""),
        ("kg*m/kg", "m"),
    ],
)
def test_identities(from_unit, to_unit):
    assert convert_unit(from_unit, to_unit) == approx(1.0)


@pytest.mark.parametrize("name", UnitRegistry.default().names())
def test_every_registered_name_converts_to_itself(name):
    assert convert_unit(name, name) == 1.0


def test_nested_groups():
    assert convert_unit("GWh/hour", "(m3/s)*(MW/(m3/s))") == approx(1000)


def test_reciprocal_symmetry():
    for from_unit, to_unit in [("mi", "km"), ("psi", "Pa"), ("kWh", "BTU"), ("degF", "degC")]:
        assert convert_unit(from_unit, to_unit) * convert_unit(to_unit, from_unit) == approx(1.0)


def test_transitivity():
    assert convert_unit("mi", "ft") == approx(convert_unit("mi", "m") * convert_unit("m", "ft"))


def test_pressure():
    assert convert_unit("N/m^2", "psi") == approx(0.000145037738)
    assert convert_unit("lbf/inch^2", "psi") == approx(1)
    assert convert_unit("atm", "Pa") == approx(101325)
    assert convert_unit("atm", "psi") == approx(14.6959488)


def test_dimensionless_ratios():
    assert convert_unit("%", "") == approx(0.01)
    assert convert_unit("m/km", "ppm") == approx(1000)
    assert convert_unit("rev/min", "rpm") == approx(2 * math.pi)


def test_conversion_factor_alias():
    assert conversion_factor("km", "m") == convert_unit("km", "m")


class TestTemperature:
    def test_interval_factors(self):
        assert convert_unit("degC", "degF") == approx(1.8)
        assert convert_unit("degF", "degC") == approx(0.55555556)
        assert convert_unit("degC", "K") == approx(1)

    def test_absolute_factor_ignores_offset(self):
        assert convert_unit("celsius", "fahrenheit") == approx(1.8)

    @pytest.mark.parametrize(
        "value, from_unit, to_unit, expected",
        [
            (0, "celsius", "fahrenheit", 32),
            (100, "celsius", "fahrenheit", 212),
            (-40, "°C", "°F", -40),
            (0, "celsius", "K", 273.15),
            (100, "celsius", "kelvin", 373.15),
            (0, "K", "celsius", -273.15),
            (32, "fahrenheit", "celsius", 0),
            (0, "rankine", "fahrenheit", -459.67),
            (491.67, "°R", "K", 273.15),
        ],
    )
    def test_absolute_values(self, value, from_unit, to_unit, expected):
        assert convert_value(value, from_unit, to_unit) == approx(expected)

    def test_interval_values_have_no_offset(self):
        assert convert_value(10, "degC", "degF") == approx(18)

    def test_compound_interval(self):
        assert convert_unit("W/(m^2*degC)", "W/(m^2*K)") == approx(1)
        assert convert_unit("J/(kg*degF)", "J/(kg*degC)") == approx(1.8)

    def test_misuse(self):
        with pytest.raises(AffineUnitMisuseError):
            convert_unit("celsius/s", "K/s")
        with pytest.raises(AffineUnitMisuseError):
            convert_value(1, "celsius^2", "K^2")


class TestErrors:
    def test_dimensional_mismatch(self):
        with pytest.raises(DimensionalMismatchError) as error:
            convert_unit("m", "kg")
        assert error.value.from_unit == "m"
        assert error.value.to_unit == "kg"
        assert error.value.from_dimensions == "m"
        assert error.value.to_dimensions == "kg"
        assert "incompatible" in str(error.value)

    @pytest.mark.parametrize("from_unit, to_unit", [("m", "s"), ("N", "kg"), ("J", "N"), ("Hz", "rad")])
    def test_incompatible(self, from_unit, to_unit):
        with pytest.raises(DimensionalMismatchError):
            convert_unit(from_unit, to_unit)

    def test_unknown_unit(self):
        with pytest.raises(UnknownUnitError):
            convert_unit("xyz", "m")

    def test_identity_of_unknown_unit(self):
        with pytest.raises(UnknownUnitError) as error:
            convert_unit("xyz", "xyz")
        assert error.value.unit == "xyz"

    def test_invalid_syntax(self):
        with pytest.raises(InvalidUnitSyntaxError):
            convert_unit("m^^2", "m")

    def test_common_base(self):
        for call in (lambda: convert_unit("m", "s"), lambda: convert_unit("xyz", "m")):
            with pytest.raises(UnitConversionError):
                call()


class TestCompatibility:
    def test_compatible(self):
        assert is_compatible("N", "kg*m/s^2")
        assert is_compatible("kWh", "BTU")
        assert not is_compatible("J", "W")

    def test_propagates_errors(self):
        with pytest.raises(UnknownUnitError):
            is_compatible("blorp", "m")

    def test_dimensions(self, converter):
        assert converter.dimensions("N") == "kg*m/s^2"
        assert converter.dimensions("Hz") == "1/s"
        assert converter.dimensions("rad") == "dimensionless"


class TestConverter:
    def test_custom_registry(self, registry):
        registry.define("fortnight", "day", factor=14)
        assert convert_unit("fortnight", "week", registry) == approx(2)
        assert convert_value(3, "fortnight", "day", registry=registry) == approx(42)
        with pytest.raises(UnknownUnitError):
            convert_unit("fortnight", "week")

    def test_cache_invalidated_after_define(self, registry, converter):
        with pytest.raises(UnknownUnitError):
            converter.conversion_factor("smoot", "m")
        converter.conversion_factor("km", "m")

        registry.define("smoot", "m", factor=1.7018)
        assert converter.conversion_factor("smoot", "m") == approx(1.7018)

        registry.define("smoot", "m", factor=2.0, replace=True)
        assert converter.conversion_factor("smoot", "m") == approx(2.0)

    def test_cache_is_reused(self, converter):
        first = converter.reduce("kg*m/s^2")
        assert converter.reduce("kg*m/s^2") is first

    def test_cache_bounded(self, registry):
        converter = UnitConverter(registry, ConverterConfig(cache_size=2))
        first = converter.reduce("m")
        converter.reduce("s")
        converter.reduce("kg")
        assert converter.reduce("m") is not first

    def test_cache_disabled(self, registry):
        converter = UnitConverter(registry, ConverterConfig(cache_size=0))
        assert converter.reduce("m") is not converter.reduce("m")

    def test_clear_cache(self, converter):
        first = converter.reduce("m")
        converter.clear_cache()
        assert converter.reduce("m") is not first

    def test_rounding(self, registry):
        converter = UnitConverter(registry, ConverterConfig(rounding=3))
        assert converter.conversion_factor("km/h", "m/s") == 0.278
        assert converter.convert_value(1, "mi", "km") == 1.609

    def test_default_registry(self):
        converter = UnitConverter()
        assert converter.registry is UnitRegistry.default()
        assert converter.conversion_factor("km", "m") == approx(1000)
