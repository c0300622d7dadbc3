"""
Temperature units.

Absolute scales (``celsius``, ``fahrenheit``) carry an additive offset and convert actual temperatures, so they may only
be used on their own. Interval units (``degC``, ``degF``, ``degR``) share the scale of their absolute counterparts with
no offset and measure temperature differences, so they combine freely (``W/(m^2*degC)``).
"""

from unitconverter.core import dimension_vector
from unitconverter.registry.definition import UnitDefinition
from unitconverter.registry.prefixes import SI_PREFIXES

TEMPERATURE = dimension_vector(Temperature=1)

CELSIUS_OFFSET = 273.15
FAHRENHEIT_SCALE = 5.0 / 9.0
FAHRENHEIT_OFFSET = 459.67 * FAHRENHEIT_SCALE


class ThermalUnit(UnitDefinition):
    """
    A class representing a unit of temperature.
    """

    def __init__(self, scale: float = 1.0, symbol: str = "", shift: float = 0.0, **names) -> None:
        super().__init__(TEMPERATURE, scale, symbol, shift, **names)


Kelvin = ThermalUnit(1.0, "K", long_names=("kelvin",), prefixes=SI_PREFIXES)  # Base unit

# Absolute scales
Celsius = ThermalUnit(1.0, "celsius", CELSIUS_OFFSET, aliases=("°C", "degree_Celsius"))
Fahrenheit = ThermalUnit(
    FAHRENHEIT_SCALE, "fahrenheit", FAHRENHEIT_OFFSET, aliases=("°F", "degree_Fahrenheit")
)
Rankine = ThermalUnit(FAHRENHEIT_SCALE, "rankine", aliases=("°R", "degree_Rankine"))

# Temperature intervals
DeltaKelvin = ThermalUnit(1.0, "degK")
DeltaCelsius = ThermalUnit(1.0, "degC", aliases=("delta_degC",))
DeltaFahrenheit = ThermalUnit(FAHRENHEIT_SCALE, "degF", aliases=("delta_degF",))
DeltaRankine = ThermalUnit(FAHRENHEIT_SCALE, "degR", aliases=("delta_degR",))

UNITS = [
    Kelvin,
    Celsius,
    Fahrenheit,
    Rankine,
    DeltaKelvin,
    DeltaCelsius,
    DeltaFahrenheit,
    DeltaRankine,
]
