from unitconverter.registry.ComplexDimensions.energy import EnergyUnit, Joule
from unitconverter.registry.Dimensions.temporal import Hour, Second
from unitconverter.registry.definition import DerivedUnit
from unitconverter.registry.prefixes import Giga, Kilo, Mega, Milli, SI_PREFIXES, Tera


class PowerUnit(DerivedUnit):
    """A class representing a unit of power, composed in the form energy^1 * temporal^-1."""


Watt = PowerUnit("W", Joule / Second, long_names=("watt", "watts"), prefixes=SI_PREFIXES)
Horsepower = PowerUnit("hp", Watt, 745.6998715822702, long_names=("horsepower",))

# Energy expressed as power over time, e.g. kWh
WattHour = EnergyUnit(
    "Wh", Watt * Hour, long_names=("watt_hour", "watt_hours"), prefixes=(Tera, Giga, Mega, Kilo, Milli)
)

UNITS = [Watt, Horsepower, WattHour]
