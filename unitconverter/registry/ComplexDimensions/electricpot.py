from unitconverter.registry.ComplexDimensions.power import Watt
from unitconverter.registry.Dimensions.current import Ampere
from unitconverter.registry.Dimensions.temporal import Hour, Second
from unitconverter.registry.definition import DerivedUnit
from unitconverter.registry.prefixes import Kilo, Milli, SI_PREFIXES


class ElectricUnit(DerivedUnit):
    """A class representing an electrical unit derived from the ampere."""


Coulomb = ElectricUnit("C", Ampere * Second, long_names=("coulomb", "coulombs"), prefixes=SI_PREFIXES)
AmpereHour = ElectricUnit("Ah", Ampere * Hour, long_names=("amp_hour",), prefixes=(Kilo, Milli))
Volt = ElectricUnit("V", Watt / Ampere, long_names=("volt", "volts"), prefixes=SI_PREFIXES)
Ohm = ElectricUnit("Ω", Volt / Ampere, aliases=("ohm",), long_names=("ohms",), prefixes=SI_PREFIXES)
Siemens = ElectricUnit("S", Ampere / Volt, long_names=("siemens",), prefixes=SI_PREFIXES)
Farad = ElectricUnit("F", Coulomb / Volt, long_names=("farad", "farads"), prefixes=SI_PREFIXES)
Henry = ElectricUnit("H", Volt * Second / Ampere, long_names=("henry",), prefixes=SI_PREFIXES)
Weber = ElectricUnit("Wb", Volt * Second, long_names=("weber",), prefixes=SI_PREFIXES)

UNITS = [Coulomb, AmpereHour, Volt, Ohm, Siemens, Farad, Henry, Weber]
