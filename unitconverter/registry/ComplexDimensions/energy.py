from unitconverter.registry.ComplexDimensions.force import Newton
from unitconverter.registry.Dimensions.spatial import Meter
from unitconverter.registry.definition import DerivedUnit
from unitconverter.registry.prefixes import Kilo, SI_PREFIXES


class EnergyUnit(DerivedUnit):
    """A class representing a unit of energy, composed in the form force^1 * spatial^1."""


Joule = EnergyUnit("J", Newton * Meter, long_names=("joule", "joules"), prefixes=SI_PREFIXES)
Calorie = EnergyUnit("cal", Joule, 4.184, long_names=("calorie", "calories"), prefixes=(Kilo,))
ElectronVolt = EnergyUnit("eV", Joule, 1.602176634e-19, long_names=("electronvolt",), prefixes=SI_PREFIXES)
BritishThermalUnit = EnergyUnit("BTU", Joule, 1055.05585262, aliases=("Btu",))
Erg = EnergyUnit("erg", Joule, 1e-7)

UNITS = [Joule, Calorie, ElectronVolt, BritishThermalUnit, Erg]
