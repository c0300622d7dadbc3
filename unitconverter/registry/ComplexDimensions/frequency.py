from unitconverter.registry.Dimensions.temporal import Minute, Second
from unitconverter.registry.definition import DerivedUnit
from unitconverter.registry.prefixes import SI_PREFIXES


class FrequencyUnit(DerivedUnit):
    """A class representing a unit of frequency, composed in the form temporal^-1."""


Hertz = FrequencyUnit("Hz", Second ** -1, long_names=("hertz",), prefixes=SI_PREFIXES)
# Cycles per minute; angles are dimensionless so this is not rev/min in radians
RotationsPerMinute = FrequencyUnit("rpm", Minute ** -1)
Becquerel = FrequencyUnit("Bq", Second ** -1, long_names=("becquerel",))

UNITS = [Hertz, RotationsPerMinute, Becquerel]
