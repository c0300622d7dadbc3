from unitconverter.core import dimension_vector
from unitconverter.registry.definition import UnitDefinition
from unitconverter.registry.prefixes import SI_PREFIXES

LENGTH = dimension_vector(Length=1)


class SpatialUnit(UnitDefinition):
    """
    A class representing a unit of length.
    """

    def __init__(self, scale: float = 1.0, symbol: str = "", **names) -> None:
        super().__init__(LENGTH, scale, symbol, **names)


Meter = SpatialUnit(
    1.0,
    "m",
    long_names=("meter", "meters", "metre", "metres"),
    prefixes=SI_PREFIXES,
)  # Base unit
Inch = SpatialUnit(0.0254, "in", long_names=("inch", "inches"))
Feet = SpatialUnit(0.3048, "ft", long_names=("foot", "feet"))
Yard = SpatialUnit(0.9144, "yd", long_names=("yard", "yards"))
Mile = SpatialUnit(1609.344, "mi", long_names=("mile", "miles"))
NauticalMile = SpatialUnit(1852.0, "nmi", long_names=("nautical_mile",))
Angstrom = SpatialUnit(1e-10, "Å", long_names=("angstrom",))
AstronomicalUnit = SpatialUnit(149597870700.0, "au", long_names=("astronomical_unit",))
LightYear = SpatialUnit(9460730472580800.0, "ly", long_names=("light_year",))

UNITS = [Meter, Inch, Feet, Yard, Mile, NauticalMile, Angstrom, AstronomicalUnit, LightYear]
