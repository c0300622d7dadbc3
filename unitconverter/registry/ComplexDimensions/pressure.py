from unitconverter.registry.ComplexDimensions.force import KilogramForce, Newton, PoundForce
from unitconverter.registry.Dimensions.spatial import Inch, Meter
from unitconverter.registry.definition import DerivedUnit
from unitconverter.registry.prefixes import Kilo, Mega, Milli, SI_PREFIXES

STANDARD_ATMOSPHERE = 101325.0


class PressureUnit(DerivedUnit):
    """A class representing a unit of pressure, composed in the form force^1 * spatial^-2."""


Pascal = PressureUnit("Pa", Newton / Meter ** 2, long_names=("pascal", "pascals"), prefixes=SI_PREFIXES)
Bar = PressureUnit("bar", Pascal, 1e5, prefixes=(Kilo, Mega, Milli))
Atmosphere = PressureUnit("atm", Pascal, STANDARD_ATMOSPHERE, long_names=("atmosphere",))
Torr = PressureUnit("Torr", Pascal, STANDARD_ATMOSPHERE / 760, aliases=("torr",))
MillimeterOfMercury = PressureUnit("mmHg", Pascal, 133.322387415)
InchOfMercury = PressureUnit("inHg", Pascal, 3386.389)
PoundsPerSquareInch = PressureUnit("psi", PoundForce / Inch ** 2, prefixes=(Kilo,))
TechnicalAtmosphere = PressureUnit("at", KilogramForce / Meter.with_prefix("c") ** 2)

UNITS = [
    Pascal,
    Bar,
    Atmosphere,
    Torr,
    MillimeterOfMercury,
    InchOfMercury,
    PoundsPerSquareInch,
    TechnicalAtmosphere,
]
