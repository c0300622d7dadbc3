from unitconverter.registry.Dimensions.mass import Kilogram, Pound
from unitconverter.registry.Dimensions.spatial import Meter
from unitconverter.registry.Dimensions.temporal import Second
from unitconverter.registry.definition import DerivedUnit
from unitconverter.registry.prefixes import SI_PREFIXES

STANDARD_GRAVITY = 9.80665


class ForceUnit(DerivedUnit):
    """A class representing a unit of force, composed in the form mass^1 * spatial^1 * temporal^-2."""


Newton = ForceUnit("N", Kilogram * Meter / Second ** 2, long_names=("newton", "newtons"), prefixes=SI_PREFIXES)
PoundForce = ForceUnit("lbf", Pound * Meter / Second ** 2, STANDARD_GRAVITY)
KilogramForce = ForceUnit("kgf", Kilogram * Meter / Second ** 2, STANDARD_GRAVITY)
Dyne = ForceUnit("dyn", Newton, 1e-5, long_names=("dyne",))

UNITS = [Newton, PoundForce, KilogramForce, Dyne]
