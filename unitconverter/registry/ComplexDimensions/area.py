from unitconverter.registry.Dimensions.spatial import Feet, Inch, Meter
from unitconverter.registry.definition import DerivedUnit
from unitconverter.registry.prefixes import Centi, Deci, Hecto, Kilo, Mega, Micro, Milli


class AreaUnit(DerivedUnit):
    """A class representing a unit of area, composed in the form spatial^2."""


class VolumeUnit(DerivedUnit):
    """A class representing a unit of volume, composed in the form spatial^3."""


Hectare = AreaUnit("ha", Meter ** 2, 1e4, long_names=("hectare", "hectares"))
Are = AreaUnit("are", Meter ** 2, 100.0)
Acre = AreaUnit("acre", Feet ** 2, 43560.0, long_names=("acres",))

Liter = VolumeUnit(
    "L",
    Meter ** 3,
    1e-3,
    aliases=("l",),
    long_names=("liter", "liters", "litre", "litres"),
    prefixes=(Mega, Kilo, Hecto, Deci, Centi, Milli, Micro),
)
CubicCentimeter = VolumeUnit("cc", Meter ** 3, 1e-6)
Gallon = VolumeUnit("gal", Inch ** 3, 231.0, long_names=("gallon", "gallons"))
Quart = VolumeUnit("qt", Inch ** 3, 57.75, long_names=("quart", "quarts"))
FluidOunce = VolumeUnit("floz", Inch ** 3, 1.8046875, long_names=("fluid_ounce",))
Barrel = VolumeUnit("bbl", Inch ** 3, 9702.0, long_names=("barrel", "barrels"))

UNITS = [Hectare, Are, Acre, Liter, CubicCentimeter, Gallon, Quart, FluidOunce, Barrel]
