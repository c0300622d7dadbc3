from unitconverter.registry.Dimensions.spatial import Meter, Mile, NauticalMile
from unitconverter.registry.Dimensions.temporal import Hour, Second
from unitconverter.registry.definition import DerivedUnit


class VelocityUnit(DerivedUnit):
    """A class representing a unit of velocity, composed in the form spatial^1 * temporal^-1."""


class AccelerationUnit(DerivedUnit):
    """A class representing a unit of acceleration, composed in the form spatial^1 * temporal^-2."""


KilometersPerHour = VelocityUnit("kph", Meter.with_prefix("k") / Hour)
MilesPerHour = VelocityUnit("mph", Mile / Hour)
Knot = VelocityUnit("kn", NauticalMile / Hour, long_names=("knot", "knots"))

StandardGravity = AccelerationUnit("g_n", Meter / Second ** 2, 9.80665, long_names=("standard_gravity",))
Gal = AccelerationUnit("Gal", Meter.with_prefix("c") / Second ** 2)

UNITS = [KilometersPerHour, MilesPerHour, Knot, StandardGravity, Gal]
