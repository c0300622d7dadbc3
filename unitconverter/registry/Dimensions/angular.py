"""
Dimensionless units: plane and solid angles, and ratios. Angles are treated as dimensionless, so ``rad`` converts to
any other dimensionless unit.
"""

import math

from unitconverter.core import zero_vector
from unitconverter.registry.definition import UnitDefinition
from unitconverter.registry.prefixes import Milli, Micro

DIMENSIONLESS = zero_vector()


class DimensionlessUnit(UnitDefinition):
    """
    A class representing a dimensionless unit, such as an angle or a ratio.
    """

    def __init__(self, scale: float = 1.0, symbol: str = "", **names) -> None:
        super().__init__(DIMENSIONLESS, scale, symbol, **names)


# Angles
Radian = DimensionlessUnit(1.0, "rad", long_names=("radian", "radians"), prefixes=(Milli, Micro))
Degree = DimensionlessUnit(math.pi / 180, "deg", aliases=("°",), long_names=("degree", "degrees"))
ArcMinute = DimensionlessUnit(math.pi / 10800, "arcmin", long_names=("arcminute",))
ArcSecond = DimensionlessUnit(math.pi / 648000, "arcsec", long_names=("arcsecond",))
Gradian = DimensionlessUnit(math.pi / 200, "grad", long_names=("gradian", "gon"))
Rotation = DimensionlessUnit(2 * math.pi, "rev", aliases=("turn",), long_names=("revolution", "rotation"))
Steradian = DimensionlessUnit(1.0, "sr", long_names=("steradian",))

# Ratios
Percent = DimensionlessUnit(1e-2, "%", long_names=("percent",))
PerMille = DimensionlessUnit(1e-3, "‰", long_names=("permille",))
PartsPerMillion = DimensionlessUnit(1e-6, "ppm")
PartsPerBillion = DimensionlessUnit(1e-9, "ppb")

UNITS = [
    Radian,
    Degree,
    ArcMinute,
    ArcSecond,
    Gradian,
    Rotation,
    Steradian,
    Percent,
    PerMille,
    PartsPerMillion,
    PartsPerBillion,
]
