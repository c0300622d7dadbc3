from unitconverter.core import dimension_vector
from unitconverter.registry.definition import UnitDefinition
from unitconverter.registry.prefixes import LARGE_PREFIXES, SI_PREFIXES

MASS = dimension_vector(Mass=1)


class MassUnit(UnitDefinition):
    """
    A class representing a unit of mass. The SI base unit of mass is the kilogram, so a gram has a scale of 1e-3.
    """

    def __init__(self, scale: float = 1.0, symbol: str = "", **names) -> None:
        super().__init__(MASS, scale, symbol, **names)


Gram = MassUnit(1e-3, "g", long_names=("gram", "grams", "gramme"), prefixes=SI_PREFIXES)
Kilogram = Gram.with_prefix("k")  # Base unit, materialized as a prefixed gram
Tonne = MassUnit(1000.0, "t", long_names=("tonne", "tonnes", "metric_ton"), prefixes=LARGE_PREFIXES)
Pound = MassUnit(0.45359237, "lb", aliases=("lbm",), long_names=("pound", "pounds"))
Ounce = MassUnit(0.028349523125, "oz", long_names=("ounce", "ounces"))
Stone = MassUnit(6.35029318, "st", long_names=("stone",))
Slug = MassUnit(14.593902937206364, "slug")
Grain = MassUnit(6.479891e-5, "gr", long_names=("grain",))

UNITS = [Gram, Tonne, Pound, Ounce, Stone, Slug, Grain]
