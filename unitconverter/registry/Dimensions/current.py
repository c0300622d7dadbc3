from unitconverter.core import dimension_vector
from unitconverter.registry.definition import UnitDefinition
from unitconverter.registry.prefixes import SI_PREFIXES

CURRENT = dimension_vector(Current=1)


class CurrentUnit(UnitDefinition):
    """
    A class representing a unit of electric current.
    """

    def __init__(self, scale: float = 1.0, symbol: str = "", **names) -> None:
        super().__init__(CURRENT, scale, symbol, **names)


Ampere = CurrentUnit(1.0, "A", long_names=("ampere", "amperes", "amp"), prefixes=SI_PREFIXES)  # Base unit

UNITS = [Ampere]
