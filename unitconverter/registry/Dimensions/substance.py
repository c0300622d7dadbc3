from unitconverter.core import dimension_vector
from unitconverter.registry.definition import UnitDefinition
from unitconverter.registry.prefixes import SI_PREFIXES

AMOUNT = dimension_vector(Amount=1)
LUMINOUS_INTENSITY = dimension_vector(LuminousIntensity=1)


class AmountUnit(UnitDefinition):
    """
    A class representing a unit of amount of substance.
    """

    def __init__(self, scale: float = 1.0, symbol: str = "", **names) -> None:
        super().__init__(AMOUNT, scale, symbol, **names)


class LuminousUnit(UnitDefinition):
    """
    A class representing a unit of luminous intensity.
    """

    def __init__(self, scale: float = 1.0, symbol: str = "", **names) -> None:
        super().__init__(LUMINOUS_INTENSITY, scale, symbol, **names)


Mole = AmountUnit(1.0, "mol", long_names=("mole", "moles"), prefixes=SI_PREFIXES)  # Base unit
Candela = LuminousUnit(1.0, "cd", long_names=("candela",), prefixes=SI_PREFIXES)  # Base unit

UNITS = [Mole, Candela]
