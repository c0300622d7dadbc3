from unitconverter.core import dimension_vector
from unitconverter.registry.definition import UnitDefinition
from unitconverter.registry.prefixes import SI_PREFIXES

TIME = dimension_vector(Time=1)


class TemporalUnit(UnitDefinition):
    """
    A class representing a unit of time.
    """

    def __init__(self, scale: float = 1.0, symbol: str = "", **names) -> None:
        super().__init__(TIME, scale, symbol, **names)


Second = TemporalUnit(
    1.0, "s", aliases=("sec",), long_names=("second", "seconds"), prefixes=SI_PREFIXES
)  # Base unit
Minute = TemporalUnit(60.0, "min", long_names=("minute", "minutes"))
Hour = TemporalUnit(3600.0, "h", aliases=("hr",), long_names=("hour", "hours"))
Day = TemporalUnit(86400.0, "d", long_names=("day", "days"))
Week = TemporalUnit(604800.0, "wk", long_names=("week", "weeks"))
Year = TemporalUnit(31536000.0, "yr", long_names=("year", "years"))

UNITS = [Second, Minute, Hour, Day, Week, Year]
