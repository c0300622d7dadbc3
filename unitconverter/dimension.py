from enum import Enum


class BaseDimension(Enum):
    """Enum for the seven SI base dimensions. The value of each member is its slot in a dimension vector."""

    Length = 0
    Mass = 1
    Time = 2
    Current = 3
    Temperature = 4
    Amount = 5
    LuminousIntensity = 6

    @property
    def symbol(self) -> str:
        """The SI base unit symbol used when rendering this dimension."""
        return _SYMBOLS[self]


_SYMBOLS = {
    BaseDimension.Length: "m",
    BaseDimension.Mass: "kg",
    BaseDimension.Time: "s",
    BaseDimension.Current: "A",
    BaseDimension.Temperature: "K",
    BaseDimension.Amount: "mol",
    BaseDimension.LuminousIntensity: "cd",
}
