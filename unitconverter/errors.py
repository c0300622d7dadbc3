from fractions import Fraction
from typing import Union


class UnitConversionError(Exception):
    """Base class for every error raised while parsing, reducing or converting unit expressions."""


class UnknownUnitError(UnitConversionError, KeyError):
    """Raised when a unit token is not present in the unit registry.

    :param unit: The unit token that could not be found.
    :type unit: str
    """

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(unit)

    def __str__(self) -> str:
        return f"Unknown unit: '{self.unit}'"


class InvalidUnitSyntaxError(UnitConversionError, ValueError):
    """Raised when a unit expression string does not follow the unit grammar.

    :param unit_string: The offending unit expression (or the part of it that failed).
    :type unit_string: str
    :param reason: A human readable description of the problem.
    :type reason: str
    """

    def __init__(self, unit_string: str, reason: str) -> None:
        self.unit_string = unit_string
        self.reason = reason
        super().__init__(unit_string, reason)

    def __str__(self) -> str:
        return f"Invalid unit syntax in '{self.unit_string}': {self.reason}"


class DimensionalMismatchError(UnitConversionError, ValueError):
    """Raised when two unit expressions reduce to different base dimensions.

    :param from_unit: The source unit expression.
    :type from_unit: str
    :param to_unit: The target unit expression.
    :type to_unit: str
    :param from_dimensions: The formatted dimensions of the source unit.
    :type from_dimensions: str
    :param to_dimensions: The formatted dimensions of the target unit.
    :type to_dimensions: str
    """

    def __init__(
        self, from_unit: str, to_unit: str, from_dimensions: str, to_dimensions: str
    ) -> None:
        self.from_unit = from_unit
        self.to_unit = to_unit
        self.from_dimensions = from_dimensions
        self.to_dimensions = to_dimensions
        super().__init__(from_unit, to_unit, from_dimensions, to_dimensions)

    def __str__(self) -> str:
        return (
            "Cannot convert between incompatible units: "
            f"'{self.from_unit}' [{self.from_dimensions}] and "
            f"'{self.to_unit}' [{self.to_dimensions}]"
        )


class AffineUnitMisuseError(UnitConversionError, ValueError):
    """Raised when a unit with an additive offset (an absolute temperature scale) is
    exponentiated or combined with other units.

    :param unit: The affine unit that was misused.
    :type unit: str
    :param exponent: The exponent the unit carried in the expression.
    :type exponent: :class:`fractions.Fraction`
    :param reason: Either :attr:`EXPONENT` or :attr:`COMPOUND`.
    :type reason: str
    """

    EXPONENT = "exponent"
    COMPOUND = "compound"

    def __init__(self, unit: str, exponent: Union[Fraction, int], reason: str) -> None:
        if reason not in (self.EXPONENT, self.COMPOUND):
            raise ValueError(f"Unknown affine misuse reason: {reason}")
        self.unit = unit
        self.exponent = Fraction(exponent)
        self.reason = reason
        super().__init__(unit, self.exponent, reason)

    def __str__(self) -> str:
        if self.reason == self.EXPONENT:
            return (
                f"Cannot use affine unit '{self.unit}' with exponent {self.exponent}. "
                "Affine units (like absolute temperature scales) can only be used with exponent 1."
            )
        return (
            f"Cannot use affine unit '{self.unit}' in compound expressions. "
            "Affine units (like absolute temperature scales) must be used alone."
        )
