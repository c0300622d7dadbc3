from fractions import Fraction
from typing import Dict, Mapping, Union

import numpy as np

from unitconverter.dimension import BaseDimension
from unitconverter.errors import AffineUnitMisuseError

Exponent = Union[int, Fraction, str]


def zero_vector() -> np.ndarray:
    """Returns a dimension vector with every base dimension at exponent zero.

    Dimension vectors are object arrays of :class:`fractions.Fraction` so that rational exponents stay exact.

    :return: A zero dimension vector.
    :rtype: :class:`numpy.ndarray`
    """
    return np.array([Fraction(0)] * len(BaseDimension), dtype=object)


def dimension_vector(**exponents: Exponent) -> np.ndarray:
    """Builds a dimension vector from keyword exponents named after :class:`BaseDimension` members.

    >>> dimension_vector(Mass=1, Length=1, Time=-2)  # force

    :return: The dimension vector.
    :rtype: :class:`numpy.ndarray`
    """
    vector = zero_vector()
    for name, exponent in exponents.items():
        vector[BaseDimension[name].value] = Fraction(exponent)
    return vector


def vector_to_dimensions(vector: np.ndarray) -> Dict[BaseDimension, Fraction]:
    """Converts a dimension vector into a mapping, pruning zero exponents."""
    return {
        dimension: vector[dimension.value]
        for dimension in BaseDimension
        if vector[dimension.value] != 0
    }


def dimensions_to_vector(dimensions: Mapping[BaseDimension, Exponent]) -> np.ndarray:
    vector = zero_vector()
    for dimension, exponent in dimensions.items():
        vector[dimension.value] += Fraction(exponent)
    return vector


def _format_exponent(exponent: Fraction) -> str:
    if exponent.denominator == 1:
        return str(exponent.numerator)
    return f"({exponent.numerator}/{exponent.denominator})"


def format_dimensions(dimensions: Mapping[BaseDimension, Fraction]) -> str:
    """Renders a dimension mapping as a ``numerator/denominator`` product of base unit symbols.

    Terms are ordered by base unit symbol and an exponent of one is omitted, e.g. ``kg*m/s^2``.
    An empty mapping renders as ``dimensionless``.

    :param dimensions: Mapping from base dimension to exponent.
    :type dimensions: Mapping[:class:`BaseDimension`, :class:`fractions.Fraction`]
    :return: The formatted dimension signature.
    :rtype: str
    """
    terms = sorted(
        ((dimension, Fraction(exponent)) for dimension, exponent in dimensions.items() if exponent != 0),
        key=lambda term: term[0].symbol,
    )
    if not terms:
        return "dimensionless"

    numerator = []
    denominator = []
    for dimension, exponent in terms:
        side = numerator if exponent > 0 else denominator
        magnitude = abs(exponent)
        if magnitude == 1:
            side.append(dimension.symbol)
        else:
            side.append(f"{dimension.symbol}^{_format_exponent(magnitude)}")

    result = "*".join(numerator) if numerator else "1"
    if denominator:
        result += "/" + "*".join(denominator)
    return result


class UnitDecomposition:
    """
    The decomposition of a unit into SI base units, such that
    ``base_value = factor * unit_value + offset``.

    A decomposition with a nonzero offset is affine (an absolute temperature scale) and can only be used on its own:
    raising it to a power or combining it with another decomposition raises :class:`AffineUnitMisuseError`.
    """

    __slots__ = ("_vector", "_factor", "_offset", "_symbol")

    def __init__(
        self,
        dimensions: Union[np.ndarray, Mapping[BaseDimension, Exponent], None] = None,
        factor: float = 1.0,
        offset: float = 0.0,
        symbol: str = "",
    ) -> None:
        if dimensions is None:
            vector = zero_vector()
        elif isinstance(dimensions, np.ndarray):
            vector = np.array([Fraction(exponent) for exponent in dimensions], dtype=object)
        else:
            vector = dimensions_to_vector(dimensions)
        if len(vector) != len(BaseDimension):
            raise ValueError(
                f"Dimension vector must have {len(BaseDimension)} entries, got {len(vector)}"
            )
        self._vector = vector
        self._factor = float(factor)
        self._offset = float(offset)
        self._symbol = symbol

    @classmethod
    def dimensionless(cls, factor: float = 1.0, symbol: str = "") -> "UnitDecomposition":
        """Creates a dimensionless decomposition, used for ratios, percentages and angles."""
        return cls(None, factor, 0.0, symbol)

    @property
    def factor(self) -> float:
        return self._factor

    @property
    def offset(self) -> float:
        return self._offset

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def vector(self) -> np.ndarray:
        """A copy of the dimension vector, indexed by :class:`BaseDimension` value."""
        return self._vector.copy()

    @property
    def dimensions(self) -> Dict[BaseDimension, Fraction]:
        """The nonzero base dimension exponents of this unit."""
        return vector_to_dimensions(self._vector)

    @property
    def signature(self) -> str:
        return format_dimensions(self.dimensions)

    @property
    def is_dimensionless(self) -> bool:
        return not any(exponent != 0 for exponent in self._vector)

    @property
    def is_affine(self) -> bool:
        return self._offset != 0

    def same_dimensions(self, other: "UnitDecomposition") -> bool:
        return bool(np.array_equal(self._vector, other._vector))

    def to_base(self, value: float) -> float:
        return (value * self._factor) + self._offset

    def from_base(self, value: float) -> float:
        return (value - self._offset) / self._factor

    def scaled(self, scale: float, symbol: str = "") -> "UnitDecomposition":
        """Returns this decomposition with its factor multiplied by ``scale``, as used for SI prefixes.

        :param scale: The multiplier to apply to the factor.
        :type scale: float
        :param symbol: The symbol of the new decomposition.
        :type symbol: str, optional
        """
        self._require_linear(1)
        return type(self)(self._vector, self._factor * scale, 0.0, symbol)

    def _require_linear(self, exponent: Exponent, compound: bool = False) -> None:
        if not self.is_affine:
            return
        if compound:
            raise AffineUnitMisuseError(self._symbol, exponent, AffineUnitMisuseError.COMPOUND)
        raise AffineUnitMisuseError(self._symbol, exponent, AffineUnitMisuseError.EXPONENT)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitDecomposition):
            return NotImplemented
        return (
            self.same_dimensions(other)
            and self._factor == other._factor
            and self._offset == other._offset
        )

    def __hash__(self) -> int:
        return hash((tuple(self._vector), self._factor, self._offset))

    def __pow__(self, power: Exponent) -> "UnitDecomposition":
        power = Fraction(power)
        if power != 1:
            self._require_linear(power)
        return UnitDecomposition(
            self._vector * power,
            self._factor ** float(power),
            self._offset if power == 1 else 0.0,
            f"{self._symbol}^{power}" if self._symbol else "",
        )

    def __mul__(self, other: "UnitDecomposition") -> "UnitDecomposition":
        if not isinstance(other, UnitDecomposition):
            return NotImplemented
        self._require_linear(1, compound=True)
        other._require_linear(1, compound=True)
        return UnitDecomposition(
            self._vector + other._vector,
            self._factor * other._factor,
            0.0,
            f"{self._symbol}*{other._symbol}",
        )

    def __truediv__(self, other: "UnitDecomposition") -> "UnitDecomposition":
        if not isinstance(other, UnitDecomposition):
            return NotImplemented
        self._require_linear(1, compound=True)
        other._require_linear(-1, compound=True)
        return UnitDecomposition(
            self._vector - other._vector,
            self._factor / other._factor,
            0.0,
            f"{self._symbol}/{other._symbol}",
        )

    def __str__(self) -> str:
        return self._symbol or self.signature

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(factor={self._factor}, offset={self._offset}, "
            f"dimensions={self.signature})"
        )


class ReducedUnit(UnitDecomposition):
    """
    The result of folding a parsed unit expression through the registry: a single factor, offset and dimension vector
    expressed in SI base units. The offset is nonzero only when the expression was a single affine unit with exponent 1.
    """

    __slots__ = ()

    def is_compatible(self, other: UnitDecomposition) -> bool:
        """Two units are compatible when their dimension vectors are equal."""
        return self.same_dimensions(other)
