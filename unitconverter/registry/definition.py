from typing import Iterable, Iterator, Tuple, Union

import numpy as np

from unitconverter.core import Exponent, UnitDecomposition
from unitconverter.registry.prefixes import GetPrefix, Prefix


class UnitDefinition:
    """
    A named unit and every registry entry it materializes: its symbol, its aliases, its long names and, for each
    accepted SI prefix, the prefixed variants of all of those (``km``, ``kilometer``, ``μs``, ``us``...).

    :param dimensions: The dimension vector of the unit.
    :type dimensions: :class:`numpy.ndarray`
    :param scale: The factor converting one of this unit into SI base units.
    :type scale: float
    :param symbol: The canonical symbol of the unit.
    :type symbol: str
    :param offset: The additive offset in SI base units, nonzero only for absolute temperature scales.
    :type offset: float, optional
    :param aliases: Other symbols of the unit, prefixed like the symbol.
    :type aliases: Iterable[str], optional
    :param long_names: Word forms of the unit, prefixed with long prefix names.
    :type long_names: Iterable[str], optional
    :param prefixes: The SI prefixes this unit accepts.
    :type prefixes: Iterable[:class:`Prefix`], optional
    """

    def __init__(
        self,
        dimensions: np.ndarray,
        scale: float = 1.0,
        symbol: str = "",
        offset: float = 0.0,
        aliases: Iterable[str] = (),
        long_names: Iterable[str] = (),
        prefixes: Iterable[Prefix] = (),
    ) -> None:
        if not symbol:
            raise ValueError("A unit definition needs a symbol")
        self.symbol = symbol
        self.decomposition = UnitDecomposition(dimensions, scale, offset, symbol)
        self.aliases: Tuple[str, ...] = tuple(aliases)
        self.long_names: Tuple[str, ...] = tuple(long_names)
        self.prefixes: Tuple[Prefix, ...] = tuple(prefixes)
        if self.prefixes and self.decomposition.is_affine:
            raise ValueError(f"Affine unit '{symbol}' cannot take SI prefixes")

    @property
    def names(self) -> Tuple[str, ...]:
        """The unprefixed names of this unit."""
        return (self.symbol,) + self.aliases + self.long_names

    def with_prefix(self, prefix: Union[Prefix, str]) -> UnitDecomposition:
        """Returns the decomposition of this unit with an SI prefix applied.

        :param prefix: The prefix, or its short symbol.
        :type prefix: :class:`Prefix` or str
        """
        if isinstance(prefix, str):
            prefix = GetPrefix(prefix)
        return self.decomposition.scaled(prefix.factor, prefix.symbol + self.symbol)

    def expand(self) -> Iterator[Tuple[str, UnitDecomposition]]:
        """Yields every ``(name, decomposition)`` registry entry this definition materializes."""
        for name in self.names:
            yield name, self.decomposition

        for prefix in self.prefixes:
            scaled = self.with_prefix(prefix)
            for prefix_symbol in prefix.symbols:
                for name in (self.symbol,) + self.aliases:
                    yield prefix_symbol + name, scaled
            for name in self.long_names:
                yield prefix.name + name, scaled

    # Algebra on definitions yields plain decompositions, used to build derived units.

    def __mul__(self, other: Union["UnitDefinition", UnitDecomposition]) -> UnitDecomposition:
        return self.decomposition * _decomposition_of(other)

    def __rmul__(self, other: Union["UnitDefinition", UnitDecomposition]) -> UnitDecomposition:
        return _decomposition_of(other) * self.decomposition

    def __truediv__(self, other: Union["UnitDefinition", UnitDecomposition]) -> UnitDecomposition:
        return self.decomposition / _decomposition_of(other)

    def __rtruediv__(self, other: Union["UnitDefinition", UnitDecomposition]) -> UnitDecomposition:
        return _decomposition_of(other) / self.decomposition

    def __pow__(self, power: Exponent) -> UnitDecomposition:
        return self.decomposition ** power

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.symbol}, scale={self.decomposition.factor})"


class DerivedUnit(UnitDefinition):
    """A unit defined from a product of other units, optionally scaled.

    >>> Newton = DerivedUnit("N", Kilogram * Meter / Second ** 2)
    >>> Calorie = DerivedUnit("cal", Joule, 4.184)

    :param symbol: The canonical symbol of the unit.
    :type symbol: str
    :param definition: The unit (or product of units) this unit is a multiple of.
    :type definition: :class:`UnitDecomposition` or :class:`UnitDefinition`
    :param scale: How many ``definition`` make up one of this unit.
    :type scale: float, optional
    """

    def __init__(
        self,
        symbol: str,
        definition: Union[UnitDefinition, UnitDecomposition],
        scale: float = 1.0,
        aliases: Iterable[str] = (),
        long_names: Iterable[str] = (),
        prefixes: Iterable[Prefix] = (),
    ) -> None:
        decomposition = _decomposition_of(definition)
        super().__init__(
            decomposition.vector,
            decomposition.factor * scale,
            symbol,
            0.0,
            aliases,
            long_names,
            prefixes,
        )


def _decomposition_of(unit: Union[UnitDefinition, UnitDecomposition]) -> UnitDecomposition:
    if isinstance(unit, UnitDefinition):
        return unit.decomposition
    if isinstance(unit, UnitDecomposition):
        return unit
    raise TypeError(f"Expected a unit, got {type(unit).__name__}")
