import threading
from collections import OrderedDict
from typing import Optional, Tuple

from unitconverter.config import ConverterConfig
from unitconverter.core import ReducedUnit
from unitconverter.errors import DimensionalMismatchError
from unitconverter.reducer import reduce_unit
from unitconverter.registry import UnitRegistry
from unitconverter.utils.logging import Debug


class UnitConverter:
    """
    Converts values between unit expressions resolved against one :class:`UnitRegistry`.

    Reduced expressions are memoized. The cache is tied to the registry version it was filled under and is dropped as
    soon as the registry changes, so units defined after the converter was created are picked up.

    :param registry: The registry to resolve units against. Defaults to the built-in registry.
    :type registry: :class:`UnitRegistry`, optional
    :param config: Converter configuration. Defaults to :class:`ConverterConfig` defaults.
    :type config: :class:`ConverterConfig`, optional
    """

    def __init__(
        self, registry: Optional[UnitRegistry] = None, config: Optional[ConverterConfig] = None
    ) -> None:
        self.registry = registry if registry is not None else UnitRegistry.default()
        self.config = config if config is not None else ConverterConfig()
        self._cache: "OrderedDict[str, ReducedUnit]" = OrderedDict()
        self._cache_version = self.registry.version
        self._cache_lock = threading.Lock()

    def reduce(self, unit_string: str) -> ReducedUnit:
        """Parses and reduces a unit expression, using the memo cache when possible.

        :param unit_string: The unit expression.
        :type unit_string: str
        :rtype: :class:`ReducedUnit`
        """
        if self.config.cache_size == 0:
            return reduce_unit(unit_string, self.registry)

        version = self.registry.version
        with self._cache_lock:
            if version != self._cache_version:
                self._cache.clear()
                self._cache_version = version
            cached = self._cache.get(unit_string)
            if cached is not None:
                self._cache.move_to_end(unit_string)
                return cached

        reduced = reduce_unit(unit_string, self.registry)

        with self._cache_lock:
            if version == self._cache_version:
                self._cache[unit_string] = reduced
                while len(self._cache) > self.config.cache_size:
                    self._cache.popitem(last=False)
        return reduced

    def clear_cache(self) -> None:
        with self._cache_lock:
            self._cache.clear()

    def _reduce_compatible(self, from_unit: str, to_unit: str) -> Tuple[ReducedUnit, ReducedUnit]:
        source = self.reduce(from_unit)
        target = self.reduce(to_unit)
        if not source.is_compatible(target):
            raise DimensionalMismatchError(from_unit, to_unit, source.signature, target.signature)
        return source, target

    def _round(self, value: float) -> float:
        if self.config.rounding is None:
            return value
        return round(value, self.config.rounding)

    def conversion_factor(self, from_unit: str, to_unit: str) -> float:
        """Returns how many ``to_unit`` make up one ``from_unit``.

        This is a pure scale ratio; offsets are ignored, so ``conversion_factor("celsius", "fahrenheit")`` is 1.8.
        Use :meth:`convert_value` to convert absolute temperatures.

        :param from_unit: The source unit expression.
        :type from_unit: str
        :param to_unit: The target unit expression.
        :type to_unit: str
        :raises UnknownUnitError: If either expression names an unknown unit.
        :raises InvalidUnitSyntaxError: If either expression is malformed.
        :raises DimensionalMismatchError: If the units have different dimensions.
        :rtype: float
        """
        source, target = self._reduce_compatible(from_unit, to_unit)
        factor = self._round(source.factor / target.factor)
        Debug(f"1 {from_unit} = {factor} {to_unit}")
        return factor

    def convert_value(self, value: float, from_unit: str, to_unit: str) -> float:
        """Converts a value between units, applying offsets for absolute scales such as celsius.

        ``base = from.factor * value + from.offset`` and the result is ``(base - to.offset) / to.factor``.

        :param value: The value expressed in ``from_unit``.
        :type value: float
        :param from_unit: The source unit expression.
        :type from_unit: str
        :param to_unit: The target unit expression.
        :type to_unit: str
        :raises UnknownUnitError: If either expression names an unknown unit.
        :raises InvalidUnitSyntaxError: If either expression is malformed.
        :raises DimensionalMismatchError: If the units have different dimensions.
        :rtype: float
        """
        source, target = self._reduce_compatible(from_unit, to_unit)
        result = self._round(target.from_base(source.to_base(float(value))))
        Debug(f"{value} {from_unit} = {result} {to_unit}")
        return result

    def is_compatible(self, first: str, second: str) -> bool:
        """Returns whether two unit expressions reduce to the same dimensions.

        :raises UnknownUnitError: If either expression names an unknown unit.
        :raises InvalidUnitSyntaxError: If either expression is malformed.
        """
        return self.reduce(first).is_compatible(self.reduce(second))

    def dimensions(self, unit_string: str) -> str:
        """Returns the formatted base dimensions of a unit expression, e.g. ``kg*m/s^2`` for ``N``."""
        return self.reduce(unit_string).signature


_default_converter: Optional[UnitConverter] = None
_default_lock = threading.Lock()


def GetDefaultConverter() -> UnitConverter:
    """Returns the shared converter over the built-in registry, configured from the environment."""
    global _default_converter
    with _default_lock:
        if _default_converter is None:
            _default_converter = UnitConverter(UnitRegistry.default(), ConverterConfig.from_env())
        return _default_converter


def _converter_for(registry: Optional[UnitRegistry]) -> UnitConverter:
    if registry is None:
        return GetDefaultConverter()
    return UnitConverter(registry)


def conversion_factor(from_unit: str, to_unit: str, registry: Optional[UnitRegistry] = None) -> float:
    """Returns how many ``to_unit`` make up one ``from_unit``; see :meth:`UnitConverter.conversion_factor`."""
    return _converter_for(registry).conversion_factor(from_unit, to_unit)


def convert_unit(from_unit: str, to_unit: str, registry: Optional[UnitRegistry] = None) -> float:
    """Alias of :func:`conversion_factor`."""
    return conversion_factor(from_unit, to_unit, registry)


def convert_value(
    value: float, from_unit: str, to_unit: str, registry: Optional[UnitRegistry] = None
) -> float:
    """Converts a value between units, offsets included; see :meth:`UnitConverter.convert_value`."""
    return _converter_for(registry).convert_value(value, from_unit, to_unit)


def is_compatible(first: str, second: str, registry: Optional[UnitRegistry] = None) -> bool:
    return _converter_for(registry).is_compatible(first, second)
