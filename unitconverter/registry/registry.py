import threading
from typing import Dict, Iterable, Iterator, List, Optional, Union

from unitconverter.core import UnitDecomposition
from unitconverter.errors import UnknownUnitError
from unitconverter.registry.definition import UnitDefinition
from unitconverter.utils.logging import Debug, Info

_RESERVED_CHARACTERS = frozenset("*/^()+-0123456789")

_default_registry: Optional["UnitRegistry"] = None
_default_lock = threading.Lock()


class UnitRegistry:
    """
    Maps exact, case sensitive unit names (``km``, ``kg``, ``degC``) to their :class:`UnitDecomposition`.

    Prefixed variants are materialized when a definition is added, so a lookup is a single dictionary access.
    A registry can be frozen, after which it never changes and can be read from any number of threads. Unfrozen
    registries are caller owned handles that accept new definitions; every change bumps :attr:`version` so that caches
    built on top of the registry know to invalidate.

    :param definitions: The unit definitions to materialize.
    :type definitions: Iterable[:class:`UnitDefinition`], optional
    :param frozen: Whether the registry rejects further definitions.
    :type frozen: bool, optional
    """

    def __init__(self, definitions: Iterable[UnitDefinition] = (), frozen: bool = False) -> None:
        self._lock = threading.RLock()
        self._units: Dict[str, UnitDecomposition] = {}
        self._version = 0
        self._frozen = False

        units: Dict[str, UnitDecomposition] = {}
        for definition in definitions:
            self._materialize(units, definition, replace=False)
        self._units = units
        self._frozen = frozen
        Debug(f"Unit registry built with {len(units)} units")

    @classmethod
    def default(cls) -> "UnitRegistry":
        """Returns the frozen registry of built-in units, building it on first use.

        :rtype: :class:`UnitRegistry`
        """
        global _default_registry
        with _default_lock:
            if _default_registry is None:
                from unitconverter.registry.catalog import DefaultDefinitions

                _default_registry = cls(DefaultDefinitions(), frozen=True)
            return _default_registry

    @property
    def version(self) -> int:
        return self._version

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Makes this registry read-only."""
        with self._lock:
            self._frozen = True

    def copy(self) -> "UnitRegistry":
        """Returns a mutable registry holding the same units.

        :rtype: :class:`UnitRegistry`
        """
        clone = UnitRegistry()
        clone._units = dict(self._units)
        return clone

    def lookup(self, name: str) -> UnitDecomposition:
        """Returns the decomposition of a unit name.

        :param name: The exact unit name.
        :type name: str
        :raises UnknownUnitError: If the name is not registered.
        :rtype: :class:`UnitDecomposition`
        """
        try:
            return self._units[name]
        except KeyError:
            raise UnknownUnitError(name) from None

    def register(self, definition: UnitDefinition, replace: bool = False) -> None:
        """Materializes a :class:`UnitDefinition`, including its prefixed variants.

        :param definition: The definition to add.
        :type definition: :class:`UnitDefinition`
        :param replace: Whether existing names may be redefined.
        :type replace: bool, optional
        :raises RuntimeError: If the registry is frozen.
        :raises ValueError: If a name is already registered to a different unit and ``replace`` is False.
        """
        with self._lock:
            self._require_mutable()
            units = dict(self._units)
            self._materialize(units, definition, replace)
            self._commit(units)
        Info(f"Registered unit '{definition.symbol}'")

    def define(
        self,
        name: str,
        definition: Union[str, UnitDecomposition],
        factor: float = 1.0,
        offset: float = 0.0,
        replace: bool = False,
    ) -> UnitDecomposition:
        """Defines a new unit in terms of existing ones.

        One of the new unit is ``factor`` times the ``definition`` expression, shifted by ``offset`` in SI base units.

        >>> registry = UnitRegistry.default().copy()
        >>> registry.define("fortnight", "day", factor=14)

        :param name: The new unit name. It may not contain operators, parentheses or digits.
        :type name: str
        :param definition: A unit expression reduced against this registry, or a ready decomposition.
        :type definition: str or :class:`UnitDecomposition`
        :param factor: How many ``definition`` make up one of the new unit.
        :type factor: float, optional
        :param offset: An additive offset in SI base units, for absolute scales.
        :type offset: float, optional
        :param replace: Whether an existing name may be redefined.
        :type replace: bool, optional
        :return: The decomposition that was registered.
        :rtype: :class:`UnitDecomposition`
        """
        if not name or any(char in _RESERVED_CHARACTERS or char.isspace() for char in name):
            raise ValueError(f"'{name}' is not a valid unit name")

        with self._lock:
            self._require_mutable()
            if name in self._units and not replace:
                raise ValueError(f"Unit '{name}' is already defined")

            if isinstance(definition, str):
                from unitconverter.reducer import reduce_unit

                base = reduce_unit(definition, self)
            else:
                base = definition
            decomposition = UnitDecomposition(
                base.vector, base.factor * factor, base.offset + offset, name
            )

            units = dict(self._units)
            units[name] = decomposition
            self._commit(units)
        Info(f"Defined unit '{name}' as {factor} {definition}")
        return decomposition

    def names(self) -> List[str]:
        """Returns every registered unit name, sorted."""
        return sorted(self._units)

    def _require_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("This unit registry is frozen; use copy() to obtain a mutable registry")

    def _commit(self, units: Dict[str, UnitDecomposition]) -> None:
        # Readers see either the old or the new mapping, never a partial update.
        self._units = units
        self._version += 1

    @staticmethod
    def _materialize(
        units: Dict[str, UnitDecomposition], definition: UnitDefinition, replace: bool
    ) -> None:
        for name, decomposition in definition.expand():
            existing = units.get(name)
            if existing is not None and existing != decomposition and not replace:
                raise ValueError(
                    f"Unit '{name}' from '{definition.symbol}' conflicts with an existing definition"
                )
            units[name] = decomposition

    def __contains__(self, name: object) -> bool:
        return name in self._units

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else f"version={self._version}"
        return f"UnitRegistry({len(self._units)} units, {state})"
