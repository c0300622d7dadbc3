from fractions import Fraction
from typing import Optional

from unitconverter.core import ReducedUnit, zero_vector
from unitconverter.errors import AffineUnitMisuseError
from unitconverter.parser import UnitExpression, parse_unit
from unitconverter.registry import UnitRegistry
from unitconverter.utils.logging import Debug


def reduce_expression(
    expression: UnitExpression, registry: Optional[UnitRegistry] = None
) -> ReducedUnit:
    """Folds a parsed unit expression into a single factor, offset and dimension vector in SI base units.

    An affine unit (one with an offset, such as ``celsius``) keeps its offset only when it is the whole expression with
    exponent 1. Raising it to another power or combining it with other units has no physical meaning and is rejected.
    Like terms are combined while parsing, so ``celsius/celsius`` has already cancelled to a dimensionless expression
    by the time it gets here and reduces without error.

    :param expression: The parsed unit expression.
    :type expression: :class:`UnitExpression`
    :param registry: The registry to resolve unit names against. Defaults to the built-in registry.
    :type registry: :class:`UnitRegistry`, optional
    :raises UnknownUnitError: If a unit name is not registered.
    :raises AffineUnitMisuseError: If an affine unit is exponentiated or used in a compound expression.
    :return: The reduced unit.
    :rtype: :class:`ReducedUnit`
    """
    if registry is None:
        registry = UnitRegistry.default()

    factor = 1.0
    offset = 0.0
    vector = zero_vector()
    simple = len(expression) == 1 and expression.components[0][1] == 1

    for name, exponent in expression:
        decomposition = registry.lookup(name)
        factor *= decomposition.factor ** float(exponent)

        if decomposition.offset != 0:
            if simple:
                offset = decomposition.offset
            elif exponent != 1:
                raise AffineUnitMisuseError(name, exponent, AffineUnitMisuseError.EXPONENT)
            else:
                raise AffineUnitMisuseError(name, exponent, AffineUnitMisuseError.COMPOUND)

        vector = vector + decomposition.vector * Fraction(exponent)

    reduced = ReducedUnit(vector, factor, offset, str(expression))
    Debug(f"Reduced '{expression}' to {reduced!r}")
    return reduced


def reduce_unit(unit_string: str, registry: Optional[UnitRegistry] = None) -> ReducedUnit:
    """Parses and reduces a unit expression string.

    :param unit_string: The unit expression, e.g. ``"kWh"``.
    :type unit_string: str
    :param registry: The registry to resolve unit names against. Defaults to the built-in registry.
    :type registry: :class:`UnitRegistry`, optional
    :rtype: :class:`ReducedUnit`
    """
    return reduce_expression(parse_unit(unit_string), registry)
