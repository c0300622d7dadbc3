"""
Converts physical quantities between textual unit expressions such as ``kg*m/s^2``, ``kWh`` or ``degC``.

>>> from unitconverter import convert_unit, convert_value
>>> convert_unit("km/h", "m/s")
0.2777...
>>> convert_value(100, "celsius", "fahrenheit")
212.0...
"""

from unitconverter.config import ConverterConfig
from unitconverter.converter import (
    GetDefaultConverter,
    UnitConverter,
    conversion_factor,
    convert_unit,
    convert_value,
    is_compatible,
)
from unitconverter.core import ReducedUnit, UnitDecomposition, format_dimensions
from unitconverter.dimension import BaseDimension
from unitconverter.errors import (
    AffineUnitMisuseError,
    DimensionalMismatchError,
    InvalidUnitSyntaxError,
    UnitConversionError,
    UnknownUnitError,
)
from unitconverter.parser import UnitExpression, parse_unit
from unitconverter.reducer import reduce_expression, reduce_unit
from unitconverter.registry import UnitRegistry

__version__ = "0.1.0"
