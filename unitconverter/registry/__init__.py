from unitconverter.registry.definition import DerivedUnit, UnitDefinition
from unitconverter.registry.prefixes import SI_PREFIXES, GetPrefix, Prefix
from unitconverter.registry.registry import UnitRegistry
