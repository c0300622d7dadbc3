from typing import Iterator

from unitconverter.registry.ComplexDimensions import (
    area,
    electricpot,
    energy,
    force,
    frequency,
    power,
    pressure,
    velocity,
)
from unitconverter.registry.Dimensions import (
    angular,
    current,
    mass,
    spatial,
    substance,
    temporal,
    thermal,
)
from unitconverter.registry.definition import UnitDefinition

# Order only matters for log output; name collisions are rejected regardless of order.
MODULES = (
    spatial,
    mass,
    temporal,
    current,
    thermal,
    substance,
    angular,
    area,
    velocity,
    frequency,
    force,
    energy,
    power,
    pressure,
    electricpot,
)


def DefaultDefinitions() -> Iterator[UnitDefinition]:
    """Yields every unit definition of the built-in catalog."""
    for module in MODULES:
        yield from module.UNITS
