import logging

from unitconverter import UnitConverter, UnitRegistry, convert_unit, convert_value
from unitconverter.utils.logging import Info, SetLoggingLevel

logging.basicConfig()
SetLoggingLevel("INFO")

Info(f"1 kWh in J: {convert_unit('kWh', 'J')}")
Info(f"1 N in base units: {convert_unit('N', 'kg*m/s^2')}")
Info(f"Nested groups: {convert_unit('GWh/hour', '(m3/s)*(MW/(m3/s))')}")
Info(f"Body temperature: {convert_value(37, 'celsius', 'fahrenheit')} F")
Info(f"Heat transfer coefficient: {convert_unit('BTU/(h*ft^2*degF)', 'W/(m^2*K)')}")

registry = UnitRegistry.default().copy()
registry.define("furlong", "m", factor=201.168)
registry.define("fortnight", "day", factor=14)

converter = UnitConverter(registry)
Info(f"Speed of light: {converter.convert_value(299792458, 'm/s', 'furlong/fortnight')} furlong/fortnight")
Info(f"Dimensions of a furlong per fortnight: {converter.dimensions('furlong/fortnight')}")
