"""
Command line entry point.

    unitconverter km mi                 # conversion factor
    unitconverter celsius fahrenheit --value 100
    unitconverter --dimensions kWh
    unitconverter --list
"""
import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from unitconverter.config import ConverterConfig
from unitconverter.converter import UnitConverter
from unitconverter.errors import UnitConversionError
from unitconverter.utils.logging import SetLoggingLevel


def BuildParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unitconverter",
        description="Convert between unit expressions such as 'kg*m/s^2', 'kWh' or 'degC'.",
    )
    parser.add_argument("from_unit", nargs="?", help="unit expression to convert from")
    parser.add_argument("to_unit", nargs="?", help="unit expression to convert to")
    parser.add_argument(
        "-v",
        "--value",
        type=float,
        help="convert this value (offsets such as celsius are applied) instead of printing the factor",
    )
    parser.add_argument(
        "-d", "--dimensions", metavar="UNIT", help="print the SI base dimensions of a unit expression"
    )
    parser.add_argument("-l", "--list", action="store_true", help="list every known unit name")
    parser.add_argument("--log-level", help="logging level, e.g. DEBUG (default: UNITCONVERTER_LOG_LEVEL)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = BuildParser()
    args = parser.parse_args(argv)

    try:
        config = ConverterConfig.from_env()
        if args.log_level:
            config = dataclasses.replace(config, log_level=args.log_level)
    except ValueError as error:
        parser.error(str(error))

    logging.basicConfig(level=config.log_level)
    SetLoggingLevel(config.log_level)
    converter = UnitConverter(config=config)

    try:
        if args.list:
            for name in converter.registry.names():
                print(name)
            return 0

        if args.dimensions is not None:
            print(converter.dimensions(args.dimensions))
            return 0

        if args.from_unit is None or args.to_unit is None:
            parser.error("FROM and TO unit expressions are required")

        if args.value is None:
            print(converter.conversion_factor(args.from_unit, args.to_unit))
        else:
            print(converter.convert_value(args.value, args.from_unit, args.to_unit))
    except UnitConversionError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
