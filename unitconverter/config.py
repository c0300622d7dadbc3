"""
Configuration for the unit converter.
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "UNITCONVERTER_"


@dataclass
class ConverterConfig:
    """Configuration for a :class:`UnitConverter`.

    :param cache_size: Maximum number of reduced unit expressions memoized per converter. 0 disables the cache.
    :param rounding: Number of decimal places conversion results are rounded to, or None to leave them unrounded.
    :param log_level: Level applied to the package logger by the command line interface.
    """

    cache_size: int = 256
    rounding: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.cache_size < 0:
            raise ValueError("cache_size must be non-negative")
        if self.rounding is not None and self.rounding < 0:
            raise ValueError("rounding must be non-negative")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ConverterConfig":
        """Builds a configuration from ``UNITCONVERTER_*`` environment variables, falling back to the defaults.

        Recognized variables are ``UNITCONVERTER_CACHE_SIZE``, ``UNITCONVERTER_ROUNDING`` and
        ``UNITCONVERTER_LOG_LEVEL``.

        :param environ: The environment to read. Defaults to :data:`os.environ`.
        :type environ: Mapping[str, str], optional
        :raises ValueError: If a variable holds an invalid value.
        """
        if environ is None:
            environ = os.environ

        kwargs = {}
        cache_size = environ.get(ENV_PREFIX + "CACHE_SIZE")
        if cache_size:
            kwargs["cache_size"] = _parse_int("CACHE_SIZE", cache_size)
        rounding = environ.get(ENV_PREFIX + "ROUNDING")
        if rounding:
            kwargs["rounding"] = _parse_int("ROUNDING", rounding)
        log_level = environ.get(ENV_PREFIX + "LOG_LEVEL")
        if log_level:
            kwargs["log_level"] = log_level
        return cls(**kwargs)


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got '{value}'") from None
