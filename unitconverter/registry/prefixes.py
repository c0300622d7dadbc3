from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Prefix:
    """An SI prefix.

    :param symbol: The short prefix used with unit symbols, e.g. ``k``.
    :type symbol: str
    :param name: The long prefix used with unit names, e.g. ``kilo``.
    :type name: str
    :param factor: The multiplier the prefix applies.
    :type factor: float
    :param aliases: Alternative short spellings, e.g. ``u`` for micro.
    :type aliases: Tuple[str, ...], optional
    """

    symbol: str
    name: str
    factor: float
    aliases: Tuple[str, ...] = ()

    @property
    def symbols(self) -> Tuple[str, ...]:
        return (self.symbol,) + self.aliases


Tera = Prefix("T", "tera", 1e12)
Giga = Prefix("G", "giga", 1e9)
Mega = Prefix("M", "mega", 1e6)
Kilo = Prefix("k", "kilo", 1e3)
Hecto = Prefix("h", "hecto", 1e2)
Deca = Prefix("da", "deca", 1e1)
Deci = Prefix("d", "deci", 1e-1)
Centi = Prefix("c", "centi", 1e-2)
Milli = Prefix("m", "milli", 1e-3)
# Greek mu, the micro sign and a plain ascii fallback
Micro = Prefix("μ", "micro", 1e-6, ("µ", "u"))
Nano = Prefix("n", "nano", 1e-9)
Pico = Prefix("p", "pico", 1e-12)

SI_PREFIXES: Tuple[Prefix, ...] = (
    Tera,
    Giga,
    Mega,
    Kilo,
    Hecto,
    Deca,
    Deci,
    Centi,
    Milli,
    Micro,
    Nano,
    Pico,
)

LARGE_PREFIXES: Tuple[Prefix, ...] = (Tera, Giga, Mega, Kilo)


def GetPrefix(symbol: str) -> Prefix:
    """Returns the SI prefix with the given short symbol or alias.

    :param symbol: The prefix symbol, e.g. ``"k"`` or ``"u"``.
    :type symbol: str
    :raises KeyError: If no prefix uses the symbol.
    :rtype: :class:`Prefix`
    """
    for prefix in SI_PREFIXES:
        if symbol in prefix.symbols:
            return prefix
    raise KeyError(symbol)
