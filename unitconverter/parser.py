"""
Parser for algebraic unit expressions such as ``kg*m/s^2``, ``kWh`` or ``(m3/s)*(MW/(m3/s))``.

``*`` and ``/`` share one precedence level and are applied left to right, so every term takes its sign from the operator
directly in front of it: ``a/b*c`` is ``(a/b)*c`` while ``a/b/c`` is ``a/(b*c)``.
Exponents are written explicitly (``m^2``, ``s^-1``, ``m^(1/2)``, ``m^1/2``) or implicitly (``m2``, ``hm3``, ``m²``).
Unit names are not validated here; unknown names are reported when the expression is reduced.
"""

import re
from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, Iterable, Iterator, List, Tuple, Union

from unitconverter.errors import InvalidUnitSyntaxError

Component = Tuple[str, Fraction]

_DIGITS = frozenset("0123456789")
_OPERATORS = "*/^"
_SIGNS = "+-"

_SUPERSCRIPTS = {
    "⁰": "0",
    "¹": "1",
    "²": "2",
    "³": "3",
    "⁴": "4",
    "⁵": "5",
    "⁶": "6",
    "⁷": "7",
    "⁸": "8",
    "⁹": "9",
    "⁻": "-",
    "⁺": "+",
}
_SUPERSCRIPT_RUN = re.compile("[" + "".join(_SUPERSCRIPTS) + "]+")
_OPERATOR_ALIASES = str.maketrans({"·": "*", "⋅": "*", "×": "*", "−": "-"})

_INTEGER = re.compile(r"[+-]?\d+")
_FRACTION = re.compile(r"([+-]?\d+)/([+-]?\d+)")
_TRAILING_EXPONENT = re.compile(r"\^[+-]?\d+$")


@dataclass(frozen=True)
class UnitExpression:
    """
    A parsed unit expression: unique unit names paired with nonzero rational exponents.

    Components are kept sorted by unit name so that two expressions describing the same product compare equal.
    An empty expression is dimensionless.
    """

    components: Tuple[Component, ...] = ()

    @classmethod
    def from_components(
        cls, components: Iterable[Tuple[str, Union[int, Fraction]]]
    ) -> "UnitExpression":
        """Combines like unit names by summing their exponents and drops terms whose exponent sums to zero."""
        combined: Dict[str, Fraction] = {}
        for name, exponent in components:
            combined[name] = combined.get(name, Fraction(0)) + Fraction(exponent)
        return cls(
            tuple(sorted((name, exponent) for name, exponent in combined.items() if exponent != 0))
        )

    @property
    def is_empty(self) -> bool:
        return not self.components

    def as_dict(self) -> Dict[str, Fraction]:
        return dict(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)

    def __str__(self) -> str:
        if not self.components:
            return "dimensionless"

        numerator = []
        denominator = []
        for name, exponent in self.components:
            side = numerator if exponent > 0 else denominator
            magnitude = abs(exponent)
            if magnitude == 1:
                side.append(name)
            elif magnitude.denominator == 1:
                side.append(f"{name}^{magnitude.numerator}")
            else:
                side.append(f"{name}^({magnitude.numerator}/{magnitude.denominator})")

        result = "*".join(numerator) if numerator else "1"
        if denominator:
            result += "/" + "*".join(denominator)
        return result


def split_top_level(
    text: str, delimiters: str, protect_exponents: bool = False
) -> List[Tuple[str, str]]:
    """Splits ``text`` on any of ``delimiters`` that are not nested inside parentheses.

    :param text: The string to split.
    :type text: str
    :param delimiters: The delimiter characters to split on.
    :type delimiters: str
    :param protect_exponents: When True a ``/`` that continues an explicit exponent (``m^1/2``) is not a split point.
    :type protect_exponents: bool, optional
    :return: ``(delimiter, piece)`` pairs; the delimiter of the first piece is the empty string.
    :rtype: List[Tuple[str, str]]
    """
    pieces: List[Tuple[str, str]] = []
    depth = 0
    delimiter = ""
    current: List[str] = []

    for index, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char in delimiters and depth == 0:
            if (
                protect_exponents
                and char == "/"
                and index + 1 < len(text)
                and text[index + 1] in _DIGITS
                and _TRAILING_EXPONENT.search("".join(current))
            ):
                current.append(char)
                continue
            pieces.append((delimiter, "".join(current)))
            delimiter = char
            current = []
            continue
        current.append(char)

    pieces.append((delimiter, "".join(current)))
    return pieces


def strip_outer_parentheses(text: str) -> str:
    """Removes parentheses that wrap the whole of ``text``, repeatedly.

    ``((m/s))`` becomes ``m/s`` while ``(m)*(s)`` is returned unchanged.
    """
    while len(text) >= 2 and text[0] == "(" and text[-1] == ")":
        depth = 0
        for index, char in enumerate(text):
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
                if depth == 0 and index != len(text) - 1:
                    return text
            if depth < 0:
                return text
        if depth != 0:
            return text
        text = text[1:-1]
    return text


def _normalize_symbols(text: str) -> str:
    text = text.translate(_OPERATOR_ALIASES)
    return _SUPERSCRIPT_RUN.sub(
        lambda match: "^" + "".join(_SUPERSCRIPTS[char] for char in match.group(0)), text
    )


def _remove_whitespace(text: str) -> str:
    return "".join(text.split())


def _exponent_end(text: str, start: int) -> int:
    """Returns the index just past the explicit exponent beginning at ``start``."""
    index = start
    length = len(text)
    if index < length and text[index] == "(":
        depth = 0
        while index < length:
            if text[index] == "(":
                depth += 1
            elif text[index] == ")":
                depth -= 1
                if depth == 0:
                    return index + 1
            index += 1
        return length

    if index < length and text[index] in _SIGNS:
        index += 1
    digits_start = index
    while index < length and text[index] in _DIGITS:
        index += 1
    if (
        index > digits_start
        and index + 1 < length
        and text[index] == "/"
        and text[index + 1] in _DIGITS
    ):
        index += 1
        while index < length and text[index] in _DIGITS:
            index += 1
    return index


def expand_implicit_exponents(text: str) -> str:
    """Rewrites digit runs that directly follow a unit name or a closing parenthesis as explicit exponents.

    ``m3`` becomes ``m^3`` and ``(m/s)2`` becomes ``(m/s)^2``. Digits that are already part of an explicit exponent,
    or that stand on their own as in ``1/s``, are left untouched.
    """
    result: List[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char == "^":
            end = _exponent_end(text, index + 1)
            result.append(text[index:end])
            index = end
        elif char in _DIGITS:
            end = index
            while end < length and text[end] in _DIGITS:
                end += 1
            previous = text[index - 1] if index > 0 else ""
            if previous and previous not in _OPERATORS + _SIGNS + "(":
                result.append("^")
            result.append(text[index:end])
            index = end
        else:
            result.append(char)
            index += 1
    return "".join(result)


def _check_balanced(text: str, source: str) -> None:
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise InvalidUnitSyntaxError(source, "unbalanced parentheses")
    if depth != 0:
        raise InvalidUnitSyntaxError(source, "unbalanced parentheses")


def preprocess(unit_string: str) -> str:
    """Normalizes a unit string: unicode operators and superscripts, whitespace, implicit exponents and
    outer parentheses."""
    text = _normalize_symbols(unit_string)
    text = _remove_whitespace(text)
    text = expand_implicit_exponents(text)
    _check_balanced(text, unit_string)
    stripped = strip_outer_parentheses(text)
    if text and not stripped:
        raise InvalidUnitSyntaxError(unit_string, "empty operand")
    return stripped


def parse_exponent(text: str, term: str) -> Fraction:
    """Parses an exponent written as an integer or an integer fraction, optionally parenthesized.

    :param text: The exponent text following ``^``.
    :type text: str
    :param term: The term the exponent belongs to, reported on error.
    :type term: str
    :raises InvalidUnitSyntaxError: If the exponent is empty or not an integer or fraction.
    :rtype: :class:`fractions.Fraction`
    """
    if not text:
        raise InvalidUnitSyntaxError(term, "missing exponent after '^'")

    inner = strip_outer_parentheses(text)
    if _INTEGER.fullmatch(inner):
        return Fraction(int(inner))

    match = _FRACTION.fullmatch(inner)
    if match:
        numerator, denominator = int(match.group(1)), int(match.group(2))
        if denominator == 0:
            raise InvalidUnitSyntaxError(term, "exponent has a zero denominator")
        return Fraction(numerator, denominator)

    raise InvalidUnitSyntaxError(term, f"exponent '{text}' is not an integer or a fraction")


def _parse_term(term: str) -> List[Component]:
    parts = split_top_level(term, "^")
    if len(parts) > 2:
        raise InvalidUnitSyntaxError(term, "multiple '^' operators")

    base = parts[0][1]
    exponent = Fraction(1)
    if len(parts) == 2:
        if not base:
            raise InvalidUnitSyntaxError(term, "missing unit before '^'")
        exponent = parse_exponent(parts[1][1], term)

    inner = strip_outer_parentheses(base)
    if inner != base:
        if not inner:
            raise InvalidUnitSyntaxError(term, "empty operand")
        return [(name, power * exponent) for name, power in _parse_expression(inner)]

    if "(" in base or ")" in base:
        raise InvalidUnitSyntaxError(term, "unexpected parenthesis in unit name")
    if base[0] in _DIGITS:
        if base == "1":
            return []
        raise InvalidUnitSyntaxError(term, "numeric factors are not supported")
    return [(base, exponent)]


def _parse_expression(expression: str) -> List[Component]:
    expression = strip_outer_parentheses(expression)
    if not expression:
        return []

    components: List[Component] = []
    for operator, term in split_top_level(expression, "*/", protect_exponents=True):
        if not term:
            raise InvalidUnitSyntaxError(expression, "empty operand")
        sign = -1 if operator == "/" else 1
        components.extend((name, sign * exponent) for name, exponent in _parse_term(term))
    return components


def parse_unit(unit_string: str) -> UnitExpression:
    """Parses a unit expression string into a :class:`UnitExpression`.

    An empty (or all whitespace) string is the dimensionless unit.

    :param unit_string: The unit expression, e.g. ``"kg*m/s^2"``.
    :type unit_string: str
    :raises InvalidUnitSyntaxError: If the expression does not follow the unit grammar.
    :return: The parsed expression with like terms combined.
    :rtype: :class:`UnitExpression`
    """
    if not isinstance(unit_string, str):
        raise TypeError(f"Unit expression must be a string, got {type(unit_string).__name__}")
    return UnitExpression.from_components(_parse_expression(preprocess(unit_string)))
