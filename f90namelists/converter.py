"""Conversion between namelist lexemes and Python scalars.

``to_native`` tries each parser in ``SCALAR_PARSERS`` in order and keeps the
first match, so ``1`` is an ``int`` and never a ``float``, and ``T`` is a
``bool`` before it could fall back to a bare string. ``to_literal`` is the
inverse used by the formatter.
"""

from __future__ import annotations

import math
import re
from typing import Callable

from f90namelists.errors import NamelistValueError
from f90namelists.nodes import NamelistScalar

_INTEGER_RE = re.compile(r"[+-]?\d+")
_REAL_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eEdD][+-]?\d+)?")
_SPECIAL_REAL_RE = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)
_LOGICAL_RE = re.compile(r"\.?(?P<value>t|f|true|false)\.?", re.IGNORECASE)

QUOTES = ("'", '"')


class NoMatch:
    """Returned by a scalar parser that does not accept the lexeme."""

    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH = NoMatch()

ScalarParser = Callable[[str], "NamelistScalar | NoMatch"]


def parse_integer(lexeme: str) -> int | NoMatch:
    if _INTEGER_RE.fullmatch(lexeme):
        return int(lexeme)
    return NO_MATCH


def parse_real(lexeme: str) -> float | NoMatch:
    if _SPECIAL_REAL_RE.fullmatch(lexeme):
        return float(lexeme)
    # a plain integer is not a real, it must carry a point or an exponent
    if _REAL_RE.fullmatch(lexeme) and not _INTEGER_RE.fullmatch(lexeme):
        return float(lexeme.replace("d", "e").replace("D", "e"))
    return NO_MATCH


def parse_logical(lexeme: str) -> bool | NoMatch:
    match = _LOGICAL_RE.fullmatch(lexeme)
    if match is None:
        return NO_MATCH
    return match.group("value")[0].lower() == "t"


def parse_string(lexeme: str) -> str:
    if not lexeme or lexeme[0] not in QUOTES:
        return lexeme
    delimiter = lexeme[0]
    if len(lexeme) > 1 and lexeme[-1] == delimiter:
        body = lexeme[1:-1]
    else:
        # literal left open at the end of its line
        body = lexeme[1:]
    return body.replace(delimiter * 2, delimiter)


SCALAR_PARSERS: list[ScalarParser] = [parse_integer, parse_real, parse_logical, parse_string]


def to_native(lexeme: str) -> NamelistScalar:
    lexeme = lexeme.strip()
    for parser in SCALAR_PARSERS:
        value = parser(lexeme)
        if value is not NO_MATCH:
            return value  # type: ignore[return-value]
    raise NamelistValueError(f"Cannot convert lexeme {lexeme!r}")


def to_literal(value: NamelistScalar) -> str:
    # bool first, it is a subclass of int
    if isinstance(value, bool):
        return ".true." if value else ".false."
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "nan"
        if math.isinf(value):
            return "+inf" if value > 0 else "-inf"
        return repr(value)
    if isinstance(value, str):
        return "'" + value.replace("'", "''") + "'"
    raise NamelistValueError(f"Cannot format value of type {type(value).__name__}: {value!r}")


__all__ = [
    "NO_MATCH",
    "SCALAR_PARSERS",
    "parse_integer",
    "parse_logical",
    "parse_real",
    "parse_string",
    "to_literal",
    "to_native",
]
