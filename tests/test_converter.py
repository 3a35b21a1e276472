from __future__ import annotations

import math

import pytest

from f90namelists.converter import NO_MATCH, parse_integer, parse_real, to_literal, to_native
from f90namelists.errors import NamelistValueError


def test_integer_before_real():
    value = to_native("1")
    assert value == 1
    assert type(value) is int


@pytest.mark.parametrize(
    "lexeme, expected",
    [("1.0", 1.0), ("-2.5", -2.5), ("1e5", 1e5), ("1.5d2", 150.0), ("3.D-1", 0.3), (".5", 0.5)],
)
def test_reals(lexeme, expected):
    value = to_native(lexeme)
    assert type(value) is float
    assert value == pytest.approx(expected)


def test_special_reals():
    assert to_native("-inf") == -math.inf
    assert to_native("+Infinity") == math.inf
    assert math.isnan(to_native("NaN"))


@pytest.mark.parametrize("lexeme", ["T", "t", ".T.", ".true.", "TRUE", ".True."])
def test_true_logicals(lexeme):
    assert to_native(lexeme) is True


@pytest.mark.parametrize("lexeme", ["F", ".f.", ".false.", "False"])
def test_false_logicals(lexeme):
    assert to_native(lexeme) is False


@pytest.mark.parametrize(
    "lexeme, expected",
    [
        ("'abc'", "abc"),
        ('"abc"', "abc"),
        ("'He said ''hi'''", "He said 'hi'"),
        ('"say ""yes"""', 'say "yes"'),
        ("''", ""),
        ("'unterminated", "unterminated"),
        ("bare_word", "bare_word"),
        ("1e", "1e"),
    ],
)
def test_strings(lexeme, expected):
    assert to_native(lexeme) == expected


def test_parsers_report_no_match():
    assert parse_integer("1.0") is NO_MATCH
    assert parse_real("12") is NO_MATCH
    assert parse_real("abc") is NO_MATCH


@pytest.mark.parametrize(
    "value, literal",
    [
        (True, ".true."),
        (False, ".false."),
        (7, "7"),
        (-3, "-3"),
        (2.5, "2.5"),
        (1e-05, "1e-05"),
        (math.inf, "+inf"),
        (-math.inf, "-inf"),
        ("it's", "'it''s'"),
    ],
)
def test_to_literal(value, literal):
    assert to_literal(value) == literal


def test_to_literal_rejects_other_types():
    with pytest.raises(NamelistValueError):
        to_literal(None)  # type: ignore[arg-type]


@pytest.mark.parametrize("value", [0, -12, 0.1, 1.0, 6.02e23, -1e-300, True, False, "", "a 'b' \"c\""])
def test_literal_reads_back(value):
    result = to_native(to_literal(value))
    assert result == value
    assert type(result) is type(value)
