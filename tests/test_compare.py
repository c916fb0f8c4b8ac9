import math
from typing import Optional

import pytest

from bae_tools.addressbook.tag import Tag
from bae_tools.compare import compare, try_parse_number
from bae_tools.enums import Operator


@pytest.mark.parametrize(
    "given,expected",
    [
        ("5", 5.0),
        ("-2.5", -2.5),
        (" 7 ", 7.0),
        ("1e3", 1000.0),
        ("high", None),
        ("", None),
        (None, None),
        ("5 apples", None),
        ("1_000", None),
        ("1_0.5", None),
        ("inf", float("inf")),
    ],
)
def test_try_parse_number(given: Optional[str], expected: Optional[float]) -> None:
    assert try_parse_number(given) == expected


def test_compare_strings() -> None:
    tag = Tag("priority", "high")

    assert compare("=", tag, "high")
    assert not compare("=", tag, "low")
    assert compare("!=", tag, "low")
    assert not compare("!=", tag, "high")

    # Ordering falls back to equality for text
    assert compare(">=", tag, "high")
    assert compare("<=", tag, "high")
    assert not compare(">=", tag, "low")
    assert not compare("<=", tag, "low")
    assert not compare(">", tag, "high")
    assert not compare("<", tag, "high")


def test_compare_numbers() -> None:
    tag = Tag("priority", "5")

    assert compare(">", tag, "4")
    assert not compare(">", tag, "6")
    assert compare("<", tag, "6")
    assert not compare("<", tag, "4")
    assert compare(">=", tag, "5")
    assert not compare(">=", tag, "6")
    assert compare("<=", tag, "5")
    assert not compare("<=", tag, "4")

    # Numeric equality ignores formatting
    assert compare("=", tag, "5.0")
    assert not compare("!=", tag, "5.0")


@pytest.mark.parametrize(
    "a,b",
    [
        ("1", "2"),
        ("2", "1"),
        ("3", "3"),
        ("-1.5", "0"),
        ("10", "9"),
        ("0.1", "1e-1"),
    ],
)
def test_compare_matches_float_semantics(a: str, b: str) -> None:
    tag = Tag("score", a)
    x, y = float(a), float(b)
    assert compare(">", tag, b) == (x > y)
    assert compare("<", tag, b) == (x < y)
    assert compare(">=", tag, b) == (x >= y)
    assert compare("<=", tag, b) == (x <= y)
    assert compare("=", tag, b) == (x == y)
    assert compare("!=", tag, b) == (x != y)


def test_compare_mixed_falls_back_to_text() -> None:
    # "10" vs "ten": only one side is a number
    tag = Tag("score", "10")
    assert not compare("=", tag, "ten")
    assert compare("!=", tag, "ten")
    assert not compare(">", tag, "ten")


def test_compare_digit_separators_are_text() -> None:
    tag = Tag("x", "1_000")
    assert not compare("=", tag, "1000")
    assert compare("=", tag, "1_000")
    assert not compare(">", tag, "1")


def test_compare_nan() -> None:
    tag = Tag("score", "nan")
    assert math.isnan(try_parse_number("nan"))
    assert not compare("=", tag, "1")
    assert not compare(">", tag, "1")
    assert not compare("<", tag, "1")


def test_compare_presence_only_tag() -> None:
    tag = Tag("friends")
    assert not compare("=", tag, "1")
    assert compare("!=", tag, "1")
    assert not compare(">=", tag, "1")


def test_compare_operator_enum() -> None:
    assert compare(Operator.GE, Tag("friend", "2"), "1")
    assert not compare(Operator.LT, Tag("friend", "2"), "1")


@pytest.mark.parametrize("operator", ["==", "=>", "~", ""])
def test_compare_unknown_operator(operator: str) -> None:
    assert not compare(operator, Tag("friend", "1"), "1")
