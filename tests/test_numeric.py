import pytest

from fractview.numeric import count_digits, interpolate, is_numeric_literal, parse_double


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  -1.5", -1.5),
        ("+0.25", 0.25),
        ("12abc", 12.0),
        ("abc", 0.0),
        (".5", 0.5),
        ("\t\n3", 3.0),
        ("-0.795", -0.795),
    ],
)
def test_parse_double(text, expected):
    assert parse_double(text) == pytest.approx(expected)


def test_parse_double_stops_at_second_point():
    assert parse_double("1.2.3") == pytest.approx(parse_double("1.2"))


def test_parse_double_sign_symmetry():
    for text in ["0.156", "1", "42.125"]:
        assert parse_double("-" + text) == -parse_double(text)


def test_parse_double_empty_is_zero():
    assert parse_double("") == 0.0


def test_count_digits():
    assert count_digits("a1b2c3") == 3
    assert count_digits("") == 0
    assert count_digits("-.") == 0


@pytest.mark.parametrize(
    "text, expected",
    [
        ("-0.5", True),
        ("+12", True),
        ("3.", True),
        ("", True),
        ("+", True),
        ("1.2.3", False),
        ("1e5", False),
        ("--1", False),
        ("1-", False),
        (" 1", False),
    ],
)
def test_is_numeric_literal(text, expected):
    assert is_numeric_literal(text) is expected


def test_interpolate_endpoints():
    assert interpolate(0, -2.0, 2.0, 999) == -2.0
    assert interpolate(999, -2.0, 2.0, 999) == pytest.approx(2.0)


def test_interpolate_reversed_range():
    assert interpolate(0, 2.0, -2.0, 999) == 2.0
    assert interpolate(999, 2.0, -2.0, 999) == pytest.approx(-2.0)


def test_interpolate_is_monotonic():
    values = [interpolate(n, -1.0, 1.0, 10) for n in range(11)]
    assert values == sorted(values)
    assert len(set(values)) == 11