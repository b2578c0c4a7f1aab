"""Number parsing, argument checks and linear interpolation."""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def parse_double(text: str) -> float:
    """Parse a leading decimal number, ignoring anything after it.

    Leading whitespace and one sign are accepted; text without digits gives 0.0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1.0
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1.0
        pos += 1
    num = 0.0
    while pos < length and _is_digit(text[pos]):
        num = num * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    if pos < length and text[pos] == ".":
        pos += 1
    power = 1.0
    while pos < length and _is_digit(text[pos]):
        power /= 10
        num = num + (ord(text[pos]) - ord("0")) * power
        pos += 1
    return num * sign


def count_digits(text: str) -> int:
    """Return how many ASCII digits the text holds."""
    return sum(1 for ch in text if _is_digit(ch))


def is_numeric_literal(text: str) -> bool:
    """Tell whether text is an optional sign, then digits with at most one point."""
    body = text[1:] if text[:1] in ("+", "-") else text
    points = body.count(".")
    others = sum(1 for ch in body if ch != "." and not _is_digit(ch))
    return points <= 1 and others == 0


def interpolate(num: float, new_min: float, new_max: float, old_max: float) -> float:
    """Map num from the range [0, old_max] onto [new_min, new_max]."""
    return (new_max - new_min) * num / old_max + new_min