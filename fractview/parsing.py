"""Command-line parsing for the viewer and the usage message it prints."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from fractview.config import Settings
from fractview.fractals import Fractal
from fractview.numeric import count_digits, is_numeric_literal, parse_double

PARSE_ERROR = 2

_USAGE_LINES = (
    "Usage: fractview mandelbrot\n",
    "Usage: fractview julia <parameter> <parameter>\n",
    "Usage: fractview phoenix\n",
)

_INTERESTING_LIMIT = 2.0


def usage_text(message: str | None = None) -> str:
    """Return the optional message followed by the usage lines."""
    return (message or "") + "".join(_USAGE_LINES)


class UsageError(Exception):
    """Raised when the command line cannot start the viewer."""

    exit_code = PARSE_ERROR

    def __init__(self, message: str | None = None) -> None:
        super().__init__(usage_text(message))
        self.message = message


def parse_julia_values(
    first: str, second: str, stream: TextIO | None = None
) -> tuple[float, float]:
    """Validate and parse the two Julia constant arguments.

    Notes about the values are written to stream; invalid input raises UsageError.
    """
    out = sys.stdout if stream is None else stream
    x = parse_double(first)
    y = parse_double(second)
    if not first or not second:
        raise UsageError("Empty string\n")
    if count_digits(first) == 0 or count_digits(second) == 0:
        raise UsageError("Invalid string, didn't have any number\n")
    if not (is_numeric_literal(first) and is_numeric_literal(second)):
        raise UsageError("Invalid string, extra characters\n")
    if any(abs(value) >= _INTERESTING_LIMIT for value in (x, y)):
        out.write("Value won't produce an interesting set\n")
    out.write("Loading input values!\n")
    return x, y


def parse_arguments(argv: Sequence[str], stream: TextIO | None = None) -> Settings:
    """Build viewer settings from the arguments that follow the program name."""
    if not argv:
        raise UsageError()
    settings = Settings()
    name = argv[0]
    if name == Fractal.MANDELBROT.value:
        settings.name = Fractal.MANDELBROT.value
    elif name == Fractal.JULIA.value:
        settings.name = Fractal.JULIA.value
        if len(argv) < 3:
            raise UsageError("Missing input data for julia set\n")
        real, imag = parse_julia_values(argv[1], argv[2], stream)
        settings.julia[0] = real
        settings.julia[8] = imag
    elif name == Fractal.PHOENIX.value:
        settings.name = Fractal.PHOENIX.value
    else:
        raise UsageError()
    return settings