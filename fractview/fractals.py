"""Escape-time iteration for the supported fractals."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from fractview.config import Settings

_BAILOUT = 4.0


class Fractal(str, Enum):
    """The fractals the viewer can draw."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"
    PHOENIX = "phoenix"


def mandelbrot(x: float, y: float, settings: Settings) -> int:
    """Count iterations of z = z^2 + c for c = x + iy before escape."""
    zr, zi = settings.mandelbrot_start
    zr2 = zi2 = 0.0
    count = 0
    while count < settings.max_iterations and zr2 + zi2 < _BAILOUT:
        real = zr2 - zi2 + x
        zi = 2 * zr * zi + y
        zr = real
        zr2 = zr * zr
        zi2 = zi * zi
        count += 1
    return count


def julia(x: float, y: float, settings: Settings) -> int:
    """Count iterations of z = z^2 + k starting at z = x + iy before escape."""
    cr, ci = settings.julia_constant()
    zr, zi = x, y
    zr2 = zr * zr
    zi2 = zi * zi
    count = 0
    while count < settings.max_iterations and zr2 + zi2 < _BAILOUT:
        real = zr2 - zi2 + cr
        zi = 2 * zr * zi + ci
        zr = real
        zr2 = zr * zr
        zi2 = zi * zi
        count += 1
    return count


def phoenix(x: float, y: float, settings: Settings) -> int:
    """Count iterations of the phoenix map z' = z^2 + c + p*z_prev before escape."""
    cr, ci, p = settings.phoenix_constants()
    zr, zi = x, y
    old_r, old_i = cr, ci
    count = 0
    while count < settings.max_iterations and zr * zr + zi * zi < _BAILOUT:
        prev_r, prev_i = zr, zi
        zr = zr * zr - zi * zi + cr + p * old_r
        zi = 2 * prev_r * prev_i + ci + p * old_i
        old_r, old_i = prev_r, prev_i
        count += 1
    return count


_ITERATORS: dict[Fractal, Callable[[float, float, "Settings"], int]] = {
    Fractal.MANDELBROT: mandelbrot,
    Fractal.JULIA: julia,
    Fractal.PHOENIX: phoenix,
}


def escape_count(x: float, y: float, settings: Settings) -> int:
    """Run the fractal named in settings; an unknown name yields 0."""
    try:
        kind = Fractal(settings.name)
    except ValueError:
        return 0
    return _ITERATORS[kind](x, y, settings)