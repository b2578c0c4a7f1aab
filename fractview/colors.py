"""Palettes that turn an escape count into a 0xAARRGGBB pixel value."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from fractview.config import TWO_PI
from fractview.numeric import interpolate

if TYPE_CHECKING:
    from fractview.config import Settings

_MASK = 0xFFFFFFFF
_PALETTES = 4


def _pack(red: float, green: float, blue: float) -> int:
    """Truncate each channel and pack them as a 32-bit word."""
    value = (int(red) << 16) | (int(green) << 8) | int(blue)
    return value & _MASK


def coloring(iterations: float, settings: Settings) -> int:
    """Colour an escape count with the palette chosen by settings.color_flag."""
    if settings.color_flag % _PALETTES < 2:
        return bernstein_polynomials(iterations, settings)
    return cosine_coloring(iterations, settings)


def bernstein_polynomials(iterations: float, settings: Settings) -> int:
    """Colour with Bernstein-polynomial channel curves."""
    t = interpolate(iterations, 0.01, 1, settings.max_iterations)
    u = 1 - t
    if settings.color_flag % _PALETTES == 0:
        return _pack(
            9 * u * t * t * t * 255,
            15 * u * u * t * t * 255,
            8.5 * u * (0.75 - t) * u * t * 200,
        )
    return _pack(
        9 * u * u * u * t * 255,
        15 * u * u * t * t * 255,
        8.5 * u * t * t * t * 255,
    )


def cosine_coloring(iterations: float, settings: Settings) -> int:
    """Colour with cosine channel curves."""
    t = iterations / settings.max_iterations
    if settings.color_flag % _PALETTES == 2:
        if t <= 0:
            # The smoothed count is infinite here; every channel collapses to black.
            return 0
        smoothed = iterations - math.log(t) / math.log(2)
        wave = 1 + math.cos(TWO_PI * math.log(smoothed) / 13)
        return _pack(256 * wave / 2, 175 * wave / 2, 120 * wave / 2)
    return _pack(
        100 * (1 + math.cos(TWO_PI * (0.90 * t + 0.65))),
        10 * (1 + math.cos(TWO_PI * (0.4 * t + 0.5))),
        70 * (1 - math.cos(TWO_PI * (0.65 * t + 0.5))),
    )