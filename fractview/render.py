"""Mapping screen pixels to the complex plane and rendering a frame."""

from __future__ import annotations

from fractview.colors import coloring
from fractview.config import HEIGHT, WIDTH, Settings
from fractview.fractals import escape_count
from fractview.numeric import interpolate


def pixel_to_complex(
    px: float,
    py: float,
    settings: Settings,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> tuple[float, float]:
    """Return the point of the complex plane shown at pixel (px, py)."""
    grid = 2.0 * settings.zoom
    real = interpolate(px, -grid, grid, width - 1) + settings.offset_x
    imag = interpolate(py, grid, -grid, height - 1) + settings.offset_y
    return real, imag


def render_fractal(
    settings: Settings, width: int = WIDTH, height: int = HEIGHT
) -> list[list[int]]:
    """Render one frame as rows of 0xRRGGBB colours, top row first."""
    frame: list[list[int]] = []
    for py in range(height):
        row = []
        for px in range(width):
            real, imag = pixel_to_complex(px, py, settings, width, height)
            row.append(coloring(escape_count(real, imag, settings), settings))
        frame.append(row)
    return frame