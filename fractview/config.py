"""Viewer settings: view window, palette, iteration budget and fractal parameters."""

from __future__ import annotations

from dataclasses import dataclass, field

WIDTH = 1000
HEIGHT = 1000
TWO_PI = 6.28318530

RESOLUTIONS: tuple[int, ...] = (1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024)
DEFAULT_RESOLUTION_INDEX = 8

# Julia constants: real parts in the first eight slots, imaginary parts in the next eight.
DEFAULT_JULIA: tuple[float, ...] = (
    -0.795, 0.355, -1.476, 0.355534, -1.188, 0.29605, 0.044211, -0.7475087485,
    0.156, 0.355, 0.0035, -0.337292, 0.305, 0.01885, 0.678, 0.0830715266,
)

# Phoenix constants: eight real parts, eight imaginary parts, eight feedback factors.
DEFAULT_PHOENIX: tuple[float, ...] = (
    0.5667, 0.0, 0.4, 0.4, 0.1, -0.4, 0.55, 0.1,
    0.0, 0.5, 0.4, 0.0, 0.1, 0.1, -0.1, 0.6,
    -0.5, -0.35, 0.205, -0.25, 0.855, 0.2955, -0.53, -0.35,
)

VARIANTS = 8


@dataclass
class Settings:
    """Mutable state shared by the renderer and the input handlers."""

    name: str = "mandelbrot"
    offset_x: float = 0.0
    offset_y: float = 0.0
    zoom: float = 1.0
    color_flag: int = 1
    version: int = 0
    res_flag: int = DEFAULT_RESOLUTION_INDEX
    max_iterations: int = RESOLUTIONS[DEFAULT_RESOLUTION_INDEX]
    julia: list[float] = field(default_factory=lambda: list(DEFAULT_JULIA))
    phoenix: list[float] = field(default_factory=lambda: list(DEFAULT_PHOENIX))
    mandelbrot_start: tuple[float, float] = (0.0, 0.0)

    def julia_constant(self) -> tuple[float, float]:
        """Return the Julia constant selected by the current version."""
        index = self.version % VARIANTS
        return self.julia[index], self.julia[index + VARIANTS]

    def phoenix_constants(self) -> tuple[float, float, float]:
        """Return (real, imaginary, feedback) for the current phoenix version."""
        index = self.version % VARIANTS
        return (
            self.phoenix[index],
            self.phoenix[index + VARIANTS],
            self.phoenix[index + 2 * VARIANTS],
        )

    def increase_resolution(self) -> None:
        """Step up to the next iteration budget, if there is one."""
        if self.res_flag < len(RESOLUTIONS) - 1:
            self.res_flag += 1
            self.max_iterations = RESOLUTIONS[self.res_flag]

    def decrease_resolution(self) -> None:
        """Step down to the previous iteration budget, if there is one."""
        if self.res_flag > 0:
            self.res_flag -= 1
            self.max_iterations = RESOLUTIONS[self.res_flag]