"""Interactive window: input handling and the main entry point."""

from __future__ import annotations

import os
import sys
from enum import IntEnum
from typing import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from fractview.config import HEIGHT, WIDTH, Settings  # noqa: E402
from fractview.fractals import Fractal  # noqa: E402
from fractview.numeric import interpolate  # noqa: E402
from fractview.parsing import UsageError, parse_arguments  # noqa: E402
from fractview.render import render_fractal  # noqa: E402

WINDOW_ERROR = 1
_BYTE = 0xFF
_ZOOM_IN = 0.9
_ZOOM_OUT = 1.1
_ZOOM_SHIFT = 0.11
_TITLE = "Fract-ol"
_LABEL_COLOUR = (255, 255, 255)


class MouseButton(IntEnum):
    """Mouse button numbers as reported by the window system."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5


class Viewer:
    """Holds the view settings and reacts to keyboard and mouse input."""

    def __init__(
        self, settings: Settings, width: int = WIDTH, height: int = HEIGHT
    ) -> None:
        self.settings = settings
        self.width = width
        self.height = height
        self.running = True
        self.dirty = True

    def handle_key(self, key: int) -> None:
        """Apply a key press: pan, palette, version, fractal choice or quit."""
        s = self.settings
        step = s.zoom / 4
        if key == pygame.K_ESCAPE:
            self.running = False
            return
        if key == pygame.K_UP:
            s.offset_y += step
        elif key == pygame.K_DOWN:
            s.offset_y -= step
        elif key == pygame.K_LEFT:
            s.offset_x -= step
        elif key == pygame.K_RIGHT:
            s.offset_x += step
        elif key == pygame.K_d:
            s.color_flag = (s.color_flag + 1) & _BYTE
        elif key == pygame.K_a:
            s.color_flag = (s.color_flag - 1) & _BYTE
        elif key == pygame.K_w:
            s.version = (s.version + 1) & _BYTE
        elif key == pygame.K_s:
            s.version = (s.version - 1) & _BYTE
        elif key == pygame.K_j:
            s.name = Fractal.JULIA.value
        elif key == pygame.K_m:
            s.name = Fractal.MANDELBROT.value
        elif key == pygame.K_p:
            s.name = Fractal.PHOENIX.value
        else:
            return
        self.dirty = True

    def handle_mouse(self, button: int, x: int, y: int) -> None:
        """Apply a mouse button: zoom, reset zoom or change the iteration budget."""
        s = self.settings
        if button == MouseButton.WHEEL_UP:
            self.zoom_in(x, y)
        elif button == MouseButton.WHEEL_DOWN:
            s.zoom *= _ZOOM_OUT
        elif button == MouseButton.RIGHT:
            s.decrease_resolution()
        elif button == MouseButton.LEFT:
            s.increase_resolution()
        elif button == MouseButton.MIDDLE:
            s.zoom = 1.0
        else:
            return
        self.dirty = True

    def zoom_in(self, x: int, y: int) -> None:
        """Zoom in, drifting the view towards the pointer at (x, y)."""
        s = self.settings
        grid = 2 * s.zoom
        a = interpolate(x, -grid, grid, self.width - 1)
        b = interpolate(y, grid, -grid, self.height - 1)
        s.zoom *= _ZOOM_IN
        s.offset_x += a * _ZOOM_SHIFT
        s.offset_y += b * _ZOOM_SHIFT
        self.dirty = True


def _frame_bytes(frame: list[list[int]]) -> bytes:
    data = bytearray()
    for row in frame:
        for colour in row:
            data += bytes(((colour >> 16) & _BYTE, (colour >> 8) & _BYTE, colour & _BYTE))
    return bytes(data)


def _draw(screen: pygame.Surface, font: pygame.font.Font, viewer: Viewer) -> None:
    frame = render_fractal(viewer.settings, viewer.width, viewer.height)
    image = pygame.image.frombuffer(
        _frame_bytes(frame), (viewer.width, viewer.height), "RGB"
    )
    screen.blit(image, (0, 0))
    label = font.render(viewer.settings.name, True, _LABEL_COLOUR)
    screen.blit(label, (viewer.width // 2 - 30, 20))
    pygame.display.flip()


def _run_window(viewer: Viewer) -> int:
    try:
        pygame.init()
        screen = pygame.display.set_mode((viewer.width, viewer.height))
    except pygame.error:
        pygame.quit()
        return WINDOW_ERROR
    try:
        pygame.display.set_caption(_TITLE)
        font = pygame.font.Font(None, 24)
        clock = pygame.time.Clock()
        while viewer.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    viewer.running = False
                elif event.type == pygame.KEYDOWN:
                    viewer.handle_key(event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    viewer.handle_mouse(event.button, *event.pos)
            if viewer.running and viewer.dirty:
                _draw(screen, font, viewer)
                viewer.dirty = False
            clock.tick(30)
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and run the viewer; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_arguments(args, sys.stdout)
    except UsageError as err:
        sys.stdout.write(str(err))
        return err.exit_code
    return _run_window(Viewer(settings))


if __name__ == "__main__":
    sys.exit(main())