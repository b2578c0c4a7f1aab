import pytest

from fractview.colors import coloring
from fractview.config import Settings
from fractview.fractals import escape_count
from fractview.render import pixel_to_complex, render_fractal


def test_corners_map_to_default_grid():
    settings = Settings()
    assert pixel_to_complex(0, 0, settings, 1000, 1000) == pytest.approx((-2.0, 2.0))
    assert pixel_to_complex(999, 999, settings, 1000, 1000) == pytest.approx((2.0, -2.0))


def test_offsets_shift_the_view():
    plain = Settings()
    moved = Settings(offset_x=0.5, offset_y=-0.25)
    base = pixel_to_complex(10, 20, plain, 100, 100)
    shifted = pixel_to_complex(10, 20, moved, 100, 100)
    assert shifted[0] - base[0] == pytest.approx(0.5)
    assert shifted[1] - base[1] == pytest.approx(-0.25)


def test_zoom_scales_the_grid():
    settings = Settings(zoom=0.5)
    assert pixel_to_complex(0, 0, settings, 50, 50) == pytest.approx((-1.0, 1.0))
    assert pixel_to_complex(49, 49, settings, 50, 50) == pytest.approx((1.0, -1.0))


def test_frame_shape():
    frame = render_fractal(Settings(), 4, 3)
    assert len(frame) == 3
    assert all(len(row) == 4 for row in frame)


def test_frame_pixels_match_escape_colouring():
    settings = Settings(name="mandelbrot")
    frame = render_fractal(settings, 3, 3)
    # The centre pixel is the origin, which never escapes.
    assert pixel_to_complex(1, 1, settings, 3, 3) == pytest.approx((0.0, 0.0))
    assert escape_count(0.0, 0.0, settings) == settings.max_iterations
    assert frame[1][1] == coloring(settings.max_iterations, settings)


def test_unknown_fractal_gives_uniform_frame():
    settings = Settings(name="unknown")
    frame = render_fractal(settings, 3, 2)
    colours = {pixel for row in frame for pixel in row}
    assert colours == {coloring(0, settings)}


def test_frame_is_symmetric_for_mandelbrot():
    settings = Settings(name="mandelbrot", max_iterations=32)
    frame = render_fractal(settings, 5, 5)
    assert frame[0] == frame[4]
    assert frame[1] == frame[3]