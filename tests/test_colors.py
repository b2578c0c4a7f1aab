import pytest

from fractview.colors import bernstein_polynomials, coloring, cosine_coloring
from fractview.config import Settings


def _settings(flag, max_iterations=256):
    return Settings(color_flag=flag, max_iterations=max_iterations)


@pytest.mark.parametrize("flag", [0, 1, 2, 3])
def test_colors_fit_in_32_bits(flag):
    settings = _settings(flag)
    for n in range(settings.max_iterations + 1):
        assert 0 <= coloring(n, settings) <= 0xFFFFFFFF


@pytest.mark.parametrize("flag", [0, 1])
def test_low_flags_use_bernstein(flag):
    settings = _settings(flag)
    for n in range(0, 257, 16):
        assert coloring(n, settings) == bernstein_polynomials(n, settings)


@pytest.mark.parametrize("flag", [2, 3])
def test_high_flags_use_cosine(flag):
    settings = _settings(flag)
    for n in range(1, 257, 16):
        assert coloring(n, settings) == cosine_coloring(n, settings)


@pytest.mark.parametrize("flag", [0, 1, 2, 3])
def test_palette_choice_wraps_every_four(flag):
    base = _settings(flag)
    shifted = _settings(flag + 4)
    for n in range(1, 257, 8):
        assert coloring(n, base) == coloring(n, shifted)


def test_negative_flag_wraps_like_a_byte():
    for n in range(1, 257, 8):
        assert coloring(n, _settings(-1)) == coloring(n, _settings(255))


def test_bernstein_inside_set_is_black():
    settings = _settings(1)
    assert bernstein_polynomials(settings.max_iterations, settings) == 0


def test_bernstein_palettes_share_green_channel():
    for n in range(0, 257, 4):
        first = bernstein_polynomials(n, _settings(0))
        second = bernstein_polynomials(n, _settings(1))
        if first < 0x1000000 and second < 0x1000000:
            assert (first >> 8) & 0xFF == (second >> 8) & 0xFF


def test_cosine_zero_count_does_not_fail():
    assert cosine_coloring(0, _settings(2)) == 0


def test_palettes_are_not_constant():
    for flag in range(4):
        settings = _settings(flag)
        colors = {coloring(n, settings) for n in range(1, 257)}
        assert len(colors) > 10