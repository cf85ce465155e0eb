import pytest

from ascii_raster.types import ColorMode
from ascii_raster.utils.color import (
    COLOR_FNS,
    char_hue,
    color_fn_for,
    grayscale_color,
    hsl_to_rgba,
    hue_color,
    monochrome_color,
)

FG = (255, 255, 255, 255)
BG = (0, 0, 0, 255)


def test_every_mode_has_a_color_function() -> None:
    assert set(COLOR_FNS) == set(ColorMode)
    assert color_fn_for("color") is hue_color  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "intensity, expected",
    [(0, BG), (128, BG), (129, FG), (255, FG)],
)
def test_monochrome_threshold_is_strict(intensity: int, expected: tuple) -> None:
    assert monochrome_color("x", intensity, FG, BG) == expected


def test_grayscale() -> None:
    assert grayscale_color("A", 180, FG, BG) == (180, 180, 180, 255)


def test_char_hue_uses_golden_angle() -> None:
    assert char_hue("A") == pytest.approx((65 * 137.508) % 360)
    assert char_hue("A") == pytest.approx(298.02)


def test_hsl_to_rgba() -> None:
    assert hsl_to_rgba(0, 100, 50) == (255, 0, 0, 255)
    assert hsl_to_rgba(120, 100, 50) == (0, 255, 0, 255)
    assert hsl_to_rgba(0, 0, 100) == (255, 255, 255, 255)


def test_hue_color_black_at_zero_intensity() -> None:
    assert hue_color(" ", 0, FG, BG) == (0, 0, 0, 255)


def test_hue_color_full_intensity_is_white() -> None:
    assert hue_color("@", 255, FG, BG) == (255, 255, 255, 255)


def test_hue_color_distinct_characters_get_distinct_colors() -> None:
    assert hue_color("A", 180, FG, BG) != hue_color("B", 180, FG, BG)
