import colorsys
from functools import lru_cache
from typing import Callable, Dict

from ascii_raster.types import RGBA, Brightness, ColorMode


MONOCHROME_THRESHOLD = 128
GOLDEN_ANGLE = 137.508

# (char, intensity, foreground, background) -> fill color
ColorFn = Callable[[str, Brightness, RGBA, RGBA], RGBA]


def monochrome_color(
    char: str, intensity: Brightness, foreground: RGBA, background: RGBA
) -> RGBA:
    """Hard threshold: strictly above 128 is foreground."""
    return foreground if intensity > MONOCHROME_THRESHOLD else background


def grayscale_color(
    char: str, intensity: Brightness, foreground: RGBA, background: RGBA
) -> RGBA:
    gray = int(intensity)
    return (gray, gray, gray, 255)


def char_hue(char: str) -> float:
    """
    Hue in degrees; successive code points step by the golden angle so
    distinct characters land on well separated hues.
    """
    return (ord(char[0]) * GOLDEN_ANGLE) % 360


@lru_cache(maxsize=4096)
def hsl_to_rgba(hue: float, saturation: float, lightness: float) -> RGBA:
    """
    Convert CSS-style HSL (degrees, percent, percent) to an opaque RGBA tuple.
    """
    r, g, b = colorsys.hls_to_rgb(hue / 360.0, lightness / 100.0, saturation / 100.0)
    return (round(r * 255), round(g * 255), round(b * 255), 255)


def hue_color(
    char: str, intensity: Brightness, foreground: RGBA, background: RGBA
) -> RGBA:
    saturation = min(100.0, intensity / 2.55)
    lightness = intensity / 2.55
    return hsl_to_rgba(char_hue(char), saturation, lightness)


COLOR_FNS: Dict[ColorMode, ColorFn] = {
    ColorMode.MONOCHROME: monochrome_color,
    ColorMode.GRAYSCALE: grayscale_color,
    ColorMode.COLOR: hue_color,
}


def color_fn_for(mode: ColorMode) -> ColorFn:
    return COLOR_FNS[ColorMode(mode)]
