"""ASCII art to raster image conversion.

Text drawings are mapped onto a fixed pixel grid in one of two ways:

* **Intensity** rendering looks up a brightness for every character and fills
  a solid square cell with a grayscale, monochrome or hue-rotated color.
* **Glyph** rendering draws every character from a fixed 5x7 bitmap font, dot
  by dot, leaving whitespace untouched.

Both take a block of text (ragged rows allowed) plus an immutable config and
return a :class:`RasterSurface` that the caller owns and may encode as PNG.

>>> from ascii_raster import render, RenderConfig
>>> surface = render("A B", RenderConfig())
>>> surface.size
(24, 8)
"""

from typing import Optional, Union

from ascii_raster.charmap import CharacterMap, brightness
from ascii_raster.config import FontMetrics, GlyphConfig, RenderConfig
from ascii_raster.errors import (
    ArtNotFoundError,
    AsciiRasterError,
    ConfigError,
    InputDecodeError,
)
from ascii_raster.extract import extract_from_markup, read_source
from ascii_raster.glyphs import GlyphTable, pattern
from ascii_raster.renderer import GlyphRenderer, IntensityRenderer
from ascii_raster.renderer import glyph as _glyph
from ascii_raster.renderer import intensity as _intensity
from ascii_raster.surface import RasterSurface
from ascii_raster.text_grid import TextGrid, TextInput
from ascii_raster.types import CharClass, ColorMode


def render(
    text: TextInput,
    config: Union[RenderConfig, GlyphConfig, None] = None,
    metrics: Optional[FontMetrics] = None,
) -> RasterSurface:
    """
    Render ``text`` with the renderer matching the config type:
    ``RenderConfig`` (or None) for intensity blocks, ``GlyphConfig`` for
    bitmap glyphs. ``metrics`` only applies to glyph rendering.
    """
    if isinstance(config, GlyphConfig):
        return _glyph.render(text, config, metrics=metrics)
    return _intensity.render(text, config or RenderConfig())


__all__ = [
    "ArtNotFoundError",
    "AsciiRasterError",
    "CharClass",
    "CharacterMap",
    "ColorMode",
    "ConfigError",
    "FontMetrics",
    "GlyphConfig",
    "GlyphRenderer",
    "GlyphTable",
    "InputDecodeError",
    "IntensityRenderer",
    "RasterSurface",
    "RenderConfig",
    "TextGrid",
    "brightness",
    "extract_from_markup",
    "pattern",
    "read_source",
    "render",
]
