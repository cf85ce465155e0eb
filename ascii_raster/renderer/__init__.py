"""Rendering subpackage.

Two rasterizers turn a :class:`~ascii_raster.text_grid.TextGrid` into a
:class:`~ascii_raster.surface.RasterSurface`:

* :mod:`ascii_raster.renderer.intensity` fills one solid block per character,
  colored from the character's brightness (grayscale, monochrome or hue).
* :mod:`ascii_raster.renderer.glyph` draws each character's 5x7 bitmap dot by
  dot for crisp pixel-art text.

Both are pure functions of (text, config): no randomness and no state shared
between calls, so the default lookup tables can be used from any thread.
"""

from typing import Protocol

from ascii_raster.surface import RasterSurface
from ascii_raster.text_grid import TextInput

from .glyph import GlyphRenderer
from .intensity import IntensityRenderer


class Renderer(Protocol):
    def render(self, text: TextInput) -> RasterSurface: ...


__all__ = ["GlyphRenderer", "IntensityRenderer", "Renderer"]
