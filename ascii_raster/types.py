"""Common type aliases and enumerations.

``ColorMode`` selects how the intensity renderer turns a brightness value into
a fill color; ``CharClass`` names the flat-valued character classes that can be
assigned when overriding the brightness table.
"""

from enum import StrEnum, auto
from typing import Tuple


RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

Brightness = int

# ``grid[y][x]`` is True where the glyph has a lit dot.
GlyphGrid = Tuple[Tuple[bool, ...], ...]


class ColorMode(StrEnum):
    """Fill-color strategy of the intensity renderer."""

    GRAYSCALE = auto()
    COLOR = auto()
    MONOCHROME = auto()


class CharClass(StrEnum):
    """Flat-valued brightness classes usable as table overrides."""

    BLANK = auto()
    ALPHANUMERIC = auto()
    BOX = auto()
