"""Render configuration value objects.

``RenderConfig`` drives the intensity renderer, ``GlyphConfig`` the glyph
renderer. Both are frozen dataclasses supplied at renderer construction and
never mutated mid-render; use :meth:`RenderConfig.replace` /
``dataclasses.replace`` to derive a variant.

``FontMetrics`` carries the optional external sizing hints used when a glyph
render has to line up with text laid out by something else (e.g. a ``<pre>``
element styled with a given font size and line height).
"""

import dataclasses
import math
import re
from dataclasses import dataclass
from typing import Any, Optional

from PIL import ImageColor

from ascii_raster.errors import ConfigError
from ascii_raster.types import RGBA, ColorMode


DEFAULT_PIXEL_SIZE = 8
DEFAULT_SCALE = 1.0
DEFAULT_BACKGROUND = "#000000"
DEFAULT_FOREGROUND = "#ffffff"

DEFAULT_GLYPH_PIXEL_SIZE = 2.5
DEFAULT_CHAR_WIDTH = 5
DEFAULT_CHAR_HEIGHT = 7
DEFAULT_LINE_COLOR = "#ff0000"
TRANSPARENT = "transparent"

DEFAULT_FONT_SIZE = 16.0
LINE_HEIGHT_RATIO = 1.2
# Typical advance width of a monospace face relative to its font size.
MONOSPACE_ADVANCE_RATIO = 0.6

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_color(value: str) -> RGBA:
    """
    Parse a CSS-style color string into an RGBA tuple.

    Accepts everything ``PIL.ImageColor`` understands (``#rgb``, ``#rrggbb``,
    ``rgb()``, ``hsl()``, named colors) plus ``"transparent"``.
    """
    if value.strip().lower() == TRANSPARENT:
        return (0, 0, 0, 0)
    try:
        rgb = ImageColor.getrgb(value)
    except ValueError as exc:
        raise ConfigError(f"Invalid color: {value!r}") from exc
    if len(rgb) == 4:
        return (rgb[0], rgb[1], rgb[2], rgb[3])
    return (rgb[0], rgb[1], rgb[2], 255)


def parse_css_length(value: Any) -> Optional[float]:
    """
    Read the leading number of a CSS length (``"16px"`` -> 16.0).

    Mirrors ``parseFloat``: returns None when the string does not start with
    a number (``"normal"``, ``""``). Numbers pass through unchanged.
    """
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    match = _LEADING_NUMBER.match(str(value))
    if match is None:
        return None
    return float(match.group(1))


def _check_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{name} must be a positive finite number, got {value!r}")


@dataclass(frozen=True)
class RenderConfig:
    """Intensity renderer settings.

    Attributes:
        pixel_size: Edge length in pixels of one character block before scaling.
        scale: Overall scale multiplier applied to ``pixel_size``.
        mode: Fill-color strategy (grayscale, color or monochrome).
        background: Canvas background, and the "off" color in monochrome mode.
        foreground: The "on" color in monochrome mode.
    """

    pixel_size: int = DEFAULT_PIXEL_SIZE
    scale: float = DEFAULT_SCALE
    mode: ColorMode = ColorMode.GRAYSCALE
    background: str = DEFAULT_BACKGROUND
    foreground: str = DEFAULT_FOREGROUND

    def __post_init__(self) -> None:
        _check_positive("pixel_size", self.pixel_size)
        _check_positive("scale", self.scale)
        try:
            mode = ColorMode(self.mode)
        except ValueError as exc:
            choices = ", ".join(m.value for m in ColorMode)
            raise ConfigError(
                f"Unknown color mode {self.mode!r} (expected one of: {choices})"
            ) from exc
        # frozen: bypass __setattr__ to store the coerced enum
        object.__setattr__(self, "mode", mode)
        parse_color(self.background)
        parse_color(self.foreground)

    @property
    def cell_size(self) -> float:
        return self.pixel_size * self.scale

    @property
    def background_rgba(self) -> RGBA:
        return parse_color(self.background)

    @property
    def foreground_rgba(self) -> RGBA:
        return parse_color(self.foreground)

    def replace(self, **changes: Any) -> "RenderConfig":
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class GlyphConfig:
    """Glyph renderer settings.

    Attributes:
        pixel_size: Edge length of one glyph dot before scaling.
        scale: Overall scale multiplier applied to ``pixel_size``.
        char_width: Glyph grid width in dots.
        char_height: Glyph grid height in dots.
        line_color: Color of every lit dot.
        background: Canvas background; transparent by default for overlays.
    """

    pixel_size: float = DEFAULT_GLYPH_PIXEL_SIZE
    scale: float = DEFAULT_SCALE
    char_width: int = DEFAULT_CHAR_WIDTH
    char_height: int = DEFAULT_CHAR_HEIGHT
    line_color: str = DEFAULT_LINE_COLOR
    background: str = TRANSPARENT

    def __post_init__(self) -> None:
        _check_positive("pixel_size", self.pixel_size)
        _check_positive("scale", self.scale)
        _check_positive("char_width", self.char_width)
        _check_positive("char_height", self.char_height)
        parse_color(self.line_color)
        parse_color(self.background)

    @property
    def dot_size(self) -> float:
        return self.pixel_size * self.scale

    @property
    def cell_width(self) -> float:
        return self.char_width * self.dot_size

    @property
    def cell_height(self) -> float:
        return self.char_height * self.dot_size

    @property
    def line_rgba(self) -> RGBA:
        return parse_color(self.line_color)

    @property
    def background_rgba(self) -> RGBA:
        return parse_color(self.background)


@dataclass(frozen=True)
class FontMetrics:
    """Font sizing of a reference text element, in pixels."""

    font_size: float = DEFAULT_FONT_SIZE
    line_height: Optional[float] = None

    def __post_init__(self) -> None:
        _check_positive("font_size", self.font_size)
        if self.line_height is not None:
            _check_positive("line_height", self.line_height)

    @classmethod
    def from_css(cls, font_size: Any, line_height: Any = None) -> "FontMetrics":
        """Build metrics from computed-style strings such as ``"14px"``."""
        size = parse_css_length(font_size) or DEFAULT_FONT_SIZE
        return cls(font_size=size, line_height=parse_css_length(line_height) or None)

    @property
    def cell_width(self) -> float:
        return self.font_size * MONOSPACE_ADVANCE_RATIO

    @property
    def resolved_line_height(self) -> float:
        if self.line_height is not None:
            return self.line_height
        return self.font_size * LINE_HEIGHT_RATIO
