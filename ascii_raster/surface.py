"""Raster surface: an RGBA pixel buffer owned by whoever holds it.

Renderers create one surface per conversion, write it top-to-bottom and
left-to-right through :meth:`RasterSurface.fill_rect`, and hand it back; they
keep no reference afterwards. The buffer is a ``height x width x 4`` uint8
NumPy array and converts to a Pillow image for encoding.
"""

import math
from pathlib import Path
from typing import Callable, Tuple, Union

import numpy as np
import numpy.typing as npt
from PIL import Image

from ascii_raster.types import RGBA


UInt8Array = npt.NDArray[np.uint8]

SurfaceFactory = Callable[[int, int, RGBA], "RasterSurface"]


def snap(value: float) -> int:
    """Round a fractional pixel edge half-up to an integer edge."""
    return int(math.floor(value + 0.5))


def surface_extent(value: float) -> int:
    """Integer surface dimension covering a fractional extent."""
    return max(0, int(math.ceil(value - 1e-9)))


class RasterSurface:
    """RGBA canvas of ``width x height`` pixels, pre-filled with ``background``."""

    def __init__(self, width: int, height: int, background: RGBA = (0, 0, 0, 0)):
        if width < 0 or height < 0:
            raise ValueError(f"Surface size must be non-negative, got {width}x{height}")
        self.background = background
        self.pixels: UInt8Array = np.empty((height, width, 4), dtype=np.uint8)
        self.pixels[...] = background

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def fill_rect(self, x: float, y: float, w: float, h: float, color: RGBA) -> None:
        """
        Fill the rectangle with top-left ``(x, y)`` and size ``w x h``.

        Edges are snapped independently, so two rectangles sharing a
        fractional edge meet without a gap or an overlap. Anything outside the
        surface is clipped.
        """
        x0 = min(max(snap(x), 0), self.width)
        y0 = min(max(snap(y), 0), self.height)
        x1 = min(max(snap(x + w), 0), self.width)
        y1 = min(max(snap(y + h), 0), self.height)
        if x1 > x0 and y1 > y0:
            self.pixels[y0:y1, x0:x1] = color

    def pixel(self, x: int, y: int) -> RGBA:
        r, g, b, a = (int(v) for v in self.pixels[y, x])
        return (r, g, b, a)

    def to_image(self) -> Image.Image:
        if self.is_empty:
            return Image.new("RGBA", self.size, self.background)
        return Image.fromarray(self.pixels.copy())

    def save(self, path: Union[str, Path]) -> None:
        """Encode as PNG at ``path``; raises ``OSError`` on write failure."""
        self.to_image().save(path, format="PNG")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RasterSurface):
            return NotImplemented
        return bool(np.array_equal(self.pixels, other.pixels))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RasterSurface(width={self.width}, height={self.height})"


def new_surface(width: int, height: int, background: RGBA) -> RasterSurface:
    return RasterSurface(width, height, background)
