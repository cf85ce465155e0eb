"""Exception hierarchy.

Unknown characters are never an error (see :mod:`ascii_raster.charmap` and
:mod:`ascii_raster.glyphs` for the fallback policies) and empty input is a
warning, so the only failures are missing art, undecodable input, bad configuration
and I/O (which surfaces as the builtin ``OSError``).
"""


class AsciiRasterError(Exception):
    """Base class for all errors raised by this package."""


class ArtNotFoundError(AsciiRasterError):
    """Markup source has no ``<pre>`` block to take the art from."""

    def __init__(self, message: str = "No ASCII art found in HTML file") -> None:
        super().__init__(message)


class InputDecodeError(AsciiRasterError):
    """Source file is not valid UTF-8 text."""


class ConfigError(AsciiRasterError, ValueError):
    """Invalid render configuration or table override."""
