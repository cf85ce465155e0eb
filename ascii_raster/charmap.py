"""Character-to-brightness lookup for the intensity renderer.

The table is curated data, assembled in layers where later layers win:

1. whitespace -> 0
2. ``LIGHT_CHARS``: dense glyphs, ``255 - 10 * index`` in list order
3. upper-case letters and digits -> 180
4. box-drawing glyphs -> 200
5. ``CURATED_BRIGHTNESS``: individually tuned punctuation and letters

Several light characters (``# * + = ~``) are re-tuned by the last layer; the
layering is kept as-is rather than re-derived.

Any character outside the table resolves to ``min(255, ord(char) % 256)``.
"""

from typing import Dict, Mapping, Optional, Union

from pyrsistent import PMap, pmap

from ascii_raster.errors import ConfigError
from ascii_raster.types import Brightness, CharClass


MAX_BRIGHTNESS = 255
# Returned for lookups that are not a single character.
DEFAULT_BRIGHTNESS = 128

WHITESPACE_CHARS = (" ", "\t", "\n", "\r")

LIGHT_CHARS = ("@", "#", "$", "%", "&", "*", "+", "=", "~", "█", "▓", "▒", "░")
LIGHT_STEP = 10

ALPHANUMERIC_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

BOX_DRAWING_CHARS = "─│┌┐└┘├┤┬┴┼═║╔╗╚╝╠╣╦╩╬"

CHAR_CLASS_BRIGHTNESS: Mapping[CharClass, Brightness] = pmap(
    {
        CharClass.BLANK: 0,
        CharClass.ALPHANUMERIC: 180,
        CharClass.BOX: 200,
    }
)

CURATED_BRIGHTNESS: Mapping[str, Brightness] = pmap(
    {
        "_": 150,
        "|": 200,
        "-": 150,
        "=": 200,
        "\\": 180,
        "/": 180,
        ".": 100,
        ",": 80,
        ":": 120,
        ";": 100,
        "'": 90,
        '"': 100,
        "`": 70,
        "^": 140,
        "~": 130,
        "*": 220,
        "+": 160,
        "o": 140,
        "O": 180,
        "x": 150,
        "X": 190,
        "#": 240,
        "@": 255,
    }
)

Override = Union[Brightness, CharClass]


def fallback_brightness(char: str) -> Brightness:
    """Brightness of a character absent from the table."""
    if len(char) != 1:
        return DEFAULT_BRIGHTNESS
    return min(MAX_BRIGHTNESS, ord(char) % 256)


def _resolve_override(char: str, value: Override) -> Brightness:
    if len(char) != 1:
        raise ConfigError(f"Override key must be a single character, got {char!r}")
    if isinstance(value, CharClass):
        return CHAR_CLASS_BRIGHTNESS[value]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"Brightness for {char!r} must be an int, got {value!r}")
    if not 0 <= value <= MAX_BRIGHTNESS:
        raise ConfigError(f"Brightness for {char!r} out of range 0-255: {value}")
    return value


def build_brightness_table(
    overrides: Optional[Mapping[str, Override]] = None,
) -> PMap:
    table: Dict[str, Brightness] = {}
    for char in WHITESPACE_CHARS:
        table[char] = CHAR_CLASS_BRIGHTNESS[CharClass.BLANK]
    for i, char in enumerate(LIGHT_CHARS):
        table[char] = MAX_BRIGHTNESS - i * LIGHT_STEP
    for char in ALPHANUMERIC_CHARS:
        table[char] = CHAR_CLASS_BRIGHTNESS[CharClass.ALPHANUMERIC]
    for char in BOX_DRAWING_CHARS:
        table[char] = CHAR_CLASS_BRIGHTNESS[CharClass.BOX]
    table.update(CURATED_BRIGHTNESS)
    for char, value in (overrides or {}).items():
        table[char] = _resolve_override(char, value)
    return pmap(table)


class CharacterMap:
    """Immutable, total ``char -> brightness`` function."""

    def __init__(self, overrides: Optional[Mapping[str, Override]] = None):
        self._table: PMap = build_brightness_table(overrides)

    def brightness(self, char: str) -> Brightness:
        value = self._table.get(char)
        if value is None:
            return fallback_brightness(char)
        return value

    __call__ = brightness

    def __contains__(self, char: object) -> bool:
        return char in self._table

    def __len__(self) -> int:
        return len(self._table)

    @property
    def table(self) -> PMap:
        return self._table


DEFAULT_CHARACTER_MAP = CharacterMap()


def brightness(char: str) -> Brightness:
    """Brightness of ``char`` under the default table."""
    return DEFAULT_CHARACTER_MAP.brightness(char)
