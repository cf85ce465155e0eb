"""Bitmap glyph table for the glyph renderer.

Glyphs are authored in a compact row notation: one string per glyph row, where
``#`` (or ``X`` / ``*``) marks a lit dot and anything else is off::

    ".##.."
    "#..#."

:func:`compile_pattern` turns that into a fixed ``height x width`` tuple of
booleans, clipping long rows and padding short or missing ones with unlit
dots, so every compiled glyph has identical dimensions.

Characters without a pattern (including whitespace) map to an all-unlit grid.
"""

from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from pyrsistent import PMap, pmap

from ascii_raster.config import DEFAULT_CHAR_HEIGHT, DEFAULT_CHAR_WIDTH
from ascii_raster.errors import ConfigError
from ascii_raster.types import GlyphGrid


MARKERS = frozenset("#X*")

PatternSource = Union[str, Sequence[str]]

GLYPH_PATTERNS: Mapping[str, Sequence[str]] = pmap(
    {
        # Letters
        "A": (".##..", "#..#.", "#..#.", "####.", "#..#.", "#..#.", "#..#."),
        "B": ("###..", "#..#.", "#..#.", "###..", "#..#.", "#..#.", "###.."),
        "C": (".##..", "#..#.", "#....", "#....", "#....", "#..#.", ".##.."),
        "D": ("###..", "#..#.", "#..#.", "#..#.", "#..#.", "#..#.", "###.."),
        "E": ("####.", "#....", "#....", "###..", "#....", "#....", "####."),
        "F": ("####.", "#....", "#....", "###..", "#....", "#....", "#...."),
        "G": (".##..", "#..#.", "#....", "#.##.", "#..#.", "#..#.", ".##.."),
        "H": ("#..#.", "#..#.", "#..#.", "####.", "#..#.", "#..#.", "#..#."),
        "I": ("###..", "..#..", "..#..", "..#..", "..#..", "..#..", "###.."),
        "J": ("..##.", "...#.", "...#.", "...#.", "...#.", "#..#.", ".##.."),
        "K": ("#..#.", "#.#..", "##...", "#....", "##...", "#.#..", "#..#."),
        "L": ("#....", "#....", "#....", "#....", "#....", "#....", "####."),
        "M": ("#..#.", "##.##", "#.#.#", "#...#", "#...#", "#...#", "#...#"),
        "N": ("#..#.", "##..#", "#.#..", "#..#.", "#..#.", "#..#.", "#..#."),
        "P": ("###..", "#..#.", "#..#.", "###..", "#....", "#....", "#...."),
        "Q": (".##..", "#..#.", "#..#.", "#..#.", "#.#..", "#..#.", ".##.#"),
        "R": ("###..", "#..#.", "#..#.", "###..", "#.#..", "#..#.", "#..#."),
        "S": (".##..", "#..#.", "#....", ".##..", "..#..", "#..#.", ".##.."),
        "T": ("###..", "..#..", "..#..", "..#..", "..#..", "..#..", "..#.."),
        "U": ("#..#.", "#..#.", "#..#.", "#..#.", "#..#.", "#..#.", ".##.."),
        "V": ("#..#.", "#..#.", "#..#.", "#..#.", "#..#.", ".##..", "..#.."),
        "W": ("#...#", "#...#", "#...#", "#.#.#", "##.##", "#..#.", "#..#."),
        "Y": ("#..#.", "#..#.", "#..#.", ".##..", "..#..", "..#..", "..#.."),
        "Z": ("####.", "...#.", "..#..", ".#...", "#....", "#....", "####."),
        # Digits
        "0": (".##..", "#..#.", "#.##.", "#.##.", "##.#.", "#..#.", ".##.."),
        "1": ("..#..", ".##..", "..#..", "..#..", "..#..", "..#..", "###.."),
        "2": (".##..", "#..#.", "...#.", "..#..", ".#...", "#....", "####."),
        "3": (".##..", "#..#.", "...#.", ".##..", "...#.", "#..#.", ".##.."),
        "4": ("...#.", "..#.#", ".#..#", "#...#", "####.", "....#", "....#"),
        "5": ("####.", "#....", "#....", "###..", "...#.", "...#.", "###.."),
        "6": (".##..", "#....", "#....", "###..", "#..#.", "#..#.", ".##.."),
        "7": ("####.", "...#.", "...#.", "..#..", ".#...", "#....", "#...."),
        "8": (".##..", "#..#.", "#..#.", ".##..", "#..#.", "#..#.", ".##.."),
        "9": (".##..", "#..#.", "#..#.", ".###.", "...#.", "..#..", ".##.."),
        # Punctuation
        ".": (".....", ".....", ".....", ".....", ".....", ".....", "..#.."),
        ",": (".....", ".....", ".....", ".....", ".....", "..#..", ".#..."),
        ":": (".....", ".....", "..#..", ".....", ".....", "..#..", "....."),
        ";": (".....", ".....", "..#..", ".....", ".....", "..#..", ".#..."),
        "'": ("..#..", ".#...", ".....", ".....", ".....", ".....", "....."),
        '"': (".#.#.", ".#.#.", ".....", ".....", ".....", ".....", "....."),
        "`": (".#...", "..#..", ".....", ".....", ".....", ".....", "....."),
        "!": ("..#..", "..#..", "..#..", "..#..", "..#..", ".....", "..#.."),
        "?": (".##..", "#..#.", "...#.", "..#..", "..#..", ".....", "..#.."),
        "-": (".....", ".....", ".....", "####.", ".....", ".....", "....."),
        "_": (".....", ".....", ".....", ".....", ".....", ".....", "####."),
        "=": (".....", ".....", "####.", ".....", "####.", ".....", "....."),
        "+": (".....", "..#..", "..#..", "####.", "..#..", "..#..", "....."),
        "*": ("..#..", "#.#.#", ".##..", "####.", ".##..", "#.#.#", "..#.."),
        "/": ("....#", "....#", "...#.", "..#..", ".#...", "#....", "#...."),
        "\\": ("#....", "#....", ".#...", "..#..", "...#.", "....#", "....#"),
        "|": ("..#..", "..#..", "..#..", "..#..", "..#..", "..#..", "..#.."),
        "(": ("...#.", "..#..", ".#...", ".#...", ".#...", "..#..", "...#."),
        ")": ("#....", ".#...", "..#..", "..#..", "..#..", ".#...", "#...."),
        "[": ("###..", "#....", "#....", "#....", "#....", "#....", "###.."),
        "]": ("###..", "..#..", "..#..", "..#..", "..#..", "..#..", "###.."),
        "{": ("..##.", "..#..", "..#..", "#....", "..#..", "..#..", "..##."),
        "}": ("##...", ".#...", ".#...", "....#", ".#...", ".#...", "##..."),
        "<": ("....#", "...#.", "..#..", ".#...", "..#..", "...#.", "....#"),
        ">": ("#....", ".#...", "..#..", "...#.", "..#..", ".#...", "#...."),
        "@": (".##..", "#..#.", "#.##.", "#.##.", "#.#..", "#....", ".##.."),
        "#": (".#.#.", ".#.#.", "####.", ".#.#.", "####.", ".#.#.", ".#.#."),
        "$": (".####", ".#.#.", ".#...", ".####", "....#", ".#.#.", ".####"),
        "%": ("#...#", "#..#.", "..#..", ".#...", "#..#.", "#...#", "....."),
        "&": (".##..", "#..#.", "#....", ".##..", "#..#.", "#..#.", ".##.#"),
        "^": ("..#..", ".#.#.", "#...#", ".....", ".....", ".....", "....."),
        "~": (".....", ".....", ".##.#", "#.##.", ".....", ".....", "....."),
        "o": (".....", ".....", ".##..", "#..#.", "#..#.", ".##..", "....."),
        "x": (".....", ".....", "#...#", ".#.#.", "..#..", ".#.#.", "#...#"),
        # Box drawing
        "─": (".....", ".....", ".....", "####.", ".....", ".....", "....."),
        "│": ("..#..", "..#..", "..#..", "..#..", "..#..", "..#..", "..#.."),
        "┌": (".....", ".....", ".....", "####.", "#....", "#....", "#...."),
        "┐": (".....", ".....", ".....", "####.", "....#", "....#", "....#"),
        "└": ("#....", "#....", "#....", "####.", ".....", ".....", "....."),
        "┘": ("....#", "....#", "....#", "####.", ".....", ".....", "....."),
        "├": ("..#..", "..#..", "..#..", "####.", "#....", "#....", "#...."),
        "┤": ("..#..", "..#..", "..#..", "####.", "....#", "....#", "....#"),
        "┬": (".....", ".....", ".....", "####.", "..#..", "..#..", "..#.."),
        "┴": ("..#..", "..#..", "..#..", "####.", ".....", ".....", "....."),
        "┼": ("..#..", "..#..", "..#..", "####.", "..#..", "..#..", "..#.."),
        "═": (".....", ".....", "####.", ".....", "####.", ".....", "....."),
        "║": ("..#..", "..#..", "..#..", "..#..", "..#..", "..#..", "..#.."),
        "╔": (".....", ".....", ".....", "####.", "#..#.", "#..#.", "#..#."),
        "╗": (".....", ".....", ".....", "####.", "#..#.", "#..#.", "#..#."),
        "╚": ("#..#.", "#..#.", "#..#.", "####.", ".....", ".....", "....."),
        "╝": ("#..#.", "#..#.", "#..#.", "####.", ".....", ".....", "....."),
        "╠": ("..#..", "..#..", "..#..", "####.", "#..#.", "#..#.", "#..#."),
        "╣": ("..#..", "..#..", "..#..", "####.", "#..#.", "#..#.", "#..#."),
        "╦": (".....", ".....", ".....", "####.", "#..#.", "#..#.", "#..#."),
        "╩": ("#..#.", "#..#.", "#..#.", "####.", ".....", ".....", "....."),
        "╬": ("#..#.", "#..#.", "#..#.", "####.", "#..#.", "#..#.", "#..#."),
    }
)

# Characters drawn with another character's pattern.
GLYPH_ALIASES: Mapping[str, str] = pmap({"O": "o", "X": "x"})

WHITESPACE_CHARS = frozenset(" \t\n\r")


def compile_pattern(
    source: PatternSource,
    width: int = DEFAULT_CHAR_WIDTH,
    height: int = DEFAULT_CHAR_HEIGHT,
) -> GlyphGrid:
    """
    Compile row notation into a ``height x width`` boolean grid.

    ``source`` is either a sequence of row strings or one multi-line string
    (surrounding blank lines are ignored).
    """
    rows = source.strip().split("\n") if isinstance(source, str) else list(source)
    grid = []
    for y in range(height):
        line = rows[y] if y < len(rows) else ""
        grid.append(tuple(x < len(line) and line[x] in MARKERS for x in range(width)))
    return tuple(grid)


def empty_grid(width: int = DEFAULT_CHAR_WIDTH, height: int = DEFAULT_CHAR_HEIGHT) -> GlyphGrid:
    return tuple(tuple(False for _ in range(width)) for _ in range(height))


def has_pixels(grid: GlyphGrid) -> bool:
    return any(any(row) for row in grid)


def lit_cells(grid: GlyphGrid) -> List[Tuple[int, int]]:
    """``(px, py)`` of every lit dot, row-major."""
    return [(px, py) for py, row in enumerate(grid) for px, on in enumerate(row) if on]


class GlyphTable:
    """Immutable, total ``char -> GlyphGrid`` function.

    Args:
        width: Glyph grid width in dots.
        height: Glyph grid height in dots.
        patterns: Extra or replacement patterns, compiled at the same size.
    """

    def __init__(
        self,
        width: int = DEFAULT_CHAR_WIDTH,
        height: int = DEFAULT_CHAR_HEIGHT,
        patterns: Optional[Mapping[str, PatternSource]] = None,
    ):
        if width <= 0 or height <= 0:
            raise ConfigError(f"Glyph size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._empty: GlyphGrid = empty_grid(width, height)

        sources: Dict[str, PatternSource] = dict(GLYPH_PATTERNS)
        for char, target in GLYPH_ALIASES.items():
            sources[char] = GLYPH_PATTERNS[target]
        for char, source in (patterns or {}).items():
            if len(char) != 1:
                raise ConfigError(f"Glyph key must be a single character, got {char!r}")
            sources[char] = source

        compiled: Dict[str, GlyphGrid] = {
            char: compile_pattern(source, width, height)
            for char, source in sources.items()
        }
        for char in WHITESPACE_CHARS:
            compiled[char] = self._empty
        self._glyphs: PMap = pmap(compiled)

    def pattern(self, char: str) -> GlyphGrid:
        return self._glyphs.get(char, self._empty)

    __call__ = pattern

    def __contains__(self, char: object) -> bool:
        return char in self._glyphs and char not in WHITESPACE_CHARS

    def __len__(self) -> int:
        return len(self._glyphs)


DEFAULT_GLYPH_TABLE = GlyphTable()


def pattern(char: str) -> GlyphGrid:
    """Glyph grid of ``char`` under the default 5x7 table."""
    return DEFAULT_GLYPH_TABLE.pattern(char)
