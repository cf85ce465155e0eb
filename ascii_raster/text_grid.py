"""Normalized rows-of-characters input.

A ``TextGrid`` is built fresh for every conversion and discarded once the
surface is rasterized. Rows keep their original (ragged) lengths; reads past
the end of a row yield a space instead of padding the stored text.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple, Union


BLANK = " "


def split_lines(text: str) -> Tuple[str, ...]:
    """
    Split on ``\\n`` and drop one trailing ``\\r`` per line.

    Only the line terminator is removed, so every other character keeps its
    column.
    """
    return tuple(
        line[:-1] if line.endswith("\r") else line for line in text.split("\n")
    )


@dataclass(frozen=True)
class TextGrid:
    """Ordered rows of characters.

    Attributes:
        lines: Row strings, top to bottom, possibly of different lengths.
    """

    lines: Tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> "TextGrid":
        return cls(lines=split_lines(text))

    @property
    def rows(self) -> int:
        return len(self.lines)

    @property
    def columns(self) -> int:
        return max((len(line) for line in self.lines), default=0)

    @property
    def is_empty(self) -> bool:
        return self.rows == 0 or self.columns == 0

    def char_at(self, x: int, y: int) -> str:
        """Character at column ``x`` of row ``y``; a space past the row end."""
        line = self.lines[y]
        return line[x] if x < len(line) else BLANK

    def cells(self) -> Iterator[Tuple[int, int, str]]:
        """Yield ``(x, y, char)`` top-to-bottom, left-to-right over the full grid."""
        columns = self.columns
        for y, line in enumerate(self.lines):
            for x in range(columns):
                yield x, y, line[x] if x < len(line) else BLANK


TextInput = Union[str, TextGrid]


def as_text_grid(text: TextInput) -> TextGrid:
    if isinstance(text, TextGrid):
        return text
    return TextGrid.from_text(text)
