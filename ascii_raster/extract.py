"""Text extraction from plain-text and markup sources.

Markup sources carry their art inside a ``<pre>`` element. The first
``<pre class="ascii">`` wins; failing that, the first ``<pre>`` of any kind.
Markup inside the block is removed and character references are decoded
before the text reaches a rasterizer, since an undecoded ``&amp;`` would be
looked up as five separate characters.
"""

import html
import logging
import re
from pathlib import Path
from typing import Union

from ascii_raster.errors import ArtNotFoundError, InputDecodeError
from ascii_raster.text_grid import TextGrid


logger = logging.getLogger(__name__)

MARKUP_SUFFIXES = (".html", ".htm")

_ASCII_PRE = re.compile(
    r"<pre[^>]*class=[\"']ascii[\"'][^>]*>(.*?)</pre>", re.IGNORECASE | re.DOTALL
)
_ANY_PRE = re.compile(r"<pre[^>]*>(.*?)</pre>", re.IGNORECASE | re.DOTALL)
_SCRIPT_OR_STYLE = re.compile(
    r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL
)
_TAG = re.compile(r"<[^>]*>")

PathLike = Union[str, Path]


def decode_entities(text: str) -> str:
    """Decode character references; a non-breaking space becomes a plain space."""
    return html.unescape(text).replace("\xa0", " ")


def strip_markup(fragment: str) -> str:
    """
    Remove script/style elements and all tags, then decode entities.

    Tags are removed outright (not replaced by a space) so that an inline
    ``<a>`` or ``<span>`` does not shift the characters after it.
    """
    text = _SCRIPT_OR_STYLE.sub("", fragment)
    text = _TAG.sub("", text)
    return decode_entities(text)


def find_art_block(markup: str) -> str:
    """
    Return the raw (undecoded) contents of the art ``<pre>`` block.

    Raises:
        ArtNotFoundError: No ``<pre>`` element exists in ``markup``.
    """
    match = _ASCII_PRE.search(markup)
    if match is None:
        logger.debug('No <pre class="ascii"> block, falling back to first <pre>')
        match = _ANY_PRE.search(markup)
    if match is None:
        raise ArtNotFoundError()
    return match.group(1)


def extract_from_markup(markup: str) -> str:
    return strip_markup(find_art_block(markup))


def is_markup_path(path: PathLike) -> bool:
    return Path(path).suffix.lower() in MARKUP_SUFFIXES


def read_source(path: PathLike) -> str:
    """
    Read art text from ``path``: markup files are searched for a ``<pre>``
    block, anything else is taken verbatim.

    Raises:
        OSError: The file could not be read.
        InputDecodeError: The file is not valid UTF-8.
        ArtNotFoundError: A markup file has no art block.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InputDecodeError(
            f"{path} is not valid UTF-8 (byte {exc.start}: {exc.reason})"
        ) from exc
    if is_markup_path(path):
        logger.debug("Extracting art from markup file %s", path)
        return extract_from_markup(content)
    return content


def load_text_grid(path: PathLike) -> TextGrid:
    return TextGrid.from_text(read_source(path))
