"""File-to-file conversion on top of the renderers."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ascii_raster.extract import read_source
from ascii_raster.renderer import IntensityRenderer, Renderer
from ascii_raster.text_grid import TextGrid


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one conversion.

    Attributes:
        output_path: Where the PNG was written, or None when nothing was
            written because the input was empty.
        columns: Character grid width.
        rows: Character grid height.
        width: Surface width in pixels.
        height: Surface height in pixels.
    """

    output_path: Optional[Path]
    columns: int
    rows: int
    width: int
    height: int

    @property
    def written(self) -> bool:
        return self.output_path is not None

    def summary(self) -> str:
        return (
            f"{self.columns}x{self.rows} characters -> "
            f"{self.width}x{self.height} pixels"
        )


def convert_text(
    text: str, output_path: PathLike, renderer: Optional[Renderer] = None
) -> ConversionResult:
    """
    Render ``text`` and encode it as PNG at ``output_path``.

    An empty render is not written; the result then has ``output_path=None``.

    Raises:
        OSError: The output file could not be written.
    """
    renderer = renderer or IntensityRenderer()
    grid = TextGrid.from_text(text)
    surface = renderer.render(grid)

    written: Optional[Path] = None
    if surface.is_empty:
        logger.warning("Surface is empty; not writing %s", output_path)
    else:
        written = Path(output_path)
        surface.save(written)
        logger.info("Wrote %s (%dx%d)", written, surface.width, surface.height)

    return ConversionResult(
        output_path=written,
        columns=grid.columns,
        rows=grid.rows,
        width=surface.width,
        height=surface.height,
    )


def convert_file(
    input_path: PathLike, output_path: PathLike, renderer: Optional[Renderer] = None
) -> ConversionResult:
    """
    Read art from ``input_path`` (markup or plain text) and convert it.

    Raises:
        ArtNotFoundError: A markup input has no ``<pre>`` block.
        OSError: Reading the input or writing the output failed.
    """
    return convert_text(read_source(input_path), output_path, renderer)
