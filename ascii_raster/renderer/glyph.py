import logging
from typing import Optional, Tuple

from ascii_raster.config import FontMetrics, GlyphConfig
from ascii_raster.glyphs import DEFAULT_GLYPH_TABLE, WHITESPACE_CHARS, GlyphTable, has_pixels
from ascii_raster.surface import RasterSurface, SurfaceFactory, new_surface, surface_extent
from ascii_raster.text_grid import TextInput, as_text_grid


logger = logging.getLogger(__name__)

DEFAULT_GLYPH_CONFIG = GlyphConfig()

# (cell_width, cell_height, line_height)
CellLayout = Tuple[float, float, float]


def glyph_table_for(config: GlyphConfig) -> GlyphTable:
    size = (config.char_width, config.char_height)
    if size == (DEFAULT_GLYPH_TABLE.width, DEFAULT_GLYPH_TABLE.height):
        return DEFAULT_GLYPH_TABLE
    return GlyphTable(*size)


def resolve_layout(config: GlyphConfig, metrics: Optional[FontMetrics] = None) -> CellLayout:
    """
    Cell geometry for a render. Without metrics a cell is exactly one glyph
    grid; with metrics the horizontal advance and row pitch follow the
    reference font while the glyph itself keeps its own height.
    """
    cell_width = config.cell_width
    cell_height = config.cell_height
    line_height = cell_height
    if metrics is not None:
        cell_width = metrics.cell_width
        line_height = metrics.resolved_line_height
    return cell_width, cell_height, line_height


def render(
    text: TextInput,
    config: GlyphConfig = DEFAULT_GLYPH_CONFIG,
    glyph_table: Optional[GlyphTable] = None,
    metrics: Optional[FontMetrics] = None,
    surface_factory: Optional[SurfaceFactory] = None,
) -> RasterSurface:
    """
    Renders text as pixel-art glyphs: every lit dot of a character's bitmap
    becomes one ``dot_size`` square in ``config.line_color``.

    Whitespace cells and characters without a pattern issue no fills at all,
    so negative space keeps the background exactly. The last row is given a
    full glyph height rather than a line pitch, giving a surface of
    ``columns * cell_width`` by ``(rows - 1) * line_height + cell_height``.
    """
    grid = as_text_grid(text)
    glyph_table = glyph_table or glyph_table_for(config)

    cell_width, cell_height, line_height = resolve_layout(config, metrics)
    dot = config.dot_size
    color = config.line_rgba
    make_surface = surface_factory or new_surface

    width = surface_extent(grid.columns * cell_width)
    height = surface_extent(max(grid.rows - 1, 0) * line_height + cell_height)
    surface = make_surface(width, height, config.background_rgba)
    if grid.is_empty:
        logger.warning(
            "Empty input (%dx%d characters); producing a %dx%d surface",
            grid.columns,
            grid.rows,
            width,
            height,
        )
        return surface

    for x, y, char in grid.cells():
        if char in WHITESPACE_CHARS:
            continue
        glyph = glyph_table.pattern(char)
        if not has_pixels(glyph):
            continue
        origin_x = x * cell_width
        origin_y = y * line_height
        for py, row in enumerate(glyph):
            for px, lit in enumerate(row):
                if lit:
                    surface.fill_rect(origin_x + px * dot, origin_y + py * dot, dot, dot, color)

    logger.debug(
        "Rendered %dx%d characters as glyphs -> %dx%d pixels",
        grid.columns,
        grid.rows,
        surface.width,
        surface.height,
    )
    return surface


class GlyphRenderer:
    config: GlyphConfig
    glyph_table: GlyphTable
    metrics: Optional[FontMetrics]
    surface_factory: Optional[SurfaceFactory]

    def __init__(
        self,
        config: Optional[GlyphConfig] = None,
        glyph_table: Optional[GlyphTable] = None,
        metrics: Optional[FontMetrics] = None,
        surface_factory: Optional[SurfaceFactory] = None,
    ):
        self.config = config or DEFAULT_GLYPH_CONFIG
        self.glyph_table = glyph_table or glyph_table_for(self.config)
        self.metrics = metrics
        self.surface_factory = surface_factory

    def render(self, text: TextInput, metrics: Optional[FontMetrics] = None) -> RasterSurface:
        return render(
            text,
            config=self.config,
            glyph_table=self.glyph_table,
            metrics=metrics or self.metrics,
            surface_factory=self.surface_factory,
        )
