import logging
from typing import Optional

from ascii_raster.charmap import DEFAULT_CHARACTER_MAP, CharacterMap
from ascii_raster.config import RenderConfig
from ascii_raster.surface import RasterSurface, SurfaceFactory, new_surface, surface_extent
from ascii_raster.text_grid import TextInput, as_text_grid
from ascii_raster.utils.color import color_fn_for


logger = logging.getLogger(__name__)

DEFAULT_RENDER_CONFIG = RenderConfig()


def render(
    text: TextInput,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
    char_map: CharacterMap = DEFAULT_CHARACTER_MAP,
    surface_factory: Optional[SurfaceFactory] = None,
) -> RasterSurface:
    """
    Renders text as a grid of solid square blocks, one per character cell,
    colored from the character's brightness according to ``config.mode``.

    The surface is ``columns * cell`` by ``rows * cell`` pixels where
    ``cell = pixel_size * scale``; short rows are read as if padded with
    spaces.
    """
    grid = as_text_grid(text)
    cell = config.cell_size
    foreground = config.foreground_rgba
    background = config.background_rgba
    color_fn = color_fn_for(config.mode)

    width = surface_extent(grid.columns * cell)
    height = surface_extent(grid.rows * cell)
    if grid.is_empty:
        logger.warning(
            "Empty input (%dx%d characters); producing a %dx%d surface",
            grid.columns,
            grid.rows,
            width,
            height,
        )

    make_surface = surface_factory or new_surface
    surface = make_surface(width, height, background)

    for x, y, char in grid.cells():
        intensity = char_map.brightness(char)
        color = color_fn(char, intensity, foreground, background)
        surface.fill_rect(x * cell, y * cell, cell, cell, color)

    logger.debug(
        "Rendered %dx%d characters -> %dx%d pixels (%s)",
        grid.columns,
        grid.rows,
        surface.width,
        surface.height,
        config.mode,
    )
    return surface


class IntensityRenderer:
    config: RenderConfig
    char_map: CharacterMap
    surface_factory: Optional[SurfaceFactory]

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        char_map: Optional[CharacterMap] = None,
        surface_factory: Optional[SurfaceFactory] = None,
    ):
        self.config = config or DEFAULT_RENDER_CONFIG
        self.char_map = char_map or DEFAULT_CHARACTER_MAP
        self.surface_factory = surface_factory

    def render(self, text: TextInput) -> RasterSurface:
        return render(
            text,
            config=self.config,
            char_map=self.char_map,
            surface_factory=self.surface_factory,
        )
