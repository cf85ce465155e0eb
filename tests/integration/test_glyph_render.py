import logging

import pytest

import ascii_raster
from ascii_raster.config import FontMetrics, GlyphConfig
from ascii_raster.glyphs import GlyphTable, lit_cells, pattern
from ascii_raster.renderer.glyph import GlyphRenderer, render, resolve_layout
from ascii_raster.text_grid import TextGrid
from tests.test_utils import CountingSurface, lit_pixels, make_counting_surface

RED = (255, 0, 0, 255)
ONE_PX = GlyphConfig(pixel_size=1)


def test_period_renders_single_dot() -> None:
    surface = render(".", ONE_PX)
    assert surface.size == (5, 7)
    assert lit_pixels(surface) == [(2, 6)]
    assert surface.pixel(2, 6) == RED
    assert surface.pixel(0, 0) == (0, 0, 0, 0)


def test_default_surface_size() -> None:
    surface = render("AB\nC")
    # 2 * 12.5 wide, one 17.5 line pitch plus a 17.5 glyph
    assert surface.size == (25, 35)


@pytest.mark.parametrize(
    "lines",
    [(" ",), ("\t",), ("\n",), ("\r",), (" \t\n\r  ",), ("", "   ")],
)
def test_whitespace_issues_no_fills(lines: tuple) -> None:
    surface = render(TextGrid(lines=lines), surface_factory=make_counting_surface)
    assert isinstance(surface, CountingSurface)
    assert surface.fills == []


def test_unknown_characters_issue_no_fills() -> None:
    surface = render("aé☃", surface_factory=make_counting_surface)
    assert isinstance(surface, CountingSurface)
    assert surface.fills == []


def test_one_fill_per_lit_dot() -> None:
    surface = render("A A", ONE_PX, surface_factory=make_counting_surface)
    assert isinstance(surface, CountingSurface)
    assert len(surface.fills) == 2 * len(lit_cells(pattern("A")))
    assert {color for *_, color in surface.fills} == {RED}


def test_glyph_pixels_match_pattern() -> None:
    surface = render("A", GlyphConfig(pixel_size=2))
    assert surface.size == (10, 14)
    expected = set()
    for px, py in lit_cells(pattern("A")):
        expected |= {(px * 2 + dx, py * 2 + dy) for dx in range(2) for dy in range(2)}
    assert set(lit_pixels(surface)) == expected


def test_second_character_offset_by_cell_width() -> None:
    surface = render("..", ONE_PX)
    assert lit_pixels(surface) == [(2, 6), (7, 6)]


def test_font_metrics_control_advance_and_line_pitch() -> None:
    metrics = FontMetrics(font_size=10, line_height=20)
    assert resolve_layout(ONE_PX, metrics) == (6.0, 7.0, 20.0)
    surface = render(".\n.", ONE_PX, metrics=metrics)
    # width 1 * 6, height (2 - 1) * 20 + 7
    assert surface.size == (6, 27)
    assert lit_pixels(surface) == [(2, 6), (2, 26)]


def test_default_line_height_from_font_size() -> None:
    surface = render("..\n..", ONE_PX, metrics=FontMetrics(font_size=10))
    assert surface.size == (12, 19)


def test_background_and_line_color() -> None:
    config = GlyphConfig(pixel_size=1, line_color="#00ff00", background="#000000")
    surface = render("-", config)
    assert surface.pixel(0, 3) == (0, 255, 0, 255)
    assert surface.pixel(4, 3) == (0, 0, 0, 255)


def test_custom_glyph_size() -> None:
    config = GlyphConfig(pixel_size=1, char_width=3, char_height=3)
    surface = render("A", config)
    assert surface.size == (3, 3)
    assert lit_pixels(surface) == [(1, 0), (2, 0), (0, 1), (0, 2)]


def test_custom_glyph_table() -> None:
    table = GlyphTable(patterns={"a": ["#"]})
    surface = render("a", ONE_PX, glyph_table=table)
    assert lit_pixels(surface) == [(0, 0)]


def test_rendering_is_deterministic() -> None:
    text = "┌──┐\n│OK│\n└──┘ 42!"
    assert render(text) == render(text)


def test_empty_input_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="ascii_raster"):
        surface = render("", ONE_PX)
    assert surface.is_empty
    assert "Empty input" in caplog.text


def test_renderer_class_uses_stored_metrics() -> None:
    metrics = FontMetrics(font_size=10, line_height=20)
    renderer = GlyphRenderer(ONE_PX, metrics=metrics)
    assert renderer.render(".\n.") == render(".\n.", ONE_PX, metrics=metrics)


def test_package_level_render_dispatch() -> None:
    assert ascii_raster.render(".", ONE_PX) == render(".", ONE_PX)
