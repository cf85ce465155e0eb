"""Command line entry point: ``ascii-raster INPUT OUTPUT [options]``.

Examples::

    ascii-raster index.html output.png
    ascii-raster ascii.txt output.png --pixel-size 4 --scale 2
    ascii-raster index.html output.png --mode color --bg-color "#1a1a1a"
    ascii-raster banner.txt banner.png --renderer glyph --pixel-size 3
"""

import argparse
import logging
import sys
from typing import List, Optional

from ascii_raster.config import (
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND,
    DEFAULT_PIXEL_SIZE,
    DEFAULT_SCALE,
    FontMetrics,
    GlyphConfig,
    RenderConfig,
)
from ascii_raster.convert import convert_file
from ascii_raster.errors import AsciiRasterError
from ascii_raster.logging_setup import setup_logging
from ascii_raster.renderer import GlyphRenderer, IntensityRenderer, Renderer
from ascii_raster.types import ColorMode


logger = logging.getLogger(__name__)

INTENSITY = "intensity"
GLYPH = "glyph"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ascii-raster",
        description="Convert ASCII art (plain text or a <pre> block in HTML) to a pixelated PNG.",
    )
    parser.add_argument("input", help="Input file (.html/.htm or plain text)")
    parser.add_argument("output", help="Output PNG path")
    parser.add_argument(
        "--pixel-size",
        type=int,
        default=DEFAULT_PIXEL_SIZE,
        help=f"Size of each pixel block (default: {DEFAULT_PIXEL_SIZE})",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=DEFAULT_SCALE,
        help="Overall scale multiplier (default: 1)",
    )
    parser.add_argument(
        "--bg-color",
        default=DEFAULT_BACKGROUND,
        help=f"Background color (default: {DEFAULT_BACKGROUND})",
    )
    parser.add_argument(
        "--fg-color",
        default=DEFAULT_FOREGROUND,
        help=f"Foreground color for monochrome / glyph dots (default: {DEFAULT_FOREGROUND})",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ColorMode],
        default=ColorMode.GRAYSCALE.value,
        help="Color mode (default: grayscale)",
    )
    parser.add_argument(
        "--renderer",
        choices=[INTENSITY, GLYPH],
        default=INTENSITY,
        help="Solid brightness blocks or 5x7 bitmap glyphs (default: intensity)",
    )
    parser.add_argument(
        "--font-size",
        type=float,
        default=None,
        help="Glyph renderer only: match the cell advance of this font size (px)",
    )
    parser.add_argument(
        "--line-height",
        type=float,
        default=None,
        help="Glyph renderer only, with --font-size: row pitch in px (default: 1.2 x font size)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def build_renderer(args: argparse.Namespace) -> Renderer:
    if args.renderer == GLYPH:
        metrics = None
        if args.font_size is not None:
            metrics = FontMetrics(font_size=args.font_size, line_height=args.line_height)
        config = GlyphConfig(
            pixel_size=args.pixel_size,
            scale=args.scale,
            line_color=args.fg_color,
            background=args.bg_color,
        )
        return GlyphRenderer(config, metrics=metrics)

    return IntensityRenderer(
        RenderConfig(
            pixel_size=args.pixel_size,
            scale=args.scale,
            mode=ColorMode(args.mode),
            background=args.bg_color,
            foreground=args.fg_color,
        )
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.line_height is not None and args.font_size is None:
        parser.error("--line-height requires --font-size")
    setup_logging(args.verbose)

    try:
        renderer = build_renderer(args)
        result = convert_file(args.input, args.output, renderer)
    except (AsciiRasterError, OSError) as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not result.written:
        print(
            f"Warning: {args.input} contains no art ({result.summary()}); nothing written",
            file=sys.stderr,
        )
        return 0

    print(f"Converted {args.input} -> {args.output}: {result.summary()}")
    return 0
