"""Argument parser for Fontier CLI."""

import argparse

from ..constants import VERSION, WIDTH_POLICIES, __author__, __copyright__


def build_arg_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="fontier",
        description="Render a TrueType/OpenType font into a bitmap font and glyph atlas"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}\n{__copyright__}\nAuthor: {__author__}"
    )

    parser.add_argument(
        "font",
        nargs="?",
        help="Path to the font file (optional when --family is given)"
    )

    # Font selection
    font_group = parser.add_argument_group("font")
    font_group.add_argument(
        "-f", "--family",
        action="append",
        metavar="NAME",
        help="Font family to look up in system and configured font directories (repeatable, in priority order)"
    )
    font_group.add_argument(
        "-s", "--size",
        type=int,
        help="Font size in pixels (default: from config, 32)"
    )

    # Rasterization options
    raster_group = parser.add_argument_group("rasterization")
    raster_group.add_argument(
        "-n", "--chars",
        type=int,
        help="Number of character codes to render, starting at 0 (default: from config, 256)"
    )
    raster_group.add_argument(
        "-w", "--width-policy",
        choices=list(WIDTH_POLICIES),
        help="Glyph width source: font advance widths or ink scan (default: from config, measured)"
    )

    # Output options
    out_group = parser.add_argument_group("output")
    out_group.add_argument(
        "-o", "--out",
        help="Output directory (default: from config, ./bitmap_fonts)"
    )
    out_group.add_argument(
        "--name",
        help="Base name for output files (default: font file name)"
    )
    out_group.add_argument(
        "--glyphs",
        action="store_true",
        help="Also write one PNG per glyph with a JSON manifest"
    )
    out_group.add_argument(
        "--no-atlas",
        action="store_true",
        help="Do not pack and write the atlas"
    )
    out_group.add_argument(
        "--preview",
        metavar="TEXT",
        help="Write a preview image of TEXT drawn from the atlas"
    )

    # Logging
    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output to the console"
    )
    log_group.add_argument(
        "--no-log-file",
        action="store_true",
        help="Do not write a log file"
    )

    return parser
