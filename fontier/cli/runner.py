"""CLI runner for Fontier."""

import logging
import sys
from pathlib import Path
from typing import Optional, List

from ..config import ConfigManager
from ..font_manager import FontManager
from ..logging_config import ErrorLogger, setup_logging
from ..raster import (
    PILFontResource,
    WidthPolicy,
    build_bitmap_font,
    export_atlas,
    export_glyphs,
    pack_atlas,
    render_text,
)
from .parser import build_arg_parser

logger = logging.getLogger(__name__)


def resolve_font(args, config: ConfigManager, size: int) -> Optional[PILFontResource]:
    """
    Resolve the font to render from a file path or family names.

    Priority: font path argument > --family lookup.
    """
    if args.font:
        return PILFontResource.from_file(Path(args.font).expanduser(), size)

    if args.family:
        manager = FontManager(custom_dirs=config.get_font_dirs())
        return manager.load_font(args.family, size)

    return None


def output_stem(args) -> str:
    if args.name:
        return args.name
    if args.font:
        return Path(args.font).stem
    return args.family[0].replace(" ", "_")


def run_cli(args, config: Optional[ConfigManager] = None) -> int:
    """
    Run the CLI with parsed arguments.

    Args:
        args: Parsed command-line arguments
        config: Configuration to take defaults from (default: user config)

    Returns:
        Exit code (0 for success)
    """
    config = config or ConfigManager()

    if not args.font and not args.family:
        print("Error: a font file or --family is required")
        return 2

    size = args.size if args.size is not None else config.get_font_size()
    char_count = args.chars if args.chars is not None else config.get_char_count()
    width_policy = (
        WidthPolicy.parse(args.width_policy) if args.width_policy else config.get_width_policy()
    )
    output_dir = Path(args.out).expanduser() if args.out else config.get_output_dir()

    if size <= 0:
        print(f"Error: font size must be greater than zero, got {size}")
        return 2

    try:
        with ErrorLogger("loading font", logger):
            font = resolve_font(args, config, size)
    except OSError as e:
        print(f"Error: could not load font: {e}")
        return 1

    if font is None:
        print(f"Error: no font found for families: {', '.join(args.family)}")
        return 1

    stem = output_stem(args)
    written: List[Path] = []

    try:
        with ErrorLogger("building bitmap font", logger):
            bitmap_font = build_bitmap_font(font, char_count, width_policy)

        atlas = None
        preview_line = None
        if not args.no_atlas or args.preview:
            atlas = pack_atlas(bitmap_font)

        if args.preview:
            preview_line = render_text(atlas, args.preview)
            if preview_line.width == 0:
                print("Error: none of the preview characters have glyphs")
                return 1

        if args.glyphs:
            written.append(export_glyphs(bitmap_font, output_dir, stem))

        if not args.no_atlas:
            written.extend(export_atlas(atlas, output_dir, stem))

        if preview_line is not None:
            output_dir.mkdir(parents=True, exist_ok=True)
            preview_path = output_dir / f"{stem}_preview.png"
            preview_line.save(preview_path)
            written.append(preview_path)
    except ValueError as e:
        print(f"Error: {e}")
        return 2
    except (OSError, RuntimeError) as e:
        print(f"Error: {e}")
        return 1

    present = len(bitmap_font.present_codes())
    print(
        f"Rendered {present}/{bitmap_font.char_count} glyphs "
        f"(height {bitmap_font.glyph_height}px, baseline {bitmap_font.baseline}px, "
        f"policy {width_policy.value})"
    )
    for path in written:
        print(f"Wrote {path}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``fontier`` command."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    log_file = setup_logging(log_level=log_level, log_to_file=not args.no_log_file)
    if log_file:
        logger.debug(f"Logging to {log_file}")

    return run_cli(args)


if __name__ == "__main__":
    sys.exit(main())
