"""
Bitmap font rasterization for Fontier.

This package renders a vector font into fixed-height glyph images and packs
them into a single atlas image for text rendering.

Workflow:
1. Wrap a font in a FontResource (PILFontResource for TrueType/OpenType files)
2. Build a BitmapFont with BitmapFontBuilder (one GlyphRasterizer per build)
3. Optionally pack it into an AtlasBitmapFont with AtlasPacker
4. Export to PNG + JSON, or draw preview text from the atlas
"""

from .font_source import (
    FontResource,
    PILFontResource,
    as_char,
)
from .rasterizer import (
    GlyphRasterizer,
    Glyph,
    GlyphMeasurement,
    WidthPolicy,
)
from .bitmap_font import (
    BitmapFont,
    BitmapFontBuilder,
    FontRasterMetrics,
    build_bitmap_font,
)
from .atlas import (
    AtlasBitmapFont,
    AtlasPacker,
    pack_atlas,
)
from .export import (
    atlas_metadata,
    export_atlas,
    export_glyphs,
    load_atlas,
)
from .preview import render_text

__all__ = [
    # Font resources
    "FontResource",
    "PILFontResource",
    "as_char",
    # Rasterization
    "GlyphRasterizer",
    "Glyph",
    "GlyphMeasurement",
    "WidthPolicy",
    # Bitmap fonts
    "BitmapFont",
    "BitmapFontBuilder",
    "FontRasterMetrics",
    "build_bitmap_font",
    # Atlas
    "AtlasBitmapFont",
    "AtlasPacker",
    "pack_atlas",
    # Export
    "atlas_metadata",
    "export_atlas",
    "export_glyphs",
    "load_atlas",
    # Preview
    "render_text",
]
