"""Fontier: render vector fonts into bitmap fonts and glyph atlases."""

from .config import ConfigManager
from .constants import (
    APP_NAME,
    VERSION,
    __version__,
    __author__,
    __license__,
    __copyright__,
)
from .font_manager import FontManager
from .raster import (
    AtlasBitmapFont,
    AtlasPacker,
    BitmapFont,
    BitmapFontBuilder,
    FontRasterMetrics,
    FontResource,
    Glyph,
    GlyphRasterizer,
    PILFontResource,
    WidthPolicy,
    build_bitmap_font,
    pack_atlas,
)

__all__ = [
    "ConfigManager",
    "FontManager",
    "APP_NAME",
    "VERSION",
    "__version__",
    "__author__",
    "__license__",
    "__copyright__",
    "AtlasBitmapFont",
    "AtlasPacker",
    "BitmapFont",
    "BitmapFontBuilder",
    "FontRasterMetrics",
    "FontResource",
    "Glyph",
    "GlyphRasterizer",
    "PILFontResource",
    "WidthPolicy",
    "build_bitmap_font",
    "pack_atlas",
]
