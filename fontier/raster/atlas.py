"""
Atlas packing.

Merges every rendered glyph of a BitmapFont into one image, left to right in
character code order, so a renderer can draw text from a single texture.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import Image

from ..constants import BACKGROUND
from .bitmap_font import BitmapFont, FontRasterMetrics
from .font_source import CharCode, as_char

logger = logging.getLogger(__name__)

# (x, y, width, height) in pixels
Region = Tuple[int, int, int, int]


@dataclass(frozen=True)
class AtlasBitmapFont:
    """
    A BitmapFont merged into a single image.

    ``glyph_x`` and ``glyph_width`` are indexed by character code like the
    source font's glyphs. A code that could not be rendered has width 0 and
    shares its x with the next rendered glyph (or the atlas width if none
    follows).
    """

    bitmap: Image.Image
    glyph_x: Tuple[int, ...]
    glyph_width: Tuple[int, ...]
    metrics: FontRasterMetrics = FontRasterMetrics()

    def __len__(self) -> int:
        return len(self.glyph_x)

    @property
    def width(self) -> int:
        return self.bitmap.width

    @property
    def glyph_height(self) -> int:
        return self.bitmap.height

    def has_glyph(self, char: CharCode) -> bool:
        code = ord(as_char(char))
        return code < len(self.glyph_width) and self.glyph_width[code] > 0

    def region(self, char: CharCode) -> Region:
        """Return the (x, y, width, height) of a character's area in the atlas."""
        code = ord(as_char(char))
        if code >= len(self.glyph_x):
            raise IndexError(f"Code {code} is outside the atlas range 0..{len(self.glyph_x) - 1}")
        return (self.glyph_x[code], 0, self.glyph_width[code], self.glyph_height)

    def glyph_image(self, char: CharCode) -> Optional[Image.Image]:
        """Crop a character's glyph out of the atlas; None if it has no glyph."""
        if not self.has_glyph(char):
            return None
        x, y, w, h = self.region(char)
        return self.bitmap.crop((x, y, x + w, y + h))


class AtlasPacker:
    """Packs a BitmapFont's glyphs into one row."""

    def pack(self, bitmap_font: BitmapFont) -> AtlasBitmapFont:
        """
        Pack the glyphs of ``bitmap_font`` into a single image.

        Args:
            bitmap_font: A completed BitmapFont

        Returns:
            AtlasBitmapFont with the merged image and per-code placement

        Raises:
            ValueError: If bitmap_font is None
        """
        if bitmap_font is None:
            raise ValueError("Bitmap font is null")

        glyphs = bitmap_font.glyphs
        total_width = sum(glyph.width for glyph in glyphs if glyph is not None)

        bitmap = Image.new("RGB", (total_width, bitmap_font.glyph_height), BACKGROUND)
        glyph_x = [0] * len(glyphs)
        glyph_width = [0] * len(glyphs)

        x = 0
        for index, glyph in enumerate(glyphs):
            glyph_x[index] = x

            if glyph is not None:
                bitmap.paste(glyph.image, (x, 0))
                glyph_width[index] = glyph.width
                x += glyph.width

        logger.info(
            f"Packed atlas: {total_width}x{bitmap_font.glyph_height}px, "
            f"{sum(1 for w in glyph_width if w)} of {len(glyphs)} codes"
        )
        return AtlasBitmapFont(
            bitmap=bitmap,
            glyph_x=tuple(glyph_x),
            glyph_width=tuple(glyph_width),
            metrics=bitmap_font.metrics,
        )


def pack_atlas(bitmap_font: BitmapFont) -> AtlasBitmapFont:
    """Convenience function: pack a BitmapFont into an AtlasBitmapFont."""
    return AtlasPacker().pack(bitmap_font)
