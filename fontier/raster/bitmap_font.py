"""
Bitmap font assembly.

Renders a contiguous range of character codes with one GlyphRasterizer and
collects the results, together with the font-wide vertical metrics, into an
immutable BitmapFont.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..constants import DEFAULT_CHAR_COUNT
from .font_source import CharCode, FontResource, as_char
from .rasterizer import Glyph, GlyphRasterizer, WidthPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FontRasterMetrics:
    """
    Vertical metrics shared by every glyph of a bitmap font. All values are pixels.

    ``ascent`` and ``descent`` are the font's defaults relative to the baseline.
    Some characters exceed them, which is why ``glyph_height`` (max ascent plus
    descent) is usually larger than ``ascent + descent``.
    """

    # Distance from the top of a glyph image to the baseline
    baseline: int = 0
    ascent: int = 0
    descent: int = 0

    # Height of every glyph image
    glyph_height: int = 0


class BitmapFont:
    """
    A font rendered into one image per character code.

    Glyphs are indexed by character code from 0 to ``char_count - 1``. Codes
    that could not be rendered hold None. The font is built once and not
    modified afterwards.
    """

    def __init__(self, glyphs: Tuple[Optional[Glyph], ...], metrics: FontRasterMetrics):
        self._glyphs = tuple(glyphs)
        self._metrics = metrics

    def __len__(self) -> int:
        return len(self._glyphs)

    def __getitem__(self, code: int) -> Optional[Glyph]:
        return self._glyphs[code]

    def __iter__(self) -> Iterator[Optional[Glyph]]:
        return iter(self._glyphs)

    def __repr__(self) -> str:
        return (
            f"BitmapFont(char_count={self.char_count}, present={len(self.present_codes())}, "
            f"glyph_height={self.glyph_height})"
        )

    @property
    def glyphs(self) -> Tuple[Optional[Glyph], ...]:
        """All glyphs in character code order; None where a code is not renderable."""
        return self._glyphs

    @property
    def metrics(self) -> FontRasterMetrics:
        return self._metrics

    @property
    def char_count(self) -> int:
        return len(self._glyphs)

    @property
    def baseline(self) -> int:
        return self._metrics.baseline

    @property
    def ascent(self) -> int:
        return self._metrics.ascent

    @property
    def descent(self) -> int:
        return self._metrics.descent

    @property
    def glyph_height(self) -> int:
        return self._metrics.glyph_height

    def glyph_for(self, char: CharCode) -> Optional[Glyph]:
        """Look up a glyph by character; None if absent or outside the font's range."""
        code = ord(as_char(char))
        if code >= len(self._glyphs):
            return None
        return self._glyphs[code]

    def present_codes(self) -> List[int]:
        return [code for code, glyph in enumerate(self._glyphs) if glyph is not None]


class BitmapFontBuilder:
    """Drives a GlyphRasterizer over codes 0..char_count-1 to build a BitmapFont."""

    def __init__(
        self,
        font: FontResource,
        char_count: int = DEFAULT_CHAR_COUNT,
        width_policy: WidthPolicy = WidthPolicy.MEASURED,
    ):
        """
        Initialize the builder.

        Args:
            font: Font resource to render
            char_count: Number of character codes to render, starting at 0
            width_policy: How glyph widths are resolved

        Raises:
            ValueError: If the font is None or char_count is not positive
        """
        if font is None:
            raise ValueError("Font is null")

        if isinstance(char_count, bool) or not isinstance(char_count, int) or char_count <= 0:
            raise ValueError("Char count must be greater than zero")

        self.font = font
        self.char_count = char_count
        self.width_policy = WidthPolicy.parse(width_policy)

    def build(self) -> BitmapFont:
        rasterizer = GlyphRasterizer(self.font, self.width_policy)
        baseline = rasterizer.baseline
        ascent = rasterizer.ascent
        descent = rasterizer.descent

        glyphs: List[Optional[Glyph]] = []
        glyph_height = 0
        try:
            for code in range(self.char_count):
                glyph = rasterizer.render_glyph(code)
                glyphs.append(glyph)

                if glyph is not None and glyph_height == 0:
                    glyph_height = glyph.height
        finally:
            rasterizer.release()

        metrics = FontRasterMetrics(
            baseline=baseline,
            ascent=ascent,
            descent=descent,
            glyph_height=glyph_height,
        )
        present = sum(1 for g in glyphs if g is not None)
        logger.info(
            f"Built bitmap font: {present}/{self.char_count} glyphs, "
            f"height={glyph_height}, baseline={baseline}, asc={ascent}, desc={descent}"
        )
        return BitmapFont(tuple(glyphs), metrics)


def build_bitmap_font(
    font: FontResource,
    char_count: int = DEFAULT_CHAR_COUNT,
    width_policy: WidthPolicy = WidthPolicy.MEASURED,
) -> BitmapFont:
    """
    Convenience function to render a font into a BitmapFont.

    Args:
        font: Font resource to render
        char_count: Number of character codes to render, starting at 0
        width_policy: How glyph widths are resolved

    Returns:
        The built BitmapFont
    """
    return BitmapFontBuilder(font, char_count, width_policy).build()
