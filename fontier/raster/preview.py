"""Draw a line of text from an atlas, one glyph after another."""

import logging

from PIL import Image

from ..constants import BACKGROUND
from .atlas import AtlasBitmapFont

logger = logging.getLogger(__name__)


def render_text(atlas: AtlasBitmapFont, text: str) -> Image.Image:
    """
    Compose ``text`` into a single-line image using the atlas's glyphs.

    Characters without a glyph (absent or outside the atlas range) take no
    space. Newlines are not interpreted.

    Returns:
        RGB image of width = sum of the drawn glyph widths and the atlas height
    """
    regions = []
    skipped = 0
    for char in text:
        if atlas.has_glyph(char):
            regions.append(atlas.region(char))
        else:
            skipped += 1

    width = sum(w for _, _, w, _ in regions)
    line = Image.new("RGB", (width, atlas.glyph_height), BACKGROUND)

    x = 0
    for gx, gy, gw, gh in regions:
        line.paste(atlas.bitmap.crop((gx, gy, gx + gw, gy + gh)), (x, 0))
        x += gw

    if skipped:
        logger.debug(f"Preview skipped {skipped} character(s) without glyphs")
    return line
