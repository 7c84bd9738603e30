"""
Font resources consumed by the rasterizer.

The rasterizer only needs a handful of things from a font: its nominal size,
its vertical metrics, the advance width of a character, and a way to draw one
character at a baseline. ``FontResource`` describes that boundary and
``PILFontResource`` implements it on top of Pillow's FreeType fonts, using
fontTools to read the tables Pillow does not expose.
"""

import logging
import math
import unicodedata
from pathlib import Path
from typing import Optional, Protocol, Set, Tuple, Union

from fontTools.ttLib import TTFont
from PIL import ImageDraw, ImageFont

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]
CharCode = Union[int, str]


def as_char(code: CharCode) -> str:
    """Normalize a character code (int or one-character str) to a str."""
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"Expected a single character, got {code!r}")
        return code
    if isinstance(code, bool) or not isinstance(code, int):
        raise ValueError(f"Character code must be an int or str, got {type(code).__name__}")
    if code < 0:
        raise ValueError(f"Character code must not be negative, got {code}")
    return chr(code)


class FontResource(Protocol):
    """The font operations the rasterizer depends on. All values are pixels."""

    @property
    def size(self) -> int: ...

    @property
    def ascent(self) -> int: ...

    @property
    def descent(self) -> int: ...

    @property
    def max_ascent(self) -> int: ...

    def advance_width(self, char: str) -> int: ...

    def draw_char(
        self,
        draw: ImageDraw.ImageDraw,
        x: int,
        baseline: int,
        char: str,
        fill: Color,
    ) -> None: ...


class PILFontResource:
    """
    ``FontResource`` backed by a Pillow ``FreeTypeFont``.

    Control characters and characters missing from the font's cmap are treated
    as not drawable: they report a zero advance and draw nothing, so the
    rasterizer marks them absent instead of emitting the font's .notdef box.
    """

    def __init__(self, font: ImageFont.FreeTypeFont, font_path: Optional[Union[str, Path]] = None):
        """
        Args:
            font: A loaded FreeType font
            font_path: Font file to read tables from; defaults to ``font.path``
                when that is a filesystem path
        """
        if font is None:
            raise ValueError("The font is null")

        self.font = font
        if font_path is None and isinstance(getattr(font, "path", None), (str, Path)):
            font_path = font.path
        self.font_path = Path(font_path) if font_path is not None else None

        self._ascent, self._descent = font.getmetrics()
        self._cmap: Optional[Set[int]] = None
        self._max_ascent = self._ascent

        if self.font_path is not None:
            self._read_tables(self.font_path)

    @classmethod
    def from_file(cls, path: Union[str, Path], size: int) -> "PILFontResource":
        """Load a TrueType/OpenType font file at ``size`` pixels."""
        font = ImageFont.truetype(str(path), size, layout_engine=ImageFont.Layout.BASIC)
        logger.info(f"Loaded font {path} at {size}px")
        return cls(font, path)

    def _read_tables(self, path: Path) -> None:
        tt_font = TTFont(str(path), fontNumber=getattr(self.font, "index", 0), lazy=True)
        try:
            cmap = tt_font.getBestCmap()
            if cmap is not None:
                self._cmap = set(cmap.keys())
            units_per_em = tt_font["head"].unitsPerEm
            y_max = tt_font["head"].yMax
            scaled = math.ceil(y_max * self.size / units_per_em)
            self._max_ascent = max(self._ascent, scaled)
        finally:
            tt_font.close()

        logger.debug(
            f"Font tables for {path.name}: max_ascent={self._max_ascent}, "
            f"cmap={'n/a' if self._cmap is None else len(self._cmap)} codes"
        )

    @property
    def size(self) -> int:
        return int(self.font.size)

    @property
    def ascent(self) -> int:
        return self._ascent

    @property
    def descent(self) -> int:
        return self._descent

    @property
    def max_ascent(self) -> int:
        return self._max_ascent

    def is_drawable(self, char: str) -> bool:
        if unicodedata.category(char) == "Cc":
            return False
        if self._cmap is not None and ord(char) not in self._cmap:
            return False
        return True

    def advance_width(self, char: str) -> int:
        if not self.is_drawable(char):
            return 0
        return int(round(self.font.getlength(char)))

    def draw_char(
        self,
        draw: ImageDraw.ImageDraw,
        x: int,
        baseline: int,
        char: str,
        fill: Color,
    ) -> None:
        if not self.is_drawable(char):
            return
        draw.text((x, baseline), char, font=self.font, fill=fill, anchor="ls")
