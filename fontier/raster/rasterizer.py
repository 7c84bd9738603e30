"""
Single-glyph rasterization.

This module renders one character at a time into a reusable scratch canvas
and crops the result to the glyph's width, detecting the ink-occupied columns
of the canvas where the width has to come from the pixels themselves.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw

from ..constants import BACKGROUND, CANVAS_SCALE, INK
from .font_source import CharCode, FontResource, as_char

logger = logging.getLogger(__name__)


class WidthPolicy(Enum):
    """How the rasterizer decides a glyph's width."""
    # Font-reported advance width, falling back to the ink scan when the advance is 0
    MEASURED = "measured"
    # Ink-bounding computation only
    INK_SCAN = "ink-scan"

    @classmethod
    def parse(cls, value: "str | WidthPolicy") -> "WidthPolicy":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        for policy in cls:
            if policy.value == normalized:
                return policy
        raise ValueError(
            f"Unknown width policy {value!r}; expected one of "
            f"{', '.join(p.value for p in cls)}"
        )


@dataclass(frozen=True)
class Glyph:
    """A rendered character, cropped to its width and the font's glyph height."""

    image: Image.Image
    width: int
    height: int

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)


@dataclass(frozen=True)
class GlyphMeasurement:
    """Raw widths taken from one rendering of a character."""

    # Advance width reported by the font
    measured_width: int

    # One past the rightmost column containing ink, 0 if blank
    ink_width: int

    # One past the leftmost column containing ink, 0 if blank
    ink_lead_margin: int


class GlyphRasterizer:
    """
    Renders individual characters of one font.

    The rasterizer owns a square scratch canvas twice the font's nominal size
    on each side. Every ``render_glyph`` call clears and redraws that canvas,
    so an instance must not be shared between concurrent callers; use one
    rasterizer per worker. Call ``release()`` (or use the instance as a
    context manager) when done.
    """

    def __init__(self, font: FontResource, width_policy: WidthPolicy = WidthPolicy.MEASURED):
        """
        Initialize the rasterizer.

        Args:
            font: Font resource to render with
            width_policy: How glyph widths are resolved
        """
        if font is None:
            raise ValueError("The font is null")

        self.font = font
        self.width_policy = WidthPolicy.parse(width_policy)

        side = max(int(font.size) * CANVAS_SCALE, 1)
        self._canvas: Optional[Image.Image] = Image.new("RGB", (side, side), BACKGROUND)
        self._draw: Optional[ImageDraw.ImageDraw] = ImageDraw.Draw(self._canvas)

        self._baseline = font.max_ascent
        self._ascent = font.ascent
        self._descent = font.descent
        self._sub_image_height = font.max_ascent + font.descent
        self._released = False

        logger.debug(
            f"Rasterizer ready: canvas={side}x{side}, baseline={self._baseline}, "
            f"glyph_height={self._sub_image_height}, policy={self.width_policy.value}"
        )

    def __enter__(self) -> "GlyphRasterizer":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if not self._released:
            self.release()
        return False

    @property
    def released(self) -> bool:
        return self._released

    @property
    def canvas_size(self) -> int:
        """Side length of the square scratch canvas."""
        if self._canvas is None:
            return 0
        return self._canvas.width

    @property
    def baseline(self) -> int:
        """Distance from the top of a glyph image to the baseline, 0 once released."""
        return 0 if self._released else self._baseline

    @property
    def ascent(self) -> int:
        """Default ascent of the font relative to the baseline, 0 once released."""
        return 0 if self._released else self._ascent

    @property
    def descent(self) -> int:
        """Default descent of the font relative to the baseline, 0 once released."""
        return 0 if self._released else self._descent

    @property
    def glyph_height(self) -> int:
        """Height of every glyph image (max ascent plus descent), 0 once released."""
        return 0 if self._released else self._sub_image_height

    def render_glyph(self, code: CharCode) -> Optional[Glyph]:
        """
        Render one character and crop it to its width.

        Args:
            code: Character code or one-character string

        Returns:
            The rendered Glyph, or None if the character is not renderable
            (for example the newline character)

        Raises:
            RuntimeError: If the rasterizer was released
        """
        char, measurement = self._render(code)
        width = self._resolve_width(measurement)

        if width == 0:
            logger.debug(f"Code {ord(char)} is not renderable")
            return None

        image = self._canvas.crop((0, 0, width, self._sub_image_height))
        return Glyph(image=image, width=width, height=self._sub_image_height)

    def measure(self, code: CharCode) -> GlyphMeasurement:
        """Render one character and return the raw widths without cropping."""
        return self._render(code)[1]

    def release(self) -> None:
        """
        Release the scratch canvas. The rasterizer can not be used afterwards.

        Raises:
            RuntimeError: If the rasterizer was already released
        """
        if self._released:
            raise RuntimeError("The rasterizer was already released")

        self._draw = None
        self._canvas.close()
        self._canvas = None
        self._released = True

    def _render(self, code: CharCode) -> Tuple[str, GlyphMeasurement]:
        if self._released:
            raise RuntimeError("The rasterizer was released")

        char = as_char(code)
        side = self._canvas.width

        self._draw.rectangle((0, 0, side - 1, side - 1), fill=BACKGROUND)
        self.font.draw_char(self._draw, 0, self._baseline, char, INK)

        ink_width, ink_lead_margin = self._scan_ink_columns()
        measurement = GlyphMeasurement(
            measured_width=int(self.font.advance_width(char)),
            ink_width=ink_width,
            ink_lead_margin=ink_lead_margin,
        )
        return char, measurement

    def _scan_ink_columns(self) -> Tuple[int, int]:
        """Return (one past the rightmost, one past the leftmost) ink column."""
        red = np.asarray(self._canvas)[:, :, 0]
        columns = np.flatnonzero((red > 0).any(axis=0))
        if columns.size == 0:
            return 0, 0
        return int(columns[-1]) + 1, int(columns[0]) + 1

    def _resolve_width(self, measurement: GlyphMeasurement) -> int:
        if self.width_policy is WidthPolicy.INK_SCAN:
            # Lead margin is added on top of the rightmost ink column, not subtracted
            return min(measurement.ink_width + measurement.ink_lead_margin, self._canvas.width)

        if measurement.measured_width > 0:
            return measurement.measured_width
        return measurement.ink_width
