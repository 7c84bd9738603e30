"""Shared fixtures: a fake font with exact geometry and a tiny generated TrueType font."""

import sys
import os
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


class FakeFont:
    """
    FontResource that draws each known character as a solid block.

    ``boxes`` maps a character to (left, width, height): the block spans
    columns left..left+width-1 and the ``height`` rows directly above the
    baseline. ``advances`` maps a character to its reported advance width.
    """

    def __init__(self, size=16, ascent=12, descent=4, max_ascent=14, boxes=None, advances=None):
        self.size = size
        self.ascent = ascent
        self.descent = descent
        self.max_ascent = max_ascent
        self.boxes = boxes or {}
        self.advances = advances or {}
        self.draw_calls = 0

    def advance_width(self, char):
        return self.advances.get(char, 0)

    def draw_char(self, draw, x, baseline, char, fill):
        self.draw_calls += 1
        box = self.boxes.get(char)
        if box is None:
            return
        left, width, height = box
        draw.rectangle(
            (x + left, baseline - height, x + left + width - 1, baseline - 1),
            fill=fill,
        )


@pytest.fixture
def fake_font():
    """'A' is a 10x14 block advancing 9; space advances 5 with no ink; 'B' has ink but no advance."""
    return FakeFont(
        boxes={"A": (0, 10, 14), "B": (2, 4, 8), "C": (1, 3, 6)},
        advances={"A": 9, " ": 5, "C": 4},
    )


def build_test_ttf(path: Path) -> Path:
    """Write a minimal TrueType font covering 'A' (a rectangle) and space."""
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((550, 700))
    pen.lineTo((550, 0))
    pen.closePath()
    rect = pen.glyph()

    glyphs = {
        ".notdef": TTGlyphPen(None).glyph(),
        "space": TTGlyphPen(None).glyph(),
        "A": rect,
    }

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space", "A"])
    fb.setupCharacterMap({0x20: "space", 0x41: "A"})
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics({".notdef": (500, 0), "space": (250, 0), "A": (600, 50)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "TestSans", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def test_ttf(tmp_path):
    font_dir = tmp_path / "fonts"
    font_dir.mkdir()
    return build_test_ttf(font_dir / "TestSans-Regular.ttf")
