#!/usr/bin/env python3
"""Tests for building bitmap fonts from a font resource."""

import sys

import pytest

from conftest import FakeFont
from fontier.raster import (
    BitmapFontBuilder,
    FontRasterMetrics,
    GlyphRasterizer,
    WidthPolicy,
    build_bitmap_font,
)
import fontier.raster.bitmap_font as bitmap_font_module


def test_null_font_is_rejected():
    with pytest.raises(ValueError):
        BitmapFontBuilder(None)


@pytest.mark.parametrize("char_count", [0, -1, -256])
def test_non_positive_char_count_is_rejected(fake_font, char_count):
    with pytest.raises(ValueError):
        BitmapFontBuilder(fake_font, char_count)


@pytest.mark.parametrize("char_count", [1, 11, 66, 256])
def test_glyph_sequence_has_requested_length(fake_font, char_count):
    font = build_bitmap_font(fake_font, char_count)

    assert len(font) == char_count
    assert font.char_count == char_count
    assert len(font.glyphs) == char_count


def test_letter_and_newline_scenario(fake_font):
    font = build_bitmap_font(fake_font, 128, WidthPolicy.MEASURED)

    assert font[65].width == 9
    assert font[65].height == fake_font.max_ascent + fake_font.descent
    assert font[10] is None


def test_metrics_come_from_font(fake_font):
    font = build_bitmap_font(fake_font, 128)

    assert font.metrics == FontRasterMetrics(baseline=14, ascent=12, descent=4, glyph_height=18)
    assert font.glyph_height >= font.ascent + font.descent


def test_present_glyphs_share_height(fake_font):
    font = build_bitmap_font(fake_font, 128, WidthPolicy.INK_SCAN)

    heights = {glyph.height for glyph in font if glyph is not None}
    assert heights == {font.glyph_height}


def test_present_codes(fake_font):
    font = build_bitmap_font(fake_font, 128)

    assert font.present_codes() == [ord(" "), ord("A"), ord("B"), ord("C")]


def test_glyph_lookup_by_character(fake_font):
    font = build_bitmap_font(fake_font, 128)

    assert font.glyph_for("A") is font[65]
    assert font.glyph_for("\n") is None
    # Outside the rendered range
    assert font.glyph_for("é") is None


def test_font_without_glyphs_has_zero_height():
    font = build_bitmap_font(FakeFont(), 32)

    assert font.present_codes() == []
    assert font.glyph_height == 0
    assert font.baseline == 14


def test_rasterizer_released_exactly_once(fake_font, monkeypatch):
    releases = []

    class CountingRasterizer(GlyphRasterizer):
        def release(self):
            releases.append(self)
            super().release()

    monkeypatch.setattr(bitmap_font_module, "GlyphRasterizer", CountingRasterizer)
    build_bitmap_font(fake_font, 64)

    assert len(releases) == 1
    assert releases[0].released


def test_rasterizer_released_when_rendering_fails(fake_font, monkeypatch):
    releases = []

    class FailingRasterizer(GlyphRasterizer):
        def render_glyph(self, code):
            if code == 3:
                raise RuntimeError("boom")
            return super().render_glyph(code)

        def release(self):
            releases.append(self)
            super().release()

    monkeypatch.setattr(bitmap_font_module, "GlyphRasterizer", FailingRasterizer)
    with pytest.raises(RuntimeError):
        build_bitmap_font(fake_font, 10)

    assert len(releases) == 1


def test_builder_accepts_policy_names(fake_font):
    builder = BitmapFontBuilder(fake_font, 70, "ink-scan")
    font = builder.build()

    assert builder.width_policy is WidthPolicy.INK_SCAN
    assert font[65].width == 11


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
