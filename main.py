#!/usr/bin/env python3
"""
Fontier - Bitmap Font Generator

Renders a TrueType/OpenType font into fixed-height glyph images and packs them
into a single atlas image with per-glyph placement metadata.
"""

import sys

from fontier.cli import main


if __name__ == "__main__":
    sys.exit(main())
