"""
Writing bitmap fonts and atlases to disk.

Atlases are saved as a PNG plus a JSON sidecar with the same stem holding the
metrics and the per-code placement arrays. Individual glyphs can also be
written as one PNG per code with a manifest.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from PIL import Image

from ..constants import ATLAS_METADATA_VERSION
from .atlas import AtlasBitmapFont
from .bitmap_font import BitmapFont, FontRasterMetrics

logger = logging.getLogger(__name__)


def atlas_metadata(atlas: AtlasBitmapFont) -> Dict[str, Any]:
    """Build the JSON-serializable description of an atlas."""
    return {
        "version": ATLAS_METADATA_VERSION,
        "width": atlas.width,
        "glyph_height": atlas.glyph_height,
        "baseline": atlas.metrics.baseline,
        "ascent": atlas.metrics.ascent,
        "descent": atlas.metrics.descent,
        "glyph_x": list(atlas.glyph_x),
        "glyph_width": list(atlas.glyph_width),
    }


def export_atlas(
    atlas: AtlasBitmapFont,
    output_dir: Union[str, Path],
    stem: str,
) -> Tuple[Path, Path]:
    """
    Save an atlas image and its metadata.

    Args:
        atlas: Atlas to save
        output_dir: Directory to write into (created if missing)
        stem: Base file name without extension

    Returns:
        Tuple of (png_path, json_path)
    """
    if atlas.width == 0 or atlas.glyph_height == 0:
        # PNG can not encode an empty image
        raise ValueError("Atlas is empty; nothing to export")

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    png_path = output_dir / f"{stem}.png"
    json_path = output_dir / f"{stem}.json"

    atlas.bitmap.save(png_path)
    json_path.write_text(json.dumps(atlas_metadata(atlas), indent=2), encoding="utf-8")

    logger.info(f"Wrote atlas {png_path} ({atlas.width}x{atlas.glyph_height}) and {json_path.name}")
    return png_path, json_path


def load_atlas(png_path: Union[str, Path]) -> AtlasBitmapFont:
    """
    Load an atlas written by ``export_atlas``.

    The JSON sidecar is expected next to the PNG with the same stem.
    """
    png_path = Path(png_path)
    json_path = png_path.with_suffix(".json")
    if not json_path.exists():
        raise FileNotFoundError(f"Atlas metadata not found at {json_path}")

    meta = json.loads(json_path.read_text(encoding="utf-8"))
    glyph_x = meta.get("glyph_x")
    glyph_width = meta.get("glyph_width")
    if not isinstance(glyph_x, list) or not isinstance(glyph_width, list):
        raise ValueError(f"Invalid atlas metadata in {json_path}")
    if len(glyph_x) != len(glyph_width):
        raise ValueError(
            f"Atlas metadata arrays differ in length ({len(glyph_x)} vs {len(glyph_width)})"
        )

    with Image.open(png_path) as image:
        bitmap = image.convert("RGB")

    if bitmap.width != sum(glyph_width):
        raise ValueError(
            f"Atlas {png_path.name} is {bitmap.width}px wide but glyph widths sum to {sum(glyph_width)}"
        )

    metrics = FontRasterMetrics(
        baseline=int(meta.get("baseline", 0)),
        ascent=int(meta.get("ascent", 0)),
        descent=int(meta.get("descent", 0)),
        glyph_height=bitmap.height,
    )
    return AtlasBitmapFont(
        bitmap=bitmap,
        glyph_x=tuple(int(x) for x in glyph_x),
        glyph_width=tuple(int(w) for w in glyph_width),
        metrics=metrics,
    )


def export_glyphs(
    bitmap_font: BitmapFont,
    output_dir: Union[str, Path],
    stem: str,
) -> Path:
    """
    Save every present glyph as its own PNG plus a JSON manifest.

    Returns:
        Path to the manifest
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    entries: List[Dict[str, Any]] = []
    for code, glyph in enumerate(bitmap_font.glyphs):
        if glyph is None:
            continue
        glyph_path = output_dir / f"{stem}_{code:04x}.png"
        glyph.image.save(glyph_path)
        entries.append({
            "code": code,
            "width": glyph.width,
            "height": glyph.height,
            "file": glyph_path.name,
        })

    manifest = {
        "char_count": bitmap_font.char_count,
        "baseline": bitmap_font.baseline,
        "ascent": bitmap_font.ascent,
        "descent": bitmap_font.descent,
        "glyph_height": bitmap_font.glyph_height,
        "glyphs": entries,
    }
    manifest_path = output_dir / f"{stem}_glyphs.json"
    manifest_path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")

    logger.info(f"Wrote {len(entries)} glyph images to {output_dir}")
    return manifest_path
