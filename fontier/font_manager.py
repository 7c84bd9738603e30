"""
Font discovery for Fontier.

Finds font files in system directories and custom font paths, indexes them by
family name, and loads them as font resources for rasterization.
"""

import logging
import platform
from pathlib import Path
from typing import Dict, List, Optional

from .raster.font_source import PILFontResource

logger = logging.getLogger(__name__)

FONT_EXTENSIONS = (".ttf", ".otf", ".ttc")


class FontManager:
    """
    Manages font discovery and loading.

    Discovers fonts from:
    - System font directories (platform-specific)
    - Custom font directories from config
    """

    def __init__(self, custom_dirs: Optional[List[Path]] = None, include_system: bool = True):
        """
        Initialize the font manager.

        Args:
            custom_dirs: Additional directories to scan for fonts
            include_system: Whether to scan the platform font directories
        """
        self.custom_dirs = [Path(d) for d in (custom_dirs or [])]
        self.include_system = include_system
        self._families: Dict[str, List[Path]] = {}
        self.discover_fonts()

    def discover_fonts(self) -> None:
        """Discover fonts from system directories and custom paths."""
        font_dirs = self._get_system_font_dirs() if self.include_system else []
        font_dirs.extend(self.custom_dirs)

        discovered = 0
        for font_dir in font_dirs:
            if not font_dir.is_dir():
                continue

            logger.debug(f"Scanning font directory: {font_dir}")
            for font_file in sorted(font_dir.rglob("*")):
                if font_file.suffix.lower() not in FONT_EXTENSIONS:
                    continue
                self._add_font(font_file)
                discovered += 1

        logger.info(f"Font discovery complete. Found {discovered} fonts across {len(self._families)} families.")

    def _get_system_font_dirs(self) -> List[Path]:
        """Get platform-specific system font directories."""
        system = platform.system()

        if system == "Windows":
            return [
                Path("C:/Windows/Fonts"),
                Path.home() / "AppData/Local/Microsoft/Windows/Fonts"
            ]
        elif system == "Darwin":  # macOS
            return [
                Path("/System/Library/Fonts"),
                Path("/Library/Fonts"),
                Path.home() / "Library/Fonts"
            ]
        else:  # Linux and others
            return [
                Path("/usr/share/fonts"),
                Path("/usr/local/share/fonts"),
                Path.home() / ".fonts",
                Path.home() / ".local/share/fonts"
            ]

    def _add_font(self, font_path: Path) -> None:
        # Family name from file name: FamilyName-Weight.ttf
        family = font_path.stem.split("-")[0] or font_path.stem
        files = self._families.setdefault(family, [])
        if font_path not in files:
            files.append(font_path)

    def select_font_file(self, families: List[str]) -> Optional[Path]:
        """
        Select a font file by family priority.

        Args:
            families: Priority-ordered list of font family names

        Returns:
            Path to the font file, or None if no match found
        """
        for family in families:
            # Exact match
            if self._families.get(family):
                return self._families[family][0]

            family_lower = family.lower()

            # Case-insensitive match
            for name, files in self._families.items():
                if name.lower() == family_lower and files:
                    return files[0]

            # Fuzzy match
            for name, files in self._families.items():
                name_lower = name.lower()
                if (family_lower in name_lower or name_lower in family_lower) and files:
                    return files[0]

        return None

    def load_font(self, families: List[str], size_px: int) -> Optional[PILFontResource]:
        """
        Load a font resource by family and size.

        Returns:
            PILFontResource, or None if no family matched
        """
        font_path = self.select_font_file(families)
        if font_path is None:
            logger.warning(f"No font found for families {families}")
            return None
        return PILFontResource.from_file(font_path, size_px)

    def get_available_families(self) -> List[str]:
        """Get a list of all available font families."""
        return sorted(self._families.keys())
