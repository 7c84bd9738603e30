"""Configuration management for Fontier."""

import json
import logging
import os
import platform
from pathlib import Path
from typing import Optional, Dict, Any, List

from .constants import (
    APP_NAME,
    DEFAULT_CHAR_COUNT,
    DEFAULT_FONT_SIZE,
    DEFAULT_WIDTH_POLICY,
)
from .raster.rasterizer import WidthPolicy

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages application configuration and persistence."""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_dir: Directory holding config.json (default: platform config dir)
        """
        self.config_dir = Path(config_dir) if config_dir is not None else self._get_config_dir()
        self.config_path = self.config_dir / "config.json"
        self.config = self._load_config()

    def _get_config_dir(self) -> Path:
        """Get platform-specific configuration directory."""
        system = platform.system()
        home = Path.home()

        if system == "Windows":
            base = Path(os.getenv("APPDATA", home / "AppData" / "Roaming"))
            return base / APP_NAME
        elif system == "Darwin":  # macOS
            return home / "Library" / "Application Support" / APP_NAME
        else:  # Linux/Unix
            base = Path(os.getenv("XDG_CONFIG_HOME", home / ".config"))
            return base / APP_NAME

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from disk."""
        if self.config_path.exists():
            try:
                data = json.loads(self.config_path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Ignoring unreadable config {self.config_path}: {e}")
                return {}
            if isinstance(data, dict):
                return data
            logger.warning(f"Ignoring config {self.config_path}: expected a JSON object")
        return {}

    def save(self) -> None:
        """Save current configuration to disk."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(
            json.dumps(self.config, indent=2),
            encoding="utf-8"
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value."""
        self.config[key] = value

    def get_font_size(self) -> int:
        """Get the default font size in pixels."""
        return self._get_positive_int("font_size", DEFAULT_FONT_SIZE)

    def get_char_count(self) -> int:
        """Get the default number of character codes to render."""
        return self._get_positive_int("char_count", DEFAULT_CHAR_COUNT)

    def get_width_policy(self) -> WidthPolicy:
        """Get the default width policy."""
        value = self.config.get("width_policy", DEFAULT_WIDTH_POLICY)
        try:
            return WidthPolicy.parse(value)
        except ValueError:
            logger.warning(f"Unknown width_policy {value!r} in config, using {DEFAULT_WIDTH_POLICY}")
            return WidthPolicy.parse(DEFAULT_WIDTH_POLICY)

    def get_output_dir(self) -> Path:
        """Get the default output directory for exported fonts."""
        value = self.config.get("output_dir")
        if value:
            return Path(value).expanduser()
        return Path.cwd() / "bitmap_fonts"

    def get_font_dirs(self) -> List[Path]:
        """Get extra directories to search for fonts."""
        dirs = self.config.get("font_dirs", [])
        if not isinstance(dirs, list):
            return []
        return [Path(d).expanduser() for d in dirs]

    def _get_positive_int(self, key: str, default: int) -> int:
        value = self.config.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            logger.warning(f"Invalid {key} {value!r} in config, using {default}")
            return default
        return value
