"""Constants and default values for Fontier."""

# Application metadata
APP_NAME = "Fontier"
VERSION = "0.4.0"
__version__ = VERSION
__author__ = "ShietStone"
__license__ = "MIT"
__copyright__ = "Copyright 2025 ShietStone"

# Rasterization defaults
DEFAULT_CHAR_COUNT = 256
DEFAULT_FONT_SIZE = 32
DEFAULT_WIDTH_POLICY = "measured"
WIDTH_POLICIES = ("measured", "ink-scan")

# The scratch canvas is this many times the nominal font size on each side
CANVAS_SCALE = 2

# Canvas colors (RGB)
BACKGROUND = (0, 0, 0)
INK = (255, 255, 255)

# Export naming
DEFAULT_EXPORT_STEM = "font"
ATLAS_METADATA_VERSION = 1
