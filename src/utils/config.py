"""Application configuration constants."""

from __future__ import annotations

from pathlib import Path

APP_NAME = "SubtitleCardMaker"
APP_VERSION = "0.2.0"
ORG_NAME = "SubtitleCardMaker"

# User data (fonts, logs)
USER_DATA_DIR = Path.home() / ".subtitlecardmaker"
USER_FONTS_DIR = USER_DATA_DIR / "fonts"
USER_LOGS_DIR = USER_DATA_DIR / "logs"
FONT_FILE_EXTENSIONS = [".ttf", ".otf"]

# Persistent storage namespaces (QSettings keys)
STYLE_NAMESPACE = "subtitle-style"
OUTPUT_NAMESPACE = "subtitle-output"
PRESETS_NAMESPACE = "position-presets"
UI_LANGUAGE_KEY = "ui/language"

# Output naming
IMAGE_EXTENSION = ".png"
FILE_NUMBER_WIDTH = 3
DEFAULT_FILE_PREFIX = "sub_"

# Position presets
PRESET_SLOT_COUNT = 9

# Font weight tokens offered in the style form (CSS-style numeric strengths)
FONT_WEIGHTS = [
    ("Regular", "400"),
    ("Medium", "500"),
    ("SemiBold", "600"),
    ("Bold", "700"),
    ("ExtraBold", "800"),
]
DEFAULT_FONT_WEIGHT = "700"

# Style form ranges
FONT_SIZE_RANGE = (1, 400)
LETTER_SPACING_RANGE = (-50, 100)
PADDING_RANGE = (0, 400)
RADIUS_RANGE = (0, 400)
TEXT_OFFSET_RANGE = (-400, 400)

# UI
PANEL_WIDTH = 400
PANEL_HEIGHT = 700
PREVIEW_MAX_HEIGHT = 160
