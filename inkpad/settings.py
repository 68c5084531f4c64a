from __future__ import annotations
from pathlib import Path

APP_NAME = "inkpad"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

EDITOR_FONT_FAMILY = "Menlo"
EDITOR_FONT_SIZE = 14

HIGHLIGHT_DEBOUNCE_MS = 120
PREVIEW_DEBOUNCE_MS_DEFAULT = 350
# Preview debounce becomes adaptive: 150..650ms depending on document size
PREVIEW_DEBOUNCE_MS_MIN = 150
PREVIEW_DEBOUNCE_MS_MAX_ADD = 500
PREVIEW_DEBOUNCE_MS_CHARS_PER_STEP = 2000
