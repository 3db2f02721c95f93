"""
Application Paths - Duong dan app data cua llmcat

App data duoc luu tai ~/.llmcat/
- logs/llmcat.log : Log file (rotation)
- settings.json   : Default options (threads, encoding, exclude, fetch_timeout)

Bat debug logging khong can --verbose: LLMCAT_DEBUG=1 llmcat ...
"""

import os
from pathlib import Path

APP_NAME = "llmcat"
APP_VERSION = "1.0"

APP_DIR = Path.home() / f".{APP_NAME}"
LOG_DIR = APP_DIR / "logs"
SETTINGS_FILE = APP_DIR / "settings.json"

DEBUG_ENV_VAR = "LLMCAT_DEBUG"
DEBUG_MODE = os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes")
