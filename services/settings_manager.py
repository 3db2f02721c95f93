"""
Settings Manager - Quan ly load/save default options cua llmcat.

File: ~/.llmcat/settings.json

Chi cac field trong PERSISTED_FIELDS (threads, encoding, exclude,
fetch_timeout) duoc doc/ghi. CLI flags override gia tri load duoc.

API:
    settings = load_app_settings()  # -> AppSettings
    save_app_settings(settings)  # llmcat --save-defaults
"""

import json
import threading
from pathlib import Path
from typing import Any, Optional

from config import paths
from config.app_settings import AppSettings, PERSISTED_FIELDS
from core.logging_config import log_warning

# Thread-safe lock de tranh race condition khi save settings
_settings_lock = threading.Lock()


def _settings_path(path: Optional[Path]) -> Path:
    return path if path is not None else paths.SETTINGS_FILE


def _read_settings_file(path: Path) -> dict[str, Any]:
    """Doc settings.json; file thieu hoac hong -> dict rong."""
    try:
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                return data
            log_warning(f"[Settings] {path} is not a JSON object, ignoring")
    except (OSError, json.JSONDecodeError) as e:
        log_warning(f"[Settings] Cannot read {path}: {e}")
    return {}


def load_app_settings(path: Optional[Path] = None) -> AppSettings:
    """
    Load default options tu file va tra ve AppSettings.

    Keys khong thuoc PERSISTED_FIELDS bi bo qua. Neu file khong ton tai
    hoac loi, tra ve defaults.

    Args:
        path: Duong dan settings file (default ~/.llmcat/settings.json)

    Returns:
        AppSettings instance voi values tu file + defaults
    """
    saved = _read_settings_file(_settings_path(path))
    persisted = {k: v for k, v in saved.items() if k in PERSISTED_FIELDS}
    return AppSettings.from_dict(persisted)


def _save_unlocked(settings: AppSettings, path: Path) -> bool:
    """
    Save AppSettings ra file KHONG co lock.

    Merge voi existing data de bao toan extra keys.
    """
    try:
        existing = _read_settings_file(path)
        updated = {**existing, **settings.to_dict()}
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(updated, indent=2), encoding="utf-8")
        return True
    except OSError as e:
        log_warning(f"[Settings] Cannot write {path}: {e}")
        return False


def save_app_settings(settings: AppSettings, path: Optional[Path] = None) -> bool:
    """
    Save AppSettings ra file (thread-safe).

    Args:
        settings: AppSettings instance can luu
        path: Duong dan settings file

    Returns:
        True neu save thanh cong
    """
    with _settings_lock:
        return _save_unlocked(settings, _settings_path(path))
