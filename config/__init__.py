"""
Config Package - Chua cac constants va cau hinh cua ung dung

Bao gom:
- paths: Duong dan app data, log dir, debug flag
- encoding_config: Cac tokenizer encodings pho bien
- app_settings: Typed settings cho mot lan chay
"""

from config.encoding_config import (
    EncodingConfig,
    SUPPORTED_ENCODINGS,
    DEFAULT_ENCODING,
)
from config.app_settings import AppSettings

__all__ = [
    "AppSettings",
    "EncodingConfig",
    "SUPPORTED_ENCODINGS",
    "DEFAULT_ENCODING",
]
