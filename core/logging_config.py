"""
Logging Configuration - Centralized logging setup cho llmcat

Log file duoc luu tai ~/.llmcat/logs/llmcat.log

- Console (stderr): chi WARNING tro len, DEBUG khi --verbose hoac LLMCAT_DEBUG
  (stdout danh rieng cho document khi --print)
- File: INFO tro len, rotation 5 x 2MB, ghi qua MemoryHandler de giam I/O
- Moi dong log trong file co ten thread (llmcat-worker_N) de theo doi workers
"""

import logging
import logging.handlers
import sys
from typing import Optional

from config.paths import LOG_DIR, DEBUG_MODE

_logger: Optional[logging.Logger] = None

LOGGER_NAME = "llmcat"
LOG_FILE_NAME = "llmcat.log"

MAX_LOG_SIZE = 2 * 1024 * 1024  # 2MB per file
MAX_LOG_FILES = 5
BUFFER_CAPACITY = 100  # records

CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(threadName)s: %(message)s"


def _file_level(debug: bool) -> int:
    return logging.DEBUG if debug else logging.INFO


def _console_level(debug: bool) -> int:
    return logging.DEBUG if debug else logging.WARNING


def _build_console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_console_level(DEBUG_MODE))
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _build_file_handler() -> logging.Handler:
    """
    RotatingFileHandler boc trong MemoryHandler.

    MemoryHandler flush khi du BUFFER_CAPACITY records, khi co ERROR,
    hoac khi flush_logs() duoc goi truoc luc exit.

    Raises:
        OSError: Khong tao duoc log directory/file
    """
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    rotating = logging.handlers.RotatingFileHandler(
        LOG_DIR / LOG_FILE_NAME,
        maxBytes=MAX_LOG_SIZE,
        backupCount=MAX_LOG_FILES,
        encoding="utf-8",
    )
    rotating.setLevel(_file_level(DEBUG_MODE))
    rotating.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    buffered = logging.handlers.MemoryHandler(
        capacity=BUFFER_CAPACITY,
        flushLevel=logging.ERROR,
        target=rotating,
    )
    buffered.setLevel(_file_level(DEBUG_MODE))
    return buffered


def get_logger() -> logging.Logger:
    """
    Get hoac tao logger singleton.

    Returns:
        Logger "llmcat" da gan console handler va (neu duoc) file handler
    """
    global _logger

    if _logger is not None:
        return _logger

    _logger = logging.getLogger(LOGGER_NAME)
    _logger.setLevel(_file_level(DEBUG_MODE))
    _logger.propagate = False

    if _logger.handlers:
        return _logger

    _logger.addHandler(_build_console_handler())
    try:
        _logger.addHandler(_build_file_handler())
    except OSError as e:
        # Van chay duoc chi voi console
        _logger.warning(f"Could not create log file: {e}")

    return _logger


def flush_logs() -> None:
    """Flush buffered logs xuong disk. Goi truoc khi exit."""
    if _logger is None:
        return
    for handler in _logger.handlers:
        try:
            handler.flush()
        except (OSError, ValueError):
            pass  # stream da dong luc shutdown


def set_debug_mode(enabled: bool) -> None:
    """
    Bat/tat debug logging luc runtime (--verbose).

    Args:
        enabled: True de log DEBUG ra ca console va file
    """
    global DEBUG_MODE
    DEBUG_MODE = enabled

    logger = get_logger()
    logger.setLevel(_file_level(enabled))
    for handler in logger.handlers:
        if isinstance(handler, logging.handlers.MemoryHandler):
            handler.setLevel(_file_level(enabled))
            if handler.target is not None:
                handler.target.setLevel(_file_level(enabled))
        else:
            handler.setLevel(_console_level(enabled))


def log_error(message: str, exc: Optional[BaseException] = None):
    """Log error voi optional exception details"""
    logger = get_logger()
    if exc:
        logger.error(f"{message}: {exc}", exc_info=DEBUG_MODE)
    else:
        logger.error(message)


def log_warning(message: str):
    get_logger().warning(message)


def log_info(message: str):
    get_logger().info(message)


def log_debug(message: str):
    """Log debug - chi ghi khi debug mode bat"""
    if DEBUG_MODE:
        get_logger().debug(message)
