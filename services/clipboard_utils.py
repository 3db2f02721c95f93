"""
Clipboard Utilities - Safe clipboard operations voi fallback

Thu lan luot: pyperclip -> wl-copy (Wayland) -> xclip -> xsel.
"""

import os
import sys
from typing import List, Sequence, Tuple

from core.logging_config import log_error, log_warning
from core.utils.subprocess_utils import pipe_to_command

# Cac clipboard command fallback tren Linux, theo thu tu uu tien
WAYLAND_COMMAND = ["wl-copy"]
X11_COMMANDS = [
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


def _fallback_commands() -> List[Sequence[str]]:
    commands: List[Sequence[str]] = []
    if os.environ.get("WAYLAND_DISPLAY"):
        commands.append(WAYLAND_COMMAND)
    commands.extend(X11_COMMANDS)
    return commands


def copy_to_clipboard(text: str) -> Tuple[bool, str]:
    """
    Copy text to clipboard voi error handling.

    Args:
        text: Text can copy

    Returns:
        Tuple (success: bool, message: str)
    """
    # Try pyperclip first
    try:
        import pyperclip

        pyperclip.copy(text)
        return True, "Copied to clipboard"
    except Exception as e:
        log_warning(f"pyperclip failed: {e}")

    if sys.platform.startswith("linux"):
        data = text.encode("utf-8")
        for command in _fallback_commands():
            try:
                if pipe_to_command(command, data) == 0:
                    return True, f"Copied to clipboard ({command[0]})"
                log_warning(f"{command[0]} exited with non-zero status")
            except FileNotFoundError:
                continue
            except OSError as e:
                log_warning(f"{command[0]} fallback failed: {e}")

    # All methods failed
    log_error("All clipboard methods failed")
    return False, "Clipboard not available. Install wl-clipboard, xclip or xsel on Linux."
