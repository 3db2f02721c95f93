"""
Subprocess Utilities - Chay external tools (clipboard, fzf) qua stdin/stdout.

Usage:
    from core.utils.subprocess_utils import pipe_to_command

    returncode = pipe_to_command(["xclip", "-selection", "clipboard"], data)
"""

import shutil
import subprocess
from typing import List, Sequence, Tuple


def is_command_available(name: str) -> bool:
    """Kiem tra executable co trong PATH khong (tuong duong `which`)."""
    return shutil.which(name) is not None


def pipe_to_command(command: Sequence[str], data: bytes) -> int:
    """
    Ghi data vao stdin cua command, doi command ket thuc.

    Args:
        command: Command + arguments
        data: Bytes ghi vao stdin

    Returns:
        Exit code cua command

    Raises:
        FileNotFoundError: Command khong ton tai
    """
    process = subprocess.Popen(
        list(command),
        stdin=subprocess.PIPE,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.PIPE,
    )
    process.communicate(data)
    return process.returncode


def run_with_input(command: Sequence[str], input_text: str) -> Tuple[int, str]:
    """
    Chay command voi input_text tren stdin, thu stdout.

    stderr va terminal khong bi chuyen huong de tool interactive (fzf)
    van ve UI tren /dev/tty.

    Args:
        command: Command + arguments
        input_text: Text ghi vao stdin

    Returns:
        (exit code, stdout)
    """
    result = subprocess.run(
        list(command),
        input=input_text,
        stdout=subprocess.PIPE,
        text=True,
    )
    return result.returncode, result.stdout


def split_output_lines(output: str) -> List[str]:
    """Tach stdout thanh cac dong khong rong, da trim."""
    return [line.strip() for line in output.splitlines() if line.strip()]
