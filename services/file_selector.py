"""
File Selector - Chon files interactive bang fzf.

Liet ke moi file duoi thu muc hien tai, dua cho `fzf -m` va tra ve cac
paths duoc chon theo thu tu fzf in ra.
"""

import os
from typing import List, Optional, Sequence

from core.aggregation.target_expander import walk_directory
from core.errors import FileSelectionError
from core.logging_config import log_info
from core.utils.subprocess_utils import (
    is_command_available,
    run_with_input,
    split_output_lines,
)

FZF_COMMAND = ["fzf", "-m", "--height=40%", "--border", "--preview", "cat {}"]

# fzf: 1 = khong co match, 130 = user nhan Esc/Ctrl-C
FZF_EMPTY_SELECTION_CODES = (1, 130)


def list_candidate_files(root: str = ".", exclude: Sequence[str] = ()) -> List[str]:
    """
    Liet ke moi file duoi root (relative path, thu tu duyet depth-first).

    Args:
        root: Thu muc goc
        exclude: Exclusion patterns (cung rule voi aggregation)

    Returns:
        Danh sach relative paths cua cac files
    """
    return [
        rel_path
        for rel_path, is_dir in walk_directory(root, exclude)
        if not is_dir and os.path.isfile(os.path.join(root, rel_path))
    ]


def select_files(
    root: str = ".",
    exclude: Sequence[str] = (),
    command: Optional[Sequence[str]] = None,
) -> List[str]:
    """
    Mo fzf de user chon files.

    Args:
        root: Thu muc lay danh sach file
        exclude: Exclusion patterns
        command: fzf command (override cho tests)

    Returns:
        Danh sach paths duoc chon (rong neu user huy)

    Raises:
        FileSelectionError: fzf khong duoc cai dat hoac thoat voi loi
    """
    command = list(command) if command is not None else FZF_COMMAND
    if not is_command_available(command[0]):
        raise FileSelectionError(f"{command[0]} is not installed or not in PATH.")

    candidates = list_candidate_files(root, exclude)
    returncode, output = run_with_input(command, "\n".join(candidates) + "\n")
    if returncode in FZF_EMPTY_SELECTION_CODES:
        log_info(f"[FileSelector] Nothing selected (exit {returncode})")
        return []
    if returncode != 0:
        raise FileSelectionError(f"{command[0]} exited with status {returncode}")

    selected = split_output_lines(output)
    if root not in (".", ""):
        selected = [os.path.join(root, path) for path in selected]

    log_info(f"[FileSelector] Selected {len(selected)} of {len(candidates)} files")
    return selected
