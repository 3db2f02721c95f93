"""
Exclusion Filter - Single source of truth cho logic exclude path.

Dung chung cho structure listing VA task list trong target_expander, dam bao
hai output luon loc bang cung mot pattern set va cung mot rule.

Rule (theo thu tu, pattern dau tien khop thi dung):
1. path == pattern
2. path ket thuc bang pattern
3. pattern xuat hien o bat ky dau trong path (substring)
4. path bat dau bang pattern da normalize thanh "pattern/" (directory prefix)

Luu y: rule 3 rat rong - pattern 1 ky tu co the exclude gan nhu moi path.
Giu nguyen hanh vi nay, khong tu y thu hep.
"""

from typing import Iterable

from core.constants import PATH_SEPARATOR


def _as_directory_pattern(pattern: str) -> str:
    """Normalize pattern de ket thuc bang path separator."""
    if pattern.endswith(PATH_SEPARATOR):
        return pattern
    return pattern + PATH_SEPARATOR


def matches_pattern(path: str, pattern: str) -> bool:
    """
    Kiem tra mot path co khop voi mot pattern khong.

    Args:
        path: Path can kiem tra (relative hoac joined voi target)
        pattern: Exclusion pattern

    Returns:
        True neu path khop pattern theo bat ky rule nao
    """
    if path == pattern:
        return True
    if path.endswith(pattern):
        return True
    if pattern in path:
        return True
    return path.startswith(_as_directory_pattern(pattern))


def should_exclude(path: str, patterns: Iterable[str]) -> bool:
    """
    Kiem tra path co bi exclude boi pattern set khong.

    Pure function: khong I/O, patterns duoc danh gia theo thu tu va
    dung ngay khi gap pattern dau tien khop.

    Args:
        path: Path can kiem tra
        patterns: Danh sach exclusion patterns

    Returns:
        True neu path bi exclude
    """
    return any(matches_pattern(path, pattern) for pattern in patterns)
