"""
Target Expander - Bien danh sach targets thanh structure listing + task list.

Chay single-threaded, TRUOC khi bat ky worker nao bat dau. Structure listing
la phan duy nhat cua document co thu tu xac dinh, nen thu tu targets va thu
tu duyet thu muc duoc giu nguyen.

Listing va tasks duoc tao trong CUNG mot lan duyet voi CUNG mot exclusion
check, nen hai output khong the lech nhau.
"""

import os
import stat
from typing import Iterator, List, Sequence, Tuple

from core.aggregation.types import ExpansionResult, FileTask
from core.constants import PATH_SEPARATOR, URL_LISTING_PREFIX, URL_SCHEMES
from core.exclusion import should_exclude
from core.logging_config import log_debug, log_warning


def is_url(target: str) -> bool:
    """Target co phai URL (http:// hoac https://) khong."""
    return target.startswith(URL_SCHEMES)


def expand_targets(
    targets: Sequence[str], exclude: Sequence[str] = ()
) -> ExpansionResult:
    """
    Expand targets thanh structure listing va ordered task list.

    - URL: 1 dong listing "URL: <url>" + 1 task, khong check filesystem
      hay exclusion
    - Target local bi exclude: bo qua hoan toan
    - Target khong stat duoc: ghi nguyen van vao listing, khong tao task
    - Directory: listing "<target>/" roi duyet depth-first, moi entry phai
      qua exclusion check 2 lan (joined path va relative path)
    - File: 1 dong listing + 1 full-path task

    Args:
        targets: Danh sach targets theo thu tu caller
        exclude: Exclusion patterns

    Returns:
        ExpansionResult chua listing va tasks
    """
    result = ExpansionResult()

    for target in targets:
        if is_url(target):
            result.listing.append(f"{URL_LISTING_PREFIX}{target}")
            result.tasks.append(
                FileTask(path=target, origin_target=target, is_url=True)
            )
            continue

        if should_exclude(target, exclude):
            log_debug(f"[TargetExpander] Excluded target: {target}")
            continue

        try:
            target_stat = os.stat(target)
        except OSError as e:
            log_warning(f"[TargetExpander] Cannot stat '{target}': {e}")
            result.listing.append(target)
            continue

        if stat.S_ISDIR(target_stat.st_mode):
            _expand_directory(target, exclude, result)
        elif stat.S_ISREG(target_stat.st_mode):
            result.listing.append(target)
            result.tasks.append(
                FileTask(path=target, origin_target=target, is_full_path=True)
            )
        else:
            # Socket, FIFO, device...: chi liet ke
            result.listing.append(target)

    log_debug(
        f"[TargetExpander] {len(targets)} targets -> "
        f"{len(result.listing)} listing lines, {len(result.tasks)} tasks"
    )
    return result


def _expand_directory(
    target: str, exclude: Sequence[str], result: ExpansionResult
) -> None:
    """Them directory target va cac descendants duoc giu lai vao result."""
    result.listing.append(_with_trailing_separator(target))

    for rel_path, is_dir in walk_directory(target, exclude):
        joined = os.path.join(target, rel_path)
        if is_dir:
            # Ca directory symlink: liet ke voi "/", khong follow, khong task
            result.listing.append(joined + PATH_SEPARATOR)
            continue

        result.listing.append(joined)
        if os.path.isfile(joined):
            result.tasks.append(
                FileTask(path=rel_path, origin_target=target, is_full_path=False)
            )


def walk_directory(
    target: str, exclude: Sequence[str] = ()
) -> Iterator[Tuple[str, bool]]:
    """
    Duyet depth-first (pre-order) mot directory, tra ve cac entries duoc giu lai.

    Entries trong cung thu muc duoc sort: directories truoc, sau do theo
    ten (case-insensitive).
    Directory bi exclude khong duoc duyet vao: moi descendant cua no deu
    chua cung pattern substring nen cung se bi exclude.
    Symlink toi directory duoc tra ve voi is_dir=True nhung khong duoc
    follow (khong co vong lap, khong co descendant).

    Args:
        target: Directory goc
        exclude: Exclusion patterns

    Yields:
        (relative_path, is_dir) - relative_path dung "/" lam separator
    """
    yield from _walk(target, "", exclude)


def _walk(
    target: str, rel_dir: str, exclude: Sequence[str]
) -> Iterator[Tuple[str, bool]]:
    current = os.path.join(target, rel_dir) if rel_dir else target
    try:
        entries = _sorted_entries(current)
    except OSError as e:
        log_warning(f"[TargetExpander] Cannot read directory '{current}': {e}")
        return

    for name, is_dir, is_link in entries:
        rel_path = f"{rel_dir}{PATH_SEPARATOR}{name}" if rel_dir else name
        joined = os.path.join(target, rel_path)

        if should_exclude(joined, exclude) or should_exclude(rel_path, exclude):
            continue

        yield rel_path, is_dir
        if is_dir and not is_link:
            yield from _walk(target, rel_path, exclude)
        elif is_dir:
            log_debug(f"[TargetExpander] Not following directory symlink: {joined}")


def _sorted_entries(directory: str) -> List[Tuple[str, bool, bool]]:
    """
    Liet ke (name, is_dir, is_link) trong directory, directories truoc
    roi theo ten. is_dir tinh ca symlink tro toi directory.
    """
    with os.scandir(directory) as it:
        entries = [(entry.name, *_entry_kind(entry)) for entry in it]
    entries.sort(key=lambda e: (not e[1], e[0].lower()))
    return entries


def _entry_kind(entry: os.DirEntry) -> Tuple[bool, bool]:
    """(is_dir, is_link). Symlink hong -> (False, True)."""
    try:
        is_link = entry.is_symlink()
        return entry.is_dir(follow_symlinks=True), is_link
    except OSError:
        return False, False


def _with_trailing_separator(path: str) -> str:
    if path.endswith(PATH_SEPARATOR):
        return path
    return path + PATH_SEPARATOR
