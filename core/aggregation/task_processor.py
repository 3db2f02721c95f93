"""
Task Processor - Xu ly 1 FileTask thanh 1 private fragment.

Fragment = header 1 dong "[ <path> ]" (hoac "[ URL: <url> ]")
         + content (hoac loi inline)
         + blank-line terminator.

Moi loi cua task (doc file, fetch, file qua lon) duoc bat TAI DAY, render
thanh text inline va khong dong gop token. Khong loi nao cua task thoat ra
khoi worker.
"""

from typing import Optional

import requests

from core.aggregation.content_reader import fetch_url, read_file_bounded
from core.aggregation.types import FileTask, TaskOutcome, TokenCounter
from core.constants import (
    FETCH_ERROR_TEMPLATE,
    FILE_HEADER_TEMPLATE,
    FRAGMENT_TERMINATOR,
    MAX_FILE_BYTES,
    READ_ERROR_TEMPLATE,
    URL_HEADER_TEMPLATE,
)
from core.errors import TaskError
from core.logging_config import log_debug, log_warning


def format_header(task: FileTask) -> str:
    """Header 1 dong cho fragment cua task."""
    if task.is_url:
        return URL_HEADER_TEMPLATE.format(url=task.path)
    return FILE_HEADER_TEMPLATE.format(path=task.full_path)


def process_task(
    task: FileTask,
    tokenizer: TokenCounter,
    fetch_timeout: Optional[float] = None,
    max_file_bytes: int = MAX_FILE_BYTES,
) -> TaskOutcome:
    """
    Doc/fetch, dem token va format fragment cho 1 task.

    Args:
        task: Task can xu ly
        tokenizer: Tokenizer da initialize
        fetch_timeout: Timeout cho URL tasks (None = khong timeout)
        max_file_bytes: Gioi han doc file

    Returns:
        TaskOutcome - error khac None neu task loi
    """
    header = format_header(task)
    location = task.full_path

    try:
        if task.is_url:
            content = fetch_url(location, timeout=fetch_timeout)
        else:
            content = read_file_bounded(location, limit=max_file_bytes)
    except (OSError, TaskError, requests.RequestException) as e:
        template = FETCH_ERROR_TEMPLATE if task.is_url else READ_ERROR_TEMPLATE
        error = template.format(error=_describe_error(e))
        log_warning(f"[TaskProcessor] {location}: {error}")
        return TaskOutcome(
            task=task,
            fragment=f"{header}\n{error}{FRAGMENT_TERMINATOR}",
            token_count=0,
            error=error,
        )

    token_count = tokenizer.count_tokens(content)
    log_debug(f"[TaskProcessor] {location}: {len(content)} chars, {token_count} tokens")
    return TaskOutcome(
        task=task,
        fragment=f"{header}\n{content}{FRAGMENT_TERMINATOR}",
        token_count=token_count,
    )


def _describe_error(exc: BaseException) -> str:
    """Mo ta ngan gon loi de hien thi inline."""
    if isinstance(exc, OSError) and exc.strerror:
        return f"{type(exc).__name__}: {exc.strerror}"
    message = str(exc)
    if not message:
        return type(exc).__name__
    return message
