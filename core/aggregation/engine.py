"""
Aggregation Engine - Ghep toan bo pipeline.

targets -> (tuan tu) structure listing + task list
        -> (song song) doc/fetch + dem token vao private fragments
        -> (dong bo, 1 lock) merge vao shared buffer + token total
        -> AggregateResult cho sink

Structure listing luon dung truoc content trong document vi duoc tao xong
truoc khi worker dau tien bat dau. Thu tu cac fragments khong duoc dam bao.
"""

import time
from typing import Optional, Sequence

from core.aggregation.result_aggregator import ResultAggregator
from core.aggregation.target_expander import expand_targets
from core.aggregation.task_processor import process_task
from core.aggregation.types import AggregateResult, FileTask, TokenCounter
from core.aggregation.worker_pool import run_worker_pool
from core.constants import MAX_FILE_BYTES, STRUCTURE_HEADER
from core.errors import InvalidConfigError, InvalidThreadCountError, NoTargetsError
from core.logging_config import log_info


def render_structure(listing: Sequence[str]) -> str:
    """
    Render structure section: header, moi dong listing, roi 1 dong trong.

    Args:
        listing: Cac dong structure listing

    Returns:
        Structure section (ket thuc bang blank line)
    """
    lines = [STRUCTURE_HEADER, *listing]
    return "\n".join(lines) + "\n\n"


def aggregate_targets(
    targets: Sequence[str],
    tokenizer: TokenCounter,
    *,
    exclude: Sequence[str] = (),
    threads: int = 4,
    fetch_timeout: Optional[float] = None,
    max_file_bytes: int = MAX_FILE_BYTES,
) -> AggregateResult:
    """
    Aggregate targets thanh 1 document va dem tong token.

    Loi fatal (khong co target, thread count sai) raise TRUOC khi dispatch
    bat ky task nao. Loi cua tung task duoc render inline va khong lam
    hong ca batch.

    Args:
        targets: Files, directories, URLs theo thu tu caller
        tokenizer: Tokenizer da initialize (inject tu services layer)
        exclude: Exclusion patterns
        threads: So worker threads toi da (>= 1)
        fetch_timeout: Timeout cho moi URL fetch, None = khong timeout
        max_file_bytes: Gioi han doc 1 file

    Returns:
        AggregateResult voi document va token total

    Raises:
        NoTargetsError: targets rong
        InvalidThreadCountError: threads < 1
        InvalidConfigError: fetch_timeout khong phai so duong
    """
    if not targets:
        raise NoTargetsError()
    if isinstance(threads, bool) or not isinstance(threads, int) or threads < 1:
        raise InvalidThreadCountError(threads)
    if fetch_timeout is not None and (
        isinstance(fetch_timeout, bool)
        or not isinstance(fetch_timeout, (int, float))
        or fetch_timeout <= 0
    ):
        raise InvalidConfigError(
            "fetch_timeout", fetch_timeout, "must be > 0 or None"
        )

    started = time.perf_counter()
    expansion = expand_targets(targets, exclude)
    aggregator = ResultAggregator(header=render_structure(expansion.listing))

    def handle(index: int, task: FileTask) -> None:
        outcome = process_task(
            task,
            tokenizer,
            fetch_timeout=fetch_timeout,
            max_file_bytes=max_file_bytes,
        )
        aggregator.merge(outcome)

    worker_count = run_worker_pool(expansion.tasks, threads, handle)

    result = AggregateResult(
        document=aggregator.getvalue(),
        total_tokens=aggregator.total_tokens,
        file_count=len(expansion.tasks),
        failed_count=aggregator.failed_count,
        worker_count=worker_count,
    )

    elapsed = time.perf_counter() - started
    log_info(
        f"[Engine] {aggregator.merged_count}/{result.file_count} tasks merged, "
        f"{result.failed_count} failed, "
        f"{result.total_tokens} tokens, {worker_count} workers, {elapsed:.2f}s"
    )
    return result
