"""
Worker Pool - N workers keo task tu TaskQueue.

Contract: N task da enumerate, T threads yeu cau -> W = min(T, N).
- W == 0: tra ve ngay, khong xu ly gi
- W == 1 hoac N == 1: xu ly tuan tu tren thread hien tai, khong tao pool
- W > 1: W workers tren ThreadPoolExecutor, dung chung 1 cursor

Parent doi TAT CA workers xong moi tra ve (khong cancel, khong timeout).
"""

from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Sequence

from core.aggregation.task_queue import TaskQueue
from core.aggregation.types import FileTask
from core.logging_config import log_debug

# handler(index, task) - xu ly va merge 1 task
TaskHandler = Callable[[int, FileTask], None]

WORKER_NAME_PREFIX = "llmcat-worker"


def effective_worker_count(requested_threads: int, task_count: int) -> int:
    """
    So workers thuc su can dung.

    Args:
        requested_threads: So threads user yeu cau
        task_count: So tasks

    Returns:
        min(requested_threads, task_count), khong am
    """
    return max(0, min(requested_threads, task_count))


def _drain(queue: TaskQueue, handle: TaskHandler) -> int:
    """Vong lap cua 1 worker: claim cho den khi het task."""
    processed = 0
    while True:
        claimed = queue.claim()
        if claimed is None:
            return processed
        index, task = claimed
        handle(index, task)
        processed += 1


def run_worker_pool(
    tasks: Sequence[FileTask],
    requested_threads: int,
    handle: TaskHandler,
) -> int:
    """
    Xu ly moi task dung 1 lan bang W workers.

    Args:
        tasks: Danh sach task da enumerate san
        requested_threads: So threads yeu cau (T)
        handle: Callback xu ly 1 task; loi cua task phai duoc xu ly ben trong

    Returns:
        So workers da dung (0, 1 hoac W)

    Raises:
        Exception: Loi bat ngo tu handler, raise lai sau khi moi worker ket thuc
    """
    task_count = len(tasks)
    workers = effective_worker_count(requested_threads, task_count)

    if workers == 0:
        return 0

    queue = TaskQueue(tasks)

    if workers == 1 or task_count == 1:
        _drain(queue, handle)
        return 1

    log_debug(f"[WorkerPool] Spawning {workers} workers for {task_count} tasks")

    with ThreadPoolExecutor(
        max_workers=workers, thread_name_prefix=WORKER_NAME_PREFIX
    ) as executor:
        futures = [executor.submit(_drain, queue, handle) for _ in range(workers)]
        wait(futures)

    processed = 0
    for future in futures:
        # result() raise lai exception cua worker (neu co)
        processed += future.result()

    log_debug(f"[WorkerPool] {workers} workers processed {processed} tasks")
    return workers
