"""
Task Queue - Danh sach task da enumerate san voi atomic claim cursor.

Workers goi claim() lien tuc: moi lan claim la 1 fetch-and-increment tren
cursor. Index trong [0, N) -> worker xu ly task do; index >= N -> worker
thoat. Moi task duoc claim dung 1 lan, khong can requeue, va tu can bang
tai khi cac task co chi phi khac nhau (file lon, fetch cham).
"""

import threading
from typing import Optional, Sequence, Tuple

from core.aggregation.types import FileTask


class TaskQueue:
    """
    Task list co dinh + cursor dung chung giua cac workers.

    Lock chi bao ve 1 phep tang so nguyen, khong bao gio giu trong I/O.
    """

    def __init__(self, tasks: Sequence[FileTask]):
        self._tasks: Tuple[FileTask, ...] = tuple(tasks)
        self._cursor = 0
        self._cursor_lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._tasks)

    def _fetch_and_increment(self) -> int:
        with self._cursor_lock:
            index = self._cursor
            self._cursor += 1
            return index

    def claim(self) -> Optional[Tuple[int, FileTask]]:
        """
        Claim task tiep theo.

        Returns:
            (index, task) neu con task, None neu da het
        """
        index = self._fetch_and_increment()
        if index >= len(self._tasks):
            return None
        return index, self._tasks[index]
