"""
Result Aggregator - Shared buffer + token total, bao ve boi DUNG 1 lock.

Workers tich luy output vao private fragment (TaskOutcome) truoc, sau do
chi giu lock trong luc append vao buffer va cong token count. Lock khong
bao gio duoc giu trong I/O. Khong dung lock rieng cho tung task.
"""

import threading
from typing import List

from core.aggregation.types import TaskOutcome


class ResultAggregator:
    """
    Append-only buffer va token total dung chung giua cac workers.

    Buffer va counter chi bi thay doi ben trong self._lock.
    """

    def __init__(self, header: str = ""):
        self._lock = threading.Lock()
        self._parts: List[str] = [header] if header else []
        self._total_tokens = 0
        self._merged = 0
        self._failed = 0

    def merge(self, outcome: TaskOutcome) -> None:
        """
        Append fragment cua 1 task va cong token count (thread-safe).

        Args:
            outcome: Ket qua cua 1 task da xu ly xong
        """
        with self._lock:
            self._parts.append(outcome.fragment)
            self._total_tokens += outcome.token_count
            self._merged += 1
            if not outcome.ok:
                self._failed += 1

    @property
    def total_tokens(self) -> int:
        with self._lock:
            return self._total_tokens

    @property
    def merged_count(self) -> int:
        with self._lock:
            return self._merged

    @property
    def failed_count(self) -> int:
        with self._lock:
            return self._failed

    def getvalue(self) -> str:
        """Noi dung buffer hien tai. Goi sau khi tat ca workers da join."""
        with self._lock:
            return "".join(self._parts)
