"""
Aggregation Types - Cac kieu du lieu dung chung cho aggregation pipeline.

Cung cap:
- TokenCounter: Protocol cho tokenizer duoc inject
- FileTask: 1 don vi cong viec (1 file hoac 1 URL)
- ExpansionResult: Output cua target expansion (listing + tasks)
- TaskOutcome: Ket qua xu ly 1 task (private fragment + token count)
- AggregateResult: Document cuoi cung ban giao cho sink
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional, Protocol


class TokenCounter(Protocol):
    """
    Capability dem token ma engine can.

    Core chi phu thuoc vao contract nay; implementation (tiktoken) nam o
    services layer va duoc inject qua parameters.
    """

    def count_tokens(self, text: str) -> int: ...


@dataclass(frozen=True, slots=True)
class FileTask:
    """
    Dai dien cho 1 file hoac 1 URL can aggregate.

    Immutable (frozen) vi duoc chia se giua cac worker threads.
    Moi task duoc claim dung 1 lan boi dung 1 worker.

    Attributes:
        path: Duong dan file (relative voi origin_target neu is_full_path=False),
            hoac URL neu is_url=True
        origin_target: Target goc sinh ra task nay
        is_full_path: True neu path da la duong dan day du
        is_url: True neu task la URL
    """

    path: str
    origin_target: str
    is_full_path: bool = True
    is_url: bool = False

    @property
    def full_path(self) -> str:
        """Duong dan (hoac URL) ma task resolve toi."""
        if self.is_url or self.is_full_path:
            return self.path
        return os.path.join(self.origin_target, self.path)


@dataclass
class ExpansionResult:
    """
    Output cua expand_targets().

    Attributes:
        listing: Cac dong structure listing, dung thu tu target/traversal
        tasks: Danh sach FileTask, cung thu tu voi listing
    """

    listing: List[str] = field(default_factory=list)
    tasks: List[FileTask] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class TaskOutcome:
    """
    Ket qua xu ly 1 task trong worker.

    Attributes:
        task: Task da xu ly
        fragment: Header + content (hoac loi inline) + terminator
        token_count: So token cua content (0 neu loi)
        error: Mo ta loi, None neu thanh cong
    """

    task: FileTask
    fragment: str
    token_count: int
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class AggregateResult:
    """
    Document da hoan tat va token total, san sang ban giao cho sink.

    Attributes:
        document: Structure section + blank line + tat ca fragments
        total_tokens: Tong token cua cac task thanh cong
        file_count: So task da enumerate (files + URLs)
        failed_count: So task loi (render inline)
        worker_count: So workers thuc su da dung (0, 1 hoac W)
    """

    document: str
    total_tokens: int
    file_count: int
    failed_count: int = 0
    worker_count: int = 0

    def to_bytes(self) -> bytes:
        return self.document.encode("utf-8")
