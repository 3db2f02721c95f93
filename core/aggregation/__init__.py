"""
Package core.aggregation - Concurrent aggregation engine.

Modules:
- types: FileTask, ExpansionResult, TaskOutcome, AggregateResult
- target_expander: Targets -> structure listing + task list (single-threaded)
- task_queue: Task list voi atomic claim cursor
- worker_pool: N workers keo task tu TaskQueue
- content_reader: Doc file (bounded) va fetch URL
- task_processor: Xu ly 1 task thanh private fragment
- result_aggregator: Shared buffer + token total duoi 1 lock
- engine: Ghep tat ca lai - aggregate_targets()
"""

from core.aggregation.types import (
    FileTask,
    ExpansionResult,
    TaskOutcome,
    AggregateResult,
)
from core.aggregation.engine import aggregate_targets

__all__ = [
    "FileTask",
    "ExpansionResult",
    "TaskOutcome",
    "AggregateResult",
    "aggregate_targets",
]
