"""Domain models and enums."""

from taskflow.domain.task import (
    HIGH_PRIORITIES,
    Cancelled,
    Completed,
    InProgress,
    Priority,
    StatusKind,
    Task,
    TaskStatus,
    Todo,
)
from taskflow.domain.user import UserRegistry


__all__ = [
    "HIGH_PRIORITIES",
    "Cancelled",
    "Completed",
    "InProgress",
    "Priority",
    "StatusKind",
    "Task",
    "TaskStatus",
    "Todo",
    "UserRegistry",
]
