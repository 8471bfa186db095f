"""Task engine services: store, transition rules, queries and reporting."""

from taskflow.services.query_service import TaskQueryService
from taskflow.services.report_service import DailyReportService
from taskflow.services.task_store import TaskStore
from taskflow.services.transition_validator import TransitionValidator, check_transition


__all__ = [
    "DailyReportService",
    "TaskQueryService",
    "TaskStore",
    "TransitionValidator",
    "check_transition",
]
