"""taskflow - in-memory task lifecycle tracking engine.

Wires the components together, leaves first:

    UserRegistry -> TransitionValidator -> TaskStore -> {TaskQueryService, DailyReportService}
"""

import logging

from taskflow.core.config import Settings, get_settings
from taskflow.core.logging import configure_logfire
from taskflow.domain.task import Priority, StatusKind, Task, TaskStatus
from taskflow.domain.user import UserRegistry
from taskflow.services.query_service import TaskQueryService
from taskflow.services.report_service import DailyReportService
from taskflow.services.task_store import TaskStore
from taskflow.services.transition_validator import TransitionValidator


logger = logging.getLogger(__name__)


class TaskTracker:
    """The assembled engine: one store plus the services reading from it."""

    def __init__(self, registry: UserRegistry) -> None:
        self.registry = registry
        self.validator = TransitionValidator(registry)
        self.store = TaskStore(self.validator)
        self.queries = TaskQueryService(self.store)
        self.reports = DailyReportService(self.store)

    def create(self, title: str, description: str, priority: Priority) -> int:
        return self.store.create(title, description, priority)

    def get(self, task_id: int) -> Task:
        return self.store.get(task_id)

    def update_status(self, task_id: int, requested_status: TaskStatus) -> None:
        self.store.update_status(task_id, requested_status)

    def tasks_by_status_kind(self, kind: StatusKind) -> list[Task]:
        return self.queries.tasks_by_status_kind(kind)

    def high_priority_tasks(self) -> list[Task]:
        return self.queries.high_priority_tasks()

    def process_daily_report(self) -> str:
        return self.reports.process_daily_report()


def build_tracker(app_settings: Settings | None = None, *, configure_logging: bool = True) -> TaskTracker:
    """Build a tracker whose user registry comes from settings.

    Args:
        app_settings: Settings to use (defaults to a fresh Settings() from the environment)
        configure_logging: Configure Logfire before building

    Returns:
        A ready TaskTracker with an empty store
    """
    app_settings = app_settings if app_settings is not None else get_settings()
    if configure_logging:
        configure_logfire(app_settings)

    registry = UserRegistry(names=frozenset(app_settings.known_users))
    if not registry.names:
        logger.warning("No known users configured; tasks cannot be assigned")

    tracker = TaskTracker(registry)
    logger.info("Task tracker ready with %d known users", len(registry.names))
    return tracker
