"""Read-only queries over the task store."""

import logging

from taskflow.core.fuzzy_match import fuzzy_match_all
from taskflow.core.logging import span
from taskflow.domain.task import HIGH_PRIORITIES, StatusKind, Task, status_actor
from taskflow.services.task_store import TaskStore


logger = logging.getLogger(__name__)


class TaskQueryService:
    """Filters over the store's current snapshot.

    Every call takes a fresh snapshot; nothing is cached between calls.
    Result order follows the store's snapshot (id order) and callers
    should not rely on it.
    """

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    def tasks_by_status_kind(self, kind: StatusKind) -> list[Task]:
        """Return every task whose status is of ``kind``, whatever its payload."""
        with span("task_query.tasks_by_status_kind"):
            kind = StatusKind(kind)
            tasks = [task for task in self._store.list_tasks() if task.status_kind == kind]
            logger.debug("Found %d tasks with status %s", len(tasks), kind)
            return tasks

    def high_priority_tasks(self) -> list[Task]:
        """Return every High or Critical task regardless of status."""
        with span("task_query.high_priority_tasks"):
            return [task for task in self._store.list_tasks() if task.priority in HIGH_PRIORITIES]

    def tasks_for_actor(self, user_name: str) -> list[Task]:
        """Return tasks assigned to or completed by ``user_name``."""
        with span("task_query.tasks_for_actor"):
            return [task for task in self._store.list_tasks() if status_actor(task.status) == user_name]

    def find_by_title(self, title_query: str) -> list[Task]:
        """Fuzzy title search: exact > contains > partial word match."""
        with span("task_query.find_by_title"):
            return fuzzy_match_all(self._store.list_tasks(), title_query)
