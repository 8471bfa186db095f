"""In-memory task store: owns task identity and status."""

import logging
import threading

from taskflow.core.errors import EmptyTitleError, TaskflowError, TaskNotFoundError
from taskflow.core.logging import log_with_context, span
from taskflow.domain.task import Priority, Task, TaskStatus, Todo, describe_status, status_kind
from taskflow.services.transition_validator import TransitionValidator


logger = logging.getLogger(__name__)


class TaskStore:
    """In-memory task store.

    Ids start at 1 and are never reused. Tasks are never deleted.

    Thread-safety:
    - create() and update_status() hold a single lock for the whole mutation
    - readers get deep copies taken under the same lock, so they see a task
      either before or after a mutation, never halfway
    """

    def __init__(self, validator: TransitionValidator) -> None:
        self._validator = validator
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    @property
    def validator(self) -> TransitionValidator:
        return self._validator

    def create(self, title: str, description: str, priority: Priority) -> int:
        """Create a new task in the Todo status.

        Args:
            title: Task title, must contain at least one non-blank character
            description: Free-form description
            priority: Task priority

        Returns:
            The id of the new task

        Raises:
            EmptyTitleError: If the title is empty or whitespace-only
        """
        with span("task_store.create"):
            if not title.strip():
                logger.warning("Rejected task with empty title")
                raise EmptyTitleError

            with self._lock:
                task_id = self._next_id
                task = Task(id=task_id, title=title, description=description, priority=priority, status=Todo())
                self._tasks[task_id] = task
                self._next_id += 1

            log_with_context(logger, "info", "Task created", task_id=task_id, priority=str(priority))
            return task_id

    def get(self, task_id: int) -> Task:
        """Return a snapshot of a task.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            return task.model_copy(deep=True)

    def update_status(self, task_id: int, requested_status: TaskStatus) -> None:
        """Move a task to a new status if the transition rules allow it.

        The task is left untouched when the transition is rejected.

        Raises:
            TaskNotFoundError: If no task has this id
            UserNotFoundError: If the new assignee is not a registered user
            InvalidTransitionError: If the status pair is not a legal transition
        """
        with span("task_store.update_status"), self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)

            current = task.status
            try:
                self._validator.validate(current, requested_status)
            except TaskflowError as e:
                log_with_context(
                    logger,
                    "warning",
                    "Transition rejected",
                    task_id=task_id,
                    from_kind=str(status_kind(current)),
                    requested=repr(requested_status),
                    error=str(e),
                )
                raise

            task.status = requested_status

        logger.info("Task %s moved to %s", task_id, describe_status(requested_status))

    def list_tasks(self) -> list[Task]:
        """Return snapshots of every task in id order."""
        with self._lock:
            return [task.model_copy(deep=True) for task in self._tasks.values()]

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __len__(self) -> int:
        return self.count_tasks()
