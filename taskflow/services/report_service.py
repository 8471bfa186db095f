"""Daily report over the task store.

Each task is classified by (status kind, priority):

- (Todo, Critical)       -> urgent line with title and id
- (InProgress, High)     -> line naming the assignee
- (Completed, any)       -> line naming who completed it

Anything else is skipped and not counted. The rules never overlap, so a task
contributes at most one line. The report ends with a summary line whose
wording depends on how many tasks were processed.
"""

import logging

from taskflow.core import message_templates
from taskflow.core.errors import UnhandledStatusError
from taskflow.core.logging import span
from taskflow.domain.task import (
    HIGH_PRIORITIES,
    Cancelled,
    Completed,
    InProgress,
    Priority,
    StatusKind,
    Task,
    Todo,
)
from taskflow.models.service_models import DailyReport, StatusSummary
from taskflow.services.task_store import TaskStore


logger = logging.getLogger(__name__)


def classify_task(task: Task) -> str | None:
    """Return the report line for a task, or None if no rule matches."""
    match task.status, task.priority:
        case Todo(), Priority.CRITICAL:
            return message_templates.urgent_task(title=task.title, task_id=task.id)
        case InProgress(assigned_to=assigned_to), Priority.HIGH:
            return message_templates.high_priority_in_progress(title=task.title, assigned_to=assigned_to)
        case Completed(completed_by=completed_by), _:
            return message_templates.task_completed(title=task.title, completed_by=completed_by)
        case (Todo() | InProgress() | Cancelled()), _:
            return None
        case _:
            raise UnhandledStatusError(task.status)


class DailyReportService:
    """Read-only reporting over the store's current snapshot."""

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    def build_daily_report(self) -> DailyReport:
        """Classify every task once and collect the matching lines."""
        with span("daily_report.build"):
            lines: list[str] = []
            for task in self._store.list_tasks():
                line = classify_task(task)
                if line is not None:
                    lines.append(line)

            processed_count = len(lines)
            report = DailyReport(
                lines=lines,
                processed_count=processed_count,
                summary=message_templates.report_summary(processed_count=processed_count),
            )
            logger.info("Daily report built: %d tasks processed", processed_count)
            return report

    def process_daily_report(self) -> str:
        """Build the daily report and render it as newline-separated text."""
        return self.build_daily_report().render()

    def status_summary(self) -> StatusSummary:
        """Count tasks per status kind."""
        with span("daily_report.status_summary"):
            tasks = self._store.list_tasks()
            by_status = dict.fromkeys(StatusKind, 0)
            for task in tasks:
                by_status[task.status_kind] += 1

            return StatusSummary(
                total=len(tasks),
                by_status=by_status,
                high_priority=sum(1 for task in tasks if task.priority in HIGH_PRIORITIES),
            )
