"""Centralized message templates for task reports.

All user-facing report strings are defined here so wording can be changed
in one place.
"""


def urgent_task(*, title: str, task_id: int) -> str:
    return f"\U0001f6a8 URGENT: Task '{title}' (ID: {task_id}) needs immediate attention!"


def high_priority_in_progress(*, title: str, assigned_to: str) -> str:
    return f"⚡ High priority task '{title}' is being worked on by {assigned_to}"


def task_completed(*, title: str, completed_by: str) -> str:
    return f"✅ Task '{title}' was completed by {completed_by}"


def report_summary(*, processed_count: int) -> str:
    """Build the closing line of the daily report."""
    if processed_count == 0:
        return "\U0001f4ed No tasks to report today."
    if processed_count == 1:
        return "\U0001f4cb Processed 1 task today."
    return f"\U0001f4cb Processed {processed_count} tasks today."
