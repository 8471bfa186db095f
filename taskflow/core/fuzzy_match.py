"""Title matching for task searches."""

from collections.abc import Sequence

from taskflow.domain.task import Task


def fuzzy_match_all(tasks: Sequence[Task], title_query: str) -> list[Task]:
    """Fuzzy match all tasks matching a title query.

    Priority: exact match > contains match > partial word match. Only the
    highest-priority tier with any hits is returned.

    Args:
        tasks: Tasks to search
        title_query: User's search query

    Returns:
        List of all matching tasks (may be empty)
    """
    title_lower = title_query.lower().strip()
    if not title_lower:
        return []

    # Exact match (highest priority)
    matches = [task for task in tasks if task.title.lower() == title_lower]
    if matches:
        return matches

    # Contains match
    matches = [task for task in tasks if title_lower in task.title.lower()]
    if matches:
        return matches

    # Partial word match
    query_words = set(title_lower.split())
    return [task for task in tasks if query_words & set(task.title.lower().split())]
