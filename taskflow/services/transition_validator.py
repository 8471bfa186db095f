"""Pure transition rules for the task lifecycle.

Legal transitions:

    Todo        -> InProgress   (assignee must be a registered user)
    InProgress  -> Completed    (completed_by is not checked against the registry)
    Todo        -> Cancelled
    InProgress  -> Cancelled

Every other pair, including same-kind pairs and anything leaving Completed or
Cancelled, is an InvalidTransitionError.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType

from taskflow.core.errors import (
    InvalidTransitionError,
    TaskflowError,
    UnhandledStatusError,
    UserNotFoundError,
)
from taskflow.domain.task import InProgress, StatusKind, TaskStatus, status_kind
from taskflow.domain.user import UserRegistry


TransitionGuard = Callable[[TaskStatus, UserRegistry], TaskflowError | None]


def _allow(requested: TaskStatus, registry: UserRegistry) -> TaskflowError | None:
    return None


def _require_registered_assignee(requested: TaskStatus, registry: UserRegistry) -> TaskflowError | None:
    match requested:
        case InProgress(assigned_to=name):
            return None if name in registry else UserNotFoundError(name)
        case _:
            raise UnhandledStatusError(requested)


TRANSITIONS: Mapping[tuple[StatusKind, StatusKind], TransitionGuard] = MappingProxyType(
    {
        (StatusKind.TODO, StatusKind.IN_PROGRESS): _require_registered_assignee,
        (StatusKind.IN_PROGRESS, StatusKind.COMPLETED): _allow,
        (StatusKind.TODO, StatusKind.CANCELLED): _allow,
        (StatusKind.IN_PROGRESS, StatusKind.CANCELLED): _allow,
    }
)


def check_transition(
    current: TaskStatus,
    requested: TaskStatus,
    registry: UserRegistry,
) -> TaskflowError | None:
    """Decide whether a task may move from ``current`` to ``requested``.

    Args:
        current: The task's status right now
        requested: The status the caller wants to move to
        registry: Users allowed to appear in status payloads

    Returns:
        None if the transition is allowed, otherwise the error describing the rejection

    Raises:
        UnhandledStatusError: If either argument is not a known status variant
    """
    from_kind = status_kind(current)
    to_kind = status_kind(requested)

    guard = TRANSITIONS.get((from_kind, to_kind))
    if guard is None:
        return InvalidTransitionError(from_kind, to_kind)
    return guard(requested, registry)


def allowed_targets(current: TaskStatus) -> frozenset[StatusKind]:
    """Status kinds reachable in one step from ``current`` (payload checks aside)."""
    from_kind = status_kind(current)
    return frozenset(to_kind for (src, to_kind) in TRANSITIONS if src == from_kind)


class TransitionValidator:
    """Binds the transition rules to a user registry."""

    def __init__(self, registry: UserRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> UserRegistry:
        return self._registry

    def check(self, current: TaskStatus, requested: TaskStatus) -> TaskflowError | None:
        return check_transition(current, requested, self._registry)

    def validate(self, current: TaskStatus, requested: TaskStatus) -> None:
        """Raise the rejection error if the transition is not allowed."""
        error = self.check(current, requested)
        if error is not None:
            raise error
