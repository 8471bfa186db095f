"""Task domain models and enums."""

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from taskflow.core.errors import UnhandledStatusError


class Priority(StrEnum):
    """Task priority, fixed at creation."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


HIGH_PRIORITIES = frozenset({Priority.HIGH, Priority.CRITICAL})


class StatusKind(StrEnum):
    """Discriminant of the task status variants."""

    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class Todo(BaseModel):
    """Task not started yet."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["Todo"] = "Todo"


class InProgress(BaseModel):
    """Task being worked on by a registered user."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["InProgress"] = "InProgress"
    assigned_to: str = Field(..., description="Name of the user working on the task")


class Completed(BaseModel):
    """Task finished."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["Completed"] = "Completed"
    completed_by: str = Field(..., description="Name of the user who finished the task")


class Cancelled(BaseModel):
    """Task abandoned."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["Cancelled"] = "Cancelled"
    reason: str = Field(..., description="Why the task was cancelled")


TaskStatus = Annotated[Todo | InProgress | Completed | Cancelled, Field(discriminator="kind")]


class Task(BaseModel):
    """Task data transfer object."""

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., description="Unique task ID assigned by the store")
    title: str = Field(..., description="Task title")
    description: str = Field(default="", description="Detailed task description")
    priority: Priority = Field(..., description="Task priority")
    status: TaskStatus = Field(default_factory=Todo, description="Current lifecycle status")

    @property
    def status_kind(self) -> StatusKind:
        return status_kind(self.status)


def status_kind(status: object) -> StatusKind:
    """Return the discriminant of a status value."""
    match status:
        case Todo():
            return StatusKind.TODO
        case InProgress():
            return StatusKind.IN_PROGRESS
        case Completed():
            return StatusKind.COMPLETED
        case Cancelled():
            return StatusKind.CANCELLED
        case _:
            raise UnhandledStatusError(status)


def status_actor(status: object) -> str | None:
    """Return the user named in a status payload, if the variant carries one."""
    match status:
        case InProgress(assigned_to=name):
            return name
        case Completed(completed_by=name):
            return name
        case Todo() | Cancelled():
            return None
        case _:
            raise UnhandledStatusError(status)


def describe_status(status: object) -> str:
    match status:
        case Todo():
            return "Todo"
        case InProgress(assigned_to=name):
            return f"InProgress (assigned to {name})"
        case Completed(completed_by=name):
            return f"Completed (by {name})"
        case Cancelled(reason=reason):
            return f"Cancelled ({reason})"
        case _:
            raise UnhandledStatusError(status)
