"""Error types raised by the task engine and their user-facing classification."""

from enum import Enum

from pydantic import BaseModel


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCode:
    """Error codes for specific error conditions."""

    # Task errors
    ERR_EMPTY_TITLE = "ERR_EMPTY_TITLE"
    ERR_TASK_NOT_FOUND = "ERR_TASK_NOT_FOUND"
    ERR_INVALID_STATE_TRANSITION = "ERR_INVALID_STATE_TRANSITION"
    ERR_UNHANDLED_STATUS = "ERR_UNHANDLED_STATUS"

    # User errors
    ERR_USER_NOT_FOUND = "ERR_USER_NOT_FOUND"

    # Generic errors
    ERR_UNKNOWN = "ERR_UNKNOWN"


class TaskflowError(Exception):
    """Base class for every error raised by the task engine."""

    code: str = ErrorCode.ERR_UNKNOWN

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.args == other.args  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class EmptyTitleError(TaskflowError, ValueError):
    """Task creation rejected because the title is empty or whitespace-only."""

    code = ErrorCode.ERR_EMPTY_TITLE

    def __init__(self) -> None:
        super().__init__("Task title cannot be empty")


class TaskNotFoundError(TaskflowError, KeyError):
    """A lookup or mutation referenced an unknown task id."""

    code = ErrorCode.ERR_TASK_NOT_FOUND

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return f"Task not found: {self.task_id}"


class UserNotFoundError(TaskflowError):
    """A transition payload named an actor outside the User Registry."""

    code = ErrorCode.ERR_USER_NOT_FOUND

    def __init__(self, user_name: str) -> None:
        self.user_name = user_name
        super().__init__(f"User not found: {user_name}")


class InvalidTransitionError(TaskflowError, ValueError):
    """The requested status change is not in the transition table."""

    code = ErrorCode.ERR_INVALID_STATE_TRANSITION

    def __init__(self, from_kind: str, to_kind: str) -> None:
        self.from_kind = from_kind
        self.to_kind = to_kind
        super().__init__(f"Invalid transition from {from_kind} to {to_kind}")


class UnhandledStatusError(TaskflowError, TypeError):
    """A status value fell through an exhaustive match."""

    code = ErrorCode.ERR_UNHANDLED_STATUS

    def __init__(self, status: object) -> None:
        self.status = status
        super().__init__(f"Unhandled status variant: {status!r}")


class ErrorResponse(BaseModel):
    """Structured error response with user-friendly messaging."""

    code: str
    message: str
    suggestion: str
    severity: ErrorSeverity


def classify_error_with_response(exception: Exception) -> ErrorResponse:
    """Classify an error and return a structured response with recovery suggestions.

    Args:
        exception: The exception raised by a task engine operation

    Returns:
        ErrorResponse with code, message, suggestion, and severity
    """
    match exception:
        case EmptyTitleError():
            return ErrorResponse(
                code=exception.code,
                message="A task needs a title.",
                suggestion="Provide a title with at least one non-blank character.",
                severity=ErrorSeverity.LOW,
            )
        case TaskNotFoundError(task_id=task_id):
            return ErrorResponse(
                code=exception.code,
                message=f"I couldn't find task #{task_id}.",
                suggestion="Check the task id and try again.",
                severity=ErrorSeverity.LOW,
            )
        case UserNotFoundError(user_name=user_name):
            return ErrorResponse(
                code=exception.code,
                message=f"'{user_name}' is not a known user.",
                suggestion="Assign the task to a registered user.",
                severity=ErrorSeverity.MEDIUM,
            )
        case InvalidTransitionError(from_kind=from_kind, to_kind=to_kind):
            return ErrorResponse(
                code=exception.code,
                message=f"A task cannot move from {from_kind} to {to_kind}.",
                suggestion="Check the task status and try again.",
                severity=ErrorSeverity.LOW,
            )
        case UnhandledStatusError():
            return ErrorResponse(
                code=exception.code,
                message="The task is in a status this version does not understand.",
                suggestion="Upgrade taskflow or report the problem.",
                severity=ErrorSeverity.HIGH,
            )
        case _:
            return ErrorResponse(
                code=ErrorCode.ERR_UNKNOWN,
                message="An unexpected error occurred.",
                suggestion="Please try again later. If the problem persists, contact support.",
                severity=ErrorSeverity.MEDIUM,
            )
