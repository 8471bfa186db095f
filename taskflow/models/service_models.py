"""Pydantic models for service layer return types.

These models give the reporting layer typed results that callers can render
or serialize.
"""

from pydantic import BaseModel, Field

from taskflow.domain.task import StatusKind


class DailyReport(BaseModel):
    """Outcome of one daily report pass."""

    lines: list[str] = Field(default_factory=list, description="One line per classified task")
    processed_count: int = 0
    summary: str

    def render(self) -> str:
        return "\n".join([*self.lines, self.summary])


class StatusSummary(BaseModel):
    """Task counts per status kind."""

    total: int
    by_status: dict[StatusKind, int]
    high_priority: int
