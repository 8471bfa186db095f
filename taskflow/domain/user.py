"""User domain models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserRegistry(BaseModel):
    """Fixed set of actor names valid as task assignees.

    Supplied once when the tracker is built and never mutated afterwards.
    Names are stored exactly as given; membership is an exact string match.
    """

    model_config = ConfigDict(frozen=True)

    names: frozenset[str] = Field(default_factory=frozenset, description="Known user names")

    @field_validator("names")
    @classmethod
    def validate_names_not_blank(cls, v: frozenset[str]) -> frozenset[str]:
        """Validate no name is empty or whitespace-only."""
        if any(not name.strip() for name in v):
            raise ValueError("Name cannot be empty")
        return v

    @classmethod
    def of(cls, *names: str) -> "UserRegistry":
        return cls(names=frozenset(names))

    def __contains__(self, name: object) -> bool:
        return name in self.names
