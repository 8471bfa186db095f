"""Unit tests for the transition rules."""

import itertools

import pytest

from taskflow.core.errors import InvalidTransitionError, UnhandledStatusError, UserNotFoundError
from taskflow.domain.task import Cancelled, Completed, InProgress, StatusKind, Todo
from taskflow.domain.user import UserRegistry
from taskflow.services.transition_validator import (
    TRANSITIONS,
    TransitionValidator,
    allowed_targets,
    check_transition,
)


SAMPLE_STATUSES = {
    StatusKind.TODO: Todo(),
    StatusKind.IN_PROGRESS: InProgress(assigned_to="Alice"),
    StatusKind.COMPLETED: Completed(completed_by="Alice"),
    StatusKind.CANCELLED: Cancelled(reason="duplicate"),
}

LEGAL_PAIRS = {
    (StatusKind.TODO, StatusKind.IN_PROGRESS),
    (StatusKind.IN_PROGRESS, StatusKind.COMPLETED),
    (StatusKind.TODO, StatusKind.CANCELLED),
    (StatusKind.IN_PROGRESS, StatusKind.CANCELLED),
}

ILLEGAL_PAIRS = sorted(set(itertools.product(StatusKind, StatusKind)) - LEGAL_PAIRS)


@pytest.mark.unit
class TestCheckTransition:
    """Tests for the pure check_transition function."""

    def test_table_lists_exactly_the_legal_pairs(self):
        """The transition table holds the four legal pairs and nothing else."""
        assert set(TRANSITIONS) == LEGAL_PAIRS

    def test_todo_to_in_progress_with_registered_user(self, registry):
        """Assigning a registered user is allowed."""
        assert check_transition(Todo(), InProgress(assigned_to="Alice"), registry) is None

    def test_todo_to_in_progress_with_unknown_user(self, registry):
        """Assigning an unknown user returns UserNotFoundError naming them."""
        error = check_transition(Todo(), InProgress(assigned_to="Mallory"), registry)

        assert isinstance(error, UserNotFoundError)
        assert error.user_name == "Mallory"

    def test_assignee_match_is_exact(self, registry):
        """Registry membership is case-sensitive."""
        error = check_transition(Todo(), InProgress(assigned_to="alice"), registry)

        assert isinstance(error, UserNotFoundError)

    def test_in_progress_to_completed_skips_registry_check(self, registry):
        """Completion is allowed even when completed_by is not a registered user."""
        current = InProgress(assigned_to="Alice")

        assert check_transition(current, Completed(completed_by="Alice"), registry) is None
        assert check_transition(current, Completed(completed_by="Stranger"), registry) is None

    @pytest.mark.parametrize("current", [Todo(), InProgress(assigned_to="Bob")])
    def test_cancel_from_open_states(self, registry, current):
        """Todo and InProgress tasks can be cancelled."""
        assert check_transition(current, Cancelled(reason="no longer needed"), registry) is None

    @pytest.mark.parametrize(("from_kind", "to_kind"), ILLEGAL_PAIRS)
    def test_every_other_pair_is_invalid(self, registry, from_kind, to_kind):
        """Pairs outside the table return InvalidTransitionError with both kinds."""
        error = check_transition(SAMPLE_STATUSES[from_kind], SAMPLE_STATUSES[to_kind], registry)

        assert isinstance(error, InvalidTransitionError)
        assert error.from_kind == from_kind
        assert error.to_kind == to_kind

    def test_invalid_pair_wins_over_payload_check(self, registry):
        """An illegal pair is reported as such even if its payload names an unknown user."""
        error = check_transition(
            Completed(completed_by="Alice"), InProgress(assigned_to="Mallory"), registry
        )

        assert isinstance(error, InvalidTransitionError)

    def test_is_deterministic(self, registry):
        """The same inputs always produce the same decision."""
        args = (Todo(), InProgress(assigned_to="Nobody"), registry)

        assert check_transition(*args) == check_transition(*args)

    def test_empty_registry_blocks_assignment(self):
        """With no registered users nobody can be assigned."""
        error = check_transition(Todo(), InProgress(assigned_to="Alice"), UserRegistry())

        assert error == UserNotFoundError("Alice")

    def test_unknown_status_object_raises(self, registry):
        """Values that are not status variants are rejected loudly."""
        with pytest.raises(UnhandledStatusError):
            check_transition(Todo(), "InProgress", registry)  # type: ignore[arg-type]


@pytest.mark.unit
class TestAllowedTargets:
    """Tests for allowed_targets helper."""

    def test_from_todo(self):
        assert allowed_targets(Todo()) == {StatusKind.IN_PROGRESS, StatusKind.CANCELLED}

    def test_from_in_progress(self):
        assert allowed_targets(InProgress(assigned_to="Bob")) == {StatusKind.COMPLETED, StatusKind.CANCELLED}

    @pytest.mark.parametrize("status", [Completed(completed_by="Bob"), Cancelled(reason="dup")])
    def test_terminal_states_have_no_targets(self, status):
        """Completed and Cancelled cannot be left."""
        assert allowed_targets(status) == frozenset()


@pytest.mark.unit
class TestTransitionValidator:
    """Tests for the registry-bound TransitionValidator."""

    def test_validate_allows_legal_transition(self, validator):
        """validate() returns quietly for an allowed transition."""
        validator.validate(Todo(), InProgress(assigned_to="Bob"))

    def test_validate_raises_user_not_found(self, validator):
        """validate() raises the rejection error."""
        with pytest.raises(UserNotFoundError, match="Mallory"):
            validator.validate(Todo(), InProgress(assigned_to="Mallory"))

    def test_validate_raises_invalid_transition(self, validator):
        with pytest.raises(InvalidTransitionError, match="from Todo to Completed"):
            validator.validate(Todo(), Completed(completed_by="Bob"))

    def test_check_matches_pure_function(self, validator, registry):
        """check() is check_transition with the bound registry."""
        current, requested = Todo(), InProgress(assigned_to="Zed")

        assert validator.check(current, requested) == check_transition(current, requested, registry)
        assert validator.registry is registry
