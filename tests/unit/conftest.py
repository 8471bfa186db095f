"""Pytest configuration and fixtures for unit tests."""

import pytest

from taskflow.domain.user import UserRegistry
from taskflow.main import TaskTracker
from taskflow.services.query_service import TaskQueryService
from taskflow.services.report_service import DailyReportService
from taskflow.services.task_store import TaskStore
from taskflow.services.transition_validator import TransitionValidator


@pytest.fixture
def registry() -> UserRegistry:
    """Registry with the users the tests assign work to."""
    return UserRegistry.of("Alice", "Bob", "Charlie")


@pytest.fixture
def validator(registry: UserRegistry) -> TransitionValidator:
    return TransitionValidator(registry)


@pytest.fixture
def store(validator: TransitionValidator) -> TaskStore:
    """Provides a fresh, empty TaskStore for each test."""
    return TaskStore(validator)


@pytest.fixture
def query_service(store: TaskStore) -> TaskQueryService:
    return TaskQueryService(store)


@pytest.fixture
def report_service(store: TaskStore) -> DailyReportService:
    return DailyReportService(store)


@pytest.fixture
def tracker(registry: UserRegistry) -> TaskTracker:
    return TaskTracker(registry)
