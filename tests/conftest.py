"""Pytest configuration and shared fixtures."""

import os

import logfire
import pytest


# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Strip TASKFLOW_* variables so Settings() only sees what a test sets."""
    for key in list(os.environ):
        if key.upper().startswith("TASKFLOW_"):
            monkeypatch.delenv(key, raising=False)
