"""Shared fixtures for demonstration refiner tests."""

import pytest

from src.refinement.models import PointerActivation, StateToggle, TextInput


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "smoke: mark test as smoke test (fast, critical path - included in CI)"
    )


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("REFINER_TASK_PREFIX", "task-")
    monkeypatch.setenv("REFINER_LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("REFINER_MIN_SCRIPT_LENGTH", raising=False)
    monkeypatch.delenv("REFINER_LOG_JSON", raising=False)


@pytest.fixture
def noisy_log():
    """A demonstration with retyped fields, a reverted task and stray clicks."""
    return [
        PointerActivation(target="nav-home", recorded_at=1),
        StateToggle(target="task-1", value=True, recorded_at=2),
        TextInput(target="email", value="bob@", recorded_at=3),
        StateToggle(target="task-2", value=True, recorded_at=4),
        TextInput(target="email", value="bob@example.com", recorded_at=5),
        PointerActivation(target="submit", recorded_at=6),
        StateToggle(target="task-2", value=False, recorded_at=7),
        TextInput(target="notes", value="   ", recorded_at=8),
    ]


@pytest.fixture
def scenario_d_log():
    """Five interleaved records over three targets, the third toggled back off."""
    return [
        StateToggle(target="task-1", value=True, recorded_at=100),
        TextInput(target="name", value="Al", recorded_at=200),
        StateToggle(target="task-2", value=True, recorded_at=300),
        TextInput(target="name", value="Alice", recorded_at=400),
        StateToggle(target="task-2", value=False, recorded_at=500),
    ]
