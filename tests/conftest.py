"""
Pytest configuration for pomodoro tests.
"""

import logging
from dataclasses import dataclass, field

import pytest

from pomodoro.core.logging import ROOT_LOGGER_NAME

_ENV_VARS = (
    "POMODORO_WATER",
    "POMODORO_SOIL",
    "POMODORO_SEED",
    "POMODORO_CONDITIONS_FILE",
    "POMODORO_LOG_LEVEL",
    "POMODORO_VARIETY_THRESHOLDS",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run every test away from real .env files and POMODORO_* variables."""
    monkeypatch.chdir(tmp_path)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Explicit values win over any user-level .env file.
    monkeypatch.setenv("POMODORO_WATER", "0")
    monkeypatch.setenv("POMODORO_SOIL", "0")
    monkeypatch.setenv("POMODORO_SEED", "0")
    yield


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to streams of a finished CliRunner invocation."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@dataclass
class RecordingConditions:
    """Test double that remembers which accessors were called."""

    water_amount: float = 0.0
    soil_amount: float = 0.0
    seed_amount: float = 0.0
    calls: list = field(default_factory=list)

    def water(self) -> float:
        self.calls.append("water")
        return self.water_amount

    def soil(self) -> float:
        self.calls.append("soil")
        return self.soil_amount

    def seed(self) -> float:
        self.calls.append("seed")
        return self.seed_amount


@pytest.fixture
def recording_conditions():
    return RecordingConditions
