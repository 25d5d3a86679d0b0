"""Readings taken from configuration (`POMODORO_WATER`, `POMODORO_SOIL`, `POMODORO_SEED`).

Settings are loaded again on every accessor call, so a changed environment or
`.env` file is picked up by the next evaluation.
"""

from __future__ import annotations

from typing import Callable

from pomodoro.core.config import PomodoroSettings
from pomodoro.core.interfaces.conditions import GrowingConditions


class SettingsConditions(GrowingConditions):
    def __init__(self, load_settings: Callable[[], PomodoroSettings] | None = None) -> None:
        self._load_settings = load_settings or PomodoroSettings

    def water(self) -> float:
        return self._load_settings().water

    def soil(self) -> float:
        return self._load_settings().soil

    def seed(self) -> float:
        return self._load_settings().seed
