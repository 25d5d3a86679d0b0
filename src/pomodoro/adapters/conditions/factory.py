"""Provider selection from settings."""

from __future__ import annotations

from pomodoro.adapters.conditions.json_file import JsonFileConditions
from pomodoro.adapters.conditions.settings import SettingsConditions
from pomodoro.core.config import PomodoroSettings
from pomodoro.core.interfaces.conditions import GrowingConditions


def build_conditions(settings: PomodoroSettings | None = None) -> GrowingConditions:
    """`JsonFileConditions` when a conditions file is configured, else `SettingsConditions`."""

    settings = settings or PomodoroSettings()
    if settings.conditions_file is not None:
        return JsonFileConditions(settings.conditions_file)
    return SettingsConditions()
