"""Growing-conditions providers.

Each module implements `pomodoro.core.interfaces.GrowingConditions`.
"""

from pomodoro.adapters.conditions.factory import build_conditions
from pomodoro.adapters.conditions.fixed import FixedConditions
from pomodoro.adapters.conditions.json_file import JsonFileConditions
from pomodoro.adapters.conditions.settings import SettingsConditions

__all__ = [
    "FixedConditions",
    "JsonFileConditions",
    "SettingsConditions",
    "build_conditions",
]
