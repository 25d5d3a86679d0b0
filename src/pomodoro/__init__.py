"""pomodoro: pick a tomato variety and check whether it grows."""

__version__ = "0.1.0"
