"""Domain errors.

Every error here is terminal: the CLI prints the message and exits with
`exit_code`. Nothing inside the core retries or recovers.
"""

from __future__ import annotations


class PomodoroError(Exception):
    """Base class for errors reported to the user."""

    exit_code: int = 1


class UsageError(PomodoroError):
    """The program was invoked with the wrong number of arguments."""

    def __init__(self, message: str = "pomodoro takes one arg") -> None:
        super().__init__(message)


class UnknownVarietyError(PomodoroError):
    """The argument does not name a known variety."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"unknown tomato: {argument}")


class ConditionsSourceError(PomodoroError):
    """The growing-conditions provider could not produce a reading."""
