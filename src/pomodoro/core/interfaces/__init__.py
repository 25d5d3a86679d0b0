"""Contracts (Protocol) implemented by concrete adapters."""

from pomodoro.core.interfaces.conditions import GrowingConditions

__all__ = ["GrowingConditions"]
