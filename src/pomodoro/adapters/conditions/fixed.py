"""Constant readings, for embedding and tests."""

from __future__ import annotations

from dataclasses import dataclass

from pomodoro.core.interfaces.conditions import GrowingConditions


@dataclass(frozen=True)
class FixedConditions(GrowingConditions):
    water_amount: float = 0.0
    soil_amount: float = 0.0
    seed_amount: float = 0.0

    def water(self) -> float:
        return self.water_amount

    def soil(self) -> float:
        return self.soil_amount

    def seed(self) -> float:
        return self.seed_amount
