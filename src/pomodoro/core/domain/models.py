"""Domain models (Pydantic v2).

These models describe *what* a reading or a threshold set is, not *how* it is
obtained. Providers live in `pomodoro.adapters`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ConditionReadings(BaseModel):
    """A snapshot of the three growing-condition values."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    water: float = Field(..., description="Water amount.")
    soil: float = Field(..., description="Soil amount.")
    seed: float = Field(..., description="Seed amount.")


class VarietyThresholds(BaseModel):
    """Strict lower bounds a variety needs.

    A bound left as `None` places no requirement on that reading.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    water: float | None = Field(default=None, description="Water must exceed this value.")
    soil: float | None = Field(default=None, description="Soil must exceed this value.")
    seed: float | None = Field(default=None, description="Seed must exceed this value.")
