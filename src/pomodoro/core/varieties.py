"""Tomato varieties and their evaluators.

Each variety reads the growing conditions and answers with one of two fixed
strings: its own name when every bound is strictly exceeded, `no <name>`
otherwise. Readings are checked in the order water, soil, seed and the check
stops at the first failing bound.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Mapping

from pomodoro.core.domain.errors import UnknownVarietyError
from pomodoro.core.domain.models import VarietyThresholds
from pomodoro.core.interfaces.conditions import GrowingConditions
from pomodoro.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Variety:
    """A named tomato with the thresholds it needs to grow."""

    name: str
    thresholds: VarietyThresholds = field(default_factory=VarietyThresholds)

    def evaluate(self, conditions: GrowingConditions) -> str:
        if self.grows(conditions):
            return self.name
        return f"no {self.name}"

    def grows(self, conditions: GrowingConditions) -> bool:
        checks: tuple[tuple[str, float | None, Callable[[], float]], ...] = (
            ("water", self.thresholds.water, conditions.water),
            ("soil", self.thresholds.soil, conditions.soil),
            ("seed", self.thresholds.seed, conditions.seed),
        )
        for label, bound, read in checks:
            if bound is None:
                continue
            value = read()
            if not value > bound:
                logger.debug("%s: %s=%s does not exceed %s", self.name, label, value, bound)
                return False
        return True

    def with_thresholds(self, thresholds: VarietyThresholds) -> "Variety":
        return replace(self, thresholds=thresholds)


# Beefmaster has no known thresholds; it grows unless configuration says otherwise.
BEEFMASTER = Variety(name="beefmaster")
SAN_MARZANO = Variety(
    name="san marzano",
    thresholds=VarietyThresholds(water=1, soil=3, seed=2),
)

DEFAULT_VARIETIES: Mapping[str, Variety] = {
    variety.name: variety for variety in (BEEFMASTER, SAN_MARZANO)
}


def build_registry(
    overrides: Mapping[str, VarietyThresholds] | None = None,
) -> dict[str, Variety]:
    """Return the name -> variety table, applying threshold overrides.

    Overrides may only target known varieties; they replace the built-in bounds.
    """

    registry = dict(DEFAULT_VARIETIES)
    for name, thresholds in (overrides or {}).items():
        if name not in registry:
            raise UnknownVarietyError(name)
        registry[name] = registry[name].with_thresholds(thresholds)
    return registry
