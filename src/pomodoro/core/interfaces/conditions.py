"""Growing-conditions contract.

Structural (duck-typed) so any object with the three accessors can be injected:
sensors, config-backed values or test doubles.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class GrowingConditions(Protocol):
    """Source of water, soil and seed readings.

    Design rules:
    - Accessors take no arguments and are synchronous.
    - Every call returns the current value; callers never cache it.
    """

    def water(self) -> float:
        ...

    def soil(self) -> float:
        ...

    def seed(self) -> float:
        ...
