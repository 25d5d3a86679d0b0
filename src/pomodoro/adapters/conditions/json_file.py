"""Readings from a JSON document, e.g. one written by a sensor daemon.

Expected shape::

    {"water": 2.0, "soil": 4.5, "seed": 3}

The file is read on every accessor call; nothing is cached.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from pomodoro.core.domain.errors import ConditionsSourceError
from pomodoro.core.domain.models import ConditionReadings
from pomodoro.core.interfaces.conditions import GrowingConditions


class JsonFileConditions(GrowingConditions):
    """Reads the current readings from `path`."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> ConditionReadings:
        """Load and validate the whole document.

        Raises:
            ConditionsSourceError: the file is missing, not UTF-8 JSON, or lacks a reading.
        """

        try:
            raw = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConditionsSourceError(f"cannot read conditions file {self._path}: {exc}") from exc

        try:
            return ConditionReadings.model_validate(json.loads(raw))
        except json.JSONDecodeError as exc:
            raise ConditionsSourceError(f"conditions file {self._path} is not valid JSON: {exc}") from exc
        except ValidationError as exc:
            raise ConditionsSourceError(
                f"conditions file {self._path} has invalid readings: {exc.error_count()} error(s)"
            ) from exc

    def water(self) -> float:
        return self.read().water

    def soil(self) -> float:
        return self.read().soil

    def seed(self) -> float:
        return self.read().seed
