"""Argument dispatch.

Maps the single command-line token to a variety and evaluates it against the
injected growing conditions. The dispatcher never prints: it returns the result
string or raises a `PomodoroError`, and the entry point decides how to show it.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from pomodoro.core.domain.errors import UnknownVarietyError, UsageError
from pomodoro.core.interfaces.conditions import GrowingConditions
from pomodoro.core.logging import get_logger
from pomodoro.core.varieties import DEFAULT_VARIETIES, Variety

logger = get_logger(__name__)


def single_argument(args: Sequence[str]) -> str:
    """Return the only token in `args`.

    Raises:
        UsageError: `args` does not hold exactly one token.
    """

    if len(args) != 1:
        raise UsageError()
    return args[0]


def select_variety(
    argument: str,
    varieties: Mapping[str, Variety] = DEFAULT_VARIETIES,
) -> Variety:
    """Look up a variety by its exact (case-sensitive) name."""

    try:
        return varieties[argument]
    except KeyError:
        raise UnknownVarietyError(argument) from None


def dispatch(
    args: Sequence[str],
    conditions: GrowingConditions,
    varieties: Mapping[str, Variety] = DEFAULT_VARIETIES,
) -> str:
    """Evaluate the variety named by `args` (program name excluded).

    Raises:
        UsageError: `args` does not hold exactly one token.
        UnknownVarietyError: the token names no known variety.
    """

    argument = single_argument(args)
    variety = select_variety(argument, varieties)
    result = variety.evaluate(conditions)
    logger.debug("dispatched %r -> %r", argument, result)
    return result
