"""pomodoro CLI.

    pomodoro <variety-name>

Prints the variety evaluator's result and exits 0, or prints the error message
and exits 1. Every token on the command line is a candidate variety name; the
log level and the conditions file come from `POMODORO_LOG_LEVEL` and
`POMODORO_CONDITIONS_FILE`.
"""

from __future__ import annotations

from typing import List, Optional

import typer

from pomodoro.adapters.conditions import build_conditions
from pomodoro.core.config import PomodoroSettings
from pomodoro.core.domain.errors import PomodoroError
from pomodoro.core.logging import get_logger, setup_logging
from pomodoro.core.services.dispatcher import dispatch, select_variety, single_argument
from pomodoro.core.varieties import build_registry

app = typer.Typer(add_completion=False)

logger = get_logger(__name__)


@app.command(
    context_settings={"help_option_names": [], "ignore_unknown_options": True},
)
def grow(
    args: Optional[List[str]] = typer.Argument(None, metavar="VARIETY", show_default=False),
) -> None:
    """Evaluate VARIETY and print the result."""

    try:
        # Usage and name errors are reported before settings are loaded.
        name = select_variety(single_argument(args or [])).name

        settings = PomodoroSettings()
        setup_logging(settings.log_level)
        conditions = build_conditions(settings)
        logger.debug("conditions provider: %s", type(conditions).__name__)

        varieties = build_registry(settings.variety_thresholds)
        result = dispatch([name], conditions, varieties)
    except PomodoroError as exc:
        logger.debug("terminal error: %s", type(exc).__name__)
        typer.echo(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    typer.echo(result)


def run() -> None:
    app(prog_name="pomodoro")
