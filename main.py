"""Run pomodoro from a source checkout: `python main.py <variety>`."""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"

if __name__ == "__main__":
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from pomodoro.cli.main import run  # noqa: PLC0415

    run()
