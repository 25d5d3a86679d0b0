"""Run the CLI with `python -m pomodoro`."""

from pomodoro.cli.main import run

if __name__ == "__main__":
    run()
