"""pomodoro core: domain, contracts and services, free of CLI and concrete I/O."""
