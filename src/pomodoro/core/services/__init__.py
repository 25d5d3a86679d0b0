"""Services that orchestrate the core for entry points (CLI, tests)."""
