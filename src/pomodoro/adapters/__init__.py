"""Adapters: concrete implementations of the core contracts."""
