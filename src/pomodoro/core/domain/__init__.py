"""Domain models and errors.

Pure data structures for varieties and readings; the domain knows nothing about
the CLI or where readings come from.
"""
