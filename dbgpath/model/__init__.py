"""Data containers for path extension."""

from dbgpath.model.path import Path

__all__ = ["Path"]
