"""Shared typing constructs for dbgpath.

This package defines the direction and result enums and the immutable result
containers used across the codebase. It contains no graph logic.
"""

from dbgpath.types.base import (
    Direction,
    PathExtensionResult,
    SingleExtensionResult,
    path_extended,
)
from dbgpath.types.dto import SingleExtension, UnitigResult, Vertex

__all__ = [
    # Enums
    "Direction",
    "SingleExtensionResult",
    "PathExtensionResult",
    # Helpers
    "path_extended",
    # Type aliases
    "Vertex",
    # DTOs
    "SingleExtension",
    "UnitigResult",
]
