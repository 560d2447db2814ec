"""Base enums for path extension.

Directions of travel and the two result taxonomies returned by the extension
algorithms: one for a single step and one for a complete walk.
"""

from __future__ import annotations

from enum import IntEnum


class Direction(IntEnum):
    """Direction of travel along graph edges."""

    #: Follow outgoing edges (successors).
    FORWARD = 1
    #: Follow incoming edges (predecessors).
    REVERSE = 2

    @property
    def opposite(self) -> "Direction":
        """Return the mirror direction."""
        return Direction.REVERSE if self == Direction.FORWARD else Direction.FORWARD

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        """Parse a string into a Direction enum value.

        Args:
            value: Case-insensitive string name (e.g., "forward", "REVERSE").

        Returns:
            The corresponding Direction enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid direction '{value}'. Valid values are: {valid}"
            ) from None

    def __str__(self) -> str:
        return self.name


class SingleExtensionResult(IntEnum):
    """Outcome of classifying the neighbourhood of one vertex."""

    #: No neighbour survives trimming.
    DEAD_END = 1
    #: Two or more neighbours start true branches.
    BRANCHING_POINT = 2
    #: Exactly one neighbour is eligible for extension.
    EXTENDED = 3

    def __str__(self) -> str:
        return self.name


class PathExtensionResult(IntEnum):
    """Outcome of walking a path until a terminating condition.

    The first four members mean the path was left unchanged; the
    ``EXTENDED_TO_*`` members mean it grew by at least one vertex first.
    """

    #: Path could not be extended because of a dead end.
    DEAD_END = 1
    #: Path could not be extended because of a branching point.
    BRANCHING_POINT = 2
    #: Path could not be extended because the next vertex closes a cycle.
    CYCLE = 3
    #: Path could not be extended because it is already at the length limit.
    LENGTH_LIMIT = 4
    #: Path was extended up to a dead end.
    EXTENDED_TO_DEAD_END = 5
    #: Path was extended up to a branching point.
    EXTENDED_TO_BRANCHING_POINT = 6
    #: Path was extended up to a cycle.
    EXTENDED_TO_CYCLE = 7
    #: Path was extended up to the length limit.
    EXTENDED_TO_LENGTH_LIMIT = 8

    @property
    def extended(self) -> bool:
        """True if the path grew by one or more vertices."""
        return self >= PathExtensionResult.EXTENDED_TO_DEAD_END

    def __str__(self) -> str:
        return self.name


def path_extended(result: PathExtensionResult) -> bool:
    """Return True if ``result`` indicates the path grew by one or more vertices."""
    return result.extended
