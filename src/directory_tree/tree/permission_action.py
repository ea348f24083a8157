"""Permission action enum for handling permission errors during directory traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be listed due to access rights.

    Values:
        IGNORE: Drop the directory from its parent's children (default behavior)
        RAISE: Let the PermissionError propagate and abort the traversal
    """

    IGNORE = "ignore"
    RAISE = "raise"
