"""Permission action enum for handling directory listing failures during traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be listed during traversal.

    Values:
        IGNORE: Keep the directory's marker but skip its contents
        RAISE: Raise a PermissionError immediately, aborting the render (default behavior)
    """

    IGNORE = "ignore"
    RAISE = "raise"
