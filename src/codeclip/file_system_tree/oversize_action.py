"""Oversize action enum for handling files larger than the configured size cap."""

from enum import Enum


class OversizeAction(str, Enum):
    """Action to take when a selected file exceeds the size cap.

    Values:
        OMIT: Leave the file out of the output entirely, marker included (default behavior)
        MARK: Render the file's marker with a note in place of its content
    """

    OMIT = "omit"
    MARK = "mark"
