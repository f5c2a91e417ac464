"""File size cap and human-readable size parsing."""

from humanfriendly import InvalidSize, parse_size


def parse_file_size(size_str: str) -> int:
    """Parse human-readable file size to bytes.

    Args:
        size_str: Size string like '500KiB', '2MB', '2.5K', or just '1024'

    Returns:
        Size in bytes

    Raises:
        ValueError: If size_str is not a valid size format

    Example:
        >>> parse_file_size("500KiB")
        512000
        >>> parse_file_size("1024")
        1024
    """
    try:
        return int(parse_size(size_str))
    except (InvalidSize, ValueError) as e:
        raise ValueError(f"Invalid size format '{size_str}': {e}")


class SizeExclusionRules:
    """Size cap applied to the files selected for rendering.

    Files strictly larger than the limit are over the cap. A limit of zero
    disables the cap entirely. The tree checks the byte length it already
    stat'ed for each file, so a symlinked file is measured by its target.

    Attributes:
        max_size_bytes (int): Maximum allowed file size in bytes, 0 for no limit.

    Example:
        >>> rules = SizeExclusionRules.from_kilobytes(500)
        >>> rules.max_size_bytes
        512000
        >>> rules.exceeds_limit(512001)
        True
        >>> SizeExclusionRules.from_kilobytes(0).has_rules()
        False
    """

    def __init__(self, max_size_bytes: int):
        """Initialize the size cap.

        Args:
            max_size_bytes: Maximum file size in bytes, 0 for no limit.

        Raises:
            ValueError: If max_size_bytes is not an integer or is negative
        """
        if isinstance(max_size_bytes, bool) or not isinstance(max_size_bytes, int):
            raise ValueError(f"max_size_bytes must be int, got {type(max_size_bytes)}")
        if max_size_bytes < 0:
            raise ValueError("Size cannot be negative")
        self.max_size_bytes = max_size_bytes

    @classmethod
    def from_kilobytes(cls, max_size_kb: int) -> "SizeExclusionRules":
        """Build the cap from kilobytes of 1024 bytes; zero or less means no cap."""
        return cls(max(max_size_kb, 0) * 1024)

    def exceeds_limit(self, size: int) -> bool:
        """Check a known byte length against the limit."""
        return self.has_rules() and size > self.max_size_bytes

    def has_rules(self) -> bool:
        """Check if a size limit is configured.

        Returns:
            True if a positive size limit is configured, False otherwise.
        """
        return self.max_size_bytes > 0
