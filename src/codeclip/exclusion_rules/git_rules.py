"""Implementation of exclusion rules using .gitignore pattern syntax."""

from pathlib import Path
from typing import Iterable, List, Optional

from pathspec import PathSpec

from codeclip.types import PathType

from .base_rules import BaseExclusionRules


def read_patterns(rules_file: PathType) -> List[str]:
    """Read the lines of a .gitignore-style file.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    path = Path(rules_file)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")
    return path.read_text(encoding="utf-8").splitlines()


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    This class uses the pathspec library to match paths against patterns the
    same way Git does. It supports basic globs, directory-only patterns ending
    in "/", negation with "!", "**" and comment lines.

    Patterns come from the IgnorePatterns setting, the -i option and the
    files given with -e (see read_patterns). Later patterns override earlier
    ones, which matters for negations.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules(["*.Designer.cs", "generated/"])
        >>> rules.exclude("Forms/Main.Designer.cs")
        True
        >>> rules.exclude("generated/")
        True
        >>> rules.exclude("src/Main.cs")
        False
        >>> GitIgnoreExclusionRules(["*.Designer.cs", "!keep.Designer.cs"]).exclude("keep.Designer.cs")
        False

    Note:
        The paths provided to exclude() should use forward slashes (/) as path separators,
        even on Windows systems, to match Git's behavior.
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        """Initialize with an optional sequence of .gitignore patterns.

        Args:
            patterns: Patterns in .gitignore syntax. Defaults to none.
        """
        self.spec = PathSpec.from_lines("gitwildmatch", list(patterns) if patterns is not None else [])

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded based on the loaded .gitignore patterns.

        Args:
            path: The relative path to check. Directories end with "/".

        Returns:
            bool: True if the last matching pattern excludes the path.
        """
        return self.spec.match_file(path)
