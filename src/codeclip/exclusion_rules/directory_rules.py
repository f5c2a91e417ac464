"""Directory-name exclusion, applied at any depth of the traversal."""

from typing import FrozenSet, Iterable

from .base_rules import BaseExclusionRules, entry_name, is_directory_path


class DirectoryNameExclusionRules(BaseExclusionRules):
    """Excludes directories whose base name appears in a fixed set.

    Only the directory's own name is compared, never its path, so "bin" skips
    "bin/", "src/bin/" and "src/app/Bin/" alike. Comparison is case-insensitive.
    Files are never excluded by this rule. The traversal root is not passed to
    exclusion rules, so it can never be skipped.

    Attributes:
        names (FrozenSet[str]): Lower-cased directory names to skip.

    Example:
        >>> rules = DirectoryNameExclusionRules(["bin", "OBJ"])
        >>> rules.exclude("src/Obj/")
        True
        >>> rules.exclude("src/objects/")
        False
        >>> rules.exclude("bin")  # a file named "bin" is not a directory
        False
    """

    def __init__(self, names: Iterable[str]):
        self.names: FrozenSet[str] = frozenset(name.lower() for name in names)

    def exclude(self, path: str) -> bool:
        if not is_directory_path(path):
            return False
        return entry_name(path).lower() in self.names
