"""Extension whitelist for selecting which files are rendered."""

from typing import FrozenSet, Iterable

from .base_rules import BaseExclusionRules, is_directory_path


def file_extension(name: str) -> str:
    """Return the extension of a file name, including the leading dot.

    The extension runs from the last dot to the end of the name, so dot-files
    such as ".gitignore" are their own extension. A name without a dot, or
    ending in a dot, has no extension.

    Example:
        >>> file_extension("Program.CS")
        '.CS'
        >>> file_extension("archive.tar.gz")
        '.gz'
        >>> file_extension(".gitignore")
        '.gitignore'
        >>> file_extension("Makefile")
        ''
        >>> file_extension("trailing.")
        ''
    """
    index = name.rfind(".")
    if index == -1 or index == len(name) - 1:
        return ""
    return name[index:]


class ExtensionInclusionRules(BaseExclusionRules):
    """Excludes every file whose extension is not in a whitelist.

    Matching is case-insensitive and includes the leading dot, so ".cs" selects
    both "Main.cs" and "Main.CS". An empty whitelist excludes every file.
    Directories are never excluded by this rule.

    Attributes:
        extensions (FrozenSet[str]): Lower-cased extensions to keep.

    Example:
        >>> rules = ExtensionInclusionRules([".CS", ".json"])
        >>> sorted(rules.extensions)
        ['.cs', '.json']
        >>> rules.exclude("Main.cs")
        False
        >>> rules.exclude("readme.md")
        True
    """

    def __init__(self, extensions: Iterable[str]):
        self.extensions: FrozenSet[str] = frozenset(ext.lower() for ext in extensions)

    def exclude(self, path: str) -> bool:
        if is_directory_path(path):
            return False
        name = path.rsplit("/", 1)[-1]
        return file_extension(name).lower() not in self.extensions
