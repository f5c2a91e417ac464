from abc import ABC, abstractmethod


def is_directory_path(path: str) -> bool:
    """Return True if a traversal path denotes a directory.

    The tree passes directory paths with a trailing slash, the same convention
    .gitignore patterns use to target directories only.
    """
    return path.endswith("/")


def entry_name(path: str) -> str:
    """Return the last component of a traversal path, without any trailing slash.

    Example:
        >>> entry_name("src/bin/")
        'bin'
        >>> entry_name("src/main.cs")
        'main.cs'
    """
    return path.rstrip("/").rsplit("/", 1)[-1]


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Every path filter the renderer applies (extension whitelist, skipped directory
    names, gitignore-style patterns) implements this one method, so the tree can
    combine them without knowing what each checks.

    Paths handed to exclude() are relative to the traversal root, use forward
    slashes, and end with "/" when they denote a directory.

    Example:
        >>> from codeclip.exclusion_rules.extension_rules import ExtensionInclusionRules
        >>> rules = ExtensionInclusionRules([".cs"])
        >>> rules.exclude("src/Program.cs")
        False
        >>> rules.exclude("src/notes.txt")
        True
        >>> rules.exclude("src/")  # directories are never excluded by extension
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The path to check, relative to the traversal root. Directory
                paths end with "/".

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass
