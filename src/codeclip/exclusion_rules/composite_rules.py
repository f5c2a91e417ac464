"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A path is excluded if ANY of the constituent rules excludes it. This is how
    the renderer joins the extension whitelist, the skipped directory names and
    the ignore patterns into the single filter the tree consults.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from codeclip.exclusion_rules.directory_rules import DirectoryNameExclusionRules
        >>> from codeclip.exclusion_rules.extension_rules import ExtensionInclusionRules
        >>> composite = CompositeExclusionRules(
        ...     [ExtensionInclusionRules([".cs"]), DirectoryNameExclusionRules(["bin"])]
        ... )
        >>> composite.exclude("bin/")
        True
        >>> composite.exclude("notes.txt")
        True
        >>> composite.exclude("src/")
        False
        >>> composite.exclude("src/Main.cs")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded by any constituent rule.

        Uses short-circuit evaluation: stops checking as soon as any rule
        returns True for exclusion.
        """
        return any(rule.exclude(path) for rule in self.rules)
