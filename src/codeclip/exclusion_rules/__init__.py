"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .directory_rules import DirectoryNameExclusionRules
from .extension_rules import ExtensionInclusionRules, file_extension
from .git_rules import GitIgnoreExclusionRules
from .size_rules import SizeExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "DirectoryNameExclusionRules",
    "ExtensionInclusionRules",
    "GitIgnoreExclusionRules",
    "SizeExclusionRules",
    "file_extension",
]
