"""File system tree representation with configurable exclusion rules.

This module provides the FileSystemTree class, which walks a directory and builds
the tree of directories and source files a code tree is rendered from. Exclusion
rules decide which entries take part; the size cap decides whether a selected
file is dropped or only has its content withheld.
"""

import os
from pathlib import Path
from typing import List, Optional, Set, Tuple

from codeclip.exceptions import RootNotFoundError
from codeclip.exclusion_rules.base_rules import BaseExclusionRules
from codeclip.exclusion_rules.size_rules import SizeExclusionRules
from codeclip.file_system_tree.file_identifier import FileIdentifier
from codeclip.file_system_tree.file_system_node import FileSystemNode
from codeclip.file_system_tree.oversize_action import OversizeAction
from codeclip.file_system_tree.permission_action import PermissionAction
from codeclip.types import PathType


class FileSystemTree:
    """A tree of the directories and files selected for rendering.

    The tree is built lazily on first access. Each directory node holds its
    selected files first and its selected subdirectories after them, both sorted
    by name with plain ordinal string comparison, which is exactly the order the
    renderer emits them in.

    Selection:
        - Paths are checked against exclusion_rules relative to the root, with a
          trailing "/" for directories. The root itself is never checked.
        - A file larger than the size cap is dropped entirely under
          OversizeAction.OMIT, or kept with ``oversized=True`` under
          OversizeAction.MARK.
        - Entries that are neither regular files nor directories (broken links,
          sockets, devices) are ignored.

    Symbolic Link Behavior:
        With follow_symlinks (the default) a symlinked directory is descended into
        like any other, except when it resolves to a directory already on the
        current branch; such a directory is skipped so link cycles terminate.
        Without follow_symlinks, symlinked directories are skipped. Symlinked
        files are always treated as files.

    Permission Handling:
        A directory whose listing is denied either raises PermissionError (RAISE,
        the default) or keeps its node with no children (IGNORE). Other listing
        failures, such as a directory removed during the walk, propagate unchanged.

    Attributes:
        root_path (Path): The root directory.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding files/directories.
        size_rules (Optional[SizeExclusionRules]): The size cap, if any.
        oversize_action (OversizeAction): What to do with files over the cap.
        permission_action (PermissionAction): How to handle listing failures.
        follow_symlinks (bool): Whether to descend into symlinked directories.

    Example:
        >>> from codeclip.exclusion_rules import ExtensionInclusionRules
        >>> tree = FileSystemTree("src", ExtensionInclusionRules([".cs"]))  # doctest: +SKIP
        >>> [node.name for node in tree.get_tree().children]  # doctest: +SKIP
        ['Program.cs', 'Models']
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        size_rules: Optional[SizeExclusionRules] = None,
        oversize_action: OversizeAction = OversizeAction.OMIT,
        permission_action: PermissionAction = PermissionAction.RAISE,
        follow_symlinks: bool = True,
    ) -> None:
        self.root_path = Path(root_path)
        self.exclusion_rules = exclusion_rules
        self.size_rules = size_rules
        self.oversize_action = oversize_action
        self.permission_action = permission_action
        self.follow_symlinks = follow_symlinks
        self._tree: Optional[FileSystemNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the tree, building it on first access.

        Raises:
            RootNotFoundError: If the root path doesn't exist or isn't a directory.
            PermissionError: If a directory cannot be listed and permission_action is RAISE.
            OSError: If listing a directory fails for a reason other than permissions.
        """
        if self._tree is None:
            self._build_tree()
        assert self._tree is not None
        return self._tree

    def _build_tree(self) -> None:
        if not self.root_path.is_dir():
            raise RootNotFoundError(str(self.root_path))

        self._file_count = 0
        self._directory_count = 0

        root = FileSystemNode(_root_name(self.root_path), fs_path=self.root_path, is_dir=True)
        root_id = FileIdentifier.for_path(self.root_path)
        ancestors: Set[FileIdentifier] = {root_id} if root_id is not None else set()
        self._populate(root, "", ancestors)
        self._tree = root

    def _populate(self, node: FileSystemNode, relative_path: str, ancestors: Set[FileIdentifier]) -> None:
        """Attach the selected children of a directory node, recursing into subdirectories."""
        try:
            names = os.listdir(node.fs_path)
        except PermissionError as e:
            if self.permission_action == PermissionAction.RAISE:
                raise PermissionError(f"Access denied to {node.fs_path}: {e}") from e
            return

        files: List[Tuple[str, Path, int]] = []
        directories: List[Tuple[str, Path]] = []
        for name in names:
            child_path = node.fs_path / name
            child_relative = f"{relative_path}{name}"
            try:
                if child_path.is_dir():
                    if child_path.is_symlink() and not self.follow_symlinks:
                        continue
                    if not self._excluded(child_relative + "/"):
                        directories.append((name, child_path))
                elif child_path.is_file():
                    if not self._excluded(child_relative):
                        files.append((name, child_path, child_path.stat().st_size))
            except OSError:
                # Entry vanished or cannot be stat'ed; it has nothing to render.
                continue

        for name, child_path, size in sorted(files):
            oversized = self.size_rules is not None and self.size_rules.exceeds_limit(size)
            if oversized and self.oversize_action == OversizeAction.OMIT:
                continue
            FileSystemNode(name, parent=node, fs_path=child_path, file_size=size, oversized=oversized)
            self._file_count += 1

        for name, child_path in sorted(directories):
            child_id = FileIdentifier.for_path(child_path)
            if child_id is not None and child_id in ancestors:
                continue
            child = FileSystemNode(name, parent=node, fs_path=child_path, is_dir=True)
            self._directory_count += 1

            branch = ancestors | {child_id} if child_id is not None else ancestors
            self._populate(child, f"{relative_path}{name}/", branch)

    def _excluded(self, relative_path: str) -> bool:
        return self.exclusion_rules is not None and self.exclusion_rules.exclude(relative_path)

    def get_file_count(self) -> int:
        """Get the number of files in the tree, oversized files kept by MARK included."""
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the number of directories in the tree, excluding the root."""
        self.get_tree()
        return self._directory_count


def _root_name(root_path: Path) -> str:
    """Return the display name of the root: its absolute base name, or the path for a filesystem root.

    Symbolic links are not resolved, so a linked root keeps the name it was given by.
    """
    absolute = Path(os.path.abspath(root_path))
    return absolute.name or str(absolute)
