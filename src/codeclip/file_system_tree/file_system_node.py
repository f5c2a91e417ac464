"""Node representation for directories and source files in the tree."""

from pathlib import Path
from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory selected for rendering.

    Extends anytree.Node with the filesystem facts the renderer needs. Children
    are attached in render order: a directory's files first, then its
    subdirectories, each group sorted by name.

    Attributes:
        name (str): The base name of the file or directory.
        parent (Optional[FileSystemNode]): The parent node in the tree.
        fs_path (Path): Filesystem path of the entry. Named to avoid anytree's own
            `path` property, which lists the ancestor nodes.
        is_dir (bool): True if this node represents a directory, False for files.
        file_size (Optional[int]): Byte length of a file, None for directories. Named
            to avoid anytree's own `size` property, which counts the subtree's nodes.
        oversized (bool): True if the file exceeds the size cap and its content
            must not be inlined.

    Example:
        >>> root = FileSystemNode("src", fs_path=Path("src"), is_dir=True)
        >>> child = FileSystemNode("Main.cs", parent=root, fs_path=Path("src/Main.cs"), file_size=20)
        >>> child.is_dir
        False
        >>> [node.name for node in root.children]
        ['Main.cs']
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        fs_path: Optional[Path] = None,
        is_dir: bool = False,
        file_size: Optional[int] = None,
        oversized: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.fs_path = fs_path if fs_path is not None else Path(name)
        self.is_dir = is_dir
        self.file_size = file_size
        self.oversized = oversized
