"""Rendering of a directory tree and its source files as one text document.

The document starts with a title naming the root and a separator, followed by a
pre-order walk of the selected tree: each directory contributes a marker line,
then its files (marker, label and inlined content), then its subdirectories one
indentation level deeper.

Example output:
    Code Tree for: ./demo
    =====================================
    📁 demo/
    ├── 📄 Program.cs
    │   Content:
    │   Console.WriteLine("hi");
    │
        📁 Models/
        ├── 📄 User.cs
        │   Error reading file: [Errno 13] Permission denied: 'demo/Models/User.cs'
"""

from typing import Iterator, List, Optional

from humanfriendly import format_size

from codeclip.exclusion_rules.base_rules import BaseExclusionRules
from codeclip.exclusion_rules.composite_rules import CompositeExclusionRules
from codeclip.exclusion_rules.directory_rules import DirectoryNameExclusionRules
from codeclip.exclusion_rules.extension_rules import ExtensionInclusionRules
from codeclip.exclusion_rules.git_rules import GitIgnoreExclusionRules
from codeclip.exclusion_rules.size_rules import SizeExclusionRules
from codeclip.file_system_tree.file_system_node import FileSystemNode
from codeclip.file_system_tree.file_system_tree import FileSystemTree
from codeclip.file_system_tree.permission_action import PermissionAction
from codeclip.settings import Settings
from codeclip.source_reader import FileReadResult, read_source_file
from codeclip.types import PathType

INDENT_UNIT = "    "
SEPARATOR = "=" * 37
DIRECTORY_GLYPH = "📁"
FILE_GLYPH = "📄"
FILE_PREFIX = "├── "
CONTENT_PREFIX = "│   "
CONTENT_END = "│"


def build_exclusion_rules(settings: Settings) -> BaseExclusionRules:
    """Combine the extension whitelist, skipped directory names and ignore patterns."""
    rules: List[BaseExclusionRules] = [
        ExtensionInclusionRules(settings.include_extensions),
        DirectoryNameExclusionRules(settings.skip_directories),
    ]
    if settings.ignore_patterns:
        rules.append(GitIgnoreExclusionRules(settings.ignore_patterns))
    return CompositeExclusionRules(rules)


class CodeTreeRenderer:
    """Renders a directory and the source files selected by a Settings object.

    The renderer reads the filesystem only; calling render() twice on an
    unchanged tree yields identical text. The selected tree is built on first
    use and reused, while file contents are read while lines are produced.

    Attributes:
        root_path (PathType): The directory to render, as given by the caller.
        settings (Settings): Selection and reading options.
        fs_tree (FileSystemTree): The selected tree.

    Example:
        >>> renderer = CodeTreeRenderer("src", settings)  # doctest: +SKIP
        >>> for line in renderer.stream_lines():  # doctest: +SKIP
        ...     print(line)
        Code Tree for: src
        =====================================
        📁 src/
        ├── 📄 Program.cs
        ...
    """

    def __init__(
        self,
        root_path: PathType,
        settings: Settings,
        permission_action: PermissionAction = PermissionAction.RAISE,
    ) -> None:
        """Initialize the renderer.

        Args:
            root_path: Directory to render. The title line shows it exactly as given.
            settings: Extension whitelist, skipped directories, size cap and the
                other selection options.
            permission_action: How to handle directories that cannot be listed.
                Defaults to RAISE.
        """
        self.root_path = root_path
        self.settings = settings
        self.fs_tree = FileSystemTree(
            root_path,
            build_exclusion_rules(settings),
            size_rules=SizeExclusionRules.from_kilobytes(settings.max_file_size_kb),
            oversize_action=settings.oversize_action,
            permission_action=permission_action,
            follow_symlinks=settings.follow_symlinks,
        )

    @property
    def file_count(self) -> int:
        return self.fs_tree.get_file_count()

    @property
    def directory_count(self) -> int:
        return self.fs_tree.get_directory_count()

    def stream_lines(self) -> Iterator[str]:
        """Generate the document one line at a time, without line terminators.

        Raises:
            RootNotFoundError: If the root directory does not exist. Raised before
                any line is produced.
            PermissionError: If a directory cannot be listed and the permission
                action is RAISE.
            OSError: If listing a directory fails for any other reason.
        """
        root = self.fs_tree.get_tree()
        yield f"Code Tree for: {self.root_path}"
        yield SEPARATOR
        yield from self._directory_lines(root, "")

    def render(self) -> str:
        """Render the complete document; every line ends with a line feed."""
        return "".join(line + "\n" for line in self.stream_lines())

    def _directory_lines(self, node: FileSystemNode, indent: str) -> Iterator[str]:
        yield f"{indent}{DIRECTORY_GLYPH} {node.name}/"

        for child in node.children:
            if not child.is_dir:
                yield from self._file_lines(child, indent)

        for child in node.children:
            if child.is_dir:
                yield from self._directory_lines(child, indent + INDENT_UNIT)

    def _file_lines(self, node: FileSystemNode, indent: str) -> Iterator[str]:
        yield f"{indent}{FILE_PREFIX}{FILE_GLYPH} {node.name}"

        if node.oversized:
            limit = self.settings.max_file_size_kb * 1024
            yield (
                f"{indent}{CONTENT_PREFIX}Content omitted: {format_size(node.file_size, binary=True)} "
                f"exceeds the {format_size(limit, binary=True)} limit"
            )
            return

        result: FileReadResult = read_source_file(node.fs_path, self.settings.encoding)
        if not result.ok:
            yield f"{indent}{CONTENT_PREFIX}Error reading file: {result.error}"
            return

        yield f"{indent}{CONTENT_PREFIX}Content:"
        for line in result.lines():
            yield f"{indent}{CONTENT_PREFIX}{line}"
        yield f"{indent}{CONTENT_END}"


def render_code_tree(
    root_path: Optional[PathType],
    settings: Settings,
    permission_action: PermissionAction = PermissionAction.RAISE,
) -> str:
    """Render a directory's code tree as a single string.

    Args:
        root_path: Directory to render. None falls back to settings.source_path,
            and an empty source path to the current working directory.
        settings: Selection and reading options.
        permission_action: How to handle directories that cannot be listed.

    Returns:
        str: The rendered document. Minification is left to the caller.

    Raises:
        RootNotFoundError: If the resolved root directory does not exist.
        PermissionError: If a directory cannot be listed and permission_action is RAISE.
        OSError: If listing a directory fails for any other reason.
    """
    if root_path is None:
        root_path = settings.resolve_source_path()
    return CodeTreeRenderer(root_path, settings, permission_action=permission_action).render()

