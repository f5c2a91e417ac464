"""Settings for selecting and rendering source files.

Settings are read from a JSON document, ``appsettings.json`` in the working
directory by default. Keys are matched case-insensitively:

    {
        "SourcePath": "C:/Projects/MyApp",
        "IncludeExtensions": [".cs", ".json"],
        "SkipDirectories": ["bin", "obj", ".git"],
        "MaxFileSizeKb": 500,
        "MinifyOutput": false
    }

SourcePath, IncludeExtensions and SkipDirectories are required. The optional
keys IgnorePatterns, FollowSymlinks, OversizeAction and Encoding extend the
selection; see Settings for their defaults.
"""

import codecs
import json
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from codeclip.exceptions import ConfigurationError
from codeclip.file_system_tree.oversize_action import OversizeAction
from codeclip.source_reader import DEFAULT_ENCODING
from codeclip.types import PathType

DEFAULT_SETTINGS_FILE = "appsettings.json"

REQUIRED_KEYS = ("sourcepath", "includeextensions", "skipdirectories")


@dataclass(frozen=True)
class Settings:
    """Immutable selection and rendering options.

    Extensions and directory names are stored lower-cased; matching against
    them is case-insensitive.

    Attributes:
        source_path: Directory to render when the caller gives none. Empty means
            the current working directory.
        include_extensions: File extensions to include, with the leading dot.
            Empty means no file is included.
        skip_directories: Directory names skipped at any depth.
        max_file_size_kb: Size cap in kilobytes of 1024 bytes; zero or less
            disables the cap.
        minify_output: Whether the rendered text is minified before delivery.
        ignore_patterns: Additional gitignore-style patterns, relative to the root.
        follow_symlinks: Whether symlinked directories are descended into.
        oversize_action: Whether files over the cap are omitted or marked.
        encoding: Text encoding used to read source files.

    Example:
        >>> settings = Settings(include_extensions=[".CS"], skip_directories=["Bin"])
        >>> sorted(settings.include_extensions), sorted(settings.skip_directories)
        (['.cs'], ['bin'])
    """

    source_path: str = ""
    include_extensions: FrozenSet[str] = field(default_factory=frozenset)
    skip_directories: FrozenSet[str] = field(default_factory=frozenset)
    max_file_size_kb: int = 0
    minify_output: bool = False
    ignore_patterns: Tuple[str, ...] = ()
    follow_symlinks: bool = True
    oversize_action: OversizeAction = OversizeAction.OMIT
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        # Normalize collections so callers may pass any iterable.
        object.__setattr__(self, "include_extensions", _lowered(self.include_extensions))
        object.__setattr__(self, "skip_directories", _lowered(self.skip_directories))
        object.__setattr__(self, "ignore_patterns", tuple(self.ignore_patterns))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], source: Optional[str] = None) -> "Settings":
        """Build settings from a parsed configuration document.

        Args:
            data: Mapping of setting names to values. Keys are case-insensitive.
            source: Where the mapping came from, for error messages.

        Returns:
            Settings: The validated settings.

        Raises:
            ConfigurationError: If a required key is missing or a value has the
                wrong type or an unsupported value.

        Example:
            >>> settings = Settings.from_mapping(
            ...     {"sourcePath": "", "includeExtensions": [".cs"], "skipDirectories": [], "maxFileSizeKB": 500}
            ... )
            >>> settings.max_file_size_kb
            500
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError("settings must be a JSON object", source)

        values: Dict[str, Any] = {str(key).lower(): value for key, value in data.items()}
        missing = [key for key in REQUIRED_KEYS if key not in values]
        if missing:
            names = ", ".join(_DISPLAY_NAMES[key] for key in missing)
            raise ConfigurationError(f"missing required setting(s): {names}", source)

        source_path = values["sourcepath"]
        if source_path is None:
            source_path = ""
        if not isinstance(source_path, str):
            raise ConfigurationError("SourcePath must be a string", source)

        oversize = _typed(values, "oversizeaction", str, OversizeAction.OMIT.value, source)
        try:
            oversize_action = OversizeAction(oversize.lower())
        except ValueError:
            choices = ", ".join(action.value for action in OversizeAction)
            raise ConfigurationError(f"OversizeAction must be one of: {choices}", source)

        encoding = _typed(values, "encoding", str, DEFAULT_ENCODING, source)
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ConfigurationError(f"Encoding '{encoding}' is not available", source)

        return cls(
            source_path=source_path,
            include_extensions=_string_list(values, "includeextensions", source),
            skip_directories=_string_list(values, "skipdirectories", source),
            max_file_size_kb=_typed(values, "maxfilesizekb", int, 0, source),
            minify_output=_typed(values, "minifyoutput", bool, False, source),
            ignore_patterns=tuple(_string_list(values, "ignorepatterns", source)),
            follow_symlinks=_typed(values, "followsymlinks", bool, True, source),
            oversize_action=oversize_action,
            encoding=encoding,
        )

    def with_overrides(self, **changes: Any) -> "Settings":
        """Return a copy with some fields replaced; None values are ignored."""
        return replace(self, **{name: value for name, value in changes.items() if value is not None})

    def resolve_source_path(self) -> str:
        """Return source_path, or the current working directory when it is blank."""
        return self.source_path if self.source_path.strip() else os.getcwd()


def load_settings(path: PathType = DEFAULT_SETTINGS_FILE) -> Settings:
    """Load settings from a JSON file.

    Args:
        path: The settings file. Defaults to appsettings.json in the current
            working directory.

    Returns:
        Settings: The validated settings.

    Raises:
        ConfigurationError: If the file is missing, unreadable, not valid JSON,
            or does not describe valid settings.
    """
    settings_path = Path(path)
    source = str(settings_path)
    try:
        text = settings_path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        raise ConfigurationError("settings file not found", source)
    except OSError as e:
        raise ConfigurationError(f"cannot read settings file: {e}", source) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"invalid JSON: {e}", source) from e

    return Settings.from_mapping(data, source)


_DISPLAY_NAMES = {
    "sourcepath": "SourcePath",
    "includeextensions": "IncludeExtensions",
    "skipdirectories": "SkipDirectories",
    "maxfilesizekb": "MaxFileSizeKb",
    "minifyoutput": "MinifyOutput",
    "ignorepatterns": "IgnorePatterns",
    "followsymlinks": "FollowSymlinks",
    "oversizeaction": "OversizeAction",
    "encoding": "Encoding",
}


def _lowered(items: Iterable[str]) -> FrozenSet[str]:
    return frozenset(item.lower() for item in items)


def _typed(values: Mapping[str, Any], key: str, expected: type, default: Any, source: Optional[str]) -> Any:
    value = values.get(key)
    if value is None:
        return default
    # bool is an int subclass; a JSON true must not pass as a size
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ConfigurationError(f"{_DISPLAY_NAMES[key]} must be of type {expected.__name__}", source)
    return value


def _string_list(values: Mapping[str, Any], key: str, source: Optional[str]) -> Tuple[str, ...]:
    value = values.get(key)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigurationError(f"{_DISPLAY_NAMES[key]} must be a list of strings", source)
    return tuple(value)
