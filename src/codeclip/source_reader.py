"""Whole-file reading with failures captured as values.

A single unreadable file must never abort a render, so read_source_file()
reports permission, lock and decoding problems in its result instead of
raising them.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from codeclip.types import PathType

DEFAULT_ENCODING = "utf-8-sig"


@dataclass(frozen=True)
class FileReadResult:
    """Outcome of reading one source file.

    Exactly one of content and error is set.

    Attributes:
        path: The file that was read.
        content: The decoded text, if the read succeeded.
        error: Description of the failure, if the read failed.

    Example:
        >>> FileReadResult(Path("a.cs"), content="x\\n").lines()
        ['x', '']
        >>> FileReadResult(Path("a.cs"), error="Permission denied").ok
        False
    """

    path: Path
    content: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def lines(self) -> List[str]:
        """Split the content on line feeds, right-trimming each line.

        Carriage returns are removed by the trim, so CRLF files render like LF
        files. A trailing line feed leaves one empty last line.
        """
        if self.content is None:
            return []
        return [line.rstrip() for line in self.content.split("\n")]


def read_source_file(path: PathType, encoding: str = DEFAULT_ENCODING) -> FileReadResult:
    """Read a file's full text.

    Line endings are left untranslated; FileReadResult.lines() deals with them.

    Args:
        path: File to read.
        encoding: Text encoding. The default decodes UTF-8 and drops a byte
            order mark if present.

    Returns:
        FileReadResult: The content, or the error message if the file could not
            be opened, read or decoded.
    """
    path_obj = Path(path)
    try:
        with open(path_obj, "r", encoding=encoding, newline="") as file:
            return FileReadResult(path_obj, content=file.read())
    except UnicodeDecodeError as e:
        return FileReadResult(path_obj, error=f"Failed to decode '{path_obj.name}' with {encoding} encoding: {e}")
    except OSError as e:
        return FileReadResult(path_obj, error=str(e))
