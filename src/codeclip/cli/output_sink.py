"""Destinations the rendered document can be delivered to.

The renderer produces one string; a sink decides where it goes. Copying to the
clipboard is the default, with a file or standard output as alternatives for
scripting and for systems without a clipboard.
"""

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, TextIO

import pyperclip

from codeclip.types import PathType


class OutputSink(ABC):
    """Receives the final document exactly once."""

    @abstractmethod
    def deliver(self, text: str) -> None:
        """Hand the document to its destination.

        Raises:
            OSError: If the destination cannot be written.
        """

    @abstractmethod
    def describe(self) -> str:
        """Past-tense phrase for the status line, e.g. "copied to the clipboard"."""


class ClipboardSink(OutputSink):
    """Copies the document to the system clipboard using pyperclip.

    Raises:
        pyperclip.PyperclipException: From deliver(), if no clipboard mechanism
            is available (e.g. a headless Linux system without xclip or xsel).
    """

    def deliver(self, text: str) -> None:
        pyperclip.copy(text)

    def describe(self) -> str:
        return "copied to the clipboard"


class FileSink(OutputSink):
    """Writes the document to a file as UTF-8, replacing any previous content.

    Attributes:
        path (Path): The file written to.
    """

    def __init__(self, path: PathType):
        self.path = Path(path)

    def deliver(self, text: str) -> None:
        with self.path.open("w", encoding="utf-8") as f:
            f.write(text)

    def describe(self) -> str:
        return f"written to {self.path}"


class StdoutSink(OutputSink):
    """Writes the document to standard output as UTF-8 bytes.

    Bytes are written to the underlying buffer, so the tree glyphs survive a
    console whose text encoding cannot represent them.

    Attributes:
        stream (Optional[TextIO]): Stream to write to; None means sys.stdout at
            delivery time.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def deliver(self, text: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.flush()
        stream.buffer.write(text.encode("utf-8"))
        stream.flush()

    def describe(self) -> str:
        return "written to stdout"
