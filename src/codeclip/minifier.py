"""Whitespace compaction for rendered code trees."""

import re

_WHITESPACE_RUN = re.compile(r"\s{2,}")


def minify(text: str) -> str:
    """Compact a rendered document by removing blank lines and redundant whitespace.

    Each line is stripped, lines left empty are dropped, runs of two or more
    whitespace characters inside a line become a single space, and the
    surviving lines are concatenated with no separator. The result is meant to
    be small, not readable.

    Applying minify() to its own output returns it unchanged.

    Args:
        text: The rendered document.

    Returns:
        str: The compacted text. It contains no line feeds.

    Example:
        >>> minify("Code Tree for: src\\n\\n    ├── 📄 a.cs\\n    │   int  x =   1;\\n")
        'Code Tree for: src├── 📄 a.cs│ int x = 1;'
    """
    lines = (line.strip() for line in text.split("\n"))
    return "".join(_WHITESPACE_RUN.sub(" ", line) for line in lines if line)
