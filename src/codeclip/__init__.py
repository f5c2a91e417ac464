"""Source tree to clipboard utilities.

This package walks a directory, selects source files by extension and size,
and renders the directory hierarchy together with the file contents as a
single text document suitable for pasting elsewhere.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("codeclip")
except PackageNotFoundError:
    __version__ = "unknown"
