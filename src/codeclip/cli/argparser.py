"""Command-line argument parsing for codeclip.

This module defines the command-line interface for codeclip,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from codeclip import __version__
from codeclip.exclusion_rules.size_rules import parse_file_size
from codeclip.settings import DEFAULT_SETTINGS_FILE


def _max_size(value: str) -> int:
    """argparse type for --max-size: a human-readable size in bytes."""
    try:
        return parse_file_size(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with codeclip's options.
    """
    description = """
    codeclip: Copy a source tree to the clipboard as one text document.

    The document lists the directory hierarchy and inlines the content of every
    file whose extension is whitelisted in the settings file, skipping the
    configured directories and files over the size cap. Directories and files
    are emitted in name order so repeated runs produce identical output.
    """

    epilog = f"""
    Settings are read from {DEFAULT_SETTINGS_FILE} in the current directory unless
    -c/--config is given. Command-line options override the file.

    Examples:
      # Render the settings' SourcePath and copy it to the clipboard
      codeclip

      # Render another directory
      codeclip /path/to/project

      # Print to stdout instead of copying, minified
      codeclip --stdout --minify /path/to/project

      # Write to a file, skipping generated code
      codeclip -o tree.txt -i "*.Designer.cs" -i "Migrations/" /path/to/project

      # Use an alternative settings file and a 100 KiB size cap
      codeclip -c ci-settings.json -m 100KiB /path/to/project

      # Report counts on stderr
      codeclip -s /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="codeclip",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"codeclip {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        help="The directory to render. Defaults to the SourcePath setting, or the current directory if it is empty.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        metavar="FILE",
        default=Path(DEFAULT_SETTINGS_FILE),
        help=f"Settings file (default: {DEFAULT_SETTINGS_FILE}).",
    )

    destination = parser.add_mutually_exclusive_group()
    destination.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Write the document to FILE instead of the clipboard.",
    )
    destination.add_argument(
        "--stdout",
        action="store_true",
        help="Write the document to stdout instead of the clipboard.",
    )

    minify = parser.add_mutually_exclusive_group()
    minify.add_argument(
        "--minify",
        dest="minify",
        action="store_const",
        const=True,
        help="Minify the output regardless of the MinifyOutput setting.",
    )
    minify.add_argument(
        "--no-minify",
        dest="minify",
        action="store_const",
        const=False,
        help="Do not minify the output regardless of the MinifyOutput setting.",
    )

    parser.add_argument(
        "-m",
        "--max-size",
        type=_max_size,
        metavar="SIZE",
        help=(
            "Size cap overriding MaxFileSizeKb, in human-readable form (e.g. 500KiB, 2MB) or bytes. "
            "Rounded down to whole KiB; 0 disables the cap."
        ),
    )
    parser.add_argument(
        "-i",
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help=(
            "Gitignore-style pattern of files or directories to leave out, added to IgnorePatterns. "
            "Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        default=[],
        type=Path,
        metavar="FILE",
        help="File of gitignore-style patterns (e.g. .gitignore) to add to IgnorePatterns. Can be repeated.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print directory, file, line and character counts to stderr.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "fail"],
        default="fail",
        help="How to handle directories that cannot be listed (default: fail).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.max_size is not None and 0 < args.max_size < 1024:
        raise ValueError("--max-size must be 0 or at least 1KiB")
    for rules_file in args.exclude:
        if not rules_file.is_file():
            raise ValueError(f"Rules file not found: {rules_file}")
