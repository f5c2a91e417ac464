"""Command-line interface for codeclip.

This module provides the command-line entry point: it loads the settings,
resolves the directory to render, renders and optionally minifies the code
tree, and delivers the result to the clipboard, a file, or stdout.

Status messages and errors go to stderr so stdout only ever carries the
document itself.

Exit Codes:
    0: Successful completion
    1: Configuration error, missing directory, or other runtime error
    2: Command-line syntax error
    126: Permission denied while listing a directory
    141: Broken pipe while writing to stdout

Example:
    # Copy the configured SourcePath to the clipboard
    $ codeclip

    # Render a specific directory to stdout
    $ codeclip --stdout /path/to/project
"""

import argparse
import os
import sys
from typing import List, Optional

import pyperclip

from codeclip.cli.argparser import create_parser, validate_args
from codeclip.cli.output_sink import ClipboardSink, FileSink, OutputSink, StdoutSink
from codeclip.code_tree import CodeTreeRenderer
from codeclip.exceptions import ConfigurationError, RootNotFoundError
from codeclip.exclusion_rules.git_rules import read_patterns
from codeclip.file_system_tree.permission_action import PermissionAction
from codeclip.minifier import minify
from codeclip.settings import Settings, load_settings


def format_counts(directories: int, files: int, text: str) -> str:
    """Format the summary counts into a human-readable string.

    Args:
        directories: Number of rendered directories, excluding the root.
        files: Number of rendered files.
        text: The delivered document.

    Returns:
        A formatted string showing all counts with appropriate labels.

    Example:
        >>> print(format_counts(2, 3, "a\\nb\\n"))
        Directories: 2
        Files: 3
        Lines: 2
        Characters: 4
    """
    line_count = text.count("\n")
    result = [
        f"Directories: {directories}",
        f"Files: {files}",
        f"Lines: {line_count}",
        f"Characters: {len(text)}",
    ]
    return "\n".join(result)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Merge command-line overrides into the loaded settings."""
    patterns: List[str] = list(settings.ignore_patterns)
    for rules_file in args.exclude:
        patterns.extend(read_patterns(rules_file))
    patterns.extend(args.ignore)

    return settings.with_overrides(
        source_path=str(args.directory) if args.directory is not None else None,
        minify_output=args.minify,
        max_file_size_kb=args.max_size // 1024 if args.max_size is not None else None,
        ignore_patterns=tuple(patterns),
    )


def select_sink(args: argparse.Namespace) -> OutputSink:
    """Pick the output destination requested on the command line."""
    if args.output is not None:
        return FileSink(args.output)
    if args.stdout:
        return StdoutSink()
    return ClipboardSink()


def _silence_stdout() -> None:
    """Point stdout at the null device so the interpreter's final flush cannot fail again."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        pass


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the codeclip command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:]. Used by tests.

    Exit codes:
        0: Successful completion
        1: Configuration error, missing directory, or other runtime error
        2: Command-line syntax error
        126: Permission denied while listing a directory
        141: Broken pipe while writing to stdout
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    print("Code Tree Generator", file=sys.stderr)
    print("------------------", file=sys.stderr)

    try:
        validate_args(args)
        settings = apply_overrides(load_settings(args.config), args)

        perm_action = {
            "ignore": PermissionAction.IGNORE,
            "fail": PermissionAction.RAISE,
        }[args.permission_action]

        renderer = CodeTreeRenderer(settings.resolve_source_path(), settings, permission_action=perm_action)
        result = renderer.render()
        if settings.minify_output:
            result = minify(result)

        sink = select_sink(args)
        sink.deliver(result)

        print(f"\nThe code tree has been {sink.describe()}.", file=sys.stderr)
        if args.summary:
            print(format_counts(renderer.directory_count, renderer.file_count, result), file=sys.stderr)

    except ConfigurationError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    except RootNotFoundError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    except BrokenPipeError:
        _silence_stdout()
        sys.exit(141)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except pyperclip.PyperclipException as e:
        print(f"Error: Could not copy to the clipboard: {str(e)}", file=sys.stderr)
        print("Use -o/--output FILE or --stdout instead.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
