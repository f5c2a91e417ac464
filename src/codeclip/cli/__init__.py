"""Command-line interface for codeclip."""
