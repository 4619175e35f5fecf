"""Command-line interface for compact-path-tree."""
