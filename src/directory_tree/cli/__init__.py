"""Command-line interface for directory-tree."""
