"""Command-line argument parsing for directory-tree.

This module defines the command-line interface for directory-tree,
handling argument parsing, validation and the translation of exclusion
arguments into patterns.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple, Union

from directory_tree import __version__
from directory_tree.patterns import BasePattern, GitIgnorePattern, RegexPattern


class ExclusionAction(argparse.Action):
    """Action recording exclusion arguments in the order they appear.

    Regex, gitignore-pattern and gitignore-file exclusions share a single list of
    ``(kind, value)`` pairs so that later gitignore rules (in particular negations)
    override earlier ones exactly as written on the command line.
    """

    KINDS = {
        "-i": "regex",
        "--ignore": "regex",
        "-g": "gitignore",
        "--gitignore": "gitignore",
        "-e": "file",
        "--exclude-from": "file",
    }

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        if values is None:
            return
        exclusions = getattr(namespace, "exclusions", None)
        if exclusions is None:
            exclusions = []
            namespace.exclusions = exclusions
        exclusions.append((self.KINDS[option_string or "-i"], values))


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with directory-tree's options.
    """
    description = """
    directory-tree: Print a size-aggregated snapshot of a directory subtree.

    Walks the given path, explores sibling directories concurrently, and reports every
    surviving file and directory with its size. Directory sizes are the sum of the
    sizes of the entries shown beneath them, so filters change the totals.

    Key Features:
    - Exclusion by regular expression or gitignore-style pattern
    - File extension whitelist
    - Depth limit
    - Optional metadata attributes (mtime, ctime, mode, ...) in JSON output
    - Tree or JSON output
    - Configurable permission error handling
    """

    epilog = """
    Examples:
      # Basic tree of a project
      directory-tree /path/to/project

      # Only .txt files, at most two levels deep
      directory-tree -x '\\.txt$' -d 2 /path/to/project

      # Exclude by regular expression and by gitignore pattern
      directory-tree -i 'another_dir' -g 'node_modules/' /path/to/project

      # Exclude with the rules of a .gitignore file
      directory-tree -e .gitignore /path/to/project

      # JSON with modification times, forward-slash paths, written to a file
      directory-tree -f json -a mtime -n -o tree.json /path/to/project

      # Process with different permission handling
      directory-tree -P warn /path/to/project    # Report unreadable directories
      directory-tree -P fail /path/to/project    # Stop on permission errors
      directory-tree -P ignore /path/to/project  # Skip silently (default)
    """

    parser = argparse.ArgumentParser(
        prog="directory-tree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"directory-tree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "path",
        type=Path,
        help="The file or directory to snapshot.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="REGEX",
        action=ExclusionAction,
        help="Exclude entries whose path matches this regular expression (can be specified multiple times).",
    )
    parser.add_argument(
        "-g",
        "--gitignore",
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Exclude entries matching this gitignore-style pattern, relative to PATH "
            "(can be specified multiple times, processed in order)."
        ),
    )
    parser.add_argument(
        "-e",
        "--exclude-from",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Exclude entries matching the rules in a .gitignore-style file (can be specified multiple times).",
    )
    parser.add_argument(
        "-x",
        "--extensions",
        metavar="REGEX",
        help="Only keep files whose lower-cased extension (e.g. '.txt') matches this regular expression.",
    )
    parser.add_argument(
        "-a",
        "--attribute",
        dest="attributes",
        metavar="NAME",
        action="append",
        default=[],
        help="Metadata attribute to include in JSON output, e.g. mtime (can be specified multiple times).",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=int,
        metavar="N",
        help="Maximum number of directory levels to descend (default: unlimited).",
    )
    parser.add_argument(
        "-n",
        "--normalize-path",
        action="store_true",
        help="Report paths with forward slashes regardless of platform.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["tree", "json"],
        default="tree",
        help="Output format (default: tree).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print directory count, file count and total size to stderr.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="ignore",
        help="How to handle directories that cannot be listed (default: ignore).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every skipped entry to stderr.",
    )
    parser.set_defaults(exclusions=None)

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.depth is not None and args.depth < 0:
        raise ValueError("--depth must not be negative")
    if args.attributes and args.format != "json":
        raise ValueError("-a/--attribute requires --format json")


def build_exclusions(args: argparse.Namespace) -> List[BasePattern]:
    """Turn the recorded exclusion arguments into patterns.

    Each regular expression becomes its own RegexPattern. All gitignore patterns
    and files are folded, in command-line order, into a single GitIgnorePattern
    rooted at the traversal path so that negations apply across them.

    Raises:
        InvalidPatternError: If a regular expression does not compile.
        FileNotFoundError: If an exclusion file does not exist.
    """
    patterns: List[BasePattern] = []
    gitignore: Optional[GitIgnorePattern] = None
    exclusions: List[Tuple[str, Any]] = args.exclusions or []

    for kind, value in exclusions:
        if kind == "regex":
            patterns.append(RegexPattern(value))
            continue
        if gitignore is None:
            gitignore = GitIgnorePattern(root=args.path)
            patterns.append(gitignore)
        if kind == "gitignore":
            gitignore.add_rule(value)
        else:
            gitignore.load_rules(value)

    return patterns
