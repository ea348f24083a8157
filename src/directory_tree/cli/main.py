"""Command-line interface for directory-tree.

This module provides the command-line interface for directory-tree, printing a
size-aggregated snapshot of a directory subtree as a tree or as JSON.

Exit Codes:
    0: Successful completion
    1: Runtime error, or nothing to report (the path is missing, unreadable or excluded)
    2: Command-line syntax error
    126: Permission denied (with -P fail)
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe on Unix-like systems

Example:
    # Basic usage
    $ directory-tree /path/to/dir

    # JSON of .py files only, failing on unreadable directories
    $ directory-tree -f json -x '\\.py$' -P fail /path/to/dir
"""

import logging
import sys
from typing import Optional

from directory_tree.cli.argparser import build_exclusions, create_parser, validate_args
from directory_tree.export import count_nodes, render, to_json
from directory_tree.options import TreeOptions
from directory_tree.tree.permission_action import PermissionAction
from directory_tree.tree.tree_builder import build_tree
from directory_tree.tree.tree_node import TreeNode
from directory_tree.types import SkipReason


def format_summary(root: TreeNode) -> str:
    """Format directory count, file count and total size into a human-readable string."""
    files, directories = count_nodes(root)
    return "\n".join(
        [
            f"Directories: {directories}",
            f"Files: {files}",
            f"Size: {root.size}",
        ]
    )


def warn_permission_denied(path: str, reason: SkipReason) -> None:
    if reason is SkipReason.PERMISSION_DENIED:
        print(f"Warning: Permission denied: {path}", file=sys.stderr)


def main(argv: Optional[list] = None) -> None:
    """Main entry point for the directory-tree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution, or nothing to report
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        validate_args(args)

        if args.verbose:
            logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

        options = TreeOptions(
            normalize_path=args.normalize_path,
            exclude=build_exclusions(args) or None,
            extensions=args.extensions,
            attributes=args.attributes,
            permission_action=PermissionAction.RAISE if args.permission_action == "fail" else PermissionAction.IGNORE,
        )
        on_skip = warn_permission_denied if args.permission_action == "warn" else None

        try:
            root = build_tree(args.path, options, depth=args.depth, on_skip=on_skip)
        except PermissionError as e:
            print(f"Error: {str(e)}", file=sys.stderr)
            sys.exit(126)

        if root is None:
            print(f"Error: Nothing to report for {args.path}", file=sys.stderr)
            sys.exit(1)

        output = to_json(root) if args.format == "json" else render(root)
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(output + "\n")
        else:
            sys.stdout.write(output + "\n")
            sys.stdout.flush()

        if args.summary:
            print(format_summary(root), file=sys.stderr)

    except KeyboardInterrupt:
        sys.exit(130)
    except BrokenPipeError:
        sys.exit(141)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
