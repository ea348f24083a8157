"""Patterns using .gitignore syntax."""

import os
from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from directory_tree.types import PathType

from .base_pattern import BasePattern


class GitIgnorePattern(BasePattern):
    """Pattern matching paths with .gitignore rules.

    Uses the pathspec library to match paths the same way Git does, so the full
    .gitignore syntax is available: globs (``*.pyc``), directory markers (``build/``),
    negations (``!keep.pyc``), ``**`` and comments. Later rules override earlier ones.

    The traversal tests exclude patterns against the full reported path of each entry.
    Unanchored rules (``*.log``, ``node_modules/``) therefore work anywhere in the tree.
    To use anchored rules such as ``/dist`` relative to the traversal root, pass that
    root as ``root``; paths are then made relative to it before matching.

    Directory rules like ``build/`` only match paths with a trailing slash in Git's
    model. The traversal reports directory paths without one, so it calls
    ``matches_entry`` with the entry type and only directories are tested with a
    slash appended. Plain ``matches`` does not know the type and tries both forms.

    Attributes:
        spec (PathSpec): Compiled matcher from the pathspec library.
        root (Optional[str]): Directory that paths are made relative to, if any.

    Example:
        >>> pattern = GitIgnorePattern(["*.pyc", "node_modules/"])
        >>> pattern.matches("/project/app/main.pyc")
        True
        >>> pattern.matches("/project/node_modules")
        True
        >>> pattern.matches("/project/app/main.py")
        False
        >>> pattern.add_rule("!keep.pyc")
        >>> pattern.matches("/project/keep.pyc")
        False
    """

    def __init__(self, rules: Optional[Iterable[str]] = None, root: Optional[PathType] = None):
        """Initialize a GitIgnorePattern.

        Args:
            rules: Initial .gitignore lines. Blank lines and comments are ignored.
            root: Optional directory that paths are made relative to before matching.
        """
        self._patterns: List[GitWildMatchPattern] = []
        self.spec = PathSpec([])
        self.root = os.fspath(root) if root is not None else None
        if rules is not None:
            self._extend(rules)

    @classmethod
    def from_files(
        cls, rules_files: Union[PathType, Sequence[PathType]], root: Optional[PathType] = None
    ) -> "GitIgnorePattern":
        """Create a pattern from one or more .gitignore-style files.

        Args:
            rules_files: Path or sequence of paths to rules files.
            root: Optional directory that paths are made relative to before matching.

        Returns:
            A new GitIgnorePattern holding the rules of every file, in order.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        pattern = cls(root=root)
        pattern.load_rules(rules_files)
        return pattern

    def matches(self, text: str) -> bool:
        return self._match(text, None)

    def matches_entry(self, path: str, is_dir: bool) -> bool:
        """Match with the entry type known, so directory-only rules skip regular files.

        Example:
            >>> pattern = GitIgnorePattern(["build/"])
            >>> pattern.matches_entry("/project/build", is_dir=True)
            True
            >>> pattern.matches_entry("/project/build", is_dir=False)
            False
        """
        return self._match(path, is_dir)

    def _match(self, text: str, is_dir: Optional[bool]) -> bool:
        path = self._relativize(text.replace("\\", "/"))
        while path.startswith("./"):
            path = path[2:]
        path = path.lstrip("/").rstrip("/")
        if not path or path == ".":
            return False
        if is_dir:
            return bool(self.spec.match_file(path + "/"))
        if self.spec.match_file(path):
            return True
        # Unknown type: give directory rules a chance.
        return is_dir is None and bool(self.spec.match_file(path + "/"))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append .gitignore rules from one or more files.

        Args:
            rules_files: Path or sequence of paths to rules files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._extend(f.read().splitlines())

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore rule (e.g. ``"*.pyc"`` or ``"!important.txt"``)."""
        self._extend([rule])

    def has_rules(self) -> bool:
        return any(pattern.include is not None for pattern in self._patterns)

    def _extend(self, lines: Iterable[str]) -> None:
        self._patterns.extend(GitWildMatchPattern(line) for line in lines)
        self.spec = PathSpec(list(self._patterns))

    def _relativize(self, path: str) -> str:
        if self.root is None:
            return path
        root = self.root.replace("\\", "/").rstrip("/")
        if path == root:
            return ""
        if root and path.startswith(root + "/"):
            return path[len(root) + 1 :]
        return path

    def __repr__(self) -> str:
        return f"GitIgnorePattern({[p.pattern for p in self._patterns]!r})"
