"""Composite patterns for combining several matchers."""

from typing import List, Sequence

from .base_pattern import BasePattern


class CompositePattern(BasePattern):
    """Pattern that matches when ANY of its constituent patterns matches.

    This is how a sequence of exclude patterns is evaluated: an entry is dropped as
    soon as one of them matches its path. Evaluation short-circuits in order, so
    cheap patterns should come first.

    Attributes:
        patterns (List[BasePattern]): The constituent patterns.

    Example:
        >>> from directory_tree.patterns.regex_pattern import RegexPattern
        >>> composite = CompositePattern([RegexPattern("another_dir"), RegexPattern("some_dir_2")])
        >>> composite.matches("/data/some_dir_2")
        True
        >>> composite.matches("/data/some_dir")
        False
        >>> len(composite)
        2
    """

    def __init__(self, patterns: Sequence[BasePattern]):
        """Initialize a CompositePattern.

        Args:
            patterns: Patterns to combine. May be empty, in which case nothing matches.

        Raises:
            TypeError: If any element is not a BasePattern.
        """
        for i, pattern in enumerate(patterns):
            if not isinstance(pattern, BasePattern):
                raise TypeError(f"Pattern at index {i} must implement BasePattern, got {type(pattern)}")

        self.patterns: List[BasePattern] = list(patterns)

    def matches(self, text: str) -> bool:
        return any(pattern.matches(text) for pattern in self.patterns)

    def matches_entry(self, path: str, is_dir: bool) -> bool:
        return any(pattern.matches_entry(path, is_dir) for pattern in self.patterns)

    def add_pattern(self, pattern: BasePattern) -> None:
        """Append another pattern to this composite.

        Raises:
            TypeError: If pattern doesn't implement BasePattern.
        """
        if not isinstance(pattern, BasePattern):
            raise TypeError(f"Pattern must implement BasePattern, got {type(pattern)}")
        self.patterns.append(pattern)

    def __len__(self) -> int:
        return len(self.patterns)

    def __repr__(self) -> str:
        return f"CompositePattern({self.patterns!r})"
