from abc import ABC, abstractmethod


class BasePattern(ABC):
    """
    Abstract base class for the matchers used to exclude entries or filter extensions.

    The traversal is agnostic to the matching engine: it only ever asks a pattern
    whether a piece of text matches. Exclude patterns are tested against an entry's
    full reported path; extension patterns are tested against a file's lower-cased
    extension (e.g. ``".txt"``).

    Example:
        >>> class EndsWithTmp(BasePattern):
        ...     def matches(self, text: str) -> bool:
        ...         return text.endswith(".tmp")
        >>> pattern = EndsWithTmp()
        >>> pattern.matches("build/output.tmp")
        True
        >>> pattern.matches("main.py")
        False
    """

    @abstractmethod
    def matches(self, text: str) -> bool:
        """
        Determine whether the given text matches this pattern.

        Args:
            text (str): A path or an extension, depending on where the pattern is used.

        Returns:
            bool: True if the text matches, False otherwise.
        """
        pass

    def __call__(self, text: str) -> bool:
        return self.matches(text)

    def matches_entry(self, path: str, is_dir: bool) -> bool:
        """
        Determine whether an entry's path matches, given whether the entry is a directory.

        The traversal calls this for exclude patterns once it has stat'd the entry.
        Patterns that don't care about the entry type use the default, which is
        ``matches(path)``.
        """
        return self.matches(path)
