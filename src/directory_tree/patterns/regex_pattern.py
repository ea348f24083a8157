"""Regular expression patterns."""

import re
from typing import Any, Pattern, Union

from directory_tree.exceptions import InvalidPatternError

from .base_pattern import BasePattern


class RegexPattern(BasePattern):
    """Pattern backed by a regular expression.

    Matching uses search semantics: the expression may match anywhere in the text
    unless it is anchored with ``^`` or ``$``. ``RegexPattern(r"\\.txt$")`` therefore
    keeps ``.txt`` extensions, and ``RegexPattern("node_modules")`` excludes every
    path that contains ``node_modules`` anywhere.

    Attributes:
        regex (Pattern[str]): The compiled expression.

    Example:
        >>> pattern = RegexPattern(r"\\.txt$")
        >>> pattern.matches(".txt")
        True
        >>> pattern.matches(".md")
        False
        >>> RegexPattern("another_dir").matches("/data/another_dir/file.txt")
        True
    """

    def __init__(self, expression: Union[str, Pattern[str]], flags: int = 0):
        """Initialize a RegexPattern.

        Args:
            expression: A regular expression string or an already compiled pattern.
            flags: Flags used when compiling a string expression. Ignored for compiled
                patterns.

        Raises:
            InvalidPatternError: If the expression does not compile or is not a string.
        """
        if isinstance(expression, re.Pattern):
            self.regex = expression
        elif isinstance(expression, str):
            try:
                self.regex = re.compile(expression, flags)
            except re.error as e:
                raise InvalidPatternError(expression, str(e))
        else:
            raise InvalidPatternError(expression, f"expected str or compiled pattern, got {type(expression).__name__}")

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, RegexPattern):
            return False
        return self.regex == other.regex

    def __hash__(self) -> int:
        return hash(self.regex)

    def __repr__(self) -> str:
        return f"RegexPattern({self.regex.pattern!r})"
