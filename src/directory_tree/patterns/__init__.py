"""Patterns for excluding entries and filtering file extensions."""

import re
from typing import Any, List

from directory_tree.exceptions import InvalidPatternError

from .base_pattern import BasePattern
from .composite_pattern import CompositePattern
from .git_pattern import GitIgnorePattern
from .regex_pattern import RegexPattern


def as_pattern(value: Any) -> BasePattern:
    """Coerce a user-supplied value into a pattern.

    BasePattern instances are returned unchanged; compiled regular expressions and
    strings become RegexPattern instances.

    Raises:
        InvalidPatternError: If the value cannot be used as a pattern.
    """
    if isinstance(value, BasePattern):
        return value
    if isinstance(value, (str, re.Pattern)):
        return RegexPattern(value)
    raise InvalidPatternError(value, f"unsupported pattern type {type(value).__name__}")


def as_patterns(value: Any) -> List[BasePattern]:
    """Coerce a single pattern or a sequence of patterns into a list of patterns."""
    if isinstance(value, (str, re.Pattern, BasePattern)):
        return [as_pattern(value)]
    if isinstance(value, (list, tuple)):
        return [as_pattern(item) for item in value]
    raise InvalidPatternError(value, "expected a pattern or a list of patterns")


__all__ = [
    "BasePattern",
    "CompositePattern",
    "GitIgnorePattern",
    "RegexPattern",
    "as_pattern",
    "as_patterns",
]
