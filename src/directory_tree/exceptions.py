from typing import Any


class InvalidOptionsError(ValueError):
    """
    Exception raised when traversal options cannot be interpreted.

    This covers unknown option keys, option values of the wrong type, and a negative
    depth budget. It derives from ValueError so callers that already guard against bad
    arguments with ``except ValueError`` keep working.

    Example:
        >>> error = InvalidOptionsError("Unknown option: 'colour'")
        >>> str(error)
        "Unknown option: 'colour'"
        >>> isinstance(error, ValueError)
        True
    """

    pass


class InvalidPatternError(ValueError):
    """
    Exception raised when a value cannot be used as an exclude or extension pattern.

    Patterns may be BasePattern instances, compiled regular expressions, or strings
    holding a regular expression. A string that fails to compile, or an object of any
    other type, triggers this exception.

    Attributes:
        pattern (Any): The offending value.

    Example:
        >>> error = InvalidPatternError("[unclosed", "unterminated character set")
        >>> error.pattern
        '[unclosed'
        >>> str(error)
        "Invalid pattern '[unclosed': unterminated character set"
    """

    def __init__(self, pattern: Any, reason: str) -> None:
        """
        Initialize the exception with the offending pattern and the failure reason.

        Args:
            pattern (Any): The value that could not be turned into a pattern.
            reason (str): Human-readable explanation of the failure.
        """
        self.pattern = pattern
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
