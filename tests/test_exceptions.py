"""Tests for custom exceptions."""

from directory_tree.exceptions import InvalidOptionsError, InvalidPatternError


class TestInvalidPatternError:
    """Test InvalidPatternError exception."""

    def test_invalid_pattern_error_creation(self):
        error = InvalidPatternError("[unclosed", "unterminated character set")
        assert error.pattern == "[unclosed"
        assert str(error) == "Invalid pattern '[unclosed': unterminated character set"

    def test_invalid_pattern_error_is_value_error(self):
        assert isinstance(InvalidPatternError(1, "bad"), ValueError)


class TestInvalidOptionsError:
    """Test InvalidOptionsError exception."""

    def test_invalid_options_error(self):
        error = InvalidOptionsError("Unknown option: 'colour'")
        assert str(error) == "Unknown option: 'colour'"
        assert isinstance(error, ValueError)
