"""Unit tests for TreeOptions."""

import re

import pytest

from directory_tree.exceptions import InvalidOptionsError, InvalidPatternError
from directory_tree.options import TreeOptions
from directory_tree.patterns import CompositePattern, GitIgnorePattern, RegexPattern
from directory_tree.tree.permission_action import PermissionAction


class TestTreeOptions:
    def test_defaults(self):
        options = TreeOptions()
        assert options.normalize_path is False
        assert options.exclude is None
        assert options.extensions is None
        assert options.attributes == ()
        assert options.permission_action is PermissionAction.IGNORE
        assert not options.is_excluded("/anything")
        assert options.accepts_extension(".anything")

    def test_single_exclude_is_wrapped(self):
        options = TreeOptions(exclude=re.compile("another_dir"))
        assert isinstance(options.exclude, CompositePattern)
        assert len(options.exclude) == 1
        assert options.is_excluded("/data/another_dir")

    def test_multiple_excludes(self):
        options = TreeOptions(exclude=["another_dir", GitIgnorePattern(["*.md"])])
        assert options.is_excluded("/data/some_dir_2/README.md")
        assert options.is_excluded("/data/another_dir")
        assert not options.is_excluded("/data/some_dir")

    def test_exclusion_with_entry_type(self):
        options = TreeOptions(exclude=[GitIgnorePattern(["build/"])])
        assert options.is_excluded("/data/build", is_dir=True)
        assert not options.is_excluded("/data/build", is_dir=False)
        assert options.is_excluded("/data/build")

    def test_extensions(self):
        options = TreeOptions(extensions=r"\.txt$")
        assert isinstance(options.extensions, RegexPattern)
        assert options.accepts_extension(".txt")
        assert not options.accepts_extension(".md")
        assert not options.accepts_extension("")

    def test_report_path(self):
        assert TreeOptions().report_path("a\\b") == "a\\b"
        assert TreeOptions(normalize_path=True).report_path("C:\\data\\a.txt") == "C:/data/a.txt"

    def test_permission_action_from_string(self):
        assert TreeOptions(permission_action="raise").permission_action is PermissionAction.RAISE

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"normalize_path": "yes"},
            {"attributes": "mtime"},
            {"attributes": ["mtime", 3]},
            {"permission_action": "explode"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(InvalidOptionsError):
            TreeOptions(**kwargs)

    def test_invalid_pattern(self):
        with pytest.raises(InvalidPatternError):
            TreeOptions(extensions="[unclosed")


class TestCoerce:
    def test_none(self):
        assert isinstance(TreeOptions.coerce(None), TreeOptions)

    def test_instance_is_returned(self):
        options = TreeOptions()
        assert TreeOptions.coerce(options) is options

    def test_mapping_with_camel_case(self):
        options = TreeOptions.coerce({"normalizePath": True, "exclude": ["x"], "attributes": ["mtime"]})
        assert options.normalize_path is True
        assert options.attributes == ("mtime",)
        assert options.is_excluded("x")

    def test_permission_action_camel_case(self):
        options = TreeOptions.coerce({"permissionAction": "raise"})
        assert options.permission_action is PermissionAction.RAISE

    def test_none_values_are_absent(self):
        options = TreeOptions.coerce({"extensions": None, "exclude": None})
        assert options.extensions is None
        assert options.exclude is None

    def test_unknown_key(self):
        with pytest.raises(InvalidOptionsError, match="Unknown option"):
            TreeOptions.coerce({"colour": "blue"})

    def test_unsupported_type(self):
        with pytest.raises(InvalidOptionsError):
            TreeOptions.coerce(["normalize_path"])
