import os
import tempfile
from pathlib import Path

import pytest

from directory_tree.patterns.git_pattern import GitIgnorePattern


@pytest.fixture
def temp_gitignore():
    with tempfile.NamedTemporaryFile(mode="w", delete=False) as f:
        f.write("*.txt\n")
        f.write("!important.txt\n")
        f.write("subdir/\n")
        f.write("*.py[cod]\n")
        f.write("# a comment\n")
        f.write("\n")
    yield f.name
    os.unlink(f.name)


@pytest.fixture
def temp_npmignore():
    with tempfile.NamedTemporaryFile(mode="w", delete=False) as f:
        f.write("*.log\n")
        f.write("node_modules/\n")
        f.write("!important.log\n")
    yield f.name
    os.unlink(f.name)


def create_absolute_path(path):
    return str(Path("/absolute/path").joinpath(path))


@pytest.mark.parametrize(
    "path,expected",
    [
        # Relative paths
        ("file.txt", True),
        ("important.txt", False),
        ("file.py", False),
        ("file.pyc", True),
        ("subdir/file.py", True),
        # Absolute paths
        (create_absolute_path("file.txt"), True),
        (create_absolute_path("important.txt"), False),
        (create_absolute_path("file.py"), False),
        (create_absolute_path("subdir/file.py"), True),
        # Directory paths are reported without a trailing slash
        ("subdir", True),
        (create_absolute_path("subdir"), True),
        ("./subdir", True),
        ("subdirectory", False),
    ],
)
def test_matches(temp_gitignore, path, expected):
    pattern = GitIgnorePattern.from_files(temp_gitignore)
    assert pattern.matches(path) == expected


def test_backslash_paths_are_normalized(temp_gitignore):
    pattern = GitIgnorePattern.from_files(temp_gitignore)
    assert pattern.matches("C:\\project\\subdir\\file.py")


def test_multiple_files_combine_in_order(temp_gitignore, temp_npmignore):
    pattern = GitIgnorePattern.from_files([temp_gitignore, temp_npmignore])
    assert pattern.matches("debug.log")
    assert not pattern.matches("important.log")
    assert pattern.matches("/srv/app/node_modules")
    assert pattern.matches("file.txt")


def test_load_rules_nonexistent_file():
    with pytest.raises(FileNotFoundError):
        GitIgnorePattern.from_files("nonexistent_file")


def test_add_rule_and_negation():
    pattern = GitIgnorePattern()
    assert not pattern.has_rules()
    assert not pattern.matches("test.pyc")

    pattern.add_rule("*.pyc")
    assert pattern.has_rules()
    assert pattern.matches("test.pyc")

    pattern.add_rule("!keep.pyc")
    assert not pattern.matches("keep.pyc")
    assert pattern.matches("other.pyc")


def test_comment_only_rules_are_not_rules():
    assert not GitIgnorePattern(["# nothing here", ""]).has_rules()


def test_root_makes_anchored_rules_relative(tmp_path):
    pattern = GitIgnorePattern(["/dist"], root=tmp_path)
    assert pattern.matches(str(tmp_path / "dist"))
    assert not pattern.matches(str(tmp_path / "src" / "dist"))


def test_root_itself_never_matches(tmp_path):
    pattern = GitIgnorePattern(["*"], root=tmp_path)
    assert not pattern.matches(str(tmp_path))
    assert pattern.matches(str(tmp_path / "anything"))


def test_callable():
    pattern = GitIgnorePattern(["*.log"])
    assert pattern("server.log")


@pytest.mark.parametrize(
    "rules,path,is_dir,expected",
    [
        (["build/"], "/project/build", True, True),
        (["build/"], "/project/build", False, False),
        (["build/"], "/project/build/out.bin", False, True),
        (["*.log"], "/project/logs.log", True, True),
        (["*.log", "!keep.log"], "/project/keep.log", False, False),
        (["/dist"], "dist", True, True),
    ],
)
def test_matches_entry_uses_entry_type(rules, path, is_dir, expected):
    assert GitIgnorePattern(rules).matches_entry(path, is_dir) == expected


def test_plain_matches_tries_directory_form():
    assert GitIgnorePattern(["build/"]).matches("/project/build")
