"""Test configuration and fixtures for directory-tree."""

import asyncio
import os
import stat
from typing import Dict, List, Optional, Union

import pytest

from directory_tree.tree.filesystem import FileSystem

FILE_A_SIZE = 12
FILE_B_SIZE = 3756
README_SIZE = 100


@pytest.fixture
def test_data(tmp_path):
    """Create the reference directory structure.

    test_data/
    ├── file_a.txt          (12 B)
    ├── file_b.txt          (3756 B)
    ├── some_dir/
    │   ├── file_a.txt
    │   ├── file_b.txt
    │   └── another_dir/
    │       ├── file_a.txt
    │       └── file_b.txt
    └── some_dir_2/
        └── README.md       (100 B)
    """
    root = tmp_path / "test_data"
    for directory in (root, root / "some_dir", root / "some_dir" / "another_dir"):
        directory.mkdir(parents=True)
        (directory / "file_a.txt").write_bytes(b"a" * FILE_A_SIZE)
        (directory / "file_b.txt").write_bytes(b"b" * FILE_B_SIZE)
    (root / "some_dir_2").mkdir()
    (root / "some_dir_2" / "README.md").write_bytes(b"r" * README_SIZE)
    return root


def make_stat(mode: int, size: int = 0) -> os.stat_result:
    return os.stat_result((mode, 1, 1, 1, 0, 0, size, 0, 1_700_000_000, 1_700_000_000))


class FakeFileSystem(FileSystem):
    """In-memory FileSystem for driving the traversal deterministically.

    ``entries`` maps a path to either an int (a file of that size), a list of child
    names (a directory), or None (a FIFO). ``stat_errors`` and ``list_errors`` map a
    path to the exception the corresponding operation raises.
    """

    def __init__(
        self,
        entries: Dict[str, Union[int, List[str], None]],
        stat_errors: Optional[Dict[str, BaseException]] = None,
        list_errors: Optional[Dict[str, BaseException]] = None,
    ):
        self.entries = entries
        self.stat_errors = stat_errors or {}
        self.list_errors = list_errors or {}
        self.stat_calls: List[str] = []
        self.list_calls: List[str] = []

    async def stat(self, path: str) -> os.stat_result:
        self.stat_calls.append(path)
        await asyncio.sleep(0)
        if path in self.stat_errors:
            raise self.stat_errors[path]
        if path not in self.entries:
            raise FileNotFoundError(path)
        entry = self.entries[path]
        if entry is None:
            return make_stat(stat.S_IFIFO | 0o644)
        if isinstance(entry, list):
            return make_stat(stat.S_IFDIR | 0o755)
        return make_stat(stat.S_IFREG | 0o644, entry)

    async def list_directory(self, path: str) -> List[str]:
        self.list_calls.append(path)
        await asyncio.sleep(0)
        if path in self.list_errors:
            raise self.list_errors[path]
        return list(self.entries[path])


@pytest.fixture
def fake_fs():
    """Factory for FakeFileSystem instances."""
    return FakeFileSystem
