"""Filesystem collaborator used by the tree builder."""

import asyncio
import os
from abc import ABC, abstractmethod
from typing import List


class FileSystem(ABC):
    """Interface to the two filesystem primitives the traversal needs.

    Both operations are coroutines; they are the points where the traversal
    suspends, which lets sibling subtrees be explored concurrently. Alternative
    implementations (in-memory fakes for tests, remote filesystems) only need to
    honor the error contract below.

    Error contract:
        - ``stat`` raises when the entry cannot be described, usually OSError (or
          ValueError for malformed paths). The traversal treats any Exception raised
          here as "absent" and drops the entry.
        - ``list_directory`` raises PermissionError when access is denied. Other
          exceptions are treated as fatal by the traversal.
    """

    @abstractmethod
    async def stat(self, path: str) -> os.stat_result:
        """Return metadata for path, following symbolic links."""
        pass

    @abstractmethod
    async def list_directory(self, path: str) -> List[str]:
        """Return the names of the immediate children of path, in listing order."""
        pass


class LocalFileSystem(FileSystem):
    """FileSystem backed by the local OS.

    The blocking ``os.stat`` and ``os.listdir`` calls run in the default thread pool
    via asyncio.to_thread so the event loop stays free while they wait on disk.
    Listing order is whatever the OS returns; it is not sorted.

    Example:
        >>> import asyncio
        >>> fs = LocalFileSystem()
        >>> stats = asyncio.run(fs.stat("."))
        >>> import stat
        >>> stat.S_ISDIR(stats.st_mode)
        True
    """

    async def stat(self, path: str) -> os.stat_result:
        return await asyncio.to_thread(os.stat, path)

    async def list_directory(self, path: str) -> List[str]:
        return await asyncio.to_thread(os.listdir, path)
