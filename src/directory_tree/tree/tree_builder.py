"""Concurrent construction of directory tree snapshots.

This module provides TreeBuilder, which walks a filesystem subtree and returns an
immutable TreeNode snapshot of it, along with the ``build`` coroutine and the
blocking ``build_tree`` wrapper that most callers use.
"""

import asyncio
import inspect
import logging
import os
import stat
from typing import Any, Awaitable, Callable, List, Mapping, Optional, Union

from directory_tree.exceptions import InvalidOptionsError
from directory_tree.options import TreeOptions
from directory_tree.tree.attributes import project_attributes
from directory_tree.tree.filesystem import FileSystem, LocalFileSystem
from directory_tree.tree.permission_action import PermissionAction
from directory_tree.tree.tree_node import TreeNode
from directory_tree.types import PathType, SkipReason

logger = logging.getLogger(__name__)

NodeCallback = Callable[[TreeNode, Any, os.stat_result], Union[None, Awaitable[None]]]
SkipCallback = Callable[[str, SkipReason], None]
OptionsType = Union[TreeOptions, Mapping[str, Any], None]


class TreeBuilder:
    """Builds TreeNode snapshots of directory subtrees.

    For every entry reachable from the starting path, the builder stats the entry,
    drops it if an exclude pattern matches its path, and then either builds a file
    node (subject to the extension pattern) or lists the directory and recurses into
    its children. The children of one directory are explored concurrently and joined
    before the directory's size is aggregated; results keep the filesystem's listing
    order.

    Entries that cannot be stat'd, are excluded or filtered, lie beyond the depth
    budget, or are directories that cannot be listed for lack of permission all
    yield None and are left out of their parent. Which of these applied is reported
    to ``on_skip`` and to the debug log, never in the return value.

    Any other error, including an exception raised by a callback, propagates out of
    ``build`` once all siblings at the failing level have finished, and the partial
    tree is discarded.

    Attributes:
        options (TreeOptions): Filters and projections applied during traversal.
        on_file (Optional[NodeCallback]): Called once per accepted file node.
        on_directory (Optional[NodeCallback]): Called once per accepted directory
            node, after its children and size are final.
        filesystem (FileSystem): Source of metadata and directory listings.
        on_skip (Optional[SkipCallback]): Called with the path and reason of every
            entry left out of the tree.

    Example:
        >>> builder = TreeBuilder({"extensions": r"\\.py$"})  # doctest: +SKIP
        >>> root = asyncio.run(builder.build("src"))  # doctest: +SKIP
        >>> root.type  # doctest: +SKIP
        <NodeType.DIRECTORY: 'directory'>
    """

    def __init__(
        self,
        options: OptionsType = None,
        on_file: Optional[NodeCallback] = None,
        on_directory: Optional[NodeCallback] = None,
        filesystem: Optional[FileSystem] = None,
        on_skip: Optional[SkipCallback] = None,
    ) -> None:
        """Initialize a TreeBuilder.

        Args:
            options: TreeOptions, or a mapping of option names (see TreeOptions.coerce).
            on_file: Callback invoked as ``on_file(node, os.path, stat_result)`` for
                each accepted file. May be a coroutine function.
            on_directory: Callback invoked the same way for each accepted directory,
                the root included.
            filesystem: FileSystem implementation. Defaults to LocalFileSystem.
            on_skip: Callback invoked as ``on_skip(path, reason)`` for each entry that
                is left out of the tree.

        Raises:
            InvalidOptionsError: If options cannot be interpreted.
        """
        self.options = TreeOptions.coerce(options)
        self.on_file = on_file
        self.on_directory = on_directory
        self.filesystem = filesystem if filesystem is not None else LocalFileSystem()
        self.on_skip = on_skip

    async def build(self, path: PathType, depth: Optional[int] = None) -> Optional[TreeNode]:
        """Build a snapshot of the subtree rooted at path.

        Args:
            path: Root of the subtree. May be a file, in which case a single file node
                is returned.
            depth: Number of directory levels to descend below path. None means
                unbounded; 0 returns the root with no children.

        Returns:
            The root TreeNode, or None if the root itself could not be stat'd, was
            excluded or filtered, or could not be listed.

        Raises:
            InvalidOptionsError: If depth is negative or not an integer.
            PermissionError: If a directory cannot be listed and the permission action
                is RAISE.
            OSError: For listing failures other than permission errors.
        """
        if depth is not None and (isinstance(depth, bool) or not isinstance(depth, int) or depth < 0):
            raise InvalidOptionsError(f"depth must be a non-negative integer or None, got {depth!r}")
        return await self._build_node(os.fspath(path), depth)

    async def _build_node(self, path: str, depth: Optional[int]) -> Optional[TreeNode]:
        """Recursively build the node for path, or return None if it is left out."""
        options = self.options
        name = _base_name(path)
        reported = options.report_path(path)

        try:
            stats = await self.filesystem.stat(path)
        except Exception as e:
            self._skip(reported, SkipReason.UNREADABLE, e)
            return None

        if options.is_excluded(reported, stat.S_ISDIR(stats.st_mode)):
            self._skip(reported, SkipReason.EXCLUDED)
            return None

        if stat.S_ISREG(stats.st_mode):
            extension = os.path.splitext(name)[1].lower()
            if not options.accepts_extension(extension):
                self._skip(reported, SkipReason.FILTERED)
                return None

            node = TreeNode.file(
                reported, name, stats.st_size, extension, project_attributes(stats, options.attributes)
            )
            await _invoke(self.on_file, node, stats)
            return node

        if stat.S_ISDIR(stats.st_mode):
            try:
                child_names = await self.filesystem.list_directory(path)
            except PermissionError as e:
                if options.permission_action == PermissionAction.RAISE:
                    raise
                self._skip(reported, SkipReason.PERMISSION_DENIED, e)
                return None

            attributes = project_attributes(stats, options.attributes)
            logger.debug("Listing %s (%d entries, depth budget %s)", reported, len(child_names), depth)

            children = await self._build_children(path, child_names, depth)
            node = TreeNode.directory(reported, name, children, attributes)
            await _invoke(self.on_directory, node, stats)
            return node

        self._skip(reported, SkipReason.UNSUPPORTED_TYPE)
        return None

    async def _build_children(self, path: str, child_names: List[str], depth: Optional[int]) -> List[TreeNode]:
        """Build all children of a directory concurrently, keeping listing order."""
        child_paths = [os.path.join(path, child) for child in child_names]

        if depth is not None and depth <= 0:
            for child_path in child_paths:
                self._skip(self.options.report_path(child_path), SkipReason.DEPTH_EXHAUSTED)
            return []

        child_depth = None if depth is None else depth - 1
        results = await asyncio.gather(
            *(self._build_node(child_path, child_depth) for child_path in child_paths),
            return_exceptions=True,
        )

        children = []
        for result in results:
            if isinstance(result, BaseException):
                raise result
            if result is not None:
                children.append(result)
        return children

    def _skip(self, path: str, reason: SkipReason, error: Optional[BaseException] = None) -> None:
        if error is not None:
            logger.debug("Skipping %s (%s): %s", path, reason.value, error)
        else:
            logger.debug("Skipping %s (%s)", path, reason.value)
        if self.on_skip is not None:
            self.on_skip(path, reason)


async def build(
    path: PathType,
    options: OptionsType = None,
    on_file: Optional[NodeCallback] = None,
    on_directory: Optional[NodeCallback] = None,
    depth: Optional[int] = None,
    *,
    filesystem: Optional[FileSystem] = None,
    on_skip: Optional[SkipCallback] = None,
) -> Optional[TreeNode]:
    """Build a snapshot of the subtree rooted at path.

    Coroutine form of build_tree, for callers that already run an event loop. See
    TreeBuilder for the meaning of each argument.

    Example:
        >>> root = await build("src", {"exclude": "__pycache__"})  # doctest: +SKIP
    """
    builder = TreeBuilder(options, on_file, on_directory, filesystem=filesystem, on_skip=on_skip)
    return await builder.build(path, depth)


def build_tree(
    path: PathType,
    options: OptionsType = None,
    on_file: Optional[NodeCallback] = None,
    on_directory: Optional[NodeCallback] = None,
    depth: Optional[int] = None,
    *,
    filesystem: Optional[FileSystem] = None,
    on_skip: Optional[SkipCallback] = None,
) -> Optional[TreeNode]:
    """Build a snapshot of the subtree rooted at path, blocking until it completes.

    Runs the traversal on a fresh event loop, so it must not be called from inside a
    running loop; use ``build`` there instead.

    Args:
        path: Root of the subtree.
        options: TreeOptions or a mapping of option names.
        on_file: Per-file callback, ``on_file(node, os.path, stat_result)``.
        on_directory: Per-directory callback with the same signature.
        depth: Directory levels to descend. None means unbounded.
        filesystem: FileSystem implementation. Defaults to LocalFileSystem.
        on_skip: Hook receiving ``(path, reason)`` for every entry left out.

    Returns:
        The root TreeNode, or None if there is nothing to report.

    Example:
        >>> root = build_tree("src", {"extensions": r"\\.py$"})  # doctest: +SKIP
        >>> root.size > 0  # doctest: +SKIP
        True
    """
    return asyncio.run(
        build(path, options, on_file, on_directory, depth, filesystem=filesystem, on_skip=on_skip)
    )


async def _invoke(callback: Optional[NodeCallback], node: TreeNode, stats: os.stat_result) -> None:
    if callback is None:
        return
    result = callback(node, os.path, stats)
    if inspect.isawaitable(result):
        await result


def _base_name(path: str) -> str:
    separators = os.sep + (os.altsep or "")
    return os.path.basename(path.rstrip(separators) or path)
