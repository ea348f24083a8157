"""Conversion of tree snapshots to plain data, JSON, anytree and text.

``to_dict`` produces the plain object shape downstream consumers rely on::

    {
        "path": "test_data/file_a.txt",
        "name": "file_a.txt",
        "size": 12,
        "type": "file",
        "extension": ".txt",
        "mtime": 1700000000.0   # one key per requested attribute
    }

Directory objects carry ``"children"`` (a list of the same shape) instead of
``"extension"``.
"""

import json
from typing import Any, Dict, Iterator, Optional, Tuple

from anytree import Node, RenderTree

from directory_tree.tree.tree_node import TreeNode


def to_dict(node: TreeNode) -> Dict[str, Any]:
    """Convert a snapshot into nested plain dictionaries.

    Example:
        >>> leaf = TreeNode.file("d/a.txt", "a.txt", 12, ".txt")
        >>> to_dict(TreeNode.directory("d", "d", (leaf,)))["children"][0]["extension"]
        '.txt'
    """
    data: Dict[str, Any] = {
        "path": node.path,
        "name": node.name,
        "size": node.size,
        "type": node.type.value,
    }
    if node.is_dir:
        data["children"] = [to_dict(child) for child in node.children or ()]
    else:
        data["extension"] = node.extension
    data.update(node.attributes)
    return data


def to_json(node: TreeNode, indent: Optional[int] = 2) -> str:
    """Serialize a snapshot as JSON. Attribute values that JSON cannot hold are stringified."""
    return json.dumps(to_dict(node), indent=indent, default=str)


def to_anytree(node: TreeNode, parent: Optional[Node] = None) -> Node:
    """Convert a snapshot into an anytree hierarchy.

    The returned anytree nodes carry ``fs_path``, ``fs_size``, ``node_type`` and, for files,
    ``extension``, so anytree's iterators, resolvers and exporters can be used on them.

    Example:
        >>> leaf = TreeNode.file("d/a.txt", "a.txt", 12, ".txt")
        >>> root = to_anytree(TreeNode.directory("d", "d", (leaf,)))
        >>> root.children[0].fs_size
        12
    """
    extra: Dict[str, Any] = {"fs_path": node.path, "fs_size": node.size, "node_type": node.type.value}
    if node.is_file:
        extra["extension"] = node.extension
    result = Node(node.name, parent=parent, **extra)
    for child in node.children or ():
        to_anytree(child, parent=result)
    return result


def stream_render(node: TreeNode) -> Iterator[str]:
    """Generate a tree-command style rendering one line at a time.

    Directory names get a trailing slash; every line ends with the entry's size in
    bytes. Children appear in the snapshot's order.

    Example:
        >>> leaf = TreeNode.file("d/a.txt", "a.txt", 12, ".txt")
        >>> for line in stream_render(TreeNode.directory("d", "d", (leaf,))):
        ...     print(line)
        d/ (12 B)
        └── a.txt (12 B)
    """
    for prefix, _, anynode in RenderTree(to_anytree(node)):
        suffix = "/" if anynode.node_type == "directory" else ""
        yield f"{prefix}{anynode.name}{suffix} ({anynode.fs_size} B)"


def render(node: TreeNode) -> str:
    return "\n".join(stream_render(node))


def count_nodes(node: TreeNode) -> Tuple[int, int]:
    """Count (files, directories) in a snapshot, the root directory included."""
    files = 0
    directories = 0
    for entry in node.iter_nodes():
        if entry.is_dir:
            directories += 1
        else:
            files += 1
    return files, directories
