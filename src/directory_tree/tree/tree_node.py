"""Node representation for entries in a directory tree snapshot."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Tuple

from directory_tree.types import NodeType


@dataclass(frozen=True)
class TreeNode:
    """Immutable snapshot of a single file or directory.

    A node has exactly one of two shapes. File nodes carry ``extension`` and leave
    ``children`` as None; directory nodes carry ``children`` (a tuple, in listing
    order) and leave ``extension`` as None. A directory's ``size`` is always the sum
    of its children's sizes, so an empty directory has size 0.

    Nodes hold no reference to their parent; a parent exclusively owns its children.
    Two snapshots of an unchanged filesystem compare equal.

    Attributes:
        path (str): Reported path of the entry.
        name (str): Base name of the entry.
        type (NodeType): FILE or DIRECTORY.
        size (int): Byte size of a file, or the aggregated size of a directory.
        extension (Optional[str]): Lower-cased extension including the dot, or "" if
            the file has none. None for directories.
        children (Optional[Tuple[TreeNode, ...]]): Surviving children of a directory.
            None for files.
        attributes (Mapping[str, Any]): Requested metadata fields, keyed by the name
            they were requested under. Read-only.

    Example:
        >>> leaf = TreeNode.file("/data/file_a.txt", "file_a.txt", 12, ".txt")
        >>> root = TreeNode.directory("/data", "data", (leaf,))
        >>> root.size
        12
        >>> root.is_dir, leaf.is_file
        (True, True)
        >>> [node.name for node in root.iter_nodes()]
        ['data', 'file_a.txt']
    """

    path: str
    name: str
    type: NodeType
    size: int
    extension: Optional[str] = None
    children: Optional[Tuple["TreeNode", ...]] = None
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __hash__(self) -> int:
        return hash(
            (
                self.path,
                self.name,
                self.type,
                self.size,
                self.extension,
                self.children,
                tuple(sorted(self.attributes.items())),
            )
        )

    @classmethod
    def file(
        cls, path: str, name: str, size: int, extension: str, attributes: Optional[Mapping[str, Any]] = None
    ) -> "TreeNode":
        """Create a file node."""
        return cls(path, name, NodeType.FILE, size, extension=extension, attributes=attributes or {})

    @classmethod
    def directory(
        cls,
        path: str,
        name: str,
        children: Tuple["TreeNode", ...] = (),
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> "TreeNode":
        """Create a directory node whose size is the sum of its children's sizes."""
        children = tuple(children)
        size = sum(child.size for child in children)
        return cls(path, name, NodeType.DIRECTORY, size, children=children, attributes=attributes or {})

    @property
    def is_file(self) -> bool:
        return self.type is NodeType.FILE

    @property
    def is_dir(self) -> bool:
        return self.type is NodeType.DIRECTORY

    def iter_nodes(self) -> Iterator["TreeNode"]:
        """Yield this node and all of its descendants in pre-order."""
        yield self
        for child in self.children or ():
            yield from child.iter_nodes()

    def find(self, name: str) -> Optional["TreeNode"]:
        """Return the first node in pre-order whose name equals name, or None."""
        return next((node for node in self.iter_nodes() if node.name == name), None)

    def __getitem__(self, key: str) -> Any:
        """Look up a projected attribute, e.g. ``node["mtime"]``."""
        return self.attributes[key]
