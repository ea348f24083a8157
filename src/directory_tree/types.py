from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class NodeType(str, Enum):
    """Enumeration of the node shapes produced during traversal.

    Attributes:
        FILE: Regular file. Carries a size and an extension.
        DIRECTORY: Directory. Carries children and an aggregated size.
    """

    FILE = "file"
    DIRECTORY = "directory"


class SkipReason(str, Enum):
    """Why an entry was left out of its parent's children.

    The tree itself does not record these; they are reported to the optional
    ``on_skip`` hook and to the debug log.

    Attributes:
        UNREADABLE: The entry could not be stat'd (vanished, broken link, ...).
        EXCLUDED: The entry's path matched an exclude pattern.
        FILTERED: A file's extension did not match the extension pattern.
        PERMISSION_DENIED: A directory could not be listed due to access rights.
        DEPTH_EXHAUSTED: The entry lies beyond the depth budget.
        UNSUPPORTED_TYPE: The entry is neither a regular file nor a directory.
    """

    UNREADABLE = "unreadable"
    EXCLUDED = "excluded"
    FILTERED = "filtered"
    PERMISSION_DENIED = "permission_denied"
    DEPTH_EXHAUSTED = "depth_exhausted"
    UNSUPPORTED_TYPE = "unsupported_type"
