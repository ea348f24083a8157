"""Traversal options.

This module defines TreeOptions, the configuration object consumed by the tree
builder, along with the coercion used to accept plain mappings in its place.
"""

from collections.abc import Mapping
from typing import Any, Optional, Sequence, Tuple, Union

from directory_tree.exceptions import InvalidOptionsError
from directory_tree.patterns import BasePattern, CompositePattern, as_pattern, as_patterns
from directory_tree.tree.permission_action import PermissionAction

# Keys accepted when options are given as a mapping, and the fields they set.
_OPTION_KEYS = {
    "normalize_path": "normalize_path",
    "normalizePath": "normalize_path",
    "exclude": "exclude",
    "extensions": "extensions",
    "attributes": "attributes",
    "permission_action": "permission_action",
    "permissionAction": "permission_action",
}


class TreeOptions:
    """Configuration for a traversal.

    Patterns are compiled once here, so a single TreeOptions can be reused across
    many traversals.

    Attributes:
        normalize_path (bool): Report paths with forward slashes only.
        exclude (Optional[CompositePattern]): Entries whose path matches any of these
            patterns are dropped together with their subtree.
        extensions (Optional[BasePattern]): When set, only files whose lower-cased
            extension matches are kept. Directories are never filtered by it.
        attributes (Tuple[str, ...]): Metadata fields to project onto every node.
        permission_action (PermissionAction): What to do when a directory cannot be
            listed due to access rights.

    Example:
        >>> options = TreeOptions(exclude=["another_dir", "some_dir_2"], extensions=r"\\.txt$")
        >>> options.is_excluded("/data/another_dir")
        True
        >>> options.accepts_extension(".txt"), options.accepts_extension(".md")
        (True, False)
        >>> TreeOptions.coerce({"normalizePath": True}).normalize_path
        True
    """

    def __init__(
        self,
        normalize_path: bool = False,
        exclude: Any = None,
        extensions: Any = None,
        attributes: Optional[Sequence[str]] = None,
        permission_action: Union[PermissionAction, str] = PermissionAction.IGNORE,
    ) -> None:
        """Initialize TreeOptions.

        Args:
            normalize_path: Replace backslashes with forward slashes in reported paths.
            exclude: A pattern or a list of patterns. Each may be a BasePattern, a
                compiled regular expression, or a regular expression string.
            extensions: A single pattern tested against lower-cased file extensions.
            attributes: Names of metadata fields to copy onto nodes (e.g. "mtime").
            permission_action: IGNORE or RAISE, or their string values.

        Raises:
            InvalidOptionsError: If an option has the wrong type.
            InvalidPatternError: If a pattern cannot be compiled.
        """
        if not isinstance(normalize_path, bool):
            raise InvalidOptionsError(f"normalize_path must be a bool, got {type(normalize_path).__name__}")
        self.normalize_path = normalize_path

        self.exclude: Optional[CompositePattern] = None
        if exclude is not None:
            self.exclude = CompositePattern(as_patterns(exclude))

        self.extensions: Optional[BasePattern] = as_pattern(extensions) if extensions is not None else None

        if attributes is None:
            attributes = ()
        if isinstance(attributes, str) or not all(isinstance(name, str) for name in attributes):
            raise InvalidOptionsError("attributes must be a sequence of attribute names")
        self.attributes: Tuple[str, ...] = tuple(attributes)

        try:
            self.permission_action = PermissionAction(permission_action)
        except ValueError:
            raise InvalidOptionsError(f"Unknown permission action: {permission_action!r}")

    @classmethod
    def coerce(cls, value: Union["TreeOptions", Mapping, None]) -> "TreeOptions":
        """Turn None, a TreeOptions, or a mapping of option keys into TreeOptions.

        Mapping keys may use snake_case or the camelCase spellings ``normalizePath``
        and ``permissionAction``. Keys whose value is None are treated as absent.

        Raises:
            InvalidOptionsError: If the mapping holds unknown keys or value is of an
                unsupported type.
        """
        if value is None:
            return cls()
        if isinstance(value, TreeOptions):
            return value
        if not isinstance(value, Mapping):
            raise InvalidOptionsError(f"options must be a mapping or TreeOptions, got {type(value).__name__}")

        kwargs = {}
        for key, item in value.items():
            if key not in _OPTION_KEYS:
                raise InvalidOptionsError(f"Unknown option: {key!r}")
            if item is not None:
                kwargs[_OPTION_KEYS[key]] = item
        return cls(**kwargs)

    def is_excluded(self, path: str, is_dir: Optional[bool] = None) -> bool:
        """Test path against the exclude patterns, passing the entry type on when known."""
        if self.exclude is None:
            return False
        if is_dir is None:
            return self.exclude.matches(path)
        return self.exclude.matches_entry(path, is_dir)

    def accepts_extension(self, extension: str) -> bool:
        return self.extensions is None or self.extensions.matches(extension)

    def report_path(self, path: str) -> str:
        """Return path as it should appear on nodes."""
        return path.replace("\\", "/") if self.normalize_path else path

    def __repr__(self) -> str:
        return (
            f"TreeOptions(normalize_path={self.normalize_path!r}, exclude={self.exclude!r}, "
            f"extensions={self.extensions!r}, attributes={self.attributes!r}, "
            f"permission_action={self.permission_action.value!r})"
        )
