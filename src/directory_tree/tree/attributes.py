"""Projection of filesystem metadata fields onto tree nodes."""

import os
from typing import Any, Dict, Iterable, Mapping

# Friendly attribute names and the stat_result fields they read.
ATTRIBUTE_FIELDS: Mapping[str, str] = {
    "size": "st_size",
    "mode": "st_mode",
    "ino": "st_ino",
    "dev": "st_dev",
    "nlink": "st_nlink",
    "uid": "st_uid",
    "gid": "st_gid",
    "atime": "st_atime",
    "mtime": "st_mtime",
    "ctime": "st_ctime",
    "birthtime": "st_birthtime",
    "atime_ns": "st_atime_ns",
    "mtime_ns": "st_mtime_ns",
    "ctime_ns": "st_ctime_ns",
    "blocks": "st_blocks",
    "blksize": "st_blksize",
}

_RAW_FIELDS = frozenset(ATTRIBUTE_FIELDS.values())


def read_attribute(stats: os.stat_result, name: str) -> Any:
    """Read a single named field from filesystem metadata.

    Accepts both the friendly names in ATTRIBUTE_FIELDS (``"mtime"``) and the raw
    ``st_*`` spellings (``"st_mtime"``). Names outside that fixed set, and fields the
    platform does not provide (``birthtime`` on most Linux systems, ``blocks`` on
    Windows), yield None.

    Example:
        >>> stats = os.stat(".")
        >>> read_attribute(stats, "mode") == stats.st_mode
        True
        >>> read_attribute(stats, "st_mode") == stats.st_mode
        True
        >>> read_attribute(stats, "colour") is None
        True
    """
    field = ATTRIBUTE_FIELDS.get(name)
    if field is None and name in _RAW_FIELDS:
        field = name
    if field is None:
        return None
    return getattr(stats, field, None)


def project_attributes(stats: os.stat_result, names: Iterable[str]) -> Dict[str, Any]:
    """Build the attribute mapping for a node from the requested names."""
    return {name: read_attribute(stats, name) for name in names}
