"""Resolve canonical path keys against a JSON document.

Resolution never raises: a key that does not address a value (unknown
member, index out of bounds, stepping into a scalar) resolves to ``MISSING``,
which is distinct from a present ``None``.
"""

from __future__ import annotations

from typing import Any

from bilingual_json_diff.tree.nodes import MISSING, Index
from bilingual_json_diff.tree.path import decode_path

__all__ = ["get_by_path", "has_path"]


def get_by_path(root: Any, key: str) -> Any:
    """Return the value addressed by ``key`` inside ``root``, or ``MISSING``.

    Args:
        root: A parsed JSON document.
        key:  Canonical path key.  ``""`` addresses the root itself.

    Returns:
        The addressed value, or ``MISSING`` when the path does not resolve.
    """
    current = root
    for segment in decode_path(key):
        if isinstance(segment, Index):
            if not isinstance(current, list) or segment.index >= len(current):
                return MISSING
            current = current[segment.index]
        else:
            if not isinstance(current, dict) or segment.name not in current:
                return MISSING
            current = current[segment.name]
    return current


def has_path(root: Any, key: str) -> bool:
    """Return True when ``key`` resolves to a value (``None`` included)."""
    return get_by_path(root, key) is not MISSING
