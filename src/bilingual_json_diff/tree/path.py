"""Canonical path keys: string encoding of a path into a JSON document.

Encoding rules:
- Consecutive Key segments join with ``.``  e.g. ``global_dimension.description``
- An Index segment appends ``[n]`` directly after the prior segment, with no
  separator  e.g. ``section_dimension[2].lyrics``
- A leading Index yields ``[n]`` at the start of the key.
- The root path encodes to ``""``.

``encode_path`` and ``decode_path`` are mutual inverses for paths whose key
names are non-empty, contain none of ``.``, ``[`` or ``]``, and whose indices
are non-negative.  Decoding is permissive: fragments that cannot be parsed are
dropped (and logged at DEBUG) instead of raising.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from bilingual_json_diff.errors import InvalidPathError
from bilingual_json_diff.tree.nodes import Index, Key, Path, PathSegment

__all__ = ["as_segment", "decode_path", "encode_path"]

logger = logging.getLogger(__name__)

# One dot-separated fragment: an optional name followed by zero or more
# bracketed non-negative integers.
_FRAGMENT = re.compile(r"([^\[\]]*)((?:\[\d+\])*)")

_INDEX_SUFFIX = re.compile(r"\[(\d+)\]")


def as_segment(raw: PathSegment | str | int) -> PathSegment:
    """Coerce a raw ``str``/``int`` (or an existing segment) into a PathSegment.

    Raises:
        InvalidPathError: For negative indices, bools, and non-segment values.
    """
    if isinstance(raw, (Key, Index)):
        segment = raw
    elif isinstance(raw, bool):
        raise InvalidPathError(f"bool is not a valid path segment: {raw!r}")
    elif isinstance(raw, int):
        segment = Index(raw)
    elif isinstance(raw, str):
        segment = Key(raw)
    else:
        raise InvalidPathError(f"Unsupported path segment: {raw!r}")

    if isinstance(segment, Index) and segment.index < 0:
        raise InvalidPathError(f"Array index must be non-negative, got {segment.index}")
    return segment


def encode_path(path: Iterable[PathSegment | str | int]) -> str:
    """Encode a path as its canonical key.

    Args:
        path: Segments from the root.  Plain ``str`` values are treated as
            keys and plain ``int`` values as indices.

    Returns:
        The canonical path key, e.g. ``"section_dimension[2].lyrics"``.

    Example::

        encode_path(["section_dimension", 2, "lyrics"])
        # 'section_dimension[2].lyrics'
    """
    parts: list[str] = []
    for raw in path:
        segment = as_segment(raw)
        if isinstance(segment, Index):
            parts.append(f"[{segment.index}]")
        else:
            parts.append(f".{segment.name}" if parts else segment.name)
    return "".join(parts)


def decode_path(key: str) -> Path:
    """Decode a canonical path key back into segments.

    Each dot-separated fragment must look like ``name``, ``name[0][1]`` or
    ``[0]``.  Empty fragments and fragments with malformed brackets
    (``a[x]``, ``a]``, ``a[-1]``) are dropped.

    Args:
        key: A canonical path key.

    Returns:
        Tuple of segments.  ``()`` for the empty key.
    """
    segments: list[PathSegment] = []
    if not key:
        return ()

    for fragment in key.split("."):
        match = _FRAGMENT.fullmatch(fragment)
        if match is None:
            logger.debug("Dropping unparseable fragment %r of path key %r", fragment, key)
            continue
        name, suffix = match.groups()
        if not name and not suffix:
            logger.debug("Dropping empty fragment of path key %r", key)
            continue
        if name:
            segments.append(Key(name))
        segments.extend(Index(int(i)) for i in _INDEX_SUFFIX.findall(suffix))

    return tuple(segments)
