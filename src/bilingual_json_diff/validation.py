"""Content checks for music-analysis documents.

- ``is_valid_key_name``: usable object key (non-blank, no control characters).
- ``normalize_timestamp``: canonical ``MM:SS`` / ``MM:SS-MM:SS`` section
  timestamps.
- ``find_title_duplicates``: string values that occur at more than one path.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from bilingual_json_diff.tree.walker import DEFAULT_MAX_NODES, LeafMode, TreeWalker

__all__ = [
    "TitleDuplicate",
    "find_title_duplicates",
    "is_valid_key_name",
    "normalize_timestamp",
]

_CONTROL = re.compile(r"[\x00-\x1f]")

_POINT = re.compile(r"([0-9]{1,3}):([0-5][0-9])")

_DASHES = re.compile(r"[—–]")

# Duplicate detection groups values by this many leading characters.
TITLE_PREFIX_LENGTH = 64


def is_valid_key_name(key: Any) -> bool:
    """Return True for a non-blank string key without control characters."""
    if not isinstance(key, str):
        return False
    stripped = key.strip()
    return bool(stripped) and _CONTROL.search(stripped) is None


def _seconds(point: str) -> int | None:
    match = _POINT.fullmatch(point.strip())
    if match is None:
        return None
    return int(match.group(1)) * 60 + int(match.group(2))


def _format(total: int) -> str:
    minutes, seconds = divmod(total, 60)
    return f"{minutes:02d}:{seconds:02d}"


def normalize_timestamp(timestamp: Any) -> str | None:
    """Normalize a section timestamp.

    Accepts a single point ``m:ss`` (1-3 minute digits) or a range
    ``m:ss-m:ss``; em and en dashes are accepted as the range separator.

    Returns:
        ``"MM:SS"`` or ``"MM:SS-MM:SS"``; None when the input is blank,
        malformed, or a range ends before it starts.

    Example::

        normalize_timestamp("1:02")          # "01:02"
        normalize_timestamp("01:01–1:42")    # "01:01-01:42"
        normalize_timestamp("02:00-01:00")   # None
    """
    raw = str(timestamp or "").strip()
    if not raw:
        return None
    text = _DASHES.sub("-", raw)

    if "-" in text:
        start_text, _, end_text = text.partition("-")
        start = _seconds(start_text)
        end = _seconds(end_text)
        if start is None or end is None or end < start:
            return None
        return f"{_format(start)}-{_format(end)}"

    point = _seconds(text)
    return None if point is None else _format(point)


@dataclass(frozen=True, slots=True)
class TitleDuplicate:
    """A string value found at several paths.

    Attributes:
        title: The (trimmed, possibly truncated) shared value.
        paths: Canonical path keys where it occurs, in document order.
    """

    title: str
    paths: tuple[str, ...]


def find_title_duplicates(
    document: Any, max_nodes: int = DEFAULT_MAX_NODES
) -> list[TitleDuplicate]:
    """Group string leaves by their trimmed value and return repeated ones.

    Values are compared on their first ``TITLE_PREFIX_LENGTH`` characters.
    Blank strings are ignored.
    """
    walker = TreeWalker(LeafMode.STRINGS, max_nodes)
    index: dict[str, list[str]] = {}
    for leaf in walker.walk(document):
        title = leaf.value.strip()
        if not title:
            continue
        index.setdefault(title[:TITLE_PREFIX_LENGTH], []).append(leaf.key)
    return [
        TitleDuplicate(title, tuple(paths))
        for title, paths in index.items()
        if len(paths) > 1
    ]
