"""Positional line differencer for side-by-side display.

Non-string inputs are serialized with ``json.dumps(indent=2)`` (dict insertion
order, non-ASCII kept) and both texts are split on ``\\n``.  Lines are then
paired purely by position: line ``i`` of the original against line ``i`` of
the translation.

Classification per index ``i`` (``n = max(len(original), len(translated))``):
- both lines exist and are identical -> UNCHANGED / UNCHANGED
- original has run out               -> REMOVED("") / ADDED(line)
- translation has run out            -> REMOVED(line) / ADDED("")
- both exist and differ              -> MODIFIED / MODIFIED

There is no alignment search: inserting one line shifts every following line
to MODIFIED.
"""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "DiffLine",
    "LineDiff",
    "LineKind",
    "diff_line_sequences",
    "diff_lines",
    "render_side_by_side",
    "serialize_for_diff",
]


class LineKind(StrEnum):
    UNCHANGED = auto()
    ADDED = auto()
    REMOVED = auto()
    MODIFIED = auto()


@dataclass(frozen=True, slots=True)
class DiffLine:
    """One rendered line.

    Attributes:
        content:     Line text (``""`` for padding on the shorter side).
        kind:        Classification of the line.
        line_number: 1-based position in the diff.
    """

    content: str
    kind: LineKind
    line_number: int


@dataclass(frozen=True, slots=True)
class LineDiff:
    """Two parallel, equal-length sequences of ``DiffLine``."""

    original: tuple[DiffLine, ...]
    translated: tuple[DiffLine, ...]

    @property
    def has_changes(self) -> bool:
        return any(line.kind is not LineKind.UNCHANGED for line in self.original)

    def summary(self) -> dict[str, int]:
        """Count rows by the classification of their original side.

        Rows past the end of either text are counted as ``"removed"``.
        """
        counts = Counter(line.kind for line in self.original)
        return {str(kind): counts.get(kind, 0) for kind in LineKind}


def serialize_for_diff(value: Any) -> str:
    """Return ``value`` as diffable text; strings pass through unchanged."""
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False)


def diff_line_sequences(
    original_lines: Sequence[str],
    translated_lines: Sequence[str],
) -> LineDiff:
    """Classify two line sequences position by position."""
    original: list[DiffLine] = []
    translated: list[DiffLine] = []
    n_original = len(original_lines)
    n_translated = len(translated_lines)

    for i in range(max(n_original, n_translated)):
        number = i + 1
        if i >= n_original:
            original.append(DiffLine("", LineKind.REMOVED, number))
            translated.append(DiffLine(translated_lines[i], LineKind.ADDED, number))
        elif i >= n_translated:
            original.append(DiffLine(original_lines[i], LineKind.REMOVED, number))
            translated.append(DiffLine("", LineKind.ADDED, number))
        elif original_lines[i] == translated_lines[i]:
            original.append(DiffLine(original_lines[i], LineKind.UNCHANGED, number))
            translated.append(DiffLine(translated_lines[i], LineKind.UNCHANGED, number))
        else:
            original.append(DiffLine(original_lines[i], LineKind.MODIFIED, number))
            translated.append(DiffLine(translated_lines[i], LineKind.MODIFIED, number))

    return LineDiff(tuple(original), tuple(translated))


def diff_lines(original: Any, translated: Any) -> LineDiff:
    """Serialize both inputs and diff them line by line.

    Args:
        original:   Raw text, or any JSON value.
        translated: Raw text, or any JSON value.

    Example::

        diff = diff_lines("a\\nb", "a\\nc\\nd")
        [line.kind for line in diff.translated]
        # [UNCHANGED, MODIFIED, ADDED]
    """
    return diff_line_sequences(
        serialize_for_diff(original).split("\n"),
        serialize_for_diff(translated).split("\n"),
    )


_MARKERS = {
    LineKind.UNCHANGED: " ",
    LineKind.ADDED: "+",
    LineKind.REMOVED: "-",
    LineKind.MODIFIED: "~",
}


def _cell(line: DiffLine, width: int) -> str:
    content = line.content
    if len(content) > width:
        content = content[: width - 1] + "…"
    return f"{line.line_number:>4} {_MARKERS[line.kind]} {content:<{width}}"


def render_side_by_side(diff: LineDiff, width: int = 60) -> str:
    """Render a LineDiff as two plain-text columns for a terminal."""
    if width < 1:
        msg = f"width must be >= 1, got {width}"
        raise ValueError(msg)
    rows = [
        f"{_cell(left, width)} | {_cell(right, width).rstrip()}"
        for left, right in zip(diff.original, diff.translated, strict=True)
    ]
    return "\n".join(rows)
