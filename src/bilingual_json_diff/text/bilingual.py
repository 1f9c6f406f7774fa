"""Helpers for bilingual-encoded strings: ``"source | translation"``.

A bilingual leaf holds the source text, a literal ``|``, and the translation.
Only the first ``|`` separates the halves; any further pipes belong to the
translation.

Whole-document projections (``source_document`` / ``translation_document``)
build new documents and never mutate their input.  They walk with an explicit
stack, like TreeWalker.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

__all__ = [
    "BILINGUAL_DELIMITER",
    "join_bilingual",
    "map_strings",
    "source_document",
    "source_text",
    "split_bilingual",
    "translation_document",
    "translation_text",
]

BILINGUAL_DELIMITER = "|"


def split_bilingual(value: str) -> tuple[str, str | None]:
    """Split a bilingual string into ``(source, translation)``.

    Both halves are trimmed.  ``translation`` is None when ``value`` holds no
    delimiter at all.

    Example::

        split_bilingual("Verse | 主歌")        # ("Verse", "主歌")
        split_bilingual("A | B | C")           # ("A", "B | C")
        split_bilingual("Verse")               # ("Verse", None)
    """
    parts = value.split(BILINGUAL_DELIMITER)
    source = parts[0].strip()
    if len(parts) == 1:
        return source, None
    return source, BILINGUAL_DELIMITER.join(parts[1:]).strip()


def join_bilingual(source: str, translation: str | None) -> str:
    """Encode a source/translation pair as one bilingual string.

    An empty source yields ``""`` (the entry is dropped); an empty
    translation yields the source alone.
    """
    source = source.strip()
    translation = (translation or "").strip()
    if not source:
        return ""
    if not translation:
        return source
    return f"{source} {BILINGUAL_DELIMITER} {translation}"


def source_text(value: str) -> str:
    """Return the source half of a bilingual string."""
    return split_bilingual(value)[0]


def translation_text(value: str) -> str:
    """Return the translated half, or the trimmed value when there is none."""
    source, translation = split_bilingual(value)
    return source if translation is None else translation


def map_strings(document: Any, transform: Callable[[str], Any]) -> Any:
    """Return a copy of ``document`` with ``transform`` applied to every string.

    Containers are rebuilt with an explicit stack; other scalars are kept.
    """
    if isinstance(document, str):
        return transform(document)
    if not isinstance(document, (dict, list)):
        return document

    root: Any = {} if isinstance(document, dict) else []
    stack: list[tuple[Any, Any]] = [(document, root)]
    while stack:
        original, copy = stack.pop()
        items = original.items() if isinstance(original, dict) else enumerate(original)
        for key, child in items:
            if isinstance(child, (dict, list)):
                value: Any = {} if isinstance(child, dict) else []
                stack.append((child, value))
            elif isinstance(child, str):
                value = transform(child)
            else:
                value = child
            if isinstance(copy, dict):
                copy[key] = value
            else:
                copy.append(value)
    return root


def source_document(document: Any) -> Any:
    """Return a copy of ``document`` with every string reduced to its source half.

    This is the "clean" export of a bilingual document.
    """
    return map_strings(document, source_text)


def translation_document(document: Any) -> Any:
    """Return a copy of ``document`` with every string reduced to its translation."""
    return map_strings(document, translation_text)
