"""TextNormalizer: reduces translated text to a comparable fragment.

Processing pipeline (applied in order):
1. NFKC normalization folds compatibility and fullwidth variants
   (e.g. ``｜`` -> ``|``, ``Ａ`` -> ``A``).
2. Every Han-script character is removed.
3. Every separator glyph is removed together with the whitespace around it.
4. Whitespace runs collapse to one space; ends are trimmed.

The result is idempotent: ``normalize(normalize(s)) == normalize(s)``.

Python's ``re`` has no ``\\p{Script=Han}`` class, so the Han class is spelled
out as the codepoint ranges of Script=Han.

Separator patterns are compiled once per distinct separator tuple and kept in
a module-level LRU cache guarded by a lock; compiled patterns are immutable.
"""

from __future__ import annotations

import re
import threading
import unicodedata
from collections.abc import Iterable
from typing import Any

from cachetools import LRUCache

__all__ = [
    "DEFAULT_SEPARATORS",
    "TextNormalizer",
    "compile_separator_pattern",
    "default_normalizer",
    "normalize",
    "strip_han",
]

DEFAULT_SEPARATORS: tuple[str, ...] = (
    "|",
    "｜",
    "/",
    "／",
    "-",
    "—",
    "–",
    "·",
    "・",
    "、",
    ":",
    "：",
    ";",
    "；",
)

# Script=Han: radicals, iteration/numeral marks, Extension A, the unified
# block, compatibility ideographs, and the supplementary-plane extensions.
_HAN = re.compile(
    "["
    "\u2e80-\u2e99\u2e9b-\u2ef3"
    "\u2f00-\u2fd5"
    "\u3005\u3007\u3021-\u3029\u3038-\u303b"
    "\u3400-\u4dbf"
    "\u4e00-\u9fff"
    "\uf900-\ufa6d\ufa70-\ufad9"
    "\U00016fe2\U00016fe3\U00016ff0\U00016ff1"
    "\U00020000-\U0002a6df"
    "\U0002a700-\U0002ebef"
    "\U0002ebf0-\U0002ee5d"
    "\U0002f800-\U0002fa1f"
    "\U00030000-\U000323af"
    "]"
)

_PATTERN_CACHE: LRUCache[tuple[str, ...], re.Pattern[str]] = LRUCache(maxsize=32)
_PATTERN_LOCK = threading.Lock()


def _build_separator_pattern(separators: tuple[str, ...]) -> re.Pattern[str]:
    # Input is NFKC-folded before separators are stripped, so fullwidth glyphs
    # must also match in their folded form.
    glyphs: dict[str, None] = {}
    for sep in separators:
        if not sep:
            continue
        glyphs[sep] = None
        glyphs[unicodedata.normalize("NFKC", sep)] = None
    if not glyphs:
        msg = "at least one non-empty separator is required"
        raise ValueError(msg)

    # Longest first so multi-character separators win over their prefixes.
    ordered = sorted(glyphs, key=len, reverse=True)
    union = "|".join(re.escape(glyph) for glyph in ordered)
    return re.compile(rf"\s*(?:{union})\s*")


def compile_separator_pattern(separators: Iterable[str]) -> re.Pattern[str]:
    """Return the compiled separator matcher for ``separators``.

    The pattern is built at most once per distinct separator tuple; all
    callers receive the same immutable ``re.Pattern`` object.

    Raises:
        ValueError: If no non-empty separator is given.
    """
    key = tuple(separators)
    with _PATTERN_LOCK:
        try:
            return _PATTERN_CACHE[key]
        except KeyError:
            pattern = _build_separator_pattern(key)
            _PATTERN_CACHE[key] = pattern
            return pattern


def strip_han(text: str) -> str:
    """Remove every Han-script character from ``text``."""
    return _HAN.sub("", text)


class TextNormalizer:
    """Strips source-script characters and delimiter glyphs from text.

    Instances are immutable after construction and safe to share between
    threads.  Comparators accept an injected instance; ``normalize()`` at
    module level uses a shared default one.

    Example usage:
        normalizer = TextNormalizer()
        normalizer.normalize("Rock | 摇滚丨风格｜测试")   # "Rock"
        normalizer.normalize(42)                          # 42 (non-strings pass through)
    """

    __slots__ = ("_separator_pattern", "_separators")

    def __init__(self, separators: Iterable[str] = DEFAULT_SEPARATORS) -> None:
        self._separators: tuple[str, ...] = tuple(separators)
        self._separator_pattern = compile_separator_pattern(self._separators)

    @property
    def separators(self) -> tuple[str, ...]:
        """The separator glyphs this normalizer strips."""
        return self._separators

    def normalize(self, value: Any) -> Any:
        """Normalize a translated string; return non-strings unchanged.

        Args:
            value: Any JSON value.

        Returns:
            The normalized string, or ``value`` itself when it is not a str.
        """
        if not isinstance(value, str):
            return value

        s = unicodedata.normalize("NFKC", value)
        s = strip_han(s)
        s = self._separator_pattern.sub("", s)
        s = " ".join(s.split())
        # Removals can leave composable sequences behind (base + combining mark).
        return unicodedata.normalize("NFC", s)


_default: TextNormalizer | None = None
_default_lock = threading.Lock()


def default_normalizer() -> TextNormalizer:
    """Return the shared ``TextNormalizer`` for ``DEFAULT_SEPARATORS``.

    Built on first use, exactly once.
    """
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = TextNormalizer()
    return _default


def normalize(value: Any) -> Any:
    """Normalize ``value`` with the default separator set."""
    return default_normalizer().normalize(value)
