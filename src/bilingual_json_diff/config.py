"""DiagnosticsConfig: immutable settings shared by comparators and the API.

DiagnosticsConfig is a frozen dataclass.  Every public entry point accepts
``config=None`` and falls back to ``DiagnosticsConfig()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from bilingual_json_diff.text.normalizer import DEFAULT_SEPARATORS
from bilingual_json_diff.tree.walker import DEFAULT_MAX_NODES

__all__ = ["DiagnosticsConfig"]


@dataclass(frozen=True, slots=True)
class DiagnosticsConfig:
    """Immutable configuration for diagnostics and extraction.

    Attributes:
        separators: Delimiter glyphs stripped from translated text by the
            string normalizer.  Order is irrelevant; duplicates are ignored.
        max_nodes: Node ceiling for every tree traversal.  Exceeding it raises
            ``ResourceExceededError``.
        require_delimiter: When True, the translation extractor only accepts
            bilingual ``"source | translation"`` leaves and skips plain ones.
        normalize_source: When True, the strict comparator also normalizes
            source string leaves before comparing values.  Default False.
    """

    separators: tuple[str, ...] = DEFAULT_SEPARATORS
    max_nodes: int = DEFAULT_MAX_NODES
    require_delimiter: bool = False
    normalize_source: bool = False

    def __post_init__(self) -> None:
        # Lists are accepted for convenience; store a hashable tuple.
        object.__setattr__(self, "separators", tuple(self.separators))
        if self.max_nodes < 1:
            msg = f"max_nodes must be >= 1, got {self.max_nodes}"
            raise ValueError(msg)
        if not self.separators:
            msg = "separators must contain at least one glyph"
            raise ValueError(msg)
        if any(not isinstance(s, str) or not s for s in self.separators):
            msg = f"separators must be non-empty strings, got {self.separators!r}"
            raise ValueError(msg)
