"""Public API functions for bilingual-json-diff.

Each call creates fresh comparator objects to guarantee zero global state
mutation between calls.  The only shared state is the immutable compiled
separator-pattern cache used by ``TextNormalizer``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bilingual_json_diff.comparator import StrictComparator, StructuralComparator
from bilingual_json_diff.config import DiagnosticsConfig
from bilingual_json_diff.extractor import TranslationMap
from bilingual_json_diff.extractor import build_translation_map as _build_map
from bilingual_json_diff.linediff import LineDiff, diff_lines
from bilingual_json_diff.result import DiagnosticsReport
from bilingual_json_diff.text.bilingual import map_strings, source_document
from bilingual_json_diff.text.normalizer import TextNormalizer

__all__ = [
    "build_translation_map",
    "clean_document",
    "compare_strict",
    "diagnose",
    "diagnose_map",
    "line_diff",
]


def _config(config: DiagnosticsConfig | None) -> DiagnosticsConfig:
    return config if config is not None else DiagnosticsConfig()


def build_translation_map(
    document: Any,
    config: DiagnosticsConfig | None = None,
) -> TranslationMap:
    """Return ``{canonical path key: translated text}`` for ``document``.

    Args:
        document: Parsed translation (plain or bilingual) document.
        config:   Settings; ``require_delimiter`` and ``max_nodes`` apply.
            Defaults to ``DiagnosticsConfig()`` when None.
    """
    cfg = _config(config)
    return _build_map(
        document,
        require_delimiter=cfg.require_delimiter,
        max_nodes=cfg.max_nodes,
    )


def diagnose(
    source: Any,
    translation: Any,
    config: DiagnosticsConfig | None = None,
) -> DiagnosticsReport:
    """Structurally compare the string-leaf paths of two documents.

    Reports missing paths, extra paths (warnings) and kind mismatches.
    Values are not compared.
    """
    return StructuralComparator(config=config).diagnose(source, translation)


def diagnose_map(
    source: Any,
    translation_map: Mapping[str, Any],
    config: DiagnosticsConfig | None = None,
) -> DiagnosticsReport:
    """Like ``diagnose`` but against a pre-built translation map."""
    return StructuralComparator(config=config).diagnose_map(source, translation_map)


def compare_strict(
    source: Any,
    translation: Any,
    config: DiagnosticsConfig | None = None,
) -> DiagnosticsReport:
    """Compare every scalar leaf, normalizing translated strings first.

    Use this to verify that a bilingual document kept its source text:
    ``"Verse | 主歌"`` normalizes to ``"Verse"``.
    """
    return StrictComparator(config=config).compare(source, translation)


def clean_document(document: Any) -> Any:
    """Return a copy of a bilingual document with only the source halves."""
    return source_document(document)


def line_diff(
    original: Any,
    translated: Any,
    *,
    normalize_translation: bool = False,
    config: DiagnosticsConfig | None = None,
) -> LineDiff:
    """Positional line diff of two documents (or raw texts).

    Args:
        original:   Source text or JSON value.
        translated: Translated text or JSON value.
        normalize_translation: When True and ``translated`` is not a string,
            every string leaf is normalized before serialization, so a
            bilingual document lines up with its source.
        config: Settings; only ``separators`` apply.
    """
    if normalize_translation and not isinstance(translated, str):
        normalizer = TextNormalizer(_config(config).separators)
        translated = map_strings(translated, normalizer.normalize)
    return diff_lines(original, translated)
