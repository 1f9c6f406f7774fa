"""Comparators that classify differences between a source and a translation.

Two modes are provided:

- ``StructuralComparator``: compares the *sets* of string-leaf paths of the
  source and a translation document (or a pre-built translation map).  It
  reports missing paths, extra paths and JSON-kind mismatches; values are
  never compared, because a translation is expected to differ textually.
- ``StrictComparator``: flattens every scalar leaf of both documents,
  normalizes translated strings with a ``TextNormalizer`` (dropping Han text
  and separator glyphs) and then also compares values.  This is the mode used
  to check that the source half of a bilingual document was left intact.

Ordering: source-side records (missing / type / value mismatches) follow the
source's leaf discovery order; extra records follow the translation's order
and always come last.  Extra paths are warnings; everything else is an error.

Neither comparator raises for well-formed JSON.  ``ResourceExceededError``
from the walker propagates unchanged.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

from bilingual_json_diff.config import DiagnosticsConfig
from bilingual_json_diff.result import (
    Diagnostic,
    DiagnosticKind,
    DiagnosticsReport,
    Severity,
)
from bilingual_json_diff.text.normalizer import TextNormalizer
from bilingual_json_diff.tree.nodes import JsonKind, kind_of
from bilingual_json_diff.tree.walker import LeafMode, TreeWalker, flatten

__all__ = ["StrictComparator", "StructuralComparator"]

logger = logging.getLogger(__name__)


def _summarize(label: str, report: DiagnosticsReport) -> None:
    logger.debug(
        "%s: %d missing, %d extra, %d type mismatches, %d value mismatches (%.2f ms)",
        label,
        len(report.missing),
        len(report.extra),
        len(report.type_mismatches),
        len(report.value_mismatches),
        report.computation_time_ms,
    )


class StructuralComparator:
    """Path-set comparator over string leaves.

    Example::

        cmp = StructuralComparator()
        report = cmp.diagnose({"a": "Song"}, {"a": "歌", "b": "extra"})
        [d.path for d in report.extra]     # ['b']
        report.ok                          # True (extras are warnings)
    """

    def __init__(self, config: DiagnosticsConfig | None = None) -> None:
        self._config: DiagnosticsConfig = (
            config if config is not None else DiagnosticsConfig()
        )
        self._walker = TreeWalker(LeafMode.STRINGS, self._config.max_nodes)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def diagnose(self, source: Any, translation: Any) -> DiagnosticsReport:
        """Compare the string-leaf paths of two documents.

        Args:
            source:      Parsed source document.
            translation: Parsed translation document.

        Returns:
            A ``DiagnosticsReport`` with MISSING, TYPE_MISMATCH and EXTRA
            records.
        """
        t0 = time.perf_counter()
        report = self._diagnose(source, self._string_leaves(translation), t0)
        _summarize("Structural diagnosis", report)
        return report

    def diagnose_map(
        self, source: Any, translation_map: Mapping[str, Any]
    ) -> DiagnosticsReport:
        """Compare a source document against a pre-built translation map.

        The map's keys stand in for the translation's leaf paths and its
        values for the translation's leaf values.
        """
        t0 = time.perf_counter()
        report = self._diagnose(source, translation_map, t0)
        _summarize("Structural diagnosis (map)", report)
        return report

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _string_leaves(self, document: Any) -> dict[str, str]:
        # Discovery order; the first leaf wins when two share a path key.
        leaves: dict[str, str] = {}
        for leaf in self._walker.walk(document):
            leaves.setdefault(leaf.key, leaf.value)
        return leaves

    def _diagnose(
        self,
        source: Any,
        translation_leaves: Mapping[str, Any],
        t0: float,
    ) -> DiagnosticsReport:
        source_leaves = self._string_leaves(source)
        diagnostics: list[Diagnostic] = []

        for path, expected in source_leaves.items():
            if path not in translation_leaves:
                diagnostics.append(
                    Diagnostic(DiagnosticKind.MISSING, path, expected=expected)
                )
                continue
            expected_kind = kind_of(expected)
            actual_kind = kind_of(translation_leaves[path])
            if expected_kind is not actual_kind:
                diagnostics.append(
                    Diagnostic(
                        DiagnosticKind.TYPE_MISMATCH,
                        path,
                        expected=expected_kind,
                        actual=actual_kind,
                    )
                )

        for path, actual in translation_leaves.items():
            if path not in source_leaves:
                diagnostics.append(
                    Diagnostic(
                        DiagnosticKind.EXTRA,
                        path,
                        actual=actual,
                        severity=Severity.WARNING,
                    )
                )

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        return DiagnosticsReport(tuple(diagnostics), computation_time_ms=elapsed_ms)


class StrictComparator:
    """Flattening comparator that also checks values.

    Every translated string leaf is passed through the injected
    ``TextNormalizer`` before comparison, so ``"Verse | 主歌"`` compares equal
    to a source ``"Verse"``.  Non-string values are compared by JSON equality
    (``1 == 1.0``); ``True`` versus ``1`` is a type mismatch.
    """

    def __init__(
        self,
        config: DiagnosticsConfig | None = None,
        normalizer: TextNormalizer | None = None,
    ) -> None:
        """Initialise the comparator.

        Args:
            config:     Settings.  Defaults to ``DiagnosticsConfig()``.
            normalizer: String normalizer for translated leaves.  Defaults to
                a ``TextNormalizer`` built from ``config.separators``.
        """
        self._config: DiagnosticsConfig = (
            config if config is not None else DiagnosticsConfig()
        )
        self._normalizer: TextNormalizer = (
            normalizer
            if normalizer is not None
            else TextNormalizer(self._config.separators)
        )

    @property
    def normalizer(self) -> TextNormalizer:
        return self._normalizer

    def compare(self, source: Any, translation: Any) -> DiagnosticsReport:
        """Compare every scalar leaf of ``source`` with ``translation``.

        Args:
            source:      Parsed source document.
            translation: Parsed translation (typically bilingual) document.

        Returns:
            A ``DiagnosticsReport``; only EXTRA records are warnings.
        """
        t0 = time.perf_counter()
        max_nodes = self._config.max_nodes
        source_flat = flatten(source, max_nodes)
        translated_flat = {
            path: self._normalizer.normalize(value)
            for path, value in flatten(translation, max_nodes).items()
        }

        diagnostics: list[Diagnostic] = []
        for path, expected in source_flat.items():
            if path not in translated_flat:
                diagnostics.append(
                    Diagnostic(DiagnosticKind.MISSING, path, expected=expected)
                )
                continue

            actual = translated_flat[path]
            expected_kind = kind_of(expected)
            actual_kind = kind_of(actual)
            if expected_kind is not actual_kind:
                diagnostics.append(
                    Diagnostic(
                        DiagnosticKind.TYPE_MISMATCH,
                        path,
                        expected=expected_kind,
                        actual=actual_kind,
                    )
                )
                continue

            reference = expected
            if self._config.normalize_source and expected_kind is JsonKind.STRING:
                reference = self._normalizer.normalize(expected)
            if reference != actual:
                diagnostics.append(
                    Diagnostic(
                        DiagnosticKind.VALUE_MISMATCH,
                        path,
                        expected=reference,
                        actual=actual,
                    )
                )

        for path, actual in translated_flat.items():
            if path not in source_flat:
                diagnostics.append(
                    Diagnostic(
                        DiagnosticKind.EXTRA,
                        path,
                        actual=actual,
                        severity=Severity.WARNING,
                    )
                )

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        report = DiagnosticsReport(tuple(diagnostics), computation_time_ms=elapsed_ms)
        _summarize("Strict comparison", report)
        return report
