"""Diagnostic records and the DiagnosticsReport returned by comparators.

This module provides the result types handed to rendering layers (CLI,
pytest plugin, UIs).  Records are immutable and created per comparison call.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from bilingual_json_diff.tree.nodes import MISSING

__all__ = ["Diagnostic", "DiagnosticKind", "DiagnosticsReport", "Severity"]


class DiagnosticKind(StrEnum):
    """Classification of a difference between source and translation.

    - MISSING        -> "missing"        : path in source, absent in translation
    - EXTRA          -> "extra"          : path in translation, absent in source
    - TYPE_MISMATCH  -> "type_mismatch"  : JSON kinds differ at the path
    - VALUE_MISMATCH -> "value_mismatch" : kinds match, values differ
    """

    MISSING = auto()
    EXTRA = auto()
    TYPE_MISMATCH = auto()
    VALUE_MISMATCH = auto()


class Severity(StrEnum):
    """ERROR fails a validation run; WARNING is reported only."""

    ERROR = auto()
    WARNING = auto()


def _show(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One classified difference.

    Attributes:
        kind:     What kind of difference this is.
        path:     Canonical path key where it was found.
        expected: Source-side value (or kind name for type mismatches);
                  ``MISSING`` when not applicable.
        actual:   Translation-side value (or kind name); ``MISSING`` when not
                  applicable.
        severity: ERROR or WARNING.
    """

    kind: DiagnosticKind
    path: str
    expected: Any = MISSING
    actual: Any = MISSING
    severity: Severity = Severity.ERROR

    @property
    def message(self) -> str:
        """One-line human readable description."""
        if self.kind is DiagnosticKind.MISSING:
            return f"missing path {self.path}"
        if self.kind is DiagnosticKind.EXTRA:
            return f"extra path {self.path}"
        if self.kind is DiagnosticKind.TYPE_MISMATCH:
            return (
                f"type mismatch at {self.path}, "
                f"expected {self.expected}, got {self.actual}"
            )
        return (
            f"value mismatch at {self.path}, "
            f"expected {_show(self.expected)}, got {_show(self.actual)}"
        )


@dataclass(frozen=True, slots=True)
class DiagnosticsReport:
    """Ordered diagnostics of one comparison call.

    Attributes:
        diagnostics: Records in discovery order (source-side records first,
            then extra translation paths).
        computation_time_ms: Wall-clock duration of the comparison.
    """

    diagnostics: tuple[Diagnostic, ...]
    computation_time_ms: float = 0.0

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.kind is kind]

    @property
    def missing(self) -> list[Diagnostic]:
        return self.of_kind(DiagnosticKind.MISSING)

    @property
    def extra(self) -> list[Diagnostic]:
        return self.of_kind(DiagnosticKind.EXTRA)

    @property
    def type_mismatches(self) -> list[Diagnostic]:
        return self.of_kind(DiagnosticKind.TYPE_MISMATCH)

    @property
    def value_mismatches(self) -> list[Diagnostic]:
        return self.of_kind(DiagnosticKind.VALUE_MISMATCH)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.WARNING]

    @property
    def ok(self) -> bool:
        """True when no ERROR diagnostic was produced."""
        return not self.errors
