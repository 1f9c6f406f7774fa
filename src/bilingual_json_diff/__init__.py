"""Bilingual JSON diff - structural and textual checks for translated JSON documents."""

from __future__ import annotations

from bilingual_json_diff.api import (
    build_translation_map,
    clean_document,
    compare_strict,
    diagnose,
    diagnose_map,
    line_diff,
)
from bilingual_json_diff.comparator import StrictComparator, StructuralComparator
from bilingual_json_diff.config import DiagnosticsConfig
from bilingual_json_diff.errors import (
    BilingualDiffError,
    InvalidPathError,
    ResourceExceededError,
)
from bilingual_json_diff.linediff import DiffLine, LineDiff, LineKind
from bilingual_json_diff.result import (
    Diagnostic,
    DiagnosticKind,
    DiagnosticsReport,
    Severity,
)
from bilingual_json_diff.text.normalizer import TextNormalizer, normalize
from bilingual_json_diff.tree import MISSING, decode_path, encode_path, get_by_path

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "BilingualDiffError",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticsConfig",
    "DiagnosticsReport",
    "DiffLine",
    "InvalidPathError",
    "LineDiff",
    "LineKind",
    "ResourceExceededError",
    "Severity",
    "StrictComparator",
    "StructuralComparator",
    "TextNormalizer",
    "build_translation_map",
    "clean_document",
    "compare_strict",
    "decode_path",
    "diagnose",
    "diagnose_map",
    "encode_path",
    "get_by_path",
    "line_diff",
    "normalize",
]
