"""Integration tests for the bilingual-json-diff pytest plugin.

These tests verify that the assert_translation_aligned fixture is
auto-discovered via the pytest11 entry point and behaves correctly.

NOTE: These tests require bilingual-json-diff to be installed (even in
editable mode via ``pip install -e .``). The pytest11 entry point is only
registered at install time -- running from a raw source checkout without
installing will not discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from bilingual_json_diff import DiagnosticsConfig


def test_fixture_passes_plain_translation(assert_translation_aligned: Any) -> None:
    """A translation with the same string paths passes structural mode."""
    assert_translation_aligned({"lyrics": "hello"}, {"lyrics": "你好"})


def test_fixture_fails_missing_path(assert_translation_aligned: Any) -> None:
    with pytest.raises(AssertionError, match=r"error: missing path lyrics"):
        assert_translation_aligned({"lyrics": "hello"}, {})


def test_fixture_strict_mode(assert_translation_aligned: Any) -> None:
    """strict=True compares normalized values."""
    assert_translation_aligned({"lyrics": "hello"}, {"lyrics": "hello | 你好"}, strict=True)

    with pytest.raises(AssertionError, match=r"value mismatch at lyrics"):
        assert_translation_aligned({"lyrics": "hello"}, {"lyrics": "bye | 再见"}, strict=True)


def test_fixture_custom_config(assert_translation_aligned: Any) -> None:
    """A custom DiagnosticsConfig is forwarded to the comparator."""
    assert_translation_aligned(
        {"t": "00:00-00:15"},
        {"t": "00:00-00:15"},
        strict=True,
        config=DiagnosticsConfig(separators=("|",)),
    )


def test_fixture_allow_extra(assert_translation_aligned: Any) -> None:
    source = {"a": "x"}
    translation = {"a": "甲", "b": "乙"}
    assert_translation_aligned(source, translation)
    with pytest.raises(AssertionError, match=r"warning: extra path b"):
        assert_translation_aligned(source, translation, allow_extra=False)


def test_fixture_error_message_contents(assert_translation_aligned: Any) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_translation_aligned({"a": "x", "b": "y"}, {"c": "z"})

    message = str(exc_info.value)
    assert "2 error(s), 1 warning(s)" in message
    assert "missing path a" in message
    assert "missing path b" in message


def test_fixture_returns_callable(assert_translation_aligned: Any) -> None:
    assert callable(assert_translation_aligned)


def test_plugin_discovery() -> None:
    """Verify assert_translation_aligned appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_translation_aligned" in result.stdout, (
        f"assert_translation_aligned not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
