"""pytest plugin for bilingual-json-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from bilingual_json_diff import DiagnosticsConfig, compare_strict, diagnose


@pytest.fixture(scope="session")
def assert_translation_aligned() -> Any:
    """Fixture that returns a callable translation-alignment asserter.

    The fixture is session-scoped because the returned callable is stateless
    (each call builds fresh comparators).

    Usage in tests::

        def test_lyrics_translated(assert_translation_aligned):
            assert_translation_aligned({"lyrics": "hello"}, {"lyrics": "你好"})

        def test_source_kept(assert_translation_aligned):
            assert_translation_aligned(
                {"lyrics": "hello"}, {"lyrics": "hello | 你好"}, strict=True
            )

    Returns:
        A callable ``_assert(source, translation, strict=False, config=None,
        allow_extra=True) -> None`` raising ``AssertionError`` when the
        comparison reports errors (or, with ``allow_extra=False``, warnings).
    """

    def _assert(
        source: Any,
        translation: Any,
        strict: bool = False,
        config: DiagnosticsConfig | None = None,
        allow_extra: bool = True,
    ) -> None:
        """Assert that ``translation`` lines up with ``source``.

        Args:
            source:      Source JSON document.
            translation: Translated (strict=False) or bilingual (strict=True)
                         JSON document.
            strict:      Use the strict comparator, which also compares
                         normalized values.
            config:      Optional DiagnosticsConfig.
            allow_extra: When False, extra translation paths also fail.

        Raises:
            AssertionError: Listing every offending diagnostic.
        """
        if strict:
            report = compare_strict(source, translation, config=config)
        else:
            report = diagnose(source, translation, config=config)

        failures = report.errors if allow_extra else list(report.diagnostics)
        if failures:
            lines = "\n".join(f"  {d.severity}: {d.message}" for d in failures)
            raise AssertionError(
                f"Translation not aligned with source "
                f"({len(report.errors)} error(s), {len(report.warnings)} warning(s)):\n"
                f"{lines}"
            )

    return _assert
