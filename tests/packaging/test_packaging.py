"""Packaging correctness verification for bilingual-json-diff.

Tests validate that:
- The installed package imports and its public API works
- py.typed marker is present in the wheel
- The pytest plugin and console script entry points are registered
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import shutil
import subprocess
import sys
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    """Verify the base install works without optional extras."""

    def test_import_bilingual_json_diff(self):  # type: ignore[no-untyped-def]
        import bilingual_json_diff

        assert hasattr(bilingual_json_diff, "diagnose")
        assert hasattr(bilingual_json_diff, "compare_strict")
        assert hasattr(bilingual_json_diff, "build_translation_map")

    def test_diagnose_basic(self):  # type: ignore[no-untyped-def]
        from bilingual_json_diff import diagnose

        assert diagnose({"a": "x"}, {"a": "甲"}).ok

    def test_cli_module_importable(self):  # type: ignore[no-untyped-def]
        from bilingual_json_diff.cli import main

        assert callable(main)


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        if shutil.which("poetry") is None:
            pytest.skip("poetry is not installed")
        dist_dir = PROJECT_ROOT / "dist"
        result = subprocess.run(
            ["poetry", "build", "-f", "wheel"],
            cwd=str(PROJECT_ROOT),
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            assert any(n.endswith("py.typed") for n in names), (
                f"py.typed not found in wheel. Contents: {names}"
            )

    def test_no_pycache_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        with zipfile.ZipFile(wheel_path) as zf:
            pycache_files = [n for n in zf.namelist() if "__pycache__" in n]
            assert not pycache_files, f"__pycache__ found in wheel: {pycache_files}"

    def test_all_source_modules_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        expected_modules = [
            "bilingual_json_diff/__init__.py",
            "bilingual_json_diff/api.py",
            "bilingual_json_diff/cli.py",
            "bilingual_json_diff/comparator.py",
            "bilingual_json_diff/config.py",
            "bilingual_json_diff/errors.py",
            "bilingual_json_diff/extractor.py",
            "bilingual_json_diff/linediff.py",
            "bilingual_json_diff/result.py",
            "bilingual_json_diff/validation.py",
            "bilingual_json_diff/text/__init__.py",
            "bilingual_json_diff/text/bilingual.py",
            "bilingual_json_diff/text/normalizer.py",
            "bilingual_json_diff/tree/__init__.py",
            "bilingual_json_diff/tree/nodes.py",
            "bilingual_json_diff/tree/path.py",
            "bilingual_json_diff/tree/resolver.py",
            "bilingual_json_diff/tree/walker.py",
            "bilingual_json_diff/integrations/__init__.py",
            "bilingual_json_diff/integrations/_pytest_plugin.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), (
                    f"Module {module} not found in wheel"
                )

    def test_metadata_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        with zipfile.ZipFile(wheel_path) as zf:
            metadata_files = [n for n in zf.namelist() if "METADATA" in n]
            assert metadata_files, "No METADATA found in wheel"
            metadata = zf.read(metadata_files[0]).decode()
            assert "bilingual-json-diff" in metadata.lower()
            assert "0.1.0" in metadata


class TestEntryPoints:
    """Verify the pytest plugin and console script are registered."""

    def test_pytest11_entry_point_registered(self):  # type: ignore[no-untyped-def]
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")
        ours = [ep for ep in pytest11_eps if "bilingual" in str(ep.value).lower()]
        assert ours, (
            f"No pytest11 entry point found for bilingual-json-diff. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_console_script_registered(self):  # type: ignore[no-untyped-def]
        from importlib.metadata import entry_points

        scripts = entry_points(group="console_scripts")
        assert "bilingual-json-diff" in [ep.name for ep in scripts]

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        import importlib

        mod = importlib.import_module("bilingual_json_diff.integrations._pytest_plugin")
        assert hasattr(mod, "assert_translation_aligned")

    def test_plugin_discovery_via_pytest(self):  # type: ignore[no-untyped-def]
        result = subprocess.run(
            [sys.executable, "-m", "pytest", "--fixtures", "-q"],
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
        )
        assert "assert_translation_aligned" in result.stdout, (
            f"Fixture not found in pytest fixtures list. stdout: {result.stdout[:500]}"
        )


class TestPackageMetadata:
    def test_version(self):  # type: ignore[no-untyped-def]
        import bilingual_json_diff

        assert bilingual_json_diff.__version__ == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import bilingual_json_diff

        expected = {
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
        }
        actual = set(bilingual_json_diff.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
