"""Integrations subpackage for bilingual-json-diff.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via the pytest11 entry point), providing the
  ``assert_translation_aligned`` fixture.
"""

from __future__ import annotations

__all__: list[str] = []
