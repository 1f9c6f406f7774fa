"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers of music-analysis documents: 10, 100 and 1000 sections, each with
eight string leaves and one numeric leaf per section.
Each tier provides an "aligned" pair (source vs. its bilingual rendition) and
a "drifted" pair (every third section dropped, every fifth lyric rewritten).
"""

from __future__ import annotations

from typing import Any

import pytest

Pair = tuple[dict[str, Any], dict[str, Any]]


def generate_source(num_sections: int) -> dict[str, Any]:
    """Generate an English source document with ``num_sections`` sections."""
    return {
        "global_dimension": {
            "description": f"Generated song with {num_sections} sections",
            "fact_keywords": {"Genre": "Rock", "Mood": "Bright"},
        },
        "section_dimension": [
            {
                "id": f"section_{i}",
                "timestamp": f"{i // 60:02d}:{i % 60:02d}",
                "description": f"Section {i}",
                "lyrics": f"line {i} of the song",
                "keywords": {"BPM": 120 + i % 8, "Key": "C major"},
                "highlights": {"Hook": "Yes", "Texture": f"layer {i}"},
            }
            for i in range(num_sections)
        ],
    }


def _bilingual(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _bilingual(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_bilingual(v) for v in value]
    if isinstance(value, str):
        return f"{value} | 译文"
    return value


def _make_aligned(num_sections: int) -> Pair:
    source = generate_source(num_sections)
    return source, _bilingual(source)


def _make_drifted(num_sections: int) -> Pair:
    source = generate_source(num_sections)
    translation = _bilingual(source)
    sections = translation["section_dimension"]
    for i, section in enumerate(sections):
        if i % 5 == 0:
            section["lyrics"] = f"rewritten {i} | 改写"
    translation["section_dimension"] = [s for i, s in enumerate(sections) if i % 3 != 2]
    return source, translation


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10_aligned() -> Pair:
    return _make_aligned(10)


@pytest.fixture
def pair_10_drifted() -> Pair:
    return _make_drifted(10)


@pytest.fixture
def pair_100_aligned() -> Pair:
    return _make_aligned(100)


@pytest.fixture
def pair_100_drifted() -> Pair:
    return _make_drifted(100)


@pytest.fixture
def pair_1000_aligned() -> Pair:
    """1000 sections, roughly 9000 leaves per document."""
    return _make_aligned(1000)


@pytest.fixture
def pair_1000_drifted() -> Pair:
    return _make_drifted(1000)
