"""Shared music-analysis documents used across the test suite.

All fixtures return fresh objects so tests may mutate them freely.
"""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def music_source() -> dict[str, Any]:
    """English source document."""
    return {
        "global_dimension": {
            "description": "Song",
            "fact_keywords": {"Genre": "Rock"},
        },
        "section_dimension": [
            {
                "id": "intro",
                "timestamp": "00:00-00:15",
                "description": "Intro",
                "lyrics": "la la",
                "keywords": {"BPM": "120"},
            },
            {
                "id": "verse",
                "timestamp": "00:15-00:45",
                "description": "Verse",
                "lyrics": "hello",
                "highlights": {
                    "Hook": "Yes",
                    "High-Quality Timbre/Vocal Texture": "Great",
                },
            },
        ],
    }


@pytest.fixture
def music_translation() -> dict[str, Any]:
    """Plain Chinese translation with the same shape as ``music_source``."""
    return {
        "global_dimension": {
            "description": "歌曲",
            "fact_keywords": {"Genre": "摇滚"},
        },
        "section_dimension": [
            {
                "id": "前奏",
                "timestamp": "00:00-00:15",
                "description": "前奏",
                "lyrics": "啦啦",
                "keywords": {"BPM": "120"},
            },
            {
                "id": "主歌",
                "timestamp": "00:15-00:45",
                "description": "主歌",
                "lyrics": "你好",
                "highlights": {
                    "Hook": "是",
                    "High-Quality Timbre/Vocal Texture": "高品质音色/人声质感",
                },
            },
        ],
    }


@pytest.fixture
def music_bilingual() -> dict[str, Any]:
    """Bilingual ``"source | translation"`` rendition of ``music_source``."""
    return {
        "global_dimension": {
            "description": "Song | 歌曲",
            "fact_keywords": {"Genre": "Rock | 摇滚"},
        },
        "section_dimension": [
            {
                "id": "intro",
                "timestamp": "00:00-00:15",
                "description": "Intro | 前奏",
                "lyrics": "la la | 啦啦",
                "keywords": {"BPM": "120"},
            },
            {
                "id": "verse",
                "timestamp": "00:15-00:45",
                "description": "Verse | 主歌",
                "lyrics": "hello | 你好",
                "highlights": {
                    "Hook": "Yes | 是",
                    "High-Quality Timbre/Vocal Texture": "Great | 很好",
                },
            },
        ],
    }
