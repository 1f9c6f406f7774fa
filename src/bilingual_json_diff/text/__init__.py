"""Text subpackage: string normalization and bilingual string helpers."""

from bilingual_json_diff.text.bilingual import (
    BILINGUAL_DELIMITER,
    join_bilingual,
    map_strings,
    source_document,
    source_text,
    split_bilingual,
    translation_document,
    translation_text,
)
from bilingual_json_diff.text.normalizer import (
    DEFAULT_SEPARATORS,
    TextNormalizer,
    compile_separator_pattern,
    default_normalizer,
    normalize,
    strip_han,
)

__all__ = [
    "BILINGUAL_DELIMITER",
    "DEFAULT_SEPARATORS",
    "TextNormalizer",
    "compile_separator_pattern",
    "default_normalizer",
    "join_bilingual",
    "map_strings",
    "normalize",
    "source_document",
    "source_text",
    "split_bilingual",
    "strip_han",
    "translation_document",
    "translation_text",
]
