"""Translation extractor: bilingual document -> ``{path key: translation}``.

Walks every string leaf (``LeafMode.STRINGS``) and isolates the translated
half of ``"source | translation"`` values.  This is deliberately not the
all-scalar flattener used by ``StrictComparator``: numbers, booleans and
nulls never appear in a translation map.
"""

from __future__ import annotations

from typing import Any

from bilingual_json_diff.text.bilingual import split_bilingual
from bilingual_json_diff.tree.walker import DEFAULT_MAX_NODES, LeafMode, TreeWalker

__all__ = ["TranslationMap", "build_translation_map"]

TranslationMap = dict[str, str]


def build_translation_map(
    document: Any,
    *,
    require_delimiter: bool = False,
    max_nodes: int = DEFAULT_MAX_NODES,
) -> TranslationMap:
    """Build the translation map of ``document``.

    For each string leaf the value is split on ``|``.  When a delimiter is
    present, the translation is everything after the first ``|`` (further
    pipes kept), trimmed.  When there is none:

    - ``require_delimiter=False`` (default): the leaf is taken to be plain
      translated text and contributes its trimmed value.
    - ``require_delimiter=True``: the leaf contributes nothing.

    Args:
        document:          Parsed translation document.
        require_delimiter: Only accept bilingual-encoded leaves.
        max_nodes:         Traversal node ceiling.

    Returns:
        Mapping of canonical path key to translated text, in document order.

    Raises:
        ResourceExceededError: If the document exceeds ``max_nodes``.
    """
    walker = TreeWalker(LeafMode.STRINGS, max_nodes)
    translations: TranslationMap = {}
    for leaf in walker.walk(document):
        source, translation = split_bilingual(leaf.value)
        if translation is None:
            if require_delimiter:
                continue
            translation = source
        translations[leaf.key] = translation
    return translations
