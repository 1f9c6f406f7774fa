"""TreeWalker: iterative depth-first enumeration of JSON leaves.

The walker uses an explicit stack of ``(node, path)`` pairs rather than
recursion, so traversal depth is independent of the interpreter's recursion
limit.  Children are pushed in reverse so they are popped in document order:

- arrays in ascending index order;
- objects in the dict's own insertion order.

Two leaf contracts are supported (see ``LeafMode``):

- STRINGS: a leaf for every ``str`` value.  Used by the structural comparator
  and the translation extractor.
- SCALARS: a leaf for every scalar (str, number, bool, null).  Used by the
  flattening comparator that also checks value equality.

Empty arrays and objects contribute no leaf in either mode.

Every popped node counts towards ``max_nodes``; exceeding it raises
``ResourceExceededError`` instead of truncating the result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from bilingual_json_diff.errors import ResourceExceededError
from bilingual_json_diff.tree.nodes import Index, JsonKind, Key, Leaf, Path, kind_of
from bilingual_json_diff.tree.path import encode_path

__all__ = [
    "DEFAULT_MAX_NODES",
    "ROOT_FLAT_KEY",
    "LeafMode",
    "TreeWalker",
    "collect_string_paths",
    "flatten",
]

logger = logging.getLogger(__name__)

DEFAULT_MAX_NODES = 1_000_000

# Key used by flatten() when the document itself is a scalar.
ROOT_FLAT_KEY = "$"


class LeafMode(StrEnum):
    """Which values TreeWalker reports as leaves.

    - STRINGS -> "strings" : only ``str`` values
    - SCALARS -> "scalars" : every non-container value
    """

    STRINGS = auto()
    SCALARS = auto()


@dataclass(frozen=True, slots=True)
class TreeWalker:
    """Stack-based depth-first leaf enumerator.

    Attributes:
        mode:      Leaf contract, see ``LeafMode``.
        max_nodes: Maximum number of nodes (containers and leaves) to visit.

    Example::

        walker = TreeWalker(LeafMode.STRINGS)
        [leaf.key for leaf in walker.walk({"a": ["x", 1]})]
        # ['a[0]']
    """

    mode: LeafMode = LeafMode.STRINGS
    max_nodes: int = DEFAULT_MAX_NODES

    def walk(self, root: Any) -> Iterator[Leaf]:
        """Yield leaves of ``root`` in depth-first document order.

        Raises:
            ResourceExceededError: After more than ``max_nodes`` nodes.
            TypeError: If a non-JSON value is encountered.
        """
        stack: list[tuple[Any, Path]] = [(root, ())]
        visited = 0

        while stack:
            node, path = stack.pop()
            visited += 1
            if visited > self.max_nodes:
                logger.warning(
                    "Traversal aborted: node limit %d exceeded", self.max_nodes
                )
                raise ResourceExceededError(self.max_nodes)

            kind = kind_of(node)
            if kind is JsonKind.ARRAY:
                for index in range(len(node) - 1, -1, -1):
                    stack.append((node[index], (*path, Index(index))))
            elif kind is JsonKind.OBJECT:
                for name in reversed(node):
                    stack.append((node[name], (*path, Key(name))))
            elif kind is JsonKind.STRING or self.mode is LeafMode.SCALARS:
                yield Leaf(path=path, key=encode_path(path), value=node)


def collect_string_paths(root: Any, max_nodes: int = DEFAULT_MAX_NODES) -> list[str]:
    """Return the canonical keys of every string leaf, in document order."""
    walker = TreeWalker(LeafMode.STRINGS, max_nodes)
    return [leaf.key for leaf in walker.walk(root)]


def flatten(root: Any, max_nodes: int = DEFAULT_MAX_NODES) -> dict[str, Any]:
    """Flatten every scalar leaf into a ``{canonical key: value}`` dict.

    A scalar document flattens to ``{"$": value}``.  When two leaves share a
    canonical key (possible only with keys containing ``.`` or brackets) the
    later one wins.
    """
    walker = TreeWalker(LeafMode.SCALARS, max_nodes)
    return {leaf.key or ROOT_FLAT_KEY: leaf.value for leaf in walker.walk(root)}
