"""Exception hierarchy for bilingual-json-diff.

Diagnostics never raise for well-formed JSON: discrepancies between documents
are reported as ``Diagnostic`` records.  Exceptions are reserved for inputs the
library refuses to process (oversized documents, malformed path segments).
"""

from __future__ import annotations

__all__ = ["BilingualDiffError", "InvalidPathError", "ResourceExceededError"]


class BilingualDiffError(Exception):
    """Base class for every error raised by this package."""


class ResourceExceededError(BilingualDiffError):
    """A traversal visited more nodes than its configured ceiling.

    Attributes:
        limit: The node ceiling that was exceeded.
    """

    def __init__(self, limit: int) -> None:
        super().__init__(f"Traversal aborted: more than {limit} nodes visited")
        self.limit = limit


class InvalidPathError(BilingualDiffError, ValueError):
    """A path segment cannot be encoded into a canonical path key."""
