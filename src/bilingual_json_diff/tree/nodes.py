"""Core value types for walking JSON documents.

Provides:
- JsonKind: StrEnum classifying a JSON value (plus the MISSING sentinel).
- MISSING: sentinel returned when a path does not resolve.  It is distinct
  from a present JSON ``null`` (Python ``None``).
- Key / Index: the two path segment variants.
- Leaf: a (path, canonical key, value) triple emitted by TreeWalker.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any, Final

__all__ = [
    "MISSING",
    "Index",
    "JsonKind",
    "Key",
    "Leaf",
    "Path",
    "PathSegment",
    "kind_of",
]


class _MissingType:
    """Type of the MISSING sentinel.  Only one instance ever exists."""

    __slots__ = ()
    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple[type[_MissingType], tuple[()]]:
        return (_MissingType, ())


MISSING: Final = _MissingType()


class JsonKind(StrEnum):
    """Enumeration of JSON value kinds.

    StrEnum values are the lowercased member names:
    - STRING  -> "string"
    - NUMBER  -> "number"  : int or float (never bool)
    - BOOLEAN -> "boolean"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    - NULL    -> "null"
    - MISSING -> "missing" : the path did not resolve
    """

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    ARRAY = auto()
    OBJECT = auto()
    NULL = auto()
    MISSING = auto()


def kind_of(value: Any) -> JsonKind:
    """Classify a JSON value.

    Args:
        value: A parsed JSON value, or ``MISSING``.

    Returns:
        The matching ``JsonKind``.

    Raises:
        TypeError: If value is not a JSON type.
    """
    # bool MUST be checked before int: bool subclasses int in Python
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, list):
        return JsonKind.ARRAY
    if value is None:
        return JsonKind.NULL
    if value is MISSING:
        return JsonKind.MISSING
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


@dataclass(frozen=True, slots=True)
class Key:
    """Object member segment."""

    name: str


@dataclass(frozen=True, slots=True)
class Index:
    """Array element segment (non-negative)."""

    index: int


PathSegment = Key | Index
Path = tuple[PathSegment, ...]


@dataclass(frozen=True, slots=True)
class Leaf:
    """A leaf emitted by TreeWalker.

    Attributes:
        path:  Segments from the document root to the leaf.
        key:   Canonical path key of ``path``.
        value: The leaf value, untouched.
    """

    path: Path
    key: str
    value: Any
