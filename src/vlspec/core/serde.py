"""
JSON serialization helpers for specification documents.

The builders never serialize; these helpers exist for the CLI and the fluent
builder's ``to_json``. Zero-IO, stdlib only.

Notes:
    - Canonical JSON: sort_keys=True, separators=(",", ":"), ensure_ascii=False.
      Use it when a byte-stable form is needed (diffs, hashing, caching).
    - Pretty JSON keeps insertion order, so keys come out in the order they were set.
"""

from __future__ import annotations

import json
from typing import Any

from .typing import Document

__all__ = [
    "json_loads",
    "json_dumps_canonical",
    "json_dumps_pretty",
    "load_document",
]


def json_dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Examples:
        >>> json_dumps_canonical({"b": 1, "a": {"d": 2, "c": 3}})
        '{"a":{"c":3,"d":2},"b":1}'
    """
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def json_dumps_pretty(obj: Any, indent: int | None = 2) -> str:
    """Serialize preserving key order, indented by `indent` spaces (None for a single line)."""
    return json.dumps(obj, indent=indent, ensure_ascii=False)


def json_loads(s: str) -> Any:
    """Deserialize a JSON string using the stdlib json module (no custom hooks)."""
    return json.loads(s)


def load_document(s: str) -> Document:
    """
    Parse a JSON string that must hold an object at the top level.

    Raises:
        ValueError: If the text is not valid JSON or the top level is not an object.
    """
    obj = json_loads(s)
    if not isinstance(obj, dict):
        raise ValueError(f"specification must be a JSON object, got {type(obj).__name__}")
    return obj
