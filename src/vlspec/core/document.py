"""
Dotted-path access into a specification document.

Every builder in vlspec writes through these helpers so that the "create the
nested structure if absent" policy lives in one place.

Notes:
    - Paths are split on "." only; keys containing dots cannot be addressed.
    - ensure_mapping/set_path create missing intermediates as empty dicts and
      raise DocumentStructureError when an intermediate holds a non-mapping.
    - Zero-IO; stdlib only.

Examples:
    >>> from vlspec.core.document import get_path, set_path
    >>> doc = {}
    >>> _ = set_path(doc, "config.facet.grid.gridColor", "gray")
    >>> doc
    {'config': {'facet': {'grid': {'gridColor': 'gray'}}}}
    >>> get_path(doc, "config.facet.grid.gridOpacity", 1.0)
    1.0
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from .errors import DocumentStructureError
from .typing import DocPath, Document

__all__ = [
    "split_path",
    "get_path",
    "ensure_mapping",
    "set_path",
]

logger = logging.getLogger(__name__)

_MISSING = object()


def split_path(path: DocPath) -> list[str]:
    """
    Split a dotted path into its keys.

    Raises:
        ValueError: If the path is empty or has an empty segment (e.g. "config..cell").
    """
    parts = path.split(".")
    if not path or any(p == "" for p in parts):
        raise ValueError(f"invalid document path: {path!r}")
    return parts


def get_path(doc: Document, path: DocPath, default: Any = None) -> Any:
    """
    Read the value at `path`, returning `default` when any key along the way is absent.

    A non-mapping intermediate also yields `default`; reads never raise for shape.
    """
    node: Any = doc
    for key in split_path(path):
        if not isinstance(node, MutableMapping):
            return default
        node = node.get(key, _MISSING)
        if node is _MISSING:
            return default
    return node


def ensure_mapping(doc: Document, path: DocPath) -> MutableMapping[str, Any]:
    """
    Return the mapping at `path`, creating empty dicts for missing (or null) keys.

    Args:
        doc (Document): Root document, mutated in place when keys are created.
        path (DocPath): Dotted path of the mapping to return.

    Returns:
        MutableMapping[str, Any]: The (possibly new) mapping stored at `path`.

    Raises:
        DocumentStructureError: If `path` or one of its prefixes holds a non-mapping value.
    """
    node: MutableMapping[str, Any] = doc
    walked: list[str] = []
    for key in split_path(path):
        walked.append(key)
        child = node.get(key, _MISSING)
        if child is _MISSING or child is None:
            child = {}
            node[key] = child
            logger.debug("created mapping at %s", ".".join(walked))
        elif not isinstance(child, MutableMapping):
            raise DocumentStructureError(".".join(walked), type(child))
        node = child
    return node


def set_path(doc: Document, path: DocPath, value: Any) -> Document:
    """
    Assign `value` at `path`, replacing whatever was stored there.

    Intermediates are created as needed. Returns `doc` for chaining.

    Raises:
        DocumentStructureError: If an intermediate holds a non-mapping value.
    """
    *parents, leaf = split_path(path)
    target = ensure_mapping(doc, ".".join(parents)) if parents else doc
    target[leaf] = value
    logger.debug("set %s", path)
    return doc
