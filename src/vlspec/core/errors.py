"""
Core exception types raised while writing into a specification document.

Provides typed exceptions for document-shape failures:
- SpecError as the base for anything wrong with the document tree itself.
- DocumentStructureError when a write path runs through a non-mapping value.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Missing intermediate mappings are created on write and never reported.
    - Leaf values are stored as given; the typed fragments in vlspec.core.schema
      can check them on request (pydantic.ValidationError), the builders never do.

Examples:
    Catch a write through a scalar intermediate.

    >>> from vlspec.core.document import set_path
    >>> from vlspec.core.errors import DocumentStructureError
    >>> doc = {"config": {"facet": "oops"}}
    >>> try:
    ...     set_path(doc, "config.facet.grid.gridColor", "gray")
    ... except DocumentStructureError as e:
    ...     msg = str(e)
    >>> "config.facet" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "SpecError",
    "DocumentStructureError",
]


class SpecError(ValueError):
    """Document-level failure (shape of the specification tree)."""


class DocumentStructureError(SpecError):
    """
    An intermediate on a write path exists but is not a mapping.

    Attributes:
        path (str): Dotted path of the offending intermediate.
        found (type): Type of the value found there.
    """

    def __init__(self, path: str, found: type) -> None:
        self.path = path
        self.found = found
        super().__init__(f"expected a mapping at '{path}', found {found.__name__}")
