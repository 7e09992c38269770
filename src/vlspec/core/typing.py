"""
Lightweight typing aliases used across builders and schemas.

Notes:
    - Intended for annotations only; no runtime logic.
    - Document is kept broad: leaves may be str, int, float, bool, or a list of numbers,
      and any key may hold a nested mapping.

Examples:
    >>> from vlspec.core.typing import Document, DocPath
    >>> def empty() -> Document:
    ...     return {}
    >>> p: DocPath = "config.cell"
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeAlias

__all__ = [
    "Document",
    "DocPath",
    "Number",
    "NumberSeq",
]

# Insertion-ordered JSON-like tree representing one visualization specification.
Document: TypeAlias = dict[str, Any]

# Dotted address into a Document, e.g. "config.facet.grid.gridColor".
DocPath: TypeAlias = str

Number: TypeAlias = int | float
NumberSeq: TypeAlias = Sequence[int | float]
