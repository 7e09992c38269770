"""
Fluent builder that owns a specification document.

`VegaLite` wraps the functions in vlspec.cell so a specification can be assembled
as one chain. The builder holds the only reference it hands out through `spec`;
callers that need an independent snapshot should use `to_dict`.

Examples:
    >>> from vlspec.builder import VegaLite
    >>> vl = VegaLite().cell_size(300, 200).grid_facet(grid_color="gray")
    >>> vl.spec["config"]["cell"]
    {'width': 300, 'height': 200, 'clip': False}
"""

from __future__ import annotations

import copy
from typing import Any

from . import cell
from .config import SpecSettings
from .core.constants import DEFAULT_CELL_HEIGHT, DEFAULT_CELL_WIDTH
from .core.serde import json_dumps_canonical, json_dumps_pretty
from .core.typing import Document, Number

__all__ = ["VegaLite"]

_UNSET: Any = object()


class VegaLite:
    """
    Chainable wrapper around a specification document.

    Args:
        spec (Document | None): Existing document to take over (not copied). When None a new
            document is seeded with ``{"$schema": settings.schema_url}``.
        settings (SpecSettings | None): Output settings; defaults to ``SpecSettings()``.
    """

    def __init__(self, spec: Document | None = None, *, settings: SpecSettings | None = None) -> None:
        self.settings = settings or SpecSettings()
        self._spec: Document = spec if spec is not None else {"$schema": self.settings.schema_url}

    def __repr__(self) -> str:
        return f"VegaLite(keys={list(self._spec)!r})"

    @property
    def spec(self) -> Document:
        return self._spec

    def configure_cell(self, **kwargs: Any) -> VegaLite:
        """See `vlspec.cell.configure_cell`."""
        cell.configure_cell(self._spec, **kwargs)
        return self

    def cell_size(
        self,
        width: Number | None = DEFAULT_CELL_WIDTH,
        height: Number | None = DEFAULT_CELL_HEIGHT,
        facet: bool = False,
    ) -> VegaLite:
        """See `vlspec.cell.set_cell_size`."""
        cell.set_cell_size(self._spec, width, height, facet=facet)
        return self

    def facet_cell(self, *args: Any, **kwargs: Any) -> VegaLite:
        """See `vlspec.cell.facet_cell`."""
        cell.facet_cell(self._spec, *args, **kwargs)
        return self

    def grid_facet(
        self,
        grid_color: str | None = None,
        grid_opacity: Number | None = None,
        grid_offset: Number | None = None,
    ) -> VegaLite:
        """See `vlspec.cell.configure_facet_grid`."""
        cell.configure_facet_grid(
            self._spec, grid_color=grid_color, grid_opacity=grid_opacity, grid_offset=grid_offset
        )
        return self

    def to_dict(self) -> Document:
        """Deep copy of the owned document."""
        return copy.deepcopy(self._spec)

    def to_json(self, indent: int | None = _UNSET) -> str:
        """
        Serialize the document.

        Uses canonical JSON when ``settings.canonical`` is set; otherwise pretty JSON with
        `indent` (falling back to ``settings.indent`` when not given).
        """
        if self.settings.canonical:
            return json_dumps_canonical(self._spec)
        if indent is _UNSET:
            indent = self.settings.indent
        return json_dumps_pretty(self._spec, indent=indent)
