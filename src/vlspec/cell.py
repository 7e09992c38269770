"""
Cell and facet-grid configuration builders.

At its core a Vega-Lite specification describes a single plot. Adding a facet
channel turns it into a trellis plot made of many plots; each plot, single or
trellis, is a *cell*. These builders set ``config.cell.*``, ``config.facet.cell.*``
and ``config.facet.grid.*`` on a specification document.

Write policies
- Cell builders (`configure_cell`, `set_cell_size`, `facet_cell`) replace the whole
  cell mapping at their path. Fields set by an earlier call and not supplied again
  are gone afterwards.
- `configure_facet_grid` merges leaf by leaf. Fields it is not given are left alone.

Every builder skips parameters that are None, stores every other value exactly as
given (no coercion or checks), mutates the document in place, creates missing
intermediate mappings, and returns the same document so calls chain.

Examples:
    >>> from vlspec.cell import configure_cell, configure_facet_grid, set_cell_size
    >>> doc = set_cell_size({}, 300, 150)
    >>> doc["config"]["cell"]
    {'width': 300, 'height': 150, 'clip': False}
    >>> doc = configure_facet_grid(configure_facet_grid(doc, grid_color="gray"), grid_opacity=0.5)
    >>> doc["config"]["facet"]["grid"]
    {'gridColor': 'gray', 'gridOpacity': 0.5}

References:
    - http://vega.github.io/vega-lite/docs/config.html#cell-config
    - http://vega.github.io/vega-lite/docs/config.html#facet-config
"""

from __future__ import annotations

import logging
from typing import Any

from .core.constants import (
    CELL_PATH,
    DEFAULT_CELL_CLIP,
    DEFAULT_CELL_HEIGHT,
    DEFAULT_CELL_WIDTH,
    FACET_CELL_PATH,
    FACET_GRID_PATH,
)
from .core.document import ensure_mapping, set_path
from .core.schema import CellConfig, FacetGridConfig
from .core.typing import Document, Number, NumberSeq

__all__ = [
    "configure_cell",
    "set_cell_size",
    "facet_cell",
    "configure_facet_grid",
]

logger = logging.getLogger(__name__)


def configure_cell(
    doc: Document,
    width: Number | None = DEFAULT_CELL_WIDTH,
    height: Number | None = DEFAULT_CELL_HEIGHT,
    clip: bool | None = DEFAULT_CELL_CLIP,
    fill: str | None = None,
    fill_opacity: Number | None = None,
    stroke: str | None = None,
    stroke_opacity: Number | None = None,
    stroke_width: Number | None = None,
    stroke_dash: NumberSeq | None = None,
    stroke_dash_offset: Number | None = None,
    *,
    facet: bool = False,
) -> Document:
    """
    Replace the cell configuration of a specification.

    Args:
        doc (Document): Specification to update.
        width (int | float | None): Width of a plot with a continuous x-scale. Default 200.
        height (int | float | None): Height of a plot with a continuous y-scale. Default 200.
        clip (bool | None): Whether the view should be clipped. Default False.
        fill (str | None): Fill color.
        fill_opacity (int | float | None): 0.0-1.0, not checked.
        stroke (str | None): Stroke color.
        stroke_opacity (int | float | None): 0.0-1.0, not checked.
        stroke_width (int | float | None): Stroke width in pixels.
        stroke_dash (Sequence[int | float] | None): Alternating stroke and space lengths
            for dashed or dotted lines.
        stroke_dash_offset (int | float | None): Offset in pixels at which to begin the dash array.
        facet (bool): Write to ``config.facet.cell`` instead of ``config.cell``.

    Returns:
        Document: `doc`, with the cell mapping at the selected path rebuilt from the
        non-None arguments only.

    Raises:
        DocumentStructureError: If ``config`` (or ``config.facet``) holds a non-mapping.

    Notes:
        Passing None for width, height or clip omits them from the mapping.
        Every other value is stored exactly as given; nothing is coerced or checked.
    """
    cell = CellConfig.fragment(
        width=width,
        height=height,
        clip=clip,
        fill=fill,
        fill_opacity=fill_opacity,
        stroke=stroke,
        stroke_opacity=stroke_opacity,
        stroke_width=stroke_width,
        stroke_dash=stroke_dash,
        stroke_dash_offset=stroke_dash_offset,
    )
    path = FACET_CELL_PATH if facet else CELL_PATH
    logger.debug("writing %s with keys %s", path, list(cell))
    return set_path(doc, path, cell)


def set_cell_size(
    doc: Document,
    width: Number | None = DEFAULT_CELL_WIDTH,
    height: Number | None = DEFAULT_CELL_HEIGHT,
    facet: bool = False,
) -> Document:
    """
    Set the size of a single plot, or of each panel in a trellis plot.

    Shorthand for `configure_cell` with only width and height. Any fill or stroke
    styling previously set at the same path is dropped.
    """
    return configure_cell(doc, width=width, height=height, facet=facet)


def facet_cell(doc: Document, *args: Any, **kwargs: Any) -> Document:
    """Apply `configure_cell` to ``config.facet.cell``; positional and keyword arguments are forwarded as-is."""
    return configure_cell(doc, *args, **kwargs, facet=True)


def configure_facet_grid(
    doc: Document,
    grid_color: str | None = None,
    grid_opacity: Number | None = None,
    grid_offset: Number | None = None,
) -> Document:
    """
    Style the grid drawn between facets.

    Unlike the cell builders this merges: each non-None argument is written to its own
    leaf under ``config.facet.grid`` and every other leaf there is kept. With all
    arguments None the document is returned untouched.

    Args:
        doc (Document): Specification to update.
        grid_color (str | None): Color of the grid between facets.
        grid_opacity (int | float | None): 0.0-1.0, not checked.
        grid_offset (int | float | None): Offset for the grid between facets.

    Returns:
        Document: `doc`.

    Raises:
        DocumentStructureError: If an intermediate along ``config.facet.grid`` is not a mapping.
    """
    leaves = FacetGridConfig.fragment(
        grid_color=grid_color,
        grid_opacity=grid_opacity,
        grid_offset=grid_offset,
    )
    if not leaves:
        return doc
    grid = ensure_mapping(doc, FACET_GRID_PATH)
    for key, value in leaves.items():
        grid[key] = value
    logger.debug("merged %s into %s", list(leaves), FACET_GRID_PATH)
    return doc
