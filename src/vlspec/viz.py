"""
Bridge from a specification's cell configuration to altair charts.

Vega-Lite folded ``config.cell`` into ``config.view`` after v1: the cell size became
``continuousWidth``/``continuousHeight`` and the styling keys kept their names. This
module translates a document's cell mapping so it can be applied to a modern altair
chart with ``configure_view``.

Notes
- Read-only with respect to the document.
- ``config.facet.grid`` has no view-config counterpart; its keys are skipped (logged at DEBUG).

Examples:
    >>> from vlspec.viz import view_config
    >>> view_config({"config": {"cell": {"width": 300, "fill": "#eee"}}})
    {'continuousWidth': 300, 'fill': '#eee'}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import altair as alt

from .core.constants import CELL_PATH, FACET_CELL_PATH, FACET_GRID_PATH
from .core.document import get_path
from .core.typing import Document

__all__ = [
    "view_config",
    "apply_to_chart",
]

logger = logging.getLogger(__name__)

# Cell keys renamed in view config; anything else carries over unchanged.
_VIEW_KEYS: dict[str, str] = {
    "width": "continuousWidth",
    "height": "continuousHeight",
}


def view_config(doc: Document, facet: bool = False) -> dict[str, Any]:
    """
    Translate the cell mapping of `doc` into ``configure_view`` keyword arguments.

    Args:
        doc (Document): Specification to read.
        facet (bool): Read ``config.facet.cell`` instead of ``config.cell``.

    Returns:
        dict[str, Any]: View-config keywords; empty when no cell mapping is present.
    """
    cell = get_path(doc, FACET_CELL_PATH if facet else CELL_PATH)
    if not isinstance(cell, Mapping):
        return {}
    return {_VIEW_KEYS.get(k, k): v for k, v in cell.items()}


def apply_to_chart(chart: alt.TopLevelMixin, doc: Document, facet: bool = False) -> alt.TopLevelMixin:
    """
    Return `chart` configured with the cell settings of `doc`.

    The chart is returned unchanged when the document has no cell mapping at the
    selected path.
    """
    grid = get_path(doc, FACET_GRID_PATH)
    if isinstance(grid, Mapping) and grid:
        logger.debug("skipping %s keys %s: no view-config equivalent", FACET_GRID_PATH, list(grid))
    kwargs = view_config(doc, facet=facet)
    if not kwargs:
        return chart
    return chart.configure_view(**kwargs)
