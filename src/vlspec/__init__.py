"""
vlspec: Cell and facet configuration builders for Vega-Lite specifications.

## Responsibilities
- Set ``config.cell`` / ``config.facet.cell`` (size, clipping, fill and stroke styling).
- Merge inter-facet grid styling into ``config.facet.grid``.
- Keep each builder a pass-through: None means "do not set", values are not range-checked.

## Public API
- cell: `configure_cell`, `set_cell_size`, `facet_cell`, `configure_facet_grid`.
- builder: `VegaLite`, a fluent owner of one document.
- config: `SpecSettings` (env > TOML > defaults).
- viz: apply a document's cell config to an altair chart.
- cli: `vlspec` command line entry point.

## Examples
```python
from vlspec import VegaLite, configure_cell, facet_cell
doc = configure_cell({}, width=300, height=150, fill="#f7f7f7", stroke_dash=[4, 2])
doc = facet_cell(doc, stroke="gray")
VegaLite().cell_size(300, 200).grid_facet(grid_color="gray", grid_opacity=0.5).to_json()
```
"""

from __future__ import annotations

from .builder import VegaLite
from .cell import configure_cell, configure_facet_grid, facet_cell, set_cell_size
from .config import SpecSettings

__version__ = "0.1.0"

__all__ = [
    "VegaLite",
    "SpecSettings",
    "configure_cell",
    "set_cell_size",
    "facet_cell",
    "configure_facet_grid",
]
