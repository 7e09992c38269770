"""
Defaults and fixed document paths for cell and facet configuration.

Notes:
    - Cell defaults mirror the Vega-Lite cell config defaults (200 x 200, unclipped).
    - Paths are dotted addresses consumed by vlspec.core.document.

References:
    - http://vega.github.io/vega-lite/docs/config.html#cell-config
    - http://vega.github.io/vega-lite/docs/config.html#facet-config
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_CELL_WIDTH",
    "DEFAULT_CELL_HEIGHT",
    "DEFAULT_CELL_CLIP",
    "CELL_PATH",
    "FACET_CELL_PATH",
    "FACET_GRID_PATH",
    "VEGA_LITE_SCHEMA_URL",
]

DEFAULT_CELL_WIDTH: int = 200
DEFAULT_CELL_HEIGHT: int = 200
DEFAULT_CELL_CLIP: bool = False

CELL_PATH: str = "config.cell"
FACET_CELL_PATH: str = "config.facet.cell"
FACET_GRID_PATH: str = "config.facet.grid"

# Cell config was folded into view config after Vega-Lite v1.
VEGA_LITE_SCHEMA_URL: str = "https://vega.github.io/schema/vega-lite/v1.json"
