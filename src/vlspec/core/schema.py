"""
Pydantic v2 models describing the document fragments written by the builders.

Each model is a typed view of one sub-mapping of the specification document. Field
names are the Python (lower_snake) parameter names; aliases are the camelCase keys
written into the document.

Responsibilities
- Own the name-to-key table of each fragment (``fill_opacity`` -> ``fillOpacity``).
- Build a fragment from builder arguments with `fragment`, which keeps every value
  exactly as given: no coercion, no kind or range checks.
- Describe the leaf kinds, so consumers that want checking can run
  ``CellConfig.model_validate(doc["config"]["cell"])`` on a finished document.

Notes
- The builders never instantiate the models; validation is left to consumers.
- Unknown names passed to `fragment` raise TypeError, like an unexpected keyword.

Examples:
    >>> from vlspec.core.schema import CellConfig
    >>> CellConfig.fragment(width="300", fill_opacity=None, stroke_dash=(4, 2))
    {'width': '300', 'strokeDash': (4, 2)}
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "CellConfig",
    "FacetGridConfig",
]


class _Fragment(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    @classmethod
    def fragment(cls, **values: Any) -> dict[str, Any]:
        """
        Map field names to document keys for every value that is not None, in field order.

        Values are stored unchanged (same object, same type).

        Raises:
            TypeError: If a name is not a field of the model.
        """
        unknown = sorted(set(values) - set(cls.model_fields))
        if unknown:
            raise TypeError(f"{cls.__name__} has no fields {unknown}")
        return {
            info.alias or name: values[name]
            for name, info in cls.model_fields.items()
            if values.get(name) is not None
        }


class CellConfig(_Fragment):
    """
    Cell (single plot panel) configuration, written to ``config.cell`` or ``config.facet.cell``.

    Attributes:
        width (int | float | None): Cell width for a continuous x-scale, in pixels.
        height (int | float | None): Cell height for a continuous y-scale, in pixels.
        clip (bool | None): Whether the view is clipped.
        fill (str | None): Fill color.
        fill_opacity (int | float | None): Fill opacity, nominally 0.0-1.0 (``fillOpacity``).
        stroke (str | None): Stroke color.
        stroke_opacity (int | float | None): Stroke opacity, nominally 0.0-1.0 (``strokeOpacity``).
        stroke_width (int | float | None): Stroke width in pixels (``strokeWidth``).
        stroke_dash (list[int | float] | None): Alternating dash and gap lengths (``strokeDash``).
        stroke_dash_offset (int | float | None): Offset into the dash array, in pixels
            (``strokeDashOffset``).

    Examples:
        >>> CellConfig.model_validate({"width": 300, "strokeDash": [4, 2]}).stroke_dash
        [4, 2]
    """

    width: int | float | None = None
    height: int | float | None = None
    clip: bool | None = None
    fill: str | None = None
    fill_opacity: int | float | None = Field(default=None, alias="fillOpacity")
    stroke: str | None = None
    stroke_opacity: int | float | None = Field(default=None, alias="strokeOpacity")
    stroke_width: int | float | None = Field(default=None, alias="strokeWidth")
    stroke_dash: list[int | float] | None = Field(default=None, alias="strokeDash")
    stroke_dash_offset: int | float | None = Field(default=None, alias="strokeDashOffset")


class FacetGridConfig(_Fragment):
    """
    Grid lines drawn between facets, merged leaf-by-leaf into ``config.facet.grid``.

    Attributes:
        grid_color (str | None): Grid color (``gridColor``).
        grid_opacity (int | float | None): Grid opacity, nominally 0.0-1.0 (``gridOpacity``).
        grid_offset (int | float | None): Grid offset in pixels (``gridOffset``).
    """

    grid_color: str | None = Field(default=None, alias="gridColor")
    grid_opacity: int | float | None = Field(default=None, alias="gridOpacity")
    grid_offset: int | float | None = Field(default=None, alias="gridOffset")
