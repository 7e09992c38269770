"""
Core package for vlspec contracts (document paths, typed fragments, errors, serde).

## Contracts
- Typing: `Document`, `DocPath`, number aliases.
- Constants: cell defaults and the fixed config paths builders write to.
- Document: dotted-path get/ensure/set with auto-created intermediates.
- Schema: pydantic models for the cell and facet-grid fragments.
- Serde: canonical and pretty JSON helpers.
- Errors: `SpecError`, `DocumentStructureError`.

## Notes
- Zero-IO policy: stdlib + pydantic only.
- Builders in `vlspec.cell` are the only writers; everything here is a building block.

## Examples
```python
from vlspec.core.document import set_path
from vlspec.core.schema import CellConfig
doc = {}
set_path(doc, "config.cell", CellConfig.fragment(width=300, height=150))
doc  # {'config': {'cell': {'width': 300, 'height': 150}}}
```
"""
