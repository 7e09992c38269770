from __future__ import annotations

import copy
from decimal import Decimal

import pytest

from vlspec.cell import configure_cell, configure_facet_grid, facet_cell, set_cell_size
from vlspec.core.errors import DocumentStructureError


def base_doc() -> dict:
    return {
        "$schema": "https://vega.github.io/schema/vega-lite/v1.json",
        "mark": "point",
        "encoding": {"x": {"field": "a", "type": "quantitative"}},
        "config": {"axis": {"grid": True}},
    }


# 1) configure_cell writes exactly the supplied keys at the selected path


def test_defaults_only() -> None:
    doc = configure_cell({})
    assert doc == {"config": {"cell": {"width": 200, "height": 200, "clip": False}}}


def test_returns_same_document_and_touches_nothing_else() -> None:
    doc = base_doc()
    before = copy.deepcopy(doc)
    out = configure_cell(doc, width=300, height=150, fill="#eee", stroke_dash=[4, 2])
    assert out is doc
    assert doc["config"]["cell"] == {
        "width": 300,
        "height": 150,
        "clip": False,
        "fill": "#eee",
        "strokeDash": [4, 2],
    }
    del doc["config"]["cell"]
    assert doc == before


def test_none_omits_defaults() -> None:
    doc = configure_cell({}, width=None, height=None, clip=None, stroke="black")
    assert doc["config"]["cell"] == {"stroke": "black"}


def test_all_parameters_camel_cased() -> None:
    doc = configure_cell(
        {},
        width=1,
        height=2,
        clip=True,
        fill="red",
        fill_opacity=0.5,
        stroke="blue",
        stroke_opacity=0.25,
        stroke_width=3,
        stroke_dash=[5, 1],
        stroke_dash_offset=2,
    )
    assert doc["config"]["cell"] == {
        "width": 1,
        "height": 2,
        "clip": True,
        "fill": "red",
        "fillOpacity": 0.5,
        "stroke": "blue",
        "strokeOpacity": 0.25,
        "strokeWidth": 3,
        "strokeDash": [5, 1],
        "strokeDashOffset": 2,
    }


def test_facet_flag_selects_facet_path() -> None:
    doc = configure_cell(base_doc(), fill="blue", facet=True)
    assert doc["config"]["facet"]["cell"] == {
        "width": 200,
        "height": 200,
        "clip": False,
        "fill": "blue",
    }
    assert "cell" not in doc["config"]


def test_out_of_range_values_pass_through() -> None:
    doc = configure_cell({}, fill_opacity=3.0, stroke_opacity=-1)
    assert doc["config"]["cell"]["fillOpacity"] == 3.0
    assert doc["config"]["cell"]["strokeOpacity"] == -1


def test_cell_values_stored_exactly_as_given() -> None:
    dash = (4, 2)
    half = Decimal("0.5")
    doc = configure_cell({}, width="300", height=True, clip="no", fill_opacity=half, stroke_dash=dash)
    cell = doc["config"]["cell"]
    assert cell == {"width": "300", "height": True, "clip": "no", "fillOpacity": half, "strokeDash": dash}
    assert cell["height"] is True
    assert cell["strokeDash"] is dash
    assert type(cell["fillOpacity"]) is Decimal


def test_cell_keeps_numpy_values() -> None:
    np = pytest.importorskip("numpy")
    width = np.int64(300)
    dash = np.array([4, 2])
    cell = configure_cell({}, width=width, stroke_dash=dash)["config"]["cell"]
    assert type(cell["width"]) is np.int64
    assert cell["strokeDash"] is dash
    assert cell["strokeDash"].dtype == dash.dtype


def test_grid_values_stored_exactly_as_given() -> None:
    offset = Decimal("1.5")
    grid = configure_facet_grid({}, grid_color=0xCCCCCC, grid_opacity="0.4", grid_offset=offset)
    grid = grid["config"]["facet"]["grid"]
    assert grid == {"gridColor": 0xCCCCCC, "gridOpacity": "0.4", "gridOffset": offset}
    assert type(grid["gridOffset"]) is Decimal


def test_grid_keeps_numpy_values() -> None:
    np = pytest.importorskip("numpy")
    opacity = np.float32(0.25)
    grid = configure_facet_grid({}, grid_opacity=opacity, grid_offset=False)["config"]["facet"]["grid"]
    assert type(grid["gridOpacity"]) is np.float32
    assert grid["gridOffset"] is False


# 2) Overwrite law and idempotence


def test_second_call_overwrites_whole_cell_mapping() -> None:
    doc = configure_cell({}, fill="red")
    configure_cell(doc, width=50, height=None, clip=None)
    assert doc["config"]["cell"] == {"width": 50}


def test_repeated_identical_call_is_idempotent() -> None:
    once = configure_cell({}, width=120, stroke="gray", stroke_width=2)
    twice = configure_cell(configure_cell({}, width=120, stroke="gray", stroke_width=2),
                           width=120, stroke="gray", stroke_width=2)
    assert once == twice


def test_set_cell_size_discards_previous_styling() -> None:
    doc = configure_cell({}, fill="red", stroke="black", stroke_width=4)
    set_cell_size(doc, 300, 150)
    assert doc["config"]["cell"] == {"width": 300, "height": 150, "clip": False}


def test_set_cell_size_equivalent_to_configure_cell() -> None:
    assert set_cell_size({}, 300, 150) == configure_cell({}, width=300, height=150)
    assert set_cell_size({}, facet=True) == configure_cell({}, facet=True)


def test_facet_cell_equivalent_to_configure_cell_facet() -> None:
    assert facet_cell({}, fill="blue") == configure_cell({}, fill="blue", facet=True)
    assert facet_cell(base_doc(), width=10, stroke_dash=[1, 1]) == configure_cell(
        base_doc(), width=10, stroke_dash=[1, 1], facet=True
    )


def test_facet_cell_forwards_positional_arguments() -> None:
    assert facet_cell({}, 300, 150) == configure_cell({}, 300, 150, facet=True)
    assert facet_cell({}, 10, None, True, "red")["config"]["facet"]["cell"] == {
        "width": 10,
        "clip": True,
        "fill": "red",
    }


def test_facet_cell_rejects_explicit_facet() -> None:
    with pytest.raises(TypeError):
        facet_cell({}, facet=False)


def test_facet_and_plain_cells_are_independent() -> None:
    doc = configure_cell({}, fill="red")
    facet_cell(doc, fill="blue")
    set_cell_size(doc, 10, 20)
    assert doc["config"]["cell"] == {"width": 10, "height": 20, "clip": False}
    assert doc["config"]["facet"]["cell"]["fill"] == "blue"


# 3) Facet grid merge law


def test_grid_merges_field_by_field() -> None:
    doc = configure_facet_grid({}, grid_color="gray")
    configure_facet_grid(doc, grid_opacity=0.5)
    assert doc["config"]["facet"]["grid"] == {"gridColor": "gray", "gridOpacity": 0.5}


def test_grid_overwrites_only_supplied_leaf() -> None:
    doc = configure_facet_grid({}, grid_color="gray", grid_opacity=0.5, grid_offset=2)
    configure_facet_grid(doc, grid_color="black")
    assert doc["config"]["facet"]["grid"] == {
        "gridColor": "black",
        "gridOpacity": 0.5,
        "gridOffset": 2,
    }


def test_grid_keeps_unknown_siblings_and_facet_cell() -> None:
    doc = {"config": {"facet": {"cell": {"fill": "x"}, "grid": {"custom": 1}}}}
    configure_facet_grid(doc, grid_offset=3)
    assert doc == {"config": {"facet": {"cell": {"fill": "x"}, "grid": {"custom": 1, "gridOffset": 3}}}}


def test_grid_on_empty_document_creates_nesting() -> None:
    doc: dict = {}
    out = configure_facet_grid(doc, grid_color="gray")
    assert out is doc
    assert doc == {"config": {"facet": {"grid": {"gridColor": "gray"}}}}


def test_grid_with_nothing_supplied_leaves_document_untouched() -> None:
    doc = base_doc()
    before = copy.deepcopy(doc)
    configure_facet_grid(doc)
    assert doc == before


def test_cell_overwrite_does_not_disturb_facet_grid() -> None:
    doc = configure_facet_grid({}, grid_color="gray")
    facet_cell(doc, fill="blue")
    facet_cell(doc, stroke="red")
    assert doc["config"]["facet"]["grid"] == {"gridColor": "gray"}
    assert doc["config"]["facet"]["cell"] == {
        "width": 200,
        "height": 200,
        "clip": False,
        "stroke": "red",
    }


# 4) Chaining and malformed parents


def test_chaining_applies_in_order() -> None:
    doc = configure_facet_grid(
        facet_cell(set_cell_size(base_doc(), 300, 200), stroke="gray"),
        grid_color="#ccc",
    )
    assert doc["config"]["cell"] == {"width": 300, "height": 200, "clip": False}
    assert doc["config"]["facet"] == {
        "cell": {"width": 200, "height": 200, "clip": False, "stroke": "gray"},
        "grid": {"gridColor": "#ccc"},
    }
    assert doc["config"]["axis"] == {"grid": True}


def test_non_mapping_parent_raises() -> None:
    with pytest.raises(DocumentStructureError):
        configure_cell({"config": "nope"})
    with pytest.raises(DocumentStructureError):
        configure_facet_grid({"config": {"facet": {"grid": [1, 2]}}}, grid_color="gray")
