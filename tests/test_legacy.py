# ruff: noqa:S101, PLR2004
from datetime import datetime

import pytest
from helpers import make_cell

from xlcell import CellType, InvalidState, PoiCell, UnsupportedOperation, rich_text
from xlcell.legacy import UNSUPPORTED_METHODS


def test_getters_forward_to_cell() -> None:
    c = make_cell("n", "45000.5", col=2, row=9)
    c.set_cell_style("style")
    c.set_row("row")
    p = PoiCell(c)

    assert p.get_cell_type() is CellType.NUMERIC
    assert p.get_numeric_cell_value() == 45000.5
    assert p.get_string_cell_value() == "45000.5"
    assert p.get_date_cell_value() == datetime(2023, 3, 15, 12)
    assert p.get_local_date_time_cell_value() == datetime(2023, 3, 15, 12)
    assert (p.get_column_index(), p.get_row_index()) == (2, 9)
    assert p.get_row() == "row"
    assert p.get_cell_style() == "style"
    assert p.get_sheet() is None


def test_text_boolean_error_and_formula() -> None:
    assert PoiCell(make_cell("inlineStr", "x")).get_rich_string_cell_value() == rich_text("x")
    assert PoiCell(make_cell("b", "1")).get_boolean_cell_value() is True
    assert PoiCell(make_cell("e", "#NAME?")).get_error_cell_value() == 0x1D

    p = PoiCell(make_cell("n", "3", formula="SUM(C4:E4)"))
    assert p.get_cell_formula() == "SUM(C4:E4)"
    assert p.get_cached_formula_result_type() is CellType.NUMERIC

    with pytest.raises(InvalidState):
        PoiCell(make_cell("n", "3")).get_cell_formula()


@pytest.mark.parametrize("name", UNSUPPORTED_METHODS)
def test_mutators_are_unsupported(name: str) -> None:
    c = make_cell("n", "42.5", formula="40+2.5")
    before = (c.type, c.raw_contents, c.cell_formula, c.string_value, c.cell_style)

    with pytest.raises(UnsupportedOperation, match=name):
        getattr(PoiCell(c), name)("anything")

    assert (c.type, c.raw_contents, c.cell_formula, c.string_value, c.cell_style) == before


def test_mutator_without_arguments() -> None:
    with pytest.raises(UnsupportedOperation):
        PoiCell(make_cell()).set_blank()
    assert PoiCell.set_cell_value.__doc__ == "Not supported"
