# ruff: noqa:S101, PLR2004
import warnings
from datetime import datetime

import pyarrow as pa
import pytest
from helpers import make_cell

from xlcell import MalformedNumeric, PerformanceWarning, StreamingCell, cell_series


def test_empty_series() -> None:
    s = cell_series()
    assert len(s) == 0
    assert len(s.to_arrow()) == 0
    assert s.to_arrow(0, 3).null_count == 3


def test_numeric_column_with_gaps() -> None:
    s = cell_series()
    for row, v in ((1, "1.5"), (2, "2"), (4, "-3")):
        s.add(make_cell("n", v, row=row))

    arr = s.to_arrow()
    assert arr.type == pa.float64()
    assert arr.to_pylist() == [None, 1.5, 2.0, None, -3.0]
    assert s.to_arrow(1, 2).to_pylist() == [1.5, 2.0]
    assert s.to_arrow(3, 4).to_pylist() == [None, -3.0, None, None]


def test_rows_are_added_once() -> None:
    s = cell_series()
    assert s.add(make_cell("n", "1", row=0)) == 0
    assert s.add(make_cell("n", "2", row=0)) == 0
    assert s.to_arrow().to_pylist() == [1.0]


def test_values_are_copied_out_of_reused_cell() -> None:
    s = cell_series()
    c = StreamingCell(None, 0, 0)
    for row, text in enumerate(("a", "b", "c")):
        c.reset(0, row)
        c.set_type("s")
        c.set_content_supplier(lambda text=text: text)
        c.set_raw_contents(str(row))
        s.add(c)

    arr = s.to_arrow()
    assert arr.type == pa.large_string()
    assert arr.to_pylist() == ["a", "b", "c"]


def test_boolean_error_and_blank() -> None:
    s = cell_series()
    s.add(make_cell("b", "1", row=0))
    s.add(make_cell("b", "0", row=1))
    s.add(make_cell(None, None, row=2))
    assert s.to_arrow().to_pylist() == [True, False, None]

    e = cell_series()
    e.add(make_cell("e", "#N/A", row=0))
    e.add(make_cell("str", "text", row=1))
    assert e.to_arrow().to_pylist() == ["#N/A", "text"]


def test_formula_cells_use_cached_results() -> None:
    s = cell_series()
    s.add(make_cell("n", "2.5", formula="1.5+1", row=0))
    s.add(make_cell("n", "4.25", row=1))
    s.add(make_cell("b", "1", formula="TRUE()", row=2))

    assert s.to_arrow().to_pylist() == ["2.5", "4.25", "true"]


def test_temporal_by_number_format() -> None:
    s = cell_series()
    for row, (v, fmt) in enumerate((("45000", "yyyy-mm-dd"), ("45000.5", "dd.mm.yyyy hh:mm"))):
        c = make_cell("n", v, row=row)
        c.set_numeric_format(fmt)
        s.add(c)

    arr = s.to_arrow()
    assert arr.type == pa.timestamp("ms")
    assert arr.to_pylist() == [datetime(2023, 3, 15), datetime(2023, 3, 15, 12)]


def test_temporal_by_builtin_index_and_1904() -> None:
    s = cell_series(use_1904_dates=True)
    c = make_cell("n", "0", use_1904_dates=True)
    c.set_numeric_format_index(0x0E)
    s.add(c)
    assert s.to_arrow().to_pylist() == [datetime(1904, 1, 1)]


def test_forced_temporal_and_invalid_serials() -> None:
    s = cell_series(temporal=True)
    s.add(make_cell("n", "61", row=0))
    s.add(make_cell("n", "-1", row=1))
    assert s.to_arrow().to_pylist() == [datetime(1900, 3, 1), None]

    n = cell_series(temporal=False)
    c = make_cell("n", "61")
    c.set_numeric_format("yyyy-mm-dd")
    n.add(c)
    assert n.to_arrow().type == pa.float64()


def test_mixed_column_rendered_as_strings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("xlcell.core.PERFORMANCE_WARNINGS", True)
    s = cell_series()
    s.add(make_cell("s", "Header", "0", row=0))
    s.add(make_cell("n", "1.5", row=1))
    s.add(make_cell("n", "2.5", row=3))

    with pytest.warns(PerformanceWarning):
        arr = s.to_arrow()
    assert arr.type == pa.large_string()
    assert arr.to_pylist() == ["Header", "1.5", None, "2.5"]


def test_mixed_column_is_quiet_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("xlcell.core.PERFORMANCE_WARNINGS", False)
    s = cell_series()
    s.add(make_cell("s", "Header", "0", row=0))
    s.add(make_cell("n", "1", row=1))

    with warnings.catch_warnings():
        warnings.simplefilter("error", PerformanceWarning)
        assert s.to_utf8(0, 1).to_pylist() == ["Header"]


def test_malformed_numeric_propagates() -> None:
    s = cell_series()
    s.add(make_cell("n", "1", row=0))
    with pytest.raises(MalformedNumeric):
        s.add(make_cell("n", "n/a", row=3))

    assert len(s) == 1

    s.add(make_cell("n", "4", row=3))
    arr = s.to_arrow()
    assert len(arr) == len(s) == 4
    assert arr.to_pylist() == [1.0, None, None, 4.0]
