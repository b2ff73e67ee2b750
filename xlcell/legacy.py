# ruff: noqa:D102, D107
"""
POI-shaped facade over `StreamingCell`.

Getters forward to the cell; everything that would change the cell (or needs the whole workbook,
like comments, hyperlinks and array formula ranges) raises `UnsupportedOperation`.
"""

from __future__ import annotations

__all__ = ["UNSUPPORTED_METHODS", "PoiCell"]

from typing import TYPE_CHECKING

from .exceptions import UnsupportedOperation

if TYPE_CHECKING:
    from datetime import datetime
    from typing import Any, Callable, NoReturn

    from .cell import StreamingCell
    from .constants import CellType
    from .richtext import rich_text

UNSUPPORTED_METHODS = (
    "set_cell_type",
    "set_cell_value",
    "set_cell_formula",
    "set_cell_error_value",
    "set_blank",
    "remove_formula",
    "set_as_active_cell",
    "get_address",
    "set_cell_comment",
    "get_cell_comment",
    "remove_cell_comment",
    "set_hyperlink",
    "get_hyperlink",
    "remove_hyperlink",
    "get_array_formula_range",
    "is_part_of_array_formula_group",
)


def _unsupported(name: str) -> Callable[..., NoReturn]:
    def method(self: PoiCell, *_: Any, **__: Any) -> NoReturn:
        msg = f"`{name}` is not supported by streaming cells"
        raise UnsupportedOperation(msg)

    method.__name__ = name
    method.__qualname__ = f"PoiCell.{name}"
    method.__doc__ = "Not supported"
    return method


class PoiCell:
    __slots__ = ("cell",)

    def __init__(self, cell: StreamingCell) -> None:
        self.cell = cell

    def get_column_index(self) -> int:
        return self.cell.column_index

    def get_row_index(self) -> int:
        return self.cell.row_index

    def get_row(self) -> Any:
        return self.cell.row

    def get_sheet(self) -> Any:
        return self.cell.sheet

    def get_cell_style(self) -> Any:
        return self.cell.cell_style

    def get_cell_type(self) -> CellType:
        return self.cell.cell_type

    def get_cached_formula_result_type(self) -> CellType:
        return self.cell.cached_formula_result_type

    def get_string_cell_value(self) -> str:
        return self.cell.string_value

    def get_numeric_cell_value(self) -> float:
        return self.cell.numeric_value

    def get_date_cell_value(self) -> datetime | None:
        return self.cell.date_value

    def get_local_date_time_cell_value(self) -> datetime | None:
        return self.cell.local_datetime_value

    def get_boolean_cell_value(self) -> bool:
        return self.cell.boolean_value

    def get_rich_string_cell_value(self) -> rich_text:
        return self.cell.rich_string_value

    def get_error_cell_value(self) -> int:
        return self.cell.error_value

    def get_cell_formula(self) -> str | None:
        return self.cell.cell_formula


for _name in UNSUPPORTED_METHODS:
    setattr(PoiCell, _name, _unsupported(_name))
