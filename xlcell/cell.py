# ruff: noqa:D102, D105, D107, FBT001
from __future__ import annotations

__all__ = ["StreamingCell"]

import warnings
from typing import TYPE_CHECKING

from . import core
from .constants import CellType
from .convert import (
    error_code,
    serial_to_datetime,
    to_boolean,
    to_local_datetime,
    to_number,
    to_rich_text,
    to_text,
)
from .exceptions import InvalidState, TypeMismatch, UnsupportedOperation
from .resolver import classify, classify_cached_result

if TYPE_CHECKING:
    from datetime import datetime
    from typing import Any, Callable

    from typing_extensions import TypeAlias

    from .richtext import rich_text

    ContentSupplier: TypeAlias = "Callable[[], str | None]"


def NULL_SUPPLIER() -> None:  # noqa: N802
    return None


_UNRESOLVED: Any = object()


class StreamingCell:
    """
    Cell of a streamed worksheet.

    Raw fields are written by the upstream producer while it parses the sheet; typed values are
    computed on demand. The content supplier is called at most once per assignment.

    Producer may reuse the instance for the next cell after `reset`, so callers that keep values
    across iteration steps must copy them out (or keep a `snapshot`).
    """

    __slots__ = (
        "__cell_style",
        "__column_index",
        "__content",
        "__contents_supplier",
        "__formula",
        "__formula_type",
        "__numeric_format",
        "__numeric_format_index",
        "__raw_contents",
        "__row",
        "__row_index",
        "__sheet",
        "__type",
        "__use_1904_dates",
    )

    def __init__(
        self,
        sheet: Any,
        column_index: int,
        row_index: int,
        use_1904_dates: bool = False,  # noqa: FBT002
    ) -> None:
        self.__sheet = sheet
        self.__use_1904_dates = use_1904_dates
        self.reset(column_index, row_index)

    def reset(self, column_index: int, row_index: int) -> None:
        """Clear every content field and move the cell to a new position."""
        self.__column_index = column_index
        self.__row_index = row_index

        self.__contents_supplier: ContentSupplier = NULL_SUPPLIER
        self.__content: str | None = _UNRESOLVED
        self.__raw_contents: str | None = None
        self.__formula: str | None = None
        self.__formula_type: bool = False
        self.__numeric_format: str | None = None
        self.__numeric_format_index: int | None = None
        self.__type: str | None = None
        self.__cell_style: Any = None
        self.__row: Any = None

    def __repr__(self) -> str:
        return (
            f"StreamingCell(row={self.__row_index}, col={self.__column_index}, "
            f"type={self.__type!r}, formula={self.__formula_type})"
        )

    # ? Producer side

    def set_content_supplier(self, supplier: ContentSupplier) -> None:
        if (
            core.PRODUCER_WARNINGS
            and self.__content is not _UNRESOLVED
            and self.__content is not None
        ):
            warnings.warn(
                f"Content of cell ({self.__row_index}, {self.__column_index}) was already resolved; "
                "call `reset` before reusing the cell",
                core.ProducerContractWarning,
                stacklevel=2,
            )
        self.__contents_supplier = supplier
        self.__content = _UNRESOLVED

    def set_raw_contents(self, raw_contents: str | None) -> None:
        self.__raw_contents = raw_contents

    def set_formula(self, formula: str | None) -> None:
        self.__formula = formula

    def set_formula_type(self, formula_type: bool) -> None:
        self.__formula_type = formula_type

    def set_type(self, type: str | None) -> None:  # noqa: A002
        self.__type = type

    def set_numeric_format(self, numeric_format: str | None) -> None:
        self.__numeric_format = numeric_format

    def set_numeric_format_index(self, numeric_format_index: int | None) -> None:
        self.__numeric_format_index = numeric_format_index

    def set_cell_style(self, cell_style: Any) -> None:
        self.__cell_style = cell_style

    def set_row(self, row: Any) -> None:
        """Owning row. Keeping references to it after the iteration window has passed will preserve it."""
        self.__row = row

    def snapshot(self) -> StreamingCell:
        """Copy of this cell with resolved content, unaffected by later reuse."""
        content = self.content
        c = StreamingCell(
            self.__sheet,
            self.__column_index,
            self.__row_index,
            self.__use_1904_dates,
        )
        c.__contents_supplier = lambda: content
        c.__content = content
        c.__raw_contents = self.__raw_contents
        c.__formula = self.__formula
        c.__formula_type = self.__formula_type
        c.__numeric_format = self.__numeric_format
        c.__numeric_format_index = self.__numeric_format_index
        c.__type = self.__type
        c.__cell_style = self.__cell_style
        c.__row = self.__row
        return c

    # ? Raw fields

    @property
    def column_index(self) -> int:
        "0-based column index"
        return self.__column_index

    @property
    def row_index(self) -> int:
        "0-based row index"
        return self.__row_index

    @property
    def sheet(self) -> Any:
        return self.__sheet

    @property
    def row(self) -> Any:
        return self.__row

    @property
    def cell_style(self) -> Any:
        return self.__cell_style

    @property
    def use_1904_dates(self) -> bool:
        return self.__use_1904_dates

    @property
    def type(self) -> str | None:
        "Raw type tag"
        return self.__type

    @property
    def formula_type(self) -> bool:
        return self.__formula_type

    @property
    def numeric_format(self) -> str | None:
        return self.__numeric_format

    @property
    def numeric_format_index(self) -> int | None:
        return self.__numeric_format_index

    @property
    def raw_contents(self) -> str | None:
        return self.__raw_contents

    @property
    def content(self) -> str | None:
        """Resolved content. Supplier is called on first access only."""
        if self.__content is _UNRESOLVED:
            self.__content = self.__contents_supplier()
        return self.__content

    # ? Typed values

    @property
    def cell_type(self) -> CellType:
        return classify(self.__type, self.content is not None, self.__formula_type)

    @property
    def cached_formula_result_type(self) -> CellType:
        """
        Only valid for formula cells.

        One of (NUMERIC, STRING, BOOLEAN, ERROR, BLANK) depending on the cached value of the formula.
        """
        return classify_cached_result(
            self.__type,
            self.content is not None,
            self.__formula_type,
        )

    @property
    def string_value(self) -> str:
        """Value of the cell as a string. Empty string for blank cells."""
        if self.cell_type is CellType.BLANK:
            return ""
        return to_text(self.content)

    @property
    def numeric_value(self) -> float:
        """
        Value of the cell as a number. 0.0 for blank cells.

        Raises `MalformedNumeric` if raw contents are not a decimal literal.
        """
        if self.cell_type is CellType.BLANK:
            return 0.0
        return to_number(self.__raw_contents)

    @property
    def date_value(self) -> datetime | None:
        """
        Value of the cell as a date. `None` for blank cells.

        Raises `InvalidState` for text cells.
        """
        cell_type = self.cell_type
        if cell_type is CellType.STRING:
            msg = "Cell type cannot be STRING"
            raise InvalidState(msg)
        if cell_type is CellType.BLANK or self.__raw_contents is None:
            return None
        return serial_to_datetime(self.numeric_value, self.__use_1904_dates)

    @property
    def local_datetime_value(self) -> datetime | None:
        return to_local_datetime(self.date_value)

    @property
    def boolean_value(self) -> bool:
        """Value of the cell as a boolean. False for blank cells."""
        cell_type = self.cell_type
        if cell_type is CellType.BLANK:
            return False
        if cell_type is CellType.BOOLEAN:
            return to_boolean(self.__raw_contents)
        if cell_type is CellType.FORMULA:
            msg = "Boolean values of formula cells are not supported"
            raise UnsupportedOperation(msg)
        raise TypeMismatch(CellType.BOOLEAN, cell_type)

    @property
    def rich_string_value(self) -> rich_text:
        """Value of the cell as a rich text. Available for text and blank cells only."""
        cell_type = self.cell_type
        if cell_type is CellType.BLANK:
            return to_rich_text(None)
        if cell_type is CellType.STRING:
            return to_rich_text(self.string_value)
        msg = f"Rich text values of {cell_type.label} cells are not supported"
        raise UnsupportedOperation(msg)

    @property
    def error_value(self) -> int:
        return error_code(self.__raw_contents)

    @property
    def cell_formula(self) -> str | None:
        """Formula of the cell, for example `SUM(C4:E4)`."""
        if not self.__formula_type:
            msg = "This cell does not have a formula"
            raise InvalidState(msg)
        return self.__formula
