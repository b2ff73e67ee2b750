# ruff: noqa:D102, D105, D107
from __future__ import annotations

__all__ = ["cell_series"]

import warnings
from typing import TYPE_CHECKING

import numpy as np
import pyarrow as pa

from . import core
from .constants import CellType
from .convert import check_date_format, serials_to_ms, to_boolean

if TYPE_CHECKING:
    from typing_extensions import Literal

    from .cell import StreamingCell

    ChunkKind = Literal["n", "t", "s", "b"] | None

T_STR = pa.large_string()
T_F8 = pa.float64()
T_MS = pa.timestamp("ms")
T_BOOL = pa.bool_()

TEMPORAL_FORMATS = frozenset(("d", "dt", "t"))


class cell_series:  # noqa: N801
    """
    Column of typed values, copied out of streamed cells.

    Cells are usually reused by the producer, so values are taken at `add` time. Consecutive cells
    with the same kind form a chunk; rows without cells become nulls.
    """

    __slots__ = (
        "__chunk",
        "__chunks",
        "__e_row",
        "__kind",
        "__temporal",
        "__use_1904_dates",
    )

    def __init__(
        self,
        *,
        temporal: bool | None = None,
        use_1904_dates: bool = False,
    ) -> None:
        self.__chunks: list[tuple[ChunkKind, list | int]] = []
        self.__chunk: list = []
        self.__kind: ChunkKind = None
        self.__e_row: int = -1
        self.__temporal = temporal
        self.__use_1904_dates = use_1904_dates

    def __len__(self) -> int:
        return self.__e_row + 1

    def __pull_chunk(self) -> None:
        if self.__chunk:
            self.__chunks.append((self.__kind, self.__chunk))
            self.__chunk = []

    def __push_nulls(self, count: int) -> None:
        self.__pull_chunk()
        if self.__chunks and self.__chunks[-1][0] is None:
            _, n = self.__chunks.pop()
            count += n  # type: ignore
        self.__chunks.append((None, count))
        self.__kind = None

    def __is_temporal(self, c: StreamingCell) -> bool:
        if self.__temporal is not None:
            return self.__temporal
        return check_date_format(c.numeric_format, c.numeric_format_index) in TEMPORAL_FORMATS

    def add(self, c: StreamingCell) -> int:
        # ! If cell row already here, skip add
        _row = c.row_index
        if _row <= self.__e_row:
            return self.__e_row

        cell_type = c.cell_type
        if cell_type is CellType.FORMULA:
            cell_type = c.cached_formula_result_type

        kind: ChunkKind
        if cell_type is CellType.NUMERIC:
            kind = "t" if self.__is_temporal(c) else "n"
            value = c.numeric_value
        elif cell_type is CellType.BOOLEAN:
            kind = "b"
            value = to_boolean(c.raw_contents)
        elif cell_type is CellType.STRING:
            kind = "s"
            value = c.string_value
        elif cell_type is CellType.ERROR:
            kind = "s"
            value = c.raw_contents
        else:
            kind = value = None

        # ! Rows without cells are nulls (pushed after conversion, so a failed cell leaves no trace)
        if _row > self.__e_row + 1:
            self.__push_nulls(_row - self.__e_row - 1)

        if kind is None:
            self.__push_nulls(1)
            self.__e_row = _row
            return self.__e_row

        # ! If current cell has different kind, than pull current chunk, and start another
        if kind != self.__kind:
            self.__pull_chunk()
            self.__kind = kind

        self.__chunk.append(value)
        self.__e_row = _row

        return self.__e_row

    def __chunk_array(self, kind: ChunkKind, values: list) -> pa.Array:
        if kind == "n":
            return pa.array(np.asarray(values, dtype=np.float64), T_F8)
        if kind == "t":
            ms, valid = serials_to_ms(
                np.asarray(values, dtype=np.float64),
                self.__use_1904_dates,
            )
            return pa.array(ms, T_MS, mask=~valid)
        if kind == "b":
            return pa.array(values, T_BOOL)
        return pa.array(values, T_STR)

    def to_arrow(self, offset: int = 0, length: int = 0) -> pa.Array:
        """
        Create pyarrow.Array of the column, using (optional) offset and length.

        Mixed columns (e.g. numbers and text) are rendered as LargeString.
        """
        self.__pull_chunk()

        arrays = [
            self.__chunk_array(kind, values)  # type: ignore
            for kind, values in self.__chunks
            if kind is not None
        ]

        dtypes = {a.type for a in arrays}
        if not dtypes:
            dtype = pa.null()
        elif len(dtypes) == 1:
            dtype = dtypes.pop()
        else:
            if core.PERFORMANCE_WARNINGS:
                warnings.warn(
                    f"Column has mixed types ({', '.join(sorted(map(str, dtypes)))}), rendered as strings",
                    core.PerformanceWarning,
                    stacklevel=2,
                )
            dtype = T_STR
            arrays = [a.cast(T_STR) for a in arrays]

        i_arrays = iter(arrays)
        parts = [
            pa.nulls(values, dtype) if kind is None else next(i_arrays)  # type: ignore
            for kind, values in self.__chunks
        ]

        if length and offset + length > len(self):
            parts.append(pa.nulls(offset + length - len(self), dtype))

        if not parts:
            return pa.nulls(length, dtype)

        ret = pa.concat_arrays(parts)
        return ret.slice(offset, length or None)

    def to_utf8(self, offset: int = 0, length: int = 0) -> pa.LargeStringArray:
        """Column cast to LargeString. Useful for fetching a header."""
        return self.to_arrow(offset, length).cast(T_STR)
