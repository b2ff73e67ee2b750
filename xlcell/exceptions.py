from __future__ import annotations

__all__ = [
    "InvalidState",
    "MalformedNumeric",
    "TypeMismatch",
    "UnsupportedCellType",
    "UnsupportedOperation",
    "XlCellError",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .constants import CellType


class XlCellError(Exception):
    """Base class of every error raised by cell accessors"""


class UnsupportedCellType(XlCellError, ValueError):
    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Unsupported cell type '{tag}'")


class UnsupportedOperation(XlCellError, NotImplementedError):
    """Operation is not available on a streamed (read-only) cell"""

    def __init__(self, msg: str = "Operation is not supported by streaming cells") -> None:
        super().__init__(msg)


class InvalidState(XlCellError, RuntimeError):
    pass


class TypeMismatch(InvalidState):
    def __init__(
        self,
        expected: CellType,
        actual: CellType,
        *,
        is_formula: bool = False,
    ) -> None:
        self.expected = expected
        self.actual = actual
        msg = (
            f"Cannot get a {expected.label} value from a {actual.label} "
            f"{'formula ' if is_formula else ''}cell"
        )
        super().__init__(msg)


class MalformedNumeric(XlCellError, ValueError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Not a number: {value!r}")
