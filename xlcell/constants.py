"""
Common constants for cell value resolution.

Raw type tags are the values of the `t` attribute of a `<c>` element in SpreadsheetML.
A cell without the attribute carries no tag and is treated as blank until content arrives.

TAG_NUMERIC -> CellType.NUMERIC
TAG_SHARED_STRING, TAG_INLINE_STRING, TAG_STRING -> CellType.STRING
TAG_FORMULA -> CellType.FORMULA (never a cached formula result)
TAG_BOOLEAN -> CellType.BOOLEAN
TAG_ERROR -> CellType.ERROR
"""

from __future__ import annotations

__all__ = [
    "BUILTIN_FORMATS",
    "DAY_MS",
    "ERROR_CODES",
    "FALSE_AS_STRING",
    "STRING_TAGS",
    "TAG_BOOLEAN",
    "TAG_ERROR",
    "TAG_FORMULA",
    "TAG_INLINE_STRING",
    "TAG_NUMERIC",
    "TAG_SHARED_STRING",
    "TAG_STRING",
    "TRUE_AS_STRING",
    "CellType",
]

from enum import IntEnum

TAG_NUMERIC = "n"
TAG_SHARED_STRING = "s"
TAG_INLINE_STRING = "inlineStr"
TAG_STRING = "str"
TAG_FORMULA = "f"
TAG_BOOLEAN = "b"
TAG_ERROR = "e"

STRING_TAGS = frozenset((TAG_SHARED_STRING, TAG_INLINE_STRING, TAG_STRING))

TRUE_AS_STRING = "1"
FALSE_AS_STRING = "0"

DAY_MS = 86_400_000


class CellType(IntEnum):
    BLANK = 0
    NUMERIC = 1
    STRING = 2
    FORMULA = 3
    BOOLEAN = 4
    ERROR = 5

    @property
    def label(self) -> str:
        """Name used in diagnostics"""
        return _LABELS[self]


_LABELS = {
    CellType.BLANK: "blank",
    CellType.NUMERIC: "numeric",
    CellType.STRING: "text",
    CellType.FORMULA: "formula",
    CellType.BOOLEAN: "boolean",
    CellType.ERROR: "error",
}

# Legacy single-byte codes of the binary (BIFF8) format
ERROR_CODES = {
    "(no error)": -1,
    "#NULL!": 0x00,
    "#DIV/0!": 0x07,
    "#VALUE!": 0x0F,
    "#REF!": 0x17,
    "#NAME?": 0x1D,
    "#NUM!": 0x24,
    "#N/A": 0x2A,
}

# Built-in number formats (ECMA-376, 18.8.30) that decide numeric vs temporal rendering
BUILTIN_FORMATS = {
    0x01: "0",
    0x02: "0.00",
    0x03: "#,##0",
    0x04: "#,##0.00",
    0x0E: "m/d/yyyy",
    0x0F: "d-mmm-yy",
    0x10: "d-mmm",
    0x11: "mmm-yy",
    0x12: "h:mm AM/PM",
    0x13: "h:mm:ss AM/PM",
    0x14: "h:mm",
    0x15: "h:mm:ss",
    0x16: "m/d/yy h:mm",
    0x2D: "mm:ss",
    0x2E: "[h]:mm:ss",
    0x2F: "mmss.0",
}
