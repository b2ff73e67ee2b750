import typing

from .cell import StreamingCell
from .constants import CellType
from .core import PerformanceWarning, ProducerContractWarning
from .exceptions import (
    InvalidState,
    MalformedNumeric,
    TypeMismatch,
    UnsupportedCellType,
    UnsupportedOperation,
    XlCellError,
)
from .legacy import PoiCell
from .resolver import classify, classify_cached_result
from .richtext import rich_text
from .series import cell_series

if typing.TYPE_CHECKING:
    from .cell import ContentSupplier

    __all__ = [
        "CellType",
        "ContentSupplier",
        "InvalidState",
        "MalformedNumeric",
        "PerformanceWarning",
        "PoiCell",
        "ProducerContractWarning",
        "StreamingCell",
        "TypeMismatch",
        "UnsupportedCellType",
        "UnsupportedOperation",
        "XlCellError",
        "cell_series",
        "classify",
        "classify_cached_result",
        "rich_text",
    ]

else:
    __all__ = [
        "CellType",
        "InvalidState",
        "MalformedNumeric",
        "PerformanceWarning",
        "PoiCell",
        "ProducerContractWarning",
        "StreamingCell",
        "TypeMismatch",
        "UnsupportedCellType",
        "UnsupportedOperation",
        "XlCellError",
        "cell_series",
        "classify",
        "classify_cached_result",
        "rich_text",
    ]
