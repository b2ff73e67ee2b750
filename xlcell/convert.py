from __future__ import annotations

__all__ = [
    "check_date_format",
    "error_code",
    "serial_to_datetime",
    "serials_to_ms",
    "to_boolean",
    "to_local_datetime",
    "to_number",
    "to_rich_text",
    "to_text",
]

import math
import re
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

import numpy as np

from .constants import BUILTIN_FORMATS, DAY_MS, ERROR_CODES, TRUE_AS_STRING
from .core import cached
from .exceptions import MalformedNumeric, UnsupportedOperation
from .richtext import EMPTY_RICH_TEXT, rich_text

if TYPE_CHECKING:
    from typing import Literal

    from numpy.typing import NDArray

re_num = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)[fFdD]?)",
)

re_dt = re.compile(r"(?<!\\)[dmhysDMHYS]")
re_xt = re.compile(r'(?:"[^"]*")|(?:\[(?!(?:hh?|mm?|ss?)\])[^\]]*\])')

re_date = re.compile(r"[ydYD]")
re_time = re.compile(r"[hsHS]")
re_span = re.compile(r"(?i)\[hh?\](:mm(:ss(\.0*)?)?)?|\[mm?\](:ss(\.0*)?)?|\[ss?\](\.0*)?")

# Control characters and space, as trimmed around numeric literals
_BLANKS = "".join(map(chr, range(0x21)))

UNIX_EPOCH = datetime(1970, 1, 1)

# NOTE 1: 24_107 - days from 1904-01-01 to 1970-01-01
# NOTE 2: 25_568 - days from 1899-12-31 to 1970-01-01 (serials before the fake 1900-02-29)
# NOTE 3: 25_569 - days from 1899-12-30 to 1970-01-01 (serials after the fake 1900-02-29)
EPOCH_1904_DAYS = 24_107
EPOCH_1900_DAYS = 25_568
EPOCH_1900_LEAP_DAYS = 25_569
FIRST_LEAP_SERIAL = 61

# Milliseconds from 1970-01-01 to the first moment past `datetime.max`
MAX_MS = (datetime.max - UNIX_EPOCH) // timedelta(milliseconds=1) + 1
# Serials from this one on are past `datetime.max` in both date systems
MAX_SERIAL = MAX_MS // DAY_MS + EPOCH_1900_LEAP_DAYS + 1


def to_text(content: object | None) -> str:
    return "" if content is None else str(content)


def to_number(raw: str | None) -> float:
    """
    Parse raw cell contents as a floating point literal.

    Only the locale independent decimal grammar is accepted: `1`, `-1.5`, `.5e-3`, `NaN`, `Infinity`.

    Raises
    ------
    MalformedNumeric
        When `raw` is not a decimal literal

    """
    if raw is None:
        return 0.0

    s = raw.strip(_BLANKS)
    if not re_num.fullmatch(s):
        raise MalformedNumeric(raw)

    return float(s.rstrip("fFdD"))


def _epoch_days(whole_days: int, use_1904_dates: bool) -> int:  # noqa: FBT001
    if use_1904_dates:
        return EPOCH_1904_DAYS
    return EPOCH_1900_DAYS if whole_days < FIRST_LEAP_SERIAL else EPOCH_1900_LEAP_DAYS


def serial_to_datetime(
    serial: float,
    use_1904_dates: bool = False,  # noqa: FBT001, FBT002
) -> datetime | None:
    """
    Represents "`Days with fractions since 1900-01-01`" (or 1904-01-01) as a naive `datetime`.

    NOTE: In Windows MS Excel standard, for backward compatibility, 1900 is a leap year (+1 day in February 1900).
    Serials 60 (fake 1900-02-29) and 61 are both rendered as 1900-03-01.

    Parameters
    ----------
    serial : float
        Days from the epoch, fraction is a part of day
    use_1904_dates : bool
        Workbook uses 1904 date system

    Returns
    -------
    datetime | None
        Wall clock date and time, `None` for negative (or not finite) serials and serials past `datetime.max`

    """
    if not 0.0 <= serial < math.inf:
        return None

    whole_days = math.floor(serial)
    ms_in_day = int((serial - whole_days) * DAY_MS + 0.5)

    ms = (whole_days - _epoch_days(whole_days, use_1904_dates)) * DAY_MS + ms_in_day
    if ms >= MAX_MS:
        return None

    return UNIX_EPOCH + timedelta(milliseconds=ms)


def serials_to_ms(
    arr: NDArray[np.float64],
    use_1904_dates: bool = False,  # noqa: FBT001, FBT002
) -> tuple[NDArray[np.int64], NDArray[np.bool_]]:
    """
    Represents input Float64 array as "`Milliseconds since 1970-01-01`" from "`Days with fractions since epoch`".

    Same rules as `serial_to_datetime`, applied to the whole array at once.

    Parameters
    ----------
    arr : NDArray[np.float64]
        Input Float64 array (days from epoch)
    use_1904_dates : bool
        Workbook uses 1904 date system

    Returns
    -------
    tuple[NDArray[np.int64], NDArray[np.bool_]]
        Output Int64 array (milliseconds from 1970, wall clock) and mask of valid serials

    """
    valid = np.isfinite(arr) & (arr >= np.float64(0.0)) & (arr < np.float64(MAX_SERIAL))

    safe = np.where(valid, arr, np.float64(0.0))
    whole = np.floor(safe)
    ms_in_day = ((safe - whole) * np.float64(DAY_MS) + np.float64(0.5)).astype(np.int64)

    if use_1904_dates:
        offset = np.int64(EPOCH_1904_DAYS)
    else:
        offset = np.where(
            whole < np.float64(FIRST_LEAP_SERIAL),
            np.int64(EPOCH_1900_DAYS),
            np.int64(EPOCH_1900_LEAP_DAYS),
        )

    ms = (whole.astype(np.int64) - offset) * np.int64(DAY_MS) + ms_in_day

    return ms, valid & (ms < np.int64(MAX_MS))


def to_local_datetime(moment: datetime | None) -> datetime | None:
    """Reinterpret the epoch milliseconds of a local wall clock moment in the local calendar."""
    if moment is None:
        return None
    return datetime.fromtimestamp(moment.timestamp())


def to_boolean(raw: str | None) -> bool:
    return raw == TRUE_AS_STRING


def to_rich_text(content: object | None) -> rich_text:
    if content is None:
        return EMPTY_RICH_TEXT
    return rich_text(str(content))


def error_code(token: str | None) -> int:
    """Map an error token (`#DIV/0!`, ...) to its legacy single-byte code."""
    try:
        return ERROR_CODES[token]  # type: ignore
    except KeyError:
        msg = f"Unsupported error value: {token!r}"
        raise UnsupportedOperation(msg) from None


@cached
def check_date_format(
    code: str | None,
    index: int | None = None,
) -> Literal["td", "dt", "d", "t", "i", "f", None]:
    """
    Classify number format.

    `td` - elapsed time span, `dt` - date and time, `d` - date, `t` - time, `i` - integer, `f` - float.
    `None` means general (or text) rendering.
    """
    if code is None:
        if index is None or (code := BUILTIN_FORMATS.get(index)) is None:
            return None

    f, *_ = code.split(";", 1)
    if f == "0":
        return "i"
    if ".00" in f:
        return "f"
    if re_dt.search(f := re_xt.sub("", f)):
        if re_span.search(f):
            return "td"
        if re_time.search(f):
            return "dt" if re_date.search(f) else "t"
        if re_date.search(f):
            return "d"
    return None
