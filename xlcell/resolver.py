from __future__ import annotations

__all__ = ["classify", "classify_cached_result"]

from .constants import (
    STRING_TAGS,
    TAG_BOOLEAN,
    TAG_ERROR,
    TAG_FORMULA,
    TAG_NUMERIC,
    CellType,
)
from .exceptions import InvalidState, UnsupportedCellType

_LITERAL_TYPES = {
    TAG_NUMERIC: CellType.NUMERIC,
    **dict.fromkeys(STRING_TAGS, CellType.STRING),
    TAG_BOOLEAN: CellType.BOOLEAN,
    TAG_ERROR: CellType.ERROR,
}

_CELL_TYPES = {**_LITERAL_TYPES, TAG_FORMULA: CellType.FORMULA}


def classify(
    tag: str | None,
    has_content: bool,  # noqa: FBT001
    is_formula: bool = False,  # noqa: FBT001, FBT002
) -> CellType:
    """
    Resolve the type of a cell from its raw tag.

    Parameters
    ----------
    tag : str | None
        Raw `t` attribute of the cell (`None` when absent)
    has_content : bool
        Whether the lazy content source produced anything
    is_formula : bool
        Formula flag of the cell; dominates the tag

    Returns
    -------
    CellType
        Cell classification

    Raises
    ------
    UnsupportedCellType
        When the tag is outside of the known vocabulary

    """
    if is_formula:
        return CellType.FORMULA
    if not has_content or tag is None:
        return CellType.BLANK
    try:
        return _CELL_TYPES[tag]
    except KeyError:
        raise UnsupportedCellType(tag) from None


def classify_cached_result(
    tag: str | None,
    has_content: bool,  # noqa: FBT001
    is_formula: bool,  # noqa: FBT001
) -> CellType:
    """Resolve the type of the last computed result of a formula cell."""
    if not is_formula:
        msg = "Only formula cells have cached results"
        raise InvalidState(msg)
    if not has_content or tag is None:
        return CellType.BLANK
    try:
        return _LITERAL_TYPES[tag]
    except KeyError:
        raise UnsupportedCellType(tag) from None
