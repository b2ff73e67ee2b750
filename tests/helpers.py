from __future__ import annotations

from xlcell import StreamingCell


def make_cell(
    tag: str | None = None,
    content: str | None = None,
    raw: str | None = None,
    *,
    formula: str | None = None,
    use_1904_dates: bool = False,
    col: int = 0,
    row: int = 0,
) -> StreamingCell:
    """Cell as the producer leaves it: raw contents default to the resolved content."""
    c = StreamingCell(None, col, row, use_1904_dates)
    c.set_type(tag)
    c.set_content_supplier(lambda: content)
    c.set_raw_contents(content if raw is None else raw)
    if formula is not None:
        c.set_formula(formula)
        c.set_formula_type(True)
    return c
