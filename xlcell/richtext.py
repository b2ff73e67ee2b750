# ruff: noqa:D102
from __future__ import annotations

__all__ = ["EMPTY_RICH_TEXT", "rich_text"]

from .core import as_dataclass


@as_dataclass(readonly=True, hashable=True)
class rich_text:  # noqa: N801
    """Text value of a string cell. Streamed cells never carry formatting runs."""

    string: str
    "Plain text"

    runs: tuple = ()
    "Formatting runs as `(start, end)` pairs"

    @property
    def length(self) -> int:
        return len(self.string)

    @property
    def num_formatting_runs(self) -> int:
        return len(self.runs)

    def __str__(self) -> str:
        return self.string


EMPTY_RICH_TEXT = rich_text("")
