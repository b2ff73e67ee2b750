from __future__ import annotations

__all__ = [
    "PERFORMANCE_WARNINGS",
    "PRODUCER_WARNINGS",
    "PerformanceWarning",
    "ProducerContractWarning",
    "as_dataclass",
    "cached",
]

import os
from functools import cache as cached
from typing import TYPE_CHECKING

from recordclass import as_dataclass as _as_dataclass
from typing_extensions import dataclass_transform

if TYPE_CHECKING:
    from typing import Callable, TypeVar

    T = TypeVar("T")

PRODUCER_WARNINGS: bool = os.environ.get("XLCELL_PRODUCER_WARNINGS", "1") == "1"
"Warn when the upstream producer breaks the cell reuse contract"

PERFORMANCE_WARNINGS: bool = os.environ.get("XLCELL_PERFORMANCE_WARNINGS", "0") == "1"
"Warn when column export falls back to a slow rendering"


class ProducerContractWarning(UserWarning):
    """Upstream producer wrote to a cell in a way the reuse contract forbids."""


class PerformanceWarning(UserWarning):
    pass


@dataclass_transform()
def as_dataclass(
    cls: type[T] | None = None,
    *,
    use_dict: bool = False,
    use_weakref: bool = False,
    hashable: bool = False,
    sequence: bool = False,
    mapping: bool = False,
    iterable: bool = False,
    readonly: bool = False,
    fast_new: bool = True,
    rename: bool = False,
    gc: bool = False,
) -> Callable[[type[T]], type[T]]:
    def wrapper(cls: type[T]) -> type[T]:
        return _as_dataclass(
            use_dict=use_dict,
            use_weakref=use_weakref,
            hashable=hashable,
            sequence=sequence,
            mapping=mapping,
            iterable=iterable,
            readonly=readonly,
            fast_new=fast_new,
            rename=rename,
            gc=gc,
        )(cls)  # type: ignore

    if cls is not None:
        return wrapper(cls)  # type: ignore

    return wrapper
