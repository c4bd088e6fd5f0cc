"""Element type constraint shared by every set variant."""
from __future__ import annotations

from typing import Any, Protocol, TypeVar


class Ordered(Protocol):
    """Anything sortable with ``<``: ints, floats, strs, tuples of those."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __hash__(self) -> int: ...


T = TypeVar("T", bound=Ordered)
