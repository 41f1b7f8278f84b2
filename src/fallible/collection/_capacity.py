"""Buffer pre-sizing for sources whose length is known up front."""

from __future__ import annotations

from collections.abc import Iterable, Sized
from typing import Generic, TypeVar

T = TypeVar("T")

_UNSET: object = object()


def length_hint(source: Iterable[object]) -> int | None:
    """Exact length of a Sized source, else None.

    __length_hint__ estimates are ignored: they may be arbitrarily large.
    """
    return len(source) if isinstance(source, Sized) else None


class PresizedBuffer(Generic[T]):
    """Append-only list that reserves its slots up front.

    Writes go into the reserved slots first and fall back to append() once
    they run out. to_list() trims unused slots, so the result never depends
    on the chosen capacity.
    """

    __slots__ = ("_items", "_size")

    def __init__(self, capacity: int) -> None:
        self._items: list[T] = [_UNSET] * capacity  # type: ignore[list-item]
        self._size = 0

    def append(self, item: T) -> None:
        if self._size < len(self._items):
            self._items[self._size] = item
        else:
            self._items.append(item)
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def to_list(self) -> list[T]:
        del self._items[self._size:]
        return self._items
