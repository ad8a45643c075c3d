from __future__ import annotations
from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

T = TypeVar("T")


class Chain(Generic[T]):
    """The elements of one bucket of a :class:`ChainedHashTable`.

    Elements are kept most-recently-inserted-first: :meth:`prepend` places a
    new element at the front, and iteration walks from the front.
    """

    __slots__ = ("_items",)

    def __init__(self, first: T) -> None:
        # A bucket only exists once it holds something.
        self._items: Deque[T] = deque((first,))

    def prepend(self, element: T) -> None:
        """Insert *element* at the front of the chain. O(1)."""
        self._items.appendleft(element)

    def find(self, target: T) -> bool:
        """Return True if an element equal to *target* is in the chain."""
        for element in self._items:
            if element == target:
                return True
        return False

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self._items)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Chain({list(self._items)!r})"
