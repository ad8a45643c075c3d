from __future__ import annotations
from dataclasses import dataclass, field
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(frozen=True)
class Keyed(Generic[K, V]):
    """A (key, value) pair that hashes and compares on its key alone.

    Storing ``Keyed`` entries in a :class:`ChainedHashTable` lets the table
    answer "is this key present" while carrying a payload alongside it.
    Two entries with the same key are equal whatever their values.
    """

    key: K
    value: V = field(compare=False)

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.key}={self.value}"
