from __future__ import annotations
import logging
from typing import Generic, Hashable, List, Optional, TypeVar

from .chain import Chain

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

# Number of buckets used when no (or a non-positive) size is requested.
DEFAULT_SIZE = 4

# Occupied-bucket ratio at which the next insert grows the table first.
LOAD_FACTOR_THRESHOLD = 0.75

GROWTH_FACTOR = 2

# Dump format
_ARRAY_INFORMATION = "Underlying array usage / length: {usage}/{length}"
_NODES_INFORMATION = "Total number of nodes: {total}"
_CHAIN_HEADER = "[ {index:2d} ]: "
_EMPTY_CHAIN = "null"
_NODE_CONTENT = "{element} --> "


def bucket_index(hash_code: int, length: int) -> int:
    """Map *hash_code* onto ``[0, length)``.

    Python's ``%`` takes the sign of the divisor and ints never overflow, so
    negative hash codes land in range without an ``abs()`` step.
    """
    return hash_code % length


class ChainedHashTable(Generic[T]):
    """A hash table of chains, storing elements that act as their own keys.

    Each slot of the underlying list is either ``None`` or a :class:`Chain`
    holding every element whose hash maps to that slot. New elements go to
    the front of their chain and duplicates are kept.

    The table tracks how many slots are occupied (``usage``) and how many
    elements it holds (``total_elements``). When ``usage / capacity``
    reaches the load factor threshold, the next insert first doubles the
    capacity and redistributes every element.
    """

    __slots__ = ("_buckets", "_usage", "_total", "_load", "_threshold")

    def __init__(
        self,
        size: Optional[int] = DEFAULT_SIZE,
        load_factor_threshold: float = LOAD_FACTOR_THRESHOLD,
    ) -> None:
        if size is None or size <= 0:
            size = DEFAULT_SIZE
        if not (0.0 < load_factor_threshold <= 1.0):
            raise ValueError("load_factor_threshold must be in (0.0, 1.0]")
        self._buckets: List[Optional[Chain[T]]] = [None] * size
        self._usage: int = 0
        self._total: int = 0
        self._load: float = 0.0
        self._threshold: float = load_factor_threshold
        logger.debug("created table with %d buckets (threshold %.2f)", size, load_factor_threshold)

    # -----------------------------
    # Read-only state
    # -----------------------------
    @property
    def capacity(self) -> int:
        return len(self._buckets)

    @property
    def usage(self) -> int:
        """Number of non-empty buckets."""
        return self._usage

    @property
    def total_elements(self) -> int:
        return self._total

    @property
    def load_factor(self) -> float:
        return self._load

    @property
    def load_factor_threshold(self) -> float:
        return self._threshold

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _index_of(self, element: T) -> int:
        if element is None:
            raise ValueError("element must not be None")
        return bucket_index(hash(element), len(self._buckets))

    def _update_load_factor(self) -> None:
        self._load = self._usage / len(self._buckets)

    def _place(self, element: T) -> None:
        """Put *element* at the front of its bucket and update the counters."""
        idx = self._index_of(element)
        bucket = self._buckets[idx]
        if bucket is None:
            self._buckets[idx] = Chain(element)
            self._usage += 1
        else:
            bucket.prepend(element)
        self._total += 1

    def _rehash(self) -> None:
        """Grow the underlying list and redistribute every element."""
        old_buckets = self._buckets
        self._buckets = [None] * (len(old_buckets) * GROWTH_FACTOR)
        self._usage = 0
        self._total = 0

        for bucket in old_buckets:
            if bucket is None:
                continue
            for element in bucket:
                self._reinsert(element)

        logger.debug(
            "grew table from %d to %d buckets (%d elements, usage %d)",
            len(old_buckets), len(self._buckets), self._total, self._usage,
        )

    def _reinsert(self, element: T) -> None:
        # Used only while rehashing: never checks the threshold, so a grow
        # cannot trigger another grow.
        self._place(element)

    # -----------------------------
    # Core operations
    # -----------------------------
    def insert(self, element: T) -> None:
        """Add *element*, growing the table first if it is too full.

        Raises:
            ValueError: if *element* is None.
            TypeError: if *element* is not hashable.
        """
        # Validate before a grow can happen.
        self._index_of(element)

        self._update_load_factor()
        if self._load >= self._threshold:
            self._rehash()

        self._place(element)
        self._update_load_factor()

    def contains(self, target: T) -> bool:
        """Return True if an element equal to *target* has been inserted."""
        bucket = self._buckets[self._index_of(target)]
        if bucket is None:
            return False
        return bucket.find(target)

    def to_display_string(self) -> str:
        """Render the summary counters and every bucket's chain, one per line."""
        lines = [
            _ARRAY_INFORMATION.format(usage=self._usage, length=len(self._buckets)),
            _NODES_INFORMATION.format(total=self._total),
        ]
        for i, bucket in enumerate(self._buckets):
            header = _CHAIN_HEADER.format(index=i)
            if bucket is None:
                lines.append(header + _EMPTY_CHAIN)
            else:
                lines.append(header + "".join(_NODE_CONTENT.format(element=e) for e in bucket))
        return "\n".join(lines)

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __contains__(self, target: T) -> bool:  # pragma: no cover - trivial
        return self.contains(target)

    def __len__(self) -> int:  # pragma: no cover - trivial
        return self._total

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return (
            f"ChainedHashTable(capacity={len(self._buckets)}, usage={self._usage}, "
            f"total_elements={self._total})"
        )


def create(size: Optional[int] = None) -> ChainedHashTable:
    """Return an empty table with *size* buckets, or the default if *size* is not positive."""
    return ChainedHashTable(size)
