"""A chained hash table that grows to keep its chains short."""

from .datastructures import Chain, ChainedHashTable, Keyed, create

__all__ = [
    "Chain",
    "ChainedHashTable",
    "create",
    "Keyed",
]
