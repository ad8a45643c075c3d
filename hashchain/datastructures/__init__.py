from .chain import Chain
from .chained_hash_table import ChainedHashTable, create
from .keyed import Keyed

__all__ = [
    "Chain",
    "ChainedHashTable",
    "create",
    "Keyed",
]
