"""In-memory symbol tables: an ordered BST map and a chained hash table."""

from .datastructures import HashTable, OrderedMap

__all__ = ["HashTable", "OrderedMap"]
__version__ = "0.1.0"
