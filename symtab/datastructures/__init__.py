from .bst import Entry, InOrderIterator, OrderedMap
from .linked_list import LinkedList
from .hash_table import DEFAULT_BUCKET_COUNT, HashTable

__all__ = [
    "Entry",
    "InOrderIterator",
    "OrderedMap",
    "LinkedList",
    "HashTable",
    "DEFAULT_BUCKET_COUNT",
]
