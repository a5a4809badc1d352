from __future__ import annotations
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from .linked_list import LinkedList

K = TypeVar("K")
V = TypeVar("V")

# Prime bucket count used when none is given.
DEFAULT_BUCKET_COUNT = 11

_HASH_MASK = 0x7FFFFFFF


class HashTable(Generic[K, V]):
    """A separate-chaining hash table with a fixed number of buckets.

    Notes:
    - The bucket count never changes; long chains are expected when many keys
      share a bucket.
    - Buckets are created lazily on first insert.
    - ``contains`` and ``get_key`` search by *value* and scan every bucket.
    """

    __slots__ = ("_count", "_buckets", "_size")

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT) -> None:
        if bucket_count < 1:
            raise ValueError("bucket_count must be >= 1")
        self._count: int = bucket_count
        self._buckets: List[Optional[LinkedList[K, V]]] = [None] * bucket_count
        self._size: int = 0

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _bucket_index(self, key: K) -> int:
        """Clear the sign bit of the hash, then reduce modulo the bucket count."""
        return (hash(key) & _HASH_MASK) % self._count

    def _bucket(self, key: K) -> Optional[LinkedList[K, V]]:
        return self._buckets[self._bucket_index(key)]

    # -----------------------------
    # Core operations
    # -----------------------------
    def put(self, key: K, value: V) -> None:
        """Insert or update key-value pair."""
        idx = self._bucket_index(key)
        if self._buckets[idx] is None:
            self._buckets[idx] = LinkedList()
        if self._buckets[idx].append_or_replace(key, value):
            self._size += 1

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Retrieve value for key or return default."""
        bucket = self._bucket(key)
        node = bucket.find(key) if bucket else None
        return default if node is None else node.value

    def remove(self, key: K) -> Optional[V]:
        """Remove key and return its value, or None if it was not present."""
        bucket = self._bucket(key)
        if bucket is None:
            return None
        removed, value = bucket.remove(key)
        if removed:
            self._size -= 1
        return value

    def contains_key(self, key: K) -> bool:
        bucket = self._bucket(key)
        return bucket.find(key) is not None if bucket else False

    def contains(self, value: V) -> bool:
        """Check whether any entry holds *value*."""
        return any(
            bucket.find_by_value(value) is not None for bucket in self._buckets if bucket
        )

    def get_key(self, value: V) -> Optional[K]:
        """Return the first key (in bucket order) mapped to *value*, or None."""
        for bucket in self._buckets:
            if bucket:
                node = bucket.find_by_value(value)
                if node is not None:
                    return node.key
        return None

    def bucket_sizes(self) -> List[int]:
        """Number of entries in each bucket, indexed by bucket."""
        return [len(bucket) if bucket else 0 for bucket in self._buckets]

    @property
    def bucket_count(self) -> int:
        return self._count

    # -----------------------------
    # Iteration helpers
    # -----------------------------
    def items(self) -> Iterator[Tuple[K, V]]:
        for bucket in self._buckets:
            if bucket:
                yield from bucket.items()

    def keys(self) -> Iterator[K]:
        for k, _ in self.items():
            yield k

    def values(self) -> Iterator[V]:
        for _, v in self.items():
            yield v

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __contains__(self, key: K) -> bool:
        return self.contains_key(key)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[K]:  # pragma: no cover - simple
        return self.keys()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"HashTable({{{pairs}}})"
