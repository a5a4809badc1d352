from __future__ import annotations
from typing import Generic, Iterator, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class _ChainNode(Generic[K, V]):
    """A single link in a hash bucket chain."""

    __slots__ = ("key", "value", "next")

    def __init__(self, key: K, value: V, next: Optional["_ChainNode[K, V]"] = None) -> None:
        self.key = key
        self.value = value
        self.next = next


class LinkedList(Generic[K, V]):
    """Singly-linked chain of (key, value) pairs for one :class:`HashTable` bucket.

    New keys go on the tail, so iteration follows insertion order within the
    bucket. Keys are compared with ``==``.
    """

    __slots__ = ("head", "_length")

    def __init__(self) -> None:
        self.head: Optional[_ChainNode[K, V]] = None
        self._length = 0

    def append_or_replace(self, key: K, value: V) -> bool:
        """Append (key, value) at the tail, or replace the value of an equal key.

        Returns True if a new node was appended; False if an existing node was
        found and its value replaced.
        """
        if self.head is None:
            self.head = _ChainNode(key, value)
            self._length = 1
            return True
        n = self.head
        while True:
            if n.key == key:
                n.value = value
                return False
            if n.next is None:
                break
            n = n.next
        n.next = _ChainNode(key, value)
        self._length += 1
        return True

    def find(self, key: K) -> Optional[_ChainNode[K, V]]:
        """Return the node holding *key*, or None."""
        n = self.head
        while n:
            if n.key == key:
                return n
            n = n.next
        return None

    def find_by_value(self, value: V) -> Optional[_ChainNode[K, V]]:
        """Return the first node whose value equals *value*, or None."""
        n = self.head
        while n:
            if n.value == value:
                return n
            n = n.next
        return None

    def remove(self, key: K) -> Tuple[bool, Optional[V]]:
        """Unlink the node with *key*; return ``(removed, value)``."""
        prev: Optional[_ChainNode[K, V]] = None
        cur = self.head
        while cur:
            if cur.key == key:
                if prev:
                    prev.next = cur.next
                else:
                    self.head = cur.next
                self._length -= 1
                return True, cur.value
            prev, cur = cur, cur.next
        return False, None

    def items(self) -> Iterator[Tuple[K, V]]:
        """Yield (key, value) pairs in chain order."""
        n = self.head
        while n:
            yield (n.key, n.value)
            n = n.next

    def __len__(self) -> int:
        return self._length
