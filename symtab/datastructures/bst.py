from __future__ import annotations
from typing import Generic, Iterable, Iterator, List, NamedTuple, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Entry(NamedTuple, Generic[K, V]):
    """A (key, value) pair produced by in-order traversal."""

    key: K
    value: V


class _Node(Generic[K, V]):
    """A tree node that owns its left and right subtrees."""

    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.left: Optional[_Node[K, V]] = None
        self.right: Optional[_Node[K, V]] = None


class InOrderIterator(Generic[K, V]):
    """Lazy in-order traversal driven by an explicit stack.

    The top of the stack is always the next node to yield. The iterator is
    single-pass; mutating the map while it is live is not supported.
    """

    __slots__ = ("_stack",)

    def __init__(self, root: Optional[_Node[K, V]]) -> None:
        self._stack: List[_Node[K, V]] = []
        self._push_left(root)

    def _push_left(self, node: Optional[_Node[K, V]]) -> None:
        """Push *node* and every left descendant (deepest-left ends on top)."""
        while node is not None:
            self._stack.append(node)
            node = node.left

    def has_next(self) -> bool:
        return bool(self._stack)

    def __next__(self) -> Entry[K, V]:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_left(node.right)
        return Entry(node.key, node.value)

    def __iter__(self) -> "InOrderIterator[K, V]":
        return self


class OrderedMap(Generic[K, V]):
    """An ordered key-value map backed by an unbalanced binary search tree.

    Keys must be mutually comparable with ``<`` and ``>``. The tree is never
    rebalanced, so its shape follows insertion order: sorted input produces
    a chain of height ``n``. Every walk down the tree is a loop, so a chain
    of any length is handled without growing the call stack.

    Complexity
    ----------
    • ``put``/``get``/``delete``: O(height).
    • ``items()``: O(n) total, O(height) extra space.
    """

    __slots__ = ("_root", "_size")

    def __init__(self, it: Optional[Iterable[Tuple[K, V]]] = None) -> None:
        self._root: Optional[_Node[K, V]] = None
        self._size: int = 0
        if it is not None:
            pairs = it.items() if hasattr(it, "items") else it  # type: ignore[attr-defined]
            for k, v in pairs:
                self.put(k, v)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _descend(self, key: K) -> Tuple[Optional[_Node[K, V]], bool, Optional[_Node[K, V]]]:
        """Walk toward *key*.

        Returns ``(parent, from_left, node)``: *node* holds *key* or is None
        where it would be attached, and *from_left* says which child slot of
        *parent* leads to it. *parent* is None for the root slot.
        """
        parent: Optional[_Node[K, V]] = None
        from_left = False
        node = self._root
        while node is not None:
            if key < node.key:
                parent, from_left, node = node, True, node.left
            elif key > node.key:
                parent, from_left, node = node, False, node.right
            else:
                break
        return parent, from_left, node

    def _replace_child(
        self, parent: Optional[_Node[K, V]], from_left: bool, child: Optional[_Node[K, V]]
    ) -> None:
        """Store *child* in the slot that ``_descend`` reported."""
        if parent is None:
            self._root = child
        elif from_left:
            parent.left = child
        else:
            parent.right = child

    def _splice_out(self, node: _Node[K, V]) -> Optional[_Node[K, V]]:
        """Return the subtree that takes *node*'s place once its entry is removed."""
        if node.right is None:
            return node.left
        if node.left is None:
            return node.right

        # Two children: the in-order successor takes this node's place.
        successor = self._find_min(node.right)
        node.key, node.value = successor.key, successor.value
        node.right = self._delete_min(node.right)
        return node

    @staticmethod
    def _find_min(node: _Node[K, V]) -> _Node[K, V]:
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _delete_min(node: _Node[K, V]) -> Optional[_Node[K, V]]:
        """Drop the leftmost node of the subtree, replacing it by its right child."""
        if node.left is None:
            return node.right
        parent = node
        while parent.left.left is not None:
            parent = parent.left
        parent.left = parent.left.right
        return node

    # -----------------------------
    # Core operations
    # -----------------------------
    def put(self, key: K, value: V) -> None:
        """Insert *key* or overwrite its value if already present."""
        parent, from_left, node = self._descend(key)
        if node is not None:
            node.value = value
            return
        self._replace_child(parent, from_left, _Node(key, value))
        self._size += 1

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value stored for *key*, or *default* when absent."""
        node = self._descend(key)[2]
        return default if node is None else node.value

    def delete(self, key: K) -> None:
        """Remove *key* if present; deleting an absent key does nothing."""
        parent, from_left, node = self._descend(key)
        if node is None:
            return
        self._replace_child(parent, from_left, self._splice_out(node))
        self._size -= 1

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        best = 0
        pending: List[Tuple[_Node[K, V], int]] = [(self._root, 1)] if self._root else []
        while pending:
            node, depth = pending.pop()
            best = max(best, depth)
            if node.left is not None:
                pending.append((node.left, depth + 1))
            if node.right is not None:
                pending.append((node.right, depth + 1))
        return best

    def clear(self) -> None:
        self._root = None
        self._size = 0

    # -----------------------------
    # Iteration helpers
    # -----------------------------
    def items(self) -> InOrderIterator[K, V]:
        """Return a lazy iterator of ``Entry(key, value)`` in ascending key order."""
        return InOrderIterator(self._root)

    def keys(self) -> Iterator[K]:
        for k, _ in self.items():
            yield k

    def values(self) -> Iterator[V]:
        for _, v in self.items():
            yield v

    def to_py(self) -> dict[K, V]:
        """Snapshot as a plain *dict* in ascending key order.

        Nested containers exposing ``to_py()`` are converted as well.
        """
        return {
            k: (v.to_py() if callable(getattr(v, "to_py", None)) else v)
            for k, v in self.items()
        }

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __getitem__(self, key: K) -> V:
        node = self._descend(key)[2]
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: K) -> None:
        if key not in self:
            raise KeyError(key)
        self.delete(key)

    def __contains__(self, key: K) -> bool:
        return self._descend(key)[2] is not None

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"OrderedMap({{{pairs}}})"
