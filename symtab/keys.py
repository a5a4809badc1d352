from __future__ import annotations

# Matches the default bucket count so each residue lands in its own bucket.
MODULUS = 11


class ModuloKey:
    """Integer key whose hash is ``data % 11``.

    Used by the bucket distribution experiment. Only the hash is derived from
    ``data``: equality stays identity-based, so every instance is a distinct
    key in a :class:`~symtab.datastructures.HashTable` and repeated draws of
    the same number each occupy their own chain node.

    ``<`` and ``>`` compare ``data``, which lets the key be used in an
    :class:`~symtab.datastructures.OrderedMap`; there two instances with the
    same ``data`` address the same entry.
    """

    __slots__ = ("data",)

    def __init__(self, data: int) -> None:
        self.data = data

    def __hash__(self) -> int:
        return self.data % MODULUS

    def __lt__(self, other: "ModuloKey") -> bool:
        if not isinstance(other, ModuloKey):
            return NotImplemented
        return self.data < other.data

    def __gt__(self, other: "ModuloKey") -> bool:
        if not isinstance(other, ModuloKey):
            return NotImplemented
        return self.data > other.data

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ModuloKey({self.data})"
