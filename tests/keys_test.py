import os
import sys

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from symtab.datastructures import HashTable, OrderedMap
from symtab.keys import ModuloKey


def test_hash_is_data_mod_eleven():
    assert hash(ModuloKey(25)) == 3
    assert hash(ModuloKey(11)) == 0


def test_equality_is_identity():
    k = ModuloKey(4)
    assert k == k
    assert ModuloKey(4) != ModuloKey(4)
    assert ModuloKey(1) != 1


def test_ordering_follows_data():
    assert ModuloKey(4) < ModuloKey(15)
    assert ModuloKey(15) > ModuloKey(4)
    assert not ModuloKey(4) < ModuloKey(4)
    assert not ModuloKey(4) > ModuloKey(4)


def test_equal_data_stays_distinct_in_hash_table():
    t = HashTable()
    for _ in range(5):
        t.put(ModuloKey(7), 7)
    assert len(t) == 5
    assert t.bucket_sizes()[7] == 5


def test_usable_as_ordered_map_key():
    m = OrderedMap()
    for data in (30, 8, 19):
        m.put(ModuloKey(data), data)
    assert [k.data for k in m.keys()] == [8, 19, 30]
    assert m.get(ModuloKey(19)) == 19
    m.put(ModuloKey(19), "again")
    assert m.size() == 3
    assert m.get(ModuloKey(19)) == "again"
