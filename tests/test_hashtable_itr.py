from typing import NamedTuple

import pytest

from rdbkit.hashtable import Hashtable
from rdbkit.hashtable_itr import HashtableIterator
from rdbkit.hashtable_powers import PowerOfTwoHashtable

ITEM_COUNT = 4000
_M32 = 0xFFFFFFFF
_M16 = 0xFFFF


class Key(NamedTuple):
    one_ip: int
    two_ip: int
    one_port: int
    two_port: int


def make_key(i: int) -> Key:
    return Key(
        (0xCFCCEE40 + i) & _M32,
        (0xCF0CEE67 - 5 * i) & _M32,
        (22 + 7 * i) & _M16,
        (5522 - 3 * i) & _M16,
    )


def hash_from_key(k: Key) -> int:
    rotated = ((k.one_ip << 17) | (k.one_ip >> 15)) & _M32
    return ((rotated ^ k.two_ip) + k.one_port * 17 + k.two_port * 13 * 29) & _M32


def equal_keys(a: Key, b: Key) -> bool:
    return a == b


def filled(minsize: int, cls=Hashtable):
    table = cls(minsize, hash_from_key, equal_keys)
    for i in range(ITEM_COUNT):
        table.insert(make_key(i), "a value")
    return table


def test_iteration_visits_every_entry():
    table = filled(16)
    assert table.count() == 4000
    itr = HashtableIterator(table)
    seen = []
    while True:
        seen.append(itr.key())
        assert itr.value() == "a value"
        if not itr.advance():
            break
    assert len(seen) == 4000
    assert set(seen) == {make_key(i) for i in range(ITEM_COUNT)}


def test_empty_table_iterator_is_exhausted():
    table = Hashtable(16, hash_from_key, equal_keys)
    itr = HashtableIterator(table)
    assert itr.advance() is False
    with pytest.raises(LookupError):
        itr.key()
    with pytest.raises(LookupError):
        itr.value()
    with pytest.raises(LookupError):
        itr.remove()


def test_search_positions_on_every_key():
    table = filled(16)
    itr = HashtableIterator(table)
    for i in range(ITEM_COUNT):
        key = make_key(i)
        assert itr.search(table, key) is True
        assert itr.key() == key
        assert itr.value() == "a value"


def test_search_missing_key_leaves_cursor():
    table = filled(16)
    itr = HashtableIterator(table)
    start = itr.key()
    assert itr.search(table, make_key(ITEM_COUNT + 10)) is False
    assert itr.key() == start


def test_search_then_remove_every_seventh():
    table = filled(160)
    itr = HashtableIterator(table)
    removed = list(range(ITEM_COUNT - 1, -1, -7))
    for i in removed:
        assert itr.search(table, make_key(i)) is True
        itr.remove()
    assert table.count() == ITEM_COUNT - len(removed)
    for i in removed:
        assert itr.search(table, make_key(i)) is False
        assert make_key(i) not in table
    kept = [i for i in range(ITEM_COUNT) if i not in set(removed)]
    assert all(table.search(make_key(i)) == "a value" for i in kept)


def test_remove_until_empty():
    table = filled(160)
    itr = HashtableIterator(table)
    while itr.remove():
        pass
    assert table.count() == 0
    assert list(table.items()) == []


def test_remove_last_entry_returns_false():
    table = Hashtable()
    table.insert("only", 1)
    itr = HashtableIterator(table)
    assert itr.value() == 1
    assert itr.remove() is False
    assert len(table) == 0
    with pytest.raises(LookupError):
        itr.key()


def test_remove_within_a_collision_chain():
    table = Hashtable(0, lambda k: 0)
    for name in ("a", "b", "c"):
        table.insert(name, name.upper())
    itr = HashtableIterator(table)
    # Newest entries sit at the head of the chain.
    assert itr.key() == "c"
    assert itr.advance() is True
    assert itr.key() == "b"
    assert itr.remove() is True
    assert itr.key() == "a"
    assert itr.remove() is False
    assert len(table) == 1
    assert list(table.items()) == [("c", "C")]


def test_works_with_power_of_two_table():
    table = filled(16, PowerOfTwoHashtable)
    itr = HashtableIterator(table)
    count = 1
    while itr.advance():
        count += 1
    assert count == ITEM_COUNT
    assert itr.search(table, make_key(5)) is True
    itr.remove()
    assert table.count() == ITEM_COUNT - 1
    assert table.search(make_key(5)) is None


def test_search_switches_table():
    first = filled(16)
    second = Hashtable(0, hash_from_key, equal_keys)
    second.insert(make_key(1), "other")
    itr = HashtableIterator(first)
    assert itr.search(second, make_key(1)) is True
    assert itr.value() == "other"
    assert itr.remove() is False
    assert len(second) == 0
    assert len(first) == ITEM_COUNT