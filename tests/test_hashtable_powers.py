import pytest

from rdbkit.hashtable import HashtableFullError
from rdbkit.hashtable_powers import PowerOfTwoHashtable

ITEM_COUNT = 4000


def _key(i):
    return (
        (0xCFCCEE40 + i) & 0xFFFFFFFF,
        (0xCF0CEE67 - 5 * i) & 0xFFFFFFFF,
        (22 + 7 * i) & 0xFFFF,
        (5522 - 3 * i) & 0xFFFF,
    )


def _hash_from_key(k):
    one_ip, two_ip, one_port, two_port = k
    rotated = ((one_ip << 17) | (one_ip >> 15)) & 0xFFFFFFFF
    return ((rotated ^ two_ip) + one_port * 17 + two_port * 13 * 29) & 0xFFFFFFFF


def _equal(a, b):
    return a == b


def _filled(minsize=16):
    t = PowerOfTwoHashtable(minsize, _hash_from_key, _equal)
    for i in range(ITEM_COUNT):
        t.insert(_key(i), "a value")
    return t


def test_initial_size_is_power_of_two_at_least_minsize():
    t = PowerOfTwoHashtable(100)
    size = len(t._table)
    assert size >= 100
    assert size & (size - 1) == 0


def test_exact_power_of_two_minsize_is_kept():
    assert len(PowerOfTwoHashtable(16)._table) == 16


def test_too_large_minsize_raises():
    with pytest.raises(HashtableFullError):
        PowerOfTwoHashtable((1 << 31) + 1)


def test_insert_count_and_search():
    t = _filled()
    assert t.count() == ITEM_COUNT
    assert all(t.search(_key(i)) == "a value" for i in range(ITEM_COUNT))


def test_table_grows_and_stays_power_of_two():
    t = _filled(1)
    size = len(t._table)
    assert size > ITEM_COUNT
    assert size & (size - 1) == 0


def test_iteration_visits_every_key():
    t = _filled(160)
    assert set(t) == {_key(i) for i in range(ITEM_COUNT)}


def test_remove_all():
    t = _filled()
    for i in range(ITEM_COUNT):
        assert t.remove(_key(i)) == "a value"
    assert len(t) == 0
    assert t.search(_key(0)) is None


def test_remove_missing_raises_key_error():
    t = PowerOfTwoHashtable(4)
    t.insert("a", 1)
    with pytest.raises(KeyError):
        t.remove("b")
    assert len(t) == 1


def test_remove_matches_by_equality_within_bucket():
    t = PowerOfTwoHashtable(8, hashfn=lambda k: 0, eqfn=lambda a, b: a % 10 == b % 10)
    t.insert(3, "three")
    t.insert(4, "four")
    assert t.remove(13) == "three"
    assert t.search(3) is None
    assert t.search(4) == "four"
    assert len(t) == 1