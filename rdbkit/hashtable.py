"""A chained hash table that grows through a fixed list of prime sizes."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

_MASK32 = 0xFFFFFFFF

PRIMES = (
    53, 97, 193, 389,
    769, 1543, 3079, 6151,
    12289, 24593, 49157, 98317,
    196613, 393241, 786433, 1572869,
    3145739, 6291469, 12582917, 25165843,
    50331653, 100663319, 201326611, 402653189,
    805306457, 1610612741,
)
MAX_LOAD_FACTOR = 0.65
MAX_MINSIZE = 1 << 30

HashFunction = Callable[[Any], int]
EqualFunction = Callable[[Any, Any], Any]


def mix_hash(value: int) -> int:
    """Scramble a 32-bit hash value to protect against weak hash functions."""
    i = value & _MASK32
    i = (i + (~(i << 9) & _MASK32)) & _MASK32
    i ^= ((i >> 14) | (i << 18)) & _MASK32
    i = (i + (i << 4)) & _MASK32
    i ^= ((i >> 10) | (i << 22)) & _MASK32
    return i


class HashtableFullError(ValueError):
    """Raised when the requested table size is beyond what is supported."""


@dataclass
class _Entry:
    key: Any
    value: Any
    hash: int


def _default_hash(key: Any) -> int:
    return hash(key) & _MASK32


class Hashtable:
    """A hash table with separate chaining.

    ``hashfn(key)`` gives an integer hash and ``eqfn(a, b)`` tells whether
    two keys are equal.  Duplicate keys may be inserted; searching then
    finds one of them.  The table grows once the number of entries passes
    65% of the number of buckets.
    """

    def __init__(self, minsize: int = 0,
                 hashfn: Optional[HashFunction] = None,
                 eqfn: Optional[EqualFunction] = None) -> None:
        self._hashfn: HashFunction = hashfn if hashfn is not None else _default_hash
        self._eqfn: EqualFunction = eqfn if eqfn is not None else operator.eq
        size = self._initial_size(minsize)
        self._table: list[list[_Entry]] = [[] for _ in range(size)]
        self._count = 0
        self._loadlimit = self._limit_for(size)

    # -- sizing hooks -----------------------------------------------------

    def _initial_size(self, minsize: int) -> int:
        if minsize > MAX_MINSIZE:
            raise HashtableFullError(f"requested size {minsize} is too large")
        for index, prime in enumerate(PRIMES):
            if prime > minsize:
                self._prime_index = index
                return prime
        self._prime_index = len(PRIMES) - 1
        return PRIMES[0]

    def _grown_size(self) -> Optional[int]:
        if self._prime_index == len(PRIMES) - 1:
            return None
        self._prime_index += 1
        return PRIMES[self._prime_index]

    @staticmethod
    def _limit_for(size: int) -> int:
        return math.ceil(size * MAX_LOAD_FACTOR)

    # -- internals --------------------------------------------------------

    def _hash(self, key: Any) -> int:
        return mix_hash(self._hashfn(key))

    def _index_for(self, hashvalue: int) -> int:
        return hashvalue % len(self._table)

    def _expand(self) -> bool:
        newsize = self._grown_size()
        if newsize is None:
            return False
        newtable: list[list[_Entry]] = [[] for _ in range(newsize)]
        # Entries are moved head first and pushed onto the new chains,
        # which reverses the relative order of colliding entries.
        for chain in self._table:
            for entry in chain:
                newtable[entry.hash % newsize].insert(0, entry)
        self._table = newtable
        self._loadlimit = self._limit_for(newsize)
        return True

    def _find(self, key: Any) -> Optional[tuple[list[_Entry], int]]:
        hashvalue = self._hash(key)
        chain = self._table[self._index_for(hashvalue)]
        for position, entry in enumerate(chain):
            if entry.hash == hashvalue and self._eqfn(key, entry.key):
                return chain, position
        return None

    # -- public interface -------------------------------------------------

    def insert(self, key: Any, value: Any) -> None:
        """Add ``key`` with ``value``; an existing equal key is not replaced."""
        self._count += 1
        if self._count > self._loadlimit:
            # If the table cannot grow, the entry still goes in.
            self._expand()
        hashvalue = self._hash(key)
        self._table[self._index_for(hashvalue)].insert(
            0, _Entry(key, value, hashvalue))

    def search(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None if there is none."""
        found = self._find(key)
        if found is None:
            return None
        chain, position = found
        return chain[position].value

    def remove(self, key: Any) -> Any:
        """Remove ``key`` and return its value; KeyError if it is absent."""
        found = self._find(key)
        if found is None:
            raise KeyError(key)
        chain, position = found
        entry = chain.pop(position)
        self._count -= 1
        return entry.value

    def count(self) -> int:
        """Return the number of stored entries."""
        return self._count

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs bucket by bucket."""
        for chain in self._table:
            for entry in chain:
                yield entry.key, entry.value

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        for key, _ in self.items():
            yield key

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __getitem__(self, key: Any) -> Any:
        found = self._find(key)
        if found is None:
            raise KeyError(key)
        chain, position = found
        return chain[position].value