"""A chained hash table whose bucket count is always a power of two."""

from __future__ import annotations

from typing import Any, Optional

from rdbkit.hashtable import (
    EqualFunction,
    HashFunction,
    Hashtable,
    HashtableFullError,
)

_MASK32 = 0xFFFFFFFF
MAX_MINSIZE = 1 << 31


class PowerOfTwoHashtable(Hashtable):
    """A :class:`Hashtable` that doubles its bucket count when it grows.

    The initial size is the smallest power of two not below ``minsize``.
    Growth stops once doubling would leave the 32-bit size range.
    """

    def __init__(self, minsize: int = 0,
                 hashfn: Optional[HashFunction] = None,
                 eqfn: Optional[EqualFunction] = None) -> None:
        super().__init__(minsize, hashfn, eqfn)

    def _initial_size(self, minsize: int) -> int:
        if minsize > MAX_MINSIZE:
            raise HashtableFullError(f"requested size {minsize} is too large")
        size = 1
        while size < minsize:
            size <<= 1
        return size

    def _grown_size(self) -> Optional[int]:
        newsize = (len(self._table) << 1) & _MASK32
        return newsize or None

    def remove(self, key: Any) -> Any:
        """Remove ``key`` and return its value; KeyError if it is absent.

        Entries in the key's bucket are matched by the equality function
        alone, without first comparing stored hash values.
        """
        chain = self._table[self._index_for(self._hash(key))]
        for position, entry in enumerate(chain):
            if self._eqfn(key, entry.key):
                del chain[position]
                self._count -= 1
                return entry.value
        raise KeyError(key)