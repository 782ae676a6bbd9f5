"""A cursor over the entries of a :class:`~rdbkit.hashtable.Hashtable`."""

from __future__ import annotations

from typing import Any, Optional

from rdbkit.hashtable import Hashtable


class HashtableIterator:
    """A position within a hash table that can move forward and delete.

    The cursor visits entries bucket by bucket and, within a bucket, from
    the head of the chain.  When the table is empty, or every entry has
    been passed, the cursor is exhausted: :meth:`key` and :meth:`value`
    then raise :class:`LookupError`.
    """

    def __init__(self, table: Hashtable) -> None:
        self._table = table
        self._index = len(table._table)
        self._position: Optional[int] = None
        if len(table) == 0:
            return
        self._seek_from(0)

    # -- internals --------------------------------------------------------

    def _seek_from(self, start: int) -> bool:
        """Move to the head of the first non-empty bucket at or after ``start``."""
        buckets = self._table._table
        for index in range(start, len(buckets)):
            if buckets[index]:
                self._index = index
                self._position = 0
                return True
        self._index = len(buckets)
        self._position = None
        return False

    def _current(self):
        if self._position is None:
            raise LookupError("iterator is not positioned on an entry")
        return self._table._table[self._index][self._position]

    # -- public interface -------------------------------------------------

    def key(self) -> Any:
        """Return the key of the entry at the current position."""
        return self._current().key

    def value(self) -> Any:
        """Return the value of the entry at the current position."""
        return self._current().value

    def advance(self) -> bool:
        """Move to the next entry; return False once the end is reached."""
        if self._position is None:
            return False
        chain = self._table._table[self._index]
        if self._position + 1 < len(chain):
            self._position += 1
            return True
        return self._seek_from(self._index + 1)

    def remove(self) -> bool:
        """Delete the current entry and move to the one after it.

        Read the value first if it is still needed.  Returns False when no
        entry follows the removed one.
        """
        self._current()
        chain = self._table._table[self._index]
        del chain[self._position]
        self._table._count -= 1
        if self._position < len(chain):
            return True
        return self._seek_from(self._index + 1)

    def search(self, table: Hashtable, key: Any) -> bool:
        """Point this cursor at the entry of ``table`` matching ``key``.

        Returns False, leaving the cursor untouched, if no entry matches.
        """
        hashvalue = table._hash(key)
        index = table._index_for(hashvalue)
        chain = table._table[index]
        for position, entry in enumerate(chain):
            if entry.hash == hashvalue and table._eqfn(key, entry.key):
                self._table = table
                self._index = index
                self._position = position
                return True
        return False