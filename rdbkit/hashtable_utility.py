"""Helpers that work on an existing :class:`~rdbkit.hashtable.Hashtable`."""

from __future__ import annotations

from typing import Any

from rdbkit.hashtable import Hashtable


def change(table: Hashtable, key: Any, value: Any) -> bool:
    """Rebind ``key`` to ``value`` where the key is already stored.

    Returns True if the key was found and its value replaced, False if the
    table holds no such key (the table is then left unchanged).
    """
    found = table._find(key)
    if found is None:
        return False
    chain, position = found
    chain[position].value = value
    return True