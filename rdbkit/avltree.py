"""An AVL tree ordered by a user-supplied three-way comparison function."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional

Comparator = Callable[[Any, Any], int]


def _natural_cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class AVLNode:
    """A node of an :class:`AVLTree`, holding one stored item."""

    __slots__ = ("item", "left", "right", "parent", "balance")

    def __init__(self, item: Any) -> None:
        self.item = item
        self.left: Optional[AVLNode] = None
        self.right: Optional[AVLNode] = None
        self.parent: Optional[AVLNode] = None
        # height(right) - height(left)
        self.balance = 0

    def __repr__(self) -> str:
        return f"AVLNode({self.item!r})"

    def next(self) -> Optional[AVLNode]:
        """Return the in-order successor, or None if this is the last node."""
        if self.right is not None:
            return _leftmost(self.right)
        node = self
        parent = node.parent
        while parent is not None and parent.right is node:
            node = parent
            parent = node.parent
        return parent

    def prev(self) -> Optional[AVLNode]:
        """Return the in-order predecessor, or None if this is the first node."""
        if self.left is not None:
            return _rightmost(self.left)
        node = self
        parent = node.parent
        while parent is not None and parent.left is node:
            node = parent
            parent = node.parent
        return parent


def _leftmost(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: AVLNode) -> AVLNode:
    while node.right is not None:
        node = node.right
    return node


class AVLTree:
    """A height-balanced binary search tree.

    ``cmp(existing, key)`` must return a negative number, zero or a positive
    number when ``existing`` sorts before, equal to or after ``key``.
    Without a comparator, items are ordered by ``<`` and ``>``.
    """

    def __init__(self, cmp: Optional[Comparator] = None) -> None:
        self._cmp: Comparator = cmp if cmp is not None else _natural_cmp
        self._root: Optional[AVLNode] = None
        self._first: Optional[AVLNode] = None
        self._last: Optional[AVLNode] = None
        self._height = -1
        self._count = 0

    # -- inspection -------------------------------------------------------

    def first(self) -> Optional[AVLNode]:
        """Return the smallest node, or None when the tree is empty."""
        return self._first

    def last(self) -> Optional[AVLNode]:
        """Return the largest node, or None when the tree is empty."""
        return self._last

    def is_empty(self) -> bool:
        return self._first is None

    def height(self) -> int:
        """Return the tree height: -1 when empty, 0 for a single node."""
        return self._height

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Yield stored items in order; removing the current item is safe."""
        node = self._first
        while node is not None:
            following = node.next()
            yield node.item
            node = following

    # -- lookup -----------------------------------------------------------

    def _search(self, key: Any):
        node = self._root
        parent: Optional[AVLNode] = None
        unbalanced = node
        is_left = False
        while node is not None:
            if node.balance != 0:
                unbalanced = node
            res = self._cmp(node.item, key)
            if res == 0:
                return node, parent, unbalanced, is_left
            parent = node
            is_left = res > 0
            node = node.left if is_left else node.right
        return None, parent, unbalanced, is_left

    def _find_node(self, key: Any) -> AVLNode:
        node = self._search(key)[0]
        if node is None:
            raise KeyError(key)
        return node

    def lookup(self, key: Any) -> Any:
        """Return the stored item comparing equal to ``key``, or None."""
        node = self._search(key)[0]
        return None if node is None else node.item

    # -- rotations --------------------------------------------------------

    def _replace_child(self, parent: Optional[AVLNode], old: AVLNode,
                       new: Optional[AVLNode]) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, p: AVLNode) -> None:
        q = p.right
        assert q is not None
        parent = p.parent
        self._replace_child(parent, p, q)
        q.parent = parent
        p.parent = q
        p.right = q.left
        if p.right is not None:
            p.right.parent = p
        q.left = p

    def _rotate_right(self, p: AVLNode) -> None:
        q = p.left
        assert q is not None
        parent = p.parent
        self._replace_child(parent, p, q)
        q.parent = parent
        p.parent = q
        p.left = q.right
        if p.left is not None:
            p.left.parent = p
        q.right = p

    # -- insertion --------------------------------------------------------

    def insert(self, item: Any) -> Any:
        """Insert ``item``.

        Returns None on success.  If an equal item is already stored, the
        tree is left unchanged and that existing item is returned.
        """
        existing, parent, unbalanced, is_left = self._search(item)
        if existing is not None:
            return existing.item

        node = AVLNode(item)
        self._count += 1

        if parent is None:
            self._root = self._first = self._last = node
            self._height += 1
            return None

        if is_left:
            if parent is self._first:
                self._first = node
            parent.left = node
        else:
            if parent is self._last:
                self._last = node
            parent.right = node
        node.parent = parent

        while True:
            if parent.left is node:
                parent.balance -= 1
            else:
                parent.balance += 1
            if parent is unbalanced:
                break
            node = parent
            parent = parent.parent

        balance = unbalanced.balance
        if balance in (1, -1):
            self._height += 1
        elif balance == 2:
            right = unbalanced.right
            if right.balance == 1:
                unbalanced.balance = 0
                right.balance = 0
            else:
                grand = right.left
                if grand.balance == 1:
                    unbalanced.balance, right.balance = -1, 0
                elif grand.balance == 0:
                    unbalanced.balance, right.balance = 0, 0
                else:
                    unbalanced.balance, right.balance = 0, 1
                grand.balance = 0
                self._rotate_right(right)
            self._rotate_left(unbalanced)
        elif balance == -2:
            left = unbalanced.left
            if left.balance == -1:
                unbalanced.balance = 0
                left.balance = 0
            else:
                grand = left.right
                if grand.balance == 1:
                    unbalanced.balance, left.balance = 0, -1
                elif grand.balance == 0:
                    unbalanced.balance, left.balance = 0, 0
                else:
                    unbalanced.balance, left.balance = 1, 0
                grand.balance = 0
                self._rotate_left(left)
            self._rotate_right(unbalanced)
        return None

    # -- removal ----------------------------------------------------------

    def remove(self, key: Any) -> Any:
        """Remove and return the item equal to ``key``; KeyError if absent."""
        node = self._find_node(key)
        self._remove_node(node)
        self._count -= 1
        return node.item

    def _remove_node(self, node: AVLNode) -> None:
        parent = node.parent
        left = node.left
        right = node.right
        is_left = False

        if node is self._first:
            self._first = node.next()
        if node is self._last:
            self._last = node.prev()

        if left is None:
            successor = right
        elif right is None:
            successor = left
        else:
            successor = _leftmost(right)

        if parent is not None:
            is_left = parent.left is node
            if is_left:
                parent.left = successor
            else:
                parent.right = successor
        else:
            self._root = successor

        if left is not None and right is not None:
            successor.balance = node.balance
            successor.left = left
            left.parent = successor
            if successor is not right:
                parent = successor.parent
                successor.parent = node.parent
                current = successor.right
                parent.left = current
                is_left = True
                successor.right = right
                right.parent = successor
            else:
                successor.parent = parent
                parent = successor
                current = parent.right
                is_left = False
        else:
            current = successor

        if current is not None:
            current.parent = parent

        while parent is not None:
            node = parent
            parent = parent.parent

            if is_left:
                is_left = parent is not None and parent.left is node
                node.balance += 1
                if node.balance == 0:
                    continue
                if node.balance == 1:
                    return
                right = node.right
                if right.balance == 0:
                    node.balance, right.balance = 1, -1
                    self._rotate_left(node)
                    return
                if right.balance == -1:
                    grand = right.left
                    if grand.balance == 1:
                        node.balance, right.balance = -1, 0
                    elif grand.balance == 0:
                        node.balance, right.balance = 0, 0
                    else:
                        node.balance, right.balance = 0, 1
                    grand.balance = 0
                    self._rotate_right(right)
                else:
                    node.balance, right.balance = 0, 0
                self._rotate_left(node)
            else:
                is_left = parent is not None and parent.left is node
                node.balance -= 1
                if node.balance == 0:
                    continue
                if node.balance == -1:
                    return
                left = node.left
                if left.balance == 0:
                    node.balance, left.balance = -1, 1
                    self._rotate_right(node)
                    return
                if left.balance == 1:
                    grand = left.right
                    if grand.balance == 1:
                        node.balance, left.balance = 0, -1
                    elif grand.balance == 0:
                        node.balance, left.balance = 0, 0
                    else:
                        node.balance, left.balance = 1, 0
                    grand.balance = 0
                    self._rotate_left(left)
                else:
                    node.balance, left.balance = 0, 0
                self._rotate_right(node)
        self._height -= 1

    # -- replacement ------------------------------------------------------

    def replace(self, old: Any, new: Any) -> Any:
        """Put ``new`` in the place of the item equal to ``old``.

        ``new`` takes over the position of the old item without any
        rebalancing, so it should sort the same.  Returns the old item;
        raises KeyError if no item equals ``old``.
        """
        node = self._find_node(old)
        previous = node.item
        node.item = new
        return previous