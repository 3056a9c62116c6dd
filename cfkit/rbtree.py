"""An ordered map built on a red-black tree."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

_MISSING = object()


class _Node:
    __slots__ = ("key", "value", "red", "left", "right", "parent")

    def __init__(self, key: Any, value: Any, parent: _Node | None) -> None:
        self.key = key
        self.value = value
        self.red = True
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.parent = parent


def _is_red(node: _Node | None) -> bool:
    return node is not None and node.red


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


def _successor(node: _Node) -> _Node | None:
    if node.right is not None:
        return _leftmost(node.right)
    parent = node.parent
    while parent is not None and node is parent.right:
        node, parent = parent, parent.parent
    return parent


class RBTree:
    """A mapping whose keys are kept in sorted order.

    Keys must be mutually comparable. Insertion, removal and lookup take
    logarithmic time.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    # -- rotations ---------------------------------------------------------

    def _replace_child(self, parent: _Node | None, old: _Node, new: _Node | None) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, node: _Node) -> None:
        right = node.right
        assert right is not None
        node.right = right.left
        if right.left is not None:
            right.left.parent = node
        right.left = node
        parent = node.parent
        right.parent = parent
        self._replace_child(parent, node, right)
        node.parent = right

    def _rotate_right(self, node: _Node) -> None:
        left = node.left
        assert left is not None
        node.left = left.right
        if left.right is not None:
            left.right.parent = node
        left.right = node
        parent = node.parent
        left.parent = parent
        self._replace_child(parent, node, left)
        node.parent = left

    # -- rebalancing -------------------------------------------------------

    def _insert_color(self, node: _Node) -> None:
        while (parent := node.parent) is not None and parent.red:
            gparent = parent.parent
            assert gparent is not None
            if parent is gparent.left:
                uncle = gparent.right
                if _is_red(uncle):
                    uncle.red = False
                    parent.red = False
                    gparent.red = True
                    node = gparent
                    continue
                if parent.right is node:
                    self._rotate_left(parent)
                    parent, node = node, parent
                parent.red = False
                gparent.red = True
                self._rotate_right(gparent)
            else:
                uncle = gparent.left
                if _is_red(uncle):
                    uncle.red = False
                    parent.red = False
                    gparent.red = True
                    node = gparent
                    continue
                if parent.left is node:
                    self._rotate_right(parent)
                    parent, node = node, parent
                parent.red = False
                gparent.red = True
                self._rotate_left(gparent)
        assert self._root is not None
        self._root.red = False

    def _erase_color(self, node: _Node | None, parent: _Node | None) -> None:
        while not _is_red(node) and node is not self._root:
            assert parent is not None
            if parent.left is node:
                other = parent.right
                assert other is not None
                if other.red:
                    other.red = False
                    parent.red = True
                    self._rotate_left(parent)
                    other = parent.right
                    assert other is not None
                if not _is_red(other.left) and not _is_red(other.right):
                    other.red = True
                    node = parent
                    parent = node.parent
                else:
                    if not _is_red(other.right):
                        assert other.left is not None
                        other.left.red = False
                        other.red = True
                        self._rotate_right(other)
                        other = parent.right
                        assert other is not None
                    other.red = parent.red
                    parent.red = False
                    assert other.right is not None
                    other.right.red = False
                    self._rotate_left(parent)
                    node = self._root
                    break
            else:
                other = parent.left
                assert other is not None
                if other.red:
                    other.red = False
                    parent.red = True
                    self._rotate_right(parent)
                    other = parent.left
                    assert other is not None
                if not _is_red(other.left) and not _is_red(other.right):
                    other.red = True
                    node = parent
                    parent = node.parent
                else:
                    if not _is_red(other.left):
                        assert other.right is not None
                        other.right.red = False
                        other.red = True
                        self._rotate_left(other)
                        other = parent.left
                        assert other is not None
                    other.red = parent.red
                    parent.red = False
                    assert other.left is not None
                    other.left.red = False
                    self._rotate_right(parent)
                    node = self._root
                    break
        if node is not None:
            node.red = False

    def _erase(self, node: _Node) -> None:
        if node.left is None or node.right is None:
            child = node.right if node.left is None else node.left
            parent = node.parent
            red = node.red
            if child is not None:
                child.parent = parent
            self._replace_child(parent, node, child)
        else:
            old = node
            node = _leftmost(old.right)
            self._replace_child(old.parent, old, node)
            child = node.right
            parent = node.parent
            red = node.red
            if parent is old:
                parent = node
            else:
                if child is not None:
                    child.parent = parent
                assert parent is not None
                parent.left = child
                node.right = old.right
                old.right.parent = node
            node.parent = old.parent
            node.red = old.red
            node.left = old.left
            old.left.parent = node
        if not red:
            self._erase_color(child, parent)

    # -- public interface --------------------------------------------------

    def _find(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                return node
        return None

    def insert(self, key: Any, value: Any = None) -> None:
        """Map ``key`` to ``value``, replacing any value it already had."""
        parent: _Node | None = None
        link = self._root
        went_left = False
        while link is not None:
            parent = link
            if key < link.key:
                link, went_left = link.left, True
            elif link.key < key:
                link, went_left = link.right, False
            else:
                link.value = value
                return
        node = _Node(key, value, parent)
        if parent is None:
            self._root = node
        elif went_left:
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._insert_color(node)

    def remove(self, key: Any) -> Any:
        """Remove ``key`` and return its value; raise KeyError if absent."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        self._erase(node)
        self._size -= 1
        return node.value

    def get(self, key: Any, default: Any = None) -> Any:
        """The value for ``key``, or ``default`` if it is absent."""
        node = self._find(key)
        return default if node is None else node.value

    def first(self) -> tuple[Any, Any] | None:
        """The smallest ``(key, value)`` pair, or None when empty."""
        if self._root is None:
            return None
        node = _leftmost(self._root)
        return node.key, node.value

    def last(self) -> tuple[Any, Any] | None:
        """The largest ``(key, value)`` pair, or None when empty."""
        if self._root is None:
            return None
        node = _rightmost(self._root)
        return node.key, node.value

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        node = None if self._root is None else _leftmost(self._root)
        while node is not None:
            yield node.key, node.value
            node = _successor(node)

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self.items())

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __getitem__(self, key: Any) -> Any:
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key: Any, value: Any) -> None:
        self.insert(key, value)

    def __delitem__(self, key: Any) -> None:
        self.remove(key)

    def _check(self) -> int:
        """Verify the red-black properties and return the black height."""
        if _is_red(self._root):
            raise ValueError("root is red")

        def walk(node: _Node | None, parent: _Node | None) -> int:
            if node is None:
                return 1
            if node.parent is not parent:
                raise ValueError("broken parent link")
            if node.red and (_is_red(node.left) or _is_red(node.right)):
                raise ValueError("red node with red child")
            if node.left is not None and not node.left.key < node.key:
                raise ValueError("left child out of order")
            if node.right is not None and not node.key < node.right.key:
                raise ValueError("right child out of order")
            left = walk(node.left, node)
            if left != walk(node.right, node):
                raise ValueError("unequal black heights")
            return left + (0 if node.red else 1)

        return walk(self._root, None)