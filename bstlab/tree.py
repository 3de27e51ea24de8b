"""An unbalanced binary search tree ordered by a caller-supplied predicate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class _Node(Generic[T]):
    value: T
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None


class BinaryTree(Generic[T]):
    """Binary search tree.

    ``precedes(a, b)`` must return true when ``a`` belongs before ``b``.
    Items that do not precede an existing node go to its right, so equal
    items keep their insertion order in an ascending walk.
    """

    def __init__(self, precedes: Callable[[T, T], bool]) -> None:
        self._precedes = precedes
        self._root: Optional[_Node[T]] = None
        self._size = 0

    def insert(self, item: T) -> None:
        """Add ``item`` to the tree, keeping it ordered."""
        new = _Node(item)
        if self._root is None:
            self._root = new
        else:
            node = self._root
            while True:
                if self._precedes(item, node.value):
                    if node.left is None:
                        node.left = new
                        break
                    node = node.left
                else:
                    if node.right is None:
                        node.right = new
                        break
                    node = node.right
        self._size += 1

    def extract(self, item: T) -> T:
        """Remove the first node equal to ``item`` and return its stored value.

        Raises KeyError when no such node exists.
        """
        parent: Optional[_Node[T]] = None
        went_left = False
        node = self._root
        while node is not None and node.value != item:
            parent = node
            went_left = not self._precedes(node.value, item)
            node = node.left if went_left else node.right
        if node is None:
            raise KeyError(item)

        removed = node.value
        if node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif went_left:
                parent.left = child
            else:
                parent.right = child
        else:
            # Replace with the rightmost node of the left subtree.
            up, pred = node, node.left
            while pred.right is not None:
                up, pred = pred, pred.right
            node.value = pred.value
            if up is node:
                node.left = pred.left
            else:
                up.right = pred.left
        self._size -= 1
        return removed

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return self.ascending()

    def ascending(self) -> Iterator[T]:
        """Yield the items from smallest to largest."""
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def descending(self) -> Iterator[T]:
        """Yield the items from largest to smallest."""
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            yield node.value
            node = node.left

    def clear(self) -> None:
        """Remove every item."""
        self._root = None
        self._size = 0