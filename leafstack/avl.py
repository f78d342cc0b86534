"""A self-balancing AVL tree of unique integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

from leafstack.stack import Stack


@dataclass(eq=False)
class Node:
    """A tree node; ``height`` is the longest path down to a leaf."""

    data: int = 0
    leftchild: Optional[Node] = None
    rightchild: Optional[Node] = None
    height: int = 0

    def isleaf(self) -> bool:
        """Return True unless the node has both children."""
        return not (self.leftchild and self.rightchild)


def _height(node: Optional[Node]) -> int:
    # An empty subtree has height -1 so that a lone node gets height 0.
    return -1 if node is None else node.height


def _update_height(node: Node) -> None:
    node.height = max(_height(node.leftchild), _height(node.rightchild)) + 1


def _balance_factor(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return _height(node.rightchild) - _height(node.leftchild)


def _rotate_right(y: Node) -> Node:
    x = y.leftchild
    y.leftchild = x.rightchild
    x.rightchild = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: Node) -> Node:
    y = x.rightchild
    x.rightchild = y.leftchild
    y.leftchild = x
    _update_height(x)
    _update_height(y)
    return y


def _rebalance(root: Optional[Node]) -> Optional[Node]:
    if root is None:
        return None
    _update_height(root)
    balance = _balance_factor(root)
    if balance > 1:
        if _balance_factor(root.rightchild) < 0:
            root.rightchild = _rotate_right(root.rightchild)
        return _rotate_left(root)
    if balance < -1:
        if _balance_factor(root.leftchild) > 0:
            root.leftchild = _rotate_left(root.leftchild)
        return _rotate_right(root)
    return root


def _insert(root: Optional[Node], item: int) -> Node:
    if root is None:
        return Node(item)
    if item < root.data:
        root.leftchild = _insert(root.leftchild, item)
    elif item > root.data:
        root.rightchild = _insert(root.rightchild, item)
    else:
        return root
    return _rebalance(root)


def _minimum(root: Node) -> Node:
    while root.leftchild is not None:
        root = root.leftchild
    return root


def _remove(root: Optional[Node], item: int) -> Optional[Node]:
    if root is None:
        return None
    if item < root.data:
        root.leftchild = _remove(root.leftchild, item)
    elif item > root.data:
        root.rightchild = _remove(root.rightchild, item)
    else:
        if root.leftchild is None:
            return root.rightchild
        if root.rightchild is None:
            return root.leftchild
        successor = _minimum(root.rightchild)
        root.data = successor.data
        root.rightchild = _remove(root.rightchild, successor.data)
    return _rebalance(root)


def _postorder_nodes(root: Optional[Node]) -> Iterator[Node]:
    if root is None:
        return
    yield from _postorder_nodes(root.leftchild)
    yield from _postorder_nodes(root.rightchild)
    yield root


def _inner_sum(root: Optional[Node]) -> int:
    # Descent stops at the first node lacking a child; such nodes add nothing.
    if root is None or root.isleaf():
        return 0
    return root.data + _inner_sum(root.leftchild) + _inner_sum(root.rightchild)


class AVLTree:
    """AVL tree holding unique integers; duplicates are ignored."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self.root: Optional[Node] = None
        self._count = 0
        for item in items:
            self.insert(item)

    def clear(self) -> None:
        """Remove every item."""
        self.root = None
        self._count = 0

    def insert(self, item: int) -> Node:
        """Insert ``item`` unless present and return the new root."""
        if self.find(item) is None:
            self._count += 1
            self.root = _insert(self.root, item)
        return self.root

    def remove(self, item: int) -> int:
        """Remove ``item`` and return it; raise KeyError if absent."""
        if self.find(item) is None:
            raise KeyError(item)
        self.root = _remove(self.root, item)
        self._count -= 1
        return item

    def find(self, item: int) -> Optional[int]:
        """Return ``item`` if it is in the tree, otherwise None."""
        node = self.root
        while node is not None:
            if item < node.data:
                node = node.leftchild
            elif item > node.data:
                node = node.rightchild
            else:
                return node.data
        return None

    def __contains__(self, item: int) -> bool:
        return self.find(item) is not None

    def empty(self) -> bool:
        """Return True if the tree holds no items."""
        return self._count == 0

    def __len__(self) -> int:
        return self._count

    def postorder(self) -> Iterator[int]:
        """Yield the items in post-order."""
        for node in _postorder_nodes(self.root):
            yield node.data

    def insert_leaves_to(self, stack: Stack) -> None:
        """Push, in post-order, every node lacking a child onto ``stack``."""
        for node in _postorder_nodes(self.root):
            if node.isleaf():
                stack.push(node.data)

    def sum(self) -> int:
        """Sum the nodes reachable from the root through two-child nodes only."""
        return _inner_sum(self.root)