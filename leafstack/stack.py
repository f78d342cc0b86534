"""A last-in, first-out stack of integers."""

from collections.abc import Iterable


class Stack:
    """LIFO stack of integers."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: list[int] = list(items)

    def push(self, item: int) -> None:
        """Put ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> int:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> int:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        """Return True if the stack holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"