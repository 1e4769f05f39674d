"""A singly linked list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("item", "next")

    def __init__(self, item: Any, next_node: _Node | None = None) -> None:
        self.item = item
        self.next = next_node


class LinkedList:
    """A singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._last: _Node | None = None
        self._size = 0
        for item in items:
            self.append(item)

    def push_front(self, item: Any) -> None:
        """Insert ``item`` at the front."""
        self._head = _Node(item, self._head)
        if self._last is None:
            self._last = self._head
        self._size += 1

    def append(self, item: Any) -> None:
        """Insert ``item`` at the end."""
        node = _Node(item)
        if self._last is None:
            self._head = node
        else:
            self._last.next = node
        self._last = node
        self._size += 1

    def pop_front(self, on_delete: Callable[[Any], None] | None = None) -> Any:
        """Remove and return the first item, passing it to ``on_delete`` first.

        Raises IndexError when the list is empty.
        """
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        if on_delete is not None:
            on_delete(node.item)
        self._head = node.next
        if self._head is None:
            self._last = None
        self._size -= 1
        return node.item

    def clear(self, on_delete: Callable[[Any], None] | None = None) -> None:
        """Remove every item, handing each to ``on_delete`` from last to first."""
        if on_delete is not None:
            for item in reversed(list(self)):
                on_delete(item)
        self._head = None
        self._last = None
        self._size = 0

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on every item, front to back."""
        for item in self:
            func(item)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``func`` applied to every item."""
        return LinkedList(func(item) for item in self)

    def tail(self) -> Any:
        """Return the last item; raises IndexError when the list is empty."""
        if self._last is None:
            raise IndexError("tail of an empty list")
        return self._last.item

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.item
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"