"""Singly linked list with stack and queue variants built on top of it."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list of values."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.append(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __getitem__(self, position: int) -> T:
        if not isinstance(position, int) or not 0 <= position < self._size:
            raise IndexError(f"position {position!r} out of range")
        for index, item in enumerate(self):
            if index == position:
                return item
        raise IndexError(f"position {position!r} out of range")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def append(self, value: T) -> None:
        """Add a value at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, value: T, position: int) -> bool:
        """Insert before the element at 1-based ``position``.

        Positions outside ``1..len(self)`` leave the list untouched; the
        return value tells whether the value was inserted.
        """
        if not 1 <= position <= self._size:
            return False
        node = _Node(value)
        if position == 1:
            node.next = self._head
            self._head = node
        else:
            previous = self._head
            for _ in range(position - 2):
                assert previous is not None
                previous = previous.next
            assert previous is not None
            node.next = previous.next
            previous.next = node
        self._size += 1
        return True

    def pop_front(self) -> T:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def index(self, value: T) -> int:
        """Return the 0-based position of ``value``, or -1 when absent."""
        for position, item in enumerate(self):
            if item == value:
                return position
        return -1

    def render(self) -> str:
        """Return the values, each followed by a space."""
        return "".join(f"{item} " for item in self)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the values to ``path`` separated by spaces."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.render())

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> "LinkedList[int]":
        """Build a list from the whitespace-separated integers in ``path``."""
        with open(path, encoding="utf-8") as handle:
            return cls(int(token) for token in handle.read().split())


class LinkedStack(LinkedList[T]):
    """Last-in first-out stack kept in a linked list."""

    def push(self, value: T) -> None:
        if len(self) == 0:
            self.append(value)
        else:
            self.insert_at(value, 1)

    def pop(self) -> T:
        return self.pop_front()


class LinkedQueue(LinkedList[T]):
    """First-in first-out queue kept in a linked list."""

    def enqueue(self, value: T) -> None:
        self.append(value)

    def dequeue(self) -> T:
        return self.pop_front()