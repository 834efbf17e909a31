"""Stack, queue and double-ended list backed by Python sequences."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterator, List, TypeVar

T = TypeVar("T")


class ArrayStack(Generic[T]):
    """Stack whose top is the first element of an array."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def push(self, value: T) -> None:
        self._items.insert(0, value)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop(0)

    def render(self) -> str:
        """Return the items as ``[a,b,c]``, top first."""
        return "[" + ",".join(str(item) for item in self._items) + "]"


class ArrayQueue(Generic[T]):
    """First-in first-out queue backed by an array."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def enqueue(self, value: T) -> None:
        self._items.append(value)

    def dequeue(self) -> T:
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def render(self) -> str:
        """Return the items as ``[a,b,c]``, front first."""
        return "[" + ",".join(str(item) for item in self._items) + "]"


class DoubleEndedList(Generic[T]):
    """List that grows at both ends and shrinks at the back."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def push_back(self, value: T) -> None:
        self._items.append(value)

    def push_front(self, value: T) -> None:
        self._items.appendleft(value)

    def pop_back(self) -> T:
        if not self._items:
            raise IndexError("pop from an empty list")
        return self._items.pop()

    def front(self) -> T:
        if not self._items:
            raise IndexError("front of an empty list")
        return self._items[0]

    def back(self) -> T:
        if not self._items:
            raise IndexError("back of an empty list")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def render(self) -> str:
        """Return the items as ``[a b c ]``."""
        return "[" + "".join(f"{item} " for item in self._items) + "]"