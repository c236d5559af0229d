"""Simple first-in-first-out queue and last-in-first-out stack."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class FIFO(Generic[T]):
    """A first-in-first-out queue."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: T) -> None:
        self._items.append(item)

    def push_list(self, items: Iterable[T]) -> None:
        self._items.extend(items)

    def pop(self) -> T:
        """Remove and return the oldest item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("empty fifo")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items


class Stack(Generic[T]):
    """A last-in-first-out stack."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the newest item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("empty stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items