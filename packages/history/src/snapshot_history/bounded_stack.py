"""
Bounded stack — the capacity-limited LIFO shared by both history directions.

Pushing past the limit silently evicts from the bottom (oldest end). Evicted
and cleared values are handed to an optional release callback; popped values
are not, since ownership moves back to the caller.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Generic, Iterator, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BoundedStack(Generic[T]):
    """
    LIFO stack holding fewer than ``max_size`` values.

    After every push ``len(stack) < max_size`` holds: a push that brings the
    size up to ``max_size`` evicts from the bottom until the bound is restored.
    """

    def __init__(self, max_size: int, release: Callable[[T], object] | None = None) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be >= 1, got {max_size}")
        self._max_size = max_size
        self._release = release
        self._items: deque[T] = deque()

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def length(self) -> int:
        return len(self._items)

    def push(self, value: T) -> list[T]:
        """Push *value* on top and return whatever was evicted, oldest first."""
        self._items.append(value)
        evicted: list[T] = []
        while len(self._items) >= self._max_size:
            oldest = self._items.popleft()
            evicted.append(oldest)
            self._discard(oldest)
        if evicted:
            logger.debug("Evicted %d snapshot(s) at capacity %d", len(evicted), self._max_size)
        return evicted

    def pop(self) -> T:
        """Remove and return the top value. Raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty BoundedStack")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise IndexError("peek at empty BoundedStack")
        return self._items[-1]

    def clear(self) -> int:
        """Release every held value, oldest first. Returns how many were dropped."""
        count = 0
        while self._items:
            self._discard(self._items.popleft())
            count += 1
        return count

    def snapshot(self) -> tuple[T, ...]:
        """Read-only copy of the contents, oldest first."""
        return tuple(self._items)

    def _discard(self, value: T) -> None:
        if self._release is not None:
            self._release(value)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        return f"BoundedStack(max_size={self._max_size}, length={len(self._items)})"
