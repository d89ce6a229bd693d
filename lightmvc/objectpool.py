"""A thread-safe pool of reusable objects."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable
from typing import Generic, TypeVar

__all__ = ["ObjectPool"]

T = TypeVar("T")


class ObjectPool(Generic[T]):
    """Hands out pre-built objects first in, first out."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._items: deque[T] = deque()
        self._lock = threading.Lock()

    def init(self, count: int) -> None:
        """Add ``count`` new objects built by the factory."""
        with self._lock:
            self._items.extend(self._factory() for _ in range(count))

    def allocate(self) -> T | None:
        """Take the oldest free object, or ``None`` when the pool is empty."""
        with self._lock:
            return self._items.popleft() if self._items else None

    def release(self, item: T) -> None:
        with self._lock:
            self._items.append(item)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)