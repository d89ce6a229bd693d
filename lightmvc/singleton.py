"""Process-wide single instances keyed by class."""

from __future__ import annotations

import threading
from typing import TypeVar

__all__ = ["instance", "reset"]

T = TypeVar("T")

_instances: dict[type, object] = {}
_lock = threading.RLock()


def instance(cls: type[T]) -> T:
    """Return the shared instance of ``cls``, building it with no arguments on first use."""
    with _lock:
        obj = _instances.get(cls)
        if obj is None:
            obj = cls()
            _instances[cls] = obj
        return obj  # type: ignore[return-value]


def reset(cls: type) -> None:
    """Forget the shared instance of ``cls`` so the next call builds a new one."""
    with _lock:
        _instances.pop(cls, None)