"""Readiness notification over a set of sockets, in the style of epoll."""

from __future__ import annotations

import contextlib
import enum
import errno
import select
import selectors
from dataclasses import dataclass
from typing import Any

__all__ = ["EventMask", "Event", "EventPoller"]


class EventMask(enum.IntFlag):
    IN = 0x001
    PRI = 0x002
    OUT = 0x004
    ERR = 0x008
    HUP = 0x010
    ONESHOT = 1 << 30
    ET = 1 << 31


_REPORTED = EventMask.IN | EventMask.PRI | EventMask.OUT | EventMask.ERR | EventMask.HUP


@dataclass(frozen=True)
class Event:
    """One ready socket together with the data it was registered with."""

    sock: Any
    data: Any
    events: EventMask


def _fd(sock: Any) -> int:
    fd = sock if isinstance(sock, int) else sock.fileno()
    if fd < 0:
        raise ValueError("socket is not open")
    return fd


class _EpollBackend:
    def __init__(self, size: int) -> None:
        self._epoll = select.epoll(size)

    def register(self, fd: int, mask: int) -> None:
        self._epoll.register(fd, mask)

    def modify(self, fd: int, mask: int) -> None:
        self._epoll.modify(fd, mask)

    def unregister(self, fd: int) -> None:
        self._epoll.unregister(fd)

    def poll(self, timeout: float | None, max_events: int) -> list[tuple[int, int]]:
        return self._epoll.poll(-1 if timeout is None else timeout, max_events)

    def close(self) -> None:
        self._epoll.close()


class _SelectorBackend:
    """Level-triggered readiness with one-shot registrations emulated."""

    def __init__(self) -> None:
        self._selector = selectors.DefaultSelector()
        self._masks: dict[int, int] = {}
        self._armed: set[int] = set()

    def _arm(self, fd: int, mask: int) -> None:
        wanted = 0
        if mask & (EventMask.IN | EventMask.PRI):
            wanted |= selectors.EVENT_READ
        if mask & EventMask.OUT:
            wanted |= selectors.EVENT_WRITE
        if fd in self._armed:
            if wanted:
                self._selector.modify(fd, wanted)
            else:
                self._selector.unregister(fd)
                self._armed.discard(fd)
        elif wanted:
            self._selector.register(fd, wanted)
            self._armed.add(fd)

    def register(self, fd: int, mask: int) -> None:
        if fd in self._masks:
            raise FileExistsError(errno.EEXIST, "file descriptor already registered")
        self._masks[fd] = mask
        self._arm(fd, mask)

    def modify(self, fd: int, mask: int) -> None:
        if fd not in self._masks:
            raise FileNotFoundError(errno.ENOENT, "file descriptor not registered")
        self._masks[fd] = mask
        self._arm(fd, mask)

    def unregister(self, fd: int) -> None:
        if self._masks.pop(fd, None) is None:
            raise FileNotFoundError(errno.ENOENT, "file descriptor not registered")
        if fd in self._armed:
            self._selector.unregister(fd)
            self._armed.discard(fd)

    def poll(self, timeout: float | None, max_events: int) -> list[tuple[int, int]]:
        results: list[tuple[int, int]] = []
        for key, ready in self._selector.select(timeout):
            fd = key.fd
            mask = 0
            if ready & selectors.EVENT_READ:
                mask |= EventMask.IN
            if ready & selectors.EVENT_WRITE:
                mask |= EventMask.OUT
            if self._masks[fd] & EventMask.ONESHOT:
                self._selector.unregister(fd)
                self._armed.discard(fd)
            results.append((fd, mask))
            if len(results) >= max_events:
                break
        return results

    def close(self) -> None:
        self._selector.close()


class EventPoller:
    """Watches registered sockets and reports the ready ones.

    Registrations are edge-triggered unless ``edge_triggered`` is false.
    """

    def __init__(self, edge_triggered: bool = True) -> None:
        self.edge_triggered = edge_triggered
        self.max_connections = 0
        self._backend: _EpollBackend | _SelectorBackend | None = None
        self._entries: dict[int, tuple[Any, Any]] = {}

    def create(self, max_connections: int) -> None:
        """Set up for up to ``max_connections`` sockets, dropping earlier registrations."""
        self.close()
        self.max_connections = max_connections
        if hasattr(select, "epoll"):
            self._backend = _EpollBackend(max_connections + 1)
        else:
            self._backend = _SelectorBackend()

    def _require(self) -> _EpollBackend | _SelectorBackend:
        if self._backend is None:
            raise RuntimeError("event poller has not been created")
        return self._backend

    def _mask(self, events: int) -> int:
        mask = EventMask(events)
        if self.edge_triggered:
            mask |= EventMask.ET
        return int(mask)

    def add(self, sock: Any, data: Any = None, events: int = EventMask.IN) -> None:
        fd = _fd(sock)
        self._require().register(fd, self._mask(events))
        self._entries[fd] = (sock, data)

    def mod(self, sock: Any, data: Any = None, events: int = EventMask.IN) -> None:
        fd = _fd(sock)
        self._require().modify(fd, self._mask(events))
        self._entries[fd] = (sock, data)

    def remove(self, sock: Any) -> None:
        """Stop watching ``sock``; unknown sockets are ignored."""
        fd = _fd(sock)
        if self._entries.pop(fd, None) is None:
            return
        with contextlib.suppress(OSError):
            self._require().unregister(fd)

    def wait(self, timeout_ms: int) -> list[Event]:
        """Ready sockets, at most ``max_connections + 1``; a negative timeout waits forever."""
        backend = self._require()
        timeout = None if timeout_ms < 0 else timeout_ms / 1000
        events = []
        for fd, mask in backend.poll(timeout, self.max_connections + 1):
            entry = self._entries.get(fd)
            if entry is not None:
                events.append(Event(entry[0], entry[1], EventMask(mask & int(_REPORTED))))
        return events

    def close(self) -> None:
        if self._backend is not None:
            self._backend.close()
            self._backend = None
        self._entries.clear()