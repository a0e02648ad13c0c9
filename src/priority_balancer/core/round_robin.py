"""Round-robin over any indexable list."""

from __future__ import annotations

from threading import Lock
from typing import Any, Protocol

from priority_balancer.errors import AlreadySynchronizedError


class IndexedList(Protocol):
    """Anything that can be indexed and has a length."""

    def __getitem__(self, n: int) -> Any: ...

    def __len__(self) -> int: ...


class RoundRobin(Protocol):
    def next(self) -> Any:
        """Return the next item, or None when the list is empty."""
        ...

    def skip(self, n: int) -> None:
        """Advance the cursor by ``n`` items."""
        ...


class CyclicRoundRobin:
    """Cycles through ``items`` in order.

    Not thread-safe; use :func:`new_locked_round_robin` for concurrent use.
    """

    def __init__(self, items: IndexedList) -> None:
        self.items = items
        self._index = 0

    def next(self) -> Any:
        length = len(self.items)
        if length == 0:
            return None

        # the list may have shrunk since the last call
        if self._index >= length:
            self._index = 0

        item = self.items[self._index]
        self._index += 1
        return item

    def skip(self, n: int) -> None:
        length = len(self.items)
        if length:
            self._index = (self._index + n) % length


class LockedRoundRobin:
    """Serializes calls to another round-robin with a mutex."""

    def __init__(self, base: RoundRobin) -> None:
        self._base = base
        self._lock = Lock()

    def next(self) -> Any:
        with self._lock:
            return self._base.next()

    def skip(self, n: int) -> None:
        with self._lock:
            self._base.skip(n)


def locked(rr: RoundRobin) -> LockedRoundRobin:
    """Wrap ``rr`` with a mutex. Raises if it is already wrapped."""
    if isinstance(rr, LockedRoundRobin):
        raise AlreadySynchronizedError()
    return LockedRoundRobin(rr)


def new_round_robin(items: IndexedList) -> CyclicRoundRobin:
    return CyclicRoundRobin(items)


def new_locked_round_robin(items: IndexedList) -> LockedRoundRobin:
    return locked(new_round_robin(items))
