from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from contextlib import ExitStack, contextmanager

LockKey = tuple[str, ...]


class KeyedLocks:
    """
    Registry of per-key locks, e.g. one per (court, date) and (coach, date).
    An entry lives only while some caller holds or waits on it.
    """

    def __init__(self) -> None:
        self._locks: dict[LockKey, threading.Lock] = {}
        self._users: dict[LockKey, int] = {}
        self._lock_lock = threading.Lock()  # guards both dicts

    def __len__(self) -> int:
        with self._lock_lock:
            return len(self._locks)

    def _checkout(self, key: LockKey) -> threading.Lock:
        with self._lock_lock:
            if key not in self._locks:
                self._locks[key] = threading.Lock()
                self._users[key] = 0
            self._users[key] += 1
            return self._locks[key]

    def _release(self, key: LockKey) -> None:
        with self._lock_lock:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]

    @contextmanager
    def hold(self, keys: Iterable[LockKey]) -> Iterator[None]:
        """Hold every lock in ``keys``; sorted acquisition keeps callers deadlock-free."""
        ordered = sorted(set(keys))
        with ExitStack() as stack:
            for key in ordered:
                lock = self._checkout(key)
                stack.callback(self._release, key)
                stack.enter_context(lock)
            yield
