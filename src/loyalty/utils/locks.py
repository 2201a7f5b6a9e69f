"""Keyed locks that serialize read-modify-write sequences within a process.

A key's lock exists only while some caller holds or waits for it, so the
registry stays as small as the number of keys in use.
"""

import threading
from contextlib import contextmanager

_registry_lock = threading.Lock()
# key -> [lock, number of callers holding or waiting for it]
_locks: dict[str, list] = {}


def _checkout(key: str) -> threading.Lock:
    with _registry_lock:
        entry = _locks.get(key)
        if entry is None:
            entry = _locks[key] = [threading.Lock(), 0]
        entry[1] += 1
        return entry[0]


def _checkin(key: str) -> None:
    with _registry_lock:
        entry = _locks[key]
        entry[1] -= 1
        if entry[1] == 0:
            del _locks[key]


@contextmanager
def serialized(*keys: str):
    """Hold the locks for all ``keys`` for the duration of the block.

    Locks are acquired in sorted order so that two callers asking for
    overlapping key sets cannot deadlock each other.
    """
    acquired = []
    try:
        for key in sorted(set(keys)):
            lock = _checkout(key)
            try:
                lock.acquire()
            except BaseException:
                _checkin(key)
                raise
            acquired.append((key, lock))
        yield
    finally:
        for key, lock in reversed(acquired):
            lock.release()
            _checkin(key)
