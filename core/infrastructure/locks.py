"""In-process keyed mutexes."""

import contextlib
import logging
from threading import Lock
from typing import Dict, Hashable, Iterator

from core.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)

DEFAULT_LOCK_TIMEOUT_SECONDS = 10.0


class _Entry:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = Lock()
        self.users = 0


class KeyedLock:
    """
    Thread-safe registry handing out one mutex per key.

    An entry lives only while some thread holds or waits on its key.
    """

    def __init__(self) -> None:
        """Initialise the per-key lock storage."""
        self._entries: Dict[Hashable, _Entry] = {}
        self._guard = Lock()

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)

    def _checkout(self, key: Hashable) -> _Entry:
        with self._guard:
            entry = self._entries.get(key)
            if entry is None:
                entry = _Entry()
                self._entries[key] = entry
            entry.users += 1
            return entry

    def _checkin(self, key: Hashable, entry: _Entry) -> None:
        with self._guard:
            entry.users -= 1
            if entry.users == 0:
                del self._entries[key]

    @contextlib.contextmanager
    def hold(self, key: Hashable, timeout: float = DEFAULT_LOCK_TIMEOUT_SECONDS) -> Iterator[None]:
        """
        Hold the mutex for key for the duration of the block.

        Args:
            key: Lock key
            timeout: Seconds to wait before giving up

        Raises:
            PersistenceError: If the lock is not acquired within timeout
        """
        entry = self._checkout(key)
        try:
            if not entry.lock.acquire(timeout=timeout):
                logger.warning("Timed out waiting for lock %s after %.1fs", key, timeout)
                raise PersistenceError("Timed out waiting for a concurrent update to finish")
            try:
                yield
            finally:
                entry.lock.release()
        finally:
            self._checkin(key, entry)
