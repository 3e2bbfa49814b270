"""
Time-bounded snapshot cache for small reference collections.

Author and category lists are re-read from disk at most once per TTL
window. The cache holds one snapshot per collection key together with
the clock reading at capture time; it is created by the service
construction root and passed to the sources that use it.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import threading
import time
from typing import Any, Callable, Generic, TypeVar

from .core.types import ReadOutcome

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5 * 60

T = TypeVar("T")


@dataclass
class _Snapshot(Generic[T]):
    value: T
    captured_at: float


class SnapshotCache:
    """Whole-collection cache with time-based expiry.

    Concurrent misses for the same key are collapsed into a single loader
    call: the first caller loads while the others wait on the per-key lock
    and then see the fresh snapshot.

    Attributes:
        ttl_seconds: Age below which a snapshot is served without reloading
        clock: Monotonic time source in seconds
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] | None = None,
    ):
        self.ttl_seconds = ttl_seconds
        self.clock = clock or time.monotonic
        self._snapshots: dict[str, _Snapshot[Any]] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def get(self, key: str, loader: Callable[[], T]) -> T:
        """Return the cached collection for key, reloading it when stale.

        Failed ReadOutcome results are returned to the caller but not
        stored, so the next call retries storage.
        """
        cached = self._fresh(key)
        if cached is not None:
            return cached.value

        with self._lock_for(key):
            cached = self._fresh(key)
            if cached is not None:
                return cached.value

            value = loader()
            if isinstance(value, ReadOutcome) and value.failed:
                logger.debug(f"Not caching failed read for {key}")
                return value
            self._snapshots[key] = _Snapshot(value=value, captured_at=self.clock())
            logger.debug(f"Cached snapshot for {key}")
            return value

    def invalidate(self, key: str | None = None) -> None:
        if key is None:
            self._snapshots.clear()
        else:
            self._snapshots.pop(key, None)

    def _fresh(self, key: str) -> _Snapshot[Any] | None:
        snapshot = self._snapshots.get(key)
        if snapshot is None:
            return None
        if self.clock() - snapshot.captured_at < self.ttl_seconds:
            return snapshot
        return None

    def _lock_for(self, key: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock
