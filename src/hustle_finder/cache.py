"""In-memory TTL caches: per-adapter candidate cache and the engine's result cache.

Both are explicit objects owned by whoever constructs them (adapters and the
engine respectively); there is no module-level cache state.

Result cache strategy:
1. Entries are keyed by the canonical input key (sorted skills + bands)
2. Reads past the TTL are misses and drop the entry
3. A periodic sweep drops anything older than the retention window (24h)
"""

import asyncio
import logging
import threading
import time
from typing import Callable, Generic, Optional, TypeVar

from hustle_finder.models.profile import UserDiscoveryInput
from hustle_finder.models.result import DiscoveryResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 3600.0
DEFAULT_RETENTION_SECONDS = 24 * 3600.0


class TTLCache(Generic[T]):
    """Small thread-safe key/value store with a per-entry time-to-live."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[T, float]] = {}
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, key: str) -> Optional[T]:
        """Return the value if present and younger than the TTL."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, stored_at = entry
            if now - stored_at >= self._ttl:
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: T) -> None:
        """Store value; last writer wins. Expired entries are dropped on every write."""
        now = self._clock()
        with self._lock:
            for stale in [k for k, (_, at) in self._entries.items() if now - at >= self._ttl]:
                del self._entries[stale]
            self._entries[key] = (value, now)

    def purge_older_than(self, max_age_seconds: float) -> int:
        """Remove entries older than max_age_seconds. Returns number removed."""
        now = self._clock()
        with self._lock:
            stale = [k for k, (_, at) in self._entries.items() if now - at > max_age_seconds]
            for k in stale:
                del self._entries[k]
        return len(stale)

    def purge_expired(self) -> int:
        return self.purge_older_than(self._ttl)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None


class ResultCache:
    """Memoizes DiscoveryResult per normalized input."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        retention_seconds: float = DEFAULT_RETENTION_SECONDS,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._store: TTLCache[DiscoveryResult] = TTLCache(ttl_seconds, clock=clock)
        self._retention = retention_seconds

    @staticmethod
    def key_for(user_input: UserDiscoveryInput) -> str:
        return user_input.cache_key()

    def get(self, user_input: UserDiscoveryInput) -> Optional[DiscoveryResult]:
        key = self.key_for(user_input)
        result = self._store.get(key)
        logger.debug("Result cache %s for key=%s", "hit" if result else "miss", key)
        return result

    def put(self, user_input: UserDiscoveryInput, result: DiscoveryResult) -> None:
        self._store.set(self.key_for(user_input), result)

    def sweep(self) -> int:
        """Drop entries older than the retention window, independent of TTL."""
        removed = self._store.purge_older_than(self._retention)
        if removed:
            logger.info("Result cache sweep: removed %d stale entries", removed)
        return removed

    async def run_sweeper(self, interval_seconds: float) -> None:
        """Sweep forever every interval_seconds; stop by cancelling the task."""
        while True:
            await asyncio.sleep(interval_seconds)
            self.sweep()

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
