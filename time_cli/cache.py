# ABOUTME: In-memory TTL cache for On This Day lookups, keyed by language/category/date.
# ABOUTME: Stores either a decoded response or the error a fetch raised, expiring on read.

import asyncio
import logging
import time
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from time_cli.config import CACHE_TTL_SECONDS
from time_cli.errors import HistoryError
from time_cli.models import Category, OnThisDayResponse

logger = logging.getLogger(__name__)

CacheKey = tuple[str, Category, int, int]


class CacheEntry(BaseModel):
    """Outcome of one fetch: exactly one of response/error is set."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    expires_at: float
    response: OnThisDayResponse | None = None
    error: HistoryError | None = None

    def unwrap(self) -> OnThisDayResponse:
        if self.error is not None:
            raise self.error.with_traceback(None)
        return self.response


class ResponseCache:
    """Process-local response cache with a fixed time-to-live.

    Expiry is checked on read; there is no other eviction. ``lock_for`` hands out
    one asyncio.Lock per key so a caller can keep at most one fetch in flight
    for that key.
    """

    def __init__(self, ttl_seconds: float = CACHE_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[CacheKey, CacheEntry] = {}
        self._locks: dict[CacheKey, asyncio.Lock] = {}

    def get(self, key: CacheKey) -> CacheEntry | None:
        """Return the live entry for key, dropping it if it has expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() >= entry.expires_at:
            logger.debug("Cache entry expired for %s", key)
            del self._entries[key]
            return None
        return entry

    def put_response(self, key: CacheKey, response: OnThisDayResponse) -> CacheEntry:
        entry = CacheEntry(expires_at=self._clock() + self.ttl_seconds, response=response)
        self._entries[key] = entry
        return entry

    def put_error(self, key: CacheKey, error: HistoryError) -> CacheEntry:
        entry = CacheEntry(expires_at=self._clock() + self.ttl_seconds, error=error)
        self._entries[key] = entry
        return entry

    def lock_for(self, key: CacheKey) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        return lock

    def __len__(self) -> int:
        return len(self._entries)
