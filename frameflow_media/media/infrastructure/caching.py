"""
Range Cache Implementations.

Bounded in-memory cache for partial bodies, plus a no-op variant.
"""

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple

from ..domain.interfaces import RangeCache
from ..domain.models import ByteRange

CacheKey = Tuple[str, str, int, int]


class InMemoryRangeCache(RangeCache):
    """In-memory cache for served byte ranges"""

    def __init__(self, max_size_mb: int = 64, max_age_minutes: int = 10):
        self.max_size_bytes = max_size_mb * 1024 * 1024
        self.max_age = timedelta(minutes=max_age_minutes)
        self.logger = logging.getLogger(__name__)

        # Cache storage: {(path, version, start, end): (data, timestamp)}
        self._cache: Dict[CacheKey, Tuple[bytes, datetime]] = {}
        self._current_size = 0
        self._lock = asyncio.Lock()

    async def get(self, path: str, version: str, byte_range: ByteRange) -> Optional[bytes]:
        """Get cached byte range"""
        key = (path, version, byte_range.start, byte_range.end)

        async with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None

            data, timestamp = entry
            if datetime.now() - timestamp > self.max_age:
                self._remove(key)
                self.logger.debug(f"Cache entry expired for {path}")
                return None

            return data

    async def put(self, path: str, version: str, byte_range: ByteRange, data: bytes) -> None:
        """Cache byte range data"""
        if len(data) > self.max_size_bytes:
            return

        key = (path, version, byte_range.start, byte_range.end)

        async with self._lock:
            if key in self._cache:
                self._remove(key)

            while self._current_size + len(data) > self.max_size_bytes and self._cache:
                self._evict_oldest()

            self._cache[key] = (data, datetime.now())
            self._current_size += len(data)

            self.logger.debug(f"Cached {len(data)} bytes for {path} range {byte_range.start}-{byte_range.end}")

    async def invalidate(self, path: str) -> int:
        """Invalidate all cached data for a file"""
        async with self._lock:
            keys_to_remove = [key for key in self._cache if key[0] == path]
            for key in keys_to_remove:
                self._remove(key)

        if keys_to_remove:
            self.logger.info(f"Invalidated {len(keys_to_remove)} cache entries for {path}")
        return len(keys_to_remove)

    async def cleanup(self, max_size_mb: Optional[int] = None) -> int:
        """Clean up cache to stay under size limit"""
        target_size = self.max_size_bytes if max_size_mb is None else max_size_mb * 1024 * 1024
        entries_removed = 0

        async with self._lock:
            current_time = datetime.now()
            expired_keys = [
                key for key, (_, timestamp) in self._cache.items()
                if current_time - timestamp > self.max_age
            ]
            for key in expired_keys:
                self._remove(key)
                entries_removed += 1

            while self._current_size > target_size and self._cache:
                self._evict_oldest()
                entries_removed += 1

        if entries_removed > 0:
            self.logger.info(f"Cache cleanup removed {entries_removed} entries")

        return entries_removed

    async def get_cache_stats(self) -> dict:
        async with self._lock:
            return {
                "entries": len(self._cache),
                "size_bytes": self._current_size,
                "max_size_bytes": self.max_size_bytes,
                "utilization_percent": (self._current_size / self.max_size_bytes) * 100 if self.max_size_bytes else 0.0,
            }

    def _remove(self, key: CacheKey) -> None:
        data, _ = self._cache.pop(key)
        self._current_size -= len(data)

    def _evict_oldest(self) -> None:
        """Evict the oldest cache entry; caller holds the lock"""
        oldest_key = min(self._cache, key=lambda k: self._cache[k][1])
        self._remove(oldest_key)
        self.logger.debug(f"Evicted cache entry: {oldest_key[0]} {oldest_key[2]}-{oldest_key[3]}")


class NoOpRangeCache(RangeCache):
    """No-operation cache that doesn't actually cache anything"""

    async def get(self, path: str, version: str, byte_range: ByteRange) -> Optional[bytes]:
        return None

    async def put(self, path: str, version: str, byte_range: ByteRange, data: bytes) -> None:
        pass

    async def invalidate(self, path: str) -> int:
        return 0

    async def cleanup(self, max_size_mb: Optional[int] = None) -> int:
        return 0
