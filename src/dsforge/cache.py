"""
Transformation result cache.

An LRU of TransformationResult keyed by a content hash. Concurrent
requests for the same key share one computation (single-flight): the first
caller starts a task, later callers await the same task. Failed or
cancelled computations are never stored.

All bookkeeping happens between awaits on one event loop, so no lock is
needed.
"""

from __future__ import annotations

import asyncio
import hashlib
import logging
from collections import OrderedDict
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from .core.config import DEFAULT_CACHE_SIZE
from .core.ir import TransformationOptions, TransformationResult, UniversalTokenSchema

logger = logging.getLogger(__name__)


def make_cache_key(
    schema: UniversalTokenSchema, platform: str, options: TransformationOptions
) -> str:
    """SHA-256 over schema identity, content fingerprint, platform and options."""
    parts = (
        schema.id,
        schema.version,
        schema.fingerprint(),
        platform,
        options.cache_token(),
    )
    return hashlib.sha256("\x1f".join(parts).encode("utf-8")).hexdigest()


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0
    coalesced: int = 0
    evictions: int = 0


@dataclass(frozen=True)
class _Entry:
    schema_id: str
    version: str
    result: TransformationResult


class TransformationCache:
    """
    Bounded, single-flight cache of transformation results.

    Storing a result for a schema id drops cached results of every other
    version of that id.
    """

    def __init__(self, max_entries: int = DEFAULT_CACHE_SIZE) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self.stats = CacheStats()
        self._entries: OrderedDict[str, _Entry] = OrderedDict()
        # key -> (schema id, task)
        self._inflight: dict[str, tuple[str, asyncio.Task[TransformationResult]]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: str) -> TransformationResult | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        self._entries.move_to_end(key)
        return entry.result

    async def get_or_compute(
        self,
        key: str,
        schema_id: str,
        version: str,
        factory: Callable[[], Awaitable[TransformationResult]],
    ) -> TransformationResult:
        """
        Return the cached result for ``key``, computing it at most once.

        Cancelling one waiter does not cancel the shared computation.
        """
        cached = self.get(key)
        if cached is not None:
            self.stats.hits += 1
            logger.debug(f"Cache hit {key[:12]} ({schema_id}@{version})")
            return cached

        flight = self._inflight.get(key)
        if flight is not None:
            self.stats.coalesced += 1
            logger.debug(f"Joining in-flight computation {key[:12]}")
            return await asyncio.shield(flight[1])

        self.stats.misses += 1
        logger.debug(f"Cache miss {key[:12]} ({schema_id}@{version})")
        task = asyncio.ensure_future(self._compute(key, schema_id, version, factory))
        self._inflight[key] = (schema_id, task)
        task.add_done_callback(lambda t: self._finish(key, t))
        return await asyncio.shield(task)

    async def _compute(
        self,
        key: str,
        schema_id: str,
        version: str,
        factory: Callable[[], Awaitable[TransformationResult]],
    ) -> TransformationResult:
        result = await factory()
        flight = self._inflight.get(key)
        if flight is not None and flight[1] is asyncio.current_task():
            self._store(key, schema_id, version, result)
        else:
            logger.debug(f"Discarding result of invalidated computation {key[:12]}")
        return result

    def _finish(self, key: str, task: asyncio.Task[TransformationResult]) -> None:
        flight = self._inflight.get(key)
        if flight is not None and flight[1] is task:
            del self._inflight[key]
        # Mark the exception retrieved; waiters re-raise it themselves
        if not task.cancelled():
            task.exception()

    def _store(self, key: str, schema_id: str, version: str, result: TransformationResult) -> None:
        stale = [
            k for k, e in self._entries.items() if e.schema_id == schema_id and e.version != version
        ]
        for k in stale:
            del self._entries[k]
            self.stats.evictions += 1
        if stale:
            logger.debug(f"Dropped {len(stale)} entries for older versions of {schema_id}")

        self._entries[key] = _Entry(schema_id, version, result)
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            self.stats.evictions += 1
            logger.debug(f"Evicted {evicted[:12]}")

    def invalidate(self, schema_id: str | None = None) -> int:
        """
        Drop cached results for one schema id, or everything.

        Matching in-flight computations still answer their current waiters,
        but their results are not stored and later callers start afresh.

        Returns:
            Number of entries removed
        """
        if schema_id is None:
            count = len(self._entries)
            self._entries.clear()
            self._inflight.clear()
        else:
            keys = [k for k, e in self._entries.items() if e.schema_id == schema_id]
            for k in keys:
                del self._entries[k]
            count = len(keys)
            for k in [k for k, (sid, _) in self._inflight.items() if sid == schema_id]:
                del self._inflight[k]
        logger.debug(f"Invalidated {count} cache entries")
        return count
