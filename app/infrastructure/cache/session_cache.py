"""Process-local session cache in front of the external session lookup.

Memoizes get-session answers for a short freshness window and coalesces
concurrent lookups for the same credentials into one external call. Runs on
a single event loop with no locks: the miss check and the registration of
the pending lookup happen in one synchronous stretch, before any await.

Entry lifecycle per key: absent -> pending -> resolved -> expired (purged on
the next call). A failed lookup removes its entry; failures are never cached.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Mapping

from app.core.constants import (
    DEFAULT_SESSION_CACHE_MAX_ENTRIES,
    DEFAULT_SESSION_CACHE_TTL_MS,
)
from app.infrastructure.auth.session_provider import SessionProvider
from app.infrastructure.cache.keys import session_cache_key
from app.schemas.auth import AuthSession

logger = logging.getLogger(__name__)


class _CacheEntry:
    """Cached answer (value may be None = "no session") or the in-flight lookup."""

    __slots__ = ("expires_at", "value", "pending")

    def __init__(
        self,
        expires_at: float,
        value: AuthSession | None = None,
        pending: asyncio.Future[AuthSession | None] | None = None,
    ) -> None:
        self.expires_at = expires_at
        self.value = value
        self.pending = pending


class SessionCache:
    """TTL-bounded, de-duplicating cache of session lookups keyed by request credentials.

    Capacity is enforced by evicting the oldest-inserted keys (insertion
    order, not LRU). Expired entries are purged lazily on each call; there
    is no background sweep.
    """

    def __init__(
        self,
        provider: SessionProvider,
        ttl_ms: int = DEFAULT_SESSION_CACHE_TTL_MS,
        max_entries: int = DEFAULT_SESSION_CACHE_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize cache.

        Args:
            provider: External session lookup (e.g. HttpSessionProvider).
            ttl_ms: Freshness window for a resolved answer, in milliseconds.
            max_entries: Maximum number of distinct keys held.
            clock: Monotonic clock in seconds; injectable for tests.

        Raises:
            ValueError: If ttl_ms is not positive or max_entries is below 1.
        """
        if ttl_ms <= 0:
            raise ValueError(f"ttl_ms must be positive, got {ttl_ms}")
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self._provider = provider
        self._ttl = ttl_ms / 1000
        self._max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, _CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def clear(self) -> None:
        """Drop every entry. In-flight lookups still complete for their waiters."""
        self._entries.clear()

    async def get_session_cached(self, headers: Mapping[str, str]) -> AuthSession | None:
        """Return the session for these request headers, calling the provider at most once per window.

        Concurrent callers with the same key share one lookup and all receive
        its result or its exception. Exceptions from the provider propagate
        unchanged. A cancelled caller does not cancel the shared lookup.

        Args:
            headers: Incoming request headers.

        Returns:
            The session, or None when the provider reports no session.
        """
        key = session_cache_key(headers)
        now = self._clock()
        self._evict_expired(now)

        entry = self._entries.get(key)
        if entry is not None and entry.expires_at > now:
            if entry.pending is None:
                logger.debug("Session cache HIT")
                return entry.value
            logger.debug("Session cache JOIN in-flight lookup")
            return await asyncio.shield(entry.pending)

        logger.debug("Session cache MISS")
        pending = asyncio.ensure_future(self._provider.get_session(headers))
        self._entries[key] = _CacheEntry(now + self._ttl, pending=pending)
        pending.add_done_callback(lambda task: self._on_lookup_done(key, task))
        self._trim_to_capacity()
        return await asyncio.shield(pending)

    def _on_lookup_done(
        self, key: str, task: asyncio.Future[AuthSession | None]
    ) -> None:
        """Store the result or drop the entry. Only touches the entry this lookup registered."""
        current = self._entries.get(key)
        owned = current is not None and current.pending is task
        if task.cancelled():
            if owned:
                del self._entries[key]
            return
        exc = task.exception()
        if exc is not None:
            if owned:
                del self._entries[key]
            logger.warning("Session lookup failed (%s); entry dropped", type(exc).__name__)
            return
        if owned:
            self._entries[key] = _CacheEntry(self._clock() + self._ttl, value=task.result())

    def _evict_expired(self, now: float) -> None:
        """Remove resolved entries whose freshness window has passed."""
        expired = [
            key
            for key, entry in self._entries.items()
            if entry.pending is None and entry.expires_at <= now
        ]
        for key in expired:
            del self._entries[key]

    def _trim_to_capacity(self) -> None:
        """Evict oldest-inserted keys until the capacity bound holds."""
        evicted = 0
        while len(self._entries) > self._max_entries:
            oldest = next(iter(self._entries))
            del self._entries[oldest]
            evicted += 1
        if evicted:
            logger.debug("Session cache EVICT: %s oldest entries", evicted)
