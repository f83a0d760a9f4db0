"""Time-bounded, single-flight cache around the court directory.

Building a directory is expensive (a full paginated listing, or a snapshot
read), so it happens at most once per time-to-live. The cache holds one
``(directory, expires_at)`` pair and replaces it with a single assignment, so
readers never see a half-built directory.

Refreshes are single-flight: when several callers find the cache expired at
the same time, one of them (the leader) acquires and categorizes while the
rest wait for that result. The lock only elects the leader; it is never held
across acquisition.

A refresh fails when the store returns no records or raises. On a failed
refresh the previous directory, if there is one, is kept and served for
``failure_backoff`` before the next attempt. An empty directory is never
cached.
"""

import asyncio
import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta

from jurisresolver.directory.categorizer import categorize
from jurisresolver.directory.common.exceptions import (
    AcquisitionException,
    EmptyDirectoryException,
)
from jurisresolver.directory.common.stores import CourtRecordStore
from jurisresolver.directory.data_types import CourtDirectory, CourtRecord

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(days=15)
DEFAULT_FAILURE_BACKOFF = timedelta(minutes=1)


@dataclass(frozen=True)
class _Entry:
    directory: CourtDirectory
    expires_at: float


@dataclass
class _Refresh:
    """One in-flight rebuild shared by the leader and its followers."""

    done: threading.Event = field(default_factory=threading.Event)
    directory: CourtDirectory | None = None
    error: Exception | None = None


class _CacheBase:
    """State and rebuild logic shared by the sync and async caches."""

    def __init__(
        self,
        store: CourtRecordStore,
        ttl: timedelta = DEFAULT_TTL,
        failure_backoff: timedelta = DEFAULT_FAILURE_BACKOFF,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            store: Where court records come from.
            ttl: How long a built directory stays fresh.
            failure_backoff: How long a stale directory is served after a
                failed refresh before the next attempt.
            clock: Monotonic clock in seconds. Injectable for tests.
        """
        self.store = store
        self.ttl = ttl
        self.failure_backoff = failure_backoff
        self.clock = clock
        self._entry: _Entry | None = None
        self.refresh_count = 0

    @property
    def directory(self) -> CourtDirectory | None:
        """The cached directory, fresh or stale, without triggering a refresh."""
        entry = self._entry
        return entry.directory if entry else None

    def invalidate(self) -> None:
        """Mark the cached directory expired. It is kept as a stale fallback."""
        entry = self._entry
        if entry is not None:
            self._entry = _Entry(entry.directory, float("-inf"))

    def _fresh_directory(self) -> CourtDirectory | None:
        entry = self._entry
        if entry is not None and self.clock() < entry.expires_at:
            return entry.directory
        return None

    def _fetch(self) -> list[CourtRecord]:
        """Fetch records, treating an exception from the store as no records."""
        try:
            return self.store.fetch_records()
        except Exception as e:
            logger.exception(
                f"Court record store {self.store.name} raised: {e}",
                extra={"source": self.store.name, "error": str(e)},
            )
            return []

    def _build(self, records: list[CourtRecord]) -> CourtDirectory:
        """Categorize fetched records and swap them in.

        Raises:
            AcquisitionException: If the store produced nothing and there is
                no previous directory to fall back to.
        """
        self.refresh_count += 1
        if records:
            directory = categorize(records)
            if not directory.is_empty:
                self._entry = _Entry(
                    directory, self.clock() + self.ttl.total_seconds()
                )
                logger.info(
                    f"Court directory refreshed from {self.store.name} "
                    f"({len(directory)} courts)",
                    extra={"source": self.store.name, "courts": len(directory)},
                )
                return directory

        error = EmptyDirectoryException(self.store.name)
        previous = self._entry
        if previous is None:
            logger.error(
                f"Court directory unavailable: {error.message}",
                extra=error.context,
            )
            raise error

        logger.warning(
            f"{error.message}; keeping stale directory built at "
            f"{previous.directory.built_at.isoformat()}",
            extra=error.context,
        )
        self._entry = _Entry(
            previous.directory,
            self.clock() + self.failure_backoff.total_seconds(),
        )
        return previous.directory


class DirectoryCache(_CacheBase):
    """Thread-safe directory cache.

    Example:
        cache = DirectoryCache(SnapshotCourtStore("resources"))
        directory = cache.ensure_fresh()
    """

    def __init__(
        self,
        store: CourtRecordStore,
        ttl: timedelta = DEFAULT_TTL,
        failure_backoff: timedelta = DEFAULT_FAILURE_BACKOFF,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(store, ttl, failure_backoff, clock)
        self._lock = threading.Lock()
        self._inflight: _Refresh | None = None

    def ensure_fresh(self) -> CourtDirectory:
        """Return a directory built within the TTL, rebuilding if needed.

        Raises:
            AcquisitionException: If the directory cannot be built and no
                previous directory exists.
        """
        directory = self._fresh_directory()
        if directory is not None:
            return directory

        with self._lock:
            directory = self._fresh_directory()
            if directory is not None:
                return directory
            if self._inflight is None:
                refresh = self._inflight = _Refresh()
                is_leader = True
            else:
                refresh = self._inflight
                is_leader = False

        if is_leader:
            try:
                refresh.directory = self._build(self._fetch())
            except Exception as e:
                refresh.error = e
                raise
            finally:
                with self._lock:
                    self._inflight = None
                refresh.done.set()
            return refresh.directory

        refresh.done.wait()
        if refresh.error is not None:
            raise refresh.error
        if refresh.directory is None:
            raise AcquisitionException(
                "Directory refresh finished without a result",
                source=self.store.name,
            )
        return refresh.directory


class AsyncDirectoryCache(_CacheBase):
    """asyncio flavour of DirectoryCache.

    The store is synchronous, so acquisition runs in a worker thread.
    Concurrent awaiters of an expired cache share one refresh task.
    """

    def __init__(
        self,
        store: CourtRecordStore,
        ttl: timedelta = DEFAULT_TTL,
        failure_backoff: timedelta = DEFAULT_FAILURE_BACKOFF,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(store, ttl, failure_backoff, clock)
        self._inflight: asyncio.Task[CourtDirectory] | None = None

    async def ensure_fresh(self) -> CourtDirectory:
        """Return a directory built within the TTL, rebuilding if needed.

        Raises:
            AcquisitionException: If the directory cannot be built and no
                previous directory exists.
        """
        directory = self._fresh_directory()
        if directory is not None:
            return directory

        if self._inflight is None:
            self._inflight = asyncio.create_task(self._refresh())
        # shield: one cancelled awaiter must not cancel the shared refresh
        return await asyncio.shield(self._inflight)

    async def _refresh(self) -> CourtDirectory:
        try:
            records = await asyncio.to_thread(self._fetch)
            return self._build(records)
        finally:
            self._inflight = None
