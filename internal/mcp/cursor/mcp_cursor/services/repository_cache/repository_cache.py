"""Repository cache - TTL snapshot of /repositories with single-flight refresh."""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Iterable, Sequence

from mcp_cursor.constants import REPOSITORIES_CACHE_TTL_SECONDS
from mcp_cursor.errors import CacheRefreshError, CursorAPIError
from mcp_cursor.schemas import Repositories, Repository
from mcp_cursor.services.repository_cache.dto import (
    CacheEntry,
    ListingQuery,
    ListingView,
)

logger = logging.getLogger(__name__)


class RepositoryCache:
    """
    Holds a single snapshot of the accessible repositories.

    A fresh snapshot is served without I/O. When it is absent or stale, one
    refresh is started and every concurrent caller awaits that same refresh.
    A failed refresh is raised to all waiters; the stale snapshot is never
    served in its place.
    """

    def __init__(
        self,
        fetch: Callable[[], Awaitable[Repositories]],
        ttl: float = REPOSITORIES_CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._fetch = fetch
        self._ttl = ttl
        self._clock = clock
        self._entry: CacheEntry | None = None
        self._refresh: asyncio.Task[CacheEntry] | None = None

    async def get_repositories(self) -> tuple[Repository, ...]:
        entry = self._entry
        if entry is not None and entry.is_fresh(self._clock()):
            return entry.payload

        if self._refresh is None:
            self._refresh = asyncio.create_task(self._do_refresh())
            self._refresh.add_done_callback(_consume_exception)
        # Shield so a cancelled caller does not cancel the shared refresh
        entry = await asyncio.shield(self._refresh)
        return entry.payload

    async def _do_refresh(self) -> CacheEntry:
        logger.info("Refreshing repository cache")
        try:
            result = await self._fetch()
        except CursorAPIError as e:
            logger.warning(f"Repository cache refresh failed: {e}")
            raise CacheRefreshError(e) from e
        finally:
            self._refresh = None

        entry = CacheEntry(
            payload=tuple(result.repositories),
            fetched_at=self._clock(),
            ttl=self._ttl,
        )
        self._entry = entry
        logger.info(f"Repository cache holds {len(entry.payload)} repositories")
        return entry


def _consume_exception(task: asyncio.Task) -> None:
    # Waiters may all be cancelled; mark a failure as retrieved regardless
    if not task.cancelled():
        task.exception()


def _filter(
    repositories: Iterable[Repository], search: str | None, owner: str | None
) -> list[Repository]:
    result = list(repositories)
    if search is not None:
        needle = search.lower()
        result = [r for r in result if needle in r.name.lower()]
    if owner is not None:
        result = [r for r in result if r.owner == owner]
    return result


def list_view(repositories: Sequence[Repository], query: ListingQuery) -> ListingView:
    """Filter and paginate a repository snapshot. Pure; never refreshes."""
    filtered = _filter(repositories, query.search, query.owner)
    total = len(filtered)
    page = filtered[query.offset : query.offset + query.limit]
    return ListingView(
        repositories=page,
        total=total,
        limit=query.limit,
        offset=query.offset,
        has_more=query.offset + query.limit < total,
    )
