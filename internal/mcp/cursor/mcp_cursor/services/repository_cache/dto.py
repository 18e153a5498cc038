"""DTOs for repository cache."""

from dataclasses import dataclass

from pydantic import Field

from mcp_cursor.constants import (
    LIST_REPOSITORIES_DEFAULT_LIMIT,
    LIST_REPOSITORIES_MAX_LIMIT,
)
from mcp_cursor.schemas import CursorModel, Repository


@dataclass(frozen=True)
class CacheEntry:
    payload: tuple[Repository, ...]
    fetched_at: float
    ttl: float

    def is_fresh(self, now: float) -> bool:
        return now - self.fetched_at < self.ttl


class ListingQuery(CursorModel):
    search: str | None = None
    owner: str | None = None
    limit: int = Field(
        default=LIST_REPOSITORIES_DEFAULT_LIMIT, ge=1, le=LIST_REPOSITORIES_MAX_LIMIT
    )
    offset: int = Field(default=0, ge=0)


class ListingView(CursorModel):
    repositories: list[Repository]
    total: int
    limit: int
    offset: int
    has_more: bool
