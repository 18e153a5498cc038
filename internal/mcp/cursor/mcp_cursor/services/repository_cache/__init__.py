from mcp_cursor.services.repository_cache.dto import CacheEntry, ListingQuery, ListingView
from mcp_cursor.services.repository_cache.repository_cache import (
    RepositoryCache,
    list_view,
)

__all__ = ["CacheEntry", "ListingQuery", "ListingView", "RepositoryCache", "list_view"]
