"""MCP tools for GitHub repository listing."""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from mcp_cursor.constants import (
    LIST_REPOSITORIES_DEFAULT_LIMIT,
    LIST_REPOSITORIES_MAX_LIMIT,
)
from mcp_cursor.container import Container
from mcp_cursor.errors import CursorAPIError
from mcp_cursor.handlers import _err, _ok
from mcp_cursor.services.repository_cache import ListingQuery, list_view


def register(mcp: FastMCP, container: Container) -> None:
    @mcp.tool()
    async def list_repositories(
        search: Annotated[
            str | None,
            Field(description="Case-insensitive substring to match repository names"),
        ] = None,
        owner: Annotated[
            str | None, Field(description="Exact repository owner to filter by")
        ] = None,
        limit: Annotated[
            int, Field(ge=1, le=LIST_REPOSITORIES_MAX_LIMIT)
        ] = LIST_REPOSITORIES_DEFAULT_LIMIT,
        offset: Annotated[int, Field(ge=0)] = 0,
    ) -> str:
        """List accessible GitHub repositories with search, owner filter and pagination. Results are cached for 5 minutes because the upstream endpoint is strictly rate limited (1/user/minute, 30/user/hour)."""
        query = ListingQuery(search=search, owner=owner, limit=limit, offset=offset)
        try:
            cache = await container.get_repository_cache()
            repositories = await cache.get_repositories()
        except CursorAPIError as e:
            return _err(e)
        return _ok(list_view(repositories, query).to_wire())
