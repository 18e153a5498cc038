"""Lazy-init dependency container for MCP Cursor."""

import httpx

from mcp_cursor.config import Settings
from mcp_cursor.repository.cursor_api_repo import CursorApiRepo
from mcp_cursor.services.agents_service import AgentsService
from mcp_cursor.services.repository_cache import RepositoryCache


class Container:
    """Builds and owns the server's long-lived objects."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None):
        self.settings = settings
        self._client = client
        self._cursor_api_repo: CursorApiRepo | None = None
        self._agents_service: AgentsService | None = None
        self._repository_cache: RepositoryCache | None = None

    async def get_cursor_api_repo(self) -> CursorApiRepo:
        if self._cursor_api_repo is None:
            self._cursor_api_repo = CursorApiRepo(
                self.settings.cursor_api_key,
                self.settings.cursor_api_url,
                client=self._client,
            )
        return self._cursor_api_repo

    async def get_agents_service(self) -> AgentsService:
        if self._agents_service is None:
            repo = await self.get_cursor_api_repo()
            self._agents_service = AgentsService(repo)
        return self._agents_service

    async def get_repository_cache(self) -> RepositoryCache:
        if self._repository_cache is None:
            service = await self.get_agents_service()
            self._repository_cache = RepositoryCache(service.list_repositories)
        return self._repository_cache

    async def aclose(self) -> None:
        if self._cursor_api_repo is not None:
            await self._cursor_api_repo.aclose()
