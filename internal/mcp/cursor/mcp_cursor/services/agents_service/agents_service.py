"""Agents service - Cursor background agent endpoints."""

import logging
from urllib.parse import quote

from mcp_cursor.constants import API_PREFIX
from mcp_cursor.repository.cursor_api_repo import CursorApiRepo
from mcp_cursor.schemas import (
    Agent,
    AgentId,
    AgentList,
    ApiKeyInfo,
    Conversation,
    FollowupRequest,
    LaunchAgentRequest,
    Models,
    Prompt,
    Repositories,
)

logger = logging.getLogger(__name__)


def _agent_path(agent_id: str, suffix: str = "") -> str:
    return f"{API_PREFIX}/agents/{quote(agent_id, safe='')}{suffix}"


class AgentsService:
    """Maps each Cursor API endpoint onto a validated request."""

    def __init__(self, repo: CursorApiRepo):
        self.repo = repo

    async def launch_agent(self, request: LaunchAgentRequest) -> Agent:
        agent = await self.repo.request(
            f"{API_PREFIX}/agents", Agent, method="POST", body=request
        )
        logger.info(f"Launched agent {agent.id} on {request.source.repository}")
        return agent

    async def add_followup(self, agent_id: str, prompt: Prompt) -> AgentId:
        return await self.repo.request(
            _agent_path(agent_id, "/followup"),
            AgentId,
            method="POST",
            body=FollowupRequest(prompt=prompt),
        )

    async def delete_agent(self, agent_id: str) -> AgentId:
        result = await self.repo.request(
            _agent_path(agent_id), AgentId, method="DELETE"
        )
        logger.info(f"Deleted agent {result.id}")
        return result

    async def list_agents(
        self, limit: int | None = None, cursor: str | None = None
    ) -> AgentList:
        params: dict[str, str] = {}
        if limit:
            params["limit"] = str(limit)
        if cursor:
            params["cursor"] = cursor
        return await self.repo.request(
            f"{API_PREFIX}/agents", AgentList, params=params or None
        )

    async def get_agent(self, agent_id: str) -> Agent:
        return await self.repo.request(_agent_path(agent_id), Agent)

    async def get_agent_conversation(self, agent_id: str) -> Conversation:
        return await self.repo.request(
            _agent_path(agent_id, "/conversation"), Conversation
        )

    async def get_me(self) -> ApiKeyInfo:
        return await self.repo.request(f"{API_PREFIX}/me", ApiKeyInfo)

    async def list_models(self) -> Models:
        return await self.repo.request(f"{API_PREFIX}/models", Models)

    async def list_repositories(self) -> Repositories:
        # Rate limited upstream; go through RepositoryCache instead.
        return await self.repo.request(f"{API_PREFIX}/repositories", Repositories)
