"""MCP tools for background agent lifecycle."""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from mcp_cursor.container import Container
from mcp_cursor.errors import CursorAPIError
from mcp_cursor.handlers import _err, _ok
from mcp_cursor.schemas import LaunchAgentRequest, Prompt, Source, Target, Webhook

AgentIdParam = Annotated[
    str, Field(description="Unique identifier for the background agent")
]


def register(mcp: FastMCP, container: Container) -> None:
    @mcp.tool()
    async def launch_agent(
        prompt: Prompt,
        source: Source,
        model: Annotated[
            str | None,
            Field(description="The LLM to use (optional, auto if not provided)"),
        ] = None,
        target: Target | None = None,
        webhook: Webhook | None = None,
    ) -> str:
        """Start a new background agent to work on a GitHub repository."""
        request = LaunchAgentRequest(
            prompt=prompt, model=model, source=source, target=target, webhook=webhook
        )
        try:
            svc = await container.get_agents_service()
            agent = await svc.launch_agent(request)
            return _ok(agent.to_wire())
        except CursorAPIError as e:
            return _err(e)

    @mcp.tool()
    async def add_followup(agent_id: AgentIdParam, prompt: Prompt) -> str:
        """Add a follow-up instruction to an existing background agent."""
        try:
            svc = await container.get_agents_service()
            result = await svc.add_followup(agent_id, prompt)
            return _ok(result.to_wire())
        except CursorAPIError as e:
            return _err(e)

    @mcp.tool()
    async def delete_agent(agent_id: AgentIdParam) -> str:
        """Delete a background agent. This action is permanent and cannot be undone."""
        try:
            svc = await container.get_agents_service()
            result = await svc.delete_agent(agent_id)
            return _ok(result.to_wire())
        except CursorAPIError as e:
            return _err(e)

    @mcp.tool()
    async def list_agents(
        limit: Annotated[
            int | None,
            Field(ge=1, le=100, description="Number of agents to return (default: 20)"),
        ] = None,
        cursor: Annotated[
            str | None, Field(description="Pagination cursor from the previous response")
        ] = None,
    ) -> str:
        """List all background agents for the authenticated user."""
        try:
            svc = await container.get_agents_service()
            result = await svc.list_agents(limit=limit, cursor=cursor)
            return _ok(result.to_wire())
        except CursorAPIError as e:
            return _err(e)

    @mcp.tool()
    async def get_agent_status(agent_id: AgentIdParam) -> str:
        """Retrieve the current status and results of a background agent."""
        try:
            svc = await container.get_agents_service()
            agent = await svc.get_agent(agent_id)
            return _ok(agent.to_wire())
        except CursorAPIError as e:
            return _err(e)

    @mcp.tool()
    async def get_agent_conversation(agent_id: AgentIdParam) -> str:
        """Retrieve the conversation history of a background agent."""
        try:
            svc = await container.get_agents_service()
            conversation = await svc.get_agent_conversation(agent_id)
            return _ok(conversation.to_wire())
        except CursorAPIError as e:
            return _err(e)
