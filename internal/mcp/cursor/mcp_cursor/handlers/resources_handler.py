"""MCP resources for agents, models and repositories."""

from mcp.server.fastmcp import FastMCP

from mcp_cursor.container import Container
from mcp_cursor.handlers import _dump


def register(mcp: FastMCP, container: Container) -> None:
    @mcp.resource("agents://list", name="agents-list", title="All Agents")
    async def agents_list() -> str:
        """List of all background agents for the authenticated user."""
        svc = await container.get_agents_service()
        agents = await svc.list_agents()
        return _dump(agents.to_wire())

    @mcp.resource("models://list", name="models-list", title="Available Models")
    async def models_list() -> str:
        """List of available models for background agents."""
        svc = await container.get_agents_service()
        models = await svc.list_models()
        return _dump(models.to_wire())

    @mcp.resource(
        "repositories://list", name="repositories-list", title="GitHub Repositories"
    )
    async def repositories_list() -> str:
        """List of accessible GitHub repositories (cached for 5 minutes, strict rate limits apply)."""
        cache = await container.get_repository_cache()
        repositories = await cache.get_repositories()
        return _dump(
            {"repositories": [r.to_wire() for r in repositories]}
        )

    @mcp.resource("agents://{agent_id}", name="agent-details", title="Agent Details")
    async def agent_details(agent_id: str) -> str:
        """Details of a specific background agent."""
        svc = await container.get_agents_service()
        agent = await svc.get_agent(agent_id)
        return _dump(agent.to_wire())

    @mcp.resource(
        "agents://{agent_id}/conversation",
        name="agent-conversation",
        title="Agent Conversation",
    )
    async def agent_conversation(agent_id: str) -> str:
        """Conversation history of a specific background agent."""
        svc = await container.get_agents_service()
        conversation = await svc.get_agent_conversation(agent_id)
        return _dump(conversation.to_wire())
