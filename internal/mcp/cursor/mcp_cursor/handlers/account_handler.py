"""MCP tools for API key and model information."""

from mcp.server.fastmcp import FastMCP

from mcp_cursor.container import Container
from mcp_cursor.errors import CursorAPIError
from mcp_cursor.handlers import _err, _ok


def register(mcp: FastMCP, container: Container) -> None:
    @mcp.tool()
    async def get_me() -> str:
        """Get information about the API key being used for authentication."""
        try:
            svc = await container.get_agents_service()
            info = await svc.get_me()
            return _ok(info.to_wire())
        except CursorAPIError as e:
            return _err(e)

    @mcp.tool()
    async def list_models() -> str:
        """List available models for background agents. Includes 'Auto' option for automatic model selection."""
        try:
            svc = await container.get_agents_service()
            models = await svc.list_models()
            return _ok(models.to_wire())
        except CursorAPIError as e:
            return _err(e)
