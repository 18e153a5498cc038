from mcp_cursor.services.agents_service.agents_service import AgentsService

__all__ = ["AgentsService"]
