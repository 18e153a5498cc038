from mcp_cursor.repository.cursor_api_repo.cursor_api_repo import CursorApiRepo

__all__ = ["CursorApiRepo"]
