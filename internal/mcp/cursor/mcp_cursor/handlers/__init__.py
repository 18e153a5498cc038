"""Shared helpers for MCP Cursor handlers."""

import json
from typing import Any

from mcp_cursor.errors import CursorAPIError


def _ok(data: dict[str, Any]) -> str:
    return json.dumps({"success": True, **data}, ensure_ascii=False)


def _err(error: CursorAPIError) -> str:
    return json.dumps(
        {
            "success": False,
            "error": error.kind,
            "message": error.message,
            **error.details(),
        },
        ensure_ascii=False,
    )


def _dump(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)
