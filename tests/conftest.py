"""Shared fixtures for MCP Cursor tests."""

import json

import pytest
import pytest_asyncio

from mcp_cursor.config import Settings
from mcp_cursor.container import Container
from mcp_cursor.repository.cursor_api_repo import CursorApiRepo

BASE_URL = "https://api.cursor.test"


def agent_payload(agent_id: str = "bc_abc123", status: str = "RUNNING") -> dict:
    return {
        "id": agent_id,
        "name": "Add README",
        "status": status,
        "source": {"repository": "https://github.com/acme/widgets", "ref": "main"},
        "target": {
            "branchName": "cursor/add-readme",
            "url": "https://cursor.com/agents?id=bc_abc123",
            "autoCreatePr": False,
        },
        "createdAt": "2024-01-15T10:30:00Z",
    }


def repositories_payload(*pairs: tuple[str, str]) -> dict:
    return {
        "repositories": [
            {"owner": owner, "name": name, "repository": f"https://github.com/{owner}/{name}"}
            for owner, name in pairs
        ]
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(cursor_api_key="test-key", cursor_api_url=BASE_URL, _env_file=None)


@pytest_asyncio.fixture
async def repo():
    repo = CursorApiRepo("test-key", BASE_URL)
    yield repo
    await repo.aclose()


@pytest_asyncio.fixture
async def container(settings):
    container = Container(settings)
    yield container
    await container.aclose()


async def call_tool(mcp, name: str, arguments: dict | None = None) -> dict:
    """Call a FastMCP tool and decode its JSON text result."""
    result = await mcp.call_tool(name, arguments or {})
    if isinstance(result, tuple):
        result = result[0]
    return json.loads(result[0].text)
