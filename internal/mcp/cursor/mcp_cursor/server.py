"""MCP Cursor Background Agents server."""

import argparse
import asyncio
import logging
import sys

import uvicorn
from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings
from pydantic import ValidationError

from mcp_cursor.config import Settings, get_settings
from mcp_cursor.container import Container
from mcp_cursor.handlers import (
    account_handler,
    agents_handler,
    repositories_handler,
    resources_handler,
)

logger = logging.getLogger(__name__)


def create_mcp_server(container: Container) -> FastMCP:
    settings = container.settings
    security_settings = TransportSecuritySettings(
        allowed_hosts=[f"localhost:{settings.port}", f"127.0.0.1:{settings.port}", "*"]
    )
    mcp = FastMCP(
        "cursor-background-agents-mcp-server",
        transport_security=security_settings,
        stateless_http=True,
        json_response=True,
    )
    agents_handler.register(mcp, container)
    account_handler.register(mcp, container)
    repositories_handler.register(mcp, container)
    resources_handler.register(mcp, container)
    return mcp


async def _run_http(mcp: FastMCP, container: Container, settings: Settings) -> None:
    app = mcp.streamable_http_app()
    server = uvicorn.Server(
        uvicorn.Config(app, host=settings.mcp_host, port=settings.port)
    )
    logger.info(
        f"Cursor Background Agents MCP Server running on "
        f"http://localhost:{settings.port}/mcp"
    )
    try:
        await server.serve()
    finally:
        await container.aclose()


async def _run_stdio(mcp: FastMCP, container: Container) -> None:
    logger.info("Cursor Background Agents MCP Server running on stdio")
    try:
        await mcp.run_stdio_async()
    finally:
        await container.aclose()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Cursor Background Agents MCP server")
    parser.add_argument(
        "--http", action="store_true", help="Serve streamable HTTP instead of stdio"
    )
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    # stdout belongs to the stdio transport, basicConfig logs to stderr
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    container = Container(settings)
    mcp = create_mcp_server(container)

    if args.http or settings.mcp_server_mode == "http":
        asyncio.run(_run_http(mcp, container, settings))
    else:
        asyncio.run(_run_stdio(mcp, container))


if __name__ == "__main__":
    main()
