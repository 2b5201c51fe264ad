"""
MCP server exposing the tools over stdio.

stdout carries the protocol; logs go to stderr.
"""
from __future__ import annotations

import logging

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from .config import FetchConfig
from .provider import MarketDataProvider
from .providers import NaverFinanceProvider
from .tools import TOOL_SPECS, call_tool

logger = logging.getLogger(__name__)

SERVER_NAME = "korea-stock-server"


def build_server(provider: MarketDataProvider) -> Server:
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def _list_tools() -> list[types.Tool]:
        return [
            types.Tool(name=s["name"], description=s["description"], inputSchema=s["inputSchema"])
            for s in TOOL_SPECS
        ]

    @server.call_tool()
    async def _call_tool(name: str, arguments: dict | None) -> list[types.TextContent]:
        result = await call_tool(name, arguments, provider=provider)
        if result.is_error:
            # The SDK reports a raised handler error as an isError result.
            raise RuntimeError(result.text)
        return [types.TextContent(type="text", text=result.text)]

    return server


async def serve(provider: MarketDataProvider | None = None) -> None:
    if provider is None:
        provider = NaverFinanceProvider(config=FetchConfig.from_env())
    server = build_server(provider)
    logger.info(f"{SERVER_NAME} running on stdio (provider={provider.name})")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
