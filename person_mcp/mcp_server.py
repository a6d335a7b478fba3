"""Person MCP Server: the Person tools served over the Model Context Protocol.

Invariants:
    - Tools listed from TOOLS_PERSON, calls routed through ToolDispatch: the
      same explicit table the REST tool endpoints use
    - Tool results (errors included) returned in-band as one JSON text block
    - stdout belongs to the protocol: logging goes to stderr only

Design Decisions:
    - Low-level mcp Server over FastMCP decorators: the input schemas already
      exist in TOOLS_PERSON, no signature introspection needed
    - Store built and seeded in main(), then injected into build_mcp_server()
"""

import asyncio
import json
import logging

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from person_mcp.config import get_settings
from person_mcp.core.person_store import PersonStore
from person_mcp.infrastructure.csv_loader import load_persons
from person_mcp.infrastructure.observability import setup_logging
from person_mcp.services.tool_dispatch import ToolDispatch

logger = logging.getLogger(__name__)


def build_mcp_server(store: PersonStore, name: str = "person-mcp") -> Server:
    """MCP server whose tools operate on the given store."""
    dispatch = ToolDispatch(store)
    tools = [_to_mcp_tool(definition) for definition in dispatch.tool_definitions()]
    server = Server(name)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return tools

    @server.call_tool()
    async def call_tool(name: str, arguments: dict | None) -> list[types.TextContent]:
        result = await dispatch.execute(name, arguments)
        return [types.TextContent(type="text", text=json.dumps(result))]

    return server


def _to_mcp_tool(definition: dict) -> types.Tool:
    return types.Tool(
        name=definition["name"],
        description=definition["description"],
        inputSchema=definition["input_schema"],
    )


async def serve_stdio(store: PersonStore) -> None:
    server = build_mcp_server(store)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Person MCP server listening on stdio")
        await server.run(
            read_stream, write_stream, server.create_initialization_options(),
        )


def main() -> None:
    """Console entry point: seed the store from the dataset, serve over stdio."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = PersonStore()
    store.initialize(load_persons(settings.dataset_path))
    asyncio.run(serve_stdio(store))


if __name__ == "__main__":
    main()
