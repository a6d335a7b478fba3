"""Tool Routes: tool-calling surface for automated agents.

Invariants:
    - GET lists the tool schemas exactly as declared in define_person_tools.py
    - POST always returns 200 with the tool result dict; errors are in-band
      (status "error" + error_code), matching tool_result semantics

Design Decisions:
    - Routing delegated to ToolDispatch: this module never names a tool
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from person_mcp.api.dependencies import get_tool_dispatch
from person_mcp.services.tool_dispatch import ToolDispatch

router = APIRouter(prefix="/api/v1/tools", tags=["tools"])


@router.get("")
async def list_tools():
    """Tool schemas in Anthropic Tool Use format."""
    return {"tools": ToolDispatch.tool_definitions()}


@router.post("/{tool_name}")
async def call_tool(
    tool_name: str,
    input_data: dict[str, Any] | None = Body(None),
    dispatch: ToolDispatch = Depends(get_tool_dispatch),
):
    """Execute one tool call against the store."""
    return await dispatch.execute(tool_name, input_data)
