"""MCP tool that returns metadata for a single file or directory."""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult

from dispatch.dispatcher import RequestDispatcher
from tools.results import to_call_tool_result


def register(mcp: FastMCP, *, dispatcher: Optional[RequestDispatcher] = None) -> None:
    disp = dispatcher or RequestDispatcher()

    @mcp.tool(name="get_file_metadata", description="Get metadata for a file or directory")
    async def get_file_metadata(path: str) -> CallToolResult:
        """Return size, timestamps, type and permission flags for a path.

        Params:
          - path: path to the file or directory (required).
        """
        envelope = await disp.call_tool("get_file_metadata", {"path": path})
        return to_call_tool_result(envelope)
