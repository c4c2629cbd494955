"""MCP tool that lists the entries of a local directory.

Registers the 'list_files' tool which adapts the RequestDispatcher to the
MCP tool interface used by agents.
"""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult

from dispatch.dispatcher import RequestDispatcher
from tools.results import to_call_tool_result


def register(mcp: FastMCP, *, dispatcher: Optional[RequestDispatcher] = None) -> None:
    disp = dispatcher or RequestDispatcher()

    @mcp.tool(name="list_files", description="List files in a directory")
    async def list_files(path: str, recursive: bool = False) -> CallToolResult:
        """List files in a directory and return their metadata as a JSON array.

        Params:
          - path: directory path to list files from (required).
          - recursive: whether to list files recursively (default: False).
            When True the directory itself is included in the result.

        Returns:
          CallToolResult with a pretty JSON array of file metadata, or an
          error result (isError=True) describing why the listing failed.
        """
        envelope = await disp.call_tool("list_files", {"path": path, "recursive": recursive})
        return to_call_tool_result(envelope)
