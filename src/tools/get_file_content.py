"""MCP tool that reads the content of a local file.

Text files come back verbatim; files containing NUL bytes in their first
8 KiB come back base64-encoded with media type
application/octet-stream;base64.
"""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult

from dispatch.dispatcher import RequestDispatcher
from tools.results import to_call_tool_result


def register(mcp: FastMCP, *, dispatcher: Optional[RequestDispatcher] = None) -> None:
    disp = dispatcher or RequestDispatcher()

    @mcp.tool(name="get_file_content", description="Get content of a file")
    async def get_file_content(path: str) -> CallToolResult:
        """Read a whole file.

        Params:
          - path: path to the file (required).

        Returns:
          CallToolResult whose text is the file content; the media type is
          attached to the content's _meta as "mimeType".
        """
        envelope = await disp.call_tool("get_file_content", {"path": path})
        return to_call_tool_result(envelope)
