"""Conversion from dispatcher envelopes to MCP tool results."""

from __future__ import annotations

from mcp.types import CallToolResult, TextContent

from core.models import ResultEnvelope


def to_call_tool_result(envelope: ResultEnvelope) -> CallToolResult:
    # The media type travels in the content's _meta so clients can decode base64 bodies
    return CallToolResult(
        content=[
            TextContent(
                type="text",
                text=envelope.text,
                _meta={"mimeType": envelope.media_type},
            )
        ],
        isError=envelope.is_error,
    )
