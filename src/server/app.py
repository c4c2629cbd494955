"""FastMCP application that serves file:// resources through the dispatcher.

FastMCP's own resource templates fix one MIME type per template and match a
single path segment; file content needs a per-read media type and full
paths, so reads under the file:// prefixes are routed here instead.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ResourceError
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import ResourceTemplate

from dispatch.dispatcher import RequestDispatcher
from resources.file_resources import resource_templates


logger = logging.getLogger(__name__)


class FileSystemMCP(FastMCP):
    def __init__(self, name: str, *, dispatcher: Optional[RequestDispatcher] = None, **settings: Any) -> None:
        self._dispatcher = dispatcher or RequestDispatcher()
        super().__init__(name, **settings)

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    async def list_resource_templates(self) -> List[ResourceTemplate]:
        registered = await super().list_resource_templates()
        return resource_templates() + list(registered)

    async def read_resource(self, uri: Any) -> Iterable[ReadResourceContents]:
        uri_str = str(uri)
        if not self._dispatcher.handles_uri(uri_str):
            return await super().read_resource(uri)

        logger.debug("Routing resource read to dispatcher: %s", uri_str)
        envelope = await self._dispatcher.read_resource(uri_str)
        if envelope.is_error:
            raise ResourceError(envelope.text)

        return [ReadResourceContents(content=envelope.text, mime_type=envelope.media_type)]
