"""Request dispatcher: the single entry point between MCP adapters and the filesystem.

Accepts tool invocations (operation name + arguments) and resource URIs,
decodes them into a FileRequest, runs the matching filesystem query off the
event loop, and maps the outcome into exactly one ResultEnvelope. Nothing
raised below this layer reaches the transport.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional

from config import LOG_TRACEBACKS
from core.errors import FileSystemMCPError, InvalidAddressError
from core.interfaces import FileSystemBackend
from core.models import (
    JSON_MEDIA_TYPE,
    FileRequest,
    OperationName,
    ResultEnvelope,
    metadata_list_to_json,
)
from core.paths import (
    CONTENT_URI_PREFIX,
    DIRECTORY_URI_PREFIX,
    METADATA_URI_PREFIX,
    decode_uri,
    parse_bool_flag,
    parse_recursive_flag,
    require_path,
    split_query,
)
from filesystem.local import LocalFileSystem


logger = logging.getLogger(__name__)

TOOL_ERROR_MESSAGES: Dict[str, str] = {
    "list_files": "Error listing files",
    "get_file_metadata": "Error getting file metadata",
    "get_file_content": "Error reading file content",
}

RESOURCE_ERROR_MESSAGES: Dict[str, str] = {
    "list_files": "Error handling directory listing request",
    "get_file_metadata": "Error handling file metadata request",
    "get_file_content": "Error handling file content request",
}

UNROUTED_ERROR_MESSAGE = "Error handling request"

_URI_ROUTES = (
    (METADATA_URI_PREFIX, "get_file_metadata"),
    (CONTENT_URI_PREFIX, "get_file_content"),
    (DIRECTORY_URI_PREFIX, "list_files"),
)


def request_from_uri(uri: str) -> FileRequest:
    """Decode a resource URI into a FileRequest.

    Raises InvalidAddressError for URIs outside the three file:// prefixes.
    """
    for prefix, operation in _URI_ROUTES:
        if (uri or "").startswith(prefix):
            if operation == "list_files":
                head, _ = split_query(uri)
                return FileRequest(
                    operation=operation,
                    path=decode_uri(head, prefix),
                    recursive=parse_recursive_flag(uri),
                )
            return FileRequest(operation=operation, path=decode_uri(uri, prefix))

    raise InvalidAddressError(f"Unsupported resource URI: {uri}")


def request_from_tool(name: str, arguments: Optional[Mapping[str, Any]]) -> FileRequest:
    """Build a FileRequest from a tool name and its keyword arguments."""
    if name not in TOOL_ERROR_MESSAGES:
        raise InvalidAddressError(f"Unknown tool: {name}")

    args = dict(arguments or {})
    path = require_path(args.get("path"))
    recursive = parse_bool_flag(args.get("recursive"), default=False) if name == "list_files" else False
    return FileRequest(operation=name, path=path, recursive=recursive)


class RequestDispatcher:
    """Routes requests to a FileSystemBackend and wraps results in envelopes.

    Purpose:
      - list_files(path, recursive=False) -> JSON array envelope
      - get_file_metadata(path) -> JSON object envelope
      - get_file_content(path) -> text/base64 envelope with its media type
      - call_tool(name, arguments) / read_resource(uri) -> routed variants

    Key behavior:
      - Blocking filesystem calls run in a worker thread.
      - Every failure becomes "<operation message>: <cause>" with is_error=True.
      - No retries, no partial results.
    """

    def __init__(self, backend: Optional[FileSystemBackend] = None) -> None:
        self._backend: FileSystemBackend = backend or LocalFileSystem()

    # --- Operations ---

    async def list_files(self, path: str, recursive: bool = False) -> ResultEnvelope:
        return await self._run_tool(FileRequest(operation="list_files", path=path, recursive=recursive))

    async def get_file_metadata(self, path: str) -> ResultEnvelope:
        return await self._run_tool(FileRequest(operation="get_file_metadata", path=path))

    async def get_file_content(self, path: str) -> ResultEnvelope:
        return await self._run_tool(FileRequest(operation="get_file_content", path=path))

    # --- Routed entry points ---

    async def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ResultEnvelope:
        logger.debug("Handling tool call: %s %r", name, dict(arguments or {}))
        message = TOOL_ERROR_MESSAGES.get(name, UNROUTED_ERROR_MESSAGE)
        try:
            request = request_from_tool(name, arguments)
        except FileSystemMCPError as e:
            return self._failure(message, e)
        return await self._run_tool(request)

    async def read_resource(self, uri: str) -> ResultEnvelope:
        logger.debug("Handling resource request for URI: %s", uri)
        try:
            request = request_from_uri(uri)
        except FileSystemMCPError as e:
            return self._failure(self._resource_message(uri), e)
        return await self._execute(request, RESOURCE_ERROR_MESSAGES[request.operation])

    def handles_uri(self, uri: str) -> bool:
        s = str(uri or "")
        return any(s.startswith(prefix) for prefix, _ in _URI_ROUTES)

    # --- Internals ---

    async def _run_tool(self, request: FileRequest) -> ResultEnvelope:
        return await self._execute(request, TOOL_ERROR_MESSAGES[request.operation])

    async def _execute(self, request: FileRequest, message: str) -> ResultEnvelope:
        try:
            require_path(request.path)
            envelope = await asyncio.to_thread(self._perform, request)
        except FileSystemMCPError as e:
            return self._failure(message, e)
        except Exception as e:
            logger.error("%s: %s", message, e, exc_info=LOG_TRACEBACKS)
            return ResultEnvelope.failure(f"{message}: {e}", "internal")

        logger.debug("Request handled successfully: %s %s", request.operation, request.path)
        return envelope

    def _perform(self, request: FileRequest) -> ResultEnvelope:
        operation: OperationName = request.operation

        if operation == "list_files":
            entries = self._backend.walk(request.path, request.recursive)
            return ResultEnvelope.success(metadata_list_to_json(entries), JSON_MEDIA_TYPE)

        if operation == "get_file_metadata":
            metadata = self._backend.inspect(request.path)
            return ResultEnvelope.success(metadata.to_json(), JSON_MEDIA_TYPE)

        content, media_type = self._backend.read(request.path)
        return ResultEnvelope.success(content, media_type)

    def _resource_message(self, uri: str) -> str:
        for prefix, operation in _URI_ROUTES:
            if (uri or "").startswith(prefix):
                return RESOURCE_ERROR_MESSAGES[operation]
        return UNROUTED_ERROR_MESSAGE

    def _failure(self, message: str, err: FileSystemMCPError) -> ResultEnvelope:
        logger.warning("%s: %s", message, err)
        return ResultEnvelope.failure(f"{message}: {err}", err.kind)
