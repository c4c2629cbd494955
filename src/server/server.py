"""Server bootstrap for the filesystem MCP service.

Builds the filesystem backend and request dispatcher, creates the
FileSystemMCP instance, registers the tools, and runs the MCP server
with the configured transport (stdio by default).
"""

import logging

from config import MCP_TRANSPORT, SERVER_NAME, SERVER_VERSION, configure_logging
from dispatch.dispatcher import RequestDispatcher
from filesystem.local import LocalFileSystem
from server.app import FileSystemMCP

from tools.get_file_content import register as register_get_file_content
from tools.get_file_metadata import register as register_get_file_metadata
from tools.list_files import register as register_list_files

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Read-only access to the local filesystem. Use list_files, get_file_metadata "
    "and get_file_content, or read file://metadata/, file://content/ and "
    "file://directory/ resources."
)

dispatcher = RequestDispatcher(backend=LocalFileSystem())
mcp = FileSystemMCP(SERVER_NAME, dispatcher=dispatcher, instructions=INSTRUCTIONS)


def register_tools() -> None:
    register_list_files(mcp, dispatcher=dispatcher)
    register_get_file_metadata(mcp, dispatcher=dispatcher)
    register_get_file_content(mcp, dispatcher=dispatcher)


def register_all() -> None:
    register_tools()


register_all()


def main() -> None:
    configure_logging()
    logger.info("Starting %s %s (transport: %s)", SERVER_NAME, SERVER_VERSION, MCP_TRANSPORT)
    try:
        mcp.run(transport=MCP_TRANSPORT)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        logger.info("%s shutdown complete", SERVER_NAME)


if __name__ == "__main__":
    main()
