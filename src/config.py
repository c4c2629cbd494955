"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
LOG_LEVEL, MCP_TRANSPORT, SERVER_NAME and the text sniffing window).
"""

from __future__ import annotations

import logging
import os
import sys


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    raw = (os.environ.get(name) or "").strip()
    return raw or default


_TRANSPORTS = {"stdio", "sse", "streamable-http"}


def _env_transport(name: str, default: str) -> str:
    raw = _env_str(name, default).lower()
    return raw if raw in _TRANSPORTS else default


# Server identity
SERVER_NAME = _env_str("SERVER_NAME", "filesystem-mcp-server")
SERVER_VERSION = "1.0.0"

# Transport
MCP_TRANSPORT = _env_transport("MCP_TRANSPORT", "stdio")

# Logging
LOG_LEVEL = _env_str("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = _env_str("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
LOG_TRACEBACKS = _env_bool("LOG_TRACEBACKS", True)

# Content sniffing window (bytes inspected for NUL to decide text vs binary)
TEXT_SNIFF_BYTES = 8192


def configure_logging(level: str = LOG_LEVEL) -> None:
    # stdout carries the stdio transport; logs must go to stderr
    resolved = getattr(logging, (level or "").upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT, stream=sys.stderr)
