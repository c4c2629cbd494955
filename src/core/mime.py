"""Extension-based media types for text content.

Matching is a case-insensitive suffix test against a fixed table; anything
unknown is served as text/plain.
"""

from __future__ import annotations

from typing import Tuple


DEFAULT_TEXT_MEDIA_TYPE = "text/plain"
BINARY_MEDIA_TYPE = "application/octet-stream;base64"

MEDIA_TYPES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    ((".txt",), "text/plain"),
    ((".html", ".htm"), "text/html"),
    ((".css",), "text/css"),
    ((".js",), "application/javascript"),
    ((".json",), "application/json"),
    ((".xml",), "application/xml"),
    ((".md",), "text/markdown"),
    ((".csv",), "text/csv"),
    ((".java",), "text/x-java-source"),
    ((".py",), "text/x-python"),
    ((".c", ".cpp", ".h"), "text/x-c"),
)


def media_type_for(path: str) -> str:
    lowered = (path or "").lower()
    for suffixes, media_type in MEDIA_TYPES:
        if lowered.endswith(suffixes):
            return media_type
    return DEFAULT_TEXT_MEDIA_TYPE
