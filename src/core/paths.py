from __future__ import annotations

import re
from typing import Any, Tuple

from core.errors import InvalidAddressError

"""
Path and URI utilities used across the project.

Decodes resource URIs of the form `file://<kind>/<path>[?recursive=...]`
into plain filesystem paths, and coerces tool arguments into the values
the filesystem layer expects.
"""


METADATA_URI_PREFIX = "file://metadata/"
CONTENT_URI_PREFIX = "file://content/"
DIRECTORY_URI_PREFIX = "file://directory/"

# Only these four escapes are recognised, in this order.
_ESCAPES: Tuple[Tuple[str, str], ...] = (
    ("%20", " "),
    ("%2F", "/"),
    ("%5C", "\\"),
    ("%3A", ":"),
)

_RECURSIVE_RE = re.compile(r"[?&]recursive=(true|false)")


def decode_uri(uri: str, prefix: str) -> str:
    """Strip `prefix` from `uri` and undo the reserved-character escapes.

    This is a literal substitution of %20, %2F, %5C and %3A, not general
    percent-decoding.
    """
    if not uri or not uri.startswith(prefix):
        raise InvalidAddressError(f"Invalid URI format: {uri}")

    path = uri[len(prefix):]
    for escaped, char in _ESCAPES:
        path = path.replace(escaped, char)
    return path


def encode_uri(path: str, prefix: str) -> str:
    """Build a resource URI for `path` under `prefix`."""
    out = path or ""
    for escaped, char in _ESCAPES:
        out = out.replace(char, escaped)
    return prefix + out


def split_query(uri: str) -> Tuple[str, str]:
    """Split a URI into (everything before '?', query string without '?')."""
    s = uri or ""
    head, sep, query = s.partition("?")
    return head, query if sep else ""


def parse_recursive_flag(uri: str) -> bool:
    """Read the `recursive=true|false` flag from a URI; default False."""
    m = _RECURSIVE_RE.search(uri or "")
    if not m:
        return False
    return m.group(1) == "true"


def parse_bool_flag(value: Any, default: bool = False) -> bool:
    """Coerce a tool argument into a bool.

    Accepts real bools and the strings "true"/"false" (any case); anything
    else yields `default`.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        v = value.strip().lower()
        if v == "true":
            return True
        if v == "false":
            return False
    return default


def require_path(path: Any) -> str:
    """Validate a path argument and return it unchanged."""
    if not isinstance(path, str) or not path.strip():
        raise InvalidAddressError("Missing file path")
    return path
