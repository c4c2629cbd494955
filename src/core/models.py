"""Immutable dataclasses shared by the filesystem layer and the dispatcher.

Includes the FileMetadata value object returned by inspections and walks,
the FileRequest model built from tool arguments or resource URIs, and the
ResultEnvelope handed back across the protocol boundary.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Literal, Optional, Sequence


OperationName = Literal["list_files", "get_file_metadata", "get_file_content"]

JSON_MEDIA_TYPE = "application/json"
ERROR_MEDIA_TYPE = "text/plain"


def _iso_instant(value: Optional[datetime]) -> Optional[str]:
    # ISO-8601 instant in UTC with a trailing "Z", or None
    if value is None:
        return None
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class FileMetadata:
    """Metadata for a single filesystem entry.

    Field groups:
    - Identity: name, path
    - Attributes: size, last_modified, creation_time
    - Type: is_directory, is_regular_file, is_symbolic_link
    - Flags: is_hidden, is_readable, is_writable, is_executable
    """

    name: str
    path: str

    size: int = 0
    last_modified: Optional[datetime] = None
    creation_time: Optional[datetime] = None

    is_directory: bool = False
    is_regular_file: bool = False
    is_symbolic_link: bool = False

    is_hidden: bool = False
    is_readable: bool = False
    is_writable: bool = False
    is_executable: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "size": self.size,
            "lastModified": _iso_instant(self.last_modified),
            "creationTime": _iso_instant(self.creation_time),
            "isDirectory": self.is_directory,
            "isRegularFile": self.is_regular_file,
            "isSymbolicLink": self.is_symbolic_link,
            "isHidden": self.is_hidden,
            "isReadable": self.is_readable,
            "isWritable": self.is_writable,
            "isExecutable": self.is_executable,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def metadata_list_to_json(entries: Sequence[FileMetadata]) -> str:
    """Serialize a sequence of metadata records as a pretty JSON array."""
    return json.dumps([e.to_dict() for e in entries], indent=2)


@dataclass(frozen=True)
class FileRequest:
    """A single protocol call: operation, target path and listing flag.

    `recursive` only applies to list_files.
    """

    operation: OperationName
    path: str
    recursive: bool = False


@dataclass(frozen=True)
class ResultEnvelope:
    """Exactly one of these is produced per request.

    Success envelopes carry the serialized body and its media type; error
    envelopes carry a one-line message, `is_error=True` and the error kind.
    """

    text: str
    media_type: str
    is_error: bool = False
    error_kind: Optional[str] = None

    @classmethod
    def success(cls, text: str, media_type: str) -> "ResultEnvelope":
        return cls(text=text, media_type=media_type)

    @classmethod
    def failure(cls, message: str, kind: str) -> "ResultEnvelope":
        return cls(text=message, media_type=ERROR_MEDIA_TYPE, is_error=True, error_kind=kind)
