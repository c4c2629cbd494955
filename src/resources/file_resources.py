"""Resource templates for addressing files by URI.

Each template maps a private file:// prefix onto one dispatcher operation.
Paths are appended after the prefix; "/", "\\", ":" and space may be sent
as %2F, %5C, %3A and %20.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from mcp.types import ResourceTemplate

from core.models import JSON_MEDIA_TYPE
from core.paths import CONTENT_URI_PREFIX, DIRECTORY_URI_PREFIX, METADATA_URI_PREFIX


@dataclass(frozen=True)
class FileResourceSpec:
    name: str
    prefix: str
    description: str
    # None when the media type depends on the file being read
    mime_type: Optional[str] = None

    @property
    def uri_template(self) -> str:
        return f"{self.prefix}{{path}}"


FILE_RESOURCES: Tuple[FileResourceSpec, ...] = (
    FileResourceSpec(
        name="file_metadata",
        prefix=METADATA_URI_PREFIX,
        description="Metadata (size, timestamps, type and permission flags) for a file or directory",
        mime_type=JSON_MEDIA_TYPE,
    ),
    FileResourceSpec(
        name="file_content",
        prefix=CONTENT_URI_PREFIX,
        description="Content of a file: UTF-8 text, or base64 for binary files",
    ),
    FileResourceSpec(
        name="directory_listing",
        prefix=DIRECTORY_URI_PREFIX,
        description="Metadata for the entries of a directory; append ?recursive=true for the full subtree",
        mime_type=JSON_MEDIA_TYPE,
    ),
)


def resource_templates() -> List[ResourceTemplate]:
    return [
        ResourceTemplate(
            name=spec.name,
            uriTemplate=spec.uri_template,
            description=spec.description,
            mimeType=spec.mime_type,
        )
        for spec in FILE_RESOURCES
    ]
