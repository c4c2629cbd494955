"""Local filesystem implementation of FileSystemBackend.

Holds no state: each method delegates to the module-level query functions.
"""

from __future__ import annotations

from typing import List, Tuple

from core.models import FileMetadata
from filesystem import inspector, reader, walker


class LocalFileSystem:
    # Read-only access to the host filesystem.

    def inspect(self, path: str) -> FileMetadata:
        return inspector.inspect(path)

    def read(self, path: str) -> Tuple[str, str]:
        return reader.read(path)

    def walk(self, path: str, recursive: bool = False) -> List[FileMetadata]:
        return walker.walk(path, recursive)
