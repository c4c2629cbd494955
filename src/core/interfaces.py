"""Core protocol and interface definitions.

Defines the FileSystemBackend protocol the dispatcher depends on, so the
local implementation can be swapped for a fake in tests.
"""

from __future__ import annotations

from typing import List, Protocol, Tuple

from core.models import FileMetadata


class FileSystemBackend(Protocol):
    """Contract for the read-only filesystem query engine."""

    def inspect(self, path: str) -> FileMetadata:
        ...

    def read(self, path: str) -> Tuple[str, str]:
        ...

    def walk(self, path: str, recursive: bool = False) -> List[FileMetadata]:
        ...
