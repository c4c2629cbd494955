from __future__ import annotations

import logging
import os
import stat
from typing import Iterator, List, Optional

from core.errors import FileSystemMCPError, NotADirectoryPathError, NotFoundError, UnreadableError
from core.models import FileMetadata
from filesystem.inspector import inspect, stat_path


"""Directory enumeration mapped to FileMetadata records.

Walks are best-effort over entries: anything that vanishes or cannot be
inspected mid-walk is logged and dropped. Recursive walks include the root
directory itself and do not descend into symlinked directories. The whole
result is materialized before returning, so very large trees cost memory
proportional to their size.
"""

logger = logging.getLogger(__name__)


def _safe_inspect(path: str) -> Optional[FileMetadata]:
    try:
        return inspect(path)
    except (FileSystemMCPError, OSError) as e:
        logger.warning("Failed to get metadata for file: %s (%s)", path, e)
        return None


def _check_directory(path: str) -> None:
    st = stat_path(path)

    if not stat.S_ISDIR(st.st_mode):
        logger.warning("Not a directory: %s", path)
        raise NotADirectoryPathError(f"Not a directory: {path}")

    if not os.access(path, os.R_OK):
        logger.warning("Directory is not readable: %s", path)
        raise UnreadableError(f"Directory is not readable: {path}")


def _children(path: str) -> List[str]:
    try:
        with os.scandir(path) as it:
            names = [entry.path for entry in it]
    except PermissionError as e:
        raise UnreadableError(f"Directory is not readable: {path}") from e
    except FileNotFoundError as e:
        raise NotFoundError(f"Directory does not exist: {path}") from e
    except NotADirectoryError as e:
        raise NotADirectoryPathError(f"Not a directory: {path}") from e
    return names


def _descendants(path: str) -> Iterator[str]:
    yield path

    def _on_error(err: OSError) -> None:
        logger.warning("Skipping unreadable directory during walk: %s (%s)", err.filename, err)

    for dirpath, dirnames, filenames in os.walk(path, onerror=_on_error, followlinks=False):
        for name in dirnames:
            yield os.path.join(dirpath, name)
        for name in filenames:
            yield os.path.join(dirpath, name)


def walk(path: str, recursive: bool = False) -> List[FileMetadata]:
    """List `path`.

    recursive=False returns the immediate children only; recursive=True
    returns the root's own entry plus every descendant. Order is unspecified.

    Raises:
      NotFoundError if the path does not exist;
      NotADirectoryPathError if it is not a directory;
      UnreadableError if it cannot be listed.
    """
    logger.debug("Listing files in directory: %s, recursive: %s", path, recursive)

    _check_directory(path)

    paths = _descendants(path) if recursive else _children(path)

    out: List[FileMetadata] = []
    for p in paths:
        metadata = _safe_inspect(p)
        if metadata is not None:
            out.append(metadata)

    logger.debug("Listed %d files in directory: %s", len(out), path)
    return out
