from __future__ import annotations

import errno
import logging
import os
import stat
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Optional

from core.errors import InvalidAddressError, NotFoundError, UnreadableError
from core.models import FileMetadata


"""Metadata inspection for single filesystem entries.

Type classification follows symlinks: a link to a directory reports
is_directory, a dangling link does not exist. is_symbolic_link always
describes the entry itself.
"""

logger = logging.getLogger(__name__)

_FILE_ATTRIBUTE_HIDDEN = 0x2


def stat_path(path: str) -> os.stat_result:
    """Single attribute read with OS errors mapped to the error taxonomy."""
    try:
        return os.stat(path)
    except (FileNotFoundError, NotADirectoryError) as e:
        raise NotFoundError(f"File does not exist: {path}") from e
    except PermissionError as e:
        raise UnreadableError(f"Permission denied: {path}") from e
    except ValueError as e:
        # e.g. embedded NUL byte
        raise InvalidAddressError(f"Invalid path: {path}") from e
    except OSError as e:
        # A symlink loop never resolves to an existing entry
        if e.errno == errno.ELOOP:
            raise NotFoundError(f"File does not exist: {path}") from e
        raise InvalidAddressError(f"Invalid path: {path} ({e.strerror or e})") from e


def _entry_name(path: str) -> str:
    name = PurePath(path).name
    return name or path


def _timestamp(seconds: Optional[float]) -> Optional[datetime]:
    if seconds is None:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def _creation_seconds(st: os.stat_result) -> Optional[float]:
    birth = getattr(st, "st_birthtime", None)
    if birth is not None:
        return birth
    # Windows reports creation time in st_ctime; POSIX ctime is a change time.
    if os.name == "nt":
        return st.st_ctime
    return None


def _hidden_flag(path: str, st: os.stat_result) -> bool:
    attrs = getattr(st, "st_file_attributes", None)
    if attrs is not None:
        return bool(attrs & _FILE_ATTRIBUTE_HIDDEN)
    return _entry_name(path).startswith(".")


def _is_hidden(path: str, st: os.stat_result) -> bool:
    try:
        return _hidden_flag(path, st)
    except (OSError, TypeError, ValueError):
        logger.warning("Failed to determine if file is hidden: %s", path, exc_info=True)
        return False


def _has_access(path: str, mode: int) -> bool:
    try:
        return os.access(path, mode)
    except (OSError, ValueError):
        return False


def _is_symlink(path: str) -> bool:
    try:
        return os.path.islink(path)
    except (OSError, ValueError):
        return False


def inspect(path: str) -> FileMetadata:
    """Return metadata for `path`.

    Raises:
      NotFoundError if the path (or a symlink's target) does not exist;
      UnreadableError if the attributes cannot be read;
      InvalidAddressError if the OS rejects the path outright.
    """
    logger.debug("Getting metadata for file: %s", path)

    st = stat_path(path)

    metadata = FileMetadata(
        name=_entry_name(path),
        path=path,
        size=int(st.st_size),
        last_modified=_timestamp(st.st_mtime),
        creation_time=_timestamp(_creation_seconds(st)),
        is_directory=stat.S_ISDIR(st.st_mode),
        is_regular_file=stat.S_ISREG(st.st_mode),
        is_symbolic_link=_is_symlink(path),
        is_hidden=_is_hidden(path, st),
        is_readable=_has_access(path, os.R_OK),
        is_writable=_has_access(path, os.W_OK),
        is_executable=_has_access(path, os.X_OK),
    )

    logger.debug("Metadata retrieved successfully for file: %s", path)
    return metadata
