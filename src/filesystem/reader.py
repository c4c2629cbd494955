from __future__ import annotations

import base64
import logging
import os
import stat
from typing import Tuple

from config import TEXT_SNIFF_BYTES
from core.errors import NotAFileError, NotFoundError, UnreadableError
from core.mime import BINARY_MEDIA_TYPE, media_type_for
from filesystem.inspector import stat_path


"""Whole-file content reads with text/binary detection.

Text is returned decoded as UTF-8 (invalid sequences replaced) and labelled
by extension; binary is returned base64-encoded.
"""

logger = logging.getLogger(__name__)


def is_text(sample: bytes) -> bool:
    """Prefix heuristic: empty or NUL-free samples are text."""
    if not sample:
        return True
    return b"\x00" not in sample


def _read_bytes(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except FileNotFoundError as e:
        raise NotFoundError(f"File does not exist: {path}") from e
    except PermissionError as e:
        raise UnreadableError(f"File is not readable: {path}") from e
    except IsADirectoryError as e:
        raise NotAFileError(f"Cannot read content of a directory: {path}") from e


def read(path: str) -> Tuple[str, str]:
    """Read `path` and return (content, media_type).

    Raises:
      NotFoundError if the path does not exist;
      NotAFileError for directories and other non-regular entries;
      UnreadableError if the file cannot be read.
    """
    logger.debug("Reading file content: %s", path)

    st = stat_path(path)

    if stat.S_ISDIR(st.st_mode):
        logger.warning("Cannot read content of a directory: %s", path)
        raise NotAFileError(f"Cannot read content of a directory: {path}")

    # FIFOs, sockets and devices would block or never end
    if not stat.S_ISREG(st.st_mode):
        logger.warning("Not a regular file: %s", path)
        raise NotAFileError(f"Not a regular file: {path}")

    if not os.access(path, os.R_OK):
        logger.warning("File is not readable: %s", path)
        raise UnreadableError(f"File is not readable: {path}")

    data = _read_bytes(path)

    if is_text(data[:TEXT_SNIFF_BYTES]):
        logger.debug("File appears to be a text file: %s", path)
        return data.decode("utf-8", errors="replace"), media_type_for(path)

    logger.debug("File contains null bytes, likely binary: %s", path)
    return base64.b64encode(data).decode("ascii"), BINARY_MEDIA_TYPE
