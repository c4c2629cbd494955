from __future__ import annotations


class FileSystemMCPError(Exception):
    """Base error for the filesystem server."""

    kind = "error"


class InvalidAddressError(FileSystemMCPError):
    """Raised when a URI or path argument is malformed."""

    kind = "invalid_address"


class NotFoundError(FileSystemMCPError):
    """Raised when a requested path does not exist."""

    kind = "not_found"


class EntryKindError(FileSystemMCPError):
    """Raised when a path exists but is the wrong kind of entry."""

    kind = "wrong_kind"


class NotAFileError(EntryKindError):
    """Raised when file content is requested for a directory or special file."""


class NotADirectoryPathError(EntryKindError):
    """Raised when a listing is requested for something that is not a directory."""


class UnreadableError(FileSystemMCPError):
    """Raised when permission to read or list a path is denied."""

    kind = "unreadable"
