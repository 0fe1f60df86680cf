"""
Exception taxonomy for portable-files.

Every failure raised by FileHandle derives from FileOperationError and
carries the offending path plus the rule that was violated, so messages
are actionable without a debugger.

HIERARCHY:
    FileOperationError
    ├── InvalidPathError          # empty/unset path or destination
    ├── InvalidNameError          # bad rename target
    ├── NotAFileError             # exists, but not a regular file
    ├── PathIsDirectoryError      # move destination is a directory
    ├── PathNotFoundError         # required path is missing
    ├── AlreadyExistsError        # destination exists, overwrite disallowed
    ├── FileIOError               # platform primitive failed
    └── UnsupportedOperationError # target lacks the primitive
"""

from __future__ import annotations


class FileOperationError(Exception):
    """
    Base error for all file operation failures.

    Attributes:
        path: Rendered path the failure refers to, or None when the
            failure is not tied to a path.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message} [path: {path!r}]"
        super().__init__(message)


class InvalidPathError(FileOperationError):
    """Path or destination is unset or has no filename."""


class InvalidNameError(FileOperationError):
    """New filename is empty or contains a directory separator."""


class NotAFileError(FileOperationError):
    """Path exists but is not a regular file."""


class PathIsDirectoryError(FileOperationError):
    """Destination of a move is an existing directory."""


class PathNotFoundError(FileOperationError):
    """Path is required to exist but does not."""


class AlreadyExistsError(FileOperationError):
    """Destination exists and overwriting was not allowed."""


class FileIOError(FileOperationError):
    """Underlying platform call failed. The OSError is chained as __cause__."""


class UnsupportedOperationError(FileOperationError, NotImplementedError):
    """Deployment target does not provide the requested primitive."""


__all__ = [
    "FileOperationError",
    "InvalidPathError",
    "InvalidNameError",
    "NotAFileError",
    "PathIsDirectoryError",
    "PathNotFoundError",
    "AlreadyExistsError",
    "FileIOError",
    "UnsupportedOperationError",
]
