"""
FileSystem abstraction for portable-files.

PURPOSE: Injectable per-target filesystem primitives.
AI CONTEXT: FileHandle holds validation logic only - every byte that moves
goes through one of these primitives.

DESIGN:
- Protocol defines the primitive interface (one implementation per target)
- RealFileSystem uses actual os/shutil operations ("native" target)
- MemoryFileSystem in memory.py keeps data in-process ("memory" target)
- UnsupportedFileSystem in platforms.py fails every call loudly

All paths are rendered strings. Failures surface as OSError subclasses;
FileHandle wraps them into FileIOError.

USAGE:
    # Production
    handle = FileHandle.of("data.bin", filesystem=RealFileSystem())

    # Tests / sandboxes
    handle = FileHandle.of("/data.bin", filesystem=MemoryFileSystem())
"""

from __future__ import annotations

import os
import shutil
from typing import IO, Any, Protocol

__all__ = ["FileSystem", "RealFileSystem"]


class FileSystem(Protocol):
    """
    Protocol for per-target filesystem primitives.

    Defines the raw operations FileHandle dispatches to. Implementations
    do no validation beyond what the platform itself enforces.

    Business context: Each deployment target (host OS, in-process sandbox)
    exposes a different native filesystem API. This protocol is the single
    seam where those differences live, so FileHandle's rules are written
    once.
    """

    def exists(self, path: str) -> bool:
        """
        Check if path exists (file or directory).

        Args:
            path: Path to check.

        Returns:
            True if the path exists as either a file or directory,
            False otherwise. Never raises.

        Example:
            >>> fs.exists('/data/report.csv')
            True
        """
        ...

    def is_file(self, path: str) -> bool:
        """
        Check if path is a regular file.

        Args:
            path: Path to check.

        Returns:
            True if path exists and is a regular file. Never raises.
        """
        ...

    def is_dir(self, path: str) -> bool:
        """
        Check if path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path exists and is a directory. Never raises.
        """
        ...

    def getcwd(self) -> str:
        """
        Get the directory relative paths resolve against.

        Business context: FileHandle compares locations by their absolute
        form. Each target has its own notion of a working directory.

        Returns:
            Absolute path of the working directory.
        """
        ...

    def open(self, path: str, mode: str = "r", encoding: str | None = None) -> IO[Any]:
        """
        Open a file stream.

        Args:
            path: File to open.
            mode: One of 'r', 'rb', 'w', 'wb', 'a', 'ab'.
            encoding: Text codec for text modes. Ignored for binary modes.

        Returns:
            File object usable as a context manager. The caller closes it.

        Raises:
            FileNotFoundError: If reading a missing file.
            IsADirectoryError: If path is a directory.
            PermissionError: If the file may not be written.
        """
        ...

    def read_bytes(self, path: str) -> bytes:
        """
        Read entire file as bytes.

        Raises:
            FileNotFoundError: If file doesn't exist.
        """
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """
        Read entire file as text.

        Args:
            path: File to read.
            encoding: Text encoding (default utf-8).

        Returns:
            File contents as a string.

        Raises:
            FileNotFoundError: If file doesn't exist.
        """
        ...

    def write_bytes(self, path: str, content: bytes) -> None:
        """
        Replace file contents with bytes, creating the file if absent.

        Raises:
            PermissionError: If file is read-only.
        """
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """
        Replace file contents with text, creating the file if absent.

        Args:
            path: File to write.
            content: String content.
            encoding: Text encoding (default utf-8).

        Raises:
            PermissionError: If file is read-only.
        """
        ...

    def copy_file(self, src: str, dst: str) -> None:
        """
        Copy a file from src to dst.

        Raises:
            FileNotFoundError: If source file doesn't exist.
        """
        ...

    def rename(self, src: str, dst: str) -> None:
        """
        Rename/move a file.

        Raises:
            FileNotFoundError: If source doesn't exist.
        """
        ...

    def remove(self, path: str) -> None:
        """
        Remove a file. Does not work on directories.

        Raises:
            FileNotFoundError: If file doesn't exist.
        """
        ...

    def size(self, path: str) -> int:
        """
        Get file size in bytes.

        Raises:
            FileNotFoundError: If path doesn't exist.
        """
        ...

    def get_mtime(self, path: str) -> float:
        """
        Get modification time as a POSIX timestamp.

        Raises:
            FileNotFoundError: If path doesn't exist.
        """
        ...

    def set_mtime(self, path: str, mtime: float | None = None) -> None:
        """
        Set modification time without touching content.

        Args:
            path: Existing file.
            mtime: POSIX timestamp, or None for the current time.

        Raises:
            FileNotFoundError: If path doesn't exist.
        """
        ...


class RealFileSystem:
    """
    Real file system implementation using os and shutil.

    This is the production implementation that performs actual I/O on
    the host ("native" target). Each method delegates directly to the
    corresponding os, shutil or built-in function.
    """

    def exists(self, path: str) -> bool:
        """
        Check if path exists on the real filesystem.

        Delegates to os.path.exists(). An empty string is reported as
        missing.

        Args:
            path: Path to check.

        Returns:
            True if path exists as file or directory.

        Example:
            >>> fs = RealFileSystem()
            >>> fs.exists('/tmp')
            True
        """
        return os.path.exists(path)

    def is_file(self, path: str) -> bool:
        """Check if path is a regular file on disk via os.path.isfile()."""
        return os.path.isfile(path)

    def is_dir(self, path: str) -> bool:
        """Check if path is a directory on disk via os.path.isdir()."""
        return os.path.isdir(path)

    def getcwd(self) -> str:
        return os.getcwd()

    def open(self, path: str, mode: str = "r", encoding: str | None = None) -> IO[Any]:
        """
        Open a file on disk.

        Binary modes never receive an encoding - the built-in open()
        rejects one. Text modes disable newline translation so '\\r\\n'
        and '\\r' survive a write/read cycle, matching MemoryFileSystem.

        Args:
            path: File to open.
            mode: One of 'r', 'rb', 'w', 'wb', 'a', 'ab'.
            encoding: Text codec for text modes.

        Returns:
            Open file object.

        Raises:
            OSError: Whatever the host raises for the path.
        """
        if "b" in mode:
            return open(path, mode)  # noqa: SIM115
        return open(path, mode, encoding=encoding, newline="")  # noqa: SIM115

    def read_bytes(self, path: str) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Decode the whole file with ``encoding``. Line endings are kept as stored."""
        with open(path, encoding=encoding, newline="") as f:
            return f.read()

    def write_bytes(self, path: str, content: bytes) -> None:
        with open(path, "wb") as f:
            f.write(content)

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """
        Truncate-and-write ``content`` encoded with ``encoding``.

        The parent directory must already exist; nothing is created on
        the way. A missing parent surfaces as FileNotFoundError.
        """
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(content)

    def copy_file(self, src: str, dst: str) -> None:
        """Duplicate src at dst via shutil.copy2, keeping mtime and mode bits."""
        shutil.copy2(src, dst)

    def rename(self, src: str, dst: str) -> None:
        """
        Relocate src to dst with os.rename.

        Atomic within one volume. Across volumes the host raises OSError
        (EXDEV); callers needing a cross-device move copy then remove.
        """
        os.rename(src, dst)

    def remove(self, path: str) -> None:
        # os.remove refuses directories (IsADirectoryError / PermissionError)
        os.remove(path)

    def size(self, path: str) -> int:
        return os.path.getsize(path)

    def get_mtime(self, path: str) -> float:
        return os.path.getmtime(path)

    def set_mtime(self, path: str, mtime: float | None = None) -> None:
        """
        Set the modification time of a file on disk.

        Delegates to os.utime(). The access time is set to the same value.

        Args:
            path: Existing file.
            mtime: POSIX timestamp, or None for now.

        Raises:
            FileNotFoundError: If path doesn't exist.
        """
        if mtime is None:
            os.utime(path, None)
        else:
            os.utime(path, (mtime, mtime))
