"""
In-memory filesystem for portable-files.

PURPOSE: "memory" deployment target for sandboxes without a host filesystem.
AI CONTEXT: Also the workhorse of the test suite - no temp directories needed.

Simulates a file system using dictionaries:
- _files: dict mapping absolute path -> content (bytes)
- _dirs: set of absolute directory paths
- _mtimes: dict mapping absolute path -> modification timestamp
- _read_only: set of paths where writes raise PermissionError

Paths are normalized to '/'-separated absolute keys. '\\' is accepted as a
separator and relative paths resolve against `cwd`. Writing a file creates
any missing parent directories.
"""

from __future__ import annotations

import io
import logging
import posixpath
import time
from collections.abc import Callable
from typing import IO, Any

from .config import Config

logger = logging.getLogger(__name__)

__all__ = ["MemoryFileSystem"]


class _MemoryBuffer(io.BytesIO):
    """Byte buffer that stores its contents back into the filesystem on close."""

    def __init__(self, fs: MemoryFileSystem, key: str, initial: bytes) -> None:
        super().__init__()
        self._fs = fs
        self._key = key
        self.write(initial)

    def close(self) -> None:
        if self.closed:
            return
        try:
            self._fs._store(self._key, self.getvalue())
        finally:
            super().close()


class MemoryFileSystem:
    """
    In-process file system.

    FEATURES:
    - No actual I/O operations
    - Deterministic timestamps through an injectable clock
    - Easy to inspect state (get_file, list_files, list_dirs)
    - Read-only simulation for exercising write failures
    """

    def __init__(self, cwd: str = "/", clock: Callable[[], float] | None = None) -> None:
        """
        Initialize an empty in-memory file system.

        The root directory always exists, as does `cwd`.

        Args:
            cwd: Working directory for relative paths. Must be absolute.
            clock: Zero-argument callable returning POSIX timestamps.
                Defaults to time.time.

        Example:
            >>> fs = MemoryFileSystem(cwd="/work")
            >>> fs.is_dir("/work")
            True
        """
        self._files: dict[str, bytes] = {}
        self._dirs: set[str] = {"/"}
        self._mtimes: dict[str, float] = {}
        self._read_only: set[str] = set()
        self._clock = clock or time.time
        self._cwd = self._normalize(cwd, "/")
        self.makedirs(self._cwd, exist_ok=True)

    # =========================================================================
    # PATH HANDLING
    # =========================================================================

    @staticmethod
    def _normalize(path: str, cwd: str) -> str:
        for sep in Config.RECOGNIZED_SEPARATORS:
            path = path.replace(sep, "/")
        if not path.startswith("/"):
            path = posixpath.join(cwd, path)
        normalized = posixpath.normpath(path)
        # normpath keeps a leading '//' pair
        return "/" + normalized.lstrip("/")

    def _key(self, path: str) -> str:
        return self._normalize(path, self._cwd)

    def _parent_key(self, key: str) -> str:
        return posixpath.dirname(key) or "/"

    def _store(self, key: str, content: bytes) -> None:
        """Write raw bytes at a normalized key, creating parent directories."""
        if key in self._dirs:
            raise IsADirectoryError(f"Is a directory: {key}")
        if key in self._read_only:
            raise PermissionError(f"Permission denied: {key}")
        self.makedirs(self._parent_key(key), exist_ok=True)
        self._files[key] = content
        self._mtimes[key] = self._clock()

    def _load(self, key: str) -> bytes:
        if key in self._dirs:
            raise IsADirectoryError(f"Is a directory: {key}")
        if key not in self._files:
            raise FileNotFoundError(f"No such file: {key}")
        return self._files[key]

    # =========================================================================
    # FILESYSTEM PROTOCOL
    # =========================================================================

    def exists(self, path: str) -> bool:
        """
        Check if path exists in the memory store.

        An empty string is reported as missing rather than resolving to cwd,
        matching os.path.exists('').

        Args:
            path: Path to check.

        Returns:
            True if path is a stored file or directory.
        """
        if not path:
            return False
        key = self._key(path)
        return key in self._files or key in self._dirs

    def is_file(self, path: str) -> bool:
        return bool(path) and self._key(path) in self._files

    def is_dir(self, path: str) -> bool:
        return bool(path) and self._key(path) in self._dirs

    def getcwd(self) -> str:
        return self._cwd

    def open(self, path: str, mode: str = "r", encoding: str | None = None) -> IO[Any]:
        """
        Open an in-memory file stream.

        Write and append streams buffer their output and store it when
        closed - use them as context managers. A 'w' open truncates the
        file immediately, as the host does.

        Args:
            path: File to open.
            mode: One of 'r', 'rb', 'w', 'wb', 'a', 'ab'.
            encoding: Text codec for text modes (default utf-8).

        Returns:
            BytesIO for binary modes, TextIOWrapper for text modes.

        Raises:
            FileNotFoundError: If reading a missing file.
            IsADirectoryError: If path is a directory.
            PermissionError: If writing a read-only file.
            ValueError: If mode is not supported.

        Example:
            >>> fs = MemoryFileSystem()
            >>> with fs.open("/log.txt", "a") as stream:
            ...     stream.write("line\\n")
            >>> fs.get_file("/log.txt")
            b'line\\n'
        """
        key = self._key(path)
        binary = "b" in mode
        kind = mode.replace("b", "")
        text_encoding = encoding or Config.DEFAULT_ENCODING

        if kind == "r":
            data = self._load(key)
            if binary:
                return io.BytesIO(data)
            return io.StringIO(data.decode(text_encoding), newline="")

        if kind not in ("w", "a"):
            raise ValueError(f"Unsupported mode: {mode!r}")

        if kind == "a" and key in self._files:
            initial = self._load(key)
            self._store(key, initial)
        else:
            initial = b""
            self._store(key, initial)

        buffer = _MemoryBuffer(self, key, initial)
        if binary:
            return buffer
        return io.TextIOWrapper(buffer, encoding=text_encoding, newline="")

    def read_bytes(self, path: str) -> bytes:
        return self._load(self._key(path))

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """
        Read stored file contents as text.

        Raises:
            FileNotFoundError: If path not in the store.
            UnicodeDecodeError: If content is not valid for encoding.
        """
        return self._load(self._key(path)).decode(encoding)

    def write_bytes(self, path: str, content: bytes) -> None:
        self._store(self._key(path), bytes(content))

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """
        Store text as encoded bytes.

        Automatically creates parent directories.

        Raises:
            PermissionError: If path is marked read-only.
            IsADirectoryError: If path is a directory.
        """
        self._store(self._key(path), content.encode(encoding))

    def copy_file(self, src: str, dst: str) -> None:
        """
        Copy a stored file.

        Like shutil.copy2, the destination keeps the source's mtime.

        Raises:
            FileNotFoundError: If source file doesn't exist.
        """
        src_key = self._key(src)
        dst_key = self._key(dst)
        self._store(dst_key, self._load(src_key))
        self._mtimes[dst_key] = self._mtimes[src_key]

    def rename(self, src: str, dst: str) -> None:
        """
        Rename/move a stored file.

        Moves content, mtime and read-only status from source to
        destination. Renaming a file onto itself is a no-op.

        Raises:
            FileNotFoundError: If source doesn't exist.
            IsADirectoryError: If destination is a directory.
        """
        src_key = self._key(src)
        dst_key = self._key(dst)
        content = self._load(src_key)
        if src_key == dst_key:
            return
        if dst_key in self._dirs:
            raise IsADirectoryError(f"Is a directory: {dst_key}")

        self.makedirs(self._parent_key(dst_key), exist_ok=True)
        self._files[dst_key] = content
        self._mtimes[dst_key] = self._mtimes.pop(src_key)
        del self._files[src_key]
        if src_key in self._read_only:
            self._read_only.discard(src_key)
            self._read_only.add(dst_key)

    def remove(self, path: str) -> None:
        """
        Remove a stored file.

        Raises:
            FileNotFoundError: If path is not a stored file.
            IsADirectoryError: If path is a directory.
        """
        key = self._key(path)
        self._load(key)
        del self._files[key]
        self._mtimes.pop(key, None)
        self._read_only.discard(key)

    def size(self, path: str) -> int:
        key = self._key(path)
        if key in self._dirs:
            return 0
        return len(self._load(key))

    def get_mtime(self, path: str) -> float:
        key = self._key(path)
        if key in self._dirs:
            return 0.0
        self._load(key)
        return self._mtimes[key]

    def set_mtime(self, path: str, mtime: float | None = None) -> None:
        key = self._key(path)
        self._load(key)
        self._mtimes[key] = self._clock() if mtime is None else mtime

    # =========================================================================
    # SEEDING AND INSPECTION HELPERS
    # =========================================================================

    def makedirs(self, path: str, exist_ok: bool = False) -> None:
        """
        Create a directory and all parent directories.

        Args:
            path: Directory to create.
            exist_ok: If True, don't raise if directory exists.

        Raises:
            FileExistsError: If directory exists and exist_ok is False.
            NotADirectoryError: If the path or an ancestor is a file.

        Example:
            >>> fs = MemoryFileSystem()
            >>> fs.makedirs('/data/backup', exist_ok=True)
            >>> fs.is_dir('/data')
            True
        """
        key = self._key(path)
        if key in self._dirs:
            if not exist_ok:
                raise FileExistsError(f"Directory exists: {key}")
            return

        current = ""
        for part in key.strip("/").split("/"):
            current = f"{current}/{part}"
            if current in self._files:
                raise NotADirectoryError(f"Path is a file, not directory: {current}")
            self._dirs.add(current)
        logger.debug(f"Created directory {key}")

    def set_file(self, path: str, content: str | bytes, encoding: str = "utf-8") -> None:
        """
        Set file content directly.

        Test helper for setting up initial state. Strings are encoded.

        Example:
            >>> fs = MemoryFileSystem()
            >>> fs.set_file('/data/a.txt', 'hello')
            >>> fs.exists('/data/a.txt')
            True
        """
        if isinstance(content, str):
            content = content.encode(encoding)
        self._store(self._key(path), content)

    def get_file(self, path: str) -> bytes | None:
        """
        Get file content or None if not exists.

        Unlike read_bytes(), never raises.
        """
        return self._files.get(self._key(path))

    def set_read_only(self, path: str, read_only: bool = True) -> None:
        """
        Mark a file as read-only (or writable again).

        Writes, appends and copies onto a read-only file raise
        PermissionError.

        Raises:
            FileNotFoundError: If path is not a stored file.
        """
        key = self._key(path)
        self._load(key)
        if read_only:
            self._read_only.add(key)
        else:
            self._read_only.discard(key)

    def list_files(self) -> list[str]:
        """Sorted list of all file paths."""
        return sorted(self._files)

    def list_dirs(self) -> list[str]:
        """Sorted list of all directory paths, root included."""
        return sorted(self._dirs)

    def clear(self) -> None:
        """
        Clear all files and directories.

        Resets the store to an empty root plus the working directory.
        """
        self._files.clear()
        self._dirs.clear()
        self._dirs.add("/")
        self._mtimes.clear()
        self._read_only.clear()
        self.makedirs(self._cwd, exist_ok=True)
