"""
Deployment target selection for portable-files.

PURPOSE: Map a target name to the FileSystem implementation for it.
AI CONTEXT: The only place that knows which targets exist. FileHandle asks
for a filesystem here and never branches on the platform itself.

TARGETS:
- native: RealFileSystem (host OS)
- memory: MemoryFileSystem (in-process sandbox)
- anything else: UnsupportedFileSystem - every call raises

USAGE:
    fs = get_filesystem()            # Config.get_target()
    fs = get_filesystem("memory")
    register_target("s3", S3FileSystem)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache
from typing import IO, TYPE_CHECKING, Any, NoReturn

from .config import Config
from .errors import UnsupportedOperationError
from .filesystem import RealFileSystem
from .memory import MemoryFileSystem

if TYPE_CHECKING:
    from .filesystem import FileSystem

logger = logging.getLogger(__name__)

FileSystemFactory = Callable[[], "FileSystem"]


@lru_cache(maxsize=1)
def _shared_memory_filesystem() -> MemoryFileSystem:
    """Process-wide memory store so every handle on the target sees the same files."""
    return MemoryFileSystem()


_TARGETS: dict[str, FileSystemFactory] = {
    "native": RealFileSystem,
    "memory": _shared_memory_filesystem,
}


class UnsupportedFileSystem:
    """
    FileSystem for a target that provides no primitives.

    Every primitive raises UnsupportedOperationError naming the operation
    and the target, so an unknown target fails on first use instead of
    silently doing nothing.
    """

    def __init__(self, target: str) -> None:
        self.target = target

    def _unsupported(self, operation: str, path: str | None = None) -> NoReturn:
        raise UnsupportedOperationError(
            f"Operation '{operation}' is not supported on target '{self.target}'",
            path,
        )

    def exists(self, path: str) -> bool:
        self._unsupported("exists", path)

    def is_file(self, path: str) -> bool:
        self._unsupported("is_file", path)

    def is_dir(self, path: str) -> bool:
        self._unsupported("is_dir", path)

    def getcwd(self) -> str:
        self._unsupported("getcwd")

    def open(self, path: str, mode: str = "r", encoding: str | None = None) -> IO[Any]:
        self._unsupported("open", path)

    def read_bytes(self, path: str) -> bytes:
        self._unsupported("read_bytes", path)

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        self._unsupported("read_text", path)

    def write_bytes(self, path: str, content: bytes) -> None:
        self._unsupported("write_bytes", path)

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        self._unsupported("write_text", path)

    def copy_file(self, src: str, dst: str) -> None:
        self._unsupported("copy_file", src)

    def rename(self, src: str, dst: str) -> None:
        self._unsupported("rename", src)

    def remove(self, path: str) -> None:
        self._unsupported("remove", path)

    def size(self, path: str) -> int:
        self._unsupported("size", path)

    def get_mtime(self, path: str) -> float:
        self._unsupported("get_mtime", path)

    def set_mtime(self, path: str, mtime: float | None = None) -> None:
        self._unsupported("set_mtime", path)


def register_target(name: str, factory: FileSystemFactory) -> None:
    """
    Register (or replace) the FileSystem factory for a target.

    Business context: New runtimes plug in their own primitives without
    touching FileHandle.

    Args:
        name: Target name, matched case-insensitively.
        factory: Zero-argument callable returning a FileSystem.

    Raises:
        ValueError: If name is blank.

    Example:
        >>> register_target("sandbox", lambda: MemoryFileSystem(cwd="/sandbox"))
        >>> "sandbox" in available_targets()
        True
    """
    key = name.strip().lower()
    if not key:
        raise ValueError("Target name must not be empty")
    _TARGETS[key] = factory
    logger.debug(f"Registered filesystem target '{key}'")


def unregister_target(name: str) -> None:
    """Remove a registered target. Unknown names are ignored."""
    _TARGETS.pop(name.strip().lower(), None)


def available_targets() -> list[str]:
    """Sorted names of all registered targets."""
    return sorted(_TARGETS)


def get_filesystem(target: str | None = None) -> FileSystem:
    """
    Get a FileSystem for a deployment target.

    Args:
        target: Target name. Defaults to Config.get_target().

    Returns:
        The FileSystem built by the target's factory, or an
        UnsupportedFileSystem when the target is unknown. The memory
        target hands out one shared store per process.

    Example:
        >>> type(get_filesystem("native")).__name__
        'RealFileSystem'
        >>> type(get_filesystem("toaster")).__name__
        'UnsupportedFileSystem'
    """
    name = (target or Config.get_target()).strip().lower()
    factory = _TARGETS.get(name)
    if factory is None:
        logger.warning(
            f"No filesystem registered for target '{name}'; "
            f"available: {', '.join(available_targets())}"
        )
        return UnsupportedFileSystem(name)
    return factory()


__all__ = [
    "FileSystemFactory",
    "UnsupportedFileSystem",
    "available_targets",
    "get_filesystem",
    "register_target",
    "unregister_target",
]
