"""
portable-files.

PURPOSE: One file-handle API over several filesystem targets.
AI CONTEXT: Import FileHandle from here; everything else is a collaborator.

PACKAGE STRUCTURE:
- handle.py: FileHandle - validation and orchestration of file operations
- paths.py: FilePath - immutable, separator-aware path value
- filesystem.py: FileSystem protocol and RealFileSystem (native target)
- memory.py: MemoryFileSystem (memory target)
- platforms.py: Target registry and selection
- errors.py: Exception taxonomy
- config.py: Configuration constants

QUICK START:
    from portable_files import FileHandle

    notes = FileHandle.of("notes.txt")
    notes.write_string("HEY!")
    notes.copy_to("notes.bak")
    notes.append_string(" again")
    notes.size()   # 10
"""

from portable_files.__version__ import (
    __author__,
    __copyright__,
    __description__,
    __license__,
    __title__,
    __version__,
    __version_date__,
)
from portable_files.config import Config
from portable_files.errors import (
    AlreadyExistsError,
    FileIOError,
    FileOperationError,
    InvalidNameError,
    InvalidPathError,
    NotAFileError,
    PathIsDirectoryError,
    PathNotFoundError,
    UnsupportedOperationError,
)
from portable_files.filesystem import FileSystem, RealFileSystem
from portable_files.handle import FileHandle
from portable_files.memory import MemoryFileSystem
from portable_files.paths import EMPTY_PATH, FilePath
from portable_files.platforms import (
    UnsupportedFileSystem,
    available_targets,
    get_filesystem,
    register_target,
    unregister_target,
)

__all__ = [
    "__version__",
    "__version_date__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",
    "__copyright__",
    "Config",
    "EMPTY_PATH",
    "FileHandle",
    "FilePath",
    "FileSystem",
    "MemoryFileSystem",
    "RealFileSystem",
    "UnsupportedFileSystem",
    "available_targets",
    "get_filesystem",
    "register_target",
    "unregister_target",
    "AlreadyExistsError",
    "FileIOError",
    "FileOperationError",
    "InvalidNameError",
    "InvalidPathError",
    "NotAFileError",
    "PathIsDirectoryError",
    "PathNotFoundError",
    "UnsupportedOperationError",
]
