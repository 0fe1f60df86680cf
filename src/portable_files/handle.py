"""
File operations for portable-files.

PURPOSE: One consistent API for manipulating a single regular file.
AI CONTEXT: All validation rules live here; all I/O goes through FileSystem.

DESIGN:
- FileHandle is an immutable value wrapping a FilePath plus the FileSystem
  of its deployment target
- Every operation re-validates the path (the filesystem may change between
  calls), dispatches to one or more primitives, and returns
- No file descriptor outlives the call that opened it
- Move/copy/rename return new handles; the receiver is never mutated

ERROR POLICY:
- Precondition violations raise immediately (see errors.py)
- Missing paths are data, not errors, for reads (default) and delete (False)
- OSError from a primitive is wrapped once as FileIOError

OVERWRITE DEFAULTS (intentionally asymmetric):
- write_bytes / write_string: overwrite=True (in-place replacement)
- copy_to / move_to / rename_to: overwrite=False (second location is protected)

USAGE:
    handle = FileHandle.of("notes/today.txt")
    handle.write_string("HEY!")
    backup = handle.copy_to("notes/today.bak")
    handle.read_as_string()          # 'HEY!'
    handle.rename_to("yesterday.txt")
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from .config import Config
from .errors import (
    AlreadyExistsError,
    FileIOError,
    InvalidNameError,
    InvalidPathError,
    NotAFileError,
    PathIsDirectoryError,
    PathNotFoundError,
)
from .paths import EMPTY_PATH, FilePath, PathLike, contains_separator
from .platforms import get_filesystem

if TYPE_CHECKING:
    from .filesystem import FileSystem

logger = logging.getLogger(__name__)

HandleLike = Union[PathLike, "FileHandle"]


@dataclass(frozen=True)
class FileHandle:
    """
    Operation surface bound to one file location.

    Equality and hashing use the path only; two handles on the same path
    are equal even when backed by different FileSystem instances.

    Attributes:
        path: Location of the file. Never None - unset input becomes
            EMPTY_PATH, which every validating operation rejects.
        filesystem: Primitives of the deployment target.
    """

    path: FilePath = EMPTY_PATH
    filesystem: FileSystem = field(default_factory=get_filesystem, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.path, FilePath):
            object.__setattr__(self, "path", FilePath.parse(self.path))

    @classmethod
    def of(
        cls,
        value: HandleLike = None,
        trim_whitespace: bool = False,
        filesystem: FileSystem | None = None,
    ) -> FileHandle:
        """
        Create a handle from a path-like value.

        Construction never fails and never touches the filesystem;
        validity is checked lazily by each operation.

        Args:
            value: String, os.PathLike, FilePath, FileHandle or None.
                None and '' produce a handle on EMPTY_PATH.
            trim_whitespace: Strip whitespace around each path segment
                when parsing a string.
            filesystem: Primitives to use. Defaults to the handle's own
                filesystem when value is a FileHandle, else to the
                configured target (Config.get_target()).

        Returns:
            New FileHandle.

        Example:
            >>> FileHandle.of(None).path is EMPTY_PATH
            True
            >>> str(FileHandle.of(" a / b.txt ", trim_whitespace=True))
            'a/b.txt'
        """
        if isinstance(value, FileHandle):
            return cls(value.path, filesystem or value.filesystem)
        path = FilePath.parse(value, trim_whitespace)
        return cls(path, filesystem or get_filesystem())

    # =========================================================================
    # INTERNAL HELPERS
    # =========================================================================

    @contextmanager
    def _platform_call(self, action: str, path: FilePath | None = None) -> Iterator[None]:
        """Wrap OSError and codec failures raised by a primitive as FileIOError."""
        try:
            yield
        except (OSError, UnicodeError) as e:
            target = (path or self.path).render()
            raise FileIOError(f"Failed to {action}: {e}", target) from e

    def _assert_valid_path(self, must_exist: bool = True) -> None:
        """
        Check the wrapped path before an operation.

        Rules, in order:
        1. The filename must not be empty (InvalidPathError).
        2. An existing entry must be a regular file (NotAFileError).
        3. A missing entry fails only when must_exist (PathNotFoundError).

        Args:
            must_exist: False for operations that may create the file.

        Raises:
            InvalidPathError: Handle was built from empty input or names
                a directory.
            NotAFileError: Path exists but is not a regular file.
            PathNotFoundError: Path is missing and must_exist is True.
        """
        rendered = self.path.render()
        if not self.path.filename:
            raise InvalidPathError(
                "Path has no filename; the handle was created from empty input "
                "or points at a directory",
                rendered,
            )
        if self.filesystem.exists(rendered):
            if not self.filesystem.is_file(rendered):
                raise NotAFileError("Path exists but is not a regular file", rendered)
        elif must_exist:
            raise PathNotFoundError("Path does not exist", rendered)

    def _destination(
        self, destination: HandleLike, trim_whitespace: bool, operation: str
    ) -> FilePath:
        """Parse a copy/move destination, rejecting unset or filename-less values."""
        if isinstance(destination, FileHandle):
            target = destination.path
        else:
            target = FilePath.parse(destination, trim_whitespace)
        if not target.filename:
            raise InvalidPathError(
                f"Cannot {operation} {self}: destination {destination!r} has no filename",
                self.path.render(),
            )
        return target

    def _same_location(self, other: FilePath) -> bool:
        cwd = self.filesystem.getcwd()
        return self.path.to_absolute(cwd).render() == other.to_absolute(cwd).render()

    # =========================================================================
    # QUERIES
    # =========================================================================

    def exists(self) -> bool:
        """True if the path exists as a file or directory. False for EMPTY_PATH."""
        if self.path.is_empty:
            return False
        return self.filesystem.exists(self.path.render())

    def is_file(self) -> bool:
        """True if the path exists and is a regular file."""
        if self.path.is_empty:
            return False
        return self.filesystem.is_file(self.path.render())

    def size(self) -> int:
        """
        Get the file size in bytes.

        Unlike a raw stat, directories are rejected with NotAFileError
        instead of returning a platform-defined size.

        Returns:
            Non-negative byte length.

        Raises:
            InvalidPathError: Handle has no filename.
            NotAFileError: Path is a directory.
            PathNotFoundError: Path does not exist.
            FileIOError: Stat failed.
        """
        self._assert_valid_path()
        with self._platform_call("query size"):
            return self.filesystem.size(self.path.render())

    def modified_time(self) -> float:
        """
        Get the last modification time as a POSIX timestamp.

        Raises:
            InvalidPathError: Handle has no filename.
            NotAFileError: Path is a directory.
            PathNotFoundError: Path does not exist.
            FileIOError: Stat failed.
        """
        self._assert_valid_path()
        with self._platform_call("query modification time"):
            return self.filesystem.get_mtime(self.path.render())

    # =========================================================================
    # READS
    # =========================================================================

    def read_as_bytes(self, default: bytes | None = None) -> bytes | None:
        """
        Read the whole file as bytes.

        A missing file is an expected outcome, not an error.

        Args:
            default: Returned when the file does not exist.

        Returns:
            File contents, or default if the path is missing.

        Raises:
            InvalidPathError: Handle has no filename.
            NotAFileError: Path exists but is not a regular file.
            FileIOError: Read failed.

        Example:
            >>> FileHandle.of("/missing.bin").read_as_bytes(b"")
            b''
        """
        self._assert_valid_path(must_exist=False)
        rendered = self.path.render()
        if not self.filesystem.exists(rendered):
            return default
        with self._platform_call("read bytes"):
            return self.filesystem.read_bytes(rendered)

    def read_as_string(
        self, default: str | None = None, encoding: str | None = None
    ) -> str | None:
        """
        Read the whole file as text.

        Args:
            default: Returned when the file does not exist.
            encoding: Text codec. Defaults to Config.DEFAULT_ENCODING.

        Returns:
            Decoded contents, or default if the path is missing.

        Raises:
            InvalidPathError: Handle has no filename.
            NotAFileError: Path exists but is not a regular file.
            FileIOError: Read failed.
        """
        self._assert_valid_path(must_exist=False)
        rendered = self.path.render()
        if not self.filesystem.exists(rendered):
            return default
        with self._platform_call("read text"):
            return self.filesystem.read_text(rendered, encoding or Config.DEFAULT_ENCODING)

    # =========================================================================
    # WRITES
    # =========================================================================

    def _check_overwrite(self, overwrite: bool) -> None:
        rendered = self.path.render()
        if not overwrite and self.filesystem.exists(rendered):
            raise AlreadyExistsError("File already exists and overwrite=False", rendered)

    def write_bytes(
        self, content: bytes | None, overwrite: bool = Config.DEFAULT_WRITE_OVERWRITE
    ) -> None:
        """
        Replace the file contents with bytes, creating the file if needed.

        Note that overwrite defaults to True here, unlike copy_to/move_to.

        Args:
            content: Bytes to write. None is a silent no-op.
            overwrite: If False, an existing file raises AlreadyExistsError.

        Raises:
            InvalidPathError: Handle has no filename.
            NotAFileError: Path is a directory.
            AlreadyExistsError: File exists and overwrite is False.
            FileIOError: Write failed.
        """
        self._assert_valid_path(must_exist=False)
        if content is None:
            return
        self._check_overwrite(overwrite)
        logger.debug(f"Writing {len(content)} bytes to {self}")
        with self._platform_call("write bytes"):
            self.filesystem.write_bytes(self.path.render(), content)

    def write_string(
        self,
        content: str | None,
        overwrite: bool = Config.DEFAULT_WRITE_OVERWRITE,
        encoding: str | None = None,
    ) -> None:
        """
        Replace the file contents with text, creating the file if needed.

        Note that overwrite defaults to True here, unlike copy_to/move_to.

        Args:
            content: Text to write. None is a silent no-op; '' truncates.
            overwrite: If False, an existing file raises AlreadyExistsError
                and its content is left untouched.
            encoding: Text codec. Defaults to Config.DEFAULT_ENCODING.

        Raises:
            InvalidPathError: Handle has no filename.
            NotAFileError: Path is a directory.
            AlreadyExistsError: File exists and overwrite is False.
            FileIOError: Write failed.

        Example:
            >>> handle = FileHandle.of("/tmp/a.txt")
            >>> handle.write_string("HEY!")
            >>> handle.read_as_string()
            'HEY!'
        """
        self._assert_valid_path(must_exist=False)
        if content is None:
            return
        self._check_overwrite(overwrite)
        logger.debug(f"Writing {len(content)} characters to {self}")
        with self._platform_call("write text"):
            self.filesystem.write_text(
                self.path.render(), content, encoding or Config.DEFAULT_ENCODING
            )

    def append_string(self, content: str | None, encoding: str | None = None) -> None:
        """
        Append text to the file, creating it if needed.

        The stream is closed on every exit path before any failure
        propagates.

        Args:
            content: Text to append. None is a silent no-op.
            encoding: Text codec. Defaults to Config.DEFAULT_ENCODING.

        Raises:
            InvalidPathError: Handle has no filename.
            NotAFileError: Path is a directory.
            FileIOError: Opening or writing the stream failed.
        """
        self._assert_valid_path(must_exist=False)
        if content is None:
            return
        rendered = self.path.render()
        logger.debug(f"Appending {len(content)} characters to {rendered}")
        with self._platform_call("append text"), self.filesystem.open(
            rendered, "a", encoding or Config.DEFAULT_ENCODING
        ) as stream:
            stream.write(content)

    def touch(self) -> None:
        """
        Update the modification time, or create an empty file.

        Existing content is never altered.

        Raises:
            InvalidPathError: Handle has no filename.
            NotAFileError: Path is a directory.
            FileIOError: Platform call failed.
        """
        self._assert_valid_path(must_exist=False)
        rendered = self.path.render()
        if self.filesystem.exists(rendered):
            with self._platform_call("update modification time"):
                self.filesystem.set_mtime(rendered)
        else:
            logger.debug(f"Creating empty file {rendered}")
            with self._platform_call("create empty file"):
                self.filesystem.write_bytes(rendered, b"")

    def delete(self) -> bool:
        """
        Delete the file.

        Returns:
            True if a file was deleted, False if the path did not exist.

        Raises:
            InvalidPathError: Handle has no filename.
            NotAFileError: Path exists but is not a regular file.
            FileIOError: Removal failed.
        """
        self._assert_valid_path(must_exist=False)
        rendered = self.path.render()
        if not self.filesystem.exists(rendered):
            return False
        with self._platform_call("delete file"):
            self.filesystem.remove(rendered)
        logger.debug(f"Deleted {rendered}")
        return True

    # =========================================================================
    # TRANSFERS
    # =========================================================================

    def copy_to(
        self,
        destination: HandleLike,
        overwrite: bool = Config.DEFAULT_TRANSFER_OVERWRITE,
        trim_whitespace: bool = Config.DEFAULT_TRANSFER_TRIM,
    ) -> FileHandle:
        """
        Copy the file to another location.

        Copying onto the file's own absolute location is a no-op that
        returns this handle. Note that overwrite defaults to False here,
        unlike write_bytes/write_string.

        Args:
            destination: Target path-like value. A FileHandle contributes
                its path only; this handle's filesystem does the copy.
            overwrite: Replace an existing destination file.
            trim_whitespace: Strip whitespace around destination segments.

        Returns:
            Handle on the destination (or self for a self-copy).

        Raises:
            InvalidPathError: Source handle or destination has no filename.
            NotAFileError: Source is not a regular file, or an existing
                destination to overwrite is not a regular file.
            PathNotFoundError: Source does not exist.
            AlreadyExistsError: Destination exists and overwrite is False.
            FileIOError: Platform call failed.

        Example:
            >>> a = FileHandle.of("/tmp/a.txt")
            >>> a.write_string("HEY!")
            >>> a.copy_to("/tmp/b.txt").read_as_string()
            'HEY!'
        """
        self._assert_valid_path()
        target = self._destination(destination, trim_whitespace, "copy")
        if self._same_location(target):
            return self

        rendered = target.render()
        if self.filesystem.exists(rendered):
            if not overwrite:
                raise AlreadyExistsError(
                    f"Cannot copy {self}: destination exists and overwrite=False", rendered
                )
            if not self.filesystem.is_file(rendered):
                raise NotAFileError(
                    f"Cannot copy {self}: destination exists and is not a regular file",
                    rendered,
                )
            logger.info(f"Replacing existing file {rendered} with a copy of {self}")
            with self._platform_call("delete existing destination", target):
                self.filesystem.remove(rendered)

        with self._platform_call(f"copy to {rendered}"):
            self.filesystem.copy_file(self.path.render(), rendered)
        logger.debug(f"Copied {self} to {rendered}")
        return FileHandle(target, self.filesystem)

    def move_to(
        self,
        destination: HandleLike,
        overwrite: bool = Config.DEFAULT_TRANSFER_OVERWRITE,
        trim_whitespace: bool = Config.DEFAULT_TRANSFER_TRIM,
    ) -> FileHandle:
        """
        Move the file to another location.

        The self-location check happens only when the destination exists;
        otherwise the rename is performed (the primitive tolerates a
        rename onto the same name). Replacing an existing destination is
        two steps (delete, then rename) and is not atomic.

        Args:
            destination: Target path-like value.
            overwrite: Replace an existing destination file.
            trim_whitespace: Strip whitespace around destination segments.

        Returns:
            Handle on the destination (or self when moving onto itself).

        Raises:
            InvalidPathError: Source handle or destination has no filename.
            NotAFileError: Source is not a regular file.
            PathNotFoundError: Source does not exist.
            AlreadyExistsError: Destination exists and overwrite is False.
            PathIsDirectoryError: Destination is an existing directory.
            FileIOError: Platform call failed.
        """
        self._assert_valid_path()
        target = self._destination(destination, trim_whitespace, "move")

        rendered = target.render()
        if self.filesystem.exists(rendered):
            if self._same_location(target):
                return self
            if not overwrite:
                raise AlreadyExistsError(
                    f"Cannot move {self}: destination exists and overwrite=False", rendered
                )
            if self.filesystem.is_dir(rendered):
                raise PathIsDirectoryError(
                    f"Cannot move {self}: destination is a directory", rendered
                )
            logger.info(f"Replacing existing file {rendered} with {self}")
            with self._platform_call("delete existing destination", target):
                self.filesystem.remove(rendered)

        with self._platform_call(f"move to {rendered}"):
            self.filesystem.rename(self.path.render(), rendered)
        logger.debug(f"Moved {self} to {rendered}")
        return FileHandle(target, self.filesystem)

    def rename_to(
        self, name: str, overwrite: bool = Config.DEFAULT_TRANSFER_OVERWRITE
    ) -> FileHandle:
        """
        Rename the file within its current directory.

        Args:
            name: New bare filename. Separators of every recognized style
                are rejected, whatever the host platform.
            overwrite: Replace an existing file of that name.

        Returns:
            Handle on the renamed file.

        Raises:
            InvalidNameError: name is empty, '.'/'..', or contains a
                separator.
            Any error of move_to.

        Example:
            >>> FileHandle.of("/tmp/a.txt").rename_to("sub/b.txt")
            Traceback (most recent call last):
            ...
            portable_files.errors.InvalidNameError: ...
        """
        if not name:
            raise InvalidNameError(f"Cannot rename {self}: new name is empty", str(self))
        if contains_separator(name):
            raise InvalidNameError(
                f"Cannot rename {self}: new name {name!r} contains a directory separator",
                str(self),
            )
        if name in (".", ".."):
            raise InvalidNameError(
                f"Cannot rename {self}: new name {name!r} is not a filename", str(self)
            )

        parent = self.path.parent()
        target = parent.join(name) if parent is not None else FilePath.parse(name)
        return self.move_to(target, overwrite, trim_whitespace=False)

    # =========================================================================
    # RENDERING
    # =========================================================================

    def __str__(self) -> str:
        return self.path.render()

    def __repr__(self) -> str:
        return f"FileHandle({self.path.render()!r})"


__all__ = ["FileHandle", "HandleLike"]
