"""Tests for errors module."""

from __future__ import annotations

import pytest

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


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "error_type",
        [
            AlreadyExistsError,
            FileIOError,
            InvalidNameError,
            InvalidPathError,
            NotAFileError,
            PathIsDirectoryError,
            PathNotFoundError,
            UnsupportedOperationError,
        ],
    )
    def test_all_derive_from_base(self, error_type: type[FileOperationError]) -> None:
        assert issubclass(error_type, FileOperationError)

    def test_unsupported_is_not_implemented(self) -> None:
        assert issubclass(UnsupportedOperationError, NotImplementedError)

    def test_library_errors_are_not_os_errors(self) -> None:
        assert not issubclass(FileOperationError, OSError)


class TestErrorMessages:
    def test_message_embeds_path(self) -> None:
        """Verifies messages carry the offending path and rule.

        Business context:
        Errors must be actionable from a log line alone.

        Arrangement:
        None.

        Action:
        Build an error with a message and path.

        Assertion Strategy:
        Validates both parts appear and path is kept as attribute.

        Testing Principle:
        Validates diagnosability.
        """
        error = PathNotFoundError("Path does not exist", "/data/a.txt")
        assert error.path == "/data/a.txt"
        assert str(error) == "Path does not exist [path: '/data/a.txt']"

    def test_message_without_path(self) -> None:
        error = FileOperationError("boom")
        assert error.path is None
        assert str(error) == "boom"

    def test_empty_path_still_shown(self) -> None:
        assert "[path: '']" in str(InvalidPathError("no filename", ""))
