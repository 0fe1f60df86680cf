"""
Pytest configuration and shared fixtures for portable-files tests.

This module contains:
- FakeClock: Manually advanced timestamp source for deterministic mtimes
- Fixtures for an in-memory filesystem, handle construction and a
  native working directory
- Autouse reset of Config test overrides
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from portable_files.config import Config
from portable_files.handle import FileHandle
from portable_files.memory import MemoryFileSystem


class FakeClock:
    """
    Timestamp source advanced by hand.

    Callable like time.time so it can be injected into MemoryFileSystem.
    """

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def tick(self, seconds: float = 1.0) -> float:
        """Advance the clock and return the new time."""
        self.now += seconds
        return self.now


@pytest.fixture(autouse=True)
def reset_config() -> Iterator[None]:
    """
    Clear Config test overrides after every test.

    Business context: Target selection is class-level state. A test that
    forces the memory target must not leak into the next one.
    """
    yield
    Config.reset_test_overrides()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_fs(clock: FakeClock) -> MemoryFileSystem:
    """
    Create a MemoryFileSystem for testing.

    Provides a fresh in-memory filesystem rooted at '/' with working
    directory '/work' and a fake clock, ensuring test isolation without
    actual disk I/O.

    Returns:
        MemoryFileSystem: A fresh memory filesystem instance.

    Example:
        >>> def test_read(memory_fs):
        ...     memory_fs.set_file('/work/a.txt', 'hello')
    """
    return MemoryFileSystem(cwd="/work", clock=clock)


@pytest.fixture
def make_handle(memory_fs: MemoryFileSystem) -> Callable[..., FileHandle]:
    """Build FileHandles backed by the test's memory filesystem."""

    def _make(value: object = None, trim_whitespace: bool = False) -> FileHandle:
        return FileHandle.of(value, trim_whitespace, filesystem=memory_fs)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def native_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary directory that is also the process working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
