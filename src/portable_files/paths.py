"""
Path value type for portable-files.

PURPOSE: Immutable, separator-aware location descriptor.
AI CONTEXT: FileHandle never touches raw strings - it works with FilePath.

DESIGN:
- A path is a drive (Windows only, e.g. 'C:'), a rooted flag, a tuple of
  directory segments and a filename
- Both '/' and '\\' separate segments on every host
- '.' and '..' are normalized at parse time
- EMPTY_PATH is the sentinel for unset input (None or '')
- Existence queries are not made here - they go through a FileSystem

USAGE:
    path = FilePath.parse("data/reports/q1.csv")
    path.filename               # 'q1.csv'
    path.parent()               # FilePath for 'data/reports'
    path.join("../q2.csv")      # sibling
    path.render("/")            # 'data/reports/q1.csv'
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Union

from .config import Config

PathLike = Union[str, "os.PathLike[str]", "FilePath", None]

_SEPARATOR_PATTERN = re.compile(
    "[" + "".join(re.escape(sep) for sep in Config.RECOGNIZED_SEPARATORS) + "]+"
)
# A bare 'X:' is a legal filename outside Windows
_DRIVE_PATTERN = re.compile(
    r"^([A-Za-z]:)(?=[/\\]|$)" if os.name == "nt" else r"^([A-Za-z]:)(?=[/\\])"
)
_DIRECTORY_MARKERS = ("", ".", "..")


def contains_separator(name: str) -> bool:
    """
    Check whether a name holds any recognized directory separator.

    Checks against every separator in Config.RECOGNIZED_SEPARATORS, not
    only the host's os.sep, so 'a\\b' is rejected on Linux too.

    Args:
        name: Candidate bare filename.

    Returns:
        True if any separator occurs in name.

    Example:
        >>> contains_separator("report.txt")
        False
        >>> contains_separator("sub\\report.txt")
        True
    """
    return any(sep in name for sep in Config.RECOGNIZED_SEPARATORS)


def _normalize(segments: list[str] | tuple[str, ...], rooted: bool) -> list[str]:
    """Collapse '.', '..' and empty segments."""
    result: list[str] = []
    for segment in segments:
        if segment in ("", "."):
            continue
        if segment == "..":
            if result and result[-1] != "..":
                result.pop()
            elif not rooted:
                result.append(segment)
            # '..' above the root stays at the root
            continue
        result.append(segment)
    return result


@dataclass(frozen=True)
class FilePath:
    """
    Immutable filesystem location.

    Two FilePaths are the same location only when their absolute
    renderings match - compare `a.to_absolute(cwd).render()` rather
    than the values themselves.

    Attributes:
        drive: Windows drive prefix such as 'C:', else ''.
        rooted: True if the path starts at a root separator.
        directories: Directory segments, outermost first.
        filename: Final segment. Empty when unset or when the path
            names a directory (trailing separator, '.' or '..').
    """

    drive: str = ""
    rooted: bool = False
    directories: tuple[str, ...] = ()
    filename: str = ""

    @classmethod
    def parse(cls, value: PathLike, trim_whitespace: bool = False) -> FilePath:
        """
        Build a FilePath from a path-like value.

        Never raises for None or empty input - both yield EMPTY_PATH so
        callers can treat unset paths uniformly.

        A leading 'X:' followed by a separator is a drive on every host.
        A bare 'X:' is a drive only on Windows; elsewhere it is a filename.

        Args:
            value: String, os.PathLike, FilePath (returned unchanged) or None.
            trim_whitespace: Strip whitespace around every segment.

        Returns:
            Parsed, normalized FilePath.

        Example:
            >>> FilePath.parse(" logs / app.log ", trim_whitespace=True).render("/")
            'logs/app.log'
            >>> FilePath.parse(None) is EMPTY_PATH
            True
        """
        if value is None:
            return EMPTY_PATH
        if isinstance(value, FilePath):
            return value

        text = os.fsdecode(os.fspath(value))
        if trim_whitespace:
            text = text.strip()
        if not text:
            return EMPTY_PATH

        drive = ""
        match = _DRIVE_PATTERN.match(text)
        if match:
            drive = match.group(1)
            text = text[len(drive):]

        rooted = bool(text) and text[0] in Config.RECOGNIZED_SEPARATORS
        raw = _SEPARATOR_PATTERN.split(text)
        if trim_whitespace:
            raw = [segment.strip() for segment in raw]

        segments = _normalize(raw, rooted)
        if raw[-1] in _DIRECTORY_MARKERS or not segments:
            return cls(drive, rooted, tuple(segments), "")
        return cls(drive, rooted, tuple(segments[:-1]), segments[-1])

    @property
    def parts(self) -> tuple[str, ...]:
        """Directory segments followed by the filename, if any."""
        if self.filename:
            return (*self.directories, self.filename)
        return self.directories

    @property
    def is_empty(self) -> bool:
        """True only for the unset sentinel."""
        return not (self.drive or self.rooted or self.directories or self.filename)

    @property
    def is_absolute(self) -> bool:
        return self.rooted

    def render(self, separator: str | None = None) -> str:
        """
        Render the path as a string.

        Args:
            separator: Separator to join segments with. Defaults to os.sep
                so rendered paths can be handed straight to the host.

        Returns:
            String form, '' for EMPTY_PATH.
        """
        sep = separator or os.sep
        prefix = self.drive + (sep if self.rooted else "")
        return prefix + sep.join(self.parts)

    def to_absolute(self, cwd: PathLike = None) -> FilePath:
        """
        Resolve a relative path against a working directory.

        Args:
            cwd: Directory to resolve against. Defaults to os.getcwd().

        Returns:
            Rooted FilePath. Absolute inputs are returned unchanged.

        Example:
            >>> FilePath.parse("../b.txt").to_absolute("/srv/app").render("/")
            '/srv/b.txt'
        """
        if self.is_absolute:
            return self
        base = FilePath.parse(cwd if cwd is not None else os.getcwd())
        segments = _normalize((*base.parts, *self.directories), base.rooted)
        return FilePath(self.drive or base.drive, base.rooted, tuple(segments), self.filename)

    def parent(self) -> FilePath | None:
        """
        Get the containing directory.

        Returns:
            Parent FilePath, the bare root for a single rooted segment,
            or None when a relative path has nothing above it.
        """
        parts = self.parts
        if not parts:
            return None
        if len(parts) == 1:
            if self.rooted or self.drive:
                return FilePath(self.drive, self.rooted)
            return None
        return FilePath(self.drive, self.rooted, parts[:-2], parts[-2])

    def join(self, segment: PathLike) -> FilePath:
        """
        Append a relative segment.

        Args:
            segment: Relative path to append. An absolute or drive-qualified
                segment replaces this path entirely.

        Returns:
            Combined, normalized FilePath.
        """
        other = FilePath.parse(segment)
        if other.is_absolute or other.drive or self.is_empty:
            return other
        segments = _normalize((*self.parts, *other.directories), self.rooted)
        return FilePath(self.drive, self.rooted, tuple(segments), other.filename)

    def __str__(self) -> str:
        return self.render()


EMPTY_PATH = FilePath()

__all__ = ["EMPTY_PATH", "FilePath", "PathLike", "contains_separator"]
