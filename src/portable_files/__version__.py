"""Version information for portable-files."""

__version__ = "1.0.0"
__version_date__ = "2026-10-19"

__title__ = "portable_files"
__description__ = "Cross-target file handle API over native and in-memory filesystems"

__author__ = "portable-files contributors"

__license__ = "MIT"
__copyright__ = "Copyright 2026 portable-files contributors"

__all__ = [
    "__version__",
    "__version_date__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",
    "__copyright__",
]
